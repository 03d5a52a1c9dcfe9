# topmark:header:start
#
#   project      : StrapiTypes
#   file         : test_naming.py
#   file_relpath : tests/typegen/test_naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for interface name derivation."""

from __future__ import annotations

from pathlib import Path

import pytest

from strapi_types.schema.model import ComponentRef, SchemaDescriptor
from strapi_types.typegen.naming import (
    capitalize_first,
    component_interface_name,
    derive_interface_name,
    to_interface_name,
)


@pytest.mark.parametrize(
    "value, expected",
    [("blog", "Blog"), ("bLOG", "BLOG"), ("", ""), ("1st", "1st")],
)
def test_capitalize_first(value: str, expected: str) -> None:
    """Only the first character changes."""
    assert capitalize_first(value) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("article", "Article"),
        ("blog-post", "BlogPost"),
        ("layout.hero-banner", "LayoutHeroBanner"),
        ("seo.metaSocial", "SeoMetaSocial"),
    ],
)
def test_to_interface_name(name: str, expected: str) -> None:
    """Segments delimited by ``.`` and ``-`` are capitalized and concatenated."""
    assert to_interface_name(name) == expected


def test_component_name_matches_reference_name() -> None:
    """The name derived from a component file equals the one derived from its UID."""
    ref = ComponentRef(category="layout", name="hero-banner")
    assert component_interface_name(ref) == "LayoutHeroBanner"
    assert component_interface_name(ref) == to_interface_name(ref.uid)


def test_derive_prefers_singular_name() -> None:
    """Content types are named after their singular name."""
    schema = SchemaDescriptor(
        path=Path("schema.json"),
        singular_name="blog-post",
        component=ComponentRef("layout", "hero"),
    )
    assert derive_interface_name(schema) == "BlogPost"


def test_derive_component_name() -> None:
    """Components are named after category and name."""
    schema = SchemaDescriptor(path=Path("hero.json"), component=ComponentRef("layout", "hero"))
    assert derive_interface_name(schema) == "LayoutHero"


def test_derive_without_metadata() -> None:
    """Schemas with neither singular name nor component reference have no name."""
    assert derive_interface_name(SchemaDescriptor(path=Path("x.json"))) is None


def test_kebab_case_category_is_title_cased_per_segment() -> None:
    """``components/my-cat/hero.json`` is named like a ``my-cat.hero`` reference."""
    ref = ComponentRef(category="my-cat", name="hero")
    assert component_interface_name(ref) == "MyCatHero"
    assert to_interface_name("my-cat.hero") == "MyCatHero"
