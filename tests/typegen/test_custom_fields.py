# topmark:header:start
#
#   project      : StrapiTypes
#   file         : test_custom_fields.py
#   file_relpath : tests/typegen/test_custom_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the custom field extension registry.

Covers lookup precedence (registration, entry points, extension modules),
per-identifier caching, and load failures.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest

import strapi_types.typegen.custom_fields as custom_fields_mod
from strapi_types.typegen.custom_fields import (
    CustomFieldRegistry,
    resolve_extension_directory,
    strip_plugin_prefix,
)

COLOR_EXTENSION = '''\
def custom_field_type(options):
    return "`#${string}`" if options.get("format") == "hex" else "string"
'''


def write_extension(directory: Path, identifier: str, source: str) -> Path:
    """Write an extension module for ``identifier`` into ``directory``."""
    directory.mkdir(parents=True, exist_ok=True)
    path: Path = directory / f"{identifier}.py"
    path.write_text(source, encoding="utf-8")
    return path


@pytest.mark.parametrize(
    "identifier, expected",
    [
        ("plugin::color-picker.color", "color-picker.color"),
        ("color-picker.color", "color-picker.color"),
        ("global::plugin::x", "global::plugin::x"),
    ],
)
def test_strip_plugin_prefix(identifier: str, expected: str) -> None:
    """Only a leading ``plugin::`` namespace is stripped."""
    assert strip_plugin_prefix(identifier) == expected


def test_relative_extension_directory_resolves_against_cwd(isolation: Path) -> None:
    """Relative extension directories resolve against the working directory."""
    assert resolve_extension_directory("custom-field") == (isolation / "custom-field").resolve()


def test_absolute_extension_directory_is_kept(tmp_path: Path) -> None:
    """Absolute extension directories are used as is."""
    assert resolve_extension_directory(tmp_path / "ext") == (tmp_path / "ext").resolve()


def test_extension_path(tmp_path: Path) -> None:
    """Extension modules are named after the stripped identifier."""
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)
    expected: Path = tmp_path.resolve() / "color-picker.color.py"
    assert registry.extension_path("plugin::color-picker.color") == expected


def test_resolve_from_extension_module(tmp_path: Path) -> None:
    """An extension module's ``custom_field_type`` is loaded and callable."""
    write_extension(tmp_path, "color-picker.color", COLOR_EXTENSION)
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)

    func = registry.resolve("plugin::color-picker.color")

    assert func is not None
    assert func({"format": "hex"}) == "`#${string}`"
    assert func({}) == "string"


def test_resolution_is_cached(tmp_path: Path) -> None:
    """Repeated resolution returns the same callable without reloading the module."""
    path: Path = write_extension(tmp_path, "a.b", COLOR_EXTENSION)
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)

    first = registry.resolve("a.b")
    path.unlink()
    second = registry.resolve("plugin::a.b")

    assert first is not None
    assert second is first


def test_misses_are_cached(tmp_path: Path) -> None:
    """A miss stays a miss for the lifetime of the registry."""
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)
    assert registry.resolve("a.b") is None
    write_extension(tmp_path, "a.b", COLOR_EXTENSION)
    assert registry.resolve("a.b") is None


def test_missing_module(tmp_path: Path) -> None:
    """No module, no extension."""
    registry = CustomFieldRegistry(tmp_path / "missing", use_entry_points=False)
    assert registry.resolve("a.b") is None


def test_module_with_import_error(tmp_path: Path, caplog: pytest.LogCaptureFixture) -> None:
    """A module failing at import time counts as a miss and is logged."""
    caplog.set_level("ERROR")
    write_extension(tmp_path, "a.b", "raise RuntimeError('boom')\n")
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)
    assert registry.resolve("a.b") is None
    assert "Failed to import custom field extension module" in caplog.text


def test_module_without_function(tmp_path: Path) -> None:
    """A module without ``custom_field_type`` counts as a miss."""
    write_extension(tmp_path, "a.b", "def other(options):\n    return 'string'\n")
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)
    assert registry.resolve("a.b") is None


def test_registration_takes_precedence(tmp_path: Path) -> None:
    """Programmatic registrations win over extension modules."""
    write_extension(tmp_path, "a.b", COLOR_EXTENSION)
    registry = CustomFieldRegistry(tmp_path, use_entry_points=False)
    assert registry.resolve("a.b") is not None

    registry.register("plugin::a.b", lambda options: "number")

    func = registry.resolve("a.b")
    assert func is not None
    assert func(None) == "number"


@dataclass
class FakeEntryPoint:
    """Minimal stand-in for `importlib.metadata.EntryPoint`."""

    name: str
    value: str
    provided: Any

    def load(self) -> Any:
        """Return the provided object."""
        return self.provided


class FakeEntryPoints:
    """Minimal stand-in for the object returned by `importlib.metadata.entry_points()`."""

    def __init__(self, *eps: FakeEntryPoint) -> None:
        self._eps: tuple[FakeEntryPoint, ...] = eps
        self.selected: list[dict[str, str]] = []

    def select(self, **params: str) -> list[FakeEntryPoint]:
        """Filter entry points by group and name."""
        self.selected.append(params)
        return [ep for ep in self._eps if ep.name == params.get("name")]


def test_resolve_from_entry_point(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Installed entry points named after the identifier provide extensions."""
    fake = FakeEntryPoints(
        FakeEntryPoint("color-picker.color", "pkg.types:color", lambda options: "string")
    )
    monkeypatch.setattr(custom_fields_mod, "entry_points", lambda: fake)
    write_extension(tmp_path, "color-picker.color", "raise RuntimeError('not used')\n")

    registry = CustomFieldRegistry(tmp_path)
    func = registry.resolve("plugin::color-picker.color")

    assert func is not None
    assert func({}) == "string"
    assert fake.selected == [{"group": "strapi_types.custom_fields", "name": "color-picker.color"}]


def test_non_callable_entry_point_falls_back_to_module(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """A non-callable entry point is ignored and the extension module is tried next."""
    fake = FakeEntryPoints(FakeEntryPoint("a.b", "pkg:VALUE", "not callable"))
    monkeypatch.setattr(custom_fields_mod, "entry_points", lambda: fake)
    write_extension(tmp_path, "a.b", COLOR_EXTENSION)

    func = CustomFieldRegistry(tmp_path).resolve("a.b")

    assert func is not None
    assert func({}) == "string"
