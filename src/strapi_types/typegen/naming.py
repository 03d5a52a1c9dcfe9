# topmark:header:start
#
#   project      : StrapiTypes
#   file         : naming.py
#   file_relpath : src/strapi_types/typegen/naming.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Interface name derivation.

Strapi identifies schemas by kebab-case, dot-separated names (``blog-post``,
``layout.hero-banner``). TypeScript interface names are derived from them by
capitalizing the first letter of each ``.``/``-`` delimited segment and
concatenating the segments (``BlogPost``, ``LayoutHeroBanner``). The rest of
each segment is kept as is.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from strapi_types.schema.model import ComponentRef, SchemaDescriptor

_SEGMENT_SEPARATORS: Final[re.Pattern[str]] = re.compile(r"[.-]")


def capitalize_first(value: str) -> str:
    """Upper-case the first character of ``value``, leaving the rest untouched."""
    return value[:1].upper() + value[1:]


def to_interface_name(name: str) -> str:
    """Convert a Strapi name or component UID to an interface name.

    Examples:
        ``"blog-post"`` becomes ``"BlogPost"``; ``"layout.hero-banner"``
        becomes ``"LayoutHeroBanner"``.
    """
    return "".join(capitalize_first(segment) for segment in _SEGMENT_SEPARATORS.split(name))


def component_interface_name(component: ComponentRef) -> str:
    """Return the interface name of a component schema (``{Category}{Name}``).

    The category goes through the same segment capitalization as the name, so
    that the derived name always equals the one produced for references to the
    component UID.
    """
    return to_interface_name(component.category) + to_interface_name(component.name)


def derive_interface_name(schema: SchemaDescriptor) -> str | None:
    """Return the interface name for a schema, or None if none can be derived.

    Content types are named after ``info.singularName``; components after their
    category and name. A schema with neither is malformed.
    """
    if schema.singular_name:
        return to_interface_name(schema.singular_name)
    if schema.component is not None:
        return component_interface_name(schema.component)
    return None
