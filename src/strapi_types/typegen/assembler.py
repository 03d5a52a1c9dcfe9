# topmark:header:start
#
#   project      : StrapiTypes
#   file         : assembler.py
#   file_relpath : src/strapi_types/typegen/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assemble schemas into TypeScript interface declarations.

Each schema becomes an [`InterfaceSpec`][strapi_types.typegen.assembler.InterfaceSpec]:
a name derived from the schema metadata, the marker interfaces it extends,
and one property per attribute in declaration order. The final output lists
the referenced marker interfaces first (each once), then the named interfaces
sorted by name; every declaration is followed by a blank line.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from strapi_types.config.logging import get_logger
from strapi_types.typegen.mapper import map_type
from strapi_types.typegen.naming import derive_interface_name

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from strapi_types.config.logging import StrapiTypesLogger
    from strapi_types.core.diagnostics import DiagnosticLog
    from strapi_types.schema.model import SchemaDescriptor
    from strapi_types.typegen.custom_fields import CustomFieldResolver

logger: StrapiTypesLogger = get_logger(__name__)

INDENT: Final[str] = "  "

_IDENTIFIER: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_$][A-Za-z0-9_$]*")


class ParentInterface(str, Enum):
    """Built-in marker interfaces that generated interfaces may extend."""

    DRAFT_AND_PUBLISH = "DraftAndPublish"

    @property
    def declaration(self) -> str:
        """Return the TypeScript declaration of this marker interface."""
        return PARENT_INTERFACE_DECLARATIONS[self]


PARENT_INTERFACE_DECLARATIONS: Final[dict[ParentInterface, str]] = {
    ParentInterface.DRAFT_AND_PUBLISH: """\
interface DraftAndPublish {
  /**
   * If set to a date, content will be published, at creation, with the corresponding publication date.
   * If not set (undefined), content will be published, at creation, with the date corresponding to the content creation date.
   * If set to null, content will be created in Draft.
   **/
  publishedAt?: Date | null;
}""",
}


def render_property_name(name: str) -> str:
    """Return ``name`` as a TypeScript property key, quoting it when it is not an identifier."""
    if _IDENTIFIER.fullmatch(name):
        return name
    return json.dumps(name)


@dataclass(frozen=True, slots=True)
class PropertySpec:
    """One property of a generated interface."""

    name: str
    required: bool
    type_expression: str

    def render(self) -> str:
        """Return the property line (``name?: type;``, ``?`` only when optional)."""
        marker: str = "" if self.required else "?"
        return f"{INDENT}{render_property_name(self.name)}{marker}: {self.type_expression};"


@dataclass(frozen=True, slots=True)
class InterfaceSpec:
    """A generated interface, before rendering.

    Attributes:
        name (str | None): Interface name; None when no name could be derived
            (the interface is not emitted).
        parent_interfaces (tuple[ParentInterface, ...]): Marker interfaces extended.
        properties (tuple[PropertySpec, ...]): Properties in attribute declaration order.
        source (Path | None): The schema file this interface was built from.
    """

    name: str | None
    parent_interfaces: tuple[ParentInterface, ...] = ()
    properties: tuple[PropertySpec, ...] = ()
    source: Path | None = None

    def render(self) -> str:
        """Return the ``export interface`` declaration (without trailing blank line)."""
        extends: str = ""
        if self.parent_interfaces:
            extends = " extends " + ", ".join(p.value for p in self.parent_interfaces)
        lines: list[str] = [f"export interface {self.name}{extends} {{"]
        lines.extend(p.render() for p in self.properties)
        lines.append("}")
        return "\n".join(lines)


def build_interface_spec(
    schema: SchemaDescriptor,
    *,
    custom_fields: CustomFieldResolver | None = None,
    diagnostics: DiagnosticLog | None = None,
) -> InterfaceSpec:
    """Build the interface spec of one schema.

    A schema without a derivable name yields a spec with ``name=None`` and an
    error diagnostic; its attributes are not mapped.

    Args:
        schema: The schema to convert.
        custom_fields: Resolver for custom field extensions.
        diagnostics: Collector for diagnostics.

    Returns:
        The interface spec.
    """
    name: str | None = derive_interface_name(schema)
    if name is None:
        message = "Unexpected schema: no info.singularName and not a component"
        if diagnostics is None:
            logger.error("%s (%s)", message, schema.path)
        else:
            diagnostics.add_error(message, source=schema.path)
        return InterfaceSpec(name=None, source=schema.path)

    properties: tuple[PropertySpec, ...] = tuple(
        PropertySpec(
            name=attribute_name,
            required=attribute.required,
            type_expression=map_type(
                attribute,
                custom_fields=custom_fields,
                diagnostics=diagnostics,
                source=schema.path,
            ),
        )
        for attribute_name, attribute in schema.attributes.items()
    )

    parents: list[ParentInterface] = []
    if schema.options.draft_and_publish:
        parents.append(ParentInterface.DRAFT_AND_PUBLISH)

    return InterfaceSpec(
        name=name,
        parent_interfaces=tuple(parents),
        properties=properties,
        source=schema.path,
    )


def select_interfaces(
    specs: Iterable[InterfaceSpec],
    diagnostics: DiagnosticLog | None = None,
) -> list[InterfaceSpec]:
    """Return the named interfaces to emit, sorted by name.

    Unnamed specs are dropped. When several specs share a name the first one
    wins and the others are reported as warnings.

    Args:
        specs: Interface specs in discovery order.
        diagnostics: Collector for duplicate-name warnings.

    Returns:
        The interfaces to emit, sorted by name.
    """
    by_name: dict[str, InterfaceSpec] = {}
    for spec in specs:
        if spec.name is None:
            continue
        kept: InterfaceSpec | None = by_name.get(spec.name)
        if kept is None:
            by_name[spec.name] = spec
            continue
        message = f"Duplicate interface name {spec.name} (keeping the one from {kept.source})"
        if diagnostics is None:
            logger.warning("%s: %s", spec.source, message)
        else:
            diagnostics.add_warning(message, source=spec.source)
    return [by_name[name] for name in sorted(by_name)]


def collect_parent_interfaces(specs: Iterable[InterfaceSpec]) -> list[ParentInterface]:
    """Return the marker interfaces referenced by ``specs``, each once, in first-seen order."""
    seen: dict[ParentInterface, None] = {}
    for spec in specs:
        for parent in spec.parent_interfaces:
            seen.setdefault(parent, None)
    return list(seen)


def render_interfaces(
    specs: Iterable[InterfaceSpec],
    diagnostics: DiagnosticLog | None = None,
) -> str:
    """Render the complete TypeScript output for a set of interface specs.

    Args:
        specs: Interface specs in discovery order.
        diagnostics: Collector for duplicate-name warnings.

    Returns:
        Marker interface declarations followed by the sorted interfaces, each
        declaration followed by a blank line.
    """
    interfaces: list[InterfaceSpec] = select_interfaces(specs, diagnostics)
    blocks: list[str] = [p.declaration for p in collect_parent_interfaces(interfaces)]
    blocks.extend(spec.render() for spec in interfaces)
    logger.debug(
        "Rendering %d interface(s) and %d marker interface(s)",
        len(interfaces),
        len(blocks) - len(interfaces),
    )
    return "".join(f"{block}\n\n" for block in blocks)
