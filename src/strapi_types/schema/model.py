# topmark:header:start
#
#   project      : StrapiTypes
#   file         : model.py
#   file_relpath : src/strapi_types/schema/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable descriptors for Strapi schemas.

This module defines the data shapes produced by the schema loader and
consumed by the type mapper and the interface assembler:

    - `AttributeKind`: the closed set of Strapi attribute types, plus an
      explicit `AttributeKind.UNKNOWN` case for anything else.
    - `AttributeDescriptor`: one attribute (field) of a schema.
    - `ComponentRef`: the ``category``/``name`` pair of a component schema.
    - `SchemaOptions`: per-schema options (draft and publish).
    - `SchemaDescriptor`: one content type or component schema.

Descriptors are built with the ``from_dict()`` constructors, which only check
what is needed to classify attribute kinds. Malformed values degrade to empty
defaults rather than failing, except when the document shape itself is wrong
(see [`strapi_types.core.errors.SchemaParseError`][]).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from strapi_types.core.errors import SchemaParseError

if TYPE_CHECKING:
    from collections.abc import Mapping
    from pathlib import Path


class AttributeKind(str, Enum):
    """Strapi attribute types understood by the type mapper.

    The enum value is the ``type`` string used in Strapi schema files.
    `AttributeKind.UNKNOWN` stands for any type string not listed here.
    """

    INTEGER = "integer"
    DECIMAL = "decimal"
    BIGINTEGER = "biginteger"
    FLOAT = "float"
    STRING = "string"
    TEXT = "text"
    EMAIL = "email"
    RICHTEXT = "richtext"
    PASSWORD = "password"
    UID = "uid"
    DATE = "date"
    TIME = "time"
    DATETIME = "datetime"
    BOOLEAN = "boolean"
    ENUMERATION = "enumeration"
    RELATION = "relation"
    MEDIA = "media"
    COMPONENT = "component"
    JSON = "json"
    DYNAMICZONE = "dynamiczone"
    CUSTOM_FIELD = "customField"
    UNKNOWN = "unknown"

    @classmethod
    def parse(cls, value: object) -> AttributeKind:
        """Return the kind for a schema ``type`` value, or `UNKNOWN` if not recognized."""
        if not isinstance(value, str) or value == cls.UNKNOWN.value:
            return cls.UNKNOWN
        try:
            return cls(value)
        except ValueError:
            return cls.UNKNOWN


# Relation cardinalities that accept several related entries:
MANY_RELATIONS: frozenset[str] = frozenset({"oneToMany", "manyToMany"})


def _str_tuple(value: object) -> tuple[str, ...]:
    """Coerce a JSON list of strings into a tuple (anything else yields an empty tuple)."""
    if not isinstance(value, list):
        return ()
    return tuple(str(v) for v in value)


def _str_or_none(value: object) -> str | None:
    return value if isinstance(value, str) and value else None


@dataclass(frozen=True, slots=True)
class AttributeDescriptor:
    """One attribute (field) entry of a Strapi schema.

    Only the fields relevant to `kind` carry meaningful values; the others keep
    their defaults.

    Attributes:
        kind (AttributeKind): Classified attribute kind.
        type_name (str): The raw ``type`` string as found in the schema (used in diagnostics).
        required (bool): Whether the attribute must be provided.
        enum_values (tuple[str, ...]): Values of an ``enumeration``, in declared order.
        relation (str | None): Cardinality of a ``relation`` (e.g. ``"manyToOne"``).
        multiple (bool): Whether a ``media`` attribute holds several files.
        component (str | None): Component UID (``"category.name"``) of a ``component``.
        repeatable (bool): Whether a ``component`` attribute is a list.
        components (tuple[str, ...]): Allowed component UIDs of a ``dynamiczone``.
        custom_field (str | None): Plugin-qualified identifier of a ``customField``.
        options (Any): Opaque ``options`` value passed to custom field extensions.
    """

    kind: AttributeKind
    type_name: str
    required: bool = False
    enum_values: tuple[str, ...] = ()
    relation: str | None = None
    multiple: bool = False
    component: str | None = None
    repeatable: bool = False
    components: tuple[str, ...] = ()
    custom_field: str | None = None
    options: Any = None

    @property
    def is_many_relation(self) -> bool:
        """Return True if this is a relation accepting several related entries."""
        return self.kind is AttributeKind.RELATION and self.relation in MANY_RELATIONS

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> AttributeDescriptor:
        """Build a descriptor from the JSON object of one schema attribute.

        Args:
            raw: The attribute object, e.g. ``{"type": "string", "required": true}``.

        Returns:
            The attribute descriptor.
        """
        raw_type: object = raw.get("type")
        return cls(
            kind=AttributeKind.parse(raw_type),
            type_name=raw_type if isinstance(raw_type, str) else repr(raw_type),
            required=raw.get("required") is True,
            enum_values=_str_tuple(raw.get("enum")),
            relation=_str_or_none(raw.get("relation")),
            multiple=raw.get("multiple") is True,
            component=_str_or_none(raw.get("component")),
            repeatable=raw.get("repeatable") is True,
            components=_str_tuple(raw.get("components")),
            custom_field=_str_or_none(raw.get("customField")),
            options=raw.get("options"),
        )


@dataclass(frozen=True, slots=True)
class ComponentRef:
    """Category and name of a component schema, derived from its file path.

    A component stored as ``src/components/layout/hero-banner.json`` has
    category ``"layout"`` and name ``"hero-banner"``; its UID as referenced by
    other schemas is ``"layout.hero-banner"``.
    """

    category: str
    name: str

    @property
    def uid(self) -> str:
        """Return the component UID (``"category.name"``)."""
        return f"{self.category}.{self.name}"


@dataclass(frozen=True, slots=True)
class SchemaOptions:
    """Per-schema options.

    Attributes:
        draft_and_publish (bool): Whether entries support a draft/publish lifecycle.
    """

    draft_and_publish: bool = False

    @classmethod
    def from_dict(cls, raw: object) -> SchemaOptions:
        """Build options from the schema's ``options`` object (defaults when malformed)."""
        if not isinstance(raw, dict):
            return cls()
        return cls(draft_and_publish=bool(raw.get("draftAndPublish")))


@dataclass(frozen=True, slots=True)
class SchemaDescriptor:
    """One Strapi content type or component schema.

    Attributes:
        path (Path): The schema file this descriptor was parsed from.
        singular_name (str | None): ``info.singularName`` (present for content types).
        component (ComponentRef | None): Category/name for component schemas.
        attributes (Mapping[str, AttributeDescriptor]): Attributes in declaration order
            (read-only mapping).
        options (SchemaOptions): Per-schema options.
    """

    path: Path
    singular_name: str | None = None
    component: ComponentRef | None = None
    attributes: Mapping[str, AttributeDescriptor] = field(
        default_factory=lambda: MappingProxyType({})
    )
    options: SchemaOptions = field(default_factory=SchemaOptions)

    @classmethod
    def from_dict(
        cls,
        raw: object,
        *,
        path: Path,
        component: ComponentRef | None = None,
    ) -> SchemaDescriptor:
        """Build a schema descriptor from a parsed schema document.

        Args:
            raw: The parsed JSON document.
            path: The file the document was read from.
            component: Category/name when the file lives in the components tree.

        Returns:
            The schema descriptor.

        Raises:
            SchemaParseError: If the document, its ``attributes`` or one of the
                attribute entries is not a JSON object.
        """
        if not isinstance(raw, dict):
            raise SchemaParseError(path, "the document is not a JSON object")

        info: object = raw.get("info")
        singular_name: str | None = (
            _str_or_none(info.get("singularName")) if isinstance(info, dict) else None
        )

        raw_attributes: object = raw.get("attributes", {})
        if not isinstance(raw_attributes, dict):
            raise SchemaParseError(path, "'attributes' is not a JSON object")

        attributes: dict[str, AttributeDescriptor] = {}
        for name, raw_attribute in raw_attributes.items():
            if not isinstance(raw_attribute, dict):
                raise SchemaParseError(path, f"attribute '{name}' is not a JSON object")
            attributes[name] = AttributeDescriptor.from_dict(raw_attribute)

        return cls(
            path=path,
            singular_name=singular_name,
            component=component,
            attributes=MappingProxyType(attributes),
            options=SchemaOptions.from_dict(raw.get("options")),
        )
