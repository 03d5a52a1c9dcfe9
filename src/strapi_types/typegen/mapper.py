# topmark:header:start
#
#   project      : StrapiTypes
#   file         : mapper.py
#   file_relpath : src/strapi_types/typegen/mapper.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Map Strapi schema attributes to TypeScript type expressions.

The generated types describe the payloads accepted by the Strapi REST API
when creating or updating entries, so some attribute kinds map to several
accepted shapes:

    - relations accept a list of ids, a ``set`` form replacing all related
      entries, and a ``connect``/``disconnect`` form updating them
      incrementally (connected entries may carry a position hint);
    - media accept file ids;
    - ``date`` and ``time`` are sent as formatted strings (``YYYY-MM-DD`` and
      ``HH:mm:ss.SSS``), only ``datetime`` maps to ``Date``.

`map_type` never fails: unhandled kinds and unresolvable custom fields
degrade to ``any`` and are reported as warning diagnostics.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from strapi_types.config.logging import get_logger
from strapi_types.schema.model import AttributeKind
from strapi_types.typegen.custom_fields import EXTENSION_TEMPLATE, strip_plugin_prefix
from strapi_types.typegen.naming import to_interface_name

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from pathlib import Path

    from strapi_types.config.logging import StrapiTypesLogger
    from strapi_types.core.diagnostics import DiagnosticLog
    from strapi_types.schema.model import AttributeDescriptor
    from strapi_types.typegen.custom_fields import CustomFieldResolver

logger: StrapiTypesLogger = get_logger(__name__)

NUMBER_TYPE: Final[str] = "number"
STRING_TYPE: Final[str] = "string"
DATE_TYPE: Final[str] = "Date"
BOOLEAN_TYPE: Final[str] = "boolean"
ANY_TYPE: Final[str] = "any"
NEVER_TYPE: Final[str] = "never"

_ID_OBJECT: Final[str] = "{ id: number }"
_POSITION: Final[str] = "{ before?: number, after?: number, start?: boolean, end?: boolean }"
_CONNECT_OBJECT: Final[str] = f"{{ id: number, position?: {_POSITION} }}"

MANY_RELATION_TYPE: Final[str] = (
    "number[]"
    f" | {{ set: number[] | {_ID_OBJECT}[] }}"
    f" | {{ disconnect?: number[] | {_ID_OBJECT}[], connect?: number[] | {_CONNECT_OBJECT}[] }}"
)
ONE_RELATION_TYPE: Final[str] = (
    "number"
    f" | {{ set: [number] | [{_ID_OBJECT}] }}"
    f" | {{ disconnect?: [number] | [{_ID_OBJECT}], connect?: [number] | [{_CONNECT_OBJECT}] }}"
)
MULTIPLE_MEDIA_TYPE: Final[str] = f"{_ID_OBJECT}[]"
SINGLE_MEDIA_TYPE: Final[str] = NUMBER_TYPE


def missing_custom_field_type(identifier: str) -> str:
    """Return the fallback type for a custom field without a usable extension.

    The ``FIXME`` block comment keeps the property line syntactically valid
    while marking the spot for a human reviewer.
    """
    safe_identifier: str = identifier.replace("*/", "* /")
    return f"{ANY_TYPE} /* FIXME: missing custom field plugin for {safe_identifier} */"


@dataclass(frozen=True)
class _MappingContext:
    custom_fields: CustomFieldResolver | None
    diagnostics: DiagnosticLog | None
    source: Path | None

    def warn(self, message: str) -> None:
        if self.diagnostics is None:
            logger.warning("%s", message)
        else:
            self.diagnostics.add_warning(message, source=self.source)


def _union(members: tuple[str, ...]) -> str:
    """Return a parenthesized union of ``members`` (``never`` when empty)."""
    if not members:
        return NEVER_TYPE
    return f"({' | '.join(members)})"


def _map_enumeration(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    return _union(tuple(json.dumps(value) for value in attribute.enum_values))


def _map_relation(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    return MANY_RELATION_TYPE if attribute.is_many_relation else ONE_RELATION_TYPE


def _map_media(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    return MULTIPLE_MEDIA_TYPE if attribute.multiple else SINGLE_MEDIA_TYPE


def _map_component(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    if attribute.component is None:
        ctx.warn("Component attribute without a 'component' reference")
        return ANY_TYPE
    interface_name: str = to_interface_name(attribute.component)
    return f"{interface_name}[]" if attribute.repeatable else interface_name


def _map_dynamiczone(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    return f"{_union(tuple(to_interface_name(c) for c in attribute.components))}[]"


def _map_custom_field(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
    if attribute.custom_field is None:
        ctx.warn("Custom field attribute without a 'customField' identifier")
        return ANY_TYPE

    identifier: str = strip_plugin_prefix(attribute.custom_field)
    if ctx.custom_fields is None:
        ctx.warn(f"Missing custom field plugin for {identifier} (no custom field resolver)")
        return missing_custom_field_type(identifier)

    func = ctx.custom_fields.resolve(identifier)
    reason: str | None = None
    if func is not None:
        try:
            result: object = func(attribute.options)
        except Exception as e:
            logger.debug("Custom field extension for %s raised", identifier, exc_info=True)
            reason = f"the extension raised {e!r}"
        else:
            if isinstance(result, str) and result.strip():
                return result
            reason = f"the extension returned {result!r}, expected a non-empty str"

    details: str = f" ({reason})" if reason else ""
    ctx.warn(
        f"Missing custom field plugin for {identifier}{details}.\n"
        f"Create a {ctx.custom_fields.extension_path(identifier)} file "
        f"with the following signature:\n{EXTENSION_TEMPLATE}"
    )
    return missing_custom_field_type(identifier)


def _constant(type_expression: str) -> Callable[[AttributeDescriptor, _MappingContext], str]:
    def _map(attribute: AttributeDescriptor, ctx: _MappingContext) -> str:
        return type_expression

    return _map


_HANDLERS: Final[Mapping[AttributeKind, Callable[[AttributeDescriptor, _MappingContext], str]]] = {
    AttributeKind.INTEGER: _constant(NUMBER_TYPE),
    AttributeKind.DECIMAL: _constant(NUMBER_TYPE),
    AttributeKind.BIGINTEGER: _constant(NUMBER_TYPE),
    AttributeKind.FLOAT: _constant(NUMBER_TYPE),
    AttributeKind.STRING: _constant(STRING_TYPE),
    AttributeKind.TEXT: _constant(STRING_TYPE),
    AttributeKind.EMAIL: _constant(STRING_TYPE),
    AttributeKind.RICHTEXT: _constant(STRING_TYPE),
    AttributeKind.PASSWORD: _constant(STRING_TYPE),
    AttributeKind.UID: _constant(STRING_TYPE),
    # Formatted as 'YYYY-MM-DD'
    AttributeKind.DATE: _constant(STRING_TYPE),
    # Formatted as 'HH:mm:ss.SSS'
    AttributeKind.TIME: _constant(STRING_TYPE),
    AttributeKind.DATETIME: _constant(DATE_TYPE),
    AttributeKind.BOOLEAN: _constant(BOOLEAN_TYPE),
    AttributeKind.ENUMERATION: _map_enumeration,
    AttributeKind.RELATION: _map_relation,
    AttributeKind.MEDIA: _map_media,
    AttributeKind.COMPONENT: _map_component,
    AttributeKind.JSON: _constant(ANY_TYPE),
    AttributeKind.DYNAMICZONE: _map_dynamiczone,
    AttributeKind.CUSTOM_FIELD: _map_custom_field,
}


def unhandled_kinds() -> frozenset[AttributeKind]:
    """Return the attribute kinds without a dedicated mapping (only `UNKNOWN` is expected)."""
    return frozenset(kind for kind in AttributeKind if kind not in _HANDLERS)


def map_type(
    attribute: AttributeDescriptor,
    *,
    custom_fields: CustomFieldResolver | None = None,
    diagnostics: DiagnosticLog | None = None,
    source: Path | None = None,
) -> str:
    """Return the TypeScript type expression for a schema attribute.

    Args:
        attribute: The attribute to map.
        custom_fields: Resolver for custom field extensions. Without one, every
            custom field maps to the ``FIXME``-marked fallback type.
        diagnostics: Collector for warnings (unhandled kinds, missing custom field
            extensions). Warnings are logged when no collector is given.
        source: The schema file the attribute belongs to, attached to diagnostics.

    Returns:
        A non-empty TypeScript type expression.
    """
    ctx = _MappingContext(custom_fields=custom_fields, diagnostics=diagnostics, source=source)
    handler = _HANDLERS.get(attribute.kind)
    if handler is None:
        ctx.warn(f"Type not handled: {attribute.type_name}")
        return ANY_TYPE
    type_expression: str = handler(attribute, ctx)
    logger.trace("Mapped %s attribute to %s", attribute.type_name, type_expression)
    return type_expression
