# topmark:header:start
#
#   project      : StrapiTypes
#   file         : custom_fields.py
#   file_relpath : src/strapi_types/typegen/custom_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom field extensions.

Strapi plugins can declare custom fields (``"type": "customField"``) whose
shape is only known to the plugin. Their TypeScript type is computed by a
project-specific *extension*: a callable taking the attribute's ``options``
value and returning a type expression string.

Extensions are resolved by identifier, the attribute's ``customField`` value
stripped of its ``plugin::`` prefix (e.g. ``color-picker.color``). Lookup
order:

    1. callables registered programmatically with `CustomFieldRegistry.register`;
    2. entry points of the ``strapi_types.custom_fields`` group named after
       the identifier;
    3. an extension module ``<extension_directory>/<identifier>.py`` defining
       a module-level ``custom_field_type(options)`` function.

Resolution results, hits and misses alike, are cached per identifier.
"""

from __future__ import annotations

from importlib.metadata import EntryPoints, entry_points
from importlib.util import module_from_spec, spec_from_file_location
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from strapi_types.config.logging import get_logger
from strapi_types.constants import (
    CUSTOM_FIELD_ENTRYPOINT_GROUP,
    CUSTOM_FIELD_EXTENSION_FUNCTION,
    CUSTOM_FIELD_EXTENSION_SUFFIX,
    CUSTOM_FIELD_PLUGIN_PREFIX,
    DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY,
)

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import ModuleType

    from strapi_types.config.logging import StrapiTypesLogger

    CustomFieldType = Callable[[Any], str]

logger: StrapiTypesLogger = get_logger(__name__)

EXTENSION_TEMPLATE: str = f'''\
def {CUSTOM_FIELD_EXTENSION_FUNCTION}(options):
    return "..."
'''


class CustomFieldResolver(Protocol):
    """Structural interface used by the type mapper to resolve custom fields."""

    def resolve(self, identifier: str) -> CustomFieldType | None:
        """Return the extension callable for ``identifier``, or None if there is none."""
        ...

    def extension_path(self, identifier: str) -> Path:
        """Return the extension module path expected for ``identifier``."""
        ...


def strip_plugin_prefix(custom_field: str) -> str:
    """Strip the leading ``plugin::`` namespace from a custom field identifier."""
    if custom_field.startswith(CUSTOM_FIELD_PLUGIN_PREFIX):
        return custom_field[len(CUSTOM_FIELD_PLUGIN_PREFIX) :]
    return custom_field


def resolve_extension_directory(directory: Path | str, *, base: Path | None = None) -> Path:
    """Return ``directory`` as an absolute path, resolving relative paths against ``base``.

    ``base`` defaults to the current working directory.
    """
    path = Path(directory)
    if not path.is_absolute():
        path = (base or Path.cwd()) / path
    return path.resolve()


class CustomFieldRegistry:
    """Runtime registry of custom field extensions, keyed by identifier.

    Args:
        extension_directory (Path | str): Directory holding extension modules.
            Relative paths are resolved against the current working directory.
        use_entry_points (bool): Whether to look up installed entry points.

    Attributes:
        extension_directory (Path): Absolute extension directory.
    """

    def __init__(
        self,
        extension_directory: Path | str = DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY,
        *,
        use_entry_points: bool = True,
    ) -> None:
        self.extension_directory: Path = resolve_extension_directory(extension_directory)
        self._use_entry_points: bool = use_entry_points
        self._registered: dict[str, CustomFieldType] = {}
        self._cache: dict[str, CustomFieldType | None] = {}

    def register(self, identifier: str, func: CustomFieldType) -> None:
        """Register an extension callable for a custom field identifier.

        A registration takes precedence over entry points and extension modules
        and replaces any cached resolution for the identifier.

        Args:
            identifier: Custom field identifier (a ``plugin::`` prefix is stripped).
            func: Callable taking the attribute options and returning a type expression.
        """
        key: str = strip_plugin_prefix(identifier)
        self._registered[key] = func
        self._cache.pop(key, None)
        logger.debug("Registered custom field extension for %s", key)

    def extension_path(self, identifier: str) -> Path:
        """Return the extension module path expected for ``identifier``."""
        file_name: str = strip_plugin_prefix(identifier) + CUSTOM_FIELD_EXTENSION_SUFFIX
        return self.extension_directory / file_name

    def resolve(self, identifier: str) -> CustomFieldType | None:
        """Return the extension callable for ``identifier``, or None if there is none.

        Load failures (import errors, missing or non-callable function) count as
        a miss and are logged.
        """
        key: str = strip_plugin_prefix(identifier)
        if key not in self._cache:
            self._cache[key] = self._lookup(key)
        return self._cache[key]

    def _lookup(self, key: str) -> CustomFieldType | None:
        if key in self._registered:
            return self._registered[key]
        if self._use_entry_points:
            func: CustomFieldType | None = self._load_from_entry_points(key)
            if func is not None:
                return func
        return self._load_from_module(key)

    def _load_from_entry_points(self, key: str) -> CustomFieldType | None:
        """Return the callable provided by an entry point named ``key``, if any."""
        try:
            candidates: EntryPoints = entry_points().select(
                group=CUSTOM_FIELD_ENTRYPOINT_GROUP, name=key
            )
        except Exception:
            logger.exception("Failed to read entry points")
            return None

        for ep in candidates:
            try:
                provided: Any = ep.load()
            except Exception:
                logger.exception(
                    "Failed loading custom field extension from entry point %s", ep.name
                )
                continue
            if callable(provided):
                logger.debug("Custom field %s resolved from entry point %s", key, ep.value)
                return provided
            logger.warning("Entry point %s did not provide a callable: %r", ep.name, provided)
        return None

    def _load_from_module(self, key: str) -> CustomFieldType | None:
        """Return ``custom_field_type`` from the extension module for ``key``, if any."""
        path: Path = self.extension_path(key)
        if not path.is_file():
            logger.debug("No custom field extension module at %s", path)
            return None

        module_name: str = "strapi_types_custom_field_" + "".join(
            c if c.isalnum() else "_" for c in key
        )
        spec = spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            logger.warning("Cannot load custom field extension module %s", path)
            return None
        try:
            module: ModuleType = module_from_spec(spec)
            spec.loader.exec_module(module)
        except Exception:
            logger.exception("Failed to import custom field extension module %s", path)
            return None

        func: Any = getattr(module, CUSTOM_FIELD_EXTENSION_FUNCTION, None)
        if not callable(func):
            logger.warning(
                "Custom field extension module %s has no callable %s()",
                path,
                CUSTOM_FIELD_EXTENSION_FUNCTION,
            )
            return None
        logger.debug("Custom field %s resolved from %s", key, path)
        return func
