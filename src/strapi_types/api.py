# topmark:header:start
#
#   project      : StrapiTypes
#   file         : api.py
#   file_relpath : src/strapi_types/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for generating TypeScript types from a Strapi project.

Example:
    ```python
    from strapi_types.api import generate

    result = generate("path/to/strapi")
    for diagnostic in result.diagnostics:
        print(diagnostic.render())
    Path("types/strapi.ts").write_text(result.text, encoding="utf-8")
    ```

Generation raises [`ProjectLayoutError`][strapi_types.core.errors.ProjectLayoutError]
when the directory is not a Strapi root; every other problem is reported as a
diagnostic and generation continues.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from strapi_types.config.logging import get_logger
from strapi_types.constants import DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY
from strapi_types.core.diagnostics import DiagnosticLog
from strapi_types.schema.loader import load_schemas, resolve_project_layout
from strapi_types.typegen.assembler import (
    build_interface_spec,
    render_interfaces,
    select_interfaces,
)
from strapi_types.typegen.custom_fields import CustomFieldRegistry

if TYPE_CHECKING:
    from strapi_types.config.logging import StrapiTypesLogger
    from strapi_types.config.model import Config
    from strapi_types.core.diagnostics import Diagnostic
    from strapi_types.schema.loader import ProjectLayout
    from strapi_types.schema.model import SchemaDescriptor
    from strapi_types.typegen.assembler import InterfaceSpec
    from strapi_types.typegen.custom_fields import CustomFieldResolver

logger: StrapiTypesLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of a generation run.

    Attributes:
        text (str): The generated TypeScript declarations.
        interface_names (tuple[str, ...]): Names of the emitted interfaces, in output order.
        diagnostics (tuple[Diagnostic, ...]): Diagnostics collected during the run.
    """

    text: str
    interface_names: tuple[str, ...]
    diagnostics: tuple[Diagnostic, ...]


def generate(
    strapi_root: Path | str = ".",
    *,
    custom_fields: CustomFieldResolver | None = None,
    custom_fields_extension_directory: Path | str = DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY,
) -> GenerationResult:
    """Generate TypeScript interfaces for every schema of a Strapi project.

    Args:
        strapi_root: The Strapi root directory.
        custom_fields: Resolver for custom field extensions. Defaults to a
            [`CustomFieldRegistry`][strapi_types.typegen.custom_fields.CustomFieldRegistry]
            over ``custom_fields_extension_directory``.
        custom_fields_extension_directory: Directory holding custom field
            extension modules (relative paths resolve against the CWD).

    Returns:
        The generated text and the collected diagnostics.

    Raises:
        ProjectLayoutError: If ``strapi_root`` is not a Strapi root directory.
    """
    layout: ProjectLayout = resolve_project_layout(strapi_root)
    resolver: CustomFieldResolver = custom_fields or CustomFieldRegistry(
        custom_fields_extension_directory
    )
    diagnostics = DiagnosticLog()

    schemas: list[SchemaDescriptor] = load_schemas(layout, diagnostics)
    specs: list[InterfaceSpec] = [
        build_interface_spec(schema, custom_fields=resolver, diagnostics=diagnostics)
        for schema in schemas
    ]
    interfaces: list[InterfaceSpec] = select_interfaces(specs, diagnostics)
    text: str = render_interfaces(interfaces)
    names: tuple[str, ...] = tuple(spec.name for spec in interfaces if spec.name is not None)
    logger.info("Generated %d interface(s); %s", len(names), diagnostics.stats().summary())
    return GenerationResult(text=text, interface_names=names, diagnostics=tuple(diagnostics))


def generate_from_config(
    config: Config,
    *,
    custom_fields: CustomFieldResolver | None = None,
) -> GenerationResult:
    """Generate TypeScript interfaces as configured by a frozen `Config`."""
    return generate(
        config.strapi_root_directory,
        custom_fields=custom_fields,
        custom_fields_extension_directory=config.custom_fields_extension_directory,
    )


def write_output(text: str, out: Path) -> None:
    """Write generated text to ``out`` (UTF-8), creating parent directories.

    Raises:
        OSError: If the file cannot be written.
    """
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(text, encoding="utf-8")
    logger.info("Wrote %s", out)
