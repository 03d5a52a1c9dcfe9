# topmark:header:start
#
#   project      : StrapiTypes
#   file         : loader.py
#   file_relpath : src/strapi_types/schema/loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locate and parse the schema files of a Strapi project.

A Strapi project keeps its schemas under ``<root>/src``:

    - content types: ``src/api/**/schema.json``
    - components: ``src/components/<category>/<name>.json``

The loader first checks the project layout (a missing ``src/api`` directory
is fatal, see [`ProjectLayoutError`][strapi_types.core.errors.ProjectLayoutError]),
then discovers schema files with `pathspec` patterns and parses each one into a
[`SchemaDescriptor`][strapi_types.schema.model.SchemaDescriptor]. Files that
cannot be parsed are reported as error diagnostics and skipped.

Discovery is deterministic: files are returned sorted by path.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from pathspec import PathSpec

from strapi_types.config.logging import get_logger
from strapi_types.constants import (
    API_DIR_NAME,
    API_SCHEMA_PATTERNS,
    COMPONENT_SCHEMA_PATTERNS,
    COMPONENTS_DIR_NAME,
    SRC_DIR_NAME,
)
from strapi_types.core.errors import ProjectLayoutError, SchemaParseError
from strapi_types.schema.model import ComponentRef, SchemaDescriptor

if TYPE_CHECKING:
    from collections.abc import Iterable

    from strapi_types.config.logging import StrapiTypesLogger
    from strapi_types.core.diagnostics import DiagnosticLog


logger: StrapiTypesLogger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Resolved directories of a Strapi project.

    Attributes:
        root (Path): The Strapi root directory (absolute).
        api_dir (Path): ``<root>/src/api``.
        components_dir (Path): ``<root>/src/components`` (may not exist).
    """

    root: Path
    api_dir: Path
    components_dir: Path


@dataclass(frozen=True, slots=True)
class SchemaFiles:
    """Schema files discovered in a Strapi project, each group sorted by path."""

    content_types: tuple[Path, ...]
    components: tuple[Path, ...]


def resolve_project_layout(strapi_root: Path | str) -> ProjectLayout:
    """Check the Strapi project layout and return its resolved directories.

    Args:
        strapi_root: The Strapi root directory (relative paths resolve against the CWD).

    Returns:
        The resolved project layout.

    Raises:
        ProjectLayoutError: If ``<root>/src`` or ``<root>/src/api`` is not a directory.
    """
    root: Path = Path(strapi_root).resolve()
    src_dir: Path = root / SRC_DIR_NAME
    api_dir: Path = src_dir / API_DIR_NAME
    for expected in (src_dir, api_dir):
        if not expected.is_dir():
            raise ProjectLayoutError(root, expected)
    layout = ProjectLayout(
        root=root,
        api_dir=api_dir,
        components_dir=src_dir / COMPONENTS_DIR_NAME,
    )
    logger.debug("Strapi project layout: %s", layout)
    return layout


def match_files(base: Path, patterns: Iterable[str]) -> tuple[Path, ...]:
    """Return the files under ``base`` matching gitwildmatch ``patterns``, sorted.

    A missing ``base`` directory yields no files.

    Args:
        base: Directory to scan recursively.
        patterns: Patterns relative to ``base`` (e.g. ``"**/schema.json"``).

    Returns:
        Absolute paths of matching files, sorted.
    """
    if not base.is_dir():
        logger.debug("No directory %s; nothing to match", base)
        return ()
    spec: PathSpec = PathSpec.from_lines("gitwildmatch", patterns)
    matched: list[Path] = [base / rel for rel in spec.match_tree_files(str(base))]
    logger.trace("Matched %d file(s) under %s", len(matched), base)
    return tuple(sorted(matched))


def discover_schema_files(layout: ProjectLayout) -> SchemaFiles:
    """Discover content type and component schema files of a Strapi project."""
    files = SchemaFiles(
        content_types=match_files(layout.api_dir, API_SCHEMA_PATTERNS),
        components=match_files(layout.components_dir, COMPONENT_SCHEMA_PATTERNS),
    )
    logger.info(
        "Discovered %d content type schema(s) and %d component schema(s)",
        len(files.content_types),
        len(files.components),
    )
    return files


def component_ref_from_path(path: Path, components_dir: Path) -> ComponentRef | None:
    """Derive the component category and name from a component file path.

    The category is the first directory below ``components_dir``; the name is
    the rest of the path without the ``.json`` suffix. Deeper directories are
    joined to the name with ``.`` separators.

    Args:
        path: The component schema file.
        components_dir: The ``src/components`` directory.

    Returns:
        The component reference, or None if the file sits directly in
        ``components_dir`` (no category) or outside of it.
    """
    try:
        rel: Path = path.relative_to(components_dir)
    except ValueError:
        return None
    parts: tuple[str, ...] = rel.with_suffix("").parts
    if len(parts) < 2:
        return None
    return ComponentRef(category=parts[0], name=".".join(parts[1:]))


def load_schema(path: Path, *, component: ComponentRef | None = None) -> SchemaDescriptor:
    """Read and parse one schema file.

    Args:
        path: The schema file.
        component: Category/name when the file is a component schema.

    Returns:
        The parsed schema descriptor.

    Raises:
        SchemaParseError: If the file cannot be read, is not valid JSON or does
            not have the shape of a schema document.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SchemaParseError(path, str(e)) from e
    try:
        raw: object = json.loads(text)
    except json.JSONDecodeError as e:
        raise SchemaParseError(path, f"invalid JSON ({e})") from e
    return SchemaDescriptor.from_dict(raw, path=path, component=component)


def load_schemas(layout: ProjectLayout, diagnostics: DiagnosticLog) -> list[SchemaDescriptor]:
    """Discover and parse every schema of a Strapi project.

    Content type schemas come first, then component schemas, each group sorted
    by path. Files that fail to parse are recorded as error diagnostics and
    skipped; the remaining files are still loaded.

    Args:
        layout: The resolved project layout.
        diagnostics: Collector for per-file parse errors.

    Returns:
        The successfully parsed schemas.
    """
    files: SchemaFiles = discover_schema_files(layout)
    candidates: list[tuple[Path, ComponentRef | None]] = [(p, None) for p in files.content_types]
    candidates.extend(
        (p, component_ref_from_path(p, layout.components_dir)) for p in files.components
    )

    schemas: list[SchemaDescriptor] = []
    for path, component in candidates:
        try:
            schemas.append(load_schema(path, component=component))
        except SchemaParseError as e:
            logger.debug("Skipping %s: %s", path, e.reason)
            diagnostics.add_error(f"Cannot parse schema: {e.reason}", source=path)
    logger.debug("Loaded %d of %d schema file(s)", len(schemas), len(candidates))
    return schemas
