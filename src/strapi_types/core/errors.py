# topmark:header:start
#
#   project      : StrapiTypes
#   file         : errors.py
#   file_relpath : src/strapi_types/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Library exceptions for StrapiTypes.

These exceptions are independent of the CLI. The CLI layer translates them
into Click exceptions carrying the matching exit code (see
[`strapi_types.cli.errors`][]).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path


class StrapiTypesError(Exception):
    """Base class for all StrapiTypes library errors."""


class ProjectLayoutError(StrapiTypesError):
    """The Strapi root directory does not contain the expected ``src/api`` layout.

    Attributes:
        root: The (resolved) directory that was inspected.
        missing: The directory that was expected but not found.
    """

    def __init__(self, root: Path, missing: Path) -> None:
        self.root = root
        self.missing = missing
        super().__init__(
            f"Directory {root} doesn't look like a Strapi root directory "
            f"({missing} is not a directory). "
            "Try to configure it with --strapi-root-directory <path>"
        )


class SchemaParseError(StrapiTypesError):
    """A schema file could not be read or parsed into a schema descriptor.

    Attributes:
        path: The offending schema file.
        reason: Short description of the failure.
    """

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot parse schema file {path}: {reason}")


class ConfigError(StrapiTypesError):
    """A StrapiTypes config file is missing, unreadable or malformed."""
