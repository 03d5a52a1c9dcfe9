# topmark:header:start
#
#   project      : StrapiTypes
#   file         : errors.py
#   file_relpath : src/strapi_types/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the StrapiTypes CLI.

Usage:
    Raise these exceptions in the CLI command to signal errors with
    standardized messages and exit codes.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from strapi_types.core.exit_codes import ExitCode


class StrapiTypesCliError(click.ClickException):
    """Base class for all StrapiTypes CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (without Click's ``Error:`` coloring)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class StrapiTypesUsageError(StrapiTypesCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class StrapiTypesConfigError(StrapiTypesCliError):
    """Error for an invalid Strapi root directory or config file."""

    exit_code = ExitCode.CONFIG_ERROR


class StrapiTypesIOError(StrapiTypesCliError):
    """Error for I/O errors writing the output file."""

    exit_code = ExitCode.IO_ERROR
