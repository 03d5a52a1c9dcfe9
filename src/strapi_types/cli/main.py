# topmark:header:start
#
#   project      : StrapiTypes
#   file         : main.py
#   file_relpath : src/strapi_types/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""StrapiTypes command-line interface.

Generates TypeScript types (intended to be used for API calls) from the
content type and component schemas of a Strapi project:

    strapi-types --strapi-root-directory ../cms --out src/types/strapi.ts

The generated declarations go to ``--out`` or stdout; diagnostics go to
stderr once generation is complete. Only an invalid Strapi root directory (or
config file) aborts the run; every other problem is reported and the output
is still produced.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from strapi_types.api import generate_from_config, write_output
from strapi_types.cli.console import ClickConsole
from strapi_types.cli.errors import StrapiTypesConfigError, StrapiTypesIOError
from strapi_types.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_log_level,
)
from strapi_types.config.logging import get_logger, setup_logging
from strapi_types.config.model import MutableConfig
from strapi_types.constants import (
    DEFAULT_CONFIG_FILE_NAME,
    DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY,
    STRAPI_TYPES_VERSION,
)
from strapi_types.core.diagnostics import DiagnosticLevel, compute_diagnostic_stats
from strapi_types.core.errors import ConfigError, ProjectLayoutError
from strapi_types.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from strapi_types.api import GenerationResult
    from strapi_types.cli.console import ConsoleLike
    from strapi_types.config.logging import StrapiTypesLogger
    from strapi_types.config.model import Config
    from strapi_types.core.diagnostics import Diagnostic, DiagnosticStats

logger: StrapiTypesLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> ConsoleLike:
    """Initialize logging, color and the console on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.

    Returns:
        ConsoleLike: The console stored in ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color: bool = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console

    # Resolved after the console exists so that usage errors are shown through it
    log_level: int | None = resolve_log_level(verbose, quiet)
    ctx.obj["log_level"] = log_level
    ctx.obj["quiet"] = quiet
    setup_logging(level=log_level)
    return console


def report_diagnostics(
    console: ConsoleLike,
    diagnostics: tuple[Diagnostic, ...],
    *,
    quiet: int,
) -> None:
    """Print diagnostics to stderr, honoring ``-q`` (no warnings) and ``-qq`` (nothing).

    Without ``-q``, a per-level summary line follows the diagnostics.
    """
    if quiet >= 2:
        return
    for diagnostic in diagnostics:
        if diagnostic.level == DiagnosticLevel.ERROR:
            console.error(diagnostic.render())
        elif quiet == 0:
            console.warn(diagnostic.render())

    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    if quiet == 0 and stats.total:
        summary: str = stats.summary()
        if stats.n_error:
            console.error(summary)
        else:
            console.warn(summary)


@click.command(
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Generate TypeScript types (intended to be used for API calls) "
        "from Strapi content types schemas."
    ),
)
@click.option(
    "-s",
    "--strapi-root-directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Path to Strapi root directory.  [default: .]",
)
@click.option(
    "-e",
    "--custom-fields-extension-directory",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=(
        "Path to the directory containing custom fields extensions.  "
        f"[default: {DEFAULT_CUSTOM_FIELDS_EXTENSION_DIRECTORY}]"
    ),
)
@click.option(
    "-o",
    "--out",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file in which TypeScript types will be written. If not set, prints on stdout.",
)
@click.option(
    "-c",
    "--config",
    "config_file",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"TOML config file. Defaults to {DEFAULT_CONFIG_FILE_NAME} in the Strapi root directory.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Exit with a failure code when error diagnostics were reported.",
)
@common_verbose_options
@common_color_options
@click.version_option(STRAPI_TYPES_VERSION, "--version", prog_name="strapi-types")
@click.pass_context
def cli(
    ctx: click.Context,
    strapi_root_directory: Path | None,
    custom_fields_extension_directory: Path | None,
    out: Path | None,
    config_file: Path | None,
    strict: bool | None,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the StrapiTypes CLI."""
    console: ConsoleLike = init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )

    try:
        config: Config = MutableConfig.load_merged(
            {
                "strapi_root_directory": strapi_root_directory,
                "custom_fields_extension_directory": custom_fields_extension_directory,
                "out": out,
                "strict": strict,
            },
            config_file=config_file,
        ).freeze()
    except ConfigError as e:
        raise StrapiTypesConfigError(str(e)) from e
    logger.debug("Effective config: %s", config)

    try:
        result: GenerationResult = generate_from_config(config)
    except ProjectLayoutError as e:
        raise StrapiTypesConfigError(str(e)) from e

    if config.out is None:
        console.print(result.text, nl=False)
    else:
        try:
            write_output(result.text, config.out)
        except OSError as e:
            raise StrapiTypesIOError(f"Cannot write {config.out}: {e}") from e

    report_diagnostics(console, result.diagnostics, quiet=quiet)

    if config.strict and compute_diagnostic_stats(result.diagnostics).n_error:
        ctx.exit(ExitCode.FAILURE)


if __name__ == "__main__":
    cli()
