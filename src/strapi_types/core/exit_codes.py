# topmark:header:start
#
#   project      : StrapiTypes
#   file         : exit_codes.py
#   file_relpath : src/strapi_types/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the StrapiTypes CLI.

StrapiTypes aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the StrapiTypes CLI.

    Attributes:
        SUCCESS: Generation completed. Per-schema diagnostics do not change
            the exit code unless ``--strict`` is set.
        FAILURE: Generation completed in ``--strict`` mode but reported at least
            one error diagnostic.
        USAGE_ERROR: Command-line invocation error (invalid flags/args). Mirrors
            BSD ``EX_USAGE (64)``.
        IO_ERROR: The output file could not be written. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: The Strapi root directory does not have the expected
            layout, or the config file is invalid. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
