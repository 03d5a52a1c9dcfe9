# topmark:header:start
#
#   project      : StrapiTypes
#   file         : test_exit_codes.py
#   file_relpath : tests/core/test_exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the CLI exit code contract."""

from __future__ import annotations

from strapi_types.core.exit_codes import ExitCode


def test_exit_codes_are_sysexits_aligned() -> None:
    """Every exit code the CLI can produce, and nothing else."""
    assert {code.name: int(code) for code in ExitCode} == {
        "SUCCESS": 0,
        "FAILURE": 1,
        "USAGE_ERROR": 64,
        "IO_ERROR": 74,
        "CONFIG_ERROR": 78,
    }
