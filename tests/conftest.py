# topmark:header:start
#
#   project      : StrapiTypes
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the StrapiTypes test suite.

This file sets up global fixtures and customizes the logging configuration for test runs.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from strapi_types.config import logging
from strapi_types.constants import LOG_LEVEL_ENV_VAR
from tests.strapi_project import StrapiProject

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture(autouse=True)
def silence_strapi_types_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so that trace statements are exercised.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def strapi_project(tmp_path: Path) -> StrapiProject:
    """Return an empty Strapi project skeleton under ``tmp_path / "strapi"``."""
    return StrapiProject(tmp_path / "strapi")


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from ``tmp_path`` so that CWD-relative defaults resolve there."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
