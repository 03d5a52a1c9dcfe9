# topmark:header:start
#
#   project      : StrapiTypes
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level parsing and logging setup."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator

import pytest

from strapi_types.config.logging import (
    TRACE_LEVEL,
    ChalkFormatter,
    StrapiTypesLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
    setup_logging,
)
from strapi_types.constants import LOG_LEVEL_ENV_VAR


@pytest.fixture
def restore_logging() -> Iterator[None]:
    """Restore the test-suite logging setup after a test reconfigures it."""
    yield
    setup_logging(level=TRACE_LEVEL)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("TRACE", TRACE_LEVEL),
        ("debug", logging.DEBUG),
        (" Warn ", logging.WARNING),
        ("fatal", logging.CRITICAL),
        ("10", 10),
        ("verbose", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_log_level(value: str | None, expected: int | None) -> None:
    """Level names are case-insensitive; numbers are accepted as-is."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The level is read from the environment variable."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "info")
    assert resolve_env_log_level() == logging.INFO


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_defaults_to_critical() -> None:
    """Without level and environment, only critical records are logged."""
    setup_logging()
    root: logging.Logger = logging.getLogger()
    assert root.level == logging.CRITICAL
    [handler] = root.handlers
    assert isinstance(handler, logging.StreamHandler)
    assert handler.stream is sys.stderr
    assert isinstance(handler.formatter, ChalkFormatter)


@pytest.mark.usefixtures("restore_logging")
def test_setup_logging_honors_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable applies when no explicit level is given."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "TRACE")
    setup_logging()
    assert logging.getLogger().level == TRACE_LEVEL


def test_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Loggers support the TRACE level below DEBUG."""
    logger: StrapiTypesLogger = get_logger("strapi_types.tests.trace")
    assert isinstance(logger, StrapiTypesLogger)
    with caplog.at_level(TRACE_LEVEL):
        logger.trace("tracing %s", "works")
    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "tracing works")]
