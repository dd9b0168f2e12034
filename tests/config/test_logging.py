# topmark:header:start
#
#   project      : KvArgs
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for log level parsing and the TRACE-capable logger."""

from __future__ import annotations

import logging

import pytest

from kvargs.config.logging import (
    TRACE_LEVEL,
    KvargsLogger,
    get_logger,
    parse_log_level,
    resolve_env_log_level,
)
from kvargs.constants import LOG_LEVEL_ENV_VAR


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("warn", logging.WARNING),
        ("30", 30),
        ("loud", None),
    ],
)
def test_parse_log_level(value: str, expected: int | None) -> None:
    """Names are case-insensitive; numeric strings pass through."""
    assert parse_log_level(value) == expected


def test_env_log_level(monkeypatch: pytest.MonkeyPatch) -> None:
    """The environment variable is honored only when set."""
    assert resolve_env_log_level() is None
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, "INFO")
    assert resolve_env_log_level() == logging.INFO


def test_loggers_support_trace(caplog: pytest.LogCaptureFixture) -> None:
    """Project loggers expose a trace() method below DEBUG."""
    logger = get_logger("kvargs.tests.trace")
    assert isinstance(logger, KvargsLogger)
    with caplog.at_level(TRACE_LEVEL, logger="kvargs.tests.trace"):
        logger.trace("token %d", 1)
    assert [r.levelname for r in caplog.records] == ["TRACE"]
    assert caplog.records[0].getMessage() == "token 1"
