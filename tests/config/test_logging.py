# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_logging.py
#   file_relpath : tests/config/test_logging.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for the TRACE-aware logging setup."""

from __future__ import annotations

import logging

import pytest

from manifestmark.config.logging import (
    LOG_LEVEL_ENV_VAR,
    TRACE_LEVEL,
    ChalkFormatter,
    ManifestmarkLogger,
    get_logger,
    resolve_env_log_level,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("trace", TRACE_LEVEL),
        (" Debug ", logging.DEBUG),
        ("WARN", logging.WARNING),
        ("30", 30),
        ("", None),
        ("loud", None),
    ],
)
def test_resolve_env_log_level(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: int | None
) -> None:
    """Level names are case-insensitive; unknown values are ignored."""
    monkeypatch.setenv(LOG_LEVEL_ENV_VAR, value)
    assert resolve_env_log_level() == expected


def test_resolve_env_log_level_unset() -> None:
    """Without the variable there is no level override."""
    assert resolve_env_log_level() is None


def test_trace_records_below_debug(caplog: pytest.LogCaptureFixture) -> None:
    """``trace()`` emits records at the TRACE level under its own name."""
    logger: ManifestmarkLogger = get_logger("manifestmark.test_logging")
    assert isinstance(logger, ManifestmarkLogger)

    with caplog.at_level(TRACE_LEVEL):
        logger.trace("joined %s", "a/b")

    assert [(r.levelname, r.getMessage()) for r in caplog.records] == [("TRACE", "joined a/b")]


@pytest.mark.parametrize("level", [TRACE_LEVEL, logging.DEBUG, logging.ERROR, 1])
def test_chalk_formatter_keeps_message(level: int) -> None:
    """Styling wraps the formatted text without altering it."""
    record = logging.LogRecord("x", level, __file__, 1, "hello %s", ("there",), None)
    assert "hello there" in ChalkFormatter("%(message)s").format(record)
