# topmark:header:start
#
#   project      : ManifestMark
#   file         : logging.py
#   file_relpath : src/manifestmark/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Logging for ManifestMark: a TRACE level below DEBUG and colored console records.

Library modules obtain their logger with
[`get_logger`][manifestmark.config.logging.get_logger] and never configure handlers.
The CLI calls [`setup_logging`][manifestmark.config.logging.setup_logging] once per
invocation; the level comes from ``MANIFESTMARK_LOG_LEVEL`` and defaults to
CRITICAL, which keeps diagnostic logging out of normal command output.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

if TYPE_CHECKING:
    from collections.abc import Callable

TRACE_LEVEL: Final[int] = logging.DEBUG - 5

LOG_LEVEL_ENV_VAR: Final[str] = "MANIFESTMARK_LOG_LEVEL"

LOG_FORMAT: Final[str] = "[%(levelname)s] %(message)s"
# Below INFO, records also name their origin.
DEBUG_LOG_FORMAT: Final[str] = (
    "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"
)

LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


class ManifestmarkLogger(logging.Logger):
    """Standard logger plus ``trace()`` for per-item detail (link anchors, path joins)."""

    def trace(self, msg: object, *args: object) -> None:
        """Log ``msg % args`` at TRACE level.

        Args:
            msg (object): Message, possibly with ``%`` placeholders.
            *args (object): Placeholder values.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(TRACE_LEVEL, msg, args, stacklevel=2)


if logging.getLevelName(TRACE_LEVEL) != "TRACE":
    logging.addLevelName(TRACE_LEVEL, "TRACE")

logging.setLoggerClass(ManifestmarkLogger)


# Checked top-down: the first threshold at or below the record level applies.
LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Color a formatted record according to its level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format ``record`` and wrap it in the style for its level.

        Args:
            record (logging.LogRecord): The record to render.

        Returns:
            str: The styled line; records below TRACE are dimmed.
        """
        message: str = super().format(record)
        for threshold, style in LEVEL_STYLES:
            if record.levelno >= threshold:
                return style(message)
        return chalk.dim(message)


def resolve_env_log_level() -> int | None:
    """Read ``MANIFESTMARK_LOG_LEVEL`` as a level name or number.

    Returns:
        int | None: The level, or None when the variable is unset, empty or unknown.
    """
    raw: str = os.environ.get(LOG_LEVEL_ENV_VAR, "").strip().upper()
    if not raw:
        return None
    if raw.isdigit():
        return int(raw)
    return LEVEL_NAMES.get(raw)


def setup_logging(level: int | None = None) -> None:
    """Install a single colored stdout handler on the root logger.

    Args:
        level (int | None): Root level; when None the environment is consulted and
            CRITICAL is the fallback.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root: logging.Logger = logging.getLogger()
    root.setLevel(level)
    for existing in list(root.handlers):
        root.removeHandler(existing)

    handler = logging.StreamHandler(sys.stdout)
    fmt: str = LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT
    handler.setFormatter(ChalkFormatter(fmt))
    root.addHandler(handler)
    root.propagate = False


def get_logger(name: str) -> ManifestmarkLogger:
    """Return the module logger ``name`` typed as a ManifestmarkLogger."""
    return cast("ManifestmarkLogger", logging.getLogger(name))
