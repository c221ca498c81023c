# topmark:header:start
#
#   project      : ManifestMark
#   file         : args.py
#   file_relpath : src/manifestmark/config/args.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Coerce loosely typed list inputs from the CLI and config files.

Command-line values arrive as strings while TOML values are already typed; the
helpers below accept either and always return a list of non-empty strings.
"""

from __future__ import annotations

import json
from typing import Any

from manifestmark.config.logging import ManifestmarkLogger, get_logger
from manifestmark.diagnostic.model import DiagnosticLog

logger: ManifestmarkLogger = get_logger(__name__)


def parse_list(value: Any) -> list[str]:
    """Split a whitespace-separated string, or pass a list through.

    Args:
        value (Any): A string (``"html htm"``), a list/tuple, or ``None``.

    Returns:
        list[str]: The non-empty items as strings.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return value.split()
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return []


def parse_comma_separated_list(value: Any) -> list[str]:
    """Split a comma-separated string, or pass a list through.

    Args:
        value (Any): A string (``"games, utilities"``), a list/tuple, or ``None``.

    Returns:
        list[str]: The trimmed, non-empty items.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    if isinstance(value, (list, tuple)):
        return [str(v).strip() for v in value if str(v).strip()]
    return []


def parse_json_list(
    value: str | None,
    fallback: list[Any] | None = None,
    *,
    what: str = "value",
    diagnostics: DiagnosticLog | None = None,
) -> list[Any] | None:
    """Parse a JSON array given as text, returning ``fallback`` on bad input.

    Invalid JSON and JSON that is not an array both yield ``fallback``; the
    problem is logged and, when ``diagnostics`` is given, recorded as a warning.

    Args:
        value (str | None): JSON text.
        fallback (list[Any] | None): Value returned when ``value`` is ``None``
            or cannot be used.
        what (str): Name of the input, used in messages.
        diagnostics (DiagnosticLog | None): Optional collector for warnings.

    Returns:
        list[Any] | None: The decoded array, or ``fallback``.
    """
    if value is None:
        return fallback
    message: str
    try:
        decoded: Any = json.loads(value)
    except json.JSONDecodeError as exc:
        message = f"{what} is not valid JSON ({exc.msg}); using default"
    else:
        if isinstance(decoded, list):
            logger.trace("Parsed %s: %d item(s)", what, len(decoded))
            return decoded
        message = f"{what} must be a JSON array; using default"
    logger.warning(message)
    if diagnostics is not None:
        diagnostics.add_warning(message)
    return fallback
