# topmark:header:start
#
#   project      : ManifestMark
#   file         : getters.py
#   file_relpath : src/manifestmark/config/getters.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Checked value getters for TOML config tables.

Each getter validates the expected shape of a value and, on mismatch, records a
**warning** in a `DiagnosticLog` (and logs it) instead of raising. A missing key
or a value of the wrong shape yields ``None`` so the caller keeps inheriting the
lower-precedence layer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar

from manifestmark.config.logging import get_logger

if TYPE_CHECKING:
    from enum import Enum

    from manifestmark.config.logging import ManifestmarkLogger
    from manifestmark.diagnostic.model import DiagnosticLog

    from .types import TomlTable

logger: ManifestmarkLogger = get_logger(__name__)

E = TypeVar("E", bound="Enum")


def _warn(diagnostics: DiagnosticLog, message: str) -> None:
    logger.warning(message)
    diagnostics.add_warning(message)


def get_table_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> TomlTable:
    """Return the sub-table ``key`` of ``table``, or an empty dict.

    Args:
        table (TomlTable): Table to query.
        key (str): Sub-table name.
        where (str): Human-readable location used in diagnostics.
        diagnostics (DiagnosticLog): Collector for shape mismatches.

    Returns:
        TomlTable: The sub-table, or ``{}`` when absent or not a table.
    """
    value: Any = table.get(key)
    if value is None:
        return {}
    if isinstance(value, dict):
        return value
    _warn(diagnostics, f"[{key}] in {where} must be a table; got {type(value).__name__}")
    return {}


def get_string_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> str | None:
    """Return a string value; numbers and booleans are coerced with ``str``."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float, bool)):
        return str(value)
    _warn(diagnostics, f"{where}.{key} must be a string; got {type(value).__name__}")
    return None


def get_bool_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> bool | None:
    """Return a boolean value; integers are coerced with ``bool``."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return bool(value)
    _warn(diagnostics, f"{where}.{key} must be a boolean; got {type(value).__name__}")
    return None


def get_string_list_checked(
    table: TomlTable,
    key: str,
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> list[str] | None:
    """Return a list of strings.

    A single string is accepted as a one-element list. Non-string list items are
    dropped with a warning.

    Args:
        table (TomlTable): Table to query.
        key (str): Key to extract.
        where (str): Human-readable location used in diagnostics.
        diagnostics (DiagnosticLog): Collector for shape mismatches.

    Returns:
        list[str] | None: The strings, or ``None`` when absent or not a list.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        _warn(diagnostics, f"{where}.{key} must be a list of strings; got {type(value).__name__}")
        return None
    out: list[str] = []
    for index, item in enumerate(value):
        if isinstance(item, str):
            out.append(item)
        else:
            _warn(
                diagnostics,
                f"{where}.{key}[{index}] must be a string; got {type(item).__name__} (ignored)",
            )
    return out


def get_enum_checked(
    table: TomlTable,
    key: str,
    enum_cls: type[E],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> E | None:
    """Return the enum member whose value matches the string at ``key`` (case-insensitive)."""
    raw: str | None = get_string_checked(table, key, where=where, diagnostics=diagnostics)
    if raw is None:
        return None
    wanted: str = raw.strip().lower()
    for member in enum_cls:
        if str(member.value).lower() == wanted:
            return member
    allowed: str = ", ".join(str(m.value) for m in enum_cls)
    _warn(diagnostics, f"{where}.{key} has invalid value {raw!r}; expected one of: {allowed}")
    return None


def warn_unknown_keys(
    table: TomlTable,
    known: frozenset[str],
    *,
    where: str,
    diagnostics: DiagnosticLog,
) -> None:
    """Record a warning for each key of ``table`` not listed in ``known``."""
    for key in sorted(str(k) for k in table if k not in known):
        _warn(diagnostics, f"Unknown key {key!r} in {where} (ignored)")
