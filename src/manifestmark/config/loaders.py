# topmark:header:start
#
#   project      : ManifestMark
#   file         : loaders.py
#   file_relpath : src/manifestmark/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Load TOML configuration sources.

This module provides I/O helpers for reading ManifestMark configuration from
on-disk TOML files (``manifestmark.toml`` or the ``[tool.manifestmark]`` table in
``pyproject.toml``).

Parsing is done with `tomlkit` and returned as plain `dict` structures.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from manifestmark.config.logging import get_logger
from manifestmark.constants import (
    MANIFESTMARK_TOML_NAME,
    PYPROJECT_TOML_NAME,
    PYPROJECT_TOOL_SECTION,
)

if TYPE_CHECKING:
    from manifestmark.config.logging import ManifestmarkLogger

    from .types import TomlTable

logger: ManifestmarkLogger = get_logger(__name__)


def parse_toml_file(path: Path) -> TomlTable:
    """Read and parse a TOML file, letting errors propagate.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content as plain Python values.

    Raises:
        OSError: If the file cannot be read.
        TomlkitParseError: If the file is not valid TOML.
    """
    text: str = path.read_text(encoding="utf-8")
    doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        return parse_toml_file(path)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_config_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the ManifestMark table held by a parsed TOML document.

    For ``pyproject.toml`` this is ``[tool.manifestmark]``; for any other file it
    is the whole document.

    Args:
        path (Path): Source path (used to detect ``pyproject.toml``).
        data (TomlTable): Parsed document.

    Returns:
        TomlTable | None: The table, or ``None`` if a ``pyproject.toml`` has no
            ``[tool.manifestmark]`` section.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool")
    if not isinstance(tool, dict):
        return None
    section: Any = cast("dict[str, Any]", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", section) if isinstance(section, dict) else None


def discover_config_file(start: Path) -> Path | None:
    """Find the nearest config file from ``start`` upwards.

    In each directory ``manifestmark.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts when it holds a ``[tool.manifestmark]`` table.

    Args:
        start (Path): Directory where the search begins.

    Returns:
        Path | None: The first matching file, or ``None``.
    """
    current: Path = start.resolve()
    for directory in (current, *current.parents):
        candidate: Path = directory / MANIFESTMARK_TOML_NAME
        if candidate.is_file():
            logger.debug("Discovered config file: %s", candidate)
            return candidate
        pyproject: Path = directory / PYPROJECT_TOML_NAME
        if (
            pyproject.is_file()
            and extract_config_table(pyproject, load_toml_dict(pyproject)) is not None
        ):
            logger.debug("Discovered config in %s", pyproject)
            return pyproject
    logger.debug("No config file found from %s upwards", current)
    return None
