# topmark:header:start
#
#   project      : ManifestMark
#   file         : types.py
#   file_relpath : src/manifestmark/config/types.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Lightweight config types and aliases.

This module hosts stable, import-friendly definitions that other config modules
can depend on without risk of circular imports.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any

# ArgsLike: generic mapping accepted by config loaders (works for CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

TomlTable = dict[str, Any]


class AssetPolicy(str, Enum):
    """What to do when manifest icons are missing on disk."""

    FAIL = "fail"
    WARN = "warn"
    NONE = "none"

    @classmethod
    def from_value(cls, value: str | None) -> AssetPolicy | None:
        """Return the member for ``value`` (case-insensitive), or ``None`` if unknown."""
        if value is None:
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None
