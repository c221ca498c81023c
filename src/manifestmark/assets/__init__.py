# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/assets/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Icon asset existence checks."""

from __future__ import annotations

from manifestmark.assets.checker import (
    AssetCheckResult,
    AssetEntry,
    AssetExistenceChecker,
    check_icon_assets,
)

__all__ = [
    "AssetCheckResult",
    "AssetEntry",
    "AssetExistenceChecker",
    "check_icon_assets",
]
