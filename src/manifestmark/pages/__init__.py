# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/pages/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Page-link synchronization: keep ``<link rel="manifest">`` tags in sync."""

from __future__ import annotations

from manifestmark.pages.link import (
    LinkAnchor,
    LinkUpdate,
    find_manifest_links,
    render_manifest_link,
    sync_manifest_link,
    upsert_manifest_link,
)
from manifestmark.pages.processor import (
    PageDetail,
    PageError,
    PageInjectionResult,
    PageOutcome,
    process_directory,
)

__all__ = [
    "LinkAnchor",
    "LinkUpdate",
    "PageDetail",
    "PageError",
    "PageInjectionResult",
    "PageOutcome",
    "find_manifest_links",
    "process_directory",
    "render_manifest_link",
    "sync_manifest_link",
    "upsert_manifest_link",
]
