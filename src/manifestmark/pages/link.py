# topmark:header:start
#
#   project      : ManifestMark
#   file         : link.py
#   file_relpath : src/manifestmark/pages/link.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Insert or update the manifest ``<link>`` tag in page text.

Markup is treated as text with a few recognized substrings; this is not an HTML
parser. A page is in one of two states:

* **tag present**: every existing manifest link is replaced by the canonical tag.
* **tag absent**: the canonical tag is inserted at the first available anchor of
  an ordered fallback chain:

  1. immediately before the closing ``</head>`` marker (indented, marker moved
     to its own line);
  2. after the opening ``<html ...>`` tag, wrapped in a synthetic head section;
  3. prepended to the text.

Inserted line breaks follow the first newline sequence found in the page.

Exactly one transform applies per call. For text holding at most one manifest
link, the operation is idempotent.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Final

from manifestmark.config.logging import ManifestmarkLogger, get_logger

if TYPE_CHECKING:
    from collections.abc import Callable

logger: ManifestmarkLogger = get_logger(__name__)

# `rel="manifest"` (either quote style) anywhere inside a <link ...> tag.
MANIFEST_LINK_RE: Final[re.Pattern[str]] = re.compile(
    r"""<link\b[^>]*?\brel\s*=\s*["']manifest["'][^>]*>""",
    re.IGNORECASE,
)
HEAD_CLOSE_RE: Final[re.Pattern[str]] = re.compile(r"</head>", re.IGNORECASE)
HTML_OPEN_RE: Final[re.Pattern[str]] = re.compile(r"<html\b[^>]*>", re.IGNORECASE)

LINK_INDENT: Final[str] = "  "
CROSSORIGIN_ATTR: Final[str] = ' crossorigin="use-credentials"'


class LinkAnchor(Enum):
    """Which transform produced the updated text."""

    REPLACED = "replaced existing manifest link"
    BEFORE_HEAD_CLOSE = "inserted before </head>"
    AFTER_HTML_OPEN = "inserted head section after <html>"
    PREPENDED = "prepended to content"


@dataclass(frozen=True)
class LinkUpdate:
    """Result of [`sync_manifest_link`][manifestmark.pages.link.sync_manifest_link].

    Attributes:
        text (str): Updated page text.
        anchor (LinkAnchor): Transform that was applied.
        changed (bool): Whether ``text`` differs from the input.
    """

    text: str
    anchor: LinkAnchor
    changed: bool


def normalize_href_path(filename: str) -> str:
    """Return ``filename`` as a site-absolute href path with exactly one leading ``/``."""
    return "/" + filename.replace("\\", "/").lstrip("/")


def render_manifest_link(filename: str, use_credentials: bool = False) -> str:
    """Render the canonical manifest link tag.

    Args:
        filename (str): Manifest filename (relative to the site root).
        use_credentials (bool): Append ``crossorigin="use-credentials"`` when True.

    Returns:
        str: ``<link rel="manifest" href="/{filename}">`` (plus the crossorigin attribute).
    """
    crossorigin: str = CROSSORIGIN_ATTR if use_credentials else ""
    return f'<link rel="manifest" href="{normalize_href_path(filename)}"{crossorigin}>'


def find_manifest_links(text: str) -> list[str]:
    """Return every manifest link tag found in ``text``, in document order."""
    return MANIFEST_LINK_RE.findall(text)


def detect_newline(text: str) -> str:
    r"""Return the first newline sequence found in ``text``.

    One of ``"\r\n"``, ``"\n"`` or ``"\r"``; ``"\n"`` when the text holds no line break.
    """
    for line in text.splitlines(keepends=True):
        if line.endswith("\r\n"):
            return "\r\n"
        if line.endswith("\n"):
            return "\n"
        if line.endswith("\r"):
            return "\r"
    return "\n"


def _insert_before_head_close(text: str, link: str, newline: str) -> str | None:
    m: re.Match[str] | None = HEAD_CLOSE_RE.search(text)
    if m is None:
        return None
    return f"{text[: m.start()]}{LINK_INDENT}{link}{newline}{m.group(0)}{text[m.end() :]}"


def _insert_after_html_open(text: str, link: str, newline: str) -> str | None:
    m: re.Match[str] | None = HTML_OPEN_RE.search(text)
    if m is None:
        return None
    head: str = f"{newline}<head>{newline}{LINK_INDENT}{link}{newline}</head>"
    return f"{text[: m.end()]}{head}{text[m.end() :]}"


def _prepend(text: str, link: str, newline: str) -> str | None:
    return f"{link}{newline}{text}"


# Ordered: the first strategy that finds its anchor wins.
INSERTION_CHAIN: Final[tuple[tuple[LinkAnchor, Callable[[str, str, str], str | None]], ...]] = (
    (LinkAnchor.BEFORE_HEAD_CLOSE, _insert_before_head_close),
    (LinkAnchor.AFTER_HTML_OPEN, _insert_after_html_open),
    (LinkAnchor.PREPENDED, _prepend),
)


def sync_manifest_link(text: str, filename: str, use_credentials: bool = False) -> LinkUpdate:
    """Update or insert the manifest link and report which transform applied.

    Note:
        When the text already holds several manifest links, each one is replaced
        by the canonical tag; duplicates are not collapsed.

    Args:
        text (str): Page content.
        filename (str): Manifest filename referenced by the link.
        use_credentials (bool): Whether the link requests credentials.

    Returns:
        LinkUpdate: Updated text plus the applied anchor.
    """
    link: str = render_manifest_link(filename, use_credentials)

    if MANIFEST_LINK_RE.search(text) is not None:
        updated: str = MANIFEST_LINK_RE.sub(lambda _m: link, text)
        logger.trace("Manifest link present; replaced with %s", link)
        return LinkUpdate(text=updated, anchor=LinkAnchor.REPLACED, changed=updated != text)

    newline: str = detect_newline(text)
    for anchor, strategy in INSERTION_CHAIN:
        result: str | None = strategy(text, link, newline)
        if result is not None:
            logger.trace("Manifest link absent; %s", anchor.value)
            return LinkUpdate(text=result, anchor=anchor, changed=True)

    # Unreachable: prepending always succeeds.
    raise AssertionError("no insertion strategy applied")


def upsert_manifest_link(text: str, filename: str, use_credentials: bool = False) -> str:
    """Return ``text`` containing the canonical manifest link tag.

    See [`sync_manifest_link`][manifestmark.pages.link.sync_manifest_link] for the rules.

    Args:
        text (str): Page content.
        filename (str): Manifest filename referenced by the link.
        use_credentials (bool): Whether the link requests credentials.

    Returns:
        str: The updated page content.
    """
    return sync_manifest_link(text, filename, use_credentials).text
