# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_paths.py
#   file_relpath : tests/manifest/test_paths.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for served-path resolution of manifest icons."""

from __future__ import annotations

import pytest

from manifestmark.manifest.paths import normalize_icons_dir, resolve_icon_src


@pytest.mark.parametrize(
    ("icons_dir", "expected"),
    [
        ("", ""),
        ("icons", "/icons"),
        ("/icons", "/icons"),
        ("icons/", "/icons"),
        ("/icons/", "/icons"),
        ("/assets/img/", "/assets/img"),
    ],
)
def test_normalize_icons_dir(icons_dir: str, expected: str) -> None:
    """The prefix gets exactly one leading and no trailing separator."""
    assert normalize_icons_dir(icons_dir) == expected


@pytest.mark.parametrize(
    ("src", "icons_dir", "expected"),
    [
        ("icon.png", "", "icon.png"),
        ("/icon.png", "", "/icon.png"),
        ("  icon.png  ", "", "icon.png"),
        ("icon.png", "icons", "/icons/icon.png"),
        ("/icon.png", "icons/", "/icons/icon.png"),
        ("/icon.png", "/icons/", "/icons/icon.png"),
        (" /a/b.png ", "/static", "/static/a/b.png"),
    ],
)
def test_resolve_icon_src(src: str, icons_dir: str, expected: str) -> None:
    """Declared paths are joined to the prefix without doubling separators."""
    assert resolve_icon_src(src, icons_dir) == expected


def test_resolve_icon_src_strips_only_one_leading_separator() -> None:
    """A doubled leading separator keeps its second slash."""
    assert resolve_icon_src("//icon.png", "icons") == "/icons//icon.png"


def test_resolve_icon_src_blank_src_stays_blank() -> None:
    """A blank source never gets a prefix."""
    assert resolve_icon_src("   ", "/icons/") == ""
