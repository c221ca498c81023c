# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_walker.py
#   file_relpath : tests/pages/test_walker.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for page file enumeration."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from manifestmark.pages.walker import (
    WalkError,
    iter_page_files,
    normalize_extensions,
    walk_files,
)

if TYPE_CHECKING:
    from pathlib import Path


def _touch(root: Path, *names: str) -> None:
    for name in names:
        p: Path = root / name
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text("x", encoding="utf-8")


def test_normalize_extensions() -> None:
    """Extensions are lowercased and lose one leading dot; blanks are dropped."""
    assert normalize_extensions([".HTML", "htm", " ", "..x"]) == frozenset({"html", "htm", ".x"})


def test_walk_files_sorted_depth_first(tmp_path: Path) -> None:
    """Files come out in sorted order with subdirectories expanded in place."""
    _touch(tmp_path, "b.html", "a/z.html", "a/b/c.html", "c.txt")
    rel: list[str] = [p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path)]
    assert rel == ["b.html", "c.txt", "a/z.html", "a/b/c.html"]


def test_iter_page_files_filters_extensions(tmp_path: Path) -> None:
    """Only accepted extensions are yielded, case-insensitively."""
    _touch(tmp_path, "index.html", "UPPER.HTML", "old.htm", "style.css", "noext", "sub/page.Htm")
    found: set[str] = {
        p.relative_to(tmp_path).as_posix() for p in iter_page_files(tmp_path, ["html", ".HTM"])
    }
    assert found == {"index.html", "UPPER.HTML", "old.htm", "sub/page.Htm"}


def test_iter_page_files_exclude_patterns(tmp_path: Path) -> None:
    """Gitignore-style patterns are matched relative to the root."""
    _touch(tmp_path, "index.html", "drafts/a.html", "docs/keep.html", "docs/skip.html")
    found: list[str] = [
        p.relative_to(tmp_path).as_posix()
        for p in iter_page_files(tmp_path, ["html"], ["drafts/", "docs/skip.html", "  "])
    ]
    assert sorted(found) == ["docs/keep.html", "index.html"]


@pytest.mark.skipif(sys.platform == "win32", reason="symlinks need privileges on Windows")
def test_directory_symlinks_are_not_followed(tmp_path: Path) -> None:
    """A symlinked directory is neither descended into nor yielded."""
    _touch(tmp_path, "real/page.html")
    os.symlink(tmp_path / "real", tmp_path / "link", target_is_directory=True)
    rel: list[str] = [p.relative_to(tmp_path).as_posix() for p in walk_files(tmp_path)]
    assert rel == ["real/page.html"]


def test_walk_errors_collected(tmp_path: Path) -> None:
    """A directory that cannot be listed is recorded when a collector is given."""
    missing: Path = tmp_path / "gone"
    errors: list[WalkError] = []
    assert list(walk_files(missing, errors)) == []
    assert len(errors) == 1
    assert errors[0].directory == missing


def test_walk_errors_raise_without_collector(tmp_path: Path) -> None:
    """Without a collector the listing error propagates."""
    with pytest.raises(OSError):
        list(walk_files(tmp_path / "gone"))
