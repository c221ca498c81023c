# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_processor.py
#   file_relpath : tests/pages/test_processor.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for batch synchronization of page files."""

from __future__ import annotations

import os
import sys
from typing import TYPE_CHECKING

import pytest

from manifestmark.pages.processor import (
    PageInjectionResult,
    PageOutcome,
    process_directory,
)
from tests.conftest import read_text, write_text

if TYPE_CHECKING:
    from pathlib import Path

LINK = '<link rel="manifest" href="/site.webmanifest">'


def test_missing_directory_is_not_an_error(tmp_path: Path) -> None:
    """A directory that does not exist yields an empty result."""
    result: PageInjectionResult = process_directory(tmp_path / "nope", ["html"], "site.webmanifest")
    assert (result.injected, result.skipped, result.failed, result.details) == (0, 0, 0, [])


def test_injects_and_skips(tmp_path: Path) -> None:
    """Changed files are written and counted; up-to-date files are left alone."""
    page: Path = write_text(tmp_path / "index.html", "<head><title>T</title></head>")
    done: Path = write_text(tmp_path / "sub" / "done.htm", f"<head>{LINK}</head>")
    other: Path = write_text(tmp_path / "style.css", "</head>")
    done_mtime: int = done.stat().st_mtime_ns

    result: PageInjectionResult = process_directory(tmp_path, ["html", "htm"], "site.webmanifest")

    assert result.injected == 1
    assert result.skipped == 1
    assert result.failed == 0
    assert result.files == [page]
    assert LINK in read_text(page)
    assert read_text(other) == "</head>"
    assert done.stat().st_mtime_ns == done_mtime
    assert [(d.path, d.outcome) for d in result.details] == [
        (page, PageOutcome.INJECTED),
        (done, PageOutcome.SKIPPED),
    ]


def test_second_run_skips_everything(tmp_path: Path) -> None:
    """After one run every page is up to date."""
    write_text(tmp_path / "a.html", "<html><body></body></html>")
    write_text(tmp_path / "b.html", "fragment")
    process_directory(tmp_path, ["html"], "site.webmanifest", True)

    again: PageInjectionResult = process_directory(tmp_path, ["html"], "site.webmanifest", True)
    assert (again.injected, again.skipped) == (0, 2)


def test_per_file_failure_is_isolated(tmp_path: Path) -> None:
    """A file that cannot be decoded is recorded and the batch continues."""
    bad: Path = tmp_path / "a-bad.html"
    bad.write_bytes(b"<head>\xff\xfe</head>")
    good: Path = write_text(tmp_path / "b-good.html", "<head></head>")

    result: PageInjectionResult = process_directory(tmp_path, ["html"], "site.webmanifest")

    assert result.failed == 1
    assert result.errors[0].path == bad
    assert result.errors[0].is_directory is False
    assert result.errors[0].message
    assert result.injected == 1
    assert LINK in read_text(good)
    assert [d.outcome for d in result.details] == [PageOutcome.ERROR, PageOutcome.INJECTED]
    assert result.total == 2


def test_crlf_is_preserved(tmp_path: Path) -> None:
    """Line endings outside the inserted tag are kept byte for byte."""
    page: Path = write_text(tmp_path / "index.html", "<html>\r\n<head>\r\n</head>\r\n</html>\r\n")
    process_directory(tmp_path, ["html"], "site.webmanifest")
    assert read_text(page) == f"<html>\r\n<head>\r\n  {LINK}\r\n</head>\r\n</html>\r\n"


def test_exclude_patterns_leave_pages_untouched(tmp_path: Path) -> None:
    """Excluded pages are neither processed nor counted."""
    kept: Path = write_text(tmp_path / "drafts" / "wip.html", "<head></head>")
    write_text(tmp_path / "index.html", "<head></head>")

    result: PageInjectionResult = process_directory(
        tmp_path, ["html"], "site.webmanifest", exclude=["drafts/"]
    )

    assert result.injected == 1
    assert read_text(kept) == "<head></head>"


def test_directory_named_like_a_page_is_traversed(tmp_path: Path) -> None:
    """Directories are classified before extension filtering."""
    inner: Path = write_text(tmp_path / "weird.html" / "inner.html", "x")
    result: PageInjectionResult = process_directory(tmp_path, ["html"], "site.webmanifest")
    assert result.files == [inner]


def test_directory_that_cannot_be_listed(tmp_path: Path) -> None:
    """A root that is not a listable directory is one directory error."""
    blocker: Path = write_text(tmp_path / "index.html", "<head></head>")

    result: PageInjectionResult = process_directory(blocker, ["html"], "site.webmanifest")

    assert len(result.errors) == 1
    assert result.errors[0].path == blocker
    assert result.errors[0].is_directory is True
    assert result.details == []
    assert read_text(blocker) == "<head></head>"


@pytest.mark.skipif(
    sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
    reason="directory permissions are not enforced here",
)
def test_unlistable_subdirectory_does_not_stop_siblings(tmp_path: Path) -> None:
    """A locked sub-directory is reported while its siblings are still processed."""
    page: Path = write_text(tmp_path / "index.html", "<head></head>")
    locked: Path = tmp_path / "locked"
    write_text(locked / "inner.html", "<head></head>")
    locked.chmod(0)
    try:
        result: PageInjectionResult = process_directory(tmp_path, ["html"], "site.webmanifest")
    finally:
        locked.chmod(0o755)

    assert result.injected == 1
    assert LINK in read_text(page)
    assert [(e.path, e.is_directory) for e in result.errors] == [(locked, True)]
    assert [d.path for d in result.details] == [page]
    assert all(not d.path.is_relative_to(locked) for d in result.details)
    assert read_text(locked / "inner.html") == "<head></head>"
