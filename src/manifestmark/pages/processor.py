# topmark:header:start
#
#   project      : ManifestMark
#   file         : processor.py
#   file_relpath : src/manifestmark/pages/processor.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Synchronize the manifest link across every page file in a directory tree.

Each matching file is read, passed through
[`sync_manifest_link`][manifestmark.pages.link.sync_manifest_link], and written
back only when its content changed. Files are processed independently: a failure
on one file is recorded and processing continues with the next.

Outcome per file:
    * ``injected``: content changed and was written.
    * ``skipped``: content already holds the canonical link (no write).
    * ``error``: reading or writing failed.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from manifestmark.config.logging import ManifestmarkLogger, get_logger
from manifestmark.pages.link import LinkUpdate, sync_manifest_link
from manifestmark.pages.walker import WalkError, iter_page_files

logger: ManifestmarkLogger = get_logger(__name__)


class PageOutcome(str, Enum):
    """Classification of a processed page file."""

    INJECTED = "injected"
    SKIPPED = "skipped"
    ERROR = "error"


@dataclass(frozen=True)
class PageDetail:
    """Per-file record.

    Attributes:
        path (Path): The processed file.
        outcome (PageOutcome): Outcome classification.
        message (str): Human-readable description (error message for failures).
    """

    path: Path
    outcome: PageOutcome
    message: str


@dataclass(frozen=True)
class PageError:
    """A failure tied to a file or to a directory that could not be listed.

    Attributes:
        path (Path): The failing file or directory.
        message (str): The error message.
        is_directory (bool): True for directory enumeration failures.
    """

    path: Path
    message: str
    is_directory: bool = False


@dataclass
class PageInjectionResult:
    """Accumulated outcome of a batch run.

    Attributes:
        injected (int): Files whose content changed and was written.
        skipped (int): Files already up to date.
        errors (list[PageError]): File and directory failures, in encounter order.
        files (list[Path]): Files that were written.
        details (list[PageDetail]): One record per processed file.
    """

    injected: int = 0
    skipped: int = 0
    errors: list[PageError] = field(default_factory=lambda: [])
    files: list[Path] = field(default_factory=lambda: [])
    details: list[PageDetail] = field(default_factory=lambda: [])

    @property
    def failed(self) -> int:
        """Number of recorded errors."""
        return len(self.errors)

    @property
    def total(self) -> int:
        """Number of files processed (including failures) plus directory failures."""
        return self.injected + self.skipped + self.failed

    def record_injected(self, path: Path, update: LinkUpdate) -> None:
        self.injected += 1
        self.files.append(path)
        self.details.append(PageDetail(path, PageOutcome.INJECTED, update.anchor.value))

    def record_skipped(self, path: Path) -> None:
        self.skipped += 1
        self.details.append(PageDetail(path, PageOutcome.SKIPPED, "Manifest link already present"))

    def record_error(self, path: Path, exc: BaseException) -> None:
        message: str = str(exc) or type(exc).__name__
        self.errors.append(PageError(path, message))
        self.details.append(PageDetail(path, PageOutcome.ERROR, message))


def read_page(path: Path) -> str:
    """Read a page as UTF-8 text without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fp:
        return fp.read()


def write_page(path: Path, text: str) -> None:
    """Write a page as UTF-8 text without newline translation."""
    with path.open("w", encoding="utf-8", newline="") as fp:
        fp.write(text)


def process_page(
    path: Path,
    filename: str,
    use_credentials: bool,
    result: PageInjectionResult,
) -> None:
    """Synchronize one file and record its outcome in ``result``.

    Args:
        path (Path): Page file.
        filename (str): Manifest filename referenced by the link.
        use_credentials (bool): Whether the link requests credentials.
        result (PageInjectionResult): Accumulator updated in place.
    """
    try:
        original: str = read_page(path)
        update: LinkUpdate = sync_manifest_link(original, filename, use_credentials)
        if update.text == original:
            logger.debug("Up to date: %s", path)
            result.record_skipped(path)
            return
        write_page(path, update.text)
    except (OSError, UnicodeError) as exc:
        logger.error("Cannot update %s: %s", path, exc)
        result.record_error(path, exc)
        return
    logger.info("Manifest link %s: %s", update.anchor.value, path)
    result.record_injected(path, update)


def process_directory(
    directory: Path | str,
    extensions: Iterable[str],
    filename: str,
    use_credentials: bool = False,
    *,
    exclude: Iterable[str] = (),
) -> PageInjectionResult:
    """Synchronize the manifest link in every matching file below ``directory``.

    A missing ``directory`` is not an error: the returned result is empty.

    Args:
        directory (Path | str): Root of the tree to scan.
        extensions (Iterable[str]): File extensions to process (case-insensitive).
        filename (str): Manifest filename referenced by the link.
        use_credentials (bool): Whether the link requests credentials.
        exclude (Iterable[str]): Gitignore-style patterns (relative to ``directory``)
            for files to leave alone.

    Returns:
        PageInjectionResult: Counts, errors and per-file details.
    """
    root = Path(directory)
    result = PageInjectionResult()
    if not root.exists():
        logger.debug("Page directory %s does not exist; nothing to do", root)
        return result

    walk_errors: list[WalkError] = []
    for path in iter_page_files(root, extensions, exclude, errors=walk_errors):
        process_page(path, filename, use_credentials, result)

    for err in walk_errors:
        result.errors.append(PageError(err.directory, err.message, is_directory=True))

    logger.debug(
        "Pages in %s: %d injected, %d skipped, %d error(s)",
        root,
        result.injected,
        result.skipped,
        result.failed,
    )
    return result
