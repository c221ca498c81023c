# topmark:header:start
#
#   project      : ManifestMark
#   file         : walker.py
#   file_relpath : src/manifestmark/pages/walker.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Enumerate page files below a directory.

Traversal and filtering are kept apart: [`walk_files`][manifestmark.pages.walker.walk_files]
is a worklist traversal that classifies each entry (directory or file) and yields
files only, while [`iter_page_files`][manifestmark.pages.walker.iter_page_files]
applies the extension and exclude-pattern policy on top of it.

Directory symlinks are not followed. Entries are visited in sorted order per
directory so results are deterministic on a given filesystem.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from pathspec import PathSpec
from pathspec.patterns.gitwildmatch import GitWildMatchPattern

from manifestmark.config.logging import ManifestmarkLogger, get_logger

logger: ManifestmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class WalkError:
    """A directory that could not be enumerated.

    Attributes:
        directory (Path): The directory that failed.
        message (str): The error message.
    """

    directory: Path
    message: str


def normalize_extensions(extensions: Iterable[str]) -> frozenset[str]:
    """Lowercase extensions and strip one leading ``.`` (``".HTML"`` -> ``"html"``)."""
    out: set[str] = set()
    for ext in extensions:
        e: str = ext.strip().lower()
        if e.startswith("."):
            e = e[1:]
        if e:
            out.add(e)
    return frozenset(out)


def file_extension(path: Path) -> str:
    """Return the lowercase extension of ``path`` without the leading ``.``."""
    return path.suffix.lower()[1:]


def walk_files(root: Path, errors: list[WalkError] | None = None) -> Iterator[Path]:
    """Yield every regular (non-directory) entry below ``root``.

    Args:
        root (Path): Directory to traverse.
        errors (list[WalkError] | None): When given, enumeration failures are
            appended here instead of being raised.

    Yields:
        Path: File paths, directories expanded depth-first in sorted order.

    Raises:
        OSError: If a directory cannot be listed and ``errors`` is ``None``.
    """
    pending: list[Path] = [root]
    while pending:
        directory: Path = pending.pop()
        try:
            entries: list[Path] = sorted(directory.iterdir())
        except OSError as exc:
            if errors is None:
                raise
            logger.error("Cannot list directory %s: %s", directory, exc)
            errors.append(WalkError(directory=directory, message=str(exc)))
            continue

        subdirs: list[Path] = []
        for entry in entries:
            if entry.is_dir() and not entry.is_symlink():
                subdirs.append(entry)
            elif not entry.is_dir():
                yield entry
        # Reverse so that pop() visits subdirectories in sorted order.
        pending.extend(reversed(subdirs))


def _rel_for_match(path: Path, base: Path) -> str:
    """Return a POSIX-style relative path (or absolute as fallback) for PathSpec matching."""
    try:
        return path.relative_to(base).as_posix()
    except ValueError:
        return path.as_posix()


def iter_page_files(
    root: Path,
    extensions: Iterable[str],
    exclude: Iterable[str] = (),
    *,
    errors: list[WalkError] | None = None,
) -> Iterator[Path]:
    """Yield files below ``root`` whose extension is in ``extensions``.

    Args:
        root (Path): Directory to traverse.
        extensions (Iterable[str]): Accepted extensions (case-insensitive, with or
            without a leading ``.``).
        exclude (Iterable[str]): Gitignore-style patterns matched against the path
            relative to ``root``.
        errors (list[WalkError] | None): Collector for enumeration failures.

    Yields:
        Path: Matching page files.
    """
    accepted: frozenset[str] = normalize_extensions(extensions)
    patterns: list[str] = [p for p in exclude if p.strip()]
    spec: PathSpec | None = PathSpec.from_lines(GitWildMatchPattern, patterns) if patterns else None

    for path in walk_files(root, errors):
        if file_extension(path) not in accepted:
            continue
        if spec is not None and spec.match_file(_rel_for_match(path, root)):
            logger.debug("Excluded by pattern: %s", path)
            continue
        yield path
