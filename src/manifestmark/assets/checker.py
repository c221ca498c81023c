# topmark:header:start
#
#   project      : ManifestMark
#   file         : checker.py
#   file_relpath : src/manifestmark/assets/checker.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Check that the icon files referenced by a manifest exist on disk.

The check is advisory: it reports missing files and leaves the decision (ignore,
warn, fail) to the caller.

Path convention:
    One leading ``/`` is stripped from an icon's ``src`` and the remainder is
    joined to ``base_dir`` and ``icons_dir``. Joining is segment-wise, so a
    leading ``/`` on ``icons_dir`` never makes the result escape ``base_dir``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from manifestmark.config.logging import ManifestmarkLogger, get_logger
from manifestmark.constants import UNSPECIFIED

logger: ManifestmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class AssetEntry:
    """One inspected icon.

    Attributes:
        src (str): The icon's ``src`` as declared in the manifest.
        resolved_path (Path): Filesystem path that was tested.
        sizes (str): Declared ``sizes`` or ``"unspecified"``.
        type (str): Declared MIME ``type`` or ``"unspecified"``.
        exists (bool): Whether ``resolved_path`` exists.
    """

    src: str
    resolved_path: Path
    sizes: str = UNSPECIFIED
    type: str = UNSPECIFIED
    exists: bool = False


@dataclass
class AssetCheckResult:
    """Aggregated result of an asset existence check.

    Attributes:
        checked_files (list[AssetEntry]): Every icon inspected, in input order.
        missing (list[AssetEntry]): The subset of ``checked_files`` not found on disk.
    """

    checked_files: list[AssetEntry] = field(default_factory=lambda: [])
    missing: list[AssetEntry] = field(default_factory=lambda: [])

    @property
    def checked(self) -> int:
        """Number of icons inspected (icons without ``src`` are not counted)."""
        return len(self.checked_files)

    @property
    def valid(self) -> bool:
        """True iff no inspected icon is missing."""
        return not self.missing


def resolve_asset_path(src: str, base_dir: Path | str, icons_dir: str = "") -> Path:
    """Return the filesystem path of an icon ``src`` under ``base_dir``/``icons_dir``.

    Args:
        src (str): Icon path as declared in the manifest.
        base_dir (Path | str): Filesystem root the site is served from.
        icons_dir (str): Icons directory (URL-style, may be empty).

    Returns:
        Path: The joined path (not resolved, not checked).
    """
    rel: str = src[1:] if src.startswith("/") else src
    segments: list[str] = [s for s in f"{icons_dir}/{rel}".replace("\\", "/").split("/") if s]
    return Path(base_dir).joinpath(*segments)


class AssetExistenceChecker:
    """Report which icon files referenced by a manifest are absent."""

    def check(
        self,
        icons: Iterable[Mapping[str, Any]] | object,
        base_dir: Path | str,
        icons_dir: str = "",
    ) -> AssetCheckResult:
        """Test each icon with a non-empty ``src`` for existence.

        Args:
            icons (Iterable[Mapping[str, Any]] | object): Icon descriptors; anything
                other than a list or tuple is treated as no icons.
            base_dir (Path | str): Filesystem root the site is served from.
            icons_dir (str): Icons directory joined between ``base_dir`` and ``src``.

        Returns:
            AssetCheckResult: Every checked icon plus the missing subset.
        """
        result = AssetCheckResult()
        entries: Iterable[object] = ()
        if isinstance(icons, (list, tuple)):
            entries = icons
        elif icons is not None:
            logger.debug("Ignoring non-list icons value of type %s", type(icons).__name__)
        for icon in entries:
            src: object = icon.get("src") if isinstance(icon, Mapping) else None
            if not isinstance(src, str) or not src:
                continue
            path: Path = resolve_asset_path(src, base_dir, icons_dir)
            exists: bool = path.exists()
            entry = AssetEntry(
                src=src,
                resolved_path=path,
                sizes=str(icon.get("sizes") or UNSPECIFIED),
                type=str(icon.get("type") or UNSPECIFIED),
                exists=exists,
            )
            result.checked_files.append(entry)
            if not exists:
                logger.debug("Icon asset not found: %s -> %s", src, path)
                result.missing.append(entry)
            else:
                logger.trace("Icon asset found: %s -> %s", src, path)
        logger.debug(
            "Asset check: %d checked, %d missing", result.checked, len(result.missing)
        )
        return result


def check_icon_assets(
    icons: Iterable[Mapping[str, Any]] | object,
    base_dir: Path | str,
    icons_dir: str = "",
) -> AssetCheckResult:
    """Run [`AssetExistenceChecker.check`][manifestmark.assets.checker.AssetExistenceChecker.check]."""
    return AssetExistenceChecker().check(icons, base_dir, icons_dir)
