# topmark:header:start
#
#   project      : ManifestMark
#   file         : errors.py
#   file_relpath : src/manifestmark/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Exceptions raised by the ManifestMark orchestration layer.

The core components (assembler, validator, asset checker, link synchronizer)
never raise for malformed input. Only the steps that touch the outside world in
[`manifestmark.api`][manifestmark.api] raise, and only for conditions the caller
has to act on.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pathlib import Path

    from manifestmark.assets.checker import AssetCheckResult


class ManifestmarkRuntimeError(Exception):
    """Base class for errors raised by `manifestmark.api`."""


class ManifestWriteError(ManifestmarkRuntimeError):
    """The manifest file could not be written.

    Attributes:
        path (Path): Target path.
        cause (OSError): Underlying error.
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"Cannot write manifest to {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class MissingAssetsError(ManifestmarkRuntimeError):
    """Icon files are missing and the asset policy is ``fail``.

    Attributes:
        result (AssetCheckResult): The check that found the missing files.
    """

    def __init__(self, result: AssetCheckResult) -> None:
        missing: str = ", ".join(entry.src for entry in result.missing)
        super().__init__(f"{len(result.missing)} icon file(s) missing: {missing}")
        self.result = result
