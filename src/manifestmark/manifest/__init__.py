# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/manifest/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Manifest construction: input model, defaults, assembly and validation."""

from __future__ import annotations

from manifestmark.manifest.assembler import (
    ManifestAssembler,
    assemble_manifest,
    serialize_manifest,
)
from manifestmark.manifest.model import ManifestConfig, ManifestDefaults, ManifestDocument
from manifestmark.manifest.paths import resolve_icon_src
from manifestmark.manifest.validator import ManifestValidator, ValidationResult, validate_manifest

__all__ = [
    "ManifestAssembler",
    "ManifestConfig",
    "ManifestDefaults",
    "ManifestDocument",
    "ManifestValidator",
    "ValidationResult",
    "assemble_manifest",
    "resolve_icon_src",
    "serialize_manifest",
    "validate_manifest",
]
