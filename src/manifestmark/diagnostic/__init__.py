# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Diagnostics for ManifestMark (advisory findings reported as data)."""

from __future__ import annotations

from manifestmark.diagnostic.model import (
    Diagnostic,
    DiagnosticLevel,
    DiagnosticLog,
    FrozenDiagnosticLog,
)

__all__ = [
    "Diagnostic",
    "DiagnosticLevel",
    "DiagnosticLog",
    "FrozenDiagnosticLog",
]
