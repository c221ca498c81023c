# topmark:header:start
#
#   project      : ManifestMark
#   file         : emitters.py
#   file_relpath : src/manifestmark/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Human-readable rendering of ManifestMark results.

Every emitter writes through a `ClickConsole` and honors the program-output
level resolved from ``-v``/``-q``:

* ``-q`` (ERROR): only errors are shown.
* default (WARNING): summaries, warnings and errors.
* ``-v`` (INFO) and above: per-file and per-icon details as well.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from manifestmark.diagnostic.model import DiagnosticLevel

if TYPE_CHECKING:
    from collections.abc import Iterable

    from manifestmark.assets.checker import AssetCheckResult
    from manifestmark.cli.console import ClickConsole
    from manifestmark.diagnostic.model import Diagnostic
    from manifestmark.manifest.validator import ValidationResult
    from manifestmark.pages.processor import PageInjectionResult


def _level_tag(console: ClickConsole, level: DiagnosticLevel) -> str:
    tag: str = f"[{level.value}]"
    return level.color(tag) if console.enable_color else tag


def emit_diagnostics(console: ClickConsole, diagnostics: Iterable[Diagnostic], vlevel: int) -> None:
    """Print config diagnostics (errors always, others unless quiet)."""
    for d in diagnostics:
        if d.level is DiagnosticLevel.ERROR:
            console.error(f"{_level_tag(console, d.level)} {d.message}")
        elif vlevel < logging.ERROR:
            console.warn(f"{_level_tag(console, d.level)} {d.message}")


def emit_validation(console: ClickConsole, result: ValidationResult, vlevel: int) -> None:
    """Print manifest validation findings."""
    if vlevel >= logging.ERROR:
        return
    if result.is_valid:
        if vlevel <= logging.INFO:
            console.print(console.styled("Manifest validation passed", fg="green"))
        return
    console.warn(f"Manifest validation: {len(result.errors)} warning(s)")
    for d in result.diagnostics:
        console.warn(f"  {_level_tag(console, d.level)} {d.message}")


def emit_assets(console: ClickConsole, result: AssetCheckResult | None, vlevel: int) -> None:
    """Print the icon existence check (missing icons, and found ones with ``-v``)."""
    if result is None or vlevel >= logging.ERROR:
        return
    if vlevel <= logging.INFO:
        for entry in result.checked_files:
            mark: str = (
                console.styled("found", fg="green")
                if entry.exists
                else console.styled("missing", fg="red")
            )
            console.print(
                f"  {mark}: {entry.src} ({entry.sizes}, {entry.type}) -> {entry.resolved_path}"
            )
    if result.valid:
        console.print(f"Icons: {result.checked} checked, all present")
        return
    console.warn(f"Icons: {len(result.missing)} of {result.checked} missing")
    for entry in result.missing:
        console.warn(
            f"  {entry.src} ({entry.sizes}, {entry.type}) not found at {entry.resolved_path}"
        )


def emit_pages(console: ClickConsole, result: PageInjectionResult | None, vlevel: int) -> None:
    """Print the page synchronization summary, per-file details and errors."""
    if result is None:
        return
    for err in result.errors:
        what: str = "directory" if err.is_directory else "file"
        console.error(f"Cannot process {what} {err.path}: {err.message}")
    if vlevel >= logging.ERROR:
        return
    if vlevel <= logging.INFO:
        for detail in result.details:
            console.print(f"  {detail.outcome.value}: {detail.path} ({detail.message})")
    console.print(
        f"Pages: {result.injected} updated, {result.skipped} unchanged, {result.failed} error(s)"
    )
