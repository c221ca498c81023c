# topmark:header:start
#
#   project      : ManifestMark
#   file         : errors.py
#   file_relpath : src/manifestmark/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Exceptions for the ManifestMark CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes.

Styling:
    Exceptions prefer the project console if one is stored on the Click context
    (see `show()`); otherwise they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from manifestmark.cli.exit_codes import ExitCode


class ManifestmarkError(click.ClickException):
    """Base class for all ManifestMark CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx: click.Context | None = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ManifestmarkUsageError(ManifestmarkError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class ManifestmarkConfigError(ManifestmarkError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class ManifestmarkIOError(ManifestmarkError):
    """Error for I/O errors reading/writing the manifest file."""

    exit_code = ExitCode.IO_ERROR


class ManifestmarkAssetsMissingError(ManifestmarkError):
    """Error when icon files are missing and the asset policy is ``fail``."""

    exit_code = ExitCode.ASSETS_MISSING
