# topmark:header:start
#
#   project      : ManifestMark
#   file         : validate.py
#   file_relpath : src/manifestmark/cli/commands/validate.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark `validate` command.

Loads an existing manifest file and reports the same advisory findings the
`generate` command reports. With ``--public-dir`` the icon files are checked as
well. Exits with FAILURE when there is any finding, so the command can gate CI.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import click

from manifestmark.assets.checker import AssetCheckResult, AssetExistenceChecker
from manifestmark.cli.cmd_common import get_console
from manifestmark.cli.emitters import emit_assets, emit_validation
from manifestmark.cli.errors import ManifestmarkError, ManifestmarkIOError
from manifestmark.cli.exit_codes import ExitCode
from manifestmark.cli.options import get_effective_verbosity
from manifestmark.manifest.validator import ManifestValidator, ValidationResult


def load_manifest(path: Path) -> dict[str, Any]:
    """Read a manifest JSON object from ``path``.

    Raises:
        ManifestmarkIOError: If the file cannot be read.
        ManifestmarkError: If the content is not a JSON object.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ManifestmarkIOError(f"Cannot read {path}: {exc.strerror or exc}") from exc
    try:
        data: Any = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ManifestmarkError(f"{path} is not valid JSON: {exc.msg} (line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise ManifestmarkError(f"{path} must contain a JSON object")
    return data


@click.command(
    name="validate",
    help="Validate an existing manifest file.",
)
@click.argument(
    "manifest",
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--public-dir",
    "public_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Also check that icon files exist below this directory.",
)
def validate_command(*, manifest: Path, public_dir: Path | None) -> None:
    """Validate a manifest file."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    document: dict[str, Any] = load_manifest(manifest)
    result: ValidationResult = ManifestValidator().validate(document)
    emit_validation(console, result, vlevel)

    assets: AssetCheckResult | None = None
    if public_dir is not None:
        assets = AssetExistenceChecker().check(document.get("icons"), public_dir, "")
        emit_assets(console, assets, vlevel)

    if not result.is_valid or (assets is not None and not assets.valid):
        ctx.exit(ExitCode.FAILURE)
    if vlevel < logging.ERROR:
        console.print(f"{manifest}: OK")
