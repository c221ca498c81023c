# topmark:header:start
#
#   project      : ManifestMark
#   file         : inject.py
#   file_relpath : src/manifestmark/cli/commands/inject.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark `inject` command.

Synchronizes the manifest ``<link>`` tag across the page files of a directory
without touching the manifest itself.

Examples:
        $ manifestmark inject dist
        $ manifestmark inject dist --ext "html htm xhtml" --exclude "drafts/"
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from manifestmark.api import sync_pages
from manifestmark.cli.cmd_common import get_console, resolve_config
from manifestmark.cli.emitters import emit_pages
from manifestmark.cli.exit_codes import ExitCode
from manifestmark.cli.options import (
    common_config_options,
    common_inject_options,
    get_effective_verbosity,
)
from manifestmark.config.logging import get_logger
from manifestmark.config.model import Config
from manifestmark.pages.processor import PageInjectionResult

logger = get_logger(__name__)


@click.command(
    name="inject",
    help="Add or update the manifest link in page files below DIRECTORY "
    "(default: the configured public directory).",
)
@click.argument(
    "directory",
    required=False,
    type=click.Path(file_okay=False, path_type=Path),
)
@click.option(
    "--filename",
    default=None,
    help="Manifest filename referenced by the link (default: site.webmanifest).",
)
@common_inject_options
@click.option("--strict", is_flag=True, help="Exit non-zero when any page file fails.")
@common_config_options
def inject_command(
    *,
    directory: Path | None,
    filename: str | None,
    extensions: tuple[str, ...],
    crossorigin_credentials: bool | None,
    exclude: tuple[str, ...],
    strict: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Synchronize the manifest link in page files."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    config: Config = resolve_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        args={
            "public_dir": directory,
            "filename": filename,
            "extensions": extensions,
            "crossorigin_credentials": crossorigin_credentials,
            "exclude": exclude,
        },
    )

    if not config.public_dir.exists():
        logger.debug("Directory %s does not exist", config.public_dir)
        if vlevel < logging.ERROR:
            console.warn(f"Directory not found: {config.public_dir} (nothing to do)")

    result: PageInjectionResult = sync_pages(
        config.public_dir,
        filename=config.filename,
        extensions=config.inject_extensions,
        use_credentials=config.crossorigin_credentials,
        exclude=config.inject_exclude,
    )
    emit_pages(console, result, vlevel)

    if strict and result.failed:
        ctx.exit(ExitCode.FAILURE)
