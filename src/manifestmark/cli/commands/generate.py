# topmark:header:start
#
#   project      : ManifestMark
#   file         : generate.py
#   file_relpath : src/manifestmark/cli/commands/generate.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark `generate` command.

Builds the web app manifest from config files and options, validates it,
optionally checks that icon files exist, writes it to the public directory and
synchronizes the manifest link across page files.

Examples:
    Generate with defaults from ``manifestmark.toml``:

        $ manifestmark generate

    Override members on the command line:

        $ manifestmark generate --name "My App" --short-name App --public-dir dist \\
            --icons '[{"src": "icon-192.png", "sizes": "192x192", "type": "image/png"}]'
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from manifestmark.api import GenerationReport, generate
from manifestmark.cli.cmd_common import get_console, resolve_config
from manifestmark.cli.emitters import emit_assets, emit_pages, emit_validation
from manifestmark.cli.errors import ManifestmarkAssetsMissingError, ManifestmarkIOError
from manifestmark.cli.exit_codes import ExitCode
from manifestmark.cli.options import (
    common_config_options,
    common_inject_options,
    get_effective_verbosity,
)
from manifestmark.config.args import parse_comma_separated_list, parse_json_list
from manifestmark.config.model import Config, MutableConfig
from manifestmark.config.types import AssetPolicy
from manifestmark.errors import ManifestWriteError, MissingAssetsError
from manifestmark.manifest.assembler import serialize_manifest


@click.command(
    name="generate",
    help="Generate the web app manifest and link it from page files.",
)
@click.option("--name", default=None, help="Application name.")
@click.option("--short-name", "short_name", default=None, help="Short application name.")
@click.option("--description", default=None, help="Application description.")
@click.option("--start-url", "start_url", default=None, help="Start URL (default: /).")
@click.option("--scope", default=None, help="Navigation scope (default: /).")
@click.option("--display", default=None, help="Display mode (default: standalone).")
@click.option("--orientation", default=None, help="Default orientation (default: any).")
@click.option("--theme-color", "theme_color", default=None, help="Theme color (default: #ffffff).")
@click.option(
    "--background-color",
    "background_color",
    default=None,
    help="Background color (default: #ffffff).",
)
@click.option("--lang", default=None, help="Primary language tag.")
@click.option("--dir", "text_dir", default=None, help="Text direction: ltr, rtl or auto.")
@click.option("--id", "app_id", default=None, help="Application identity.")
@click.option("--icons", "icons_json", default=None, metavar="JSON", help="Icons as a JSON array.")
@click.option(
    "--shortcuts",
    "shortcuts_json",
    default=None,
    metavar="JSON",
    help="Shortcuts as a JSON array.",
)
@click.option(
    "--categories",
    "categories_csv",
    default=None,
    metavar="CSV",
    help="Comma-separated categories.",
)
@click.option("--icons-dir", "icons_dir", default=None, help="Icons directory (default: /icons/).")
@click.option(
    "--public-dir",
    "public_dir",
    default=None,
    type=click.Path(file_okay=False, path_type=Path),
    help="Directory to write the manifest to and scan for pages (default: .).",
)
@click.option(
    "--filename",
    default=None,
    help="Manifest filename (default: site.webmanifest).",
)
@click.option(
    "--inject/--no-inject",
    "inject",
    default=None,
    help="Synchronize the manifest link in page files (default: on).",
)
@common_inject_options
@click.option(
    "--validate-assets/--no-validate-assets",
    "validate_assets",
    default=None,
    help="Check that icon files exist under the public directory (default: on).",
)
@click.option(
    "--asset-policy",
    "asset_policy",
    type=click.Choice([p.value for p in AssetPolicy], case_sensitive=False),
    default=None,
    help="What to do about missing icon files (default: warn).",
)
@click.option("--print-json", "print_json", is_flag=True, help="Also print the manifest JSON.")
@click.option("--strict", is_flag=True, help="Exit non-zero when any page file fails.")
@common_config_options
def generate_command(
    *,
    name: str | None,
    short_name: str | None,
    description: str | None,
    start_url: str | None,
    scope: str | None,
    display: str | None,
    orientation: str | None,
    theme_color: str | None,
    background_color: str | None,
    lang: str | None,
    text_dir: str | None,
    app_id: str | None,
    icons_json: str | None,
    shortcuts_json: str | None,
    categories_csv: str | None,
    icons_dir: str | None,
    public_dir: Path | None,
    filename: str | None,
    inject: bool | None,
    extensions: tuple[str, ...],
    crossorigin_credentials: bool | None,
    exclude: tuple[str, ...],
    validate_assets: bool | None,
    asset_policy: str | None,
    print_json: bool,
    strict: bool,
    config_paths: tuple[str, ...],
    no_config: bool,
) -> None:
    """Generate the manifest, then synchronize page links."""
    ctx: click.Context = click.get_current_context()
    console = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    draft: MutableConfig = MutableConfig.load_merged(
        extra_config_files=[Path(p) for p in config_paths],
        no_config=no_config,
    )
    icons = parse_json_list(icons_json, what="--icons", diagnostics=draft.diagnostics)
    shortcuts = parse_json_list(shortcuts_json, what="--shortcuts", diagnostics=draft.diagnostics)
    categories = parse_comma_separated_list(categories_csv) if categories_csv is not None else None

    config: Config = resolve_config(
        ctx,
        config_paths=config_paths,
        no_config=no_config,
        draft=draft,
        args={
            "name": name,
            "short_name": short_name,
            "description": description,
            "start_url": start_url,
            "scope": scope,
            "display": display,
            "orientation": orientation,
            "theme_color": theme_color,
            "background_color": background_color,
            "lang": lang,
            "dir": text_dir,
            "id": app_id,
            "icons": icons,
            "shortcuts": shortcuts,
            "categories": categories,
            "icons_dir": icons_dir,
            "public_dir": public_dir,
            "filename": filename,
            "inject": inject,
            "extensions": extensions,
            "crossorigin_credentials": crossorigin_credentials,
            "exclude": exclude,
            "validate_assets": validate_assets,
            "asset_policy": asset_policy,
        },
    )

    try:
        report: GenerationReport = generate(config)
    except MissingAssetsError as exc:
        emit_assets(console, exc.result, vlevel)
        raise ManifestmarkAssetsMissingError(str(exc)) from exc
    except ManifestWriteError as exc:
        raise ManifestmarkIOError(str(exc)) from exc

    if print_json:
        console.print(serialize_manifest(report.manifest))
    emit_validation(console, report.validation, vlevel)
    emit_assets(console, report.assets, vlevel)
    emit_pages(console, report.pages, vlevel)
    if vlevel < logging.ERROR:
        console.print(f"Manifest written: {report.manifest_path}")

    if strict and report.pages is not None and report.pages.failed:
        ctx.exit(ExitCode.FAILURE)
