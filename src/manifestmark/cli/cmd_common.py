# topmark:header:start
#
#   project      : ManifestMark
#   file         : cmd_common.py
#   file_relpath : src/manifestmark/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Common command utilities for Click-based commands.

These helpers hold plumbing shared by several commands (console lookup, config
resolution). Exit-code policy stays in the commands.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from manifestmark.cli.console import ClickConsole
from manifestmark.cli.emitters import emit_diagnostics
from manifestmark.cli.errors import ManifestmarkConfigError
from manifestmark.cli.options import get_effective_verbosity
from manifestmark.config.logging import get_logger
from manifestmark.config.model import MutableConfig

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from manifestmark.config.logging import ManifestmarkLogger
    from manifestmark.config.model import Config

logger: ManifestmarkLogger = get_logger(__name__)


def get_console(ctx: click.Context) -> ClickConsole:
    """Return the console stored on the root context (a default one if absent)."""
    obj: object = ctx.find_root().obj
    if isinstance(obj, dict):
        console: Any = obj.get("console")
        if isinstance(console, ClickConsole):
            return console
    return ClickConsole()


def resolve_config(
    ctx: click.Context,
    *,
    config_paths: Iterable[str],
    no_config: bool,
    args: Mapping[str, Any],
    draft: MutableConfig | None = None,
) -> Config:
    """Merge config layers plus CLI arguments and freeze the result.

    Config diagnostics are printed; error-level diagnostics abort the command.

    Args:
        ctx (click.Context): Current Click context.
        config_paths (Iterable[str]): Values of ``--config``.
        no_config (bool): Value of ``--no-config``.
        args (Mapping[str, Any]): CLI overrides (see `MutableConfig.apply_args`).
        draft (MutableConfig | None): Already merged draft (e.g. one carrying
            argument-parsing diagnostics); loaded from disk when ``None``.

    Returns:
        Config: The frozen configuration.

    Raises:
        ManifestmarkConfigError: If a config file could not be read or parsed.
    """
    if draft is None:
        draft = MutableConfig.load_merged(
            extra_config_files=[Path(p) for p in config_paths],
            no_config=no_config,
        )
    draft.apply_args(args)
    config: Config = draft.freeze()
    logger.debug("Effective config files: %s", [str(p) for p in config.config_files])

    emit_diagnostics(get_console(ctx), config.diagnostics, get_effective_verbosity(ctx))
    if config.diagnostics.has_error():
        raise ManifestmarkConfigError("Invalid configuration; see errors above.")
    return config
