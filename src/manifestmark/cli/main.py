# topmark:header:start
#
#   project      : ManifestMark
#   file         : main.py
#   file_relpath : src/manifestmark/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark command-line entry point.

Group-level options (verbosity, color) are resolved once and stored in
``ctx.obj``; subcommands read them back through `cmd_common.get_console` and
`options.get_effective_verbosity`.

Internal logging is configured from the ``MANIFESTMARK_LOG_LEVEL`` environment
variable and is independent of ``-v``/``-q``, which only control program output.
"""

from __future__ import annotations

import click

from manifestmark.cli.commands.generate import generate_command
from manifestmark.cli.commands.inject import inject_command
from manifestmark.cli.commands.validate import validate_command
from manifestmark.cli.commands.version import version_command
from manifestmark.cli.console import ClickConsole
from manifestmark.cli.options import common_verbose_options, resolve_verbosity
from manifestmark.config.logging import get_logger, resolve_env_log_level, setup_logging

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity, logging, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; ``obj`` and ``color`` are set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        no_color (bool): Whether ``--no-color`` was passed.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool = not no_color
    ctx.color = enable_color
    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ManifestMark: generate a web app manifest and keep page links to it in sync.",
)
@common_verbose_options
@click.option("--no-color", "no_color", is_flag=True, help="Disable colored output.")
@click.pass_context
def cli(ctx: click.Context, verbose: int, quiet: int, no_color: bool) -> None:
    """Entry point for the ManifestMark CLI."""
    init_common_state(ctx, verbose=verbose, quiet=quiet, no_color=no_color)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print("Hint: use 'manifestmark generate' to build the manifest.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(generate_command)

cli.add_command(inject_command)

cli.add_command(validate_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
