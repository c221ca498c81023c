# topmark:header:start
#
#   project      : ManifestMark
#   file         : version.py
#   file_relpath : src/manifestmark/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark `version` command.

Prints the ManifestMark version as installed in the active Python environment.
"""

from __future__ import annotations

import click

from manifestmark.cli.cmd_common import get_console
from manifestmark.constants import MANIFESTMARK_VERSION


@click.command(
    name="version",
    help="Show the current version of ManifestMark.",
)
def version_command() -> None:
    """Show the current version of ManifestMark."""
    console = get_console(click.get_current_context())
    console.print(MANIFESTMARK_VERSION)
