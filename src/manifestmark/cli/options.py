# topmark:header:start
#
#   project      : ManifestMark
#   file         : options.py
#   file_relpath : src/manifestmark/cli/options.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Common CLI option utilities for the ManifestMark CLI.

This module centralizes reusable options (verbosity, config) and their
resolution logic so commands and groups can stay thin.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import ParamSpec, TypeVar

import click

from manifestmark.cli.errors import ManifestmarkUsageError
from manifestmark.config.args import parse_list
from manifestmark.config.logging import TRACE_LEVEL, get_logger

P = ParamSpec("P")
R = TypeVar("R")

logger = get_logger(__name__)


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve the program-output level from ``-v``/``-q`` counts.

    Args:
        verbose_count (int): Number of times ``-v`` was passed.
        quiet_count (int): Number of times ``-q`` was passed.

    Returns:
        int: A `logging` level: TRACE (``-vvv``), DEBUG (``-vv``), INFO (``-v``),
            ERROR (``-q``) or WARNING (default).

    Raises:
        ManifestmarkUsageError: If both flags are used.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise ManifestmarkUsageError(
            "The '--verbose' and '--quiet' options are mutually exclusive."
        )

    if verbose_count >= 3:
        return TRACE_LEVEL
    if verbose_count == 2:
        return logging.DEBUG
    if verbose_count == 1:
        return logging.INFO
    if quiet_count >= 1:
        return logging.ERROR
    return logging.WARNING


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add counting ``-v/--verbose`` and ``-q/--quiet`` options to a command."""
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase output detail (per-file results with -v).",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Only report errors.",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add ``--no-config`` and repeatable ``--config FILE`` options to a command."""
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Ignore manifestmark.toml / pyproject.toml in the working directory.",
    )(f)
    f = click.option(
        "--config",
        "config_paths",
        multiple=True,
        metavar="FILE",
        type=click.Path(exists=True, file_okay=True, dir_okay=False, readable=True),
        help="Additional config file(s) to load and merge.",
    )(f)
    return f


def common_inject_options(f: Callable[P, R]) -> Callable[P, R]:
    """Add the page-synchronization options shared by ``generate`` and ``inject``."""
    f = click.option(
        "--ext",
        "extensions",
        multiple=True,
        metavar="EXT",
        callback=split_extensions,
        help="Page file extension to process (repeatable or space-separated). "
        "Default: html htm.",
    )(f)
    f = click.option(
        "--crossorigin-credentials/--no-crossorigin-credentials",
        "crossorigin_credentials",
        default=None,
        help='Add crossorigin="use-credentials" to the manifest link.',
    )(f)
    f = click.option(
        "--exclude",
        "exclude",
        multiple=True,
        metavar="PATTERN",
        help="Gitignore-style pattern of page files to leave alone (repeatable).",
    )(f)
    return f


def split_extensions(
    _ctx: click.Context,
    _param: click.Parameter,
    value: tuple[str, ...],
) -> tuple[str, ...]:
    """Flatten repeated and space-separated ``--ext`` values."""
    out: list[str] = []
    for item in value:
        out.extend(parse_list(item))
    return tuple(out)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output level stored on the root context (WARNING if unset)."""
    obj: object = ctx.find_root().obj
    if isinstance(obj, dict):
        level: object = obj.get("verbosity_level")
        if isinstance(level, int):
            return level
    return logging.WARNING
