# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_cli_version.py
#   file_relpath : tests/cli/test_cli_version.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""CLI tests: `version` command and group behavior."""

from __future__ import annotations

from manifestmark.cli.exit_codes import ExitCode
from manifestmark.constants import MANIFESTMARK_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_package_version() -> None:
    """It prints the installed version string exactly."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.output.strip() == MANIFESTMARK_VERSION


def test_group_without_command_shows_help() -> None:
    """Invoking the group alone prints a hint and the help text."""
    result = run_cli(["--no-color"])
    assert_SUCCESS(result)
    assert "manifestmark generate" in result.output
    assert "generate" in result.output and "inject" in result.output


def test_unknown_command_is_usage_error() -> None:
    """Click rejects unknown subcommands with exit code 2."""
    result = run_cli(["frobnicate"])
    assert result.exit_code == ExitCode.USAGE_ERROR
