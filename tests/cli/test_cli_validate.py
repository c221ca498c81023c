# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_cli_validate.py
#   file_relpath : tests/cli/test_cli_validate.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""CLI tests for the `validate` command."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from manifestmark.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_FAILURE, assert_SUCCESS, run_cli_in
from tests.conftest import write_text

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


GOOD: dict[str, Any] = {
    "name": "App",
    "icons": [{"src": "/icons/a.png", "sizes": "192x192", "type": "image/png"}],
}


def test_validate_clean_manifest(tmp_path: Path) -> None:
    """A manifest without findings passes."""
    write_text(tmp_path / "site.webmanifest", json.dumps(GOOD))
    result: Result = run_cli_in(tmp_path, ["--no-color", "validate", "site.webmanifest"])
    assert_SUCCESS(result)
    assert "site.webmanifest: OK" in result.output


def test_validate_reports_findings(tmp_path: Path) -> None:
    """Findings are listed and the command exits FAILURE."""
    write_text(tmp_path / "m.json", json.dumps({"icons": [{"purpose": "any maskable"}]}))
    result: Result = run_cli_in(tmp_path, ["--no-color", "validate", "m.json"])
    assert_FAILURE(result)
    assert "Manifest validation: 3 warning(s)" in result.output
    assert '"name" or "short_name"' in result.output


def test_validate_checks_icons_with_public_dir(tmp_path: Path) -> None:
    """``--public-dir`` adds the icon existence check."""
    write_text(tmp_path / "site.webmanifest", json.dumps(GOOD))

    missing: Result = run_cli_in(
        tmp_path, ["--no-color", "validate", "site.webmanifest", "--public-dir", "."]
    )
    assert_FAILURE(missing)
    assert "Icons: 1 of 1 missing" in missing.output

    write_text(tmp_path / "icons" / "a.png", "")
    present: Result = run_cli_in(
        tmp_path, ["--no-color", "validate", "site.webmanifest", "--public-dir", "."]
    )
    assert_SUCCESS(present)


def test_validate_invalid_json(tmp_path: Path) -> None:
    """Content that is not a JSON object is an error."""
    write_text(tmp_path / "a.json", "{")
    write_text(tmp_path / "b.json", "[]")
    bad_json: Result = run_cli_in(tmp_path, ["--no-color", "validate", "a.json"])
    assert_FAILURE(bad_json)
    assert "is not valid JSON" in bad_json.output
    not_object: Result = run_cli_in(tmp_path, ["--no-color", "validate", "b.json"])
    assert_FAILURE(not_object)
    assert "must contain a JSON object" in not_object.output


def test_validate_unreadable_file_is_io_error(tmp_path: Path) -> None:
    """A manifest path that cannot be read exits IO_ERROR."""
    result: Result = run_cli_in(tmp_path, ["--no-color", "validate", "missing.json"])
    assert result.exit_code == ExitCode.IO_ERROR, result.output


def test_validate_non_list_icons_with_public_dir(tmp_path: Path) -> None:
    """A scalar ``icons`` value is a finding, not a crash of the icon check."""
    write_text(tmp_path / "m.json", json.dumps({"name": "x", "icons": 5}))
    result: Result = run_cli_in(tmp_path, ["--no-color", "validate", "m.json", "--public-dir", "."])
    assert_FAILURE(result)
    assert result.exception is None or isinstance(result.exception, SystemExit)
    assert "Icons array should be provided" in result.output
    assert "Icons: 0 checked, all present" in result.output
