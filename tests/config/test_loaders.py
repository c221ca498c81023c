# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_loaders.py
#   file_relpath : tests/config/test_loaders.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for TOML loading and config file discovery."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from tomlkit.exceptions import ParseError as TomlkitParseError

from manifestmark.config.loaders import (
    discover_config_file,
    extract_config_table,
    load_toml_dict,
    parse_toml_file,
)

if TYPE_CHECKING:
    from pathlib import Path


def test_load_toml_dict_returns_plain_values(tmp_path: Path) -> None:
    """Parsed documents are unwrapped into plain Python values."""
    path: Path = tmp_path / "manifestmark.toml"
    path.write_text('[manifest]\nname = "A"\n[[manifest.icons]]\nsrc = "a.png"\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"manifest": {"name": "A", "icons": [{"src": "a.png"}]}}
    assert type(data["manifest"]) is dict


def test_load_toml_dict_errors_yield_empty(tmp_path: Path) -> None:
    """Missing or malformed files are logged and give an empty dict."""
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("[manifest\n", encoding="utf-8")
    assert load_toml_dict(bad) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}


def test_parse_toml_file_raises(tmp_path: Path) -> None:
    """The strict variant lets parse errors propagate."""
    bad: Path = tmp_path / "bad.toml"
    bad.write_text("a = \n", encoding="utf-8")
    with pytest.raises(TomlkitParseError):
        parse_toml_file(bad)


def test_extract_config_table(tmp_path: Path) -> None:
    """``pyproject.toml`` is read from ``[tool.manifestmark]``; other files whole."""
    data = {"tool": {"manifestmark": {"output": {"filename": "m.json"}}}}
    assert extract_config_table(tmp_path / "pyproject.toml", data) == {
        "output": {"filename": "m.json"}
    }
    assert extract_config_table(tmp_path / "pyproject.toml", {"tool": {"other": {}}}) is None
    assert extract_config_table(tmp_path / "custom.toml", data) is data


def test_discover_prefers_manifestmark_toml(tmp_path: Path) -> None:
    """In one directory the dedicated file wins over ``pyproject.toml``."""
    (tmp_path / "pyproject.toml").write_text("[tool.manifestmark]\n", encoding="utf-8")
    (tmp_path / "manifestmark.toml").write_text("", encoding="utf-8")
    assert discover_config_file(tmp_path) == (tmp_path / "manifestmark.toml").resolve()


def test_discover_walks_up_and_skips_foreign_pyproject(tmp_path: Path) -> None:
    """A ``pyproject.toml`` without our table is ignored; parents are searched."""
    (tmp_path / "manifestmark.toml").write_text("", encoding="utf-8")
    child: Path = tmp_path / "site"
    child.mkdir()
    (child / "pyproject.toml").write_text("[project]\nname = 'x'\n", encoding="utf-8")
    assert discover_config_file(child) == (tmp_path / "manifestmark.toml").resolve()


def test_discover_uses_pyproject_table(tmp_path: Path) -> None:
    """A ``pyproject.toml`` holding our table is found."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.manifestmark.manifest]\nname = "A"\n', encoding="utf-8"
    )
    assert discover_config_file(tmp_path) == (tmp_path / "pyproject.toml").resolve()
