# topmark:header:start
#
#   project      : ManifestMark
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Pytest configuration for the ManifestMark test suite.

Sets up global fixtures and the logging configuration for test runs so that
TRACE-level log output is available when a test fails.

Notes:
    Tests should respect the immutable/mutable configuration split: build
    configs with `manifestmark.config.model.MutableConfig`, then `freeze()`
    them into a `Config` for `manifestmark.api` calls.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest

from manifestmark.config import logging
from manifestmark.config.model import MutableConfig

if TYPE_CHECKING:
    from pathlib import Path

    from manifestmark.config.model import Config


@pytest.fixture(autouse=True)
def silence_manifestmark_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to clear the environment variable.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:
    """Set TRACE logging for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object (unused).
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test from an empty project directory.

    Keeps config discovery from picking up files outside the temporary tree.

    Returns:
        Path: The project directory (also the current working directory).
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


def make_config(public_dir: Path, *, manifest: dict[str, Any] | None = None, **args: Any) -> Config:
    """Return a frozen `Config` built from defaults plus CLI-style overrides.

    Args:
        public_dir (Path): Output directory.
        manifest (dict[str, Any] | None): Manifest input members.
        **args (Any): Extra keys for `MutableConfig.apply_args`.

    Returns:
        Config: The frozen configuration.
    """
    draft: MutableConfig = MutableConfig.from_defaults()
    draft.apply_args({**(manifest or {}), "public_dir": public_dir, **args})
    return draft.freeze()


def write_text(path: Path, text: str) -> Path:
    """Write ``text`` without newline translation, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="") as fp:
        fp.write(text)
    return path


def read_text(path: Path) -> str:
    """Read ``path`` without newline translation."""
    with path.open("r", encoding="utf-8", newline="") as fp:
        return fp.read()
