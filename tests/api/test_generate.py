# topmark:header:start
#
#   project      : ManifestMark
#   file         : test_generate.py
#   file_relpath : tests/api/test_generate.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Tests for the public API orchestration (`manifestmark.api`)."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from manifestmark import api
from manifestmark.config.types import AssetPolicy
from manifestmark.errors import ManifestWriteError, MissingAssetsError
from tests.conftest import make_config, read_text, write_text

ICONS: list[dict[str, Any]] = [
    {"src": "icon-192.png", "sizes": "192x192", "type": "image/png"},
    {"src": "/icon-512.png", "sizes": "512x512", "type": "image/png"},
]


def _touch_icons(public_dir: Path) -> None:
    for name in ("icon-192.png", "icon-512.png"):
        write_text(public_dir / "icons" / name, "")


def test_generate_writes_manifest_and_injects(tmp_path: Path) -> None:
    """A full run writes the JSON document and links every page."""
    _touch_icons(tmp_path)
    page: Path = write_text(tmp_path / "index.html", "<html><head></head><body></body></html>")
    config = make_config(tmp_path, manifest={"name": "My App", "icons": ICONS})

    report: api.GenerationReport = api.generate(config)

    assert report.manifest_path == tmp_path / "site.webmanifest"
    text: str = read_text(report.manifest_path)
    assert text.endswith("}\n")
    data: dict[str, Any] = json.loads(text)
    assert data["name"] == "My App"
    assert [i["src"] for i in data["icons"]] == ["/icons/icon-192.png", "/icons/icon-512.png"]

    assert report.validation.is_valid
    assert report.assets is not None and report.assets.valid
    assert report.missing_assets == 0
    assert report.pages is not None
    assert report.pages.injected == 1
    assert '<link rel="manifest" href="/site.webmanifest">' in read_text(page)


def test_generate_warn_policy_still_writes(tmp_path: Path) -> None:
    """Missing icons are reported but do not stop the run by default."""
    config = make_config(tmp_path, manifest={"name": "A", "icons": ICONS}, inject=False)
    report: api.GenerationReport = api.generate(config)
    assert report.missing_assets == 2
    assert report.manifest_path.is_file()
    assert report.pages is None


def test_generate_fail_policy_raises_before_writing(tmp_path: Path) -> None:
    """With the ``fail`` policy nothing is written when icons are missing."""
    write_text(tmp_path / "icons" / "icon-192.png", "")
    config = make_config(tmp_path, manifest={"icons": ICONS}, asset_policy=AssetPolicy.FAIL)

    with pytest.raises(MissingAssetsError) as excinfo:
        api.generate(config)

    assert [e.src for e in excinfo.value.result.missing] == ["/icons/icon-512.png"]
    assert "1 icon file(s) missing" in str(excinfo.value)
    assert not (tmp_path / "site.webmanifest").exists()


@pytest.mark.parametrize(
    "args",
    [{"asset_policy": "none"}, {"validate_assets": False}],
)
def test_asset_check_can_be_disabled(tmp_path: Path, args: dict[str, Any]) -> None:
    """Disabling the check (or the ``none`` policy) skips it entirely."""
    config = make_config(tmp_path, manifest={"icons": ICONS}, inject=False, **args)
    report: api.GenerationReport = api.generate(config)
    assert report.assets is None
    assert report.missing_assets == 0


def test_generate_honours_filename_and_extensions(tmp_path: Path) -> None:
    """The configured filename is used for the file and for the link."""
    html: Path = write_text(tmp_path / "a.html", "<head></head>")
    php: Path = write_text(tmp_path / "b.php", "<head></head>")
    config = make_config(
        tmp_path,
        filename="meta/app.webmanifest",
        extensions=["php"],
        crossorigin_credentials=True,
        asset_policy="none",
    )

    report: api.GenerationReport = api.generate(config)

    assert report.manifest_path == tmp_path / "meta" / "app.webmanifest"
    assert report.manifest_path.is_file()
    assert read_text(html) == "<head></head>"
    assert (
        '<link rel="manifest" href="/meta/app.webmanifest" crossorigin="use-credentials">'
        in read_text(php)
    )


def test_validation_findings_are_advisory(tmp_path: Path) -> None:
    """Validation problems are reported but the manifest is still written."""
    config = make_config(tmp_path, inject=False, asset_policy="none")
    report: api.GenerationReport = api.generate(config)
    assert not report.validation.is_valid
    assert report.manifest_path.is_file()


def test_build_manifest_is_pure(tmp_path: Path) -> None:
    """Building the document performs no I/O."""
    config = make_config(tmp_path / "nowhere", manifest={"name": "X"})
    document = api.build_manifest(config)
    assert document["name"] == "X"
    assert not (tmp_path / "nowhere").exists()


def test_write_manifest_failure_is_wrapped(tmp_path: Path) -> None:
    """Filesystem errors surface as `ManifestWriteError`."""
    blocker: Path = write_text(tmp_path / "blocker", "")
    target: Path = blocker / "site.webmanifest"
    with pytest.raises(ManifestWriteError) as excinfo:
        api.write_manifest({"name": "A"}, target)
    assert excinfo.value.path == target
    assert str(target) in str(excinfo.value)


def test_sync_pages_wrapper(tmp_path: Path) -> None:
    """`sync_pages` processes a directory with keyword options."""
    write_text(tmp_path / "keep" / "a.html", "<head></head>")
    write_text(tmp_path / "skip" / "b.html", "<head></head>")
    result = api.sync_pages(
        tmp_path, filename="site.webmanifest", extensions=["html"], exclude=["skip/"]
    )
    assert result.injected == 1
    assert read_text(tmp_path / "skip" / "b.html") == "<head></head>"
