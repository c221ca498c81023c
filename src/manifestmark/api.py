# topmark:header:start
#
#   project      : ManifestMark
#   file         : api.py
#   file_relpath : src/manifestmark/api.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Public API for ManifestMark.

This module is the programmatic counterpart of the CLI. It wires the core
components together in the order a full run needs:

1. assemble the manifest document from the configured input;
2. validate it (advisory) and, optionally, check that icon files exist;
3. apply the asset policy (``fail`` stops before anything is written);
4. write the manifest file;
5. synchronize the manifest link across page files.

Functions return plain dataclasses; they do not print. Errors that require the
caller's attention are raised as subclasses of
[`ManifestmarkRuntimeError`][manifestmark.errors.ManifestmarkRuntimeError].

Example:
    ```python
    from manifestmark.api import generate
    from manifestmark.config.model import MutableConfig

    draft = MutableConfig.load_merged()
    draft.apply_args({"name": "My App", "public_dir": "dist"})
    report = generate(draft.freeze())
    print(report.manifest_path, report.pages.injected if report.pages else 0)
    ```
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from manifestmark.assets.checker import AssetCheckResult, AssetExistenceChecker
from manifestmark.config.logging import get_logger
from manifestmark.config.types import AssetPolicy
from manifestmark.errors import ManifestWriteError, MissingAssetsError
from manifestmark.manifest.assembler import ManifestAssembler, serialize_manifest
from manifestmark.manifest.validator import ManifestValidator, ValidationResult
from manifestmark.pages.processor import PageInjectionResult, process_directory

if TYPE_CHECKING:
    from manifestmark.config.logging import ManifestmarkLogger
    from manifestmark.config.model import Config
    from manifestmark.manifest.model import ManifestDocument

logger: ManifestmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class GenerationReport:
    """Everything a `generate` run produced.

    Attributes:
        manifest (ManifestDocument): The assembled document.
        manifest_path (Path): Where the document was written.
        validation (ValidationResult): Advisory validation findings.
        assets (AssetCheckResult | None): Icon existence check, or ``None`` when
            the check was disabled or the policy is ``none``.
        pages (PageInjectionResult | None): Page synchronization result, or
            ``None`` when injection is disabled.
    """

    manifest: ManifestDocument
    manifest_path: Path
    validation: ValidationResult
    assets: AssetCheckResult | None = None
    pages: PageInjectionResult | None = None

    @property
    def missing_assets(self) -> int:
        """Number of missing icon files (0 when the check did not run)."""
        return len(self.assets.missing) if self.assets is not None else 0


def build_manifest(config: Config) -> ManifestDocument:
    """Assemble the manifest document for ``config`` (no I/O)."""
    return ManifestAssembler().assemble(config.manifest, icons_dir=config.icons_dir)


def check_assets(config: Config, document: ManifestDocument) -> AssetCheckResult | None:
    """Run the icon existence check according to ``config``.

    Assembled ``src`` values already carry the icons directory, so they are
    joined to ``public_dir`` directly.

    Args:
        config (Config): Runtime configuration.
        document (ManifestDocument): Assembled manifest.

    Returns:
        AssetCheckResult | None: The check result, or ``None`` when disabled.

    Raises:
        MissingAssetsError: If icons are missing and the policy is ``fail``.
    """
    if not config.validate_assets or config.asset_policy is AssetPolicy.NONE:
        logger.debug("Asset check disabled")
        return None
    result: AssetCheckResult = AssetExistenceChecker().check(
        document.get("icons"), config.public_dir, ""
    )
    if not result.valid and config.asset_policy is AssetPolicy.FAIL:
        raise MissingAssetsError(result)
    return result


def write_manifest(document: ManifestDocument, path: Path) -> Path:
    """Write ``document`` as indented JSON (with a trailing newline) to ``path``.

    Parent directories are created as needed.

    Args:
        document (ManifestDocument): The manifest.
        path (Path): Target file.

    Returns:
        Path: ``path``.

    Raises:
        ManifestWriteError: If the directory or the file cannot be written.
    """
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(serialize_manifest(document) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.error("Cannot write manifest %s: %s", path, exc)
        raise ManifestWriteError(path, exc) from exc
    logger.info("Wrote manifest: %s", path)
    return path


def sync_pages(
    directory: Path | str,
    *,
    filename: str,
    extensions: Iterable[str],
    use_credentials: bool = False,
    exclude: Iterable[str] = (),
) -> PageInjectionResult:
    """Synchronize the manifest link in every page file below ``directory``.

    Thin wrapper over
    [`process_directory`][manifestmark.pages.processor.process_directory].
    """
    return process_directory(
        directory,
        extensions,
        filename,
        use_credentials,
        exclude=exclude,
    )


def generate(config: Config) -> GenerationReport:
    """Run a full generation: assemble, validate, check assets, write and inject.

    Args:
        config (Config): Frozen runtime configuration.

    Returns:
        GenerationReport: What was produced.

    Raises:
        MissingAssetsError: Icons are missing and the asset policy is ``fail``
            (nothing has been written).
        ManifestWriteError: The manifest file could not be written.
    """
    document: ManifestDocument = build_manifest(config)
    validation: ValidationResult = ManifestValidator().validate(document)
    for message in validation.errors:
        logger.warning("Manifest: %s", message)

    assets: AssetCheckResult | None = check_assets(config, document)

    manifest_path: Path = write_manifest(document, config.manifest_path)

    pages: PageInjectionResult | None = None
    if config.inject_enabled:
        pages = sync_pages(
            config.public_dir,
            filename=config.filename,
            extensions=config.inject_extensions,
            use_credentials=config.crossorigin_credentials,
            exclude=config.inject_exclude,
        )
    else:
        logger.debug("Page injection disabled")

    return GenerationReport(
        manifest=document,
        manifest_path=manifest_path,
        validation=validation,
        assets=assets,
        pages=pages,
    )
