# topmark:header:start
#
#   project      : ManifestMark
#   file         : validator.py
#   file_relpath : src/manifestmark/manifest/validator.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Advisory validation of an assembled manifest document.

The validator reports members the web app manifest specification recommends but
which are missing, and icon purpose combinations that are discouraged. Findings
are data only: validation never mutates the document and never blocks emission.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from manifestmark.config.logging import ManifestmarkLogger, get_logger
from manifestmark.diagnostic.model import DiagnosticLog, FrozenDiagnosticLog

logger: ManifestmarkLogger = get_logger(__name__)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of [`ManifestValidator.validate`][manifestmark.manifest.validator.ManifestValidator.validate].

    Attributes:
        diagnostics (FrozenDiagnosticLog): Findings in the order they were detected.
    """

    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    @property
    def errors(self) -> tuple[str, ...]:
        """Human-readable finding messages, in detection order."""
        return self.diagnostics.messages()

    @property
    def is_valid(self) -> bool:
        """True iff there are no findings."""
        return len(self.diagnostics) == 0


def _purpose_tokens(purpose: object) -> list[str]:
    if not isinstance(purpose, str):
        return []
    return purpose.lower().split()


class ManifestValidator:
    """Check an assembled manifest for recommended members and discouraged values."""

    def validate(self, manifest: Mapping[str, Any]) -> ValidationResult:
        """Validate ``manifest`` and return the advisory findings.

        Rules:
            - ``name`` and ``short_name`` must not both be falsy.
            - ``icons`` must be a non-empty sequence.
            - each icon needs a ``src``; ``purpose`` combining ``any`` and
              ``maskable`` is discouraged (both findings may apply to one icon).
            - each shortcut needs a ``name`` and a ``url`` (reported separately).

        Args:
            manifest (Mapping[str, Any]): Assembled manifest document.

        Returns:
            ValidationResult: The findings; ``is_valid`` is True when there are none.
        """
        log = DiagnosticLog()

        if not manifest.get("name") and not manifest.get("short_name"):
            log.add_warning(
                'At least one of "name" or "short_name" should be provided'
                " for better user experience"
            )

        icons: object = manifest.get("icons")
        if not isinstance(icons, Sequence) or isinstance(icons, str) or len(icons) == 0:
            log.add_warning("Icons array should be provided for better user experience")
        else:
            for index, icon in enumerate(icons):
                entry: Mapping[str, Any] = icon if isinstance(icon, Mapping) else {}
                if not entry.get("src"):
                    log.add_warning(f'Icon at index {index} is missing required "src" member')
                tokens: list[str] = _purpose_tokens(entry.get("purpose"))
                if "any" in tokens and "maskable" in tokens:
                    log.add_warning(
                        f'Icon at index {index} uses discouraged purpose combination'
                        ' "any maskable"; prefer separate icons for each purpose'
                    )

        shortcuts: object = manifest.get("shortcuts")
        if isinstance(shortcuts, Sequence) and not isinstance(shortcuts, str):
            for index, shortcut in enumerate(shortcuts):
                entry = shortcut if isinstance(shortcut, Mapping) else {}
                if not entry.get("name"):
                    log.add_warning(f'Shortcut at index {index} is missing required "name" member')
                if not entry.get("url"):
                    log.add_warning(f'Shortcut at index {index} is missing required "url" member')

        logger.debug("Manifest validation: %d finding(s)", len(log))
        return ValidationResult(diagnostics=log.freeze())


def validate_manifest(manifest: Mapping[str, Any]) -> ValidationResult:
    """Validate ``manifest`` with a default `ManifestValidator`."""
    return ManifestValidator().validate(manifest)
