# topmark:header:start
#
#   project      : ManifestMark
#   file         : model.py
#   file_relpath : src/manifestmark/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Advisory findings collected as data instead of raised.

Config loading, argument parsing and manifest validation record what they find in
a [`DiagnosticLog`][manifestmark.diagnostic.model.DiagnosticLog]. Frozen results
(`Config`, `ValidationResult`) carry a
[`FrozenDiagnosticLog`][manifestmark.diagnostic.model.FrozenDiagnosticLog] snapshot,
and the CLI decides how each severity is rendered and whether it aborts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Final

from yachalk import chalk

from manifestmark.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from manifestmark.config.logging import ManifestmarkLogger


logger: ManifestmarkLogger = get_logger(__name__)


class DiagnosticLevel(Enum):
    """How serious a finding is; ``error`` findings in the config abort a command."""

    WARNING = "warning"
    ERROR = "error"

    @property
    def color(self) -> Callable[[str], str]:
        """Terminal styling for the ``[level]`` tag."""
        return LEVEL_COLORS[self]


LEVEL_COLORS: Final[dict[DiagnosticLevel, Callable[[str], str]]] = {
    DiagnosticLevel.WARNING: chalk.yellow,
    DiagnosticLevel.ERROR: chalk.red_bright,
}


@dataclass(frozen=True)
class Diagnostic:
    """One finding."""

    level: DiagnosticLevel
    message: str


class _DiagnosticQueries:
    """Read-only helpers shared by the mutable log and its frozen snapshot."""

    items: list[Diagnostic] | tuple[Diagnostic, ...]

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def messages(self) -> tuple[str, ...]:
        """Finding messages in the order they were recorded."""
        return tuple(d.message for d in self.items)

    def count(self, level: DiagnosticLevel) -> int:
        """Number of findings at ``level``."""
        return sum(1 for d in self.items if d.level is level)

    def has_warning(self) -> bool:
        return self.count(DiagnosticLevel.WARNING) > 0

    def has_error(self) -> bool:
        return self.count(DiagnosticLevel.ERROR) > 0


@dataclass
class DiagnosticLog(_DiagnosticQueries):
    """Findings accumulated while building a config or checking a manifest."""

    items: list[Diagnostic] = field(default_factory=lambda: [])

    def add_warning(self, message: str) -> None:
        """Record a warning.

        Args:
            message (str): Text shown to the user.
        """
        self._record(Diagnostic(DiagnosticLevel.WARNING, message))

    def add_error(self, message: str) -> None:
        """Record an error.

        Args:
            message (str): Text shown to the user.
        """
        self._record(Diagnostic(DiagnosticLevel.ERROR, message))

    def extend(self, diagnostics: Iterable[Diagnostic]) -> None:
        """Append findings from another log, keeping their order."""
        for d in diagnostics:
            self._record(d)

    def freeze(self) -> FrozenDiagnosticLog:
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _record(self, diagnostic: Diagnostic) -> None:
        logger.trace("%s: %s", diagnostic.level.value, diagnostic.message)
        self.items.append(diagnostic)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog(_DiagnosticQueries):
    """Snapshot of a [`DiagnosticLog`][manifestmark.diagnostic.model.DiagnosticLog]."""

    items: tuple[Diagnostic, ...] = ()
