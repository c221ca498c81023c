# topmark:header:start
#
#   project      : ManifestMark
#   file         : model.py
#   file_relpath : src/manifestmark/manifest/model.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Input model and immutable default tables for manifest assembly.

`ManifestConfig` carries caller-supplied values *loosely*: any field may be
absent, empty, of the wrong type, or otherwise malformed. Normalization happens
in [`ManifestAssembler`][manifestmark.manifest.assembler.ManifestAssembler], never here.

`ManifestDefaults` owns the fixed default values and enumerations. It is a frozen
value object so tests (and callers) can substitute their own tables.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any, Final

from manifestmark.config.logging import ManifestmarkLogger, get_logger

logger: ManifestmarkLogger = get_logger(__name__)

# Manifest document (output) type: a JSON-friendly mapping built key by key.
ManifestDocument = dict[str, Any]

DISPLAY_MODES: Final[tuple[str, ...]] = ("fullscreen", "standalone", "minimal-ui", "browser")
ORIENTATIONS: Final[tuple[str, ...]] = (
    "any",
    "natural",
    "landscape",
    "portrait",
    "portrait-primary",
    "portrait-secondary",
    "landscape-primary",
    "landscape-secondary",
)
TEXT_DIRECTIONS: Final[tuple[str, ...]] = ("ltr", "rtl", "auto")
ICON_PURPOSES: Final[tuple[str, ...]] = ("monochrome", "maskable", "any")


def _builtin_icons() -> tuple[Mapping[str, str], ...]:
    return (
        {"src": "/android-chrome-192x192.png", "sizes": "192x192", "type": "image/png"},
        {"src": "/android-chrome-512x512.png", "sizes": "512x512", "type": "image/png"},
    )


@dataclass(frozen=True)
class ManifestDefaults:
    """Fixed defaults and allowed values used while assembling a manifest.

    Attributes:
        start_url (str): Default for ``start_url``.
        scope (str): Default for ``scope``.
        display (str): Default (and fallback) for ``display``.
        orientation (str): Default (and fallback) for ``orientation``.
        theme_color (str): Default for ``theme_color``.
        background_color (str): Default for ``background_color``.
        icons (tuple[Mapping[str, str], ...]): Built-in icon set used when the input
            provides no icons. Normalized like user icons.
        display_modes (tuple[str, ...]): Allowed ``display`` values.
        orientations (tuple[str, ...]): Allowed ``orientation`` values.
        text_directions (tuple[str, ...]): Allowed ``dir`` values (no default).
        icon_purposes (tuple[str, ...]): Allowed icon ``purpose`` tokens.
    """

    start_url: str = "/"
    scope: str = "/"
    display: str = "standalone"
    orientation: str = "any"
    theme_color: str = "#ffffff"
    background_color: str = "#ffffff"
    icons: tuple[Mapping[str, str], ...] = field(default_factory=_builtin_icons)
    display_modes: tuple[str, ...] = DISPLAY_MODES
    orientations: tuple[str, ...] = ORIENTATIONS
    text_directions: tuple[str, ...] = TEXT_DIRECTIONS
    icon_purposes: tuple[str, ...] = ICON_PURPOSES


@dataclass(frozen=True)
class ManifestConfig:
    """Caller-supplied manifest input. No field is required.

    Values are kept as given (``Any``); the assembler trims, validates and
    defaults them. ``icons`` and ``shortcuts`` are expected to be sequences of
    mappings shaped like icon/shortcut descriptors, ``categories`` a sequence of
    strings, and ``icons_dir`` the served prefix for icon paths.
    """

    name: Any = None
    short_name: Any = None
    description: Any = None
    start_url: Any = None
    scope: Any = None
    display: Any = None
    orientation: Any = None
    theme_color: Any = None
    background_color: Any = None
    lang: Any = None
    dir: Any = None
    id: Any = None
    icons: Any = None
    shortcuts: Any = None
    categories: Any = None
    icons_dir: Any = None

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return the recognized input keys, in declaration order."""
        return tuple(f.name for f in fields(cls))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> ManifestConfig:
        """Build a `ManifestConfig` from a plain mapping, ignoring unknown keys.

        Args:
            data (Mapping[str, Any]): Raw input, e.g. a parsed ``[manifest]`` TOML table.

        Returns:
            ManifestConfig: Input object holding the recognized keys.
        """
        known: tuple[str, ...] = cls.field_names()
        unknown: list[str] = sorted(str(k) for k in data if k not in known)
        if unknown:
            logger.debug("Ignoring unrecognized manifest input keys: %s", ", ".join(unknown))
        return cls(**{k: data[k] for k in known if k in data})

    def merged_with(self, overrides: ManifestConfig) -> ManifestConfig:
        """Return a copy where every non-``None`` field of ``overrides`` wins.

        Args:
            overrides (ManifestConfig): Higher-precedence input layer.

        Returns:
            ManifestConfig: The merged input.
        """
        changes: dict[str, Any] = {
            name: getattr(overrides, name)
            for name in self.field_names()
            if getattr(overrides, name) is not None
        }
        return replace(self, **changes)
