# topmark:header:start
#
#   project      : ManifestMark
#   file         : assembler.py
#   file_relpath : src/manifestmark/manifest/assembler.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Assemble a web application manifest document from loose input.

The assembler turns a [`ManifestConfig`][manifestmark.manifest.model.ManifestConfig]
into a manifest document with a closed set of keys. Every recognized member is
either taken from the input (trimmed, validated) or replaced by a fixed default;
unrecognized input never reaches the output.

Normalization policy:
    - Plain string members fall back to their default when absent, not a string,
      or empty after trimming.
    - ``display`` and ``orientation`` are case-folded and checked against their
      allowed values; invalid values fall back to the default.
    - ``dir`` is case-folded and checked too, but is *omitted* (no default) when
      invalid or absent.
    - ``description``, ``id`` and ``lang`` are emitted only when present.
    - Icons without a usable ``src`` and shortcuts without ``name``/``url`` are
      dropped silently.

Key order of the emitted document:
    ``name, short_name, description?, start_url, id?, scope, display, orientation,
    theme_color, background_color, lang?, dir?, icons, shortcuts?, categories?``
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

from manifestmark.config.logging import ManifestmarkLogger, get_logger
from manifestmark.manifest.model import ManifestConfig, ManifestDefaults, ManifestDocument
from manifestmark.manifest.paths import resolve_icon_src

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

logger: ManifestmarkLogger = get_logger(__name__)


def is_sequence(value: object) -> bool:
    """Return True for list/tuple values (strings do not count as sequences)."""
    return isinstance(value, (list, tuple))


def clean_string(value: object) -> str:
    """Return ``value`` trimmed when it is a string, ``""`` otherwise."""
    return value.strip() if isinstance(value, str) else ""


def string_or_default(value: object, default: str) -> str:
    """Return the trimmed string, or ``default`` when it is missing or blank.

    Args:
        value (object): Raw input value.
        default (str): Value used when ``value`` is not a non-empty string.

    Returns:
        str: The trimmed input or the default.
    """
    cleaned: str = clean_string(value)
    return cleaned if cleaned else default


def validate_enum(value: object, allowed: Sequence[str], fallback: str | None) -> str | None:
    """Return the lowercased ``value`` when allowed, ``fallback`` otherwise.

    Args:
        value (object): Raw input value.
        allowed (Sequence[str]): Allowed (lowercase) values.
        fallback (str | None): Value returned for absent or invalid input.

    Returns:
        str | None: The normalized value or ``fallback``.
    """
    candidate: str = clean_string(value).lower()
    if candidate and candidate in allowed:
        return candidate
    if value is not None:
        logger.debug("Value %r not in %s; using %r", value, list(allowed), fallback)
    return fallback


class ManifestAssembler:
    """Build manifest documents using a (substitutable) table of defaults.

    Args:
        defaults (ManifestDefaults | None): Default values and enumerations.
            Uses the built-in `ManifestDefaults()` when ``None``.
    """

    def __init__(self, defaults: ManifestDefaults | None = None) -> None:
        self.defaults: ManifestDefaults = defaults or ManifestDefaults()

    def assemble(
        self,
        config: ManifestConfig | Mapping[str, Any] | None = None,
        *,
        icons_dir: str | None = None,
    ) -> ManifestDocument:
        """Assemble the manifest document for ``config``.

        Args:
            config (ManifestConfig | Mapping[str, Any] | None): Manifest input. Plain
                mappings are converted with `ManifestConfig.from_mapping`.
            icons_dir (str | None): Icons directory override; defaults to
                ``config.icons_dir``.

        Returns:
            ManifestDocument: The normalized manifest (a new ``dict``).
        """
        cfg: ManifestConfig = _as_manifest_config(config)
        d: ManifestDefaults = self.defaults
        prefix: str = clean_string(cfg.icons_dir) if icons_dir is None else icons_dir

        manifest: ManifestDocument = {}
        manifest["name"] = string_or_default(cfg.name, "")
        manifest["short_name"] = string_or_default(cfg.short_name, "")

        description: str = clean_string(cfg.description)
        if description:
            manifest["description"] = description

        manifest["start_url"] = string_or_default(cfg.start_url, d.start_url)

        app_id: str = clean_string(cfg.id)
        if app_id:
            manifest["id"] = app_id

        manifest["scope"] = string_or_default(cfg.scope, d.scope)
        manifest["display"] = validate_enum(cfg.display, d.display_modes, d.display)
        manifest["orientation"] = validate_enum(cfg.orientation, d.orientations, d.orientation)
        manifest["theme_color"] = string_or_default(cfg.theme_color, d.theme_color)
        manifest["background_color"] = string_or_default(cfg.background_color, d.background_color)

        lang: str = clean_string(cfg.lang)
        if lang:
            manifest["lang"] = lang

        text_dir: str | None = validate_enum(cfg.dir, d.text_directions, None)
        if text_dir is not None:
            manifest["dir"] = text_dir

        if is_sequence(cfg.icons) and len(cfg.icons) > 0:
            manifest["icons"] = self.normalize_icons(cfg.icons, prefix)
        else:
            logger.debug("No icons in input; using %d built-in icon(s)", len(d.icons))
            manifest["icons"] = self.normalize_icons(d.icons, prefix)

        if is_sequence(cfg.shortcuts):
            manifest["shortcuts"] = self.normalize_shortcuts(cfg.shortcuts, prefix)

        if is_sequence(cfg.categories):
            manifest["categories"] = [
                clean_string(c) for c in cfg.categories if clean_string(c)
            ]

        logger.trace("Assembled manifest: %r", manifest)
        return manifest

    def normalize_purpose(self, purpose: object) -> str | None:
        """Filter a space-separated purpose string to the allowed tokens.

        Args:
            purpose (object): Raw ``purpose`` value.

        Returns:
            str | None: The allowed tokens joined by one space (original order),
                or ``None`` when no allowed token remains.
        """
        if not isinstance(purpose, str):
            return None
        tokens: list[str] = [
            t for t in purpose.lower().split() if t in self.defaults.icon_purposes
        ]
        return " ".join(tokens) if tokens else None

    def normalize_icons(self, icons: Iterable[object], icons_dir: str = "") -> list[dict[str, str]]:
        """Normalize icon descriptors, dropping entries without a usable ``src``.

        Args:
            icons (Iterable[object]): Raw icon entries.
            icons_dir (str): Icons directory prefix joined to each ``src``.

        Returns:
            list[dict[str, str]]: Normalized icon descriptors, input order preserved.
        """
        out: list[dict[str, str]] = []
        for index, icon in enumerate(icons):
            if not isinstance(icon, Mapping):
                logger.debug("Dropping icon #%d: not a mapping (%r)", index, icon)
                continue
            src: str = clean_string(icon.get("src"))
            if not src:
                logger.debug("Dropping icon #%d: missing 'src'", index)
                continue
            processed: dict[str, str] = {"src": resolve_icon_src(src, icons_dir)}
            sizes: str = clean_string(icon.get("sizes"))
            if sizes:
                processed["sizes"] = sizes
            mime_type: str = clean_string(icon.get("type"))
            if mime_type:
                processed["type"] = mime_type
            purpose: str | None = self.normalize_purpose(icon.get("purpose"))
            if purpose is not None:
                processed["purpose"] = purpose
            out.append(processed)
        return out

    def normalize_shortcuts(
        self, shortcuts: Iterable[object], icons_dir: str = ""
    ) -> list[dict[str, Any]]:
        """Normalize shortcut descriptors, dropping entries without ``name``/``url``.

        Nested ``icons`` are normalized with the same rules as top-level icons.

        Args:
            shortcuts (Iterable[object]): Raw shortcut entries.
            icons_dir (str): Icons directory prefix for nested icons.

        Returns:
            list[dict[str, Any]]: Normalized shortcuts, input order preserved.
        """
        out: list[dict[str, Any]] = []
        for index, shortcut in enumerate(shortcuts):
            if not isinstance(shortcut, Mapping):
                logger.debug("Dropping shortcut #%d: not a mapping (%r)", index, shortcut)
                continue
            name: str = clean_string(shortcut.get("name"))
            url: str = clean_string(shortcut.get("url"))
            if not name or not url:
                logger.debug("Dropping shortcut #%d: missing 'name' or 'url'", index)
                continue
            processed: dict[str, Any] = {"name": name, "url": url}
            short_name: str = clean_string(shortcut.get("short_name"))
            if short_name:
                processed["short_name"] = short_name
            description: str = clean_string(shortcut.get("description"))
            if description:
                processed["description"] = description
            nested: object = shortcut.get("icons")
            if is_sequence(nested):
                nested_icons: Iterable[object] = cast("Iterable[object]", nested)
                processed["icons"] = self.normalize_icons(nested_icons, icons_dir)
            out.append(processed)
        return out


def _as_manifest_config(config: ManifestConfig | Mapping[str, Any] | None) -> ManifestConfig:
    if config is None:
        return ManifestConfig()
    if isinstance(config, ManifestConfig):
        return config
    return ManifestConfig.from_mapping(config)


def assemble_manifest(
    config: ManifestConfig | Mapping[str, Any] | None = None,
    *,
    icons_dir: str | None = None,
) -> ManifestDocument:
    """Assemble a manifest with the built-in defaults.

    Convenience wrapper around [`ManifestAssembler.assemble`][manifestmark.manifest.assembler.ManifestAssembler.assemble].
    """
    return ManifestAssembler().assemble(config, icons_dir=icons_dir)


def serialize_manifest(document: Mapping[str, Any]) -> str:
    """Serialize a manifest document as JSON with 2-space indentation.

    Args:
        document (Mapping[str, Any]): Assembled manifest.

    Returns:
        str: JSON text (no trailing newline), key order preserved.
    """
    return json.dumps(document, indent=2, ensure_ascii=False)
