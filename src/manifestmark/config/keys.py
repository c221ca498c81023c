# topmark:header:start
#
#   project      : ManifestMark
#   file         : keys.py
#   file_relpath : src/manifestmark/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Canonical TOML section and key names for ManifestMark configuration.

This module defines the string constants used when reading ManifestMark
configuration from TOML sources (``manifestmark.toml`` and
``[tool.manifestmark]`` in ``pyproject.toml``).

Design notes:
    - Keys defined here represent *external configuration API*.
    - Renaming or removing keys is a breaking change.
    - Manifest member names (``name``, ``short_name``, ...) are not repeated
      here: the ``[manifest]`` table uses the field names of
      `manifestmark.manifest.model.ManifestConfig` verbatim.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section names and keys used by ManifestMark configuration."""

    # [manifest] (plus [[manifest.icons]] and [[manifest.shortcuts]])
    SECTION_MANIFEST: Final[str] = "manifest"

    # [output]
    SECTION_OUTPUT: Final[str] = "output"

    KEY_PUBLIC_DIR: Final[str] = "public_dir"
    KEY_FILENAME: Final[str] = "filename"

    # [inject]
    SECTION_INJECT: Final[str] = "inject"

    KEY_ENABLED: Final[str] = "enabled"
    KEY_EXTENSIONS: Final[str] = "extensions"
    KEY_CROSSORIGIN_CREDENTIALS: Final[str] = "crossorigin_credentials"
    KEY_EXCLUDE: Final[str] = "exclude"

    # [assets]
    SECTION_ASSETS: Final[str] = "assets"

    KEY_VALIDATE: Final[str] = "validate"
    KEY_POLICY: Final[str] = "policy"

    ALL_SECTIONS: Final[frozenset[str]] = frozenset(
        {SECTION_MANIFEST, SECTION_OUTPUT, SECTION_INJECT, SECTION_ASSETS}
    )
    OUTPUT_KEYS: Final[frozenset[str]] = frozenset({KEY_PUBLIC_DIR, KEY_FILENAME})
    INJECT_KEYS: Final[frozenset[str]] = frozenset(
        {KEY_ENABLED, KEY_EXTENSIONS, KEY_CROSSORIGIN_CREDENTIALS, KEY_EXCLUDE}
    )
    ASSETS_KEYS: Final[frozenset[str]] = frozenset({KEY_VALIDATE, KEY_POLICY})
