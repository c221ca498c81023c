# topmark:header:start
#
#   project      : ManifestMark
#   file         : constants.py
#   file_relpath : src/manifestmark/constants.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    MANIFESTMARK_VERSION: str = get_version("manifestmark")
except PackageNotFoundError:  # running from a source checkout
    MANIFESTMARK_VERSION = "0.0.0"

# Config discovery
MANIFESTMARK_TOML_NAME: str = "manifestmark.toml"
PYPROJECT_TOML_NAME: str = "pyproject.toml"
PYPROJECT_TOOL_SECTION: str = "manifestmark"

DEFAULT_MANIFEST_FILENAME: str = "site.webmanifest"
DEFAULT_ICONS_DIR: str = "/icons/"
DEFAULT_PUBLIC_DIR: str = "."
DEFAULT_INJECT_EXTENSIONS: tuple[str, ...] = ("html", "htm")

# Fallback for `sizes`/`type` in asset reports when an icon does not declare them
UNSPECIFIED: str = "unspecified"
