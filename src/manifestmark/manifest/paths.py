# topmark:header:start
#
#   project      : ManifestMark
#   file         : paths.py
#   file_relpath : src/manifestmark/manifest/paths.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Served-path resolution for manifest icons.

Joins an icon's declared ``src`` with the configured icons directory. The join is
purely textual (URL path semantics): it never touches the filesystem.
"""

from __future__ import annotations

from manifestmark.config.logging import ManifestmarkLogger, get_logger

logger: ManifestmarkLogger = get_logger(__name__)

URL_SEPARATOR: str = "/"


def normalize_icons_dir(icons_dir: str) -> str:
    """Return ``icons_dir`` with exactly one leading and no trailing separator.

    Args:
        icons_dir (str): Icons directory prefix, e.g. ``"icons/"`` or ``"/assets"``.

    Returns:
        str: Normalized prefix (e.g. ``"/icons"``), or ``""`` when ``icons_dir`` is empty.
    """
    if not icons_dir:
        return ""
    prefix: str = icons_dir if icons_dir.startswith(URL_SEPARATOR) else URL_SEPARATOR + icons_dir
    if prefix.endswith(URL_SEPARATOR):
        prefix = prefix[:-1]
    return prefix


def resolve_icon_src(src: str, icons_dir: str = "") -> str:
    """Join a declared icon path with the icons directory into the served path.

    Rules:
        - ``src`` is trimmed first.
        - With an empty ``icons_dir`` the trimmed ``src`` is returned unchanged.
        - Otherwise one leading separator is stripped from ``src`` and the result is
          appended to the normalized prefix
          (see [`normalize_icons_dir`][manifestmark.manifest.paths.normalize_icons_dir]).

    Args:
        src (str): Declared icon path.
        icons_dir (str): Icons directory prefix (may be empty).

    Returns:
        str: The path under which the icon will be served.

    Example:
        ```python
        resolve_icon_src("/icon.png", "icons/")  # "/icons/icon.png"
        resolve_icon_src(" icon.png ", "")  # "icon.png"
        ```
    """
    clean_src: str = src.strip()
    if not clean_src or not icons_dir:
        return clean_src
    stripped: str = clean_src[1:] if clean_src.startswith(URL_SEPARATOR) else clean_src
    resolved: str = normalize_icons_dir(icons_dir) + URL_SEPARATOR + stripped
    logger.trace("resolve_icon_src(%r, %r) -> %r", src, icons_dir, resolved)
    return resolved
