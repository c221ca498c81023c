# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark package.

ManifestMark builds a web application manifest from a loose, declarative
configuration (applying defaults, enum validation and path normalization),
reports advisory findings, and keeps the ``<link rel="manifest">`` tag of every
page in a directory tree in sync with the generated file.
"""

from __future__ import annotations
