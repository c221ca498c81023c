# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Click-based command-line interface for ManifestMark."""
