# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""ManifestMark CLI subcommands."""
