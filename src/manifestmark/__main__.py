# topmark:header:start
#
#   project      : ManifestMark
#   file         : __main__.py
#   file_relpath : src/manifestmark/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Module entry point for running ManifestMark via ``python -m manifestmark``.

It delegates directly to :func:`manifestmark.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ManifestMark is launched.

Examples:
    Generate a manifest using the module interface::

        python -m manifestmark generate --name "My App" --public-dir public
"""

from __future__ import annotations

from manifestmark.cli.main import cli

if __name__ == "__main__":
    cli()
