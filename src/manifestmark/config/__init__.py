# topmark:header:start
#
#   project      : ManifestMark
#   file         : __init__.py
#   file_relpath : src/manifestmark/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Configuration handling for ManifestMark.

Submodules:
    * `keys`: TOML section and key names.
    * `loaders`: TOML file loading (tomlkit) and config file discovery.
    * `getters`: checked value extraction that records diagnostics.
    * `args`: coercion helpers for list-valued CLI and config inputs.
    * `model`: the `MutableConfig` builder and the frozen `Config`.
    * `logging`: project logger setup.
"""
