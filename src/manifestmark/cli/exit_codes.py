# topmark:header:start
#
#   project      : ManifestMark
#   file         : exit_codes.py
#   file_relpath : src/manifestmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 ManifestMark contributors
#
# topmark:header:end

"""Exit codes for the ManifestMark CLI.

Codes are small and stable so CI scripts can branch on them. ``2`` coincides
with Click's own usage-error code on purpose: both mean the invocation was
wrong.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ManifestMark CLI.

    Attributes:
        SUCCESS: Successful execution.
        FAILURE: Generic failure, and page synchronization errors under ``--strict``.
        USAGE_ERROR: Command-line invocation error (invalid flags/args).
        CONFIG_ERROR: Configuration error (unreadable or invalid config input).
        IO_ERROR: The manifest file could not be read or written.
        ASSETS_MISSING: Icon files are missing and the asset policy is ``fail``.
    """

    SUCCESS = 0
    FAILURE = 1
    USAGE_ERROR = 2
    CONFIG_ERROR = 3
    IO_ERROR = 4
    ASSETS_MISSING = 5
