# docmark:header:start
#
#   project      : DocMark
#   file         : exit_codes.py
#   file_relpath : src/docmark/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# docmark:header:end

"""Exit codes for the DocMark CLI.

DocMark aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. The one divergence is `WOULD_CHANGE=2`,
which signals a dry run in which files would be rewritten. Click also exits with 2 on
usage errors; those print a "Usage:" line, a dry run does not.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the DocMark CLI.

    Attributes:
        SUCCESS: Successful execution; nothing to change or changes applied.
        FAILURE: Generic failure (non-specific error).
        WOULD_CHANGE: Dry run: files would change if ``--apply`` were set.
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        ENCODING_ERROR: Text decoding error (e.g., UnicodeDecodeError).
            Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid configuration. Mirrors BSD ``EX_CONFIG (78)``.
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2

    USAGE_ERROR = 64  # EX_USAGE
    ENCODING_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG
