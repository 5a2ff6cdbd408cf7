# topmark:header:start
#
#   file         : exit_codes.py
#   file_relpath : src/confargs/exit_codes.py
#   project      : ConfArgs
#   license      : MIT
#   copyright    : (c) 2025 ConfArgs contributors
#
# topmark:header:end

"""Exit codes for the ConfArgs CLI.

ConfArgs aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the ConfArgs CLI.

    Attributes:
        SUCCESS: Successful execution with no errors.
        FAILURE: Generic failure (non-specific error). Prefer a more specific
            code if available.
        USAGE_ERROR: Command-line invocation error (invalid flags/args, bad option
            values, missing required options). Mirrors BSD ``EX_USAGE (64)``.
        SOFTWARE_ERROR: Internal error such as a malformed settings schema.
            Mirrors BSD ``EX_SOFTWARE (70)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    IO_ERROR = 74  # EX_IOERR

    UNEXPECTED_ERROR = 255
