# topmark:header:start
#
#   project      : BodyFields
#   file         : exit_codes.py
#   file_relpath : src/bodyfields/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the BodyFields CLI.

BodyFields aligns with the BSD `sysexits` convention where practical, so that
other tooling can interpret failures consistently. The one deliberate
divergence is `WOULD_CHANGE=2`, used by dry runs that found something to
change; tests must assert `result.exception is None` to tell it apart from
Click's own usage errors (which also exit with 2).
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the BodyFields CLI.

    Attributes:
        SUCCESS: Successful execution (including "nothing to do").
        FAILURE: Generic failure, e.g. ``show`` did not find the requested block.
        WOULD_CHANGE: Dry run: the document would change without ``--dry-run``
            (or with ``--apply``).
        USAGE_ERROR: Command-line invocation error. Mirrors BSD ``EX_USAGE (64)``.
        DOCUMENT_NOT_FOUND: The issue or input file does not exist. Mirrors BSD
            ``EX_NOINPUT (66)``.
        IO_ERROR: Reading or writing a document failed. Mirrors BSD ``EX_IOERR (74)``.
        CONFIG_ERROR: Invalid option combination or configuration. Mirrors BSD
            ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last resort).
    """

    SUCCESS = 0
    FAILURE = 1
    WOULD_CHANGE = 2  # deliberate divergence from sysexits; see module docstring

    USAGE_ERROR = 64  # EX_USAGE
    DOCUMENT_NOT_FOUND = 66  # EX_NOINPUT
    IO_ERROR = 74  # EX_IOERR
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
