# topmark:header:start
#
#   project      : KvArgs
#   file         : exit_codes.py
#   file_relpath : src/kvargs/cli/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for the KvArgs CLI.

KvArgs aligns with the BSD `sysexits` convention where practical, so that other
tooling can interpret failures consistently. ``INVALID_INVOCATION=1`` is used
when the checked argument vector produced diagnostics; this is a normal outcome
of ``kvargs check``, not a failure of the tool itself.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for the KvArgs CLI.

    Attributes:
        SUCCESS: The checked invocation produced no diagnostics.
        INVALID_INVOCATION: The checked invocation produced at least one diagnostic.
        USAGE_ERROR: Command-line invocation error of ``kvargs`` itself. Mirrors
            BSD ``EX_USAGE (64)``.
        FILE_NOT_FOUND: The spec file does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        CONFIG_ERROR: The spec file is unreadable, malformed, or declares conflicting
            arguments. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    INVALID_INVOCATION = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
