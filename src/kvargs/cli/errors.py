# topmark:header:start
#
#   project      : KvArgs
#   file         : errors.py
#   file_relpath : src/kvargs/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the KvArgs CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors
    ([`ConfigError`][kvargs.errors.ConfigError]) are translated at the command
    boundary.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from kvargs.cli.exit_codes import ExitCode


class KvargsError(click.ClickException):
    """Base class for all KvArgs CLI errors."""

    exit_code = ExitCode.UNEXPECTED_ERROR

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text.

        Unlike Click's default, this method does not add color; colorization is
        applied in `show()` when a project console is present.
        """
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(f"Error: {self.format_message()}", fg="bright_red"))
                return
        super().show(file)


class KvargsUsageError(KvargsError):
    """Error for invalid ``kvargs`` flags/arguments."""

    exit_code = ExitCode.USAGE_ERROR


class KvargsFileNotFoundError(KvargsError):
    """Error when the spec file does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class KvargsConfigError(KvargsError):
    """Error for unreadable, malformed, or conflicting spec files."""

    exit_code = ExitCode.CONFIG_ERROR
