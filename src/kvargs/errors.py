# topmark:header:start
#
#   project      : KvArgs
#   file         : errors.py
#   file_relpath : src/kvargs/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors raised by KvArgs.

Usage:
    These exceptions are raised synchronously at declaration/setup time and when
    querying arguments that were never declared. They always abort the operation
    that raised them; no partial change is applied.

    Problems with the *invocation* (unknown tokens, missing values, repeated
    arguments) are never raised. They are collected as diagnostics, see
    [`kvargs.diagnostic`][kvargs.diagnostic].
"""

from __future__ import annotations


class ConfigError(Exception):
    """Base class for all KvArgs configuration errors."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return self.message


class DuplicateArgumentError(ConfigError):
    """A name or abbreviation collides with an already declared argument."""


class SeparatorConflictError(ConfigError):
    """A separator character occurs in a declared name or abbreviation."""


class InvalidArgumentNameError(ConfigError):
    """A declared name is empty or an abbreviation repeats its own name."""


class UndeclaredArgumentError(ConfigError):
    """A query referenced an argument name that was never declared."""


class RegistryLockedError(ConfigError):
    """A declaration was attempted after argument processing has started."""


class SpecFileError(ConfigError):
    """A TOML spec file could not be read, parsed, or has an invalid shape."""
