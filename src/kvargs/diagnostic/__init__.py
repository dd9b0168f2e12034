# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/diagnostic/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Invocation diagnostics.

This package provides the strongly-typed diagnostics produced by the
classification engine to report malformed argument vectors.

Design:
    - Each diagnostic is an immutable dataclass with a stable ``description``.
    - During a classification pass, diagnostics are accumulated in a mutable
      `DiagnosticLog`, which merges repeated redefinitions into one counted entry.
    - Classification results store diagnostics as an immutable `FrozenDiagnosticLog`.
"""

from __future__ import annotations

from kvargs.diagnostic.model import (
    Diagnostic,
    DiagnosticKind,
    DiagnosticLog,
    DiagnosticStats,
    FrozenDiagnosticLog,
    NoValueForKey,
    RedefinitionOfKey,
    RedefinitionOfUnary,
    UnrecognizedArg,
    compute_diagnostic_stats,
    diagnostics_counts_to_dict,
)

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "DiagnosticLog",
    "DiagnosticStats",
    "FrozenDiagnosticLog",
    "NoValueForKey",
    "RedefinitionOfKey",
    "RedefinitionOfUnary",
    "UnrecognizedArg",
    "compute_diagnostic_stats",
    "diagnostics_counts_to_dict",
]
