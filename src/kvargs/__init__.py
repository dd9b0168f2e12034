# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs package.

KvArgs is a declarative command-line argument classifier. Callers declare the
keyword (value-bearing) and unary (flag) arguments they accept, hand over a raw
argument vector, and get back resolved values plus a de-duplicated list of
diagnostics describing anything malformed in the invocation.
"""

from __future__ import annotations

from kvargs.api import Args
from kvargs.diagnostic import (
    Diagnostic,
    DiagnosticKind,
    NoValueForKey,
    RedefinitionOfKey,
    RedefinitionOfUnary,
    UnrecognizedArg,
)
from kvargs.engine import ClassificationResult, classify, classify_argv
from kvargs.errors import ConfigError
from kvargs.registry import ArgKind, ArgRegistry, ArgSpec, FrozenArgRegistry

__all__ = [
    "ArgKind",
    "ArgRegistry",
    "ArgSpec",
    "Args",
    "ClassificationResult",
    "ConfigError",
    "Diagnostic",
    "DiagnosticKind",
    "FrozenArgRegistry",
    "NoValueForKey",
    "RedefinitionOfKey",
    "RedefinitionOfUnary",
    "UnrecognizedArg",
    "classify",
    "classify_argv",
]
