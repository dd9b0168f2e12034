# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/engine/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Classification engine: turns raw tokens into resolved state and diagnostics."""

from __future__ import annotations

from kvargs.engine.classifier import classify, classify_argv
from kvargs.engine.state import ClassificationResult, KeywordState, ResolvedState, UnaryState

__all__ = [
    "ClassificationResult",
    "KeywordState",
    "ResolvedState",
    "UnaryState",
    "classify",
    "classify_argv",
]
