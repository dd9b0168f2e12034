# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command-line interface for KvArgs."""

from __future__ import annotations
