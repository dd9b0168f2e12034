# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration layer: logging setup and TOML spec file loading."""

from __future__ import annotations
