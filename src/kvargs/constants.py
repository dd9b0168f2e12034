# topmark:header:start
#
#   project      : KvArgs
#   file         : constants.py
#   file_relpath : src/kvargs/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

KVARGS_VERSION: str = get_version("kvargs")

# Characters that split `key<sep>value` tokens unless configured otherwise.
DEFAULT_SEPARATORS: str = "="

# Redefinition of an already supplied argument is reported by default.
DEFAULT_REDEFINITION_IS_ERROR: bool = True

# Environment variable consulted for the internal log level.
LOG_LEVEL_ENV_VAR: str = "KVARGS_LOG_LEVEL"

# Table names recognized in TOML spec files.
SPEC_TABLE_NAME: str = "kvargs"
PYPROJECT_TOOL_TABLE: str = "tool"
