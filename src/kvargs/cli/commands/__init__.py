# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs CLI subcommands."""
