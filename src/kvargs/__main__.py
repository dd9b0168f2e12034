# topmark:header:start
#
#   project      : KvArgs
#   file         : __main__.py
#   file_relpath : src/kvargs/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running KvArgs via ``python -m kvargs``.

Delegates directly to `kvargs.cli.main.cli`, so module execution and the
``kvargs`` console script behave identically.

Examples:
    Check an invocation against a spec file::

        python -m kvargs check --spec args.toml -- exe -k1=value1
"""

from __future__ import annotations

from kvargs.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
