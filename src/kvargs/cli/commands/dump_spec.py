# topmark:header:start
#
#   project      : KvArgs
#   file         : dump_spec.py
#   file_relpath : src/kvargs/cli/commands/dump_spec.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs `dump-spec` command.

Loads and validates a spec file, then prints the normalized declarations as
TOML. Useful to confirm how ``[tool.kvargs]`` tables and string shorthands are
interpreted.
"""

from __future__ import annotations

from pathlib import Path

import click

from kvargs.cli.cmd_common import load_spec_registry
from kvargs.cli.console import get_console
from kvargs.config.io import registry_to_toml


@click.command(
    name="dump-spec",
    help="Validate a spec file and print the normalized declarations as TOML.",
)
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="TOML file declaring the accepted arguments.",
)
def dump_spec_command(*, spec_path: Path) -> None:
    """Print the normalized declarations of ``spec_path``."""
    console = get_console()
    registry = load_spec_registry(spec_path)
    console.print(registry_to_toml(registry), nl=False)
