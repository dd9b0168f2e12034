# topmark:header:start
#
#   project      : KvArgs
#   file         : version.py
#   file_relpath : src/kvargs/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs `version` command.

Prints the current KvArgs version as installed in the active Python environment.
"""

from __future__ import annotations

import json

import click

from kvargs.cli.cmd_common import get_effective_verbosity
from kvargs.cli.console import get_console
from kvargs.cli.options import OutputFormat, output_format_option
from kvargs.constants import KVARGS_VERSION


@click.command(
    name="version",
    help="Show the current version of KvArgs.",
)
@output_format_option
def version_command(*, output_format: OutputFormat) -> None:
    """Show the current version of KvArgs."""
    ctx = click.get_current_context()
    console = get_console(ctx)

    if output_format.is_machine:
        console.print(json.dumps({"version": KVARGS_VERSION}))
    elif get_effective_verbosity(ctx) > 0:
        console.print(console.styled("KvArgs version:", bold=True, underline=True))
        console.print(f"    {console.styled(KVARGS_VERSION, bold=True)}")
    else:
        console.print(KVARGS_VERSION)
