# topmark:header:start
#
#   project      : KvArgs
#   file         : check.py
#   file_relpath : src/kvargs/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""KvArgs `check` command.

Classifies an argument vector against the arguments declared in a spec file
and reports every diagnostic. The first token after ``--`` is taken as the
executable name:

    kvargs check --spec args.toml -- myprog -k1=value1 --unary1

Exit code is 0 when the vector is well-formed and 1 when it produced
diagnostics.
"""

from __future__ import annotations

from pathlib import Path

import click

from kvargs.cli.cmd_common import get_effective_verbosity, load_spec_registry
from kvargs.cli.console import get_console
from kvargs.cli.emitters import emit_result
from kvargs.cli.exit_codes import ExitCode
from kvargs.cli.options import OutputFormat, output_format_option
from kvargs.config.logging import get_logger
from kvargs.engine import ClassificationResult, classify_argv

logger = get_logger(__name__)


@click.command(
    name="check",
    help="Check an argument vector (after --) against a spec file.",
    context_settings={"ignore_unknown_options": True},
)
@click.option(
    "--spec",
    "spec_path",
    type=click.Path(dir_okay=False, path_type=Path),
    required=True,
    help="TOML file declaring the accepted arguments.",
)
@click.option(
    "--separators",
    default=None,
    help="Override the key/value separator characters declared in the spec.",
)
@click.option(
    "--allow-redefinition",
    is_flag=True,
    default=False,
    help="Do not report arguments that are supplied more than once.",
)
@output_format_option
@click.argument("argv", nargs=-1, type=click.UNPROCESSED)
def check_command(
    *,
    spec_path: Path,
    separators: str | None,
    allow_redefinition: bool,
    output_format: OutputFormat,
    argv: tuple[str, ...],
) -> None:
    """Classify ``argv`` against ``spec_path`` and report the outcome."""
    ctx = click.get_current_context()
    console = get_console(ctx)
    if output_format.is_machine:
        console.enable_color = False

    registry = load_spec_registry(
        spec_path,
        separators=separators,
        allow_redefinition=allow_redefinition,
    )
    logger.debug("Checking %d token(s) against %s", len(argv), spec_path)

    result: ClassificationResult = classify_argv(registry, argv)
    emit_result(
        console,
        result,
        output_format=output_format,
        verbosity=get_effective_verbosity(ctx),
    )

    ctx.exit(ExitCode.SUCCESS if result.ok else ExitCode.INVALID_INVOCATION)
