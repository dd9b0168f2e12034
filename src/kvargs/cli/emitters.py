# topmark:header:start
#
#   project      : KvArgs
#   file         : emitters.py
#   file_relpath : src/kvargs/cli/emitters.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render classification results for the CLI.

Human output goes through the project console. Machine output (JSON/NDJSON)
is plain text without ANSI styling and is always written to stdout.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from kvargs.cli.options import OutputFormat

if TYPE_CHECKING:
    from kvargs.cli.console import ConsoleLike
    from kvargs.diagnostic import Diagnostic
    from kvargs.engine import ClassificationResult


def render_diagnostic(diagnostic: Diagnostic, *, color: bool) -> str:
    """Return the description of ``diagnostic``, colored by kind when enabled."""
    if color:
        return diagnostic.kind.color(diagnostic.description)
    return diagnostic.description


def emit_state_default(console: ConsoleLike, result: ClassificationResult) -> None:
    """Print the resolved keywords and flags, one per line."""
    console.print(console.styled(f"Executable: {result.exec_name}", bold=True))
    for name, state in result.state.keywords.items():
        if state.defined:
            console.print(f"  {name} = {json.dumps(state.value)}")
        else:
            console.print(console.styled(f"  {name} (not set)", dim=True))
    for name, state in result.state.unaries.items():
        if state.defined:
            console.print(f"  {name}")
        else:
            console.print(console.styled(f"  {name} (not set)", dim=True))


def emit_result_default(
    console: ConsoleLike,
    result: ClassificationResult,
    *,
    verbosity: int,
) -> None:
    """Print a human-readable report of ``result``.

    Diagnostics are always printed. The resolved state is shown at verbosity
    ``>= 1``; the closing summary line is suppressed when quiet.
    """
    if verbosity >= 1:
        emit_state_default(console, result)
        if result.truncated:
            console.warn("Processing stopped early: a keyword argument has no value.")

    for diagnostic in result.diagnostics:
        console.print(render_diagnostic(diagnostic, color=console.enable_color))

    if verbosity < 0:
        return
    n: int = len(result.diagnostics)
    if n == 0:
        console.print(console.styled("No problems found.", fg="green"))
    else:
        console.print(console.styled(f"{n} problem(s) found.", fg="red", bold=True))


def emit_result_json(console: ConsoleLike, result: ClassificationResult) -> None:
    """Print ``result`` as a single indented JSON object."""
    console.print(json.dumps(result.to_dict(), indent=2))


def emit_result_ndjson(console: ConsoleLike, result: ClassificationResult) -> None:
    """Print one JSON record per diagnostic, followed by a ``summary`` record."""
    for diagnostic in result.diagnostics:
        console.print(json.dumps(diagnostic.to_dict()))
    summary: dict[str, object] = {"kind": "summary", **result.to_dict()}
    summary.pop("diagnostics")
    console.print(json.dumps(summary))


def emit_result(
    console: ConsoleLike,
    result: ClassificationResult,
    *,
    output_format: OutputFormat,
    verbosity: int,
) -> None:
    """Dispatch to the emitter for ``output_format``."""
    if output_format == OutputFormat.JSON:
        emit_result_json(console, result)
    elif output_format == OutputFormat.NDJSON:
        emit_result_ndjson(console, result)
    else:
        emit_result_default(console, result, verbosity=verbosity)
