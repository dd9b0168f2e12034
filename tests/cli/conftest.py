# topmark:header:start
#
#   project      : KvArgs
#   file         : conftest.py
#   file_relpath : tests/cli/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test helpers for running KvArgs through Click's test runner.

Spec files are written into the pytest ``tmp_path`` by `write_spec` and passed
to the CLI as absolute paths, so tests never depend on the working directory.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from click.testing import CliRunner, Result

from kvargs.cli.exit_codes import ExitCode
from kvargs.cli.main import cli

if TYPE_CHECKING:
    from pathlib import Path

SAMPLE_SPEC_TOML = """\
[kvargs]
separators = "="

[[kvargs.keyword]]
name = "-key1"
abbreviation = "-k1"

[[kvargs.keyword]]
name = "-key2"
abbreviation = "-k2"

[[kvargs.unary]]
name = "--unary1"
abbreviation = "--u1"
"""


def run_cli(argv: Sequence[str]) -> Result:
    """Invoke the CLI with ``argv``.

    Args:
        argv (Sequence[str]): CLI argument vector, e.g. ``["version"]``.

    Returns:
        Result: The `click.testing.Result` produced by
            `click.testing.CliRunner.invoke`.
    """
    runner = CliRunner()
    return runner.invoke(cli, list(argv))


def write_spec(tmp_path: Path, text: str = SAMPLE_SPEC_TOML, name: str = "args.toml") -> Path:
    """Write a spec file into ``tmp_path`` and return its path."""
    path: Path = tmp_path / name
    path.write_text(text, encoding="utf-8")
    return path


def assert_SUCCESS(result: Result) -> None:
    """Assert that the command exited successfully (code 0).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.SUCCESS, result.output


def assert_INVALID_INVOCATION(result: Result) -> None:
    """Assert that the checked argument vector produced diagnostics (code 1).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    # A diagnosed vector is a normal outcome; do not assert on exception.
    assert result.exit_code == ExitCode.INVALID_INVOCATION, result.output


def assert_USAGE_ERROR(result: Result) -> None:
    """Assert that the command exited with USAGE_ERROR (code 64).

    Args:
        result (Result): The Result object returned by `run_cli`.
    """
    assert result.exit_code == ExitCode.USAGE_ERROR, result.output
