# topmark:header:start
#
#   project      : KvArgs
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from kvargs.constants import KVARGS_VERSION
from tests.cli.conftest import assert_SUCCESS, run_cli


def test_version_outputs_installed_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])

    assert_SUCCESS(result)
    assert result.output.strip() == KVARGS_VERSION


def test_version_json() -> None:
    """Machine formats emit a JSON object."""
    result = run_cli(["version", "--format", "json"])

    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": KVARGS_VERSION}


def test_version_verbose_has_heading() -> None:
    """With -v, a heading precedes the version."""
    result = run_cli(["--no-color", "-v", "version"])

    assert_SUCCESS(result)
    assert result.output.splitlines()[0] == "KvArgs version:"


def test_bare_group_prints_hint_and_help() -> None:
    """Running without a subcommand prints a hint and the group help."""
    result = run_cli([])

    assert_SUCCESS(result)
    assert "kvargs check --spec FILE" in result.output
    assert "dump-spec" in result.output
