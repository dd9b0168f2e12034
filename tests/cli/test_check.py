# topmark:header:start
#
#   project      : KvArgs
#   file         : test_check.py
#   file_relpath : tests/cli/test_check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for the `check` command: reports and exit codes."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

import pytest

from kvargs.cli.exit_codes import ExitCode
from tests.cli.conftest import (
    assert_INVALID_INVOCATION,
    assert_SUCCESS,
    assert_USAGE_ERROR,
    run_cli,
    write_spec,
)

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_well_formed_vector_succeeds(tmp_path: Path) -> None:
    """A clean vector exits 0 with a closing summary."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--", "exe", "-k1=value1", "-key2", "value2", "--unary1"]
    )

    assert_SUCCESS(result)
    assert "No problems found." in result.output


def test_malformed_vector_reports_each_problem(tmp_path: Path) -> None:
    """Diagnostics are printed in order and the exit code is 1."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--", "exe", "--foo", "--u1", "--u1", "-key1"]
    )

    assert_INVALID_INVOCATION(result)
    lines: list[str] = result.output.splitlines()
    assert lines[:3] == [
        'Unrecognized argument: "--foo".',
        'Unary argument "--unary1" has been defined 2 times.',
        'No corresponding value for keyword argument "-key1".',
    ]
    assert "3 problem(s) found." in result.output


def test_quiet_prints_only_diagnostics(tmp_path: Path) -> None:
    """With -q, only diagnostic lines are printed."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(["-q", "check", "--spec", str(spec), "--", "exe", "--foo"])

    assert_INVALID_INVOCATION(result)
    assert result.output.splitlines() == ['Unrecognized argument: "--foo".']


def test_verbose_shows_resolved_state(tmp_path: Path) -> None:
    """With -v, the executable name and resolved arguments are listed."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(["-v", "check", "--spec", str(spec), "--", "prog", "-k2", "a b"])

    assert_SUCCESS(result)
    assert "Executable: prog" in result.output
    assert '-key2 = "a b"' in result.output
    assert "-key1 (not set)" in result.output
    assert "--unary1 (not set)" in result.output


def test_json_output(tmp_path: Path) -> None:
    """--format json prints one object carrying state, diagnostics and counts."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--format", "json", "--", "exe", "-k1=a", "-k1", "b"]
    )

    assert_INVALID_INVOCATION(result)
    payload: dict[str, Any] = json.loads(result.stdout)
    assert payload["exec_name"] == "exe"
    assert payload["ok"] is False
    assert payload["truncated"] is False
    assert payload["state"]["keywords"]["-key1"] == {"defined": True, "value": "b"}
    assert payload["diagnostics"] == [
        {
            "kind": "redefinition_of_key",
            "key": "-key1",
            "count": 2,
            "description": 'Keyword argument "-key1" has been defined 2 times.',
        }
    ]
    assert payload["counts"]["redefinition_of_key"] == 1


def test_ndjson_output(tmp_path: Path) -> None:
    """--format ndjson prints one record per diagnostic, then a summary."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--format", "ndjson", "--", "exe", "--foo", "-k2"]
    )

    assert_INVALID_INVOCATION(result)
    records: list[dict[str, Any]] = [json.loads(line) for line in result.stdout.splitlines()]
    assert [r["kind"] for r in records] == ["unrecognized_arg", "no_value_for_key", "summary"]
    assert records[1]["key"] == "-k2"
    assert records[-1]["truncated"] is True
    assert "diagnostics" not in records[-1]


def test_separators_override(tmp_path: Path) -> None:
    """--separators replaces the separators declared in the spec."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--separators", ":", "--", "exe", "-k1:x", "-k2=y"]
    )

    assert_INVALID_INVOCATION(result)
    assert result.output.splitlines()[0] == 'Unrecognized argument: "-k2=y".'


def test_allow_redefinition(tmp_path: Path) -> None:
    """--allow-redefinition silences repeated arguments."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(
        ["check", "--spec", str(spec), "--allow-redefinition", "--", "exe", "--u1", "--u1"]
    )

    assert_SUCCESS(result)


def test_empty_vector_succeeds(tmp_path: Path) -> None:
    """Nothing after -- is a well-formed (empty) vector."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(["check", "--spec", str(spec)])

    assert_SUCCESS(result)


def test_missing_spec_file(tmp_path: Path) -> None:
    """A nonexistent spec file exits with FILE_NOT_FOUND."""
    result = run_cli(["check", "--spec", str(tmp_path / "absent.toml"), "--", "exe"])

    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output
    assert "Spec file not found" in result.output


@pytest.mark.parametrize(
    "text",
    [
        "[kvargs\n",
        "[kvargs]\nkeyword = ['-x']\nunary = ['-x']\n",
        "[kvargs]\nunknown = 1\n",
    ],
)
def test_invalid_spec_file(tmp_path: Path, text: str) -> None:
    """Malformed or conflicting spec files exit with CONFIG_ERROR."""
    spec: Path = write_spec(tmp_path, text)
    result = run_cli(["check", "--spec", str(spec), "--", "exe"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
    assert "Error:" in result.output


def test_separator_override_conflict(tmp_path: Path) -> None:
    """An override that collides with a declared name is a config error."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(["check", "--spec", str(spec), "--separators", "k", "--", "exe"])

    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_verbose_and_quiet_conflict(tmp_path: Path) -> None:
    """-v and -q together are a usage error."""
    spec: Path = write_spec(tmp_path)
    result = run_cli(["-v", "-q", "check", "--spec", str(spec), "--", "exe"])

    assert_USAGE_ERROR(result)
