# topmark:header:start
#
#   project      : KvArgs
#   file         : test_diagnostic_model.py
#   file_relpath : tests/diagnostic/test_diagnostic_model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Unit tests for diagnostic rendering and redefinition merging."""

from __future__ import annotations

import pytest

from kvargs.diagnostic import (
    DiagnosticKind,
    DiagnosticLog,
    FrozenDiagnosticLog,
    NoValueForKey,
    RedefinitionOfKey,
    RedefinitionOfUnary,
    UnrecognizedArg,
)


@pytest.mark.parametrize(
    ("diagnostic", "expected"),
    [
        (UnrecognizedArg("--foo=bar"), 'Unrecognized argument: "--foo=bar".'),
        (NoValueForKey("-key1"), 'No corresponding value for keyword argument "-key1".'),
        (RedefinitionOfKey("-key1"), 'Keyword argument "-key1" has been defined 2 times.'),
        (RedefinitionOfUnary("--u", 5), 'Unary argument "--u" has been defined 5 times.'),
    ],
)
def test_descriptions(
    diagnostic: UnrecognizedArg | NoValueForKey | RedefinitionOfKey | RedefinitionOfUnary,
    expected: str,
) -> None:
    """Descriptions are stable, exact strings."""
    assert diagnostic.description == expected


def test_kinds_and_payloads() -> None:
    """Each variant carries its kind tag and a machine payload."""
    assert UnrecognizedArg("x").kind is DiagnosticKind.UNRECOGNIZED_ARG
    assert NoValueForKey("x").kind is DiagnosticKind.NO_VALUE_FOR_KEY
    assert RedefinitionOfKey("x").kind is DiagnosticKind.REDEFINITION_OF_KEY
    assert RedefinitionOfUnary("x").kind is DiagnosticKind.REDEFINITION_OF_UNARY_ARG

    assert RedefinitionOfUnary("--u", 3).to_dict() == {
        "kind": "redefinition_of_unary_arg",
        "unary": "--u",
        "count": 3,
        "description": 'Unary argument "--u" has been defined 3 times.',
    }
    assert UnrecognizedArg("x").to_dict()["token"] == "x"


def test_redefinitions_merge_per_name_in_place() -> None:
    """Repeated redefinitions update one entry at its original position."""
    log = DiagnosticLog()
    log.add_unrecognized("--foo")
    log.note_unary_redefinition("--u")
    log.note_key_redefinition("-k")
    log.add_unrecognized("--bar")
    log.note_unary_redefinition("--u")
    updated = log.note_key_redefinition("-k")
    log.note_key_redefinition("-k")

    assert updated == RedefinitionOfKey("-k", 3)
    assert log.items == [
        UnrecognizedArg("--foo"),
        RedefinitionOfUnary("--u", 3),
        RedefinitionOfKey("-k", 4),
        UnrecognizedArg("--bar"),
    ]


def test_key_and_unary_with_same_text_are_tracked_separately() -> None:
    """Merging is keyed by kind and name."""
    log = DiagnosticLog()
    log.note_key_redefinition("x")
    log.note_unary_redefinition("x")
    assert len(log) == 2


def test_unrecognized_tokens_are_never_merged() -> None:
    """Only redefinitions are merged; repeated unknown tokens are each reported."""
    log = DiagnosticLog()
    log.add_unrecognized("--foo")
    log.add_unrecognized("--foo")
    assert log.descriptions() == ['Unrecognized argument: "--foo".'] * 2


def test_freeze_and_stats() -> None:
    """Frozen logs are immutable snapshots with per-kind counts."""
    log = DiagnosticLog()
    log.add_unrecognized("a")
    log.add_unrecognized("b")
    log.note_unary_redefinition("--u")
    log.add_no_value("-k")
    frozen: FrozenDiagnosticLog = log.freeze()

    log.clear()
    assert len(log) == 0
    assert len(frozen) == 4

    stats = frozen.stats()
    assert (stats.n_unrecognized, stats.n_no_value, stats.total) == (2, 1, 4)
    assert frozen.to_dict() == {
        "unrecognized_arg": 2,
        "no_value_for_key": 1,
        "redefinition_of_key": 0,
        "redefinition_of_unary_arg": 1,
    }
    assert frozen.of_kind(DiagnosticKind.UNRECOGNIZED_ARG) == (
        UnrecognizedArg("a"),
        UnrecognizedArg("b"),
    )


def test_thaw_keeps_merging() -> None:
    """A thawed log continues to merge into existing redefinition entries."""
    log = DiagnosticLog()
    log.note_unary_redefinition("--u")
    thawed = log.freeze().thaw()
    thawed.note_unary_redefinition("--u")
    assert thawed.items == [RedefinitionOfUnary("--u", 3)]
