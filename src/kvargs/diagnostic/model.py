# topmark:header:start
#
#   project      : KvArgs
#   file         : model.py
#   file_relpath : src/kvargs/diagnostic/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core diagnostic types and helpers for KvArgs.

This module defines the diagnostics produced while classifying an argument
vector. Diagnostics describe a malformed *invocation*; they are collected and
returned, never raised.

Sections:
    * DiagnosticKind: the four diagnostic kinds with associated terminal colors.
    * UnrecognizedArg / NoValueForKey / RedefinitionOfKey / RedefinitionOfUnary:
      immutable diagnostic payloads with a stable ``description``.
    * DiagnosticStats: aggregated per-kind counts.
    * DiagnosticLog: mutable per-pass collection that merges redefinitions.
    * FrozenDiagnosticLog: immutable snapshot returned with a classification result.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, Union, cast

from yachalk import chalk

from kvargs.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Iterator

    from kvargs.config.logging import KvargsLogger


logger: KvargsLogger = get_logger(__name__)


class DiagnosticKind(Enum):
    """Kinds of invocation diagnostics.

    Values are stable identifiers used in machine-readable output.
    """

    UNRECOGNIZED_ARG = "unrecognized_arg"
    NO_VALUE_FOR_KEY = "no_value_for_key"
    REDEFINITION_OF_KEY = "redefinition_of_key"
    REDEFINITION_OF_UNARY_ARG = "redefinition_of_unary_arg"

    @property
    def color(self) -> Callable[[str], str]:
        """Return the `yachalk` color function associated with this kind.

        Intended for human-readable output only; machine formats should not use colors.

        Returns:
            Callable[[str], str]: The `yachalk` color function associated with this kind.
        """
        return cast(
            "Callable[[str], str]",
            {
                DiagnosticKind.UNRECOGNIZED_ARG: chalk.red_bright,
                DiagnosticKind.NO_VALUE_FOR_KEY: chalk.red_bright,
                DiagnosticKind.REDEFINITION_OF_KEY: chalk.yellow,
                DiagnosticKind.REDEFINITION_OF_UNARY_ARG: chalk.yellow,
            }[self],
        )


@dataclass(frozen=True, slots=True)
class UnrecognizedArg:
    """A token that matched no declared argument.

    Attributes:
        token (str): The full raw token, including any separator and value.
    """

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.UNRECOGNIZED_ARG

    token: str

    @property
    def description(self) -> str:
        """Return the human-readable description."""
        return f'Unrecognized argument: "{self.token}".'

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {"kind": self.kind.value, "token": self.token, "description": self.description}


@dataclass(frozen=True, slots=True)
class NoValueForKey:
    """A space-delimited keyword was the last token, so no value follows it.

    Attributes:
        key (str): The keyword token as supplied (full name or abbreviation).
    """

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.NO_VALUE_FOR_KEY

    key: str

    @property
    def description(self) -> str:
        """Return the human-readable description."""
        return f'No corresponding value for keyword argument "{self.key}".'

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {"kind": self.kind.value, "key": self.key, "description": self.description}


@dataclass(frozen=True, slots=True)
class RedefinitionOfKey:
    """A keyword argument was supplied more than once.

    Attributes:
        key (str): Full name of the keyword argument.
        count (int): Number of times the argument has been supplied (>= 2).
    """

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.REDEFINITION_OF_KEY

    key: str
    count: int = 2

    @property
    def description(self) -> str:
        """Return the human-readable description."""
        return f'Keyword argument "{self.key}" has been defined {self.count} times.'

    def bumped(self) -> RedefinitionOfKey:
        """Return a copy with the occurrence count incremented by one."""
        return replace(self, count=self.count + 1)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "kind": self.kind.value,
            "key": self.key,
            "count": self.count,
            "description": self.description,
        }


@dataclass(frozen=True, slots=True)
class RedefinitionOfUnary:
    """A unary argument was supplied more than once.

    Attributes:
        unary (str): Full name of the unary argument.
        count (int): Number of times the argument has been supplied (>= 2).
    """

    kind: ClassVar[DiagnosticKind] = DiagnosticKind.REDEFINITION_OF_UNARY_ARG

    unary: str
    count: int = 2

    @property
    def description(self) -> str:
        """Return the human-readable description."""
        return f'Unary argument "{self.unary}" has been defined {self.count} times.'

    def bumped(self) -> RedefinitionOfUnary:
        """Return a copy with the occurrence count incremented by one."""
        return replace(self, count=self.count + 1)

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "kind": self.kind.value,
            "unary": self.unary,
            "count": self.count,
            "description": self.description,
        }


# Tagged variant over the four diagnostic kinds; dispatch on `.kind` or `match`.
Diagnostic = Union[UnrecognizedArg, NoValueForKey, RedefinitionOfKey, RedefinitionOfUnary]

Redefinition = Union[RedefinitionOfKey, RedefinitionOfUnary]


@dataclass(frozen=True)
class DiagnosticStats:
    """Aggregated counts for diagnostics by kind."""

    n_unrecognized: int
    n_no_value: int
    n_key_redefinition: int
    n_unary_redefinition: int

    @property
    def total(self) -> int:
        """Return the total count of diagnostics."""
        return (
            self.n_unrecognized
            + self.n_no_value
            + self.n_key_redefinition
            + self.n_unary_redefinition
        )


@dataclass
class DiagnosticLog:
    """Mutable, per-pass collection of diagnostics.

    Diagnostics are kept in first-occurrence order. Redefinition diagnostics are
    singletons per argument name: repeating an argument again replaces the
    existing entry, at its original position, with one whose count is
    incremented. A name → position index keeps that lookup constant-time.
    """

    items: list[Diagnostic] = field(default_factory=lambda: [])
    _redefinition_index: dict[tuple[DiagnosticKind, str], int] = field(
        default_factory=lambda: {},
        repr=False,
        compare=False,
    )

    def freeze(self) -> FrozenDiagnosticLog:
        """Return an immutable snapshot of this log's diagnostics."""
        return FrozenDiagnosticLog(items=tuple(self.items))

    def _add(self, diagnostic: Diagnostic) -> None:
        self.items.append(diagnostic)
        logger.trace("Adding [%s]: %r", diagnostic.kind.value, diagnostic.description)

    def add_unrecognized(self, token: str) -> UnrecognizedArg:
        """Append an ``UnrecognizedArg`` diagnostic for the full raw token.

        Args:
            token: The raw token as supplied.

        Returns:
            The appended diagnostic.
        """
        diagnostic = UnrecognizedArg(token)
        self._add(diagnostic)
        return diagnostic

    def add_no_value(self, key: str) -> NoValueForKey:
        """Append a ``NoValueForKey`` diagnostic.

        Args:
            key: The keyword token that lacked a following value.

        Returns:
            The appended diagnostic.
        """
        diagnostic = NoValueForKey(key)
        self._add(diagnostic)
        return diagnostic

    def note_key_redefinition(self, name: str) -> RedefinitionOfKey:
        """Record one more occurrence of an already defined keyword argument.

        Args:
            name: Full name of the keyword argument.

        Returns:
            The created or updated diagnostic.
        """
        return cast(
            "RedefinitionOfKey",
            self._note_redefinition(DiagnosticKind.REDEFINITION_OF_KEY, name),
        )

    def note_unary_redefinition(self, name: str) -> RedefinitionOfUnary:
        """Record one more occurrence of an already defined unary argument.

        Args:
            name: Full name of the unary argument.

        Returns:
            The created or updated diagnostic.
        """
        return cast(
            "RedefinitionOfUnary",
            self._note_redefinition(DiagnosticKind.REDEFINITION_OF_UNARY_ARG, name),
        )

    def _note_redefinition(self, kind: DiagnosticKind, name: str) -> Redefinition:
        index: int | None = self._redefinition_index.get((kind, name))
        if index is None:
            created: Redefinition = (
                RedefinitionOfKey(name)
                if kind is DiagnosticKind.REDEFINITION_OF_KEY
                else RedefinitionOfUnary(name)
            )
            self._redefinition_index[(kind, name)] = len(self.items)
            self._add(created)
            return created

        current = cast("Redefinition", self.items[index])
        updated: Redefinition = current.bumped()
        self.items[index] = updated
        logger.trace("Updating [%s]: %r", kind.value, updated.description)
        return updated

    def clear(self) -> None:
        """Remove all diagnostics."""
        self.items.clear()
        self._redefinition_index.clear()

    def stats(self) -> DiagnosticStats:
        """Return per-kind counts for diagnostics in this log."""
        return compute_diagnostic_stats(self.items)

    def descriptions(self) -> list[str]:
        """Return the rendered descriptions in order."""
        return [d.description for d in self.items]

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over all diagnostics in first-occurrence order."""
        return iter(self.items)

    def __len__(self) -> int:
        """Return the number of diagnostics stored in this log."""
        return len(self.items)


@dataclass(frozen=True, slots=True)
class FrozenDiagnosticLog:
    """Immutable diagnostic container attached to a classification result."""

    items: tuple[Diagnostic, ...] = ()

    def __iter__(self) -> Iterator[Diagnostic]:
        """Iterate over contained diagnostics in order."""
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __getitem__(self, index: int) -> Diagnostic:
        return self.items[index]

    def descriptions(self) -> list[str]:
        """Return the rendered descriptions in order."""
        return [d.description for d in self.items]

    def of_kind(self, kind: DiagnosticKind) -> tuple[Diagnostic, ...]:
        """Return the diagnostics of the given kind, in order."""
        return tuple(d for d in self.items if d.kind is kind)

    def stats(self) -> DiagnosticStats:
        """Return aggregated per-kind counts for the contained diagnostics."""
        return compute_diagnostic_stats(self.items)

    def to_dict(self) -> dict[str, int]:
        """Return a JSON-friendly mapping of counts by kind."""
        return diagnostics_counts_to_dict(self.items)

    def thaw(self) -> DiagnosticLog:
        """Return a mutable log seeded with these diagnostics.

        The redefinition index is rebuilt so further redefinitions keep merging.
        """
        log = DiagnosticLog(items=list(self.items))
        for i, d in enumerate(log.items):
            if isinstance(d, RedefinitionOfKey):
                log._redefinition_index[(d.kind, d.key)] = i
            elif isinstance(d, RedefinitionOfUnary):
                log._redefinition_index[(d.kind, d.unary)] = i
        return log


def compute_diagnostic_stats(diagnostics: Iterable[Diagnostic]) -> DiagnosticStats:
    """Return per-kind counts for a sequence of diagnostics.

    Args:
        diagnostics: the diagnostics to count.

    Returns:
        Per-kind counts.
    """
    counts: dict[DiagnosticKind, int] = dict.fromkeys(DiagnosticKind, 0)
    for d in diagnostics:
        counts[d.kind] += 1
    return DiagnosticStats(
        n_unrecognized=counts[DiagnosticKind.UNRECOGNIZED_ARG],
        n_no_value=counts[DiagnosticKind.NO_VALUE_FOR_KEY],
        n_key_redefinition=counts[DiagnosticKind.REDEFINITION_OF_KEY],
        n_unary_redefinition=counts[DiagnosticKind.REDEFINITION_OF_UNARY_ARG],
    )


def diagnostics_counts_to_dict(diagnostics: Iterable[Diagnostic]) -> dict[str, int]:
    """Return a JSON-friendly mapping of counts by kind for any iterable."""
    stats: DiagnosticStats = compute_diagnostic_stats(diagnostics)
    return {
        DiagnosticKind.UNRECOGNIZED_ARG.value: stats.n_unrecognized,
        DiagnosticKind.NO_VALUE_FOR_KEY.value: stats.n_no_value,
        DiagnosticKind.REDEFINITION_OF_KEY.value: stats.n_key_redefinition,
        DiagnosticKind.REDEFINITION_OF_UNARY_ARG.value: stats.n_unary_redefinition,
    }
