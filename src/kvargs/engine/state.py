# topmark:header:start
#
#   project      : KvArgs
#   file         : state.py
#   file_relpath : src/kvargs/engine/state.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Resolved argument state and the classification result.

A `ClassificationResult` is the complete outcome of one pass: the executable
name, the resolved keyword/unary state, and the frozen diagnostics. It also
answers the caller-facing queries ("was this flag declared", "was it
supplied", "what value did it get").
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from kvargs.diagnostic import FrozenDiagnosticLog
from kvargs.errors import UndeclaredArgumentError
from kvargs.registry import FrozenArgRegistry

if TYPE_CHECKING:
    from collections.abc import Mapping


@dataclass(frozen=True, slots=True)
class KeywordState:
    """Resolution of a keyword argument.

    Attributes:
        defined (bool): Whether the keyword was supplied.
        value (str): The last supplied value; empty when not supplied.
    """

    defined: bool = False
    value: str = ""


@dataclass(frozen=True, slots=True)
class UnaryState:
    """Resolution of a unary argument.

    Attributes:
        defined (bool): Whether the flag was supplied.
    """

    defined: bool = False


def _empty_keywords() -> Mapping[str, KeywordState]:
    return MappingProxyType({})


def _empty_unaries() -> Mapping[str, UnaryState]:
    return MappingProxyType({})


@dataclass(frozen=True, slots=True)
class ResolvedState:
    """Read-only per-name resolution, keyed by full name in declaration order."""

    keywords: Mapping[str, KeywordState] = field(default_factory=_empty_keywords)
    unaries: Mapping[str, UnaryState] = field(default_factory=_empty_unaries)

    @classmethod
    def build(
        cls,
        keywords: Mapping[str, KeywordState],
        unaries: Mapping[str, UnaryState],
    ) -> ResolvedState:
        """Return a state backed by read-only copies of the given mappings."""
        return cls(
            keywords=MappingProxyType(dict(keywords)),
            unaries=MappingProxyType(dict(unaries)),
        )

    @classmethod
    def initial(cls, registry: FrozenArgRegistry) -> ResolvedState:
        """Return the state where nothing has been supplied yet."""
        return cls.build(
            {spec.name: KeywordState() for spec in registry.keyword_specs},
            {spec.name: UnaryState() for spec in registry.unary_specs},
        )

    def defined_keywords(self) -> dict[str, str]:
        """Return ``{name: value}`` for every supplied keyword."""
        return {name: s.value for name, s in self.keywords.items() if s.defined}

    def defined_unaries(self) -> list[str]:
        """Return the names of every supplied flag, in declaration order."""
        return [name for name, s in self.unaries.items() if s.defined]

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "keywords": {
                name: {"defined": s.defined, "value": s.value} for name, s in self.keywords.items()
            },
            "unaries": {name: {"defined": s.defined} for name, s in self.unaries.items()},
        }


@dataclass(frozen=True, slots=True)
class ClassificationResult:
    """Outcome of one classification pass.

    Attributes:
        registry (FrozenArgRegistry): The snapshot the pass was run against.
        exec_name (str): The zeroth raw token, verbatim.
        state (ResolvedState): Resolved keyword values and flags.
        diagnostics (FrozenDiagnosticLog): Diagnostics in first-occurrence order.
        truncated (bool): True when the pass stopped early because the last
            token was a keyword with no following value.
    """

    registry: FrozenArgRegistry = field(default_factory=FrozenArgRegistry)
    exec_name: str = ""
    state: ResolvedState = field(default_factory=ResolvedState)
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)
    truncated: bool = False

    @property
    def ok(self) -> bool:
        """Return True when the invocation produced no diagnostics."""
        return len(self.diagnostics) == 0

    def is_keyword_declared(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared keyword argument."""
        return self.registry.is_declared_keyword(name)

    def is_keyword_defined(self, name: str) -> bool:
        """Return True if the keyword argument ``name`` was supplied.

        Raises:
            UndeclaredArgumentError: If ``name`` is not a declared keyword name.
        """
        s: KeywordState | None = self.state.keywords.get(name)
        if s is None:
            raise UndeclaredArgumentError(f'No such keyword argument: "{name}".')
        return s.defined

    def value_of(self, name: str) -> str:
        """Return the value supplied for keyword ``name`` (empty if not supplied).

        Raises:
            UndeclaredArgumentError: If ``name`` is not a declared keyword name.
        """
        s: KeywordState | None = self.state.keywords.get(name)
        if s is None:
            raise UndeclaredArgumentError(
                f'Cannot retrieve value for "{name}": no such keyword argument.'
            )
        return s.value

    def is_unary_declared(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared unary argument."""
        return self.registry.is_declared_unary(name)

    def is_unary_defined(self, name: str) -> bool:
        """Return True if the unary argument ``name`` was supplied.

        Raises:
            UndeclaredArgumentError: If ``name`` is not a declared unary name.
        """
        s: UnaryState | None = self.state.unaries.get(name)
        if s is None:
            raise UndeclaredArgumentError(f'No such unary argument: "{name}".')
        return s.defined

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly mapping for machine output."""
        return {
            "exec_name": self.exec_name,
            "ok": self.ok,
            "truncated": self.truncated,
            "state": self.state.to_dict(),
            "diagnostics": [d.to_dict() for d in self.diagnostics],
            "counts": self.diagnostics.to_dict(),
        }
