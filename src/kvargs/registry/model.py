# topmark:header:start
#
#   project      : KvArgs
#   file         : model.py
#   file_relpath : src/kvargs/registry/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument declarations: specs, the mutable registry and its frozen snapshot.

Scope:
    - `ArgSpec` describes one accepted argument (a full name plus an optional
      abbreviation). Keyword specs carry a value, unary specs are plain flags.
    - `ArgRegistry` is the mutable builder used during setup. Every declaration
      is validated immediately and either applied in full or rejected with a
      [`ConfigError`][kvargs.errors.ConfigError].
    - `FrozenArgRegistry` is the immutable snapshot consumed by the
      classification engine.

Invariants:
    - No name or abbreviation occurs twice across *all* keyword and unary specs.
    - No name or abbreviation contains an active separator character.
    - An empty abbreviation means "no abbreviation" and never matches a token.

Concurrency:
    The registry is not thread-safe. Callers must finish all declarations
    before classification starts; `freeze()` marks that boundary.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from kvargs.config.logging import get_logger
from kvargs.constants import DEFAULT_REDEFINITION_IS_ERROR, DEFAULT_SEPARATORS
from kvargs.errors import (
    DuplicateArgumentError,
    InvalidArgumentNameError,
    SeparatorConflictError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from kvargs.config.logging import KvargsLogger

logger: KvargsLogger = get_logger(__name__)


class ArgKind(Enum):
    """The two disjoint kinds of declared arguments."""

    KEYWORD = "keyword"
    UNARY = "unary"

    @property
    def label(self) -> str:
        """Return the capitalized label used at the start of error messages."""
        return "Keyword argument" if self is ArgKind.KEYWORD else "Unary argument"

    @property
    def noun(self) -> str:
        """Return the lowercase noun used inside error messages."""
        return "keyword argument" if self is ArgKind.KEYWORD else "unary argument"


@dataclass(frozen=True, slots=True)
class ArgSpec:
    """Declaration of a single accepted argument.

    Attributes:
        kind (ArgKind): Whether the argument takes a value (keyword) or not (unary).
        name (str): Full name, e.g. ``"--verbose"``. Never empty.
        abbreviation (str): Optional short form, e.g. ``"-v"``. Empty means none.
    """

    kind: ArgKind
    name: str
    abbreviation: str = ""

    def matches(self, token: str) -> bool:
        """Return True if ``token`` equals the full name or the abbreviation."""
        return token == self.name or (bool(self.abbreviation) and token == self.abbreviation)

    def texts(self) -> Iterator[str]:
        """Yield the name and, when present, the abbreviation."""
        yield self.name
        if self.abbreviation:
            yield self.abbreviation

    def describe(self) -> str:
        """Return a short human-readable form such as ``-key1 (-k1)``."""
        if self.abbreviation:
            return f"{self.name} ({self.abbreviation})"
        return self.name


def _normalize_separators(chars: str | Iterable[str]) -> str:
    """Return the separator characters as a string without repeats.

    Args:
        chars (str | Iterable[str]): A string of separator characters, or an
            iterable of single-character strings.

    Returns:
        str: The characters in first-occurrence order.

    Raises:
        SeparatorConflictError: If an element is not exactly one character long.
    """
    seen: list[str] = []
    for c in chars:
        if len(c) != 1:
            raise SeparatorConflictError(
                f'Separator "{c}" must be exactly one character long.',
            )
        if c not in seen:
            seen.append(c)
    return "".join(seen)


@dataclass(frozen=True, slots=True)
class FrozenArgRegistry:
    """Immutable snapshot of the declared arguments and classification policy.

    Instances are produced by `ArgRegistry.freeze` and passed by reference into
    the classification engine, which keeps each pass a pure function of
    (snapshot, tokens).
    """

    keyword_specs: tuple[ArgSpec, ...] = ()
    unary_specs: tuple[ArgSpec, ...] = ()
    separators: str = DEFAULT_SEPARATORS
    redefinition_is_error: bool = DEFAULT_REDEFINITION_IS_ERROR

    def find_keyword(self, token: str) -> ArgSpec | None:
        """Return the keyword spec whose name or abbreviation equals ``token``."""
        return next((spec for spec in self.keyword_specs if spec.matches(token)), None)

    def find_unary(self, token: str) -> ArgSpec | None:
        """Return the unary spec whose name or abbreviation equals ``token``."""
        return next((spec for spec in self.unary_specs if spec.matches(token)), None)

    def find_separator(self, token: str) -> str | None:
        """Return the first separator, in declared order, that occurs in ``token``."""
        return next((c for c in self.separators if c in token), None)

    def is_declared_keyword(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared keyword argument."""
        return any(spec.name == name for spec in self.keyword_specs)

    def is_declared_unary(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared unary argument."""
        return any(spec.name == name for spec in self.unary_specs)

    def thaw(self) -> ArgRegistry:
        """Return a mutable copy of this snapshot.

        Mirrors `ArgRegistry.freeze`. Prefer thaw → edit → freeze over
        building a new registry by hand.

        Returns:
            ArgRegistry: A mutable builder initialized from this snapshot.
        """
        registry = ArgRegistry(
            separators=self.separators,
            redefinition_is_error=self.redefinition_is_error,
        )
        registry._keyword_specs.extend(self.keyword_specs)
        registry._unary_specs.extend(self.unary_specs)
        return registry


class ArgRegistry:
    """Mutable builder holding keyword and unary declarations.

    Args:
        separators (str | Iterable[str]): Characters that split ``key<sep>value`` tokens.
        redefinition_is_error (bool): Whether repeating an argument is reported.
    """

    def __init__(
        self,
        *,
        separators: str | Iterable[str] = DEFAULT_SEPARATORS,
        redefinition_is_error: bool = DEFAULT_REDEFINITION_IS_ERROR,
    ) -> None:
        self._keyword_specs: list[ArgSpec] = []
        self._unary_specs: list[ArgSpec] = []
        self._separators: str = _normalize_separators(separators)
        self._redefinition_is_error: bool = redefinition_is_error

    def __repr__(self) -> str:
        return (
            f"ArgRegistry(keywords={[s.name for s in self._keyword_specs]!r}, "
            f"unaries={[s.name for s in self._unary_specs]!r}, "
            f"separators={self._separators!r}, "
            f"redefinition_is_error={self._redefinition_is_error!r})"
        )

    # --- Properties ---

    @property
    def keyword_specs(self) -> tuple[ArgSpec, ...]:
        """Declared keyword specs in declaration order."""
        return tuple(self._keyword_specs)

    @property
    def unary_specs(self) -> tuple[ArgSpec, ...]:
        """Declared unary specs in declaration order."""
        return tuple(self._unary_specs)

    @property
    def separators(self) -> str:
        """Active separator characters in declared order."""
        return self._separators

    @property
    def redefinition_is_error(self) -> bool:
        """Whether repeated arguments produce redefinition diagnostics."""
        return self._redefinition_is_error

    # --- Declarations ---

    def declare_keyword(self, name: str, abbreviation: str | None = None) -> ArgSpec:
        """Declare a value-bearing keyword argument.

        Args:
            name (str): Full keyword name.
            abbreviation (str | None): Optional abbreviation; None or ``""`` means none.

        Returns:
            ArgSpec: The newly declared spec.
        """
        return self._declare(ArgKind.KEYWORD, name, abbreviation)

    def declare_unary(self, name: str, abbreviation: str | None = None) -> ArgSpec:
        """Declare a unary (flag) argument.

        Args:
            name (str): Full flag name.
            abbreviation (str | None): Optional abbreviation; None or ``""`` means none.

        Returns:
            ArgSpec: The newly declared spec.
        """
        return self._declare(ArgKind.UNARY, name, abbreviation)

    def _declare(self, kind: ArgKind, name: str, abbreviation: str | None) -> ArgSpec:
        abbr: str = abbreviation or ""
        if not name:
            raise InvalidArgumentNameError(f"{kind.label} name cannot be empty.")
        if abbr == name:
            raise InvalidArgumentNameError(
                f'{kind.label} abbreviation "{abbr}" is identical to its full name.'
            )

        self._check_collisions(kind, name, abbr)
        self._check_separators_in(kind, name, abbr)

        spec = ArgSpec(kind=kind, name=name, abbreviation=abbr)
        if kind is ArgKind.KEYWORD:
            self._keyword_specs.append(spec)
        else:
            self._unary_specs.append(spec)
        logger.debug("Declared %s %s", kind.noun, spec.describe())
        return spec

    def _check_collisions(self, kind: ArgKind, name: str, abbr: str) -> None:
        """Reject ``name``/``abbr`` if either clashes with any declared text.

        Same-kind specs are checked first, then specs of the other kind, so the
        reported clash is the one users are most likely to have intended.

        Raises:
            DuplicateArgumentError: On the first clash found.
        """
        same, other = (
            (self._keyword_specs, self._unary_specs)
            if kind is ArgKind.KEYWORD
            else (self._unary_specs, self._keyword_specs)
        )
        for existing in same:
            if existing.name == name:
                raise DuplicateArgumentError(f'Duplicate {kind.noun}: "{name}".')
            if existing.abbreviation and existing.abbreviation == name:
                raise DuplicateArgumentError(
                    f'{kind.label} "{name}" matches the abbreviation of another '
                    f'{kind.noun}: "{existing.name}".'
                )
            if abbr and existing.name == abbr:
                raise DuplicateArgumentError(
                    f'{kind.label} abbreviation "{abbr}" matches the full name of another '
                    f"{kind.noun}."
                )
            if abbr and existing.abbreviation == abbr:
                raise DuplicateArgumentError(
                    f'{kind.label} abbreviation "{abbr}" matches the abbreviation of another '
                    f'{kind.noun} ("{existing.name}").'
                )
        for existing in other:
            other_noun: str = existing.kind.noun
            if existing.name == name:
                raise DuplicateArgumentError(f'{kind.label} "{name}" matches a {other_noun}.')
            if existing.abbreviation and existing.abbreviation == name:
                raise DuplicateArgumentError(
                    f'{kind.label} "{name}" matches the abbreviation of {other_noun}: '
                    f'"{existing.name}".'
                )
            if abbr and existing.name == abbr:
                raise DuplicateArgumentError(
                    f'{kind.label} abbreviation "{abbr}" matches the full name of a {other_noun}.'
                )
            if abbr and existing.abbreviation == abbr:
                raise DuplicateArgumentError(
                    f'{kind.label} abbreviation "{abbr}" matches the abbreviation of '
                    f'{other_noun} "{existing.name}".'
                )

    def _check_separators_in(self, kind: ArgKind, name: str, abbr: str) -> None:
        for c in self._separators:
            if c in name:
                raise SeparatorConflictError(
                    f'{kind.label} "{name}" contains the separator character "{c}".'
                )
            if c in abbr:
                raise SeparatorConflictError(
                    f'The abbreviation ("{abbr}") for the {kind.noun} "{name}" contains '
                    f'the separator character "{c}".'
                )

    # --- Policy ---

    def set_separators(self, chars: str | Iterable[str]) -> None:
        """Replace the separator set after checking it against every declared spec.

        Only the *new* characters are checked; characters that are dropped are
        not re-examined. An empty set disables ``key<sep>value`` tokens.

        Args:
            chars (str | Iterable[str]): New separator characters.

        Raises:
            SeparatorConflictError: If a declared name or abbreviation contains one
                of the new characters. The separator set is left unchanged.
        """
        new_seps: str = _normalize_separators(chars)
        for c in new_seps:
            for spec in (*self._unary_specs, *self._keyword_specs):
                if c in spec.name:
                    raise SeparatorConflictError(
                        f'Separator characters cannot include "{c}" which is in '
                        f'{spec.kind.noun} "{spec.name}".'
                    )
                if c in spec.abbreviation:
                    raise SeparatorConflictError(
                        f'Separator characters cannot include "{c}" which is in the '
                        f'abbreviation ("{spec.abbreviation}") for the {spec.kind.noun} '
                        f'"{spec.name}".'
                    )
        logger.debug("Separators changed from %r to %r", self._separators, new_seps)
        self._separators = new_seps

    def set_redefinition_policy(self, is_error: bool) -> None:
        """Set whether repeated arguments produce redefinition diagnostics."""
        self._redefinition_is_error = is_error

    # --- Lookups ---

    def is_declared_keyword(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared keyword argument.

        Abbreviations are not considered.
        """
        return any(spec.name == name for spec in self._keyword_specs)

    def is_declared_unary(self, name: str) -> bool:
        """Return True if ``name`` is the full name of a declared unary argument.

        Abbreviations are not considered.
        """
        return any(spec.name == name for spec in self._unary_specs)

    def freeze(self) -> FrozenArgRegistry:
        """Return an immutable snapshot for use by the classification engine."""
        return FrozenArgRegistry(
            keyword_specs=tuple(self._keyword_specs),
            unary_specs=tuple(self._unary_specs),
            separators=self._separators,
            redefinition_is_error=self._redefinition_is_error,
        )
