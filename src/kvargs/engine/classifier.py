# topmark:header:start
#
#   project      : KvArgs
#   file         : classifier.py
#   file_relpath : src/kvargs/engine/classifier.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument-token classification.

Tokens are walked left to right. Each token is resolved by the first rule that
applies:

1. **Key/value pair**: the token contains a separator character (separators are
   tried in declared order). It is split at the first occurrence of that
   character and the left part must name a keyword argument. If it does not,
   the whole token is unrecognized. A separator-bearing token is never tried
   against the rules below.
2. **Unary**: the whole token names a unary argument.
3. **Space-delimited keyword**: the whole token names a keyword argument and
   the *next* token is its value. If there is no next token, a
   ``NoValueForKey`` diagnostic is recorded and the pass stops immediately.
4. Otherwise the token is unrecognized.

When the redefinition policy is active, supplying an already defined argument
again records a redefinition diagnostic, merged per name. Keyword values are
always overwritten by the latest occurrence.

A pass is a pure function of (registry snapshot, tokens): it performs no I/O
and holds no shared state. Runtime is O(tokens x declared specs).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvargs.config.logging import get_logger
from kvargs.diagnostic import DiagnosticLog
from kvargs.engine.state import ClassificationResult, KeywordState, ResolvedState, UnaryState
from kvargs.registry import ArgRegistry, FrozenArgRegistry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from kvargs.config.logging import KvargsLogger
    from kvargs.registry import ArgSpec

logger: KvargsLogger = get_logger(__name__)


class _ClassificationPass:
    """Mutable bookkeeping for a single pass over one token sequence."""

    def __init__(self, registry: FrozenArgRegistry) -> None:
        self.registry: FrozenArgRegistry = registry
        self.keywords: dict[str, KeywordState] = {
            spec.name: KeywordState() for spec in registry.keyword_specs
        }
        self.unaries: dict[str, UnaryState] = {
            spec.name: UnaryState() for spec in registry.unary_specs
        }
        self.log: DiagnosticLog = DiagnosticLog()

    def run(self, exec_name: str, tokens: Sequence[str]) -> ClassificationResult:
        truncated: bool = False
        n: int = len(tokens)
        i: int = 0
        while i < n:
            token: str = tokens[i]

            sep: str | None = self.registry.find_separator(token)
            if sep is not None:
                self._consume_pair(token, sep)
                i += 1
                continue

            unary: ArgSpec | None = self.registry.find_unary(token)
            if unary is not None:
                logger.trace("Token %d %r: unary %s", i, token, unary.name)
                self._define_unary(unary)
                i += 1
                continue

            keyword: ArgSpec | None = self.registry.find_keyword(token)
            if keyword is not None:
                if i + 1 == n:
                    logger.trace("Token %d %r: keyword %s without value", i, token, keyword.name)
                    self.log.add_no_value(token)
                    truncated = True
                    break
                logger.trace(
                    "Token %d %r: keyword %s, value %r", i, token, keyword.name, tokens[i + 1]
                )
                self._define_keyword(keyword, tokens[i + 1])
                i += 2
                continue

            logger.trace("Token %d %r: unrecognized", i, token)
            self.log.add_unrecognized(token)
            i += 1

        logger.debug(
            "Classified %d token(s) for %r: %d diagnostic(s)%s",
            n,
            exec_name,
            len(self.log),
            " (truncated)" if truncated else "",
        )
        return ClassificationResult(
            registry=self.registry,
            exec_name=exec_name,
            state=ResolvedState.build(self.keywords, self.unaries),
            diagnostics=self.log.freeze(),
            truncated=truncated,
        )

    def _consume_pair(self, token: str, sep: str) -> None:
        key, _, value = token.partition(sep)
        keyword: ArgSpec | None = self.registry.find_keyword(key)
        if keyword is None:
            logger.trace("Token %r: split on %r, no keyword %r", token, sep, key)
            self.log.add_unrecognized(token)
            return
        logger.trace("Token %r: keyword %s, value %r", token, keyword.name, value)
        self._define_keyword(keyword, value)

    def _define_keyword(self, spec: ArgSpec, value: str) -> None:
        if self.keywords[spec.name].defined and self.registry.redefinition_is_error:
            self.log.note_key_redefinition(spec.name)
        self.keywords[spec.name] = KeywordState(defined=True, value=value)

    def _define_unary(self, spec: ArgSpec) -> None:
        if self.unaries[spec.name].defined and self.registry.redefinition_is_error:
            self.log.note_unary_redefinition(spec.name)
        self.unaries[spec.name] = UnaryState(defined=True)


def classify(
    registry: ArgRegistry | FrozenArgRegistry,
    exec_name: str,
    tokens: Sequence[str],
) -> ClassificationResult:
    """Classify ``tokens`` against the declared arguments.

    Args:
        registry (ArgRegistry | FrozenArgRegistry): Declarations to classify against.
            A mutable registry is frozen first, so later edits do not affect the result.
        exec_name (str): The executable name (argv[0]), stored verbatim.
        tokens (Sequence[str]): The argument tokens following the executable name.

    Returns:
        ClassificationResult: Resolved state plus diagnostics.
    """
    snapshot: FrozenArgRegistry = (
        registry.freeze() if isinstance(registry, ArgRegistry) else registry
    )
    return _ClassificationPass(snapshot).run(exec_name, list(tokens))


def classify_argv(
    registry: ArgRegistry | FrozenArgRegistry,
    argv: Sequence[str],
) -> ClassificationResult:
    """Classify a full argument vector whose zeroth entry is the executable name.

    An empty ``argv`` yields an empty result (no exec name, nothing defined).

    Args:
        registry (ArgRegistry | FrozenArgRegistry): Declarations to classify against.
        argv (Sequence[str]): The full argument vector, e.g. ``sys.argv``.

    Returns:
        ClassificationResult: Resolved state plus diagnostics.
    """
    snapshot: FrozenArgRegistry = (
        registry.freeze() if isinstance(registry, ArgRegistry) else registry
    )
    if not argv:
        return ClassificationResult(registry=snapshot, state=ResolvedState.initial(snapshot))
    return _ClassificationPass(snapshot).run(argv[0], list(argv[1:]))
