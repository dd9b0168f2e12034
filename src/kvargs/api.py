# topmark:header:start
#
#   project      : KvArgs
#   file         : api.py
#   file_relpath : src/kvargs/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Single-object facade over the registry and the classification engine.

`Args` bundles the setup phase (declarations, separators, redefinition policy)
with processing of an argument vector and the queries callers need afterwards.

Example:
    ```python
    import sys

    from kvargs.api import Args

    args = Args()
    args.add_keyword_arg("--output", "-o")
    args.add_unary_arg("--verbose", "-v")
    args.process_args(sys.argv)
    for diagnostic in args.errors():
        print(diagnostic.description)
    ```

Lifecycle:
    Declarations and policy changes are only accepted before the first call to
    `Args.process_args`; afterwards they raise
    [`RegistryLockedError`][kvargs.errors.RegistryLockedError]. Each call to
    `process_args` replaces the previous result, diagnostics included.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from kvargs.config.logging import get_logger
from kvargs.constants import DEFAULT_REDEFINITION_IS_ERROR, DEFAULT_SEPARATORS
from kvargs.engine import ClassificationResult, ResolvedState, classify_argv
from kvargs.errors import RegistryLockedError
from kvargs.registry import ArgRegistry, FrozenArgRegistry

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from kvargs.config.logging import KvargsLogger
    from kvargs.diagnostic import FrozenDiagnosticLog
    from kvargs.registry import ArgSpec

logger: KvargsLogger = get_logger(__name__)


class Args:
    """Declared arguments plus the result of the latest processed argument vector.

    Args:
        separators (str | Iterable[str]): Characters that split ``key<sep>value`` tokens.
        redefinition_is_error (bool): Whether repeated arguments are reported.
        registry (ArgRegistry | FrozenArgRegistry | None): Start from existing
            declarations instead of an empty registry. A frozen snapshot is thawed;
            a mutable registry is used as-is. ``separators`` and
            ``redefinition_is_error`` are ignored when given.
    """

    def __init__(
        self,
        *,
        separators: str | Iterable[str] = DEFAULT_SEPARATORS,
        redefinition_is_error: bool = DEFAULT_REDEFINITION_IS_ERROR,
        registry: ArgRegistry | FrozenArgRegistry | None = None,
    ) -> None:
        if registry is None:
            self._registry = ArgRegistry(
                separators=separators,
                redefinition_is_error=redefinition_is_error,
            )
        elif isinstance(registry, FrozenArgRegistry):
            self._registry = registry.thaw()
        else:
            self._registry = registry
        self._result: ClassificationResult | None = None

    # --- Setup phase ---

    def _ensure_setup_phase(self, action: str) -> None:
        if self._result is not None:
            raise RegistryLockedError(f"Cannot {action} after arguments have been processed.")

    def add_keyword_arg(self, name: str, abbreviation: str | None = None) -> ArgSpec:
        """Declare a keyword (value-bearing) argument."""
        self._ensure_setup_phase(f'add keyword argument "{name}"')
        return self._registry.declare_keyword(name, abbreviation)

    def add_unary_arg(self, name: str, abbreviation: str | None = None) -> ArgSpec:
        """Declare a unary (flag) argument."""
        self._ensure_setup_phase(f'add unary argument "{name}"')
        return self._registry.declare_unary(name, abbreviation)

    def set_separators(self, chars: str | Iterable[str]) -> None:
        """Replace the key/value separator characters."""
        self._ensure_setup_phase("change separators")
        self._registry.set_separators(chars)

    def set_redefinition_is_error(self, is_error: bool) -> None:
        """Set whether repeated arguments are reported."""
        self._ensure_setup_phase("change the redefinition policy")
        self._registry.set_redefinition_policy(is_error)

    @property
    def separators(self) -> str:
        """Active separator characters."""
        return self._registry.separators

    @property
    def redefinition_is_error(self) -> bool:
        """Whether repeated arguments are reported."""
        return self._registry.redefinition_is_error

    @property
    def registry(self) -> FrozenArgRegistry:
        """Snapshot of the current declarations."""
        return self._registry.freeze()

    # --- Processing ---

    def process_args(self, argv: Sequence[str]) -> ClassificationResult:
        """Classify a full argument vector (``argv[0]`` is the executable name).

        Args:
            argv (Sequence[str]): The argument vector, typically ``sys.argv``.

        Returns:
            ClassificationResult: The new result, also kept for later queries.
        """
        self._result = classify_argv(self._registry, argv)
        if not self._result.ok:
            logger.info(
                "Invocation of %r has %d problem(s)",
                self._result.exec_name,
                len(self._result.diagnostics),
            )
        return self._result

    @property
    def last_result(self) -> ClassificationResult:
        """The latest result, or an empty one when nothing has been processed."""
        if self._result is None:
            snapshot: FrozenArgRegistry = self._registry.freeze()
            return ClassificationResult(registry=snapshot, state=ResolvedState.initial(snapshot))
        return self._result

    # --- Queries ---

    @property
    def exec_name(self) -> str:
        """The executable name from the latest argument vector."""
        return self.last_result.exec_name

    def has_keyword_arg(self, name: str) -> bool:
        """Return True if ``name`` is a declared keyword argument name."""
        return self._registry.is_declared_keyword(name)

    def keyword_arg_defined(self, name: str) -> bool:
        """Return True if keyword ``name`` was supplied; raise if undeclared."""
        return self.last_result.is_keyword_defined(name)

    def value_for_keyword_arg(self, name: str) -> str:
        """Return the value of keyword ``name`` (empty if not supplied); raise if undeclared."""
        return self.last_result.value_of(name)

    def has_unary_arg(self, name: str) -> bool:
        """Return True if ``name`` is a declared unary argument name."""
        return self._registry.is_declared_unary(name)

    def unary_arg_defined(self, name: str) -> bool:
        """Return True if flag ``name`` was supplied; raise if undeclared."""
        return self.last_result.is_unary_defined(name)

    def errors(self) -> FrozenDiagnosticLog:
        """Return the diagnostics of the latest argument vector."""
        return self.last_result.diagnostics

    diagnostics = errors
