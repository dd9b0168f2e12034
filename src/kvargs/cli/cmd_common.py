# topmark:header:start
#
#   project      : KvArgs
#   file         : cmd_common.py
#   file_relpath : src/kvargs/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small helpers used by multiple CLI commands. They only
encapsulate plumbing such as loading spec files and translating library errors
into CLI errors with the right exit codes.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from kvargs.cli.errors import KvargsConfigError, KvargsFileNotFoundError
from kvargs.config.io import load_registry
from kvargs.config.logging import get_logger
from kvargs.errors import ConfigError

if TYPE_CHECKING:
    from pathlib import Path

    from kvargs.config.logging import KvargsLogger
    from kvargs.registry import ArgRegistry

logger: KvargsLogger = get_logger(__name__)


def get_effective_verbosity(ctx: click.Context) -> int:
    """Return the program-output verbosity stored on the group context (default 0)."""
    obj: object = ctx.obj
    if isinstance(obj, dict):
        return int(obj.get("verbosity_level", 0))  # type: ignore[arg-type]
    return 0


def load_spec_registry(
    spec_path: Path,
    *,
    separators: str | None = None,
    allow_redefinition: bool = False,
) -> ArgRegistry:
    """Load a spec file and apply command-line overrides.

    Args:
        spec_path (Path): TOML spec file.
        separators (str | None): Replacement separator characters, if given.
        allow_redefinition (bool): Turn the redefinition policy off.

    Returns:
        ArgRegistry: The loaded registry.

    Raises:
        KvargsFileNotFoundError: If ``spec_path`` does not exist.
        KvargsConfigError: If the spec cannot be loaded or the overrides conflict
            with its declarations.
    """
    if not spec_path.exists():
        raise KvargsFileNotFoundError(f"Spec file not found: {spec_path}")
    try:
        registry: ArgRegistry = load_registry(spec_path)
        if separators is not None:
            registry.set_separators(separators)
    except ConfigError as exc:
        logger.debug("Spec %s rejected: %s", spec_path, exc)
        raise KvargsConfigError(str(exc)) from exc
    if allow_redefinition:
        registry.set_redefinition_policy(False)
    return registry
