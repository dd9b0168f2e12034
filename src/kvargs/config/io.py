# topmark:header:start
#
#   project      : KvArgs
#   file         : io.py
#   file_relpath : src/kvargs/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and render argument declarations as TOML.

A spec file declares the accepted arguments under a ``[kvargs]`` table (or
``[tool.kvargs]`` inside ``pyproject.toml``):

```toml
[kvargs]
separators = "="
redefinition_is_error = true

[[kvargs.keyword]]
name = "-key1"
abbreviation = "-k1"

[[kvargs.unary]]
name = "--unary1"
```

Keyword and unary entries may also be given as bare strings (name only).
Parsing is done with `tomlkit` and returned as plain `dict` structures before
being applied to an [`ArgRegistry`][kvargs.registry.ArgRegistry]. Shape errors
raise [`SpecFileError`][kvargs.errors.SpecFileError]; declaration conflicts
propagate as raised by the registry.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from kvargs.config.logging import get_logger
from kvargs.constants import PYPROJECT_TOOL_TABLE, SPEC_TABLE_NAME
from kvargs.errors import SpecFileError
from kvargs.registry import ArgKind, ArgRegistry, FrozenArgRegistry

if TYPE_CHECKING:
    from pathlib import Path

    from kvargs.config.logging import KvargsLogger

logger: KvargsLogger = get_logger(__name__)

TomlTable = dict[str, Any]

_SPEC_KEYS: frozenset[str] = frozenset({"separators", "redefinition_is_error", "keyword", "unary"})
_ENTRY_KEYS: frozenset[str] = frozenset({"name", "abbreviation"})


# --- Parsing ---


def parse_toml_text(text: str, source: str = "<string>") -> TomlTable:
    """Parse TOML text into a plain dict.

    Args:
        text (str): TOML document text.
        source (str): Label used in error messages (usually the file path).

    Returns:
        TomlTable: The parsed document.

    Raises:
        SpecFileError: If the text is not valid TOML.
    """
    try:
        doc = tomlkit.parse(text)
    except TomlkitParseError as exc:
        raise SpecFileError(f"{source}: invalid TOML: {exc}") from exc
    return cast("TomlTable", doc.unwrap())


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file.

    Args:
        path (Path): Path to the TOML file.

    Returns:
        TomlTable: The parsed document.

    Raises:
        SpecFileError: If the file cannot be read or parsed.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecFileError(f"Cannot read spec file {path}: {exc}") from exc
    logger.debug("Loaded spec file %s (%d bytes)", path, len(text))
    return parse_toml_text(text, source=str(path))


def extract_spec_table(doc: TomlTable, source: str = "<string>") -> TomlTable:
    """Return the ``[kvargs]`` table, falling back to ``[tool.kvargs]``.

    Raises:
        SpecFileError: If neither table exists or the table is not a TOML table.
    """
    table: object = doc.get(SPEC_TABLE_NAME)
    if table is None:
        tool: object = doc.get(PYPROJECT_TOOL_TABLE)
        if isinstance(tool, Mapping):
            table = cast("Mapping[str, object]", tool).get(SPEC_TABLE_NAME)
    if table is None:
        raise SpecFileError(
            f"{source}: no [{SPEC_TABLE_NAME}] or "
            f"[{PYPROJECT_TOOL_TABLE}.{SPEC_TABLE_NAME}] table found."
        )
    if not isinstance(table, Mapping):
        raise SpecFileError(f"{source}: [{SPEC_TABLE_NAME}] must be a table.")
    return dict(cast("Mapping[str, Any]", table))


def _read_separators(value: object, source: str) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, list) and all(isinstance(v, str) for v in cast("list[object]", value)):
        return "".join(cast("list[str]", value))
    raise SpecFileError(f"{source}: 'separators' must be a string or a list of strings.")


def _read_entries(value: object, kind: ArgKind, source: str) -> list[tuple[str, str]]:
    """Return ``(name, abbreviation)`` pairs from a ``keyword``/``unary`` array."""
    if not isinstance(value, list):
        raise SpecFileError(f"{source}: '{kind.value}' must be an array of tables or strings.")
    entries: list[tuple[str, str]] = []
    for i, entry in enumerate(cast("list[object]", value)):
        where: str = f"{source}: {kind.value}[{i}]"
        if isinstance(entry, str):
            entries.append((entry, ""))
            continue
        if not isinstance(entry, Mapping):
            raise SpecFileError(f"{where} must be a table or a string.")
        table = cast("Mapping[str, object]", entry)
        unknown: set[str] = set(table) - _ENTRY_KEYS
        if unknown:
            raise SpecFileError(f"{where}: unknown key(s): {', '.join(sorted(unknown))}.")
        name: object = table.get("name")
        abbreviation: object = table.get("abbreviation", "")
        if not isinstance(name, str):
            raise SpecFileError(f"{where}: 'name' is required and must be a string.")
        if not isinstance(abbreviation, str):
            raise SpecFileError(f"{where}: 'abbreviation' must be a string.")
        entries.append((name, abbreviation))
    return entries


def registry_from_table(table: Mapping[str, Any], source: str = "<string>") -> ArgRegistry:
    """Build a registry from a ``[kvargs]`` table.

    Separators and the redefinition policy are applied first, so declarations are
    validated against the configured separators. Keywords are declared before
    unary arguments, each in file order.

    Args:
        table (Mapping[str, Any]): The spec table.
        source (str): Label used in error messages.

    Returns:
        ArgRegistry: The populated registry.

    Raises:
        SpecFileError: On unknown keys or wrongly typed values.
    """
    unknown: set[str] = set(table) - _SPEC_KEYS
    if unknown:
        raise SpecFileError(f"{source}: unknown key(s): {', '.join(sorted(unknown))}.")

    registry = ArgRegistry()
    if "separators" in table:
        registry.set_separators(_read_separators(table["separators"], source))
    if "redefinition_is_error" in table:
        policy: object = table["redefinition_is_error"]
        if not isinstance(policy, bool):
            raise SpecFileError(f"{source}: 'redefinition_is_error' must be a boolean.")
        registry.set_redefinition_policy(policy)

    for name, abbreviation in _read_entries(table.get("keyword", []), ArgKind.KEYWORD, source):
        registry.declare_keyword(name, abbreviation)
    for name, abbreviation in _read_entries(table.get("unary", []), ArgKind.UNARY, source):
        registry.declare_unary(name, abbreviation)

    logger.debug("Spec %s: %r", source, registry)
    return registry


def registry_from_toml_text(text: str, source: str = "<string>") -> ArgRegistry:
    """Build a registry from TOML text."""
    doc: TomlTable = parse_toml_text(text, source=source)
    return registry_from_table(extract_spec_table(doc, source), source=source)


def load_registry(path: Path) -> ArgRegistry:
    """Build a registry from a TOML spec file (or a ``pyproject.toml``).

    Args:
        path (Path): Path to the spec file.

    Returns:
        ArgRegistry: The populated registry.
    """
    source: str = str(path)
    doc: TomlTable = load_toml_dict(path)
    return registry_from_table(extract_spec_table(doc, source), source=source)


# --- Rendering ---


def registry_to_toml(registry: ArgRegistry | FrozenArgRegistry) -> str:
    """Render declarations as a ``[kvargs]`` TOML document.

    The output can be read back with `registry_from_toml_text`.
    """
    doc = tomlkit.document()
    root = tomlkit.table()
    root.add("separators", registry.separators)
    root.add("redefinition_is_error", registry.redefinition_is_error)
    for key, specs in (("keyword", registry.keyword_specs), ("unary", registry.unary_specs)):
        if not specs:
            continue
        aot = tomlkit.aot()
        for spec in specs:
            entry = tomlkit.table()
            entry.add("name", spec.name)
            if spec.abbreviation:
                entry.add("abbreviation", spec.abbreviation)
            aot.append(entry)
        root.add(key, aot)
    doc.add(SPEC_TABLE_NAME, root)
    return tomlkit.dumps(doc)
