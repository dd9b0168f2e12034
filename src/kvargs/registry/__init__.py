# topmark:header:start
#
#   project      : KvArgs
#   file         : __init__.py
#   file_relpath : src/kvargs/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Argument registry: declared keyword and unary arguments.

Most users build a registry, then hand it (or its frozen snapshot) to the engine:

```python
from kvargs.registry import ArgRegistry
registry = ArgRegistry()
registry.declare_keyword("--output", "-o")
registry.declare_unary("--verbose", "-v")
snapshot = registry.freeze()
```
"""

from __future__ import annotations

from kvargs.registry.model import ArgKind, ArgRegistry, ArgSpec, FrozenArgRegistry

__all__ = [
    "ArgKind",
    "ArgRegistry",
    "ArgSpec",
    "FrozenArgRegistry",
]
