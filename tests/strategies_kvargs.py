# topmark:header:start
#
#   project      : KvArgs
#   file         : strategies_kvargs.py
#   file_relpath : tests/strategies_kvargs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Hypothesis strategies for generating registries and argument vectors.

Names are drawn from a small alphabet without the default separator, so
generated registries are always valid and generated tokens often collide with
declared names.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from hypothesis import strategies as st

from kvargs.registry import ArgRegistry

Draw = Callable[[st.SearchStrategy[Any]], Any]

NAME_ALPHABET: str = "-abkuxz"

s_name: st.SearchStrategy[str] = st.text(alphabet=NAME_ALPHABET, min_size=1, max_size=6)

# Free-form values, including separators and whitespace.
s_value: st.SearchStrategy[str] = st.text(
    alphabet=st.characters(blacklist_categories=("Cs",)),
    max_size=12,
)


@st.composite
def s_registry(draw: Draw, *, min_keywords: int = 0, min_unaries: int = 0) -> ArgRegistry:
    """Draw a valid registry with unique names and optional abbreviations.

    Args:
        draw (Draw): Hypothesis draw function.
        min_keywords (int): Minimum number of keyword declarations.
        min_unaries (int): Minimum number of unary declarations.

    Returns:
        ArgRegistry: A populated registry using the default separator.
    """
    n_keywords: int = draw(st.integers(min_value=min_keywords, max_value=min_keywords + 3))
    n_unaries: int = draw(st.integers(min_value=min_unaries, max_value=min_unaries + 3))
    total: int = n_keywords + n_unaries
    texts: list[str] = draw(st.lists(s_name, min_size=2 * total, max_size=2 * total, unique=True))
    with_abbr: list[bool] = draw(st.lists(st.booleans(), min_size=total, max_size=total))

    registry = ArgRegistry()
    for i in range(total):
        name: str = texts[i]
        abbreviation: str = texts[total + i] if with_abbr[i] else ""
        if i < n_keywords:
            registry.declare_keyword(name, abbreviation)
        else:
            registry.declare_unary(name, abbreviation)
    return registry


@st.composite
def s_tokens_for(draw: Draw, registry: ArgRegistry) -> list[str]:
    """Draw an argument list mixing declared spellings, pairs and noise."""
    spellings: list[str] = [
        text for spec in (*registry.keyword_specs, *registry.unary_specs) for text in spec.texts()
    ]
    pairs: list[str] = [
        f"{text}={value}"
        for spec in registry.keyword_specs
        for text, value in ((t, draw(s_value)) for t in spec.texts())
    ]
    pool: list[st.SearchStrategy[str]] = [s_name, s_value]
    if spellings:
        pool.append(st.sampled_from(spellings))
    if pairs:
        pool.append(st.sampled_from(pairs))
    tokens: list[str] = draw(st.lists(st.one_of(*pool), max_size=12))
    return tokens
