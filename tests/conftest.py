# topmark:header:start
#
#   project      : KvArgs
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the KvArgs test suite.

This file sets up global fixtures and customizes the logging configuration for
test runs, so every classification decision is traced in captured output.

Notes:
    Tests build registries with `ArgRegistry` (mutable) and pass either the
    builder or its `freeze()` snapshot to the engine. Do not mutate a registry
    while asserting on a result built from it; results hold their own snapshot.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from kvargs.config import logging
from kvargs.constants import LOG_LEVEL_ENV_VAR
from kvargs.registry import ArgRegistry

if TYPE_CHECKING:
    from kvargs.api import Args


@pytest.fixture(autouse=True)
def silence_kvargs_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure the runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV_VAR, raising=False)


@pytest.hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for all tests.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_sample_registry(**kwargs: object) -> ArgRegistry:
    """Return the registry used by the end-to-end scenarios.

    Declares keywords ``-key1``/``-k1`` and ``-key2``/``-k2`` and the unary
    ``--unary1``/``--u1``.

    Args:
        **kwargs (object): Forwarded to `ArgRegistry`.

    Returns:
        ArgRegistry: A fresh registry.
    """
    registry = ArgRegistry(**kwargs)  # type: ignore[arg-type]
    registry.declare_keyword("-key1", "-k1")
    registry.declare_keyword("-key2", "-k2")
    registry.declare_unary("--unary1", "--u1")
    return registry


def make_sample_args() -> Args:
    """Return an `Args` facade with the end-to-end scenario declarations."""
    from kvargs.api import Args

    args = Args()
    args.add_keyword_arg("-key1", "-k1")
    args.add_keyword_arg("-key2", "-k2")
    args.add_unary_arg("--unary1", "--u1")
    return args


@pytest.fixture
def sample_registry() -> ArgRegistry:
    """Fresh registry with the end-to-end scenario declarations."""
    return make_sample_registry()
