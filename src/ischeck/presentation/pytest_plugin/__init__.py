"""pytest plugin for ischeck.

Provides fixtures:
    is_: Checker for the test (strict by default)
    is_relaxed: Checker that records failures and lets the test continue

Configuration (pytest.ini or pyproject.toml):
    ischeck_strict: Halt on first failure in is_ (default: true)
    ischeck_output: plain | rich | json | silent (default: plain)
    ischeck_show_location: Prefix messages with file:line (default: true)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

# Register fixtures from fixtures module
from ischeck.presentation.pytest_plugin.fixtures import REPORTERS_KEY, is_, is_relaxed

if TYPE_CHECKING:
    from collections.abc import Generator

logger = logging.getLogger(__name__)

# Export fixtures for pytest discovery
__all__ = ["is_", "is_relaxed"]


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register ini options."""
    parser.addini(
        "ischeck_strict",
        type="bool",
        default=True,
        help="ischeck: halt the test on the first failing check in is_",
    )
    parser.addini(
        "ischeck_output",
        default="plain",
        help="ischeck: failure output style (plain, rich, json, silent)",
    )
    parser.addini(
        "ischeck_show_location",
        type="bool",
        default=True,
        help="ischeck: prefix failure messages with file:line",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest plugin with markers."""
    config.addinivalue_line(
        "markers",
        "ischeck: mark test as using ischeck checkers",
    )


@pytest.hookimpl(wrapper=True)
def pytest_runtest_call(item: pytest.Item) -> Generator[None, object, object]:
    """Fail a test whose non-halting checks recorded failures.

    Runs after the test body. If the body raised (including a strict
    halt), the exception propagates before this check.
    """
    result = yield
    reporters = item.stash.get(REPORTERS_KEY, [])
    pending = [r for r in reporters if r.is_failed() and not r.halted]
    if pending:
        summary = "\n".join(r.summary() for r in pending)
        logger.debug("%s: %d reporter(s) recorded failures", item.nodeid, len(pending))
        pytest.fail(summary, pytrace=False)
    return result
