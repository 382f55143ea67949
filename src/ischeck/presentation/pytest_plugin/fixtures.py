"""pytest fixtures for ischeck.

is_: checker with halt policy from ini (strict by default).
is_relaxed: checker that never halts; the test fails after its body
    finishes if any check failed.
"""

from __future__ import annotations

import logging

import pytest

from ischeck.application.checker import Checker
from ischeck.application.writers import writer_for
from ischeck.domain.model.configuration import CheckerConfig
from ischeck.presentation.pytest_plugin.reporter import PytestReporter

logger = logging.getLogger(__name__)

# All PytestReporters created for one test item
REPORTERS_KEY = pytest.StashKey[list[PytestReporter]]()


def checker_config(config: pytest.Config) -> CheckerConfig:
    """Read CheckerConfig from ini options.

    Args:
        config: pytest Config object

    Returns:
        Validated CheckerConfig

    Raises:
        InvalidConfigError: If an ini value is invalid
    """
    return CheckerConfig.from_mapping(
        {
            "strict": config.getini("ischeck_strict"),
            "output": config.getini("ischeck_output"),
            "show_location": config.getini("ischeck_show_location"),
        }
    )


def make_checker(request: pytest.FixtureRequest, *, strict: bool | None = None) -> Checker:
    """Create checker bound to request's test item.

    Args:
        request: Fixture request of the test
        strict: Override ini halt policy (None = use ini)

    Returns:
        Checker reporting to a PytestReporter registered on the item
    """
    config = checker_config(request.config)
    reporter = PytestReporter(echo=writer_for(config))
    request.node.stash.setdefault(REPORTERS_KEY, []).append(reporter)
    halt = config.strict if strict is None else strict
    logger.debug("checker for %s (strict=%s, output=%s)", request.node.nodeid, halt, config.output.value)
    return Checker(reporter, strict=halt, writer=reporter)


@pytest.fixture
def is_(request: pytest.FixtureRequest) -> Checker:
    """Checker for this test. Strict unless ischeck_strict = false."""
    return make_checker(request)


@pytest.fixture
def is_relaxed(request: pytest.FixtureRequest) -> Checker:
    """Relaxed checker for this test: every check runs, failures reported at the end."""
    return make_checker(request, strict=False)
