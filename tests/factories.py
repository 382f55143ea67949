"""Test factories for creating domain objects and checkers.

Centralized factory functions to avoid duplication across test modules.
"""

from pathlib import Path

from ischeck.application.checker import Checker
from ischeck.domain.model.enums import FailureCause
from ischeck.domain.model.failure import Failure
from ischeck.domain.model.location import Location
from ischeck.infrastructure.reporters import RaisingReporter, RecordingReporter

# Default test file path - consistent across all tests
DEFAULT_TEST_FILE = Path("/test/test_file.py")


def make_location(line: int = 10, function: str = "test_something", file: Path = DEFAULT_TEST_FILE) -> Location:
    """Create a Location for tests."""
    return Location(file=file, line=line, function=function)


def make_failure(
    message: str = "unexpected false",
    check: str = "ok",
    cause: FailureCause = FailureCause.UNEXPECTED_FALSE,
    location: Location | None = None,
) -> Failure:
    """Create a Failure for tests.

    Args:
        message: Failure message
        check: Check name
        cause: Failure cause
        location: Location (default: none)

    Returns:
        Failure instance
    """
    return Failure(check=check, cause=cause, message=message, location=location)


def recording_checker(*, strict: bool) -> tuple[Checker, RecordingReporter]:
    """Create checker whose reporter records failures and halts.

    The reporter also serves as writer, so messages are observable.

    Returns:
        (checker, reporter)
    """
    reporter = RecordingReporter()
    return Checker(reporter, strict=strict, writer=reporter), reporter


def raising_checker() -> tuple[Checker, RaisingReporter]:
    """Create strict checker whose reporter raises HaltTest on halt."""
    reporter = RaisingReporter()
    return Checker(reporter, strict=True, writer=reporter), reporter
