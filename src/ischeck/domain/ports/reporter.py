"""Reporter protocol: the test framework's failure capability.

ischeck never owns a reporter's lifecycle. It is supplied at
construction and lives as long as the enclosing test.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

REPORTER_OPERATIONS: tuple[str, ...] = ("mark_failed", "is_failed", "halt_now")


@runtime_checkable
class ReporterProtocol(Protocol):
    """Contract for reporters.

    The surrounding test framework implements this Protocol.
    ischeck provides RecordingReporter, RaisingReporter and the pytest
    PytestReporter.

    Example:
        class UnittestReporter:
            def __init__(self, case: unittest.TestCase) -> None:
                self._case = case
                self._failed = False

            def mark_failed(self) -> None:
                self._failed = True

            def is_failed(self) -> bool:
                return self._failed

            def halt_now(self) -> None:
                self._case.fail("ischeck halted the test")
    """

    def mark_failed(self) -> None:
        """Record that the current test failed. Idempotent."""
        ...

    def is_failed(self) -> bool:
        """Report whether mark_failed() was called at least once."""
        ...

    def halt_now(self) -> None:
        """Stop the current test immediately.

        Non-returning in production (raises). Test doubles may only
        record the call.
        """
        ...


def missing_operations(reporter: object) -> tuple[str, ...]:
    """Names of ReporterProtocol operations reporter lacks.

    Args:
        reporter: Candidate reporter

    Returns:
        Missing or non-callable operation names (empty if complete)
    """
    return tuple(
        name for name in REPORTER_OPERATIONS if not callable(getattr(reporter, name, None))
    )
