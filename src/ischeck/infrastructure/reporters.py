"""Built-in reporters for use outside a test framework integration.

RecordingReporter: observable-only double, halt_now() only records.
RaisingReporter: standalone, halt_now() raises HaltTest.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ischeck.domain.exceptions import HaltTest

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class RecordingReporter:
    """Reporter that records calls without stopping anything.

    Makes the halt policy observable: after a strict failure,
    `halted` is True but control returns to the caller.

    Attributes:
        failed: mark_failed() was called at least once
        halted: halt_now() was called at least once
        halt_count: Number of halt_now() calls
        failures: Failures received through write()
    """

    __slots__ = ("failed", "failures", "halt_count", "halted")

    def __init__(self) -> None:
        """Initialize in the not-failed, not-halted state."""
        self.failed = False
        self.halted = False
        self.halt_count = 0
        self.failures: list[Failure] = []

    def mark_failed(self) -> None:
        """Record failure. Idempotent."""
        self.failed = True

    def is_failed(self) -> bool:
        """Report recorded failure."""
        return self.failed

    def halt_now(self) -> None:
        """Record halt request. Returns normally."""
        self.halted = True
        self.halt_count += 1

    def write(self, failure: Failure) -> None:
        """Collect failure (FailureWriterProtocol)."""
        self.failures.append(failure)

    @property
    def messages(self) -> tuple[str, ...]:
        """Collected failure messages without location."""
        return tuple(f.message for f in self.failures)


class RaisingReporter(RecordingReporter):
    """Reporter whose halt_now() raises HaltTest.

    For scripts and frameworks without a native fail-now primitive.
    HaltTest carries every failure written so far.
    """

    __slots__ = ()

    def halt_now(self) -> None:
        """Record halt, then stop the caller.

        Raises:
            HaltTest: Always
        """
        super().halt_now()
        raise HaltTest(tuple(self.failures))
