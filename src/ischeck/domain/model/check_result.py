"""Check result aggregate."""

from __future__ import annotations

from dataclasses import dataclass

from ischeck.domain.model.failure import Failure


@dataclass(frozen=True, slots=True)
class CheckResult:
    """Outcome of one check call.

    Immutable. Returned by every Checker operation so callers can
    inspect the decision without relying on halting.

    Attributes:
        failures: Failures in argument order (empty = passed)
    """

    failures: tuple[Failure, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        for failure in self.failures:
            if not isinstance(failure, Failure):
                raise TypeError(f"failures must contain Failure, got {type(failure).__name__}")

    def __bool__(self) -> bool:
        """Truthy when the check passed."""
        return self.passed

    @property
    def passed(self) -> bool:
        """Check if no failure was recorded."""
        return len(self.failures) == 0

    @property
    def failure_count(self) -> int:
        """Number of failures."""
        return len(self.failures)

    @property
    def messages(self) -> tuple[str, ...]:
        """Failure messages without location."""
        return tuple(f.message for f in self.failures)

    def merge(self, other: CheckResult) -> CheckResult:
        """Combine two results, preserving order."""
        return CheckResult(self.failures + other.failures)

    @classmethod
    def empty(cls) -> CheckResult:
        """Create passing result."""
        return cls()
