"""Check failure entity."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ischeck.domain.model.enums import FailureCause
    from ischeck.domain.model.location import Location


@dataclass(frozen=True, slots=True)
class Failure:
    """One failed check.

    Attributes:
        check: Name of the check operation (nil, ok, equal, ...)
        cause: Failure category
        message: Deterministic message, e.g. 'expected nil: "nope"'
        location: Test line that ran the check. None if unknown.
    """

    check: str
    cause: FailureCause
    message: str
    location: Location | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.check:
            raise ValueError("check must not be empty")
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as 'file:line: message' (or just message)."""
        if self.location is None:
            return self.message
        return f"{self.location}: {self.message}"
