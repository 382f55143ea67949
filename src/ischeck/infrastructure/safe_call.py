"""safe_call: exception barrier around a caller-supplied function.

Runs fn synchronously on the calling thread. NEVER lets an ordinary
exception escape. Captures it as a value for the check to decide on.

Exception algebra:
  - fn returns normally   -> CallOutcome(raised=False)
  - fn raises Exception   -> CallOutcome(raised=True, exception=exc)
  - fn raises BaseException that is not Exception
    (KeyboardInterrupt, SystemExit, HaltTest, pytest outcomes)
                          -> propagates unchanged

The last rule keeps a strict checker used INSIDE fn able to halt the
test, and keeps Ctrl+C working.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ischeck.domain.exceptions import NotCallableError


@dataclass(frozen=True, slots=True)
class CallOutcome:
    """Result of running a function under the barrier.

    Attributes:
        raised: True if fn raised an Exception
        exception: The captured exception (None if not raised)
    """

    raised: bool
    exception: Exception | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.raised and self.exception is None:
            raise ValueError("raised outcome requires exception")
        if not self.raised and self.exception is not None:
            raise ValueError("non-raised outcome must not carry exception")

    @property
    def message(self) -> str | None:
        """String form of the captured exception (None if not raised)."""
        if self.exception is None:
            return None
        return str(self.exception)


def safe_call(fn: Callable[[], object]) -> CallOutcome:
    """Invoke fn, converting a raised Exception into a CallOutcome.

    Args:
        fn: Zero-argument callable. Return value is ignored.

    Returns:
        CallOutcome describing whether fn raised

    Raises:
        NotCallableError: If fn is not callable (checked before invoking)
    """
    # FAIL-FIRST: a non-callable would raise TypeError and look like a panic
    if not callable(fn):
        raise NotCallableError(type(fn))

    try:
        fn()
    # BLE001: the barrier exists to catch everything fn raises.
    # BaseException subclasses outside Exception are deliberately not caught.
    except Exception as exc:  # noqa: BLE001
        return CallOutcome(raised=True, exception=exc)
    return CallOutcome(raised=False)


def describe_exception(exc: BaseException) -> str:
    """Human-readable panic value: str(exc), or the type name if empty.

    Example:
        describe_exception(ValueError("boom"))  # "boom"
        describe_exception(ValueError())        # "ValueError"
    """
    text = str(exc)
    return text if text else type(exc).__name__
