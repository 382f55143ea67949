"""Domain exceptions: all public errors of ischeck.

Assertion outcomes are NOT exceptions, they are CheckResult values.
Exceptions here signal misuse of the library (FAIL-FIRST) or flow control.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class IsCheckError(Exception):
    """Base for all ischeck error exceptions.

    Allows: except IsCheckError to catch all library errors.
    """


# N818: Signals are NOT errors, no "Error" suffix per PEP 8.
# BaseException so `except Exception` in test code cannot absorb a halt.
class IsCheckSignal(BaseException):  # noqa: N818
    """Base for all ischeck signal exceptions (flow control, not errors).

    Same family as pytest outcomes, KeyboardInterrupt, GeneratorExit.
    """


class HaltTest(IsCheckSignal):
    """Signal to stop the remainder of the current test body.

    Raised by RaisingReporter.halt_now(). Never caught by the raise barrier.

    Attributes:
        failures: Failures recorded before the halt (may be empty).
    """

    def __init__(self, failures: tuple[Failure, ...] = ()) -> None:
        """Initialize with the failures that caused the halt."""
        self.failures = failures
        if failures:
            super().__init__("\n".join(str(f) for f in failures))
        else:
            super().__init__("test halted")


class InvalidReporterError(IsCheckError, TypeError):
    """Reporter does not implement ReporterProtocol.

    Inherits TypeError for semantic correctness.

    Attributes:
        got: Actual type received.
        missing: Names of missing operations.
    """

    def __init__(self, got: type, missing: tuple[str, ...]) -> None:
        """Initialize with actual type and missing operation names."""
        self.got = got
        self.missing = missing
        super().__init__(
            f"reporter must implement {', '.join(missing)}, got {got.__name__}"
        )


class NotCallableError(IsCheckError, TypeError):
    """Function argument must be callable.

    Raised by panic() and panic_with() before invocation, so a
    non-callable is never mistaken for a raising callable.

    Attributes:
        got: Actual type received.
    """

    def __init__(self, got: type) -> None:
        """Initialize with actual type."""
        self.got = got
        super().__init__(f"fn must be callable, got {got.__name__}")


class MissingArgumentsError(IsCheckError, ValueError):
    """Variadic check called with no values.

    Attributes:
        check: Name of the check (ok, no_err).
    """

    def __init__(self, check: str) -> None:
        """Initialize with check name."""
        self.check = check
        super().__init__(f"{check}() requires at least one value")


class InvalidConfigError(IsCheckError, ValueError):
    """Configuration value is invalid.

    Attributes:
        key: Configuration key.
        value: Rejected value.
        reason: Why value is invalid.
    """

    def __init__(self, key: str, value: object, reason: str) -> None:
        """Initialize with key, value and reason."""
        self.key = key
        self.value = value
        self.reason = reason
        super().__init__(f"invalid {key}={value!r}: {reason}")
