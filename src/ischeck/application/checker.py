"""Checker: the assertion engine bound to one test's reporter.

Every operation decides pass/fail on its own and returns a CheckResult.
On failure: mark the reporter failed, write one message per failure,
then halt the test if the checker is strict.

Example:
    def test_parse(request):
        is_ = ischeck.new(reporter)
        is_.no_err(err)
        is_.equal(parsed, {"k": "v"})
        is_.panic_with("bad input", lambda: parse(""))
"""

from __future__ import annotations

import functools
import inspect
import logging
from numbers import Number
from typing import TYPE_CHECKING

from ischeck.application import formatting
from ischeck.application.writers import PlainTextWriter, writer_for
from ischeck.domain.equality import deep_equal
from ischeck.domain.exceptions import InvalidReporterError, MissingArgumentsError
from ischeck.domain.model.check_result import CheckResult
from ischeck.domain.model.enums import FailureCause
from ischeck.domain.model.failure import Failure
from ischeck.domain.nilness import is_nil
from ischeck.domain.ports.reporter import missing_operations
from ischeck.infrastructure.caller import caller_location
from ischeck.infrastructure.safe_call import describe_exception, safe_call

if TYPE_CHECKING:
    from collections.abc import Callable

    from ischeck.domain.model.configuration import CheckerConfig
    from ischeck.domain.ports.reporter import ReporterProtocol
    from ischeck.domain.ports.writer import FailureWriterProtocol

logger = logging.getLogger(__name__)


class Checker:
    """Assertion engine for one test invocation.

    Immutable after construction. Not shared across tests.

    Attributes:
        _reporter: Test framework capability (mark_failed/is_failed/halt_now)
        _writer: Destination of failure messages
        _strict: Halt the test on failure
    """

    __slots__ = ("_reporter", "_strict", "_writer")

    def __init__(
        self,
        reporter: ReporterProtocol,
        *,
        strict: bool = True,
        writer: FailureWriterProtocol | None = None,
    ) -> None:
        """Initialize checker.

        Args:
            reporter: Reporter of the enclosing test
            strict: Halt on failure (True) or record and continue (False)
            writer: Failure writer (default: PlainTextWriter to stderr)

        Raises:
            InvalidReporterError: If reporter lacks a ReporterProtocol operation
            TypeError: If strict is not bool or writer has no write()
        """
        # FAIL-FIRST: a half-implemented reporter would fail mid-test
        missing = missing_operations(reporter)
        if missing:
            raise InvalidReporterError(type(reporter), missing)
        if not isinstance(strict, bool):
            raise TypeError(f"strict must be bool, got {type(strict).__name__}")
        if writer is None:
            writer = PlainTextWriter()
        elif not callable(getattr(writer, "write", None)):
            raise TypeError(f"writer must implement write(), got {type(writer).__name__}")

        self._reporter = reporter
        self._writer = writer
        self._strict = strict

    @classmethod
    def from_config(cls, reporter: ReporterProtocol, config: CheckerConfig) -> Checker:
        """Create checker from configuration.

        Args:
            reporter: Reporter of the enclosing test
            config: Halt policy and output settings

        Returns:
            Checker with config.strict and the writer config selects
        """
        return cls(reporter, strict=config.strict, writer=writer_for(config))

    @property
    def strict(self) -> bool:
        """Whether failures halt the test."""
        return self._strict

    @property
    def reporter(self) -> ReporterProtocol:
        """Reporter this checker reports to."""
        return self._reporter

    @property
    def writer(self) -> FailureWriterProtocol:
        """Writer receiving failure messages."""
        return self._writer

    # -------------------------------------------------------------------------
    # Checks
    # -------------------------------------------------------------------------

    def nil(self, value: object) -> CheckResult:
        """Check that value is None or reflective nil.

        Fails with: expected nil: <quoted value>
        """
        if is_nil(value):
            return CheckResult.empty()
        failure = self._record("nil", FailureCause.UNEXPECTED_NON_NIL, formatting.expected_nil(value))
        return self._conclude((failure,))

    def ok(self, *values: object) -> CheckResult:
        """Check that every value is truthy.

        bool must be True, numbers nonzero, strings non-empty, nil never
        passes, zero-argument functions must return without raising.
        Anything else passes.

        Strict mode halts at the first failing value and later values are
        not evaluated. Relaxed mode checks every value.

        Raises:
            MissingArgumentsError: If called without values
        """
        if not values:
            raise MissingArgumentsError("ok")

        failures: list[Failure] = []
        for value in values:
            problem = _ok_problem(value)
            if problem is None:
                continue
            cause, message = problem
            failures.append(self._record("ok", cause, message))
            if self._strict:
                return self._conclude(tuple(failures))
        return self._conclude(tuple(failures))

    def no_err(self, *errs: object) -> CheckResult:
        """Check that every error value is nil.

        Stops at the first non-nil error.
        Fails with: unexpected error: <str(err)>

        Raises:
            MissingArgumentsError: If called without values
        """
        if not errs:
            raise MissingArgumentsError("no_err")

        for err in errs:
            if is_nil(err):
                continue
            failure = self._record("no_err", FailureCause.UNEXPECTED_ERROR, formatting.unexpected_error(err))
            return self._conclude((failure,))
        return CheckResult.empty()

    def equal(self, a: object, b: object) -> CheckResult:
        """Check that a and b are deeply equal.

        Fails with: <a> != <b> (nil rendered as <nil>)
        Errors raised while comparing propagate.
        """
        if deep_equal(a, b):
            return CheckResult.empty()
        failure = self._record("equal", FailureCause.VALUE_MISMATCH, formatting.not_equal(a, b))
        return self._conclude((failure,))

    def panic(self, fn: Callable[[], object]) -> CheckResult:
        """Check that fn raises.

        Fails with: expected panic

        Raises:
            NotCallableError: If fn is not callable
        """
        outcome = safe_call(fn)
        if outcome.raised:
            return CheckResult.empty()
        failure = self._record("panic", FailureCause.MISSING_PANIC, formatting.expected_panic())
        return self._conclude((failure,))

    def panic_with(self, message: str, fn: Callable[[], object]) -> CheckResult:
        """Check that fn raises and str(exception) == message exactly.

        Fails with: expected panic: "<message>"
            or, when fn raised something else:
            expected panic: "<message>" but got: "<actual>"

        Raises:
            TypeError: If message is not str
            NotCallableError: If fn is not callable
        """
        if not isinstance(message, str):
            raise TypeError(f"message must be str, got {type(message).__name__}")

        outcome = safe_call(fn)
        if not outcome.raised:
            failure = self._record(
                "panic_with", FailureCause.MISSING_PANIC, formatting.expected_panic(message)
            )
            return self._conclude((failure,))

        actual = outcome.message
        if actual == message:
            return CheckResult.empty()
        failure = self._record(
            "panic_with",
            FailureCause.PANIC_MESSAGE_MISMATCH,
            formatting.panic_mismatch(message, actual or ""),
        )
        return self._conclude((failure,))

    # -------------------------------------------------------------------------
    # Failure path
    # -------------------------------------------------------------------------

    def _record(self, check: str, cause: FailureCause, message: str) -> Failure:
        """Mark reporter failed and write one failure."""
        failure = Failure(check=check, cause=cause, message=message, location=caller_location())
        self._reporter.mark_failed()
        self._writer.write(failure)
        logger.debug("%s failed at %s: %s", check, failure.location, message)
        return failure

    def _conclude(self, failures: tuple[Failure, ...]) -> CheckResult:
        """Apply the halt policy and wrap failures."""
        result = CheckResult(failures)
        if failures and self._strict:
            logger.debug("halting test after %d failure(s)", len(failures))
            self._reporter.halt_now()
        return result


def _ok_problem(value: object) -> tuple[FailureCause, str] | None:
    """Truthiness rule of ok() for one value. None = passes."""
    if is_nil(value):
        return FailureCause.UNEXPECTED_NIL, formatting.unexpected_nil()
    if isinstance(value, bool):
        return None if value else (FailureCause.UNEXPECTED_FALSE, formatting.unexpected_false())
    if isinstance(value, Number):
        return None if value != 0 else (FailureCause.UNEXPECTED_ZERO, formatting.unexpected_zero())
    if isinstance(value, str):
        return None if value else (FailureCause.UNEXPECTED_EMPTY, formatting.unexpected_empty())
    if _is_zero_arg_function(value):
        outcome = safe_call(value)  # type: ignore[arg-type]
        if outcome.raised and outcome.exception is not None:
            text = describe_exception(outcome.exception)
            return FailureCause.UNEXPECTED_PANIC, formatting.unexpected_panic(text)
    return None


def _is_zero_arg_function(value: object) -> bool:
    """Check if value is a function, method or partial callable with no arguments.

    Classes and callable instances are values, not functions: they pass ok().
    So are coroutine and generator functions, whose call never runs the body.
    """
    if not (inspect.isroutine(value) or isinstance(value, functools.partial)):
        return False
    if inspect.iscoroutinefunction(value) or inspect.isgeneratorfunction(value):
        return False
    if inspect.isasyncgenfunction(value):
        return False
    try:
        inspect.signature(value).bind()  # type: ignore[arg-type]
    except (TypeError, ValueError):
        # Requires arguments, or signature not introspectable
        return False
    return True


def new(reporter: ReporterProtocol, *, writer: FailureWriterProtocol | None = None) -> Checker:
    """Create a strict checker: the first failing check halts the test.

    Args:
        reporter: Reporter of the enclosing test
        writer: Failure writer (default: PlainTextWriter to stderr)
    """
    return Checker(reporter, strict=True, writer=writer)


def relaxed(reporter: ReporterProtocol, *, writer: FailureWriterProtocol | None = None) -> Checker:
    """Create a relaxed checker: failures are recorded, the test continues.

    Args:
        reporter: Reporter of the enclosing test
        writer: Failure writer (default: PlainTextWriter to stderr)
    """
    return Checker(reporter, strict=False, writer=writer)
