"""PytestReporter: ReporterProtocol backed by pytest outcomes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure
    from ischeck.domain.ports.writer import FailureWriterProtocol


class PytestReporter:
    """Reporter for one pytest test item.

    Implements both ReporterProtocol and FailureWriterProtocol:
    failures are collected so halt_now() and end-of-test reporting can
    show every message, and are echoed to an optional writer.

    Attributes:
        _echo: Writer that also receives each failure (None = collect only)
        _failures: Failures in the order they were written
        _failed: mark_failed() was called
        _halted: halt_now() was called
    """

    __slots__ = ("_echo", "_failed", "_failures", "_halted")

    def __init__(self, echo: FailureWriterProtocol | None = None) -> None:
        """Initialize reporter.

        Args:
            echo: Writer that also receives each failure
        """
        self._echo = echo
        self._failures: list[Failure] = []
        self._failed = False
        self._halted = False

    @property
    def failures(self) -> tuple[Failure, ...]:
        """Failures written so far."""
        return tuple(self._failures)

    @property
    def halted(self) -> bool:
        """Whether halt_now() was called."""
        return self._halted

    def mark_failed(self) -> None:
        """Record failure. Idempotent."""
        self._failed = True

    def is_failed(self) -> bool:
        """Report recorded failure."""
        return self._failed

    def write(self, failure: Failure) -> None:
        """Collect failure and echo it."""
        self._failures.append(failure)
        if self._echo is not None:
            self._echo.write(failure)

    def summary(self) -> str:
        """All collected failures, one per line."""
        if not self._failures:
            return "ischeck: test halted"
        return "\n".join(str(f) for f in self._failures)

    def halt_now(self) -> None:
        """Fail the current test immediately.

        Raises:
            pytest.fail.Exception: Always
        """
        self._halted = True
        pytest.fail(self.summary(), pytrace=False)
