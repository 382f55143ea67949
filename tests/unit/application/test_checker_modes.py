"""Tests for halt policy: strict vs relaxed checkers."""

from __future__ import annotations

import io

import pytest

from ischeck.application.checker import Checker, new, relaxed
from ischeck.application.writers import JSONWriter, NullWriter, PlainTextWriter
from ischeck.domain.exceptions import HaltTest
from ischeck.domain.model.configuration import CheckerConfig
from ischeck.domain.model.enums import OutputStyle
from ischeck.infrastructure.reporters import RecordingReporter
from tests.factories import raising_checker, recording_checker


class TestRelaxed:
    """Relaxed checkers record failures but never halt."""

    def test_never_halts(self) -> None:
        reporter = RecordingReporter()
        is_ = relaxed(reporter, writer=reporter)

        is_.ok(None)
        is_.equal(1, 2)
        is_.no_err(ValueError("nope"))

        assert reporter.is_failed()
        assert not reporter.halted
        assert reporter.messages == ("unexpected nil", "1 != 2", "unexpected error: nope")

    def test_later_checks_still_run(self) -> None:
        is_, reporter = recording_checker(strict=False)
        reached = False

        is_.ok(False)
        reached = True

        assert reached
        assert reporter.is_failed()


class TestStrict:
    """Strict checkers halt on the first failing check."""

    def test_halt_requested_on_failure(self) -> None:
        is_, reporter = recording_checker(strict=True)

        is_.equal(1, 2)

        assert reporter.halted
        assert reporter.halt_count == 1

    def test_no_halt_on_pass(self) -> None:
        is_, reporter = recording_checker(strict=True)

        is_.equal(1, 1)
        is_.ok(True)
        is_.nil(None)

        assert not reporter.halted
        assert not reporter.is_failed()

    def test_raising_reporter_stops_test_body(self) -> None:
        is_, reporter = raising_checker()
        executed: list[str] = []

        with pytest.raises(HaltTest) as exc_info:
            is_.ok(False)
            executed.append("after")

        assert executed == []
        assert reporter.halted
        assert [f.message for f in exc_info.value.failures] == ["unexpected false"]

    def test_halt_not_swallowed_by_except_exception(self) -> None:
        is_, _ = raising_checker()

        with pytest.raises(HaltTest):
            try:
                is_.nil("x")
            except Exception:  # noqa: BLE001
                pytest.fail("HaltTest must not be an Exception")

    def test_halt_inside_panic_fn_propagates(self) -> None:
        """A strict halt raised inside fn is not mistaken for a panic."""
        outer, outer_reporter = recording_checker(strict=False)
        inner, _ = raising_checker()

        with pytest.raises(HaltTest):
            outer.panic(lambda: inner.ok(False))

        assert not outer_reporter.is_failed()

    def test_mark_failed_before_halt(self) -> None:
        order: list[str] = []

        class OrderReporter:
            def mark_failed(self) -> None:
                order.append("mark")

            def is_failed(self) -> bool:
                return bool(order)

            def halt_now(self) -> None:
                order.append("halt")

        is_ = new(OrderReporter(), writer=NullWriter())
        is_.ok(0)

        assert order == ["mark", "halt"]


class TestFromConfig:
    """Checker.from_config()."""

    def test_strict_and_writer_from_config(self) -> None:
        stream = io.StringIO()
        is_ = Checker.from_config(
            RecordingReporter(),
            CheckerConfig(strict=False, output=OutputStyle.JSON, stream=stream),
        )

        assert is_.strict is False
        assert isinstance(is_.writer, JSONWriter)

        is_.ok(False)
        assert '"message": "unexpected false"' in stream.getvalue()

    def test_plain_output_without_location(self) -> None:
        stream = io.StringIO()
        is_ = Checker.from_config(
            RecordingReporter(),
            CheckerConfig(strict=False, show_location=False, stream=stream),
        )

        assert isinstance(is_.writer, PlainTextWriter)
        is_.nil("nope")
        assert stream.getvalue() == 'expected nil: "nope"\n'
