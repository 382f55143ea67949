"""Tests for pytest_plugin/reporter.py."""

import io

import pytest

from ischeck.application.checker import Checker
from ischeck.application.writers import PlainTextWriter
from ischeck.domain.ports.reporter import ReporterProtocol
from ischeck.presentation.pytest_plugin.reporter import PytestReporter
from tests.factories import make_failure, make_location


class TestPytestReporter:
    """Tests for PytestReporter."""

    def test_implements_protocol(self) -> None:
        assert isinstance(PytestReporter(), ReporterProtocol)

    def test_collects_and_echoes(self) -> None:
        output = io.StringIO()
        reporter = PytestReporter(echo=PlainTextWriter(output, show_location=False))

        reporter.write(make_failure("unexpected zero"))

        assert [f.message for f in reporter.failures] == ["unexpected zero"]
        assert output.getvalue() == "unexpected zero\n"

    def test_halt_fails_test_with_summary(self) -> None:
        reporter = PytestReporter()
        reporter.write(make_failure("1 != 2", location=make_location(line=4)))
        reporter.mark_failed()

        with pytest.raises(pytest.fail.Exception, match="test_file.py:4: 1 != 2"):
            reporter.halt_now()

        assert reporter.halted

    def test_summary_without_failures(self) -> None:
        assert PytestReporter().summary() == "ischeck: test halted"

    def test_strict_checker_stops_at_first_failure(self) -> None:
        reporter = PytestReporter()
        is_ = Checker(reporter, strict=True, writer=reporter)

        with pytest.raises(pytest.fail.Exception, match="unexpected nil"):
            is_.ok(None)
            is_.ok(False)

        assert [f.message for f in reporter.failures] == ["unexpected nil"]
