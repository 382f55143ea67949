"""Tests for domain/model/failure.py."""

import pytest

from ischeck.domain.model.enums import FailureCause
from ischeck.domain.model.failure import Failure
from tests.factories import make_failure, make_location


class TestFailure:
    """Tests for Failure entity."""

    def test_str_with_location(self) -> None:
        failure = make_failure("1 != 2", location=make_location(line=42))
        assert str(failure) == "/test/test_file.py:42: 1 != 2"

    def test_str_without_location(self) -> None:
        assert str(make_failure("1 != 2")) == "1 != 2"

    def test_frozen(self) -> None:
        failure = make_failure()
        with pytest.raises(AttributeError):
            failure.message = "other"  # type: ignore[misc]

    def test_empty_check_rejected(self) -> None:
        with pytest.raises(ValueError, match="check must not be empty"):
            Failure(check="", cause=FailureCause.VALUE_MISMATCH, message="1 != 2")

    def test_empty_message_rejected(self) -> None:
        with pytest.raises(ValueError, match="message must not be empty"):
            Failure(check="equal", cause=FailureCause.VALUE_MISMATCH, message="")
