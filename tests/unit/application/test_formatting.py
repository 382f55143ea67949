"""Tests for application/formatting.py."""

import ctypes

from ischeck.application import formatting


class TestQuote:
    """quote(): double-quoted strings, repr() for the rest."""

    def test_string(self) -> None:
        assert formatting.quote("nope") == '"nope"'

    def test_string_escapes(self) -> None:
        assert formatting.quote('say "hi"\n') == '"say \\"hi\\"\\n"'

    def test_unicode_kept(self) -> None:
        assert formatting.quote("héllo") == '"héllo"'

    def test_non_string_uses_repr(self) -> None:
        assert formatting.quote(42) == "42"
        assert formatting.quote([1, "a"]) == "[1, 'a']"


class TestRender:
    """render(): <nil> for nil values, str() for the rest."""

    def test_none(self) -> None:
        assert formatting.render(None) == "<nil>"

    def test_null_pointer(self) -> None:
        assert formatting.render(ctypes.c_void_p(None)) == "<nil>"

    def test_value(self) -> None:
        assert formatting.render(1) == "1"
        assert formatting.render("text") == "text"


class TestMessages:
    """Message builders."""

    def test_expected_nil(self) -> None:
        assert formatting.expected_nil("nope") == 'expected nil: "nope"'

    def test_not_equal(self) -> None:
        assert formatting.not_equal(None, 1) == "<nil> != 1"

    def test_expected_panic(self) -> None:
        assert formatting.expected_panic() == "expected panic"
        assert formatting.expected_panic("msg") == 'expected panic: "msg"'

    def test_panic_mismatch(self) -> None:
        assert formatting.panic_mismatch("a", "b") == 'expected panic: "a" but got: "b"'

    def test_unexpected(self) -> None:
        assert formatting.unexpected_panic("boom") == "unexpected panic: boom"
        assert formatting.unexpected_error(ValueError("bad")) == "unexpected error: bad"
        assert formatting.unexpected_empty() == 'unexpected ""'
