"""Failure message formatting.

Internal module - not part of public API.
All messages are deterministic: same inputs, same text.
"""

from __future__ import annotations

import json

from ischeck.domain.nilness import is_nil

NIL_TEXT = "<nil>"


def quote(value: object) -> str:
    """Quoted rendering: strings double-quoted with escapes, others repr().

    Example:
        quote("nope")   # '"nope"'
        quote(42)       # '42'
    """
    if isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    return repr(value)


def render(value: object) -> str:
    """Default rendering: nil as <nil>, others str()."""
    if is_nil(value):
        return NIL_TEXT
    return str(value)


def expected_nil(value: object) -> str:
    """Message for nil() on a non-nil value."""
    return f"expected nil: {quote(value)}"


def unexpected_false() -> str:
    """Message for ok(False)."""
    return "unexpected false"


def unexpected_nil() -> str:
    """Message for ok(None)."""
    return "unexpected nil"


def unexpected_zero() -> str:
    """Message for ok(0)."""
    return "unexpected zero"


def unexpected_empty() -> str:
    """Message for ok("")."""
    return 'unexpected ""'


def unexpected_panic(panic_text: str) -> str:
    """Message for ok(fn) where fn raised."""
    return f"unexpected panic: {panic_text}"


def unexpected_error(err: object) -> str:
    """Message for no_err(err) with err not nil."""
    return f"unexpected error: {err}"


def not_equal(a: object, b: object) -> str:
    """Message for equal(a, b) mismatch."""
    return f"{render(a)} != {render(b)}"


def expected_panic(message: str | None = None) -> str:
    """Message for panic()/panic_with() when fn returned normally."""
    if message is None:
        return "expected panic"
    return f"expected panic: {quote(message)}"


def panic_mismatch(expected: str, actual: str) -> str:
    """Message for panic_with() when fn raised with another message."""
    return f"expected panic: {quote(expected)} but got: {quote(actual)}"
