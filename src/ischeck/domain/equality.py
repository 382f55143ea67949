"""Equality engine: recursive structural comparison.

Rules, in order:
  1. both nil (is_nil)               -> equal
  2. exactly one nil                 -> not equal
  3. both mappings                   -> same keys, values deep-equal
  4. both sequences (not str/bytes)  -> same length, elements deep-equal
  5. otherwise                       -> same type and same value

Value equality for step 5 is structural for dataclasses and for plain
objects that keep object.__eq__ (identity), through __dict__ and __slots__. Everything else uses ==.

Limitations:
  - no cycle detection: inputs must be acyclic
  - errors raised by == propagate (usage error in the test)
"""

from __future__ import annotations

import dataclasses
from array import array
from collections.abc import Mapping, Sequence

from ischeck.domain.nilness import is_nil

# Text and binary strings are scalars here, not sequences of characters
_SCALAR_SEQUENCES: tuple[type, ...] = (str, bytes, bytearray)

# Marks a slot that was never assigned
_UNSET = object()


def deep_equal(a: object, b: object) -> bool:
    """Compare two values structurally.

    Args:
        a: Left value
        b: Right value

    Returns:
        True if a and b are deeply equal

    Example:
        deep_equal({"k": [1, 2]}, {"k": [1, 2]})   # True
        deep_equal(1, 1.0)                          # False (int vs float)
        deep_equal(None, ctypes.c_void_p(None))     # True (both nil)
    """
    a_nil = is_nil(a)
    b_nil = is_nil(b)
    if a_nil and b_nil:
        return True
    if a_nil or b_nil:
        return False

    if isinstance(a, Mapping) and isinstance(b, Mapping):
        return _mappings_equal(a, b)

    if _is_sequence(a) and _is_sequence(b):
        return _sequences_equal(a, b)  # type: ignore[arg-type]

    if type(a) is not type(b):
        return False

    if dataclasses.is_dataclass(a) and not isinstance(a, type):
        return _dataclasses_equal(a, b)

    if _has_identity_eq(a):
        slots = _slot_names(type(a))
        if slots or hasattr(a, "__dict__"):
            return _slots_equal(a, b, slots) and _mappings_equal(
                getattr(a, "__dict__", {}), getattr(b, "__dict__", {})
            )

    return bool(a == b)


def _is_sequence(value: object) -> bool:
    """Check if value is an ordered sequence of elements."""
    if isinstance(value, _SCALAR_SEQUENCES):
        return False
    return isinstance(value, (Sequence, array))


def _mappings_equal(a: Mapping[object, object], b: Mapping[object, object]) -> bool:
    """Same key set, each value deep-equal. Order irrelevant."""
    if len(a) != len(b):
        return False
    # Keys match by hash and ==, so 1 and True collide: compare stored key types too
    stored = {key: key for key in b}
    for key in a:
        if key not in stored or type(stored[key]) is not type(key):
            return False
    return all(deep_equal(a[key], b[key]) for key in a)


def _sequences_equal(a: Sequence[object], b: Sequence[object]) -> bool:
    """Same length, element-wise deep-equal. Order relevant."""
    if len(a) != len(b):
        return False
    return all(deep_equal(x, y) for x, y in zip(a, b, strict=True))


def _dataclasses_equal(a: object, b: object) -> bool:
    """Field-wise deep equality for dataclass instances of one type."""
    for field in dataclasses.fields(a):  # type: ignore[arg-type]
        if not field.compare:
            continue
        if not deep_equal(getattr(a, field.name), getattr(b, field.name)):
            return False
    return True


def _has_identity_eq(value: object) -> bool:
    """Check if type(value) inherits object.__eq__ (reference identity)."""
    return type(value).__eq__ is object.__eq__


def _slot_names(cls: type) -> tuple[str, ...]:
    """Attribute names stored in __slots__ across the MRO (mangled as stored)."""
    names: list[str] = []
    for klass in cls.__mro__:
        slots = klass.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if name in ("__dict__", "__weakref__"):
                continue
            if name.startswith("__") and not name.endswith("__"):
                name = f"_{klass.__name__.lstrip('_')}{name}"
            names.append(name)
    return tuple(names)


def _slots_equal(a: object, b: object, names: tuple[str, ...]) -> bool:
    """Slot-wise deep equality. An unset slot only equals an unset slot."""
    for name in names:
        left = getattr(a, name, _UNSET)
        right = getattr(b, name, _UNSET)
        if left is _UNSET or right is _UNSET:
            if left is not right:
                return False
            continue
        if not deep_equal(left, right):
            return False
    return True
