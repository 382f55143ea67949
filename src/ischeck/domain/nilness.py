"""Reflective nil detection.

Python has a single null, None. But some values are absent at the
representation level while the wrapper itself is not None:

  - ctypes NULL pointers and NULL function pointers
  - c_void_p / c_char_p / c_wchar_p holding NULL
  - weakref.ref whose referent was collected
  - weakref.proxy whose referent was collected

is_nil() inspects the underlying value, not the wrapper identity.
"""

from __future__ import annotations

import ctypes
import weakref

# c_void_p(None).value, c_char_p(None).value, ... are None
_NULLABLE_SIMPLE: tuple[type, ...] = (ctypes.c_void_p, ctypes.c_char_p, ctypes.c_wchar_p)

# SLF001: ctypes exposes no public base class for POINTER(T) and CFUNCTYPE instances
_POINTER_TYPES: tuple[type, ...] = (ctypes._Pointer, ctypes._CFuncPtr)  # noqa: SLF001


def is_nil(value: object) -> bool:
    """Check if value is None or a wrapper around nothing.

    Args:
        value: Any value

    Returns:
        True for None and reflective-nil wrappers, False otherwise

    Example:
        is_nil(None)                                 # True
        is_nil(ctypes.POINTER(ctypes.c_int)())       # True (NULL pointer)
        is_nil([])                                   # False (empty, not absent)
    """
    if value is None:
        return True
    # Before any isinstance(): on a dead proxy, isinstance reads __class__ and raises
    if type(value) in weakref.ProxyTypes:
        return _is_dead_proxy(value)
    if isinstance(value, _NULLABLE_SIMPLE):
        return value.value is None  # type: ignore[attr-defined]
    if isinstance(value, _POINTER_TYPES):
        # NULL pointers are falsy; bool() does not dereference
        return not value
    if isinstance(value, weakref.ReferenceType):
        return value() is None
    return False


def _is_dead_proxy(proxy: object) -> bool:
    """Check if weakref proxy lost its referent."""
    try:
        # __class__ is forwarded to the referent
        _ = proxy.__class__
    except ReferenceError:
        return True
    return False
