"""Locate the test line that invoked a check."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING

from ischeck.domain.model.location import Location

if TYPE_CHECKING:
    from types import FrameType

_PACKAGE = "ischeck"


def _is_internal(frame: FrameType) -> bool:
    """Check if frame belongs to the ischeck package itself."""
    module = frame.f_globals.get("__name__", "")
    return module == _PACKAGE or module.startswith(_PACKAGE + ".")


def caller_location() -> Location | None:
    """Find the first frame outside ischeck.

    Returns:
        Location of the calling test line, or None if the stack has
        no frame outside ischeck (or line info is unavailable).
    """
    # SLF001: sys._getframe is the documented fast path for frame access
    frame: FrameType | None = sys._getframe(1)  # noqa: SLF001
    while frame is not None and _is_internal(frame):
        frame = frame.f_back
    if frame is None or frame.f_lineno is None or frame.f_lineno <= 0:
        return None
    return Location(
        file=Path(frame.f_code.co_filename),
        line=frame.f_lineno,
        function=frame.f_code.co_name or "<unknown>",
    )
