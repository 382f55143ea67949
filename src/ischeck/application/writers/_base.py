"""Base writer class for failure output.

Provides default implementation of FailureWriterProtocol.
Concrete writers inherit from this.
"""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, TextIO

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class BaseWriter(ABC):
    """Base class for writers implementing FailureWriterProtocol.

    Holds the destination stream. None means sys.stderr, looked up at
    write time so output capture installed after construction still works.

    Example:
        class ListWriter(BaseWriter):
            def __init__(self) -> None:
                super().__init__()
                self.lines: list[str] = []

            def write(self, failure: Failure) -> None:
                self.lines.append(failure.message)
    """

    def __init__(self, output: TextIO | None = None, *, show_location: bool = True) -> None:
        """Initialize writer.

        Args:
            output: Output stream (default: sys.stderr at write time)
            show_location: Prefix messages with file:line
        """
        self._output = output
        self._show_location = show_location

    @property
    def output(self) -> TextIO:
        """Destination stream."""
        return self._output if self._output is not None else sys.stderr

    def format_line(self, failure: Failure) -> str:
        """Failure as one line, with location if enabled and known."""
        if self._show_location:
            return str(failure)
        return failure.message

    @abstractmethod
    def write(self, failure: Failure) -> None:
        """Emit one failure.

        Args:
            failure: Failure to emit
        """
