"""Plain text writer using print().

Stdlib-only writer: one 'file:line: message' line per failure.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ischeck.application.writers._base import BaseWriter

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class PlainTextWriter(BaseWriter):
    """Plain text writer.

    Outputs to stderr by default, can be configured for any TextIO.
    """

    def write(self, failure: Failure) -> None:
        """Write failure as a single line."""
        print(self.format_line(failure), file=self.output)
