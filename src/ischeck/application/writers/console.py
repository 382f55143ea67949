"""Console writer: Failure -> rich formatted line."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

from rich.console import Console
from rich.text import Text

from ischeck.application.writers._base import BaseWriter

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class ConsoleWriter(BaseWriter):
    """Console writer: outputs rich formatted text.

    Message text is never parsed as rich markup, so values like
    "[red]" in a failure are written verbatim.
    """

    def __init__(
        self,
        output: TextIO | None = None,
        *,
        show_location: bool = True,
        console: Console | None = None,
    ) -> None:
        """Initialize writer.

        Args:
            output: Output stream (default: sys.stderr at write time)
            show_location: Prefix messages with file:line
            console: Preconfigured rich Console. Overrides output.
        """
        super().__init__(output, show_location=show_location)
        self._console = console

    def _get_console(self) -> Console:
        """Console bound to the current output stream."""
        if self._console is not None:
            return self._console
        return Console(file=self.output, highlight=False, soft_wrap=True)

    def write(self, failure: Failure) -> None:
        """Write failure as a colored line."""
        text = Text()
        text.append("FAIL", style="bold red")
        text.append(f" [{failure.check}]", style="yellow")
        if self._show_location and failure.location is not None:
            text.append(f" {failure.location}", style="dim")
        text.append(" ")
        text.append(failure.message)
        self._get_console().print(text)
