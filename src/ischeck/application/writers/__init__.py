"""Writers for check failures.

PlainTextWriter and JSONWriter use stdlib only; ConsoleWriter uses rich.
Users can implement custom writers (FailureWriterProtocol).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from ischeck.application.writers._base import BaseWriter
from ischeck.application.writers.console import ConsoleWriter
from ischeck.application.writers.json_writer import JSONWriter
from ischeck.application.writers.null import NullWriter
from ischeck.application.writers.plain_text import PlainTextWriter
from ischeck.domain.model.enums import OutputStyle

if TYPE_CHECKING:
    from ischeck.domain.model.configuration import CheckerConfig

_WRITERS: dict[OutputStyle, type[BaseWriter]] = {
    OutputStyle.PLAIN: PlainTextWriter,
    OutputStyle.RICH: ConsoleWriter,
    OutputStyle.JSON: JSONWriter,
    OutputStyle.SILENT: NullWriter,
}


def writer_for(config: CheckerConfig) -> BaseWriter:
    """Build the writer selected by config.

    Args:
        config: Checker configuration

    Returns:
        Writer bound to config.stream and config.show_location
    """
    writer_cls = _WRITERS[config.output]
    return writer_cls(config.stream, show_location=config.show_location)


__all__ = [
    "BaseWriter",
    "ConsoleWriter",
    "JSONWriter",
    "NullWriter",
    "PlainTextWriter",
    "writer_for",
]
