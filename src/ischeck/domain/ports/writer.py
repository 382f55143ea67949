"""Failure writer protocol: where failure messages go."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


@runtime_checkable
class FailureWriterProtocol(Protocol):
    """Contract for failure writers.

    Called once per failure, before the halt policy is applied.
    ischeck provides PlainTextWriter, ConsoleWriter, JSONWriter and NullWriter.
    """

    def write(self, failure: Failure) -> None:
        """Emit one failure.

        Args:
            failure: Failure to emit
        """
        ...
