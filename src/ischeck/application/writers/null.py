"""Writer that discards failures."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ischeck.application.writers._base import BaseWriter

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class NullWriter(BaseWriter):
    """Discards every failure. Reporter state is still updated by the checker."""

    def write(self, failure: Failure) -> None:
        """Do nothing."""
        del failure
