"""JSON writer for machine-readable output.

Stdlib-only writer: one JSON object per line (JSON Lines).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ischeck.application.writers._base import BaseWriter

if TYPE_CHECKING:
    from ischeck.domain.model.failure import Failure


class JSONWriter(BaseWriter):
    """JSON Lines writer for CI/CD integration or structured logging."""

    def write(self, failure: Failure) -> None:
        """Write failure as one JSON object followed by newline."""
        json.dump(self._failure_to_dict(failure), self.output, ensure_ascii=False)
        self.output.write("\n")

    def _failure_to_dict(self, failure: Failure) -> dict[str, object]:
        """Convert Failure to JSON-serializable dict.

        Location fields are null when unknown or disabled.
        """
        location = failure.location if self._show_location else None
        return {
            "check": failure.check,
            "cause": failure.cause.name,
            "message": failure.message,
            "file": str(location.file) if location is not None else None,
            "line": location.line if location is not None else None,
            "function": location.function if location is not None else None,
        }
