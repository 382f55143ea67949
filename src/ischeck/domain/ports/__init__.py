"""Domain ports (protocols implemented outside the core)."""

from ischeck.domain.ports.reporter import REPORTER_OPERATIONS, ReporterProtocol, missing_operations
from ischeck.domain.ports.writer import FailureWriterProtocol

__all__ = [
    "REPORTER_OPERATIONS",
    "FailureWriterProtocol",
    "ReporterProtocol",
    "missing_operations",
]
