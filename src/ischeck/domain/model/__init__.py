"""Domain model: immutable values describing check outcomes."""

from ischeck.domain.model.check_result import CheckResult
from ischeck.domain.model.configuration import CheckerConfig
from ischeck.domain.model.enums import FailureCause, OutputStyle
from ischeck.domain.model.failure import Failure
from ischeck.domain.model.location import Location

__all__ = [
    "CheckResult",
    "CheckerConfig",
    "Failure",
    "FailureCause",
    "Location",
    "OutputStyle",
]
