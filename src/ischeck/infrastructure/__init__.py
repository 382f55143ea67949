"""Infrastructure: raise barrier, caller lookup, built-in reporters."""

from ischeck.infrastructure.caller import caller_location
from ischeck.infrastructure.reporters import RaisingReporter, RecordingReporter
from ischeck.infrastructure.safe_call import CallOutcome, describe_exception, safe_call

__all__ = [
    "CallOutcome",
    "RaisingReporter",
    "RecordingReporter",
    "caller_location",
    "describe_exception",
    "safe_call",
]
