"""ischeck - minimal assertion toolkit for tests.

Example:
    import ischeck

    is_ = ischeck.new(reporter)        # strict: halts on first failure
    is_.nil(err)
    is_.ok(user, user.active, lambda: user.save())
    is_.equal(user.roles, ["admin"])
    is_.panic_with("empty name", lambda: User(name=""))
"""

__version__ = "0.1.0"

from ischeck.application.checker import Checker, new, relaxed
from ischeck.application.writers import (
    ConsoleWriter,
    JSONWriter,
    NullWriter,
    PlainTextWriter,
)
from ischeck.domain.equality import deep_equal
from ischeck.domain.exceptions import (
    HaltTest,
    InvalidConfigError,
    InvalidReporterError,
    IsCheckError,
    IsCheckSignal,
    MissingArgumentsError,
    NotCallableError,
)
from ischeck.domain.model import CheckerConfig, CheckResult, Failure, FailureCause, Location, OutputStyle
from ischeck.domain.nilness import is_nil
from ischeck.domain.ports import FailureWriterProtocol, ReporterProtocol
from ischeck.infrastructure.reporters import RaisingReporter, RecordingReporter

__all__ = [
    "CheckResult",
    "Checker",
    "CheckerConfig",
    "ConsoleWriter",
    "Failure",
    "FailureCause",
    "FailureWriterProtocol",
    "HaltTest",
    "InvalidConfigError",
    "InvalidReporterError",
    "IsCheckError",
    "IsCheckSignal",
    "JSONWriter",
    "Location",
    "MissingArgumentsError",
    "NotCallableError",
    "NullWriter",
    "OutputStyle",
    "PlainTextWriter",
    "RaisingReporter",
    "RecordingReporter",
    "ReporterProtocol",
    "__version__",
    "deep_equal",
    "is_nil",
    "new",
    "relaxed",
]
