"""Domain enumerations."""

from enum import Enum, auto


class FailureCause(Enum):
    """Why a check failed.

    One member per failure message family.
    """

    # nil()
    UNEXPECTED_NON_NIL = auto()

    # ok()
    UNEXPECTED_FALSE = auto()
    UNEXPECTED_NIL = auto()
    UNEXPECTED_ZERO = auto()
    UNEXPECTED_EMPTY = auto()
    UNEXPECTED_PANIC = auto()

    # no_err()
    UNEXPECTED_ERROR = auto()

    # equal()
    VALUE_MISMATCH = auto()

    # panic(), panic_with()
    MISSING_PANIC = auto()
    PANIC_MESSAGE_MISMATCH = auto()


class OutputStyle(Enum):
    """How failure messages are written."""

    PLAIN = "plain"  # file:line: message
    RICH = "rich"  # colored, via rich.Console
    JSON = "json"  # one JSON object per line
    SILENT = "silent"  # discarded
