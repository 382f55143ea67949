"""Checker configuration.

User-provided configuration for halt policy and failure output.
Built directly, or from pytest ini values via from_mapping().
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from ischeck.domain.exceptions import InvalidConfigError
from ischeck.domain.model.enums import OutputStyle

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(key: str, value: object) -> bool:
    """Parse bool or bool-like string. FAIL-FIRST on anything else."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE:
            return True
        if lowered in _FALSE:
            return False
    raise InvalidConfigError(key, value, "expected a boolean")


def _parse_style(value: object) -> OutputStyle:
    """Parse OutputStyle or its string value."""
    if isinstance(value, OutputStyle):
        return value
    if isinstance(value, str):
        try:
            return OutputStyle(value.strip().lower())
        except ValueError:
            pass
    allowed = ", ".join(s.value for s in OutputStyle)
    raise InvalidConfigError("output", value, f"expected one of {allowed}")


@dataclass(frozen=True, slots=True)
class CheckerConfig:
    """Checker configuration DTO.

    Attributes:
        strict: Halt the test on the first failing check.
        output: How failure messages are written.
        show_location: Prefix messages with the test's file:line.
        stream: Destination stream. None = writer default (stderr).
    """

    strict: bool = True
    output: OutputStyle = OutputStyle.PLAIN
    show_location: bool = True
    stream: TextIO | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.strict, bool):
            raise InvalidConfigError("strict", self.strict, "expected a boolean")
        if not isinstance(self.output, OutputStyle):
            raise InvalidConfigError("output", self.output, "expected OutputStyle")
        if not isinstance(self.show_location, bool):
            raise InvalidConfigError("show_location", self.show_location, "expected a boolean")

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> CheckerConfig:
        """Build config from loosely typed values (ini files, env).

        Unknown keys are rejected.

        Args:
            values: Mapping with any of strict, output, show_location

        Returns:
            Validated CheckerConfig

        Raises:
            InvalidConfigError: On unknown key or unparsable value
        """
        known = {"strict", "output", "show_location"}
        for key in values:
            if key not in known:
                raise InvalidConfigError(key, values[key], "unknown option")

        kwargs: dict[str, object] = {}
        if "strict" in values:
            kwargs["strict"] = _parse_bool("strict", values["strict"])
        if "output" in values:
            kwargs["output"] = _parse_style(values["output"])
        if "show_location" in values:
            kwargs["show_location"] = _parse_bool("show_location", values["show_location"])
        return cls(**kwargs)  # type: ignore[arg-type]
