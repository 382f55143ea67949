"""Tests for domain/model/configuration.py."""

import io

import pytest

from ischeck.domain.exceptions import InvalidConfigError
from ischeck.domain.model.configuration import CheckerConfig
from ischeck.domain.model.enums import OutputStyle


class TestCheckerConfig:
    """Tests for CheckerConfig defaults and validation."""

    def test_defaults(self) -> None:
        config = CheckerConfig()
        assert config.strict is True
        assert config.output is OutputStyle.PLAIN
        assert config.show_location is True
        assert config.stream is None

    def test_custom_stream(self) -> None:
        stream = io.StringIO()
        assert CheckerConfig(stream=stream).stream is stream

    def test_non_bool_strict_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="strict"):
            CheckerConfig(strict="yes")  # type: ignore[arg-type]

    def test_string_output_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="output"):
            CheckerConfig(output="plain")  # type: ignore[arg-type]

    def test_frozen(self) -> None:
        config = CheckerConfig()
        with pytest.raises(AttributeError):
            config.strict = False  # type: ignore[misc]


class TestFromMapping:
    """Tests for CheckerConfig.from_mapping()."""

    def test_empty_gives_defaults(self) -> None:
        assert CheckerConfig.from_mapping({}) == CheckerConfig()

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [(True, True), (False, False), ("true", True), ("False", False), ("1", True), ("off", False)],
    )
    def test_strict_parsing(self, raw: object, expected: bool) -> None:
        assert CheckerConfig.from_mapping({"strict": raw}).strict is expected

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("plain", OutputStyle.PLAIN), ("RICH", OutputStyle.RICH), (" json ", OutputStyle.JSON), (OutputStyle.SILENT, OutputStyle.SILENT)],
    )
    def test_output_parsing(self, raw: object, expected: OutputStyle) -> None:
        assert CheckerConfig.from_mapping({"output": raw}).output is expected

    def test_show_location(self) -> None:
        assert CheckerConfig.from_mapping({"show_location": "no"}).show_location is False

    def test_unknown_output_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="expected one of plain, rich, json, silent"):
            CheckerConfig.from_mapping({"output": "html"})

    def test_bad_bool_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="expected a boolean"):
            CheckerConfig.from_mapping({"strict": "maybe"})

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(InvalidConfigError, match="unknown option"):
            CheckerConfig.from_mapping({"colour": "red"})
