"""Tests for vscode_theme_generator.config."""

import pytest

from vscode_theme_generator.config import (
    DEFAULT_MAX_BYTES,
    DEFAULT_MAX_LINES,
    Limits,
    format_bytes,
    parse_bytes,
    validate_range,
)
from vscode_theme_generator.errors import ThemeValidationError


class TestParseBytes:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("2048", 2048),
            ("512K", 512 * 1024),
            ("512kb", 512 * 1024),
            ("1.5M", int(1.5 * 1024 * 1024)),
            ("2GB", 2 * 1024**3),
        ],
    )
    def test_units(self, value, expected):
        assert parse_bytes(value) == expected

    @pytest.mark.parametrize("value", ["", "lots", "10T", "-5"])
    def test_unparseable(self, value):
        assert parse_bytes(value) is None


class TestValidateRange:
    def test_in_range(self):
        validate_range(5, 1, 10, "value")

    def test_out_of_range(self):
        with pytest.raises(ThemeValidationError) as exc_info:
            validate_range(11, 1, 10, "value")
        assert exc_info.value.details["max"] == 10


class TestLimits:
    def test_defaults(self):
        limits = Limits()
        assert limits.max_bytes == DEFAULT_MAX_BYTES
        assert limits.max_lines == DEFAULT_MAX_LINES
        assert limits.max_config_lines == 1000
        assert limits.max_key_length == 100
        assert limits.max_value_length == 200
        assert limits.max_palette_index == 255

    def test_rejects_non_positive(self):
        with pytest.raises(ThemeValidationError):
            Limits(max_lines=0)

    def test_rejects_palette_index(self):
        with pytest.raises(ThemeValidationError):
            Limits(max_palette_index=256)

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Limits().max_lines = 5  # type: ignore[misc]


class TestLimitsFromEnv:
    def test_empty_env_gives_defaults(self):
        assert Limits.from_env({}) == Limits()

    def test_reads_values(self):
        limits = Limits.from_env(
            {
                "THEME_MAX_FILE_SIZE": "2M",
                "THEME_MAX_LINES": "500",
                "THEME_MAX_CONFIG_LINES": "50",
                "THEME_MAX_KEY_LENGTH": "40",
                "THEME_MAX_VALUE_LENGTH": "80",
            }
        )
        assert limits.max_bytes == 2 * 1024 * 1024
        assert limits.max_lines == 500
        assert limits.max_config_lines == 50
        assert limits.max_key_length == 40
        assert limits.max_value_length == 80

    def test_invalid_values_fall_back(self, log_records):
        limits = Limits.from_env({"THEME_MAX_LINES": "many", "THEME_MAX_FILE_SIZE": "1"})
        assert limits.max_lines == DEFAULT_MAX_LINES
        assert limits.max_bytes == DEFAULT_MAX_BYTES
        warnings = [r["message"] for r in log_records if r["level"].name == "WARNING"]
        assert any("THEME_MAX_LINES" in message for message in warnings)
        assert any("THEME_MAX_FILE_SIZE" in message for message in warnings)

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv("THEME_MAX_LINES", "200")
        assert Limits.from_env().max_lines == 200


class TestFormatBytes:
    def test_bytes(self):
        assert format_bytes(512) == "512 B"

    def test_megabytes(self):
        assert format_bytes(1024 * 1024) == "1.0 MB"

    def test_kilobytes(self):
        assert format_bytes(1536) == "1.5 KB"
