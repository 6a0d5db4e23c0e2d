"""Input limits and generator defaults.

Limits can be overridden from the environment:

    THEME_MAX_FILE_SIZE      bytes, accepts K/KB, M/MB, G/GB suffixes
    THEME_MAX_LINES          physical lines in a theme file
    THEME_MAX_CONFIG_LINES   meaningful (non-comment) lines processed
    THEME_MAX_KEY_LENGTH     longest accepted key
    THEME_MAX_VALUE_LENGTH   free-text values are truncated to this
"""

from __future__ import annotations

import os
import re
from collections.abc import Mapping
from dataclasses import dataclass

from .errors import ThemeValidationError
from .logger import get_logger

logger = get_logger(__name__)

DEFAULT_MAX_BYTES = 1024 * 1024  # 1MB
MIN_MAX_BYTES = 1024
MAX_MAX_BYTES = 100 * 1024 * 1024

DEFAULT_MAX_LINES = 10000
MIN_MAX_LINES = 100
MAX_MAX_LINES = 1000000

DEFAULT_MAX_CONFIG_LINES = 1000
MIN_MAX_CONFIG_LINES = 10
MAX_MAX_CONFIG_LINES = 10000

DEFAULT_MAX_KEY_LENGTH = 100
MIN_MAX_KEY_LENGTH = 5
MAX_MAX_KEY_LENGTH = 500

DEFAULT_MAX_VALUE_LENGTH = 200
MIN_MAX_VALUE_LENGTH = 10
MAX_MAX_VALUE_LENGTH = 2000

MAX_PALETTE_INDEX = 255

# Background hierarchy
DEFAULT_BACKGROUND_LEVELS = 7
MIN_BACKGROUND_LEVELS = 6
MAX_BACKGROUND_LEVELS = 8
DEFAULT_BACKGROUND_SPREAD = 0.12  # lightness delta of the most elevated level

# Relative luminance below this is a dark theme
LUMINANCE_THRESHOLD = 0.5

# JSON key nesting levels that get a rainbow color
DEFAULT_RAINBOW_DEPTH = 36

_BYTES_PATTERN = re.compile(r"^(\d+(?:\.\d+)?)\s*([KMG]B?)?$", re.IGNORECASE)
_UNIT_FACTORS = {"": 1, "K": 1024, "M": 1024**2, "G": 1024**3}


def validate_range(value, minimum, maximum, name):
    """Raise ThemeValidationError unless ``minimum <= value <= maximum``."""
    if value < minimum or value > maximum:
        raise ThemeValidationError(
            f"{name} must be between {minimum} and {maximum}, got {value}",
            {"name": name, "value": value, "min": minimum, "max": maximum},
        )


def parse_bytes(value):
    """Parse '512K', '1.5M', '2GB' or a plain integer into a byte count.

    Returns None when the value cannot be parsed.
    """
    match = _BYTES_PATTERN.match(value.strip())
    if not match:
        return None
    unit = (match.group(2) or "").upper().rstrip("B")
    return int(float(match.group(1)) * _UNIT_FACTORS[unit])


def _env_value(env, key, parse, default, minimum, maximum):
    raw = env.get(key)
    if raw is None or not raw.strip():
        return default
    parsed = parse(raw)
    if parsed is None or parsed < minimum or parsed > maximum:
        logger.warning(
            f"Ignoring {key}={raw!r}: expected a value between {minimum} and {maximum}"
        )
        return default
    return parsed


def _parse_int(value):
    try:
        return int(value.strip())
    except ValueError:
        return None


@dataclass(frozen=True)
class Limits:
    """Size limits enforced by the theme file parser."""

    max_bytes: int = DEFAULT_MAX_BYTES
    max_lines: int = DEFAULT_MAX_LINES
    max_config_lines: int = DEFAULT_MAX_CONFIG_LINES
    max_key_length: int = DEFAULT_MAX_KEY_LENGTH
    max_value_length: int = DEFAULT_MAX_VALUE_LENGTH
    max_palette_index: int = MAX_PALETTE_INDEX

    def __post_init__(self) -> None:
        for field_name in (
            "max_bytes",
            "max_lines",
            "max_config_lines",
            "max_key_length",
            "max_value_length",
        ):
            value = getattr(self, field_name)
            if not isinstance(value, int) or value < 1:
                raise ThemeValidationError(
                    f"{field_name} must be a positive integer, got {value!r}",
                    {"name": field_name, "value": value},
                )
        validate_range(self.max_palette_index, 0, MAX_PALETTE_INDEX, "max_palette_index")

    @classmethod
    def from_env(cls, env: Mapping[str, str] | None = None) -> Limits:
        """Build limits from environment variables, defaulting invalid values.

        Args:
            env: Mapping to read from, defaults to ``os.environ``.

        Returns:
            A Limits instance.
        """
        env = os.environ if env is None else env
        return cls(
            max_bytes=_env_value(
                env, "THEME_MAX_FILE_SIZE", parse_bytes, DEFAULT_MAX_BYTES, MIN_MAX_BYTES, MAX_MAX_BYTES
            ),
            max_lines=_env_value(
                env, "THEME_MAX_LINES", _parse_int, DEFAULT_MAX_LINES, MIN_MAX_LINES, MAX_MAX_LINES
            ),
            max_config_lines=_env_value(
                env,
                "THEME_MAX_CONFIG_LINES",
                _parse_int,
                DEFAULT_MAX_CONFIG_LINES,
                MIN_MAX_CONFIG_LINES,
                MAX_MAX_CONFIG_LINES,
            ),
            max_key_length=_env_value(
                env,
                "THEME_MAX_KEY_LENGTH",
                _parse_int,
                DEFAULT_MAX_KEY_LENGTH,
                MIN_MAX_KEY_LENGTH,
                MAX_MAX_KEY_LENGTH,
            ),
            max_value_length=_env_value(
                env,
                "THEME_MAX_VALUE_LENGTH",
                _parse_int,
                DEFAULT_MAX_VALUE_LENGTH,
                MIN_MAX_VALUE_LENGTH,
                MAX_MAX_VALUE_LENGTH,
            ),
        )


def format_bytes(size):
    """Human readable byte count, e.g. ``1.0 MB``."""
    for unit in ("B", "KB", "MB"):
        if size < 1024:
            return f"{size:.0f} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GB"
