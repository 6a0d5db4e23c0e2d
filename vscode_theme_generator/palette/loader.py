"""Parser for terminal color scheme text files.

Accepted lines:

    # comment / // comment
    palette = 1=#ff3399        (also palette1=#ff3399)
    color1 = #ff3399
    background = #1d1d26
    cursor-color = #ff3399
    name = My Theme            (free text, kept as metadata)

Bad lines are dropped with a warning; only oversized input is fatal.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from pathlib import Path
from types import MappingProxyType

from ..color import normalize_hex
from ..config import Limits, format_bytes
from ..errors import InvalidColorError, ThemeFileError, ThemeValidationError
from ..logger import get_logger

logger = get_logger(__name__)

ANSI_SLOTS = 16
COMMENT_MARKERS = ("#", "//")

# Normalized key -> RawColorMap field
COLOR_KEYS = MappingProxyType(
    {
        "background": "background",
        "foreground": "foreground",
        "cursor": "cursor_color",
        "cursor_color": "cursor_color",
        "cursor_text": "cursor_text",
        "selection_background": "selection_background",
        "selection_foreground": "selection_foreground",
        "accent_color": "accent_color",
        "dim_color": "dim_color",
        "ui_bg_color": "ui_bg_color",
        "ui_fg_color": "ui_fg_color",
    }
)

_SLOT_KEY = re.compile(r"^(?:palette|color)([0-9]+)$")
_KEY_FORMAT = re.compile(r"^[a-z0-9_]+$")


@dataclass(frozen=True)
class RawColorMap:
    """Colors found in a theme file. Every value is ``#rrggbb`` or None."""

    color0: str | None = None
    color1: str | None = None
    color2: str | None = None
    color3: str | None = None
    color4: str | None = None
    color5: str | None = None
    color6: str | None = None
    color7: str | None = None
    color8: str | None = None
    color9: str | None = None
    color10: str | None = None
    color11: str | None = None
    color12: str | None = None
    color13: str | None = None
    color14: str | None = None
    color15: str | None = None
    background: str | None = None
    foreground: str | None = None
    cursor_color: str | None = None
    cursor_text: str | None = None
    selection_background: str | None = None
    selection_foreground: str | None = None
    accent_color: str | None = None
    dim_color: str | None = None
    ui_bg_color: str | None = None
    ui_fg_color: str | None = None

    def slot(self, index):
        """ANSI palette slot ``index`` (0-15) or None."""
        if not 0 <= index < ANSI_SLOTS:
            raise IndexError(f"ANSI slot out of range: {index}")
        return getattr(self, f"color{index}")

    def as_dict(self):
        """Only the colors that were present."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not None}

    def is_empty(self):
        return not self.as_dict()


@dataclass(frozen=True)
class ParseWarning:
    line_number: int
    message: str

    def __str__(self) -> str:
        return f"line {self.line_number}: {self.message}"


@dataclass(frozen=True)
class ParsedTheme:
    """Result of parsing one theme file."""

    colors: RawColorMap = field(default_factory=RawColorMap)
    meta: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    warnings: tuple[ParseWarning, ...] = ()
    source: str | None = None


def normalize_key(key):
    """Strip whitespace, lowercase, and turn hyphens into underscores."""
    return re.sub(r"\s+", "", key).lower().replace("-", "_")


class _LineParser:
    """Accumulates the state of a single parse."""

    def __init__(self, limits):
        self.limits = limits
        self.colors = {}
        self.meta = {}
        self.warnings = []

    def warn(self, line_number, message):
        warning = ParseWarning(line_number, message)
        self.warnings.append(warning)
        logger.warning(str(warning))

    def feed(self, line_number, line):
        key_part, sep, value_part = line.partition("=")
        if not sep:
            logger.debug(f"line {line_number}: no '=' found, skipping")
            return

        raw_key = key_part.strip()
        value = value_part.strip()
        if len(raw_key) > self.limits.max_key_length:
            self.warn(line_number, f"Skipping line with overly long key: {raw_key[:20]}...")
            return

        key = normalize_key(raw_key)
        if not _KEY_FORMAT.match(key):
            self.warn(line_number, f"Skipping line with invalid key format: {raw_key!r}")
            return

        if key == "palette":
            index_text, sep, color_value = value.partition("=")
            if not sep:
                self.warn(line_number, f"Invalid palette entry: {line!r}")
                return
            self.store_slot(line_number, index_text.strip(), color_value.strip())
            return

        slot_match = _SLOT_KEY.match(key)
        if slot_match:
            self.store_slot(line_number, slot_match.group(1), value)
        elif key in COLOR_KEYS:
            self.store_color(line_number, COLOR_KEYS[key], value)
        else:
            self.meta[key] = value[: self.limits.max_value_length]

    def store_slot(self, line_number, index_text, value):
        if not (index_text.isascii() and index_text.isdigit()):
            self.warn(line_number, f"Invalid palette index: {index_text!r}")
            return
        index = int(index_text)
        if index > self.limits.max_palette_index:
            self.warn(line_number, f"Palette index {index} out of range (0-{self.limits.max_palette_index})")
            return
        if index >= ANSI_SLOTS:
            logger.debug(f"line {line_number}: palette index {index} is outside the ANSI range, ignoring")
            return
        self.store_color(line_number, f"color{index}", value)

    def store_color(self, line_number, name, value):
        try:
            self.colors[name] = normalize_hex(value)
        except InvalidColorError:
            self.warn(line_number, f"Invalid color value for {name}: {value!r}")


def parse_theme_text(text, limits=None, source=None):
    """Parse theme text into a ParsedTheme.

    Args:
        text: Raw file contents.
        limits: Size limits, defaults to ``Limits()``.
        source: Identifier of the input (usually its path), kept for naming.

    Returns:
        ParsedTheme with the colors, free-text metadata and any warnings.

    Raises:
        ThemeValidationError: If text is not a string or exceeds the byte or
            line limits. Nothing is parsed in that case.
    """
    limits = limits or Limits()
    if not isinstance(text, str):
        raise ThemeValidationError(
            f"Theme text must be a string, got {type(text).__name__}",
            {"type": type(text).__name__},
        )

    size = len(text.encode("utf-8"))
    if size > limits.max_bytes:
        raise ThemeValidationError(
            f"File is too large ({format_bytes(size)}, maximum {format_bytes(limits.max_bytes)})",
            {"fileSize": size, "maxSize": limits.max_bytes},
        )

    lines = text.splitlines()
    if len(lines) > limits.max_lines:
        raise ThemeValidationError(
            f"Too many lines in file (maximum {limits.max_lines})",
            {"lineCount": len(lines), "maxLines": limits.max_lines},
        )

    parser = _LineParser(limits)
    processed = 0
    for line_number, raw in enumerate(lines, start=1):
        line = raw.strip()
        if not line or line.startswith(COMMENT_MARKERS):
            continue
        processed += 1
        if processed > limits.max_config_lines:
            parser.warn(line_number, "Too many configuration lines, remaining lines ignored")
            break
        parser.feed(line_number, line)

    return ParsedTheme(
        colors=RawColorMap(**parser.colors),
        meta=MappingProxyType(dict(parser.meta)),
        warnings=tuple(parser.warnings),
        source=source,
    )


def read_theme_file(path, limits=None):
    """Read a theme file, enforcing the byte limit before reading.

    Raises:
        ThemeValidationError: Empty path or file over the size limit.
        ThemeFileError: The file cannot be read or decoded.
    """
    limits = limits or Limits()
    if not str(path or "").strip():
        raise ThemeValidationError("Invalid file path provided")

    path = Path(path)
    try:
        size = path.stat().st_size
    except OSError as exc:
        raise ThemeFileError(f"Failed to read file: {exc}", {"filePath": str(path)}) from exc

    if size > limits.max_bytes:
        raise ThemeValidationError(
            f"File is too large ({format_bytes(size)}, maximum {format_bytes(limits.max_bytes)})",
            {"fileSize": size, "maxSize": limits.max_bytes, "filePath": str(path)},
        )

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ThemeFileError(f"Failed to read file: {exc}", {"filePath": str(path)}) from exc


def parse_theme_file(path, limits=None):
    """Read and parse a theme file; the path becomes the ParsedTheme source."""
    return parse_theme_text(read_theme_file(path, limits), limits, source=str(path))
