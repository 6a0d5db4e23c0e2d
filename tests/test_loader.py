"""Tests for vscode_theme_generator.palette.loader: theme text parsing."""

import pytest

from vscode_theme_generator.config import Limits
from vscode_theme_generator.errors import ThemeFileError, ThemeValidationError
from vscode_theme_generator.palette.loader import (
    RawColorMap,
    normalize_key,
    parse_theme_file,
    parse_theme_text,
    read_theme_file,
)


class TestNormalizeKey:
    def test_lowercases_and_underscores(self):
        assert normalize_key("Cursor-Color") == "cursor_color"

    def test_removes_inner_whitespace(self):
        assert normalize_key(" selection - background ") == "selection_background"


class TestRawColorMap:
    def test_empty(self):
        assert RawColorMap().is_empty()
        assert RawColorMap().as_dict() == {}

    def test_slot(self):
        colors = RawColorMap(color3="#e0af68")
        assert colors.slot(3) == "#e0af68"
        assert colors.slot(4) is None

    def test_slot_out_of_range(self):
        with pytest.raises(IndexError):
            RawColorMap().slot(16)


class TestParseThemeText:
    def test_named_colors(self):
        parsed = parse_theme_text("background=#1a1a1a\nforeground=#e0e0e0\ncolor1=#ff0000\n")
        assert parsed.colors.background == "#1a1a1a"
        assert parsed.colors.foreground == "#e0e0e0"
        assert parsed.colors.color1 == "#ff0000"
        assert parsed.warnings == ()

    def test_color_without_hash(self):
        assert parse_theme_text("color0=1a1a1a").colors.color0 == "#1a1a1a"

    def test_palette_forms(self):
        parsed = parse_theme_text("palette = 1=#ff3399\npalette2 = #00ff00\n")
        assert parsed.colors.color1 == "#ff3399"
        assert parsed.colors.color2 == "#00ff00"

    def test_cursor_aliases(self):
        assert parse_theme_text("cursor-color = #FF0000").colors.cursor_color == "#ff0000"
        assert parse_theme_text("cursor = #00ff00").colors.cursor_color == "#00ff00"

    def test_chrome_keys(self):
        parsed = parse_theme_text(
            "accent-color = #123456\ndim-color = #222222\nui-bg-color = #111111\nui-fg-color = #eeeeee\n"
        )
        assert parsed.colors.accent_color == "#123456"
        assert parsed.colors.dim_color == "#222222"
        assert parsed.colors.ui_bg_color == "#111111"
        assert parsed.colors.ui_fg_color == "#eeeeee"

    def test_later_lines_win(self):
        assert parse_theme_text("color1=#111111\ncolor1=#222222").colors.color1 == "#222222"

    def test_comments_and_blank_lines(self):
        parsed = parse_theme_text("# color1 = #ff0000\n// color2 = #00ff00\n\n   \n")
        assert parsed.colors.is_empty()
        assert parsed.warnings == ()

    def test_metadata(self):
        parsed = parse_theme_text("name = My Theme\nauthor = someone\n")
        assert parsed.meta["name"] == "My Theme"
        assert parsed.meta["author"] == "someone"

    def test_metadata_is_read_only(self):
        parsed = parse_theme_text("name = x")
        with pytest.raises(TypeError):
            parsed.meta["name"] = "y"  # type: ignore[index]

    def test_metadata_truncated(self):
        parsed = parse_theme_text("name = " + "x" * 50, Limits(max_value_length=10))
        assert parsed.meta["name"] == "x" * 10

    def test_empty_text(self):
        parsed = parse_theme_text("")
        assert parsed.colors.is_empty()
        assert parsed.warnings == ()
        assert dict(parsed.meta) == {}

    def test_keeps_source(self):
        assert parse_theme_text("", source="themes/a.txt").source == "themes/a.txt"

    def test_warnings_for_bad_lines(self, broken_theme_path):
        parsed = parse_theme_text(broken_theme_path.read_text(encoding="utf-8"))
        assert parsed.colors.as_dict() == {"color2": "#00ff00"}
        assert parsed.meta["name"] == "Broken Example"
        assert len(parsed.warnings) == 5
        assert parsed.warnings[0].line_number == 3
        assert str(parsed.warnings[0]).startswith("line 3:")

    def test_warnings_are_logged(self, log_records):
        parse_theme_text("color1 = nope")
        assert any(r["level"].name == "WARNING" and "color1" in r["message"] for r in log_records)

    def test_extended_palette_index_ignored(self):
        parsed = parse_theme_text("palette = 42=#ffffff")
        assert parsed.colors.is_empty()
        assert parsed.warnings == ()

    def test_superscript_palette_index(self):
        parsed = parse_theme_text("palette = ²=#ff0000\nbackground=#101010")
        assert parsed.colors.as_dict() == {"background": "#101010"}
        assert len(parsed.warnings) == 1
        assert "Invalid palette index" in parsed.warnings[0].message

    def test_non_ascii_digit_palette_index(self):
        parsed = parse_theme_text("palette = ٣=#ff0000")
        assert parsed.colors.is_empty()
        assert len(parsed.warnings) == 1

    def test_palette_index_above_limit(self):
        parsed = parse_theme_text("palette = 256=#ffffff")
        assert len(parsed.warnings) == 1

    def test_long_key_skipped(self):
        parsed = parse_theme_text("k" * 30 + " = #ffffff", Limits(max_key_length=20))
        assert parsed.colors.is_empty()
        assert "overly long key" in parsed.warnings[0].message

    def test_config_line_limit(self):
        text = "\n".join(f"color{i} = #0000{i:02x}" for i in range(6))
        parsed = parse_theme_text(text, Limits(max_config_lines=3))
        assert parsed.colors.as_dict() == {"color0": "#000000", "color1": "#000001", "color2": "#000002"}
        assert len(parsed.warnings) == 1
        assert parsed.warnings[0].line_number == 4

    def test_line_limit_is_fatal(self):
        text = "\n".join("# comment" for _ in range(11))
        with pytest.raises(ThemeValidationError) as exc_info:
            parse_theme_text(text, Limits(max_lines=10))
        assert exc_info.value.details == {"lineCount": 11, "maxLines": 10}

    def test_byte_limit_is_fatal(self):
        with pytest.raises(ThemeValidationError) as exc_info:
            parse_theme_text("#" * 2000, Limits(max_bytes=1024))
        assert "too large" in exc_info.value.message

    def test_byte_limit_counts_utf8(self):
        # 600 two-byte characters exceed a 1024 byte limit
        with pytest.raises(ThemeValidationError):
            parse_theme_text("# " + "é" * 600, Limits(max_bytes=1024))

    def test_non_string(self):
        with pytest.raises(ThemeValidationError):
            parse_theme_text(b"background=#000000")


class TestReadThemeFile:
    def test_reads(self, dark_theme_path):
        assert "Midnight Harbor" in read_theme_file(dark_theme_path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ThemeFileError):
            read_theme_file(tmp_path / "missing.txt")

    def test_empty_path(self):
        with pytest.raises(ThemeValidationError):
            read_theme_file("  ")

    def test_oversized_file(self, tmp_path):
        path = tmp_path / "big.txt"
        path.write_text("#" * 5000)
        with pytest.raises(ThemeValidationError) as exc_info:
            read_theme_file(path, Limits(max_bytes=1024))
        assert exc_info.value.details["fileSize"] == 5000

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "latin1.txt"
        path.write_bytes(b"name = caf\xe9\n")
        with pytest.raises(ThemeFileError):
            read_theme_file(path)


class TestParseThemeFile:
    def test_fixture(self, dark_theme_path):
        parsed = parse_theme_file(dark_theme_path)
        assert parsed.colors.background == "#1a1b26"
        assert parsed.colors.cursor_color == "#ff9e64"
        assert parsed.colors.selection_background == "#33467c"
        assert all(parsed.colors.slot(i) is not None for i in range(16))
        assert parsed.meta["accent_index"] == "4"
        assert parsed.source == str(dark_theme_path)

    def test_shorthand_fixture(self, light_theme_path):
        parsed = parse_theme_file(light_theme_path)
        assert parsed.colors.color0 == "#000000"
        assert parsed.colors.color8 is None
