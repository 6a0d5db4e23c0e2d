"""Tests for vscode_theme_generator.palette.generator: palette extension."""

import math

import pytest

from vscode_theme_generator.color import hex_to_hsl, relative_luminance, saturation
from vscode_theme_generator.errors import ThemeValidationError
from vscode_theme_generator.palette.generator import (
    LIGHT_DELTA,
    background_hierarchy,
    classify_kind,
    color_variants,
    extend_palette,
)
from vscode_theme_generator.palette.loader import parse_theme_text
from vscode_theme_generator.palette.roles import map_roles


def _palette(text, **kwargs):
    parsed = parse_theme_text(text)
    return extend_palette(map_roles(parsed.colors, parsed.meta), **kwargs)


class TestClassifyKind:
    def test_dark(self):
        assert classify_kind("#1a1a1a") == "dark"

    def test_light(self):
        assert classify_kind("#fafafa") == "light"

    def test_threshold(self):
        assert classify_kind("#808080") == "dark"
        assert classify_kind("#808080", threshold=0.1) == "light"


class TestBackgroundHierarchy:
    def test_level_zero_is_base(self):
        assert background_hierarchy("#1A1A1A", "dark")[0] == "#1a1a1a"

    @pytest.mark.parametrize("levels", [6, 7, 8])
    def test_level_count(self, levels):
        assert len(background_hierarchy("#1a1a1a", "dark", levels)) == levels

    def test_dark_levels_get_lighter(self):
        levels = background_hierarchy("#1a1a1a", "dark")
        lum = [relative_luminance(c) for c in levels]
        assert all(a < b for a, b in zip(lum, lum[1:]))

    def test_light_levels_get_darker(self):
        levels = background_hierarchy("#ffffff", "light")
        lum = [relative_luminance(c) for c in levels]
        assert all(a > b for a, b in zip(lum, lum[1:]))

    def test_steps_shrink(self):
        levels = background_hierarchy("#101010", "dark", 8)
        lightness = [hex_to_hsl(c)[2] for c in levels]
        steps = [b - a for a, b in zip(lightness, lightness[1:])]
        assert steps[0] > steps[-1]

    def test_last_level_spread(self):
        base, *_, top = background_hierarchy("#202020", "dark", 7, spread=0.12)
        assert hex_to_hsl(top)[2] - hex_to_hsl(base)[2] == pytest.approx(0.12, abs=1 / 255)

    def test_log_spacing(self):
        levels = background_hierarchy("#202020", "dark", 7, spread=0.12)
        base = hex_to_hsl(levels[0])[2]
        for i, color in enumerate(levels[1:], start=1):
            expected = 0.12 * math.log(i + 1) / math.log(7)
            assert hex_to_hsl(color)[2] - base == pytest.approx(expected, abs=1 / 255)

    @pytest.mark.parametrize("levels", [5, 9, 7.0])
    def test_rejects_level_count(self, levels):
        with pytest.raises(ThemeValidationError):
            background_hierarchy("#1a1a1a", "dark", levels)

    def test_rejects_kind(self):
        with pytest.raises(ThemeValidationError):
            background_hierarchy("#1a1a1a", "dim")


class TestColorVariants:
    def test_variants(self):
        variants = color_variants("#336699")
        base_l = hex_to_hsl("#336699")[2]
        assert variants.base == "#336699"
        assert hex_to_hsl(variants.light)[2] == pytest.approx(base_l + LIGHT_DELTA, abs=1 / 255)
        assert hex_to_hsl(variants.dark)[2] < base_l
        assert saturation(variants.muted) < saturation("#336699")


class TestExtendPalette:
    def test_kind_is_classified(self):
        assert _palette("background=#1a1a1a").kind == "dark"
        assert _palette("background=#fafafa").kind == "light"

    def test_kind_override(self):
        assert _palette("background=#1a1a1a", kind="light").kind == "light"

    def test_background_is_canvas(self):
        palette = _palette("background=#1a1a1a")
        assert palette.background == "#1a1a1a"
        assert palette.level(0) == "#1a1a1a"

    def test_level_is_capped(self):
        palette = _palette("background=#1a1a1a", levels=6)
        assert palette.level(20) == palette.backgrounds[5]

    def test_purple_is_magenta(self):
        palette = _palette("color5=#bb9af7")
        assert palette.primary.purple == "#bb9af7"

    def test_derived_contains_accent_and_foreground(self):
        palette = _palette("")
        assert set(palette.derived) == {"red", "green", "blue", "yellow", "purple", "cyan", "accent", "foreground"}

    def test_chrome_foreground_between_ui_and_editor_text(self):
        palette = _palette("color7=#000000\nforeground=#ffffff")
        assert palette.chrome_foreground == "#808080"

    def test_pure(self):
        roles = map_roles()
        assert extend_palette(roles) == extend_palette(roles)


class TestResolve:
    def test_references(self, dark_palette):
        assert dark_palette.resolve("red") == dark_palette.primary.red
        assert dark_palette.resolve("purple") == dark_palette.primary.purple
        assert dark_palette.resolve("red.light") == dark_palette.derived["red"].light
        assert dark_palette.resolve("accent.muted") == dark_palette.derived["accent"].muted
        assert dark_palette.resolve("bright_black") == dark_palette.ansi[8]
        assert dark_palette.resolve("background.2") == dark_palette.backgrounds[2]
        assert dark_palette.resolve("background") == dark_palette.background
        assert dark_palette.resolve("dim") == dark_palette.dim

    @pytest.mark.parametrize("ref", ["orange", "red.shiny", "background.x", "background.²", "kind"])
    def test_unknown(self, dark_palette, ref):
        with pytest.raises(KeyError):
            dark_palette.resolve(ref)
