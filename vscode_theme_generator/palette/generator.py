"""Extend a RoleTable into the working palette used by the theme builders.

Produces lightness variants of the primary colors and a background
hierarchy: level 0 is the editor canvas and every following level is a
step further from it (lighter on dark themes, darker on light themes).
Step sizes shrink logarithmically, so the first levels are the most
clearly separated.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

from ..color import adjust_lightness, blend, desaturate, relative_luminance
from ..config import (
    DEFAULT_BACKGROUND_LEVELS,
    DEFAULT_BACKGROUND_SPREAD,
    LUMINANCE_THRESHOLD,
    MAX_BACKGROUND_LEVELS,
    MIN_BACKGROUND_LEVELS,
)
from ..errors import ThemeValidationError
from ..logger import get_logger
from .roles import ANSI_ROLE_NAMES

logger = get_logger(__name__)

THEME_KINDS = ("dark", "light")
PRIMARY_NAMES = ("red", "green", "blue", "yellow", "purple", "cyan")

LIGHT_DELTA = 0.10
DARK_DELTA = -0.10
MUTED_DESATURATION = 0.5

# Foreground used for workbench chrome: halfway between UI and editor text
CHROME_FOREGROUND_MIX = 0.5


@dataclass(frozen=True)
class PrimaryColors:
    red: str
    green: str
    blue: str
    yellow: str
    purple: str
    cyan: str


@dataclass(frozen=True)
class ColorVariants:
    base: str
    light: str
    dark: str
    muted: str


@dataclass(frozen=True)
class ExtendedPalette:
    """Everything the color and token builders read. All values are ``#rrggbb``."""

    kind: str
    primary: PrimaryColors
    derived: Mapping[str, ColorVariants]
    backgrounds: tuple[str, ...]
    foreground: str
    accent: str
    dim: str
    cursor: str
    cursor_text: str
    selection: str
    selection_foreground: str
    ui_background: str
    ui_foreground: str
    chrome_foreground: str
    ansi: tuple[str, ...]

    @property
    def background(self):
        """The editor canvas, first level of the hierarchy."""
        return self.backgrounds[0]

    def level(self, index):
        """Background level ``index``, capped at the most elevated level."""
        return self.backgrounds[min(index, len(self.backgrounds) - 1)]

    def resolve(self, ref):
        """Look up a color by reference.

        ``"red"`` and ``"purple"`` are primaries, ``"red.light"`` a derived
        variant, ``"bright_black"`` an ANSI slot, ``"background.3"`` a
        background level; any other name is a palette attribute such as
        ``"accent"`` or ``"dim"``.

        Raises:
            KeyError: For unknown references.
        """
        name, _, variant = ref.partition(".")
        if variant:
            if name == "background" and variant.isascii() and variant.isdigit():
                return self.level(int(variant))
            if name in self.derived and variant in ("base", "light", "dark", "muted"):
                return getattr(self.derived[name], variant)
            raise KeyError(f"Unknown color reference: {ref}")
        if name in PRIMARY_NAMES:
            return getattr(self.primary, name)
        if name in ANSI_ROLE_NAMES:
            return self.ansi[ANSI_ROLE_NAMES.index(name)]
        if name in _PALETTE_COLORS:
            return getattr(self, name)
        raise KeyError(f"Unknown color reference: {ref}")


_PALETTE_COLORS = frozenset(
    (
        "background",
        "foreground",
        "accent",
        "dim",
        "cursor",
        "cursor_text",
        "selection",
        "selection_foreground",
        "ui_background",
        "ui_foreground",
        "chrome_foreground",
    )
)


def classify_kind(background, threshold=LUMINANCE_THRESHOLD):
    """'dark' when the background's relative luminance is below ``threshold``."""
    return "dark" if relative_luminance(background) < threshold else "light"


def background_hierarchy(base, kind, levels=DEFAULT_BACKGROUND_LEVELS, spread=DEFAULT_BACKGROUND_SPREAD):
    """Background levels from the canvas outwards.

    Level ``i`` (``i >= 1``) shifts lightness by ``spread * log(i + 1) / log(levels)``,
    away from black on dark themes and toward it on light themes, so the
    most elevated level sits exactly ``spread`` from the base.

    Raises:
        ThemeValidationError: For an unknown kind or a level count outside 6-8.
    """
    if kind not in THEME_KINDS:
        raise ThemeValidationError(f"Theme kind must be one of {THEME_KINDS}, got {kind!r}", {"kind": kind})
    if not isinstance(levels, int) or not MIN_BACKGROUND_LEVELS <= levels <= MAX_BACKGROUND_LEVELS:
        raise ThemeValidationError(
            f"Background levels must be between {MIN_BACKGROUND_LEVELS} and {MAX_BACKGROUND_LEVELS}, got {levels!r}",
            {"levels": levels},
        )
    direction = 1.0 if kind == "dark" else -1.0
    deltas = direction * spread * np.log(np.arange(1, levels) + 1) / np.log(levels)
    return (adjust_lightness(base, 0),) + tuple(adjust_lightness(base, float(d)) for d in deltas)


def color_variants(hex_color):
    return ColorVariants(
        base=hex_color,
        light=adjust_lightness(hex_color, LIGHT_DELTA),
        dark=adjust_lightness(hex_color, DARK_DELTA),
        muted=desaturate(hex_color, MUTED_DESATURATION),
    )


def extend_palette(roles, kind=None, levels=DEFAULT_BACKGROUND_LEVELS):
    """Derive the ExtendedPalette from a RoleTable.

    Args:
        roles: A RoleTable.
        kind: "dark" or "light"; classified from the background when None.
        levels: Number of background levels (6-8).

    Returns:
        ExtendedPalette
    """
    kind = kind or classify_kind(roles.background.hex)
    primary = PrimaryColors(
        red=roles.red.hex,
        green=roles.green.hex,
        blue=roles.blue.hex,
        yellow=roles.yellow.hex,
        purple=roles.magenta.hex,
        cyan=roles.cyan.hex,
    )
    derived = {name: color_variants(getattr(primary, name)) for name in PRIMARY_NAMES}
    derived["accent"] = color_variants(roles.accent.hex)
    derived["foreground"] = color_variants(roles.foreground.hex)

    backgrounds = background_hierarchy(roles.background.hex, kind, levels)
    logger.debug(f"{kind} background hierarchy: {', '.join(backgrounds)}")

    return ExtendedPalette(
        kind=kind,
        primary=primary,
        derived=MappingProxyType(derived),
        backgrounds=backgrounds,
        foreground=roles.foreground.hex,
        accent=roles.accent.hex,
        dim=roles.dim.hex,
        cursor=roles.cursor.hex,
        cursor_text=roles.cursor_text.hex,
        selection=roles.selection.hex,
        selection_foreground=roles.selection_foreground.hex,
        ui_background=roles.ui_background.hex,
        ui_foreground=roles.ui_foreground.hex,
        chrome_foreground=blend(roles.ui_foreground.hex, roles.foreground.hex, CHROME_FOREGROUND_MIX),
        ansi=roles.ansi,
    )
