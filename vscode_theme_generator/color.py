"""Hex color arithmetic.

Every function takes and returns ``#rrggbb`` strings and raises instead of
producing a malformed value: InvalidColorError for bad colors, ValueError
for out-of-range amounts.
"""

import colorsys
import math
import re
from numbers import Real

import numpy as np
from PIL import ImageColor

from .errors import InvalidColorError

HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

BLACK = "#000000"
WHITE = "#ffffff"


def check_fraction(value, name, low=0.0, high=1.0):
    """Return ``value`` as a float, raising ValueError outside ``[low, high]``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValueError(f"{name} must be a number, got {value!r}")
    value = float(value)
    if math.isnan(value) or value < low or value > high:
        raise ValueError(f"{name} must be between {low} and {high}, got {value}")
    return value


def is_hex_color(value):
    """True if ``value`` is accepted by normalize_hex."""
    return isinstance(value, str) and HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value):
    """Normalize a hex color to lowercase ``#rrggbb``.

    Accepts ``#rgb``, ``#rrggbb`` and ``#rrggbbaa`` with or without the
    leading ``#``. Shorthand is expanded and alpha is dropped.

    Raises:
        InvalidColorError: If ``value`` is not a hex color.
    """
    if not isinstance(value, str):
        raise InvalidColorError(value)
    match = HEX_PATTERN.match(value.strip())
    if match is None:
        raise InvalidColorError(value)
    r, g, b = ImageColor.getrgb(f"#{match.group(1)}")[:3]
    return rgb_to_hex(r, g, b)


def rgb_to_hex(r, g, b):
    r, g, b = (max(0, min(255, int(c))) for c in (r, g, b))
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    return ImageColor.getrgb(normalize_hex(hex_color))[:3]


def hex_to_hsl(hex_color):
    """Return ``(h, s, l)``, each in [0, 1]."""
    r, g, b = hex_to_rgb(hex_color)
    h, l, s = colorsys.rgb_to_hls(r / 255, g / 255, b / 255)
    return h, s, l


def hsl_to_hex(h, s, l):
    r, g, b = colorsys.hls_to_rgb(h, l, s)
    return rgb_to_hex(round(r * 255), round(g * 255), round(b * 255))


def saturation(hex_color):
    return hex_to_hsl(hex_color)[1]


def adjust_lightness(hex_color, delta):
    """Shift HSL lightness by ``delta`` (in [-1, 1]), clamping to [0, 1].

    Hue and saturation pass through untouched.
    """
    delta = check_fraction(delta, "delta", -1.0, 1.0)
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s, max(0.0, min(1.0, l + delta)))


def desaturate(hex_color, amount):
    """Scale saturation by ``1 - amount``. amount=1 yields a grey."""
    amount = check_fraction(amount, "amount")
    h, s, l = hex_to_hsl(hex_color)
    return hsl_to_hex(h, s * (1 - amount), l)


def blend(color1, color2, ratio):
    """Blend two colors in RGB space. ratio=0 returns color1, ratio=1 returns color2."""
    ratio = check_fraction(ratio, "ratio")
    start = np.array(hex_to_rgb(color1), dtype=float)
    end = np.array(hex_to_rgb(color2), dtype=float)
    mixed = np.clip(np.rint(start * (1 - ratio) + end * ratio), 0, 255)
    return rgb_to_hex(*mixed.astype(int))


def shade_toward_black(hex_color, amount):
    return blend(hex_color, BLACK, amount)


def relative_luminance(hex_color):
    """Calculate relative luminance per WCAG 2.0"""
    channels = np.array(hex_to_rgb(hex_color), dtype=float) / 255
    linear = np.where(channels <= 0.03928, channels / 12.92, ((channels + 0.055) / 1.055) ** 2.4)
    return float(np.dot(linear, [0.2126, 0.7152, 0.0722]))


def contrast_ratio(color1, color2):
    """Calculate contrast ratio between two colors"""
    lum1 = relative_luminance(color1)
    lum2 = relative_luminance(color2)
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)
