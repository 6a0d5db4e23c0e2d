import math
from numbers import Real

from .color import normalize_hex


def to_hex_opacity(opacity):
    """Convert 0.0-1.0 opacity to a two digit hex string (00-ff).

    Values outside the range are clamped; NaN, infinities and non-numbers
    raise ValueError.
    """
    if isinstance(opacity, bool) or not isinstance(opacity, Real) or not math.isfinite(opacity):
        raise ValueError(f"opacity must be a finite number, got {opacity!r}")
    alpha = math.floor(opacity * 255 + 0.5)
    return f"{max(0, min(255, alpha)):02x}"


def with_alpha(hex_color, opacity):
    """Return ``#rrggbbaa`` for ``hex_color`` at the given opacity."""
    return f"{normalize_hex(hex_color)}{to_hex_opacity(opacity)}"
