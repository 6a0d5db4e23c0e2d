"""Resolve a sparse RawColorMap into a complete RoleTable.

Each role walks a fallback cascade (explicit key, related palette slot,
hard default) so the result is always fully populated.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

from ..color import blend, is_hex_color, normalize_hex
from ..errors import ThemeValidationError
from ..logger import get_logger
from .loader import ANSI_SLOTS, RawColorMap

logger = get_logger(__name__)

ANSI_ROLE_NAMES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
)
CORE_ROLE_NAMES = ANSI_ROLE_NAMES + ("background", "foreground", "cursor", "selection")
CHROME_ROLE_NAMES = (
    "cursor_text",
    "selection_foreground",
    "accent",
    "dim",
    "ui_background",
    "ui_foreground",
)
ROLE_NAMES = CORE_ROLE_NAMES + CHROME_ROLE_NAMES

# Reference palette used for missing ANSI slots
DEFAULT_ANSI = (
    "#1d1d26",
    "#ff5f5f",
    "#5fff5f",
    "#ffff5f",
    "#5fafff",
    "#ff5fff",
    "#5fffff",
    "#e0e0e0",
    "#808080",
    "#ff7f7f",
    "#7fff7f",
    "#ffff7f",
    "#7fbfff",
    "#ff7fff",
    "#7fffff",
    "#ffffff",
)
DEFAULT_BACKGROUND = "#1d1d26"
DEFAULT_FOREGROUND = "#cbcbf0"

# Default selection: background tinted toward the accent
SELECTION_TINT = 0.3

_ROLE_INFO = {
    "black": ("Black", ("Terminal black", "Dark backgrounds", "Shadows")),
    "red": ("Red", ("Errors", "Deleted lines", "Default accent")),
    "green": ("Green", ("Strings", "Success messages", "Added lines")),
    "yellow": ("Yellow", ("Warnings", "Find matches", "Modified lines")),
    "blue": ("Blue", ("Functions", "Links", "Info messages")),
    "magenta": ("Magenta", ("Operators", "Types", "Conflicts")),
    "cyan": ("Cyan", ("Bracket pairs", "Remote indicators")),
    "white": ("White", ("Terminal white", "Light text")),
    "bright_black": ("Bright Black", ("Comments", "Disabled text", "Borders")),
    "bright_red": ("Bright Red", ("Numbers", "Constants", "Hover states")),
    "bright_green": ("Bright Green", ("Success confirmations", "Positive indicators")),
    "bright_yellow": ("Bright Yellow", ("Active highlights", "Warning hover")),
    "bright_blue": ("Bright Blue", ("Active links", "Support functions")),
    "bright_magenta": ("Bright Magenta", ("Special constants", "Accent colors")),
    "bright_cyan": ("Bright Cyan", ("Support classes", "Helper text")),
    "bright_white": ("Bright White", ("Primary text", "Main content")),
    "background": ("Background", ("Editor canvas", "Terminal background")),
    "foreground": ("Foreground", ("Editor text", "Variables")),
    "cursor": ("Cursor", ("Editor cursor", "Terminal cursor")),
    "selection": ("Selection", ("Terminal selection", "Selected text")),
    "cursor_text": ("Cursor Text", ("Text under the cursor",)),
    "selection_foreground": ("Selection Foreground", ("Selected text",)),
    "accent": ("Accent", ("Keywords", "Buttons", "Badges", "Focus borders")),
    "dim": ("Dim", ("Comments", "Inactive text")),
    "ui_background": ("UI Background", ("Sidebar", "Activity bar", "Status bar")),
    "ui_foreground": ("UI Foreground", ("Sidebar text", "Status bar text")),
}


@dataclass(frozen=True)
class ColorRole:
    """A named color with notes on where it shows up."""

    name: str
    hex: str
    usage: tuple[str, ...] = ()


@dataclass(frozen=True)
class RoleTable:
    """Every semantic color role, always populated."""

    black: ColorRole
    red: ColorRole
    green: ColorRole
    yellow: ColorRole
    blue: ColorRole
    magenta: ColorRole
    cyan: ColorRole
    white: ColorRole
    bright_black: ColorRole
    bright_red: ColorRole
    bright_green: ColorRole
    bright_yellow: ColorRole
    bright_blue: ColorRole
    bright_magenta: ColorRole
    bright_cyan: ColorRole
    bright_white: ColorRole
    background: ColorRole
    foreground: ColorRole
    cursor: ColorRole
    selection: ColorRole
    cursor_text: ColorRole
    selection_foreground: ColorRole
    accent: ColorRole
    dim: ColorRole
    ui_background: ColorRole
    ui_foreground: ColorRole

    @property
    def ansi(self):
        """The 16 ANSI slot colors in index order."""
        return tuple(getattr(self, name).hex for name in ANSI_ROLE_NAMES)

    def as_dict(self):
        """Role name -> hex."""
        return {f.name: getattr(self, f.name).hex for f in fields(self)}


def _first_valid(role, *candidates):
    """First candidate that is a hex color, normalized.

    Candidates are ``(label, value)`` pairs; the last one must be a valid
    default.
    """
    for label, value in candidates:
        if value is None:
            continue
        if is_hex_color(value):
            logger.debug(f"{role}: using {label}")
            return normalize_hex(value)
        logger.warning(f"{role}: ignoring invalid {label} value {value!r}")
    raise ValueError(f"No valid color for role {role}")


def _index_slot(meta, key, ansi):
    """ANSI color selected by a ``*_index`` metadata entry, or None."""
    raw = (meta or {}).get(key)
    if raw is None:
        return None
    raw = str(raw).strip()
    if raw.isascii() and raw.isdigit() and int(raw) < ANSI_SLOTS:
        return ansi[int(raw)]
    logger.warning(f"Ignoring {key}={raw!r}: expected an ANSI index 0-{ANSI_SLOTS - 1}")
    return None


def _role(name, hex_value):
    label, usage = _ROLE_INFO[name]
    return ColorRole(name=label, hex=hex_value, usage=usage)


def map_roles(colors=None, meta=None, defaults=DEFAULT_ANSI):
    """Build a RoleTable from parsed colors.

    Never fails: anything missing comes from ``defaults`` or a related role.

    Args:
        colors: RawColorMap (None is treated as empty).
        meta: Free-text metadata; ``accent_index``, ``dim_index``,
            ``ui_bg_index`` and ``ui_fg_index`` select ANSI slots.
        defaults: 16 fallback ANSI colors.

    Returns:
        RoleTable

    Raises:
        ThemeValidationError: If ``defaults`` is not 16 hex colors.
    """
    if len(defaults) != ANSI_SLOTS:
        raise ThemeValidationError(
            f"defaults must hold {ANSI_SLOTS} colors, got {len(defaults)}",
            {"count": len(defaults)},
        )
    invalid = [value for value in defaults if not is_hex_color(value)]
    if invalid:
        raise ThemeValidationError(f"Invalid default colors: {invalid!r}", {"invalid": invalid})
    colors = colors if colors is not None else RawColorMap()

    ansi = []
    for index in range(ANSI_SLOTS):
        candidates = [(f"color{index}", colors.slot(index))]
        # Bright slots borrow their normal counterpart before the defaults
        if index > 8:
            candidates.append((f"color{index - 8}", colors.slot(index - 8)))
        candidates.append(("default", defaults[index]))
        ansi.append(_first_valid(ANSI_ROLE_NAMES[index], *candidates))

    background = _first_valid(
        "background",
        ("background", colors.background),
        ("color0", colors.color0),
        ("default", DEFAULT_BACKGROUND),
    )
    foreground = _first_valid(
        "foreground",
        ("foreground", colors.foreground),
        ("color7", colors.color7),
        ("default", DEFAULT_FOREGROUND),
    )
    accent = _first_valid(
        "accent",
        ("accent_color", colors.accent_color),
        ("accent_index", _index_slot(meta, "accent_index", ansi)),
        ("red", ansi[1]),
    )
    dim = _first_valid(
        "dim",
        ("dim_color", colors.dim_color),
        ("dim_index", _index_slot(meta, "dim_index", ansi)),
        ("bright_black", ansi[8]),
    )
    ui_background = _first_valid(
        "ui_background",
        ("ui_bg_color", colors.ui_bg_color),
        ("ui_bg_index", _index_slot(meta, "ui_bg_index", ansi)),
        ("color0", colors.color0),
        ("background", background),
    )
    ui_foreground = _first_valid(
        "ui_foreground",
        ("ui_fg_color", colors.ui_fg_color),
        ("ui_fg_index", _index_slot(meta, "ui_fg_index", ansi)),
        ("color7", colors.color7),
        ("foreground", foreground),
    )
    cursor = _first_valid("cursor", ("cursor_color", colors.cursor_color), ("accent", accent))
    cursor_text = _first_valid("cursor_text", ("cursor_text", colors.cursor_text), ("background", background))
    selection = _first_valid(
        "selection",
        ("selection_background", colors.selection_background),
        ("tinted background", blend(background, accent, SELECTION_TINT)),
    )
    selection_foreground = _first_valid(
        "selection_foreground",
        ("selection_foreground", colors.selection_foreground),
        ("foreground", foreground),
    )

    resolved = dict(zip(ANSI_ROLE_NAMES, ansi))
    resolved.update(
        background=background,
        foreground=foreground,
        cursor=cursor,
        selection=selection,
        cursor_text=cursor_text,
        selection_foreground=selection_foreground,
        accent=accent,
        dim=dim,
        ui_background=ui_background,
        ui_foreground=ui_foreground,
    )
    return RoleTable(**{name: _role(name, value) for name, value in resolved.items()})


def preview_palette(roles):
    """Colors for a quick preview: primaries plus normal/bright ANSI pairs."""
    return {
        "primary": {
            "background": roles.background.hex,
            "foreground": roles.foreground.hex,
            "cursor": roles.cursor.hex,
        },
        "colors": [
            {
                "name": getattr(roles, name).name,
                "value": getattr(roles, name).hex,
                "bright": getattr(roles, f"bright_{name}").hex,
            }
            for name in ANSI_ROLE_NAMES[:8]
        ],
    }
