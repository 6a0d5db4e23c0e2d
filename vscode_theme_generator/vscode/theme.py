"""Assemble the final VS Code theme document."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import PurePath
from types import MappingProxyType

from ..config import DEFAULT_BACKGROUND_LEVELS
from ..errors import ThemeAssemblyError
from ..logger import get_logger
from ..palette.generator import ExtendedPalette, classify_kind, extend_palette
from ..palette.loader import parse_theme_text
from ..palette.roles import map_roles
from .styles import COLOR_TABLE, build_vscode_colors
from .tokens import build_token_colors

logger = get_logger(__name__)

UNKNOWN_THEME_NAME = "Unknown Theme"

# Keys every generated theme must define, whatever table built it
REQUIRED_COLOR_KEYS = (
    "editor.background",
    "editor.foreground",
    "terminal.background",
    "terminal.foreground",
) + tuple(
    f"terminal.ansi{prefix}{name}"
    for prefix in ("", "Bright")
    for name in ("Black", "Red", "Green", "Yellow", "Blue", "Magenta", "Cyan", "White")
)


@dataclass(frozen=True)
class ThemeDocument:
    name: str
    type: str
    colors: Mapping[str, str]
    token_colors: tuple = ()
    semantic_highlighting: bool = True
    warnings: tuple = field(default=(), compare=False)

    def to_dict(self):
        """JSON-ready structure in VS Code's color theme format."""
        return {
            "name": self.name,
            "type": self.type,
            "colors": dict(self.colors),
            "tokenColors": [token.to_dict() for token in self.token_colors],
            "semanticHighlighting": self.semantic_highlighting,
        }


def _clean(value):
    return value.strip() if isinstance(value, str) and value.strip() else None


def resolve_theme_name(source=None, explicit=None, meta=None):
    """Pick a display name.

    An explicit name wins, then a ``name`` entry in the theme metadata, then
    the source file name with its extension removed and ``-``/``_`` turned
    into spaces, each word capitalized.
    """
    name = _clean(explicit) or _clean((meta or {}).get("name"))
    if name:
        return name
    if not _clean(source):
        return UNKNOWN_THEME_NAME
    stem = PurePath(source.strip()).stem
    words = stem.replace("_", " ").replace("-", " ").split()
    if not words:
        return UNKNOWN_THEME_NAME
    return " ".join(word[:1].upper() + word[1:] for word in words)


def assemble_theme(palette, name=None, meta=None, source=None, table=COLOR_TABLE, token_options=None, warnings=()):
    """Build the ThemeDocument for ``palette``.

    Args:
        palette: ExtendedPalette from extend_palette.
        name: Explicit theme name.
        meta: Theme file metadata, consulted for ``name``.
        source: Source path, the last resort for the name.
        table: Color table passed to build_vscode_colors.
        token_options: Keyword arguments for build_token_colors.
        warnings: Parse warnings to carry along on the document.

    Raises:
        ThemeAssemblyError: If ``palette`` is not an ExtendedPalette or the
            color map lacks one of REQUIRED_COLOR_KEYS.
    """
    if not isinstance(palette, ExtendedPalette):
        raise ThemeAssemblyError(
            f"Expected an ExtendedPalette, got {type(palette).__name__}",
            {"type": type(palette).__name__},
        )

    colors = build_vscode_colors(palette, table)
    missing = [key for key in REQUIRED_COLOR_KEYS if key not in colors]
    if missing:
        raise ThemeAssemblyError(f"Missing theme colors: {', '.join(missing)}", {"missing": missing})

    theme_type = classify_kind(palette.background)
    if theme_type != palette.kind:
        logger.debug(f"Palette built as {palette.kind} but background reads as {theme_type}")

    theme_name = resolve_theme_name(source, name, meta)
    tokens = build_token_colors(palette, **(token_options or {}))
    logger.debug(f"Assembled {theme_name!r}: {len(colors)} colors, {len(tokens)} token rules")
    return ThemeDocument(
        name=theme_name,
        type=theme_type,
        colors=MappingProxyType(colors),
        token_colors=tuple(tokens),
        semantic_highlighting=True,
        warnings=tuple(warnings),
    )


def generate_theme(text, source=None, name=None, limits=None, levels=DEFAULT_BACKGROUND_LEVELS):
    """Run the whole pipeline on theme file text.

    Raises:
        ThemeValidationError: Oversized input or invalid ``levels``.
    """
    parsed = parse_theme_text(text, limits, source=source)
    if parsed.colors.is_empty():
        logger.warning("No colors found in theme text, using defaults")
    roles = map_roles(parsed.colors, parsed.meta)
    palette = extend_palette(roles, levels=levels)
    return assemble_theme(palette, name=name, meta=parsed.meta, source=source, warnings=parsed.warnings)
