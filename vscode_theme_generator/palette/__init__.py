from .generator import ExtendedPalette, classify_kind, extend_palette
from .loader import ParsedTheme, RawColorMap, parse_theme_file, parse_theme_text
from .roles import RoleTable, map_roles

__all__ = [
    "ExtendedPalette",
    "ParsedTheme",
    "RawColorMap",
    "RoleTable",
    "classify_kind",
    "extend_palette",
    "map_roles",
    "parse_theme_file",
    "parse_theme_text",
]
