from .styles import COLOR_TABLE, build_vscode_colors
from .theme import ThemeDocument, assemble_theme, generate_theme, resolve_theme_name
from .tokens import build_token_colors

__all__ = [
    "COLOR_TABLE",
    "ThemeDocument",
    "assemble_theme",
    "build_token_colors",
    "build_vscode_colors",
    "generate_theme",
    "resolve_theme_name",
]
