"""Generate VS Code color themes from terminal color scheme files."""

from .errors import InvalidColorError, ThemeAssemblyError, ThemeError, ThemeFileError, ThemeValidationError
from .vscode import ThemeDocument, assemble_theme, generate_theme

__version__ = "0.1.0"

__all__ = [
    "InvalidColorError",
    "ThemeAssemblyError",
    "ThemeDocument",
    "ThemeError",
    "ThemeFileError",
    "ThemeValidationError",
    "assemble_theme",
    "generate_theme",
]
