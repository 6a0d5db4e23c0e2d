from .json_export import export_theme, theme_to_json
from .report import generate_readability_report

__all__ = ["export_theme", "generate_readability_report", "theme_to_json"]
