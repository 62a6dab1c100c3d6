"""Theme model, built-in themes, CSS rendering and JSON import/export."""

from .builtin import ThemeCollection, get_theme, themes
from .css import theme_to_css_variables
from .models import THEME_SCHEMA_VERSION, Theme, clone_theme
from .service import export_theme, import_theme, merge_theme, set_theme_value

__all__ = [
    "THEME_SCHEMA_VERSION",
    "Theme",
    "ThemeCollection",
    "clone_theme",
    "export_theme",
    "get_theme",
    "import_theme",
    "merge_theme",
    "set_theme_value",
    "theme_to_css_variables",
    "themes",
]
