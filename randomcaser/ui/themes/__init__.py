"""Theme catalog, selection and styling exports."""

from randomcaser.ui.themes.catalog import BUILTIN_THEMES
from randomcaser.ui.themes.constants import DEFAULT_THEME_ID, LEGACY_THEME_ALIASES, PALETTE_ROLES
from randomcaser.ui.themes.models import (
    ButtonStyle,
    ButtonTier,
    Theme,
    ThemeMenuEntry,
    ThemeValidationError,
)
from randomcaser.ui.themes.store import ThemeStore
from randomcaser.ui.themes.styles import build_stylesheet, style_for

__all__ = [
    "BUILTIN_THEMES",
    "DEFAULT_THEME_ID",
    "LEGACY_THEME_ALIASES",
    "PALETTE_ROLES",
    "ButtonStyle",
    "ButtonTier",
    "Theme",
    "ThemeMenuEntry",
    "ThemeValidationError",
    "ThemeStore",
    "build_stylesheet",
    "style_for",
]
