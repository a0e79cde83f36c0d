"""Active theme selection and persistence."""

from __future__ import annotations

import logging
from typing import Iterable

from randomcaser.config.settings import AppSettings
from randomcaser.ui.themes.catalog import BUILTIN_THEMES
from randomcaser.ui.themes.constants import DEFAULT_THEME_ID, LEGACY_THEME_ALIASES
from randomcaser.ui.themes.models import Theme, ThemeMenuEntry, ThemeValidationError

logger = logging.getLogger("randomcaser.themes")


class ThemeStore:
    """Holds the theme catalog and the persisted active selection."""

    def __init__(self, settings: AppSettings, themes: Iterable[Theme] = BUILTIN_THEMES) -> None:
        self._settings = settings
        self._themes: dict[str, Theme] = {}
        for theme in themes:
            if theme.theme_id in self._themes:
                raise ThemeValidationError(f"Duplicate theme id {theme.theme_id!r}")
            self._themes[theme.theme_id] = theme
        if DEFAULT_THEME_ID not in self._themes:
            raise ThemeValidationError(f"Default theme {DEFAULT_THEME_ID!r} is not in the catalog")

    @property
    def default_theme(self) -> Theme:
        return self._themes[DEFAULT_THEME_ID]

    def all_themes(self) -> list[Theme]:
        return list(self._themes.values())

    def get_theme(self, theme_id: str) -> Theme | None:
        return self._themes.get(theme_id)

    def resolve(self, raw_id: str | None) -> Theme:
        """Map a persisted identifier to a theme, falling back to the default."""
        value = (raw_id or "").strip()
        if not value:
            return self.default_theme
        value = LEGACY_THEME_ALIASES.get(value, value)
        theme = self._themes.get(value)
        if theme is None:
            logger.warning("unknown theme id %r; using %s", raw_id, DEFAULT_THEME_ID)
            return self.default_theme
        return theme

    def active_theme(self) -> Theme:
        return self.resolve(self._settings.theme_id)

    def set_active(self, theme: Theme | str) -> Theme:
        theme_id = theme if isinstance(theme, str) else theme.theme_id
        resolved = self.resolve(theme_id)
        self._settings.theme_id = resolved.theme_id
        logger.info("active theme set to %s", resolved.theme_id)
        return resolved

    def menu_entries(self) -> list[ThemeMenuEntry]:
        active_id = self.active_theme().theme_id
        return [
            ThemeMenuEntry(
                theme_id=theme.theme_id,
                name=theme.name,
                checked=theme.theme_id == active_id,
                icon_name=theme.icon_name,
            )
            for theme in self._themes.values()
        ]
