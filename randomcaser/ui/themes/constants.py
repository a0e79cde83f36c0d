"""Theme framework constants."""

from __future__ import annotations

DEFAULT_THEME_ID = "park"

# Identifiers persisted by earlier releases, mapped to their replacement.
LEGACY_THEME_ALIASES: dict[str, str] = {
    "sage": DEFAULT_THEME_ID,
}

PALETTE_ROLES: tuple[str, ...] = (
    "background",
    "output_background",
    "output_text",
    "primary_button_background",
    "primary_button_text",
    "secondary_button_background",
    "secondary_button_text",
    "action_button_background",
    "action_button_text",
    "accent",
)
