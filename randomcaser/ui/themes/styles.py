"""Theme x tier style lookup and stylesheet compilation."""

from __future__ import annotations

from randomcaser.ui.themes.models import ButtonStyle, ButtonTier, Theme

# Palette roles used for each tier: (background, foreground).
TIER_ROLES: dict[ButtonTier, tuple[str, str]] = {
    ButtonTier.PRIMARY: ("primary_button_background", "primary_button_text"),
    ButtonTier.SECONDARY: ("secondary_button_background", "secondary_button_text"),
    ButtonTier.ACTION: ("action_button_background", "action_button_text"),
}


def style_for(tier: ButtonTier, theme: Theme) -> ButtonStyle:
    """Return the rendered style for a control of ``tier`` under ``theme``."""
    background_role, foreground_role = TIER_ROLES[tier]
    return ButtonStyle(
        background=theme.color(background_role),
        foreground=theme.color(foreground_role),
        use_native_chrome=theme.is_native,
    )


def qss_color(value: str) -> str:
    """Convert a palette color to Qt stylesheet syntax.

    Palette colors are ``#RRGGBB`` or ``#RRGGBBAA``; Qt reads eight-digit hex
    as ``#AARRGGBB``, so translucent colors are emitted as ``rgba()``.
    """
    if len(value) == 9:
        red = int(value[1:3], 16)
        green = int(value[3:5], 16)
        blue = int(value[5:7], 16)
        alpha = int(value[7:9], 16)
        return f"rgba({red}, {green}, {blue}, {alpha})"
    return value


def build_stylesheet(theme: Theme) -> str:
    """Compile a theme into the host window stylesheet.

    Native themes keep the platform look and compile to an empty sheet.
    """
    if theme.is_native:
        return ""

    sections = [
        f"""
QWidget#SessionView {{
    background-color: {qss_color(theme.color("background"))};
}}

QLabel#OutputLabel {{
    background-color: {qss_color(theme.color("output_background"))};
    color: {qss_color(theme.color("output_text"))};
    border: 1px solid {qss_color(theme.color("output_text"))};
    border-radius: 6px;
    padding: 10px;
}}

QLineEdit#InputField {{
    border: 1px solid {qss_color(theme.color("accent"))};
    border-radius: 6px;
    padding: 6px 8px;
}}
"""
    ]
    for tier in ButtonTier:
        style = style_for(tier, theme)
        sections.append(
            f"""
QPushButton[tier="{tier.value}"] {{
    background-color: {qss_color(style.background)};
    color: {qss_color(style.foreground)};
    border: none;
    border-radius: 16px;
    padding: 8px 12px;
}}
"""
        )
    return "".join(sections).strip() + "\n"
