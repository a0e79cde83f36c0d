"""Built-in theme catalog."""

from __future__ import annotations

from randomcaser.ui.themes.models import Theme

# Park MGM-inspired muted sage green; shipped as "sage" before themes were selectable.
PARK = Theme(
    theme_id="park",
    name="Park",
    palette={
        "background": "#5C7A6B",
        "output_background": "#F5F2ED26",
        "output_text": "#F5F2ED",
        "primary_button_background": "#3D5C4A",
        "primary_button_text": "#F5F2ED",
        "secondary_button_background": "#F5F2ED",
        "secondary_button_text": "#3D5C4A",
        "action_button_background": "#F5F2ED4D",
        "action_button_text": "#F5F2ED",
        "accent": "#3D5C4A",
    },
    icon_name="leaf",
)

MIDNIGHT = Theme(
    theme_id="midnight",
    name="Midnight",
    palette={
        "background": "#161B2E",
        "output_background": "#E6EBF526",
        "output_text": "#E6EBF5",
        "primary_button_background": "#8CB6FF",
        "primary_button_text": "#0E1015",
        "secondary_button_background": "#252C3D",
        "secondary_button_text": "#E6EBF5",
        "action_button_background": "#E6EBF533",
        "action_button_text": "#93A0B8",
        "accent": "#8CB6FF",
    },
    icon_name="moon",
)

SUNSET = Theme(
    theme_id="sunset",
    name="Sunset",
    palette={
        "background": "#E8734A",
        "output_background": "#FFF4E626",
        "output_text": "#FFF4E6",
        "primary_button_background": "#7A2E1F",
        "primary_button_text": "#FFF4E6",
        "secondary_button_background": "#FFF4E6",
        "secondary_button_text": "#7A2E1F",
        "action_button_background": "#FFF4E64D",
        "action_button_text": "#FFF4E6",
        "accent": "#D4A44A",
    },
    icon_name="sun",
)

BUBBLEGUM = Theme(
    theme_id="bubblegum",
    name="Bubblegum",
    palette={
        "background": "#F7A8C8",
        "output_background": "#FFFFFF40",
        "output_text": "#5A1E3C",
        "primary_button_background": "#C2357A",
        "primary_button_text": "#FFFFFF",
        "secondary_button_background": "#FFFFFF",
        "secondary_button_text": "#C2357A",
        "action_button_background": "#FFFFFF59",
        "action_button_text": "#5A1E3C",
        "accent": "#C2357A",
    },
    icon_name="heart",
)

# Host-default chrome; the palette only backs surfaces the host does not draw.
ROBOTIC = Theme(
    theme_id="robotic",
    name="Robotic",
    palette={
        "background": "#F2F2F7",
        "output_background": "#FFFFFF",
        "output_text": "#000000",
        "primary_button_background": "#007AFF",
        "primary_button_text": "#FFFFFF",
        "secondary_button_background": "#E5E5EA",
        "secondary_button_text": "#000000",
        "action_button_background": "#E5E5EA",
        "action_button_text": "#3C3C43",
        "accent": "#007AFF",
    },
    is_native=True,
    icon_name="cpu",
)

BUILTIN_THEMES: tuple[Theme, ...] = (PARK, MIDNIGHT, SUNSET, BUBBLEGUM, ROBOTIC)
