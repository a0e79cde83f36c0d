"""Theme framework models."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from randomcaser.ui.themes.constants import PALETTE_ROLES

_THEME_ID_RE = re.compile(r"^[a-z0-9][a-z0-9-]*$")
_HEX_COLOR_RE = re.compile(r"^#(?:[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


class ThemeValidationError(ValueError):
    """Raised when a theme definition is incomplete or malformed."""


class ButtonTier(Enum):
    """Visual prominence of a control, independent of theme."""

    PRIMARY = "primary"
    SECONDARY = "secondary"
    ACTION = "action"


@dataclass(frozen=True, slots=True)
class Theme:
    """A named, immutable color palette."""

    theme_id: str
    name: str
    palette: Mapping[str, str]
    is_native: bool = False
    icon_name: str | None = None

    def __post_init__(self) -> None:
        if not _THEME_ID_RE.match(self.theme_id):
            raise ThemeValidationError(
                f"theme_id must match pattern [a-z0-9-], got {self.theme_id!r}"
            )
        unknown = sorted(key for key in self.palette if key not in PALETTE_ROLES)
        if unknown:
            joined = ", ".join(unknown)
            raise ThemeValidationError(f"{self.theme_id}: unsupported palette roles: {joined}")
        missing = [role for role in PALETTE_ROLES if role not in self.palette]
        if missing:
            joined = ", ".join(missing)
            raise ThemeValidationError(f"{self.theme_id}: missing palette roles: {joined}")
        for role in PALETTE_ROLES:
            value = self.palette[role]
            if not isinstance(value, str) or not _HEX_COLOR_RE.match(value):
                raise ThemeValidationError(
                    f"{self.theme_id}: palette role {role!r} has invalid color {value!r}"
                )
        # Validated palettes are read-only.
        object.__setattr__(self, "palette", MappingProxyType(dict(self.palette)))

    def __hash__(self) -> int:
        return hash(
            (
                self.theme_id,
                self.name,
                tuple(sorted(self.palette.items())),
                self.is_native,
                self.icon_name,
            )
        )

    def color(self, role: str) -> str:
        return self.palette[role]


@dataclass(frozen=True, slots=True)
class ButtonStyle:
    """Rendered style attributes for one control."""

    background: str
    foreground: str
    use_native_chrome: bool = False


@dataclass(frozen=True, slots=True)
class ThemeMenuEntry:
    """Display-ready row for the theme selection menu."""

    theme_id: str
    name: str
    checked: bool
    icon_name: str | None = None
