"""Colour palette supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Colour definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized colour definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#0f172a", dark="#f1f5f9")
    TEXT_SECONDARY = ThemeColors(light="#475569", dark="#94a3b8")

    PANEL_BACKGROUND = ThemeColors(light="#ffffff", dark="#1e293b")
    BORDER_PRIMARY = ThemeColors(light="#cbd5e1", dark="#475569")

    BUTTON_PRIMARY_BG = ThemeColors(light="#2563eb", dark="#60a5fa")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#ffffff", dark="#0f172a")
    BUTTON_HOVER_BG = ThemeColors(light="#1d4ed8", dark="#93c5fd")

    SUCCESS = ThemeColors(light="#15803d", dark="#4ade80")
    ERROR = ThemeColors(light="#b91c1c", dark="#f87171")
