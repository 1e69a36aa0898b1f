"""Color palette for QuizShowQt supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(light="#1E293B", dark="#F1F5F9")
    TEXT_SECONDARY = ThemeColors(light="#475569", dark="#94A3B8")

    BACKGROUND_PRIMARY = ThemeColors(light="#F0FDF4", dark="#0F172A")
    CARD_BACKGROUND = ThemeColors(light="#FFFFFF", dark="#1E293B")
    EXPLANATION_BACKGROUND = ThemeColors(light="#F8FAFC", dark="#111827")

    BORDER_PRIMARY = ThemeColors(light="#CBD5E1", dark="#475569")

    BUTTON_PRIMARY_BG = ThemeColors(light="#059669", dark="#10B981")
    BUTTON_PRIMARY_TEXT = ThemeColors(light="#FFFFFF", dark="#022C22")
    BUTTON_HOVER_BG = ThemeColors(light="#F1F5F9", dark="#334155")

    TIMER_TRACK = ThemeColors(light="#F1F5F9", dark="#334155")
    TIMER_FILL = ThemeColors(light="#10B981", dark="#34D399")

    # Choice feedback once a question is locked
    CHOICE_CORRECT_BORDER = ThemeColors(light="#10B981", dark="#34D399")
    CHOICE_CORRECT_BG = ThemeColors(light="#ECFDF5", dark="#064E3B")
    CHOICE_WRONG_BORDER = ThemeColors(light="#F43F5E", dark="#FB7185")
    CHOICE_WRONG_BG = ThemeColors(light="#FFF1F2", dark="#4C0519")
