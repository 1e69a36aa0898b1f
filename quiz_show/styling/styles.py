"""Centralized styles and font definitions for the application."""

from enum import Enum, auto

from .color_palette import ColorPalette, Theme


class ChoiceStyle(Enum):
    """Visual state of a choice button."""
    NEUTRAL = auto()
    CORRECT = auto()
    WRONG = auto()


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
            }}
            QFrame#card {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 16px;
            }}
            QFrame#card QWidget {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
            }}
            QFrame#explanation {{
                background-color: {ColorPalette.EXPLANATION_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 12px;
            }}
            QFrame#explanation QWidget {{
                background-color: {ColorPalette.EXPLANATION_BACKGROUND.get(theme)};
            }}
            QLabel#chip {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 10px;
                padding: 2px 10px;
            }}
            QLabel#secondary {{
                color: {ColorPalette.TEXT_SECONDARY.get(theme)};
            }}
            QProgressBar {{
                background-color: {ColorPalette.TIMER_TRACK.get(theme)};
                border: none;
                border-radius: 4px;
                max-height: 8px;
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.TIMER_FILL.get(theme)};
                border-radius: 4px;
            }}
        """

    @staticmethod
    def get_primary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPushButton {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: none;
                border-radius: 12px;
                padding: 10px 16px;
            }}
        """

    @staticmethod
    def get_secondary_button_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QPushButton {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 12px;
                padding: 10px 16px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
        """

    @staticmethod
    def get_choice_button_style(
        choice_style: ChoiceStyle,
        font_size: int,
        theme: Theme = Theme.LIGHT,
    ) -> str:
        border = ColorPalette.BORDER_PRIMARY.get(theme)
        background = ColorPalette.CARD_BACKGROUND.get(theme)
        hover = f"QPushButton:hover {{ background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)}; }}"
        if choice_style is ChoiceStyle.CORRECT:
            border = ColorPalette.CHOICE_CORRECT_BORDER.get(theme)
            background = ColorPalette.CHOICE_CORRECT_BG.get(theme)
            hover = ""
        elif choice_style is ChoiceStyle.WRONG:
            border = ColorPalette.CHOICE_WRONG_BORDER.get(theme)
            background = ColorPalette.CHOICE_WRONG_BG.get(theme)
            hover = ""
        return (
            f"QPushButton {{ text-align: left; padding: 12px 16px; border-radius: 12px;"
            f" border: 1px solid {border}; background-color: {background};"
            f" color: {ColorPalette.TEXT_PRIMARY.get(theme)}; font-size: {font_size}pt; }}"
            f"{hover}"
        )

    @staticmethod
    def get_large_label_style(font_size: int = 18) -> str:
        return f"font-size: {font_size}pt; font-weight: bold;"
