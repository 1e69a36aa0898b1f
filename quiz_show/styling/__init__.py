"""Styling module for QuizShowQt."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
