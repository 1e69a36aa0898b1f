"""Qt UI components for the quiz application."""

from .dialog_helpers import show_error, show_info
from .quiz_main_window import QuizMainWindow
from .sound_cue_player import SoundCuePlayer

__all__ = [
    "QuizMainWindow",
    "SoundCuePlayer",
    "show_error",
    "show_info",
]
