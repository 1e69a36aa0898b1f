"""Static metadata describing QuizShowQt."""

APP_NAME = "QuizShowQt"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
APP_ABOUT_TEXT = (
    "QuizShowQt is a single-player gameshow quiz built with Qt. "
    "Each question runs on a countdown; pick an answer before the time runs out."
)

HELP_TEXT = (
    "Place a quiz_questions.txt file next to the application to replace the built-in quiz:\n\n"
    "ID: 1\n"
    "Q: Which gas do plants release during photosynthesis?\n"
    "A: Oxygen\nB: Carbon dioxide\nC: Nitrogen\n"
    "CORRECT: A\n"
    "EXPLANATION: Oxygen is released through the stomata."
)
