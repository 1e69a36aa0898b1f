"""Qt UI constants used across widgets."""

WINDOW_TITLE: str = "QuizShowQt"

START_TITLE: str = "Photosynthesis Gameshow"
START_DESCRIPTION_TEMPLATE: str = (
    "Quiz mode with {count} questions. You have {seconds}s per question."
)
START_RULES: tuple[str, ...] = (
    "The timer ticks during the last five seconds.",
    "With sound files in quiz_show/data/sounds, picking an answer plays a click and a right/wrong jingle.",
)
START_BUTTON: str = "Start Playing"

QUESTION_COUNTER_TEMPLATE: str = "Question: {current}/{total}"
SCORE_TEMPLATE: str = "Score: {score}"
TIME_LEFT_LABEL: str = "Time left"
TIME_LEFT_TEMPLATE: str = "{seconds}s"

NEXT_QUESTION_BUTTON: str = "Next question →"
FINISH_BUTTON: str = "Finish"
RESTART_BUTTON: str = "Restart"
ABOUT_BUTTON: str = "About"
SETTINGS_BUTTON: str = "Settings"

QUIZ_LOAD_FAILED_TITLE: str = "Quiz file rejected"
QUIZ_LOAD_FALLBACK_MESSAGE: str = "{error}\n\nThe built-in quiz will be used instead."
