"""Quiz-related constants shared across UI and core layers."""

QUESTION_TIME_SECONDS: int = 20
POINTS_PER_CORRECT_ANSWER: int = 10
REVEAL_DELAY_MS: int = 300
TICK_WARNING_WINDOW_SECONDS: int = 5
TICK_INTERVAL_MS: int = 1000

DEFAULT_QUIZ_FILES: tuple[str, ...] = ("quiz_questions.txt", "quiz_questions.json")

# Optional sound files, resolved relative to the project root. Missing files mute the cue.
CUE_SOUND_PATHS: dict[str, str | None] = {
    "click": "quiz_show/data/sounds/click.wav",
    "correct": "quiz_show/data/sounds/correct.wav",
    "incorrect": "quiz_show/data/sounds/incorrect.wav",
    "tick-warning": "quiz_show/data/sounds/tick.wav",
}
CUE_SOUND_VOLUME: float = 0.6
