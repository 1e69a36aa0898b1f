"""Domain models for the quiz application."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from quiz_show.constants.quiz_constants import (
    POINTS_PER_CORRECT_ANSWER,
    QUESTION_TIME_SECONDS,
    REVEAL_DELAY_MS,
    TICK_INTERVAL_MS,
    TICK_WARNING_WINDOW_SECONDS,
)


@dataclass(frozen=True, slots=True)
class Question:
    """Multiple-choice question with at least two choices."""

    id: int
    prompt: str
    choices: tuple[str, ...]
    correct_index: int
    explanation: str = ""

    def __post_init__(self) -> None:
        # Accept any sequence of choices but store an immutable tuple.
        object.__setattr__(self, "choices", tuple(self.choices))
        if len(self.choices) < 2:
            raise ValueError(f"Question {self.id} must have at least two choices.")
        if not 0 <= self.correct_index < len(self.choices):
            raise ValueError(
                f"Question {self.id} has correct index {self.correct_index} "
                f"outside of 0..{len(self.choices) - 1}."
            )

    def is_correct(self, choice_index: int) -> bool:
        return choice_index == self.correct_index


class Cue(str, Enum):
    """Feedback events sent to the sound player."""

    CLICK = "click"
    CORRECT = "correct"
    INCORRECT = "incorrect"
    TICK_WARNING = "tick-warning"


class AnswerPhase(Enum):
    """Sub-state of the current question."""

    ANSWERING = auto()
    LOCKED = auto()  # selection made, explanation pending
    REVEALED = auto()


@dataclass(frozen=True, slots=True)
class AnswerState:
    """Answer state of the current question."""

    phase: AnswerPhase = AnswerPhase.ANSWERING
    selected_index: int | None = None

    @property
    def locked(self) -> bool:
        return self.phase is not AnswerPhase.ANSWERING

    @property
    def explanation_visible(self) -> bool:
        return self.phase is AnswerPhase.REVEALED


@dataclass(frozen=True, slots=True)
class QuizSettings:
    """Tunables for a quiz session."""

    budget_seconds: int = QUESTION_TIME_SECONDS
    points_per_correct_answer: int = POINTS_PER_CORRECT_ANSWER
    reveal_delay_ms: int = REVEAL_DELAY_MS
    tick_warning_seconds: int = TICK_WARNING_WINDOW_SECONDS
    tick_interval_ms: int = TICK_INTERVAL_MS


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable view of the session handed to renderers."""

    started: bool
    current_index: int
    total: int
    score: int
    question: Question | None
    remaining_seconds: int
    budget_seconds: int
    selected_index: int | None = None
    locked: bool = False
    explanation_visible: bool = False

    @property
    def progress_percent(self) -> float:
        """Share of the budget already used, 0-100."""
        if self.budget_seconds <= 0:
            return 100.0
        used = self.budget_seconds - self.remaining_seconds
        return max(0.0, min(100.0, used / self.budget_seconds * 100))

    @property
    def is_last_question(self) -> bool:
        return self.started and self.current_index == self.total - 1
