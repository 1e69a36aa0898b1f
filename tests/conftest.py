from __future__ import annotations

import os

import pytest
from PySide6.QtWidgets import QApplication

from quiz_show.core.models import Cue, Question, QuizSettings, SessionSnapshot
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.core.services.question_bank import QuestionBank


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    # Timers need an application object; widgets additionally need a GUI one.
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    app = QApplication.instance() or QApplication([])
    yield app


def build_questions(count: int = 5) -> list[Question]:
    return [
        Question(
            id=idx,
            prompt=f"Question {idx}?",
            choices=("Alpha", "Beta", "Gamma"),
            correct_index=idx % 3,
            explanation=f"Because of {idx}.",
        )
        for idx in range(1, count + 1)
    ]


class SessionRecorder:
    """Collects everything a controller broadcasts."""

    def __init__(self, controller: QuizSessionController) -> None:
        self.cues: list[Cue] = []
        self.snapshots: list[SessionSnapshot] = []
        controller.cue_requested.connect(lambda cue: self.cues.append(cue))
        controller.state_changed.connect(lambda snapshot: self.snapshots.append(snapshot))

    def clear(self) -> None:
        self.cues.clear()
        self.snapshots.clear()


def tick(controller: QuizSessionController, seconds: int = 1) -> None:
    """Deliver ``seconds`` timer intervals without running an event loop."""
    for _ in range(seconds):
        controller._timer._handle_interval()


def fire_reveal(controller: QuizSessionController) -> None:
    """Deliver the pending reveal as if its delay had passed."""
    assert controller._reveal_timer.isActive()
    controller._reveal_timer.stop()
    controller._handle_reveal()


def wrong_index(question: Question) -> int:
    return (question.correct_index + 1) % len(question.choices)


@pytest.fixture
def questions() -> list[Question]:
    return build_questions()


@pytest.fixture
def bank(questions) -> QuestionBank:
    return QuestionBank(questions)


@pytest.fixture
def controller(bank) -> QuizSessionController:
    return QuizSessionController(bank, QuizSettings(budget_seconds=20))


@pytest.fixture
def recorder(controller) -> SessionRecorder:
    return SessionRecorder(controller)
