"""State machine driving one playthrough of the quiz."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Signal

from quiz_show.core.models import (
    AnswerPhase,
    AnswerState,
    Cue,
    Question,
    QuizSettings,
    SessionSnapshot,
)
from quiz_show.core.services.countdown_timer import CountdownTimer
from quiz_show.core.services.question_bank import QuestionBank

logger = logging.getLogger(__name__)

RestartKey = tuple[int, int]


class QuizSessionController(QObject):
    """Owns the session state and the per-question countdown.

    Renderers and sound players never get a reference from the controller;
    they connect to ``state_changed`` and ``cue_requested`` instead.
    """

    state_changed = Signal(object)
    cue_requested = Signal(object)

    def __init__(
        self,
        bank: QuestionBank,
        settings: QuizSettings | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._bank = bank
        self._settings = settings or QuizSettings()

        self._started: bool = False
        self._order: tuple[Question, ...] = ()
        self._current_index: int = 0
        self._score: int = 0
        self._answer = AnswerState()
        self._generation: int = 0
        self._shuffle_seed: int | None = None

        self._timer = CountdownTimer(self._settings.tick_interval_ms, parent=self)
        self._timer.configure(self._settings.budget_seconds, running=False)

        self._pending_reveal_key: RestartKey | None = None
        self._reveal_timer = QTimer(self)
        self._reveal_timer.setSingleShot(True)
        self._reveal_timer.setInterval(self._settings.reveal_delay_ms)
        self._reveal_timer.timeout.connect(self._handle_reveal)

    # --- Queries ---

    @property
    def settings(self) -> QuizSettings:
        return self._settings

    @property
    def bank(self) -> QuestionBank:
        return self._bank

    def is_started(self) -> bool:
        return self._started

    def get_current_question(self) -> Question | None:
        if not self._started:
            return None
        return self._order[self._current_index]

    def get_session_order(self) -> tuple[Question, ...]:
        return self._order

    def get_score(self) -> int:
        return self._score

    def get_answer_state(self) -> AnswerState:
        return self._answer

    def get_remaining_seconds(self) -> int:
        return self._timer.remaining_seconds

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            started=self._started,
            current_index=self._current_index,
            total=self._bank.question_count(),
            score=self._score,
            question=self.get_current_question(),
            remaining_seconds=self._timer.remaining_seconds,
            budget_seconds=self._settings.budget_seconds,
            selected_index=self._answer.selected_index,
            locked=self._answer.locked,
            explanation_visible=self._answer.explanation_visible,
        )

    # --- Intents ---

    def start(self) -> None:
        """Begin a new playthrough, discarding any previous one."""
        self._cancel_pending_reveal()
        self._generation += 1
        if self._shuffle_seed is not None:
            self._bank.set_shuffle_seed(self._shuffle_seed)
        self._order = self._bank.new_session_order()
        self._current_index = 0
        self._score = 0
        self._answer = AnswerState()
        self._started = True
        logger.info("Quiz session %d started with %d questions", self._generation, len(self._order))
        self._sync_timer()
        self._publish()

    def restart(self) -> None:
        self.end_session()
        self.start()

    def end_session(self) -> None:
        """Return to the not-started condition without retaining anything."""
        if self._started:
            logger.info("Quiz session %d ended with score %d", self._generation, self._score)
        self._cancel_pending_reveal()
        self._started = False
        self._order = ()
        self._current_index = 0
        self._score = 0
        self._answer = AnswerState()
        self._sync_timer()
        self._publish()

    def select_choice(self, choice_index: int) -> None:
        question = self.get_current_question()
        if question is None or self._answer.phase is not AnswerPhase.ANSWERING:
            logger.debug("Ignoring selection %r: question not accepting answers", choice_index)
            return
        if (
            isinstance(choice_index, bool)
            or not isinstance(choice_index, int)
            or not 0 <= choice_index < len(question.choices)
        ):
            logger.debug("Ignoring out-of-range selection %r", choice_index)
            return

        self.cue_requested.emit(Cue.CLICK)
        self._answer = AnswerState(phase=AnswerPhase.LOCKED, selected_index=choice_index)
        self._sync_timer()

        if question.is_correct(choice_index):
            self._score += self._settings.points_per_correct_answer
            self.cue_requested.emit(Cue.CORRECT)
        else:
            self.cue_requested.emit(Cue.INCORRECT)

        self._pending_reveal_key = self._restart_key()
        self._reveal_timer.start()
        self._publish()

    def advance(self) -> None:
        if not self._started or self._answer.phase is not AnswerPhase.REVEALED:
            logger.debug("Ignoring advance: current question not revealed")
            return
        if self._current_index >= len(self._order) - 1:
            self.end_session()
            return
        self._current_index += 1
        self._answer = AnswerState()
        self._sync_timer()
        self._publish()

    def get_shuffle_seed(self) -> int | None:
        return self._shuffle_seed

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Fix the question order of every later start; ``None`` shuffles freely again."""
        self._shuffle_seed = seed
        self._bank.set_shuffle_seed(seed)

    # --- Timer coordination ---

    def _restart_key(self) -> RestartKey | None:
        question = self.get_current_question()
        if question is None:
            return None
        return (self._generation, question.id)

    def _sync_timer(self) -> None:
        """Run the countdown exactly while the current question awaits an answer."""
        key = self._restart_key()
        running = key is not None and self._answer.phase is AnswerPhase.ANSWERING
        self._timer.configure(
            self._settings.budget_seconds,
            running,
            on_tick=lambda remaining: self._handle_tick(key, remaining),
            on_elapsed=lambda: self._handle_elapsed(key),
            restart_key=key,
        )

    def _is_answering(self, key: RestartKey | None) -> bool:
        return (
            key is not None
            and key == self._restart_key()
            and self._answer.phase is AnswerPhase.ANSWERING
        )

    def _handle_tick(self, key: RestartKey | None, remaining: int) -> None:
        if not self._is_answering(key):
            logger.debug("Discarding stale tick for %s", key)
            return
        if 0 <= remaining <= self._settings.tick_warning_seconds:
            self.cue_requested.emit(Cue.TICK_WARNING)
        self._publish()

    def _handle_elapsed(self, key: RestartKey | None) -> None:
        if not self._is_answering(key):
            logger.debug("Discarding stale elapsed signal for %s", key)
            return
        self._answer = AnswerState(phase=AnswerPhase.REVEALED)
        self._sync_timer()
        self._publish()

    def _handle_reveal(self) -> None:
        key = self._pending_reveal_key
        self._pending_reveal_key = None
        if key is None or key != self._restart_key() or self._answer.phase is not AnswerPhase.LOCKED:
            logger.debug("Discarding stale reveal for %s", key)
            return
        self._answer = AnswerState(
            phase=AnswerPhase.REVEALED,
            selected_index=self._answer.selected_index,
        )
        self._publish()

    def _cancel_pending_reveal(self) -> None:
        self._reveal_timer.stop()
        self._pending_reveal_key = None

    def _publish(self) -> None:
        self.state_changed.emit(self.snapshot())
