from __future__ import annotations

from PySide6.QtCore import QEventLoop, QTimer

from conftest import SessionRecorder, build_questions, fire_reveal, tick, wrong_index
from quiz_show.core.models import AnswerPhase, Cue, QuizSettings
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.core.services.question_bank import QuestionBank


def test_initial_state_is_not_started(controller):
    snapshot = controller.snapshot()

    assert not snapshot.started
    assert snapshot.question is None
    assert snapshot.total == 5
    assert snapshot.score == 0
    assert snapshot.remaining_seconds == 20
    assert not controller._timer.is_running()


def test_start_draws_permutation_and_runs_full_budget(controller, questions, recorder):
    controller.start()
    snapshot = controller.snapshot()

    assert snapshot.started
    assert snapshot.current_index == 0
    assert snapshot.score == 0
    assert snapshot.remaining_seconds == 20
    assert not snapshot.locked
    assert not snapshot.explanation_visible
    assert snapshot.question == controller.get_session_order()[0]
    assert sorted(q.id for q in controller.get_session_order()) == [q.id for q in questions]
    assert controller._timer.is_running()
    assert recorder.snapshots[-1] == snapshot
    assert recorder.cues == []


def test_timeout_locks_and_reveals_without_feedback(controller, recorder):
    controller.start()
    tick(controller, 20)
    snapshot = controller.snapshot()

    assert snapshot.remaining_seconds == 0
    assert snapshot.locked
    assert snapshot.explanation_visible
    assert snapshot.selected_index is None
    assert snapshot.score == 0
    assert recorder.cues == [Cue.TICK_WARNING] * 6
    assert not controller._timer.is_running()
    assert not controller._reveal_timer.isActive()


def test_tick_warnings_cover_last_five_seconds(controller, recorder):
    controller.start()
    warned_at: list[int] = []
    controller.cue_requested.connect(
        lambda cue: warned_at.append(controller.get_remaining_seconds())
    )
    tick(controller, 20)

    assert warned_at == [5, 4, 3, 2, 1, 0]


def test_ticks_after_timeout_are_ignored(controller, recorder):
    controller.start()
    tick(controller, 20)
    recorder.clear()

    tick(controller, 3)

    assert recorder.cues == []
    assert recorder.snapshots == []
    assert controller.get_remaining_seconds() == 0


def test_every_tick_publishes_snapshot(controller, recorder):
    controller.start()
    recorder.clear()
    tick(controller, 3)

    assert [s.remaining_seconds for s in recorder.snapshots] == [19, 18, 17]


def test_correct_selection_scores_once_and_freezes_timer(controller, recorder):
    controller.start()
    tick(controller, 2)
    question = controller.get_current_question()
    recorder.clear()

    controller.select_choice(question.correct_index)
    snapshot = controller.snapshot()

    assert recorder.cues == [Cue.CLICK, Cue.CORRECT]
    assert snapshot.score == 10
    assert snapshot.remaining_seconds == 18
    assert snapshot.locked
    assert snapshot.selected_index == question.correct_index
    assert not snapshot.explanation_visible
    assert not controller._timer.is_running()

    tick(controller, 5)
    assert controller.get_remaining_seconds() == 18

    fire_reveal(controller)
    snapshot = controller.snapshot()
    assert snapshot.explanation_visible
    assert snapshot.score == 10
    assert snapshot.remaining_seconds == 18


def test_incorrect_selection_emits_incorrect_cue(controller, recorder):
    controller.start()
    question = controller.get_current_question()
    recorder.clear()

    controller.select_choice(wrong_index(question))

    assert recorder.cues == [Cue.CLICK, Cue.INCORRECT]
    assert controller.get_score() == 0
    assert controller.get_answer_state().phase is AnswerPhase.LOCKED


def test_selection_after_lock_is_noop(controller, recorder):
    controller.start()
    question = controller.get_current_question()
    controller.select_choice(question.correct_index)
    before = controller.snapshot()
    recorder.clear()

    controller.select_choice(question.correct_index)
    controller.select_choice(wrong_index(question))

    assert controller.snapshot() == before
    assert recorder.cues == []
    assert recorder.snapshots == []


def test_selection_after_timeout_is_noop(controller, recorder):
    controller.start()
    tick(controller, 20)
    before = controller.snapshot()
    recorder.clear()

    controller.select_choice(controller.get_current_question().correct_index)

    assert controller.snapshot() == before
    assert recorder.cues == []
    assert not controller._reveal_timer.isActive()


def test_out_of_range_selection_is_ignored(controller, recorder):
    controller.start()
    recorder.clear()

    for bad_index in (-1, 3, 99, "1", None, True, False):
        controller.select_choice(bad_index)

    assert recorder.cues == []
    assert not controller.snapshot().locked
    assert controller._timer.is_running()


def test_selection_before_start_is_ignored(controller, recorder):
    controller.select_choice(0)

    assert recorder.cues == []
    assert controller.get_score() == 0


def test_advance_requires_revealed_question(controller):
    controller.start()
    controller.advance()
    assert controller.snapshot().current_index == 0

    controller.select_choice(0)
    controller.advance()
    assert controller.snapshot().current_index == 0

    fire_reveal(controller)
    controller.advance()
    assert controller.snapshot().current_index == 1


def test_advance_restarts_timer_for_next_question(controller):
    controller.start()
    tick(controller, 7)
    controller.select_choice(0)
    fire_reveal(controller)

    controller.advance()
    snapshot = controller.snapshot()

    assert snapshot.current_index == 1
    assert snapshot.remaining_seconds == 20
    assert snapshot.selected_index is None
    assert not snapshot.locked
    assert not snapshot.explanation_visible
    assert snapshot.question == controller.get_session_order()[1]
    assert controller._timer.is_running()


def test_advance_after_timeout_moves_on(controller):
    controller.start()
    tick(controller, 20)

    controller.advance()

    assert controller.snapshot().current_index == 1
    assert controller.get_remaining_seconds() == 20


def test_advance_on_last_question_ends_session(controller, recorder):
    controller.start()
    for _ in range(5):
        question = controller.get_current_question()
        controller.select_choice(question.correct_index)
        fire_reveal(controller)
        controller.advance()

    snapshot = controller.snapshot()
    assert not snapshot.started
    assert snapshot.score == 0
    assert snapshot.question is None
    assert snapshot.selected_index is None
    assert not snapshot.locked
    assert controller.get_session_order() == ()
    assert not controller._timer.is_running()
    assert recorder.snapshots[-1] == snapshot

    controller.start()
    assert controller.get_score() == 0
    assert controller.snapshot().current_index == 0


def test_score_is_ten_per_correct_answer(controller):
    controller.start()
    scores: list[int] = []
    for position in range(5):
        question = controller.get_current_question()
        if position % 2 == 0:
            controller.select_choice(question.correct_index)
            fire_reveal(controller)
        elif position == 1:
            controller.select_choice(wrong_index(question))
            fire_reveal(controller)
        else:
            tick(controller, 20)
        scores.append(controller.get_score())
        if position < 4:
            controller.advance()

    assert scores == [10, 10, 20, 20, 30]
    assert scores == sorted(scores)


def test_restart_discards_progress(controller, recorder):
    controller.start()
    question = controller.get_current_question()
    controller.select_choice(question.correct_index)
    fire_reveal(controller)
    controller.advance()
    tick(controller, 4)

    controller.restart()
    snapshot = controller.snapshot()

    assert snapshot.started
    assert snapshot.score == 0
    assert snapshot.current_index == 0
    assert snapshot.remaining_seconds == 20
    assert not snapshot.locked
    assert controller._timer.is_running()


def test_restart_resets_timer_even_for_same_first_question():
    controller = QuizSessionController(QuestionBank(build_questions(1)), QuizSettings(budget_seconds=20))
    controller.start()
    tick(controller, 3)
    assert controller.get_remaining_seconds() == 17

    controller.start()

    assert controller.get_remaining_seconds() == 20
    assert controller._timer.is_running()


def test_restart_cancels_pending_reveal(controller):
    controller.start()
    controller.select_choice(0)
    assert controller._reveal_timer.isActive()

    controller.restart()

    assert not controller._reveal_timer.isActive()
    controller._handle_reveal()
    assert not controller.snapshot().explanation_visible
    assert not controller.snapshot().locked


def test_stale_timer_callbacks_are_discarded(controller, recorder):
    controller.start()
    stale_key = controller._restart_key()
    tick(controller, 20)
    controller.advance()
    recorder.clear()

    controller._handle_elapsed(stale_key)
    controller._handle_tick(stale_key, 3)

    snapshot = controller.snapshot()
    assert not snapshot.locked
    assert not snapshot.explanation_visible
    assert recorder.cues == []
    assert recorder.snapshots == []


def test_end_session_cancels_countdown(controller, recorder):
    controller.start()
    tick(controller, 2)

    controller.end_session()
    recorder.clear()
    tick(controller, 5)

    assert not controller.is_started()
    assert controller.get_remaining_seconds() == 20
    assert recorder.cues == []


def test_seeded_shuffle_repeats_order(controller):
    controller.set_shuffle_seed(42)
    controller.start()
    first_order = [q.id for q in controller.get_session_order()]

    controller.set_shuffle_seed(42)
    controller.restart()

    assert [q.id for q in controller.get_session_order()] == first_order


def test_seed_fixes_order_of_every_start(controller):
    controller.set_shuffle_seed(42)
    controller.start()
    first_order = [q.id for q in controller.get_session_order()]

    for _ in range(5):
        controller.restart()
        assert [q.id for q in controller.get_session_order()] == first_order

    controller.end_session()
    controller.start()
    assert [q.id for q in controller.get_session_order()] == first_order
    assert controller.get_shuffle_seed() == 42


def test_clearing_seed_restores_random_order(controller):
    controller.set_shuffle_seed(42)
    controller.set_shuffle_seed(None)

    orders = set()
    for _ in range(30):
        controller.restart()
        orders.add(tuple(q.id for q in controller.get_session_order()))

    assert controller.get_shuffle_seed() is None
    assert len(orders) > 1


def test_playthrough_on_event_loop():
    settings = QuizSettings(budget_seconds=2, reveal_delay_ms=5, tick_interval_ms=5)
    controller = QuizSessionController(QuestionBank(build_questions(2)), settings)
    recorder = SessionRecorder(controller)
    loop = QEventLoop()

    def quit_when_revealed(snapshot) -> None:
        if snapshot.explanation_visible:
            loop.quit()

    controller.state_changed.connect(quit_when_revealed)
    QTimer.singleShot(2000, loop.quit)

    # First question times out on its own
    controller.start()
    loop.exec()
    assert controller.snapshot().explanation_visible
    assert controller.snapshot().selected_index is None
    assert recorder.cues == [Cue.TICK_WARNING, Cue.TICK_WARNING]

    # Second question is answered and revealed after the delay
    controller.advance()
    recorder.clear()
    question = controller.get_current_question()
    controller.select_choice(question.correct_index)
    QTimer.singleShot(2000, loop.quit)
    loop.exec()

    snapshot = controller.snapshot()
    assert snapshot.explanation_visible
    assert snapshot.score == 10
    assert snapshot.remaining_seconds == 2
    assert recorder.cues == [Cue.CLICK, Cue.CORRECT]
