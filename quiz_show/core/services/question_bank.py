"""Service holding the immutable question set and drawing session orders."""

from __future__ import annotations

import random
from collections.abc import Iterable

from quiz_show.core.models import Question


class QuestionBankError(ValueError):
    """Raised when the question configuration cannot form a valid quiz."""


class QuestionBank:
    """Immutable, ordered collection of questions."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self._questions: tuple[Question, ...] = tuple(questions)
        self._validate(self._questions)
        self._shuffle_rng = random.Random()

    def all_questions(self) -> tuple[Question, ...]:
        return self._questions

    def question_count(self) -> int:
        return len(self._questions)

    def new_session_order(self, rng: random.Random | None = None) -> tuple[Question, ...]:
        """Return a fresh uniformly random permutation of all questions.

        ``rng`` overrides the bank's own random source for this call only.
        """
        order = list(self._questions)
        (rng or self._shuffle_rng).shuffle(order)
        return tuple(order)

    def set_shuffle_seed(self, seed: int | None) -> None:
        """Seed the bank's random source; ``None`` reseeds from system entropy."""
        self._shuffle_rng.seed(seed)

    @staticmethod
    def _validate(questions: tuple[Question, ...]) -> None:
        if not questions:
            raise QuestionBankError("Quiz must contain at least one question.")
        seen: set[int] = set()
        for question in questions:
            if question.id in seen:
                raise QuestionBankError(f"Duplicate question id {question.id}.")
            seen.add(question.id)
