"""Utilities for loading the question bank from a quiz file.

Two formats are accepted, chosen by file suffix.

Text (``.txt``), blocks separated by blank lines or '---':

    ID: 5            (optional, defaults to the block position starting at 1)
    Q: Question text (supports markdown). Additional lines until the next
       marker are treated as part of the question.
    A: First choice
    B: Second choice
    C: ...           (at least two choices, lettered consecutively)
    CORRECT: A|B|...
    EXPLANATION: Text shown once the question is locked. Additional lines
       are appended.

JSON (``.json``):

    {"questions": [{"id": 1, "prompt": "...", "choices": ["...", "..."],
                    "correct_index": 0, "explanation": "..."}]}

Architecture note:
    Loaders only turn files into ``Question`` records. Bank-level rules
    (non-empty, unique ids) are enforced by ``QuestionBank`` so that the
    built-in quiz and imported quizzes go through the same checks.
"""

from __future__ import annotations

import json
import string
from dataclasses import dataclass
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from quiz_show.core.models import Question


class QuizImportError(Exception):
    """Raised when a quiz definition cannot be parsed."""


@dataclass(slots=True)
class ImportedQuiz:
    """Container for imported quiz metadata and questions."""

    source_path: Path
    questions: list[Question]


_CHOICE_LETTERS = string.ascii_uppercase


def load_quiz_from_file(file_path: Path) -> ImportedQuiz:
    text = file_path.read_text(encoding="utf-8")
    if file_path.suffix.lower() == ".json":
        questions = _parse_quiz_json(text)
    else:
        questions = _parse_quiz_text(text)
    if not questions:
        raise QuizImportError("Quiz file did not contain any questions.")
    return ImportedQuiz(source_path=file_path, questions=questions)


# --- JSON format ---


class QuestionRecord(BaseModel):
    id: int
    prompt: str = Field(min_length=1)
    choices: list[str] = Field(min_length=2)
    correct_index: int
    explanation: str = ""

    @model_validator(mode="after")
    def _check_correct_index(self) -> "QuestionRecord":
        if not 0 <= self.correct_index < len(self.choices):
            raise ValueError("correct_index must point at one of the choices")
        return self


class QuizDocument(BaseModel):
    questions: list[QuestionRecord]


def _parse_quiz_json(text: str) -> list[Question]:
    try:
        document = QuizDocument.model_validate(json.loads(text))
    except json.JSONDecodeError as exc:
        raise QuizImportError(f"Quiz file is not valid JSON: {exc}") from exc
    except ValidationError as exc:
        raise QuizImportError(f"Quiz file does not match the expected schema:\n{exc}") from exc

    return [
        Question(
            id=record.id,
            prompt=record.prompt.strip(),
            choices=tuple(choice.strip() for choice in record.choices),
            correct_index=record.correct_index,
            explanation=record.explanation.strip(),
        )
        for record in document.questions
    ]


# --- Text format ---


def _parse_quiz_text(text: str) -> list[Question]:
    blocks: list[str] = []
    current_block: list[str] = []
    for raw_line in text.splitlines():
        stripped = raw_line.strip()
        if stripped == "---":
            if current_block:
                blocks.append("\n".join(current_block).strip())
                current_block = []
            continue
        if stripped:
            current_block.append(raw_line)
        elif current_block:
            blocks.append("\n".join(current_block).strip())
            current_block = []
    if current_block:
        blocks.append("\n".join(current_block).strip())

    return [
        _parse_block(block, position)
        for position, block in enumerate((b for b in blocks if b), start=1)
    ]


def _parse_block(block: str, position: int) -> Question:
    question_id = position
    question_lines: list[str] = []
    choices: dict[str, str] = {}
    explanation_lines: list[str] = []
    correct_letter: str | None = None
    current_section: str | None = None

    for raw_line in block.splitlines():
        line = raw_line.strip()
        if not line:
            continue

        upper = line.upper()
        if upper.startswith("ID:"):
            raw_value = line.split(":", 1)[1].strip()
            try:
                question_id = int(raw_value)
            except ValueError as exc:
                raise QuizImportError(f"ID must be an integer, got '{raw_value}'.") from exc
            current_section = None
            continue

        if upper.startswith("Q:"):
            question_lines = [line[2:].strip()]
            current_section = "Q"
            continue

        if upper.startswith("CORRECT:"):
            correct_letter = line.split(":", 1)[1].strip().upper()
            current_section = None
            continue

        if upper.startswith("EXPLANATION:"):
            explanation_lines = [line.split(":", 1)[1].strip()]
            current_section = "EXPLANATION"
            continue

        if len(line) > 2 and line[0].upper() in _CHOICE_LETTERS and line[1] == ":":
            letter = line[0].upper()
            choices[letter] = line[2:].strip()
            current_section = letter
            continue

        if current_section == "Q":
            question_lines.append(line)
        elif current_section == "EXPLANATION":
            explanation_lines.append(line)
        elif current_section is not None:
            choices[current_section] = choices[current_section] + f"\n{line}"
        else:
            raise QuizImportError(
                f"Encountered text outside of a known section: '{line}'."
            )

    question_text = "\n".join(question_lines).strip()
    if not question_text:
        raise QuizImportError(f"Question {question_id}: question text missing (Q: ...)")

    expected_letters = list(_CHOICE_LETTERS[: len(choices)])
    if sorted(choices) != expected_letters:
        raise QuizImportError(
            f"Question {question_id}: choices must be lettered consecutively from A."
        )
    if len(choices) < 2:
        raise QuizImportError(f"Question {question_id}: at least two choices are required.")

    choice_list = [choices[letter].strip() for letter in expected_letters]
    if any(not choice for choice in choice_list):
        raise QuizImportError(f"Question {question_id}: choice text cannot be empty.")

    if correct_letter is None:
        raise QuizImportError(f"Question {question_id}: CORRECT is required.")
    if correct_letter not in expected_letters:
        raise QuizImportError(
            f"Question {question_id}: CORRECT must be one of {', '.join(expected_letters)}."
        )

    return Question(
        id=question_id,
        prompt=question_text,
        choices=tuple(choice_list),
        correct_index=expected_letters.index(correct_letter),
        explanation="\n".join(explanation_lines).strip(),
    )


def find_quiz_file(directory: Path, candidates: tuple[str, ...]) -> Path | None:
    """Return the first existing quiz file among ``candidates`` in ``directory``."""
    for name in candidates:
        path = directory / name
        if path.is_file():
            return path
    return None
