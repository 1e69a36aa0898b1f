"""Application entry point for QuizShowQt."""

from __future__ import annotations

from logging import Logger
from pathlib import Path
import sys

from PySide6.QtWidgets import QApplication

from quiz_show.constants.quiz_constants import DEFAULT_QUIZ_FILES
from quiz_show.constants.ui_constants import QUIZ_LOAD_FAILED_TITLE, QUIZ_LOAD_FALLBACK_MESSAGE
from quiz_show.core.default_questions import DEFAULT_QUESTIONS
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.core.quiz_importer import QuizImportError, find_quiz_file, load_quiz_from_file
from quiz_show.core.services.question_bank import QuestionBank
from quiz_show.ui.dialog_helpers import show_error
from quiz_show.ui.quiz_main_window import QuizMainWindow
from quiz_show.utils.logging_config import configure_logging


def _load_question_bank(logger: Logger) -> tuple[QuestionBank, str | None]:
    """Load the quiz file from the working directory, falling back to the built-in quiz."""
    quiz_path = find_quiz_file(Path.cwd(), DEFAULT_QUIZ_FILES)
    if quiz_path is None:
        return QuestionBank(DEFAULT_QUESTIONS), None

    try:
        imported = load_quiz_from_file(quiz_path)
        bank = QuestionBank(imported.questions)
    except (OSError, QuizImportError, ValueError) as exc:
        logger.error("Could not load %s: %s", quiz_path, exc)
        return QuestionBank(DEFAULT_QUESTIONS), f"{quiz_path.name}: {exc}"

    logger.info("Loaded %d questions from %s", bank.question_count(), quiz_path)
    return bank, None


def main() -> None:
    """Initialize logging, load the question bank, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting QuizShowQt…")

    app = QApplication(sys.argv)
    bank, load_error = _load_question_bank(logger)
    controller = QuizSessionController(bank)

    window = QuizMainWindow(controller)
    window.show()
    if load_error is not None:
        show_error(window, QUIZ_LOAD_FAILED_TITLE, QUIZ_LOAD_FALLBACK_MESSAGE.format(error=load_error))
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
