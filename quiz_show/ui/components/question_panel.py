"""Component rendering the current question, countdown and explanation."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from quiz_show.constants.ui_constants import (
    FINISH_BUTTON,
    NEXT_QUESTION_BUTTON,
    RESTART_BUTTON,
    TIME_LEFT_LABEL,
    TIME_LEFT_TEMPLATE,
)
from quiz_show.core.markdown_renderer import renderer
from quiz_show.core.models import Question, SessionSnapshot
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.styling.color_palette import Theme
from quiz_show.styling.styles import ChoiceStyle, Styles


class QuestionPanel(QWidget):
    """Renders session snapshots; user input is forwarded to the controller."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller

        self._game_font_size: int = 14
        self._theme: Theme = Theme.LIGHT
        self._question: Question | None = None
        self._snapshot: SessionSnapshot | None = None
        self.choice_buttons: list[QPushButton] = []

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        card = QFrame(self)
        card.setObjectName("card")
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        # Timer row
        timer_row = QHBoxLayout()
        self.time_caption_label = QLabel(TIME_LEFT_LABEL, card)
        self.time_caption_label.setObjectName("secondary")
        timer_row.addWidget(self.time_caption_label)
        timer_row.addStretch()
        self.time_left_label = QLabel("", card)
        self.time_left_label.setObjectName("secondary")
        timer_row.addWidget(self.time_left_label)
        card_layout.addLayout(timer_row)

        self.time_progress = QProgressBar(card)
        self.time_progress.setRange(0, 1000)
        self.time_progress.setValue(0)
        self.time_progress.setTextVisible(False)
        card_layout.addWidget(self.time_progress)

        self.prompt_label = QLabel("", card)
        self.prompt_label.setTextFormat(Qt.RichText)
        self.prompt_label.setWordWrap(True)
        card_layout.addWidget(self.prompt_label)

        self.choices_layout = QVBoxLayout()
        card_layout.addLayout(self.choices_layout)

        # Explanation box with navigation
        self.explanation_frame = QFrame(card)
        self.explanation_frame.setObjectName("explanation")
        explanation_layout = QVBoxLayout()
        self.explanation_frame.setLayout(explanation_layout)

        self.explanation_label = QLabel("", self.explanation_frame)
        self.explanation_label.setTextFormat(Qt.RichText)
        self.explanation_label.setWordWrap(True)
        explanation_layout.addWidget(self.explanation_label)

        button_row = QHBoxLayout()
        self.advance_button = QPushButton(NEXT_QUESTION_BUTTON, self.explanation_frame)
        self.advance_button.clicked.connect(self.controller.advance)
        button_row.addWidget(self.advance_button)

        self.restart_button = QPushButton(RESTART_BUTTON, self.explanation_frame)
        self.restart_button.clicked.connect(self.controller.restart)
        button_row.addWidget(self.restart_button)
        button_row.addStretch()
        explanation_layout.addLayout(button_row)

        self.explanation_frame.setVisible(False)
        card_layout.addWidget(self.explanation_frame)

        layout.addWidget(card)
        layout.addStretch()

    def render_snapshot(self, snapshot: SessionSnapshot) -> None:
        self._snapshot = snapshot
        question = snapshot.question
        if question is None:
            self._question = None
            self._clear_choice_buttons()
            return

        if question is not self._question:
            self._question = question
            self._rebuild_choice_buttons(question)
            self._render_question_text(question)

        self.time_left_label.setText(TIME_LEFT_TEMPLATE.format(seconds=snapshot.remaining_seconds))
        self.time_progress.setValue(int(snapshot.progress_percent * 10))

        for idx, button in enumerate(self.choice_buttons):
            button.setEnabled(not snapshot.locked)
            button.setStyleSheet(
                Styles.get_choice_button_style(
                    self._choice_style(snapshot, question, idx),
                    self._game_font_size,
                    self._theme,
                )
            )

        self.explanation_frame.setVisible(snapshot.explanation_visible)
        self.advance_button.setText(FINISH_BUTTON if snapshot.is_last_question else NEXT_QUESTION_BUTTON)

    @staticmethod
    def _choice_style(snapshot: SessionSnapshot, question: Question, idx: int) -> ChoiceStyle:
        if not snapshot.locked:
            return ChoiceStyle.NEUTRAL
        if question.is_correct(idx):
            return ChoiceStyle.CORRECT
        if idx == snapshot.selected_index:
            return ChoiceStyle.WRONG
        return ChoiceStyle.NEUTRAL

    def _render_question_text(self, question: Question) -> None:
        self.prompt_label.setText(
            renderer.render_with_font_size(question.prompt, self._game_font_size + 2)
        )
        self.explanation_label.setText(
            renderer.render_with_font_size(question.explanation, self._game_font_size - 2)
        )

    def _rebuild_choice_buttons(self, question: Question) -> None:
        self._clear_choice_buttons()
        for idx, choice in enumerate(question.choices):
            button = QPushButton(choice, self)
            button.clicked.connect(lambda _checked=False, i=idx: self.controller.select_choice(i))
            self.choices_layout.addWidget(button)
            self.choice_buttons.append(button)

    def _clear_choice_buttons(self) -> None:
        while self.choices_layout.count():
            item = self.choices_layout.takeAt(0)
            widget = item.widget()
            if widget is not None:
                widget.deleteLater()
        self.choice_buttons = []

    def apply_styles(self, font_size: int, theme: Theme) -> None:
        self._game_font_size = font_size
        self._theme = theme

        label_style = f"font-size: {max(8, font_size - 4)}pt;"
        self.time_caption_label.setStyleSheet(label_style)
        self.time_left_label.setStyleSheet(label_style)
        button_style = f"QPushButton {{ font-size: {font_size}pt; }}"
        self.advance_button.setStyleSheet(Styles.get_primary_button_style(theme) + button_style)
        self.restart_button.setStyleSheet(Styles.get_secondary_button_style(theme) + button_style)

        # Re-render the active question with the new font size
        if self._question is not None:
            self._render_question_text(self._question)
        if self._snapshot is not None:
            self.render_snapshot(self._snapshot)
