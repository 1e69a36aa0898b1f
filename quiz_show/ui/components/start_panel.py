"""Component for the intro card shown before a session starts."""

from __future__ import annotations

from PySide6.QtWidgets import QFrame, QLabel, QPushButton, QVBoxLayout, QWidget

from quiz_show.constants.ui_constants import (
    START_BUTTON,
    START_DESCRIPTION_TEMPLATE,
    START_RULES,
)
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.styling.color_palette import Theme
from quiz_show.styling.styles import Styles


class StartPanel(QWidget):
    """UI component inviting the player to start a playthrough."""

    def __init__(self, controller: QuizSessionController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        card = QFrame(self)
        card.setObjectName("card")
        card_layout = QVBoxLayout()
        card.setLayout(card_layout)

        self.description_label = QLabel(
            START_DESCRIPTION_TEMPLATE.format(
                count=self.controller.bank.question_count(),
                seconds=self.controller.settings.budget_seconds,
            ),
            card,
        )
        self.description_label.setObjectName("secondary")
        self.description_label.setWordWrap(True)
        card_layout.addWidget(self.description_label)

        self.rules_label = QLabel("\n".join(f"• {rule}" for rule in START_RULES), card)
        self.rules_label.setWordWrap(True)
        card_layout.addWidget(self.rules_label)

        self.start_button = QPushButton(START_BUTTON, card)
        self.start_button.clicked.connect(self.controller.start)
        card_layout.addWidget(self.start_button)

        layout.addWidget(card)
        layout.addStretch()

    def apply_styles(self, font_size: int, theme: Theme) -> None:
        style = f"font-size: {font_size}pt;"
        self.description_label.setStyleSheet(style)
        self.rules_label.setStyleSheet(style)
        self.start_button.setStyleSheet(
            Styles.get_primary_button_style(theme) + f"QPushButton {{ {style} }}"
        )
