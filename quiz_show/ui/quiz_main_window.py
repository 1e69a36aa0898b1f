"""Qt main window hosting the start screen and the live question view."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from quiz_show.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from quiz_show.constants.ui_constants import (
    ABOUT_BUTTON,
    QUESTION_COUNTER_TEMPLATE,
    SCORE_TEMPLATE,
    SETTINGS_BUTTON,
    START_TITLE,
    WINDOW_TITLE,
)
from quiz_show.core.models import SessionSnapshot
from quiz_show.core.quiz_controller import QuizSessionController
from quiz_show.styling.color_palette import Theme
from quiz_show.styling.styles import Styles
from quiz_show.ui.components.question_panel import QuestionPanel
from quiz_show.ui.components.start_panel import StartPanel
from quiz_show.ui.dialog_helpers import show_info
from quiz_show.ui.settings_dialog import SettingsDialog
from quiz_show.ui.sound_cue_player import SoundCuePlayer


class ViewMode(Enum):
    """Which panel the window is showing."""

    START = auto()
    QUESTION = auto()


class QuizMainWindow(QMainWindow):
    """Main Qt window; a pure renderer of controller snapshots."""

    def __init__(
        self,
        controller: QuizSessionController,
        sound_player: SoundCuePlayer | None = None,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)
        self.resize(760, 620)

        self.controller = controller
        self.sound_player = sound_player or SoundCuePlayer(parent=self)

        self._mode = ViewMode.START
        self._game_font_size: int = 14
        self._theme: Theme = Theme.LIGHT

        self._build_ui()
        self.controller.state_changed.connect(self._render_snapshot)
        self.controller.cue_requested.connect(self.sound_player.emit_cue)
        self._apply_styles()
        self._render_snapshot(self.controller.snapshot())

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_header(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.start_panel = StartPanel(self.controller, self)
        self.question_panel = QuestionPanel(self.controller, self)
        self.mode_stack.addWidget(self.start_panel)
        self.mode_stack.addWidget(self.question_panel)
        root_layout.addWidget(self.mode_stack, stretch=1)

    def _build_header(self, layout: QVBoxLayout) -> None:
        header_row = QHBoxLayout()

        self.title_label = QLabel(START_TITLE, self)
        header_row.addWidget(self.title_label)
        header_row.addStretch()

        self.score_chip = QLabel("", self)
        self.score_chip.setObjectName("chip")
        header_row.addWidget(self.score_chip)

        self.counter_chip = QLabel("", self)
        self.counter_chip.setObjectName("chip")
        header_row.addWidget(self.counter_chip)

        self.help_button = QPushButton("Help", self)
        self.help_button.clicked.connect(self._handle_help)
        header_row.addWidget(self.help_button)

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        header_row.addWidget(self.about_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        header_row.addWidget(self.settings_button)

        layout.addLayout(header_row)

    def _render_snapshot(self, snapshot: SessionSnapshot) -> None:
        current = snapshot.current_index + 1 if snapshot.started else 0
        self.counter_chip.setText(QUESTION_COUNTER_TEMPLATE.format(current=current, total=snapshot.total))
        self.score_chip.setText(SCORE_TEMPLATE.format(score=snapshot.score))
        self.score_chip.setVisible(snapshot.started)

        self._set_mode(ViewMode.QUESTION if snapshot.started else ViewMode.START)
        self.question_panel.render_snapshot(snapshot)

    def _set_mode(self, mode: ViewMode) -> None:
        self._mode = mode
        index_map = {
            ViewMode.START: 0,
            ViewMode.QUESTION: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self._game_font_size,
            self.sound_player.is_enabled(),
            self._theme == Theme.DARK,
            self.controller.get_shuffle_seed(),
        )
        if dialog.exec():
            self._game_font_size = dialog.get_game_font_size()
            self._theme = Theme.DARK if dialog.get_dark_theme() else Theme.LIGHT

            self.sound_player.set_enabled(dialog.get_sound_enabled())
            self.controller.set_shuffle_seed(dialog.get_shuffle_seed())

            self._apply_styles()

    def _apply_styles(self) -> None:
        self.setStyleSheet(Styles.get_main_window_style(self._theme))
        self.title_label.setStyleSheet(Styles.get_large_label_style(self._game_font_size + 4))

        chip_style = f"font-size: {max(8, self._game_font_size - 4)}pt;"
        self.counter_chip.setStyleSheet(chip_style)
        self.score_chip.setStyleSheet(chip_style)

        self.start_panel.apply_styles(self._game_font_size, self._theme)
        self.question_panel.apply_styles(self._game_font_size, self._theme)
