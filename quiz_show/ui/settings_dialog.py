"""Settings dialog for configuring QuizShowQt preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

NO_SEED_VALUE = -1
MAX_SHUFFLE_SEED = 2_147_483_647


class SettingsDialog(QDialog):
    """Dialog for configuring application settings."""

    def __init__(
        self,
        parent=None,
        game_font_size: int = 14,
        sound_enabled: bool = True,
        dark_theme: bool = False,
        shuffle_seed: int | None = None,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(400)

        self._game_font_size = game_font_size
        self._sound_enabled = sound_enabled
        self._dark_theme = dark_theme
        self._shuffle_seed = shuffle_seed

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Display settings group
        display_group = QGroupBox("Display")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        font_row = QHBoxLayout()
        font_label = QLabel("Game Font Size (questions, choices):")
        self.game_font_spinbox = QSpinBox()
        self.game_font_spinbox.setRange(10, 32)
        self.game_font_spinbox.setValue(self._game_font_size)
        self.game_font_spinbox.setSuffix(" pt")
        font_row.addWidget(font_label)
        font_row.addStretch()
        font_row.addWidget(self.game_font_spinbox)
        display_layout.addLayout(font_row)

        self.dark_theme_checkbox = QCheckBox("Use dark theme")
        self.dark_theme_checkbox.setChecked(self._dark_theme)
        display_layout.addWidget(self.dark_theme_checkbox)

        layout.addWidget(display_group)

        # Gameplay settings group
        gameplay_group = QGroupBox("Gameplay")
        gameplay_layout = QVBoxLayout()
        gameplay_group.setLayout(gameplay_layout)

        self.sound_checkbox = QCheckBox("Play sound cues")
        self.sound_checkbox.setChecked(self._sound_enabled)
        gameplay_layout.addWidget(self.sound_checkbox)

        seed_row = QHBoxLayout()
        seed_label = QLabel("Shuffle seed:")
        seed_label.setToolTip("A fixed seed replays the same question order on every start.")
        self.seed_spinbox = QSpinBox()
        # The minimum doubles as the "no seed" entry.
        self.seed_spinbox.setRange(NO_SEED_VALUE, MAX_SHUFFLE_SEED)
        self.seed_spinbox.setSpecialValueText("random")
        self.seed_spinbox.setValue(NO_SEED_VALUE if self._shuffle_seed is None else self._shuffle_seed)
        seed_row.addWidget(seed_label)
        seed_row.addStretch()
        seed_row.addWidget(self.seed_spinbox)
        gameplay_layout.addLayout(seed_row)

        layout.addWidget(gameplay_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def get_game_font_size(self) -> int:
        """Get the selected game font size."""
        return self.game_font_spinbox.value()

    def get_sound_enabled(self) -> bool:
        return self.sound_checkbox.isChecked()

    def get_dark_theme(self) -> bool:
        return self.dark_theme_checkbox.isChecked()

    def get_shuffle_seed(self) -> int | None:
        """Get the shuffle seed, or None when set to random."""
        value = self.seed_spinbox.value()
        return None if value == NO_SEED_VALUE else value
