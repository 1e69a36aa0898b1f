"""Plays feedback sounds for quiz cues."""

from __future__ import annotations

import logging
from pathlib import Path

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from quiz_show.constants.quiz_constants import CUE_SOUND_PATHS, CUE_SOUND_VOLUME
from quiz_show.core.models import Cue

logger = logging.getLogger(__name__)


class SoundCuePlayer(QObject):
    """Fire-and-forget sound player; cues without a sound file are skipped."""

    def __init__(
        self,
        sound_paths: dict[str, str | None] | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._enabled: bool = True
        self._effects: dict[Cue, QSoundEffect] = {}
        if sound_paths is None:
            sound_paths = CUE_SOUND_PATHS
        for cue in Cue:
            path_setting = sound_paths.get(cue.value)
            effect = self._load_effect(path_setting)
            if effect is not None:
                self._effects[cue] = effect

    def _load_effect(self, path_setting: str | None) -> QSoundEffect | None:
        if not path_setting:
            return None
        sound_path = Path(path_setting)
        if not sound_path.is_absolute():
            # parents: ui -> quiz_show -> project root
            project_root = Path(__file__).resolve().parents[2]
            sound_path = project_root / sound_path
        if not sound_path.exists():
            logger.debug("Sound file %s not found; cue muted", sound_path)
            return None
        effect = QSoundEffect(self)
        effect.setSource(QUrl.fromLocalFile(str(sound_path)))
        effect.setVolume(CUE_SOUND_VOLUME)
        return effect

    def set_enabled(self, enabled: bool) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled

    def emit_cue(self, cue: Cue) -> None:
        if not self._enabled:
            return
        effect = self._effects.get(cue)
        if effect is None:
            return
        if effect.isPlaying():
            effect.stop()
        effect.play()
