"""Short audio cues for clicks and quiz feedback."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QUrl
from PySide6.QtMultimedia import QSoundEffect

from periodic_quiz.core.resources import sound_path

logger = logging.getLogger(__name__)


def load_sound_effect(file_name: str | None, parent: QObject | None = None) -> QSoundEffect | None:
    """Return a ready sound effect, or None when the file is not configured or missing."""
    path = sound_path(file_name)
    if path is None:
        return None
    if not path.exists():
        logger.warning("Sound file %s not found; cue disabled", path)
        return None

    effect = QSoundEffect(parent)
    effect.setSource(QUrl.fromLocalFile(str(path)))
    effect.setVolume(0.6)
    return effect


def play(effect: QSoundEffect | None) -> None:
    if effect is not None:
        effect.play()
