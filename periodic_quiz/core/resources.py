"""Locations of files shipped inside the package."""

from __future__ import annotations

from pathlib import Path

from periodic_quiz.constants.dataset_constants import LOCAL_DATASET_FILE

DATA_DIR = Path(__file__).resolve().parent.parent / "data"
SOUNDS_DIR = DATA_DIR / "sounds"


def sound_path(file_name: str | None) -> Path | None:
    """Absolute path of a bundled sound, or None when no file is configured."""
    if not file_name:
        return None
    return SOUNDS_DIR / file_name


def local_dataset_path() -> Path:
    """Where a local copy of the dataset is looked for when the download fails."""
    return DATA_DIR / LOCAL_DATASET_FILE
