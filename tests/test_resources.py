"""Tests for files bundled with the package."""

import pytest

from periodic_quiz.constants.quiz_constants import SOUND_FILES
from periodic_quiz.core.resources import DATA_DIR, SOUNDS_DIR, local_dataset_path, sound_path


@pytest.mark.parametrize("file_name", [name for name in SOUND_FILES if name])
def test_configured_sound_is_bundled(file_name):
    path = sound_path(file_name)
    assert path.is_file()
    assert path.read_bytes()[:4] == b"RIFF"


def test_sounds_resolve_inside_package():
    assert SOUNDS_DIR.parent == DATA_DIR
    assert DATA_DIR.parent.name == "periodic_quiz"


def test_unset_sound_has_no_path():
    assert sound_path(None) is None
    assert sound_path("") is None


def test_local_dataset_lives_in_data_dir():
    assert local_dataset_path().parent == DATA_DIR
