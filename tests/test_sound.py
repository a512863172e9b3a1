import os
import wave

os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from flapbird.engine.sound import Sound
from flapbird.engine.sprite import AssetError


@pytest.fixture(autouse=True)
def _quit_mixer():
    yield
    pygame.mixer.quit()


def _write_silence(path):
    with wave.open(str(path), "wb") as out:
        out.setnchannels(1)
        out.setsampwidth(2)
        out.setframerate(22050)
        out.writeframes(b"\x00\x00" * 2205)


def test_default_volume_is_full():
    assert Sound().volume == 100.0


def test_set_volume_is_kept():
    sound = Sound()
    sound.set_volume(40)
    assert sound.volume == 40.0


def test_missing_file_raises(tmp_path):
    missing = tmp_path / "missing.wav"
    with pytest.raises(AssetError, match="cannot open a file"):
        Sound().play_sound(missing)


def test_plays_existing_file(tmp_path):
    path = tmp_path / "beep.wav"
    _write_silence(path)
    sound = Sound()
    sound.play_sound(path)
    assert sound.current == path