"""Playing sound effects."""

from __future__ import annotations

import os

import pygame

from .sprite import AssetError


class Sound:
    """Plays one sound file at a time at a set volume from 0 to 100."""

    def __init__(self):
        self.volume = 100.0
        self.current = None

    def play_sound(self, file_path):
        """Play the sound in ``file_path``, replacing any that is playing."""
        try:
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.music.load(os.fspath(file_path))
        except (pygame.error, OSError) as exc:
            raise AssetError(f"cannot open a file {file_path}") from exc
        pygame.mixer.music.set_volume(self.volume / 100)
        pygame.mixer.music.play()
        self.current = file_path

    def set_volume(self, volume):
        """Set the volume, 0 for mute up to 100 for full."""
        self.volume = float(volume)
        if pygame.mixer.get_init():
            pygame.mixer.music.set_volume(self.volume / 100)