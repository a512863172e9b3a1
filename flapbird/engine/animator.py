"""Frame-by-frame sprite animation."""

from __future__ import annotations

from .sprite import load_image

FRAME_COUNT = 4


class Animator:
    """Cycles a sprite through a fixed set of frames while playing."""

    frame_rate = 0

    def __init__(self, sprite):
        self.sprite = sprite
        self.textures = []
        self.playing = True
        self.current_frame = 0
        self.animation_frame_rate = 0
        self.loop = 0

    @classmethod
    def set_frame_rate(cls, frame_rate):
        """Set the window frame rate used to pace all animations."""
        cls.frame_rate = frame_rate

    def animation(self, file_paths, frames_per_second):
        """Load the animation frames and set their speed."""
        paths = list(file_paths)
        if len(paths) != FRAME_COUNT:
            raise ValueError(f"an animation needs exactly {FRAME_COUNT} frames, got {len(paths)}")
        self.animation_frame_rate = frames_per_second
        self.textures = [load_image(path) for path in paths]

    def play(self):
        self.playing = True

    def stop(self):
        """Stop and show the sprite's own texture."""
        self.playing = False
        self.sprite.default_texture()

    def update(self):
        """Advance one window frame, switching image when one is due."""
        if not self.animation_frame_rate or not self.playing:
            return
        self.loop += 1
        if self.loop >= type(self).frame_rate // self.animation_frame_rate:
            self.current_frame += 1
            self.sprite.set_texture(self.textures[self.current_frame % FRAME_COUNT])
            self.loop = 0