"""A single digit drawn from a sprite image."""

from __future__ import annotations

from ..engine.gameobj import Component, GameObj
from ..settings import DIGIT_IMAGES, asset_path


class Number(GameObj):
    """Shows one decimal digit; starts at zero."""

    def __init__(self, root=None):
        super().__init__()
        self.root = root
        self.value = 0
        self.add_component(Component.SPRITE)
        self.sprite.create(asset_path(DIGIT_IMAGES[0], root))

    def set(self, number):
        """Show digit ``number``; values outside 0-9 are ignored."""
        if 0 <= number <= 9:
            self.sprite.create(asset_path(DIGIT_IMAGES[number], self.root))
            self.value = number