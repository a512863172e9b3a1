"""The scenery behind everything else."""

from __future__ import annotations

from ..engine.gameobj import Component, GameObj
from ..settings import BACKGROUND_IMG, BACKGROUND_POS_Z, asset_path


class Background(GameObj):
    """A static, scaled background image."""

    def __init__(self, root=None):
        super().__init__()
        self.add_component(Component.SPRITE)
        self.sprite.create(asset_path(BACKGROUND_IMG, root))
        self.sprite.set_scale(1.8, 1.8)
        self.transform.set_position(0, -150, BACKGROUND_POS_Z)