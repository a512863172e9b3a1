"""The button that starts a new round."""

from __future__ import annotations

from ..engine.button import Button
from ..engine.gameobj import Component
from ..settings import HEIGHT, RESBUT_HEIGHT, RESBUT_POS_Z, RESTART_IMG, WIDTH, asset_path


class RestartButton(Button):
    """A centred restart button that can be hidden behind the scene."""

    def __init__(self, root=None):
        super().__init__()
        self.add_component(Component.SPRITE)
        self.sprite.create(asset_path(RESTART_IMG, root))
        self.sprite.set_scale(2, 2)
        width, height = self.sprite.size()
        self.transform.set_position(
            WIDTH // 2 - width / 2,
            HEIGHT // 2 - height / 2 + RESBUT_HEIGHT,
            RESBUT_POS_Z,
        )
        self.set_size(width, height)

    def hide(self):
        self.transform.position.z = 0

    def show(self):
        self.transform.position.z = RESBUT_POS_Z