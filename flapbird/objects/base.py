"""The scrolling ground that ends the round when the bird touches it."""

from __future__ import annotations

from ..engine.gameobj import Component, GameObj
from ..settings import (
    BASE_COLLIDER_HEIGHT,
    BASE_IMG,
    BASE_POS_Z,
    BIRD_SPEED,
    HEIGHT,
    GameState,
    asset_path,
)

_BASE_TOP_OFFSET = 70
_BASE_SCALE = 1.7


class Base(GameObj):
    """Two ground tiles scrolling left in turn.

    ``get_state`` returns the current game state; ``bird_pos`` is the bird's
    live position.
    """

    def __init__(self, get_state, bird_pos, root=None):
        super().__init__()
        self._get_state = get_state
        self.bird_pos = bird_pos

        self.base1 = GameObj()
        self.base1.add_component(Component.SPRITE)
        self.base1.sprite.create(asset_path(BASE_IMG, root))

        self.base2 = GameObj()
        self.base2.add_component(Component.SPRITE)
        self.base2.sprite.create(asset_path(BASE_IMG, root))

        self.base1.transform.set_position(0, HEIGHT - _BASE_TOP_OFFSET, BASE_POS_Z)
        self.base1.sprite.set_scale(_BASE_SCALE, _BASE_SCALE)

        self.base2.transform.set_position(
            self.base1.sprite.size()[0], HEIGHT - _BASE_TOP_OFFSET, BASE_POS_Z
        )
        self.base2.sprite.set_scale(_BASE_SCALE, _BASE_SCALE)

    def update(self):
        """Scroll the tiles while the game is not over, wrapping each behind the other."""
        if self._get_state() not in (GameState.START, GameState.PLAYING):
            return
        first = self.base1.transform.position
        second = self.base2.transform.position
        first.x -= BIRD_SPEED
        second.x -= BIRD_SPEED

        first_width = self.base1.sprite.size()[0]
        second_width = self.base2.sprite.size()[0]
        if first.x < -first_width:
            first.x = second.x + second_width
        if second.x < -second_width:
            second.x = first.x + first_width

    def is_triggered(self):
        """True when the bird has reached the ground."""
        return self.bird_pos.y >= HEIGHT - BASE_COLLIDER_HEIGHT