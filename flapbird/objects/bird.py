"""The player's bird."""

from __future__ import annotations

from ..engine.gameobj import Component, GameObj
from ..settings import (
    BASE_COLLIDER_HEIGHT,
    BIRD_ACCELERATION_CHANGE,
    BIRD_ANIM_FRAME_RATE,
    BIRD_COLLIDER_HEIGHT,
    BIRD_COLLIDER_WIDTH,
    BIRD_DOWN_IMG,
    BIRD_MID_IMG,
    BIRD_PLAYING_ACCELERATION,
    BIRD_PLAYING_JUMP_SPEED,
    BIRD_PLAYING_ROTATION_SPEED,
    BIRD_POS_Z,
    BIRD_START_ACCELERATION,
    BIRD_START_JUMP_SPEED,
    BIRD_UP_IMG,
    HEIGHT,
    HEIGHT_LIMIT,
    WIDTH,
    GameState,
    asset_path,
)

_BIRD_SCALE = 1.5
_CLIMB_ROTATION = -15
_MAX_ROTATION = 90


class Bird(GameObj):
    """A flapping bird that bobs before the start and falls under gravity while playing.

    ``get_state`` returns the current game state.
    """

    def __init__(self, get_state, root=None):
        super().__init__()
        self._get_state = get_state
        self.acceleration = 0.0
        self.direction = True

        self.add_component(Component.SPRITE)
        self.add_component(Component.ANIMATOR)
        self.sprite.create(asset_path(BIRD_MID_IMG, root))
        frames = (BIRD_UP_IMG, BIRD_MID_IMG, BIRD_DOWN_IMG, BIRD_MID_IMG)
        self.animator.animation(
            [asset_path(frame, root) for frame in frames], BIRD_ANIM_FRAME_RATE
        )

        width, height = self.sprite.size()
        self.sprite.set_origin(width / 2, height / 2)
        self._place_at_start()
        self.sprite.set_scale(_BIRD_SCALE, _BIRD_SCALE)

        self.collider_obj = GameObj()
        self.collider_obj.add_component(Component.COLLIDER)
        width, height = self.sprite.size()
        self.collider_obj.collider.set_size(
            width * BIRD_COLLIDER_WIDTH, height * BIRD_COLLIDER_HEIGHT
        )
        self._sync_collider()

    def _place_at_start(self):
        width, height = self.sprite.size()
        self.transform.set_position(WIDTH // 2 - width, HEIGHT // 2 - height / 2, BIRD_POS_Z)

    def _sync_collider(self):
        width, height = self.sprite.size()
        pos = self.transform.position
        self.collider_obj.transform.set_position(pos.x - width / 2, pos.y - height / 2, pos.z)

    def reset(self):
        """Put the bird back at its starting place, level and at rest."""
        self._place_at_start()
        self.transform.rotation = 0
        self.acceleration = 0.0
        self.direction = True

    def jump(self):
        self.acceleration = BIRD_PLAYING_ACCELERATION

    def _move(self):
        if self._get_state() is GameState.START:
            limit, speed = BIRD_START_ACCELERATION, BIRD_START_JUMP_SPEED
        else:
            limit, speed = BIRD_PLAYING_ACCELERATION, BIRD_PLAYING_JUMP_SPEED
        self.acceleration = max(-limit, min(limit, self.acceleration))
        self.transform.position.y -= 2 * self.acceleration * speed

    def _rotate_down(self):
        if self.transform.rotation < _MAX_ROTATION:
            self.transform.rotation += BIRD_PLAYING_ROTATION_SPEED

    def update(self):
        """Advance one frame according to the game state."""
        self._sync_collider()
        state = self._get_state()
        pos = self.transform.position

        if state is GameState.START:
            self.animator.stop()
            if self.acceleration >= BIRD_START_ACCELERATION:
                self.direction = True
            if self.acceleration <= -BIRD_START_ACCELERATION:
                self.direction = False
            if self.direction:
                self.acceleration -= BIRD_ACCELERATION_CHANGE
            else:
                self.acceleration += BIRD_ACCELERATION_CHANGE
            self._move()
        elif state is GameState.PLAYING:
            self.acceleration -= BIRD_ACCELERATION_CHANGE
            if self.acceleration > -BIRD_PLAYING_ACCELERATION:
                self.animator.play()
                self.transform.rotation = _CLIMB_ROTATION
            else:
                self.animator.stop()
                self._rotate_down()
            self._move()
        else:
            self.animator.stop()
            self.acceleration -= BIRD_ACCELERATION_CHANGE
            ground = HEIGHT - BASE_COLLIDER_HEIGHT
            if pos.y < ground:
                self._rotate_down()
                self._move()
            else:
                pos.y = ground

        if pos.y < HEIGHT_LIMIT:
            pos.y = HEIGHT_LIMIT