"""A pair of pipes with a gap between them."""

from __future__ import annotations

import random

from ..engine.gameobj import Component, GameObj
from ..settings import (
    BIRD_SPEED,
    HEIGHT,
    PIPE_CLOSENESS,
    PIPE_DOWN_IMG,
    PIPE_POS_Z,
    PIPE_RANDOM,
    PIPE_SIZE,
    PIPE_SPAWNPOINT,
    PIPE_UP_IMG,
    asset_path,
)


def random_offset(low, high):
    """A random whole number in ``[low, high)``, or 1 when the range is empty."""
    if low < high:
        return random.randrange(low, high)
    return 1


def _make_pipe(image):
    pipe = GameObj()
    pipe.add_component(Component.SPRITE)
    pipe.add_component(Component.COLLIDER)
    pipe.sprite.create(image)
    pipe.sprite.set_scale(PIPE_SIZE, PIPE_SIZE)
    pipe.collider.set_size(*pipe.sprite.size())
    return pipe


class Pipe:
    """An upper and a lower pipe that scroll together."""

    def __init__(self, root=None):
        self.point = True
        self.pipe1 = _make_pipe(asset_path(PIPE_DOWN_IMG, root))
        self.pipe1.transform.set_position(
            PIPE_SPAWNPOINT,
            HEIGHT // 2 - PIPE_CLOSENESS // 2 - self.pipe1.sprite.size()[1],
            PIPE_POS_Z,
        )
        self.pipe2 = _make_pipe(asset_path(PIPE_UP_IMG, root))
        self.pipe2.transform.set_position(
            PIPE_SPAWNPOINT, HEIGHT // 2 + PIPE_CLOSENESS // 2, PIPE_POS_Z
        )

    def is_triggered(self):
        """True when either pipe's collider was hit."""
        return self.pipe1.collider.is_triggered or self.pipe2.collider.is_triggered

    def move(self):
        self.pipe1.transform.position.x -= BIRD_SPEED
        self.pipe2.transform.position.x -= BIRD_SPEED

    def start_position(self):
        """Return to the spawn point with the gap at a random height."""
        offset = random_offset(-PIPE_RANDOM, PIPE_RANDOM)
        self.pipe1.transform.set_position(
            PIPE_SPAWNPOINT,
            HEIGHT // 2 - PIPE_CLOSENESS // 2 - self.pipe1.sprite.size()[1] - offset,
        )
        self.pipe2.transform.set_position(
            PIPE_SPAWNPOINT, HEIGHT // 2 + PIPE_CLOSENESS // 2 - offset
        )