"""The row of pipes the bird flies through."""

from __future__ import annotations

from ..engine.gameobj import GameObj
from ..settings import PIPE_CONSISTENCY, PIPE_COUNT, PIPE_DESPAWNPOINT, GameState
from .pipe import Pipe


class PipeManager(GameObj):
    """Scrolls and recycles the pipes, and reports hits and passed pipes.

    ``get_state`` returns the current game state; ``bird_pos`` is the bird's
    live position.
    """

    def __init__(self, get_state, bird_pos, root=None):
        super().__init__()
        self._get_state = get_state
        self.bird_pos = bird_pos
        self.pipes = [Pipe(root) for _ in range(PIPE_COUNT)]
        self._triggered = False
        self._point = False
        self._line_up()

    def _line_up(self):
        for index, pipe in enumerate(self.pipes):
            pipe.start_position()
            pipe.pipe1.transform.position.x += index * PIPE_CONSISTENCY
            pipe.pipe2.transform.position.x += index * PIPE_CONSISTENCY

    def reset(self):
        """Line the pipes up again at random heights and clear all flags."""
        self._line_up()
        for pipe in self.pipes:
            pipe.point = True
        self._triggered = False
        self._point = False

    def update(self):
        """While playing, check hits and points, recycle passed pipes and scroll."""
        if self._get_state() is not GameState.PLAYING:
            return
        self._triggered = False
        self._point = False
        for pipe in self.pipes:
            if pipe.is_triggered():
                self._triggered = True
            if pipe.point and self.bird_pos.x >= pipe.pipe2.transform.position.x:
                pipe.point = False
                self._point = True
            if pipe.pipe2.transform.position.x <= PIPE_DESPAWNPOINT:
                pipe.point = True
                pipe.start_position()
            pipe.move()

    def pipe_is_triggered(self):
        """True when a pipe was hit in the last update."""
        return self._triggered

    def point_check(self):
        """True when the bird passed a pipe in the last update."""
        return self._point