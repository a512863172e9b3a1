"""The game-over board with the last and the best score."""

from __future__ import annotations

from ..engine.gameobj import Component, GameObj
from ..settings import (
    BOARD_BEST_HEIGHT,
    BOARD_HEIGHT,
    BOARD_IMG,
    BOARD_NUMBER_SIZE,
    BOARD_POS_Z,
    BOARD_SCORE_HEIGHT,
    HEIGHT,
    WIDTH,
    asset_path,
)
from .number import Number


class Board(GameObj):
    """Shows ``points`` and ``best``, shared lists of three digits each."""

    def __init__(self, points, best, root=None):
        super().__init__()
        self.points = points
        self.best = best
        self.score_digits = [Number(root) for _ in range(3)]
        self.best_digits = [Number(root) for _ in range(3)]

        self.add_component(Component.SPRITE)
        self.sprite.create(asset_path(BOARD_IMG, root))
        self.sprite.set_scale(3, 3)
        width, height = self.sprite.size()
        self.transform.set_position(
            WIDTH // 2 - width / 2,
            HEIGHT // 2 - height / 2 - BOARD_HEIGHT,
            BOARD_POS_Z,
        )

        for digit in self.score_digits + self.best_digits:
            digit.sprite.set_scale(BOARD_NUMBER_SIZE, BOARD_NUMBER_SIZE)

        self._place_row(self.score_digits, BOARD_SCORE_HEIGHT)
        self._place_row(self.best_digits, BOARD_BEST_HEIGHT)

    def _place_row(self, digits, offset):
        pos = self.transform.position
        board_width = self.sprite.size()[0]
        step = digits[0].sprite.size()[0]
        y = pos.y + offset
        z = pos.z + 1
        x = pos.x + board_width / 2 - step * 1.5
        for digit in digits:
            digit.transform.set_position(x, y, z)
            x += step

    def set(self):
        """Show the current points and best score."""
        for digit, value in zip(self.score_digits, self.points):
            digit.set(value)
        for digit, value in zip(self.best_digits, self.best):
            digit.set(value)

    def hide(self):
        self.transform.position.z = 0
        for digit in self.score_digits + self.best_digits:
            digit.transform.position.z = 0

    def show(self):
        """Bring the board to the front and refresh its digits."""
        self.transform.position.z = BOARD_POS_Z
        for digit in self.score_digits + self.best_digits:
            digit.transform.position.z = self.transform.position.z + 1
        self.set()