"""The three-digit score shown while playing."""

from __future__ import annotations

from ..engine.gameobj import GameObj
from ..settings import SCORE_POS_Z, WIDTH
from .number import Number

_SCORE_TOP = 20


class Score(GameObj):
    """Shows the digits of ``points``, a shared list of three digits."""

    def __init__(self, points, root=None):
        super().__init__()
        self.points = points
        self.digits = [Number(root) for _ in range(3)]
        for digit in self.digits:
            digit.set(0)
        first, second, third = self.digits
        first.transform.set_position(
            WIDTH // 2 - first.sprite.size()[0] * 1.5, _SCORE_TOP, SCORE_POS_Z
        )
        second.transform.set_position(
            first.transform.position.x + second.sprite.size()[0], _SCORE_TOP, SCORE_POS_Z
        )
        third.transform.set_position(
            second.transform.position.x + third.sprite.size()[0], _SCORE_TOP, SCORE_POS_Z
        )

    def set(self):
        """Show the current points."""
        for digit, value in zip(self.digits, self.points):
            digit.set(value)

    def hide(self):
        for digit in self.digits:
            digit.transform.position.z = 0

    def show(self):
        for digit in self.digits:
            digit.transform.position.z = SCORE_POS_Z

    def update(self):
        self.set()