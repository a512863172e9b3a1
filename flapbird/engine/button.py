"""Clickable rectangular game objects."""

from __future__ import annotations

from .gameobj import GameObj


class Button(GameObj):
    """A game object that is pressed while clicked inside its area."""

    def __init__(self):
        super().__init__()
        self.width = 0.0
        self.height = 0.0
        self._pressed = False

    def set_size(self, x, y):
        """Set width ``x`` and height ``y`` of the clickable area."""
        self.width = x
        self.height = y

    def is_pressed(self):
        return self._pressed

    def update(self):
        """Check whether the mouse is clicking inside the area."""
        self._pressed = False
        engine = GameObj.engine
        if engine is None:
            return
        mx, my = engine.input.mouse_position()
        pos = self.transform.position
        inside = pos.x <= mx <= pos.x + self.width and pos.y <= my <= pos.y + self.height
        if inside and engine.input.mouse_click():
            self._pressed = True