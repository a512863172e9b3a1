"""Axis-aligned trigger areas."""

from __future__ import annotations


class Collider:
    """A rectangular trigger attached to a transform; it has no physics."""

    def __init__(self, transform):
        self.transform = transform
        self.width = 0.0
        self.height = 0.0
        self.is_triggered = False

    def set_size(self, x, y=None):
        """Set width ``x`` and height ``y``; a square when ``y`` is omitted."""
        self.width = x
        self.height = x if y is None else y

    def _contains(self, px, py):
        pos = self.transform.position
        return pos.x <= px <= pos.x + self.width and pos.y <= py <= pos.y + self.height

    def update(self, other):
        """Check ``other``'s corners against this area; a hit triggers both."""
        self.is_triggered = False
        opos = other.transform.position
        corners = (
            (opos.x, opos.y),
            (opos.x, opos.y + other.height),
            (opos.x + other.width, opos.y),
            (opos.x + other.width, opos.y + other.height),
        )
        if any(self._contains(px, py) for px, py in corners):
            self.is_triggered = True
            other.is_triggered = True