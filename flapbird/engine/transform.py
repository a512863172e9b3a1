"""Position and transform of game objects."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Position:
    """A point in the scene; ``z`` orders drawing."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass
class Transform:
    """Position and rotation shared by an object's components."""

    position: Position = field(default_factory=Position)
    rotation: float = 0.0

    def set_position(self, x, y, z=None):
        """Move to ``(x, y)``, and to depth ``z`` when given."""
        self.position.x = x
        self.position.y = y
        if z is not None:
            self.position.z = z