"""Game objects with components and the manager that updates them."""

from __future__ import annotations

import enum

from .animator import Animator
from .collider import Collider
from .sprite import Sprite
from .transform import Transform


class Component(enum.Enum):
    """Components a game object can carry."""

    SPRITE = enum.auto()
    COLLIDER = enum.auto()
    ANIMATOR = enum.auto()


class GameObj:
    """An object in the scene; it registers with the engine's manager on creation."""

    engine = None

    def __init__(self):
        self.transform = Transform()
        self.sprite = None
        self.collider = None
        self.animator = None
        engine = type(self).engine
        if engine is not None:
            engine.game_obj_manager.add(self)

    @classmethod
    def set_engine(cls, engine):
        """Set the engine that new objects register with."""
        GameObj.engine = engine

    def add_component(self, component):
        """Attach ``component`` unless it is already present."""
        if component is Component.SPRITE:
            if self.sprite is None:
                self.sprite = Sprite(self.transform)
        elif component is Component.COLLIDER:
            if self.collider is None:
                self.collider = Collider(self.transform)
        elif component is Component.ANIMATOR:
            if self.animator is None:
                self.animator = Animator(self.sprite)

    def delete_component(self, component):
        """Detach ``component`` if present."""
        if component is Component.SPRITE:
            self.sprite = None
        elif component is Component.COLLIDER:
            self.collider = None
        elif component is Component.ANIMATOR:
            self.animator = None

    def update(self):
        """Per-frame behaviour; does nothing unless overridden."""

    def destroy(self):
        """Unregister from the engine and drop all components."""
        engine = GameObj.engine
        if engine is not None:
            engine.game_obj_manager.remove(self)
        for component in Component:
            self.delete_component(component)


class GameObjManager:
    """Holds every game object, updates them and orders them for drawing."""

    def __init__(self):
        self._objects = []

    def add(self, obj):
        self._objects.append(obj)

    def remove(self, obj):
        """Remove ``obj``; unknown objects are ignored."""
        for index, existing in enumerate(self._objects):
            if existing is obj:
                del self._objects[index]
                return

    def update_all(self):
        """Update objects, their sprites and animators, then their colliders pairwise."""
        objects = list(self._objects)
        for obj in objects:
            obj.update()
            if obj.sprite is not None:
                obj.sprite.update()
            if obj.animator is not None:
                obj.animator.update()
            for other in objects:
                if other is obj:
                    continue
                if obj.collider is not None and other.collider is not None:
                    obj.collider.update(other.collider)

    def sort(self):
        """Order objects by depth, lowest first, keeping ties in place."""
        self._objects.sort(key=lambda obj: obj.transform.position.z)

    def __len__(self):
        return len(self._objects)

    def __getitem__(self, index):
        return self._objects[index]

    def __iter__(self):
        return iter(self._objects)