"""The engine that owns the window, input, sound and all game objects."""

from __future__ import annotations

from .animator import Animator
from .gameobj import GameObj, GameObjManager
from .input import Input
from .sound import Sound
from .window import Window


class Engine:
    """Creates the window and drives updating and drawing of game objects."""

    def __init__(self, width, height, frame_rate, window_name, volume):
        self.game_obj_manager = GameObjManager()
        self.window = Window(width, height, window_name, frame_rate)
        self.input = Input(self.window)
        self.sound = Sound()
        GameObj.set_engine(self)
        Animator.set_frame_rate(frame_rate)
        self.sound.set_volume(volume)

    def update_all(self):
        """Update every game object, then handle window events."""
        self.game_obj_manager.update_all()
        self.window.update()

    def render_all(self):
        """Draw every object's sprite, lowest depth first."""
        self.window.clear()
        self.game_obj_manager.sort()
        for obj in self.game_obj_manager:
            if obj.sprite is not None:
                self.window.draw(obj.sprite)
        self.window.display()


def init_engine(width, height, frame_rate, window_name, volume):
    """Create the engine that game objects will register with."""
    return Engine(width, height, frame_rate, window_name, volume)