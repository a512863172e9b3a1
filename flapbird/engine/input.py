"""Keyboard and mouse state for the game window."""

from __future__ import annotations

import enum

import pygame


class Key(enum.Enum):
    """Keys the game can ask about."""

    ESC = enum.auto()
    SPACEBAR = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    DOWN = enum.auto()
    UP = enum.auto()


_PYGAME_KEYS = {
    Key.ESC: pygame.K_ESCAPE,
    Key.SPACEBAR: pygame.K_SPACE,
    Key.LEFT: pygame.K_LEFT,
    Key.RIGHT: pygame.K_RIGHT,
    Key.DOWN: pygame.K_DOWN,
    Key.UP: pygame.K_UP,
}


class Input:
    """Reads input only while the window is open and has focus."""

    def __init__(self, window=None):
        self.window = window

    def _focused(self):
        return (
            self.window is not None
            and self.window.is_open()
            and bool(pygame.key.get_focused())
        )

    def mouse_click(self):
        """True while the left or right mouse button is held."""
        if not self._focused():
            return False
        buttons = pygame.mouse.get_pressed()
        return bool(buttons[0] or buttons[2])

    def is_key_pressed(self, key):
        """True while ``key`` is held."""
        if not self._focused():
            return False
        return bool(pygame.key.get_pressed()[_PYGAME_KEYS[key]])

    def mouse_position(self):
        """Mouse position relative to the window."""
        x, y = pygame.mouse.get_pos()
        return (x, y)