"""The game window and its event handling."""

from __future__ import annotations

import pygame

_CLEAR_COLOR = (0, 0, 0)


class Window:
    """A fixed-size window that closes when the user asks it to."""

    def __init__(self, width, height, name, frame_rate):
        pygame.display.init()
        self.surface = pygame.display.set_mode((width, height))
        pygame.display.set_caption(name)
        self.frame_rate = frame_rate
        self._clock = pygame.time.Clock()
        self._open = True

    def update(self):
        """Handle pending events; a close request closes the window."""
        if not self._open:
            return
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.close()
                return

    def is_open(self):
        return self._open

    def clear(self):
        """Fill the whole window with black."""
        self.surface.fill(_CLEAR_COLOR)

    def draw(self, sprite):
        """Draw ``sprite`` onto the window; return the covered rectangle, or None."""
        return sprite.draw(self.surface)

    def display(self):
        """Show what was drawn and wait to keep the frame rate."""
        pygame.display.flip()
        self._clock.tick(self.frame_rate)

    def close(self):
        if self._open:
            self._open = False
            pygame.display.quit()