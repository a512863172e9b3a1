"""Sprites that draw an image at their object's transform."""

from __future__ import annotations

import pygame


class AssetError(OSError):
    """An image or sound file could not be loaded."""


def load_image(file_path):
    """Load an image file as a surface."""
    try:
        return pygame.image.load(file_path)
    except (pygame.error, OSError, FileNotFoundError) as exc:
        raise AssetError(f"cannot open a file {file_path}") from exc


class Sprite:
    """An image with scale, origin and rotation, placed from a transform."""

    def __init__(self, transform):
        self.transform = transform
        self.texture = None
        self.image = None
        self.scale = (1.0, 1.0)
        self.origin = (0.0, 0.0)
        self.position = (0.0, 0.0)
        self.rotation = 0.0

    def create(self, file_path):
        """Load the sprite's own texture from ``file_path`` and show it."""
        self.texture = load_image(file_path)
        self.image = self.texture

    def size(self):
        """Width and height of the own texture after scaling."""
        if self.texture is None:
            return (0.0, 0.0)
        width, height = self.texture.get_size()
        return (width * self.scale[0], height * self.scale[1])

    def set_scale(self, x, y):
        self.scale = (float(x), float(y))

    def set_origin(self, x, y):
        self.origin = (float(x), float(y))

    def set_texture(self, texture):
        """Show ``texture`` instead of the own one."""
        self.image = texture

    def default_texture(self):
        """Show the own texture again."""
        self.image = self.texture

    def update(self):
        """Take position and rotation from the transform."""
        self.rotation = self.transform.rotation
        self.position = (self.transform.position.x, self.transform.position.y)

    def draw(self, surface):
        """Blit onto ``surface``; return the covered rectangle, or None."""
        if self.image is None:
            return None
        sx, sy = self.scale
        width, height = self.image.get_size()
        scaled_size = (max(0, round(width * sx)), max(0, round(height * sy)))
        if scaled_size[0] == 0 or scaled_size[1] == 0:
            return None
        image = self.image
        if scaled_size != (width, height):
            image = pygame.transform.scale(image, scaled_size)
        offset = pygame.math.Vector2(
            scaled_size[0] / 2 - self.origin[0] * sx,
            scaled_size[1] / 2 - self.origin[1] * sy,
        )
        if self.rotation:
            offset = offset.rotate(self.rotation)
            image = pygame.transform.rotate(image, -self.rotation)
        center = (round(self.position[0] + offset.x), round(self.position[1] + offset.y))
        rect = image.get_rect(center=center)
        surface.blit(image, rect)
        return rect