"""A Flappy Bird style arcade game built on a small pygame-based 2D engine."""

__version__ = "0.1.0"