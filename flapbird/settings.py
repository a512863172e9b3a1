"""Game settings, asset locations and the game state."""

from __future__ import annotations

import enum
import os

# Window and graphics
HEIGHT = 650
WIDTH = 500
FRAME_RATE = 60

# Sound, in percent
VOLUME = 1

# Gameplay
HEIGHT_LIMIT = -50

# Bird
BIRD_POS_Z = 4
BIRD_SPEED = 180 // FRAME_RATE
BIRD_ACCELERATION_CHANGE = 0.1
BIRD_ANIM_FRAME_RATE = 12
BIRD_COLLIDER_WIDTH = 1
BIRD_COLLIDER_HEIGHT = 1
BIRD_START_JUMP_SPEED = 30 / FRAME_RATE
BIRD_START_ACCELERATION = 1
BIRD_START_FLY = 5
BIRD_PLAYING_JUMP_SPEED = 180 / FRAME_RATE
BIRD_PLAYING_ACCELERATION = 1.5
BIRD_PLAYING_ROTATION_SPEED = 6

# Pipes
PIPE_POS_Z = 3
PIPE_CLOSENESS = 130
PIPE_CONSISTENCY = 250
PIPE_COUNT = (WIDTH + PIPE_CONSISTENCY) // PIPE_CONSISTENCY
PIPE_SPAWNPOINT = WIDTH + PIPE_CONSISTENCY // 2
PIPE_DESPAWNPOINT = -(PIPE_CONSISTENCY // 2)
PIPE_RANDOM = 100
PIPE_SIZE = 1.5

# Base
BASE_POS_Z = 4
BASE_COLLIDER_HEIGHT = 85

# Board
BOARD_POS_Z = 10
BOARD_HEIGHT = 100
BOARD_SCORE_HEIGHT = 75
BOARD_BEST_HEIGHT = 205
BOARD_NUMBER_SIZE = 1.5

# Restart button
RESBUT_POS_Z = 10
RESBUT_HEIGHT = 150

# Score
SCORE_POS_Z = 10

# Background
BACKGROUND_POS_Z = 1

# Assets, relative to the resource root
BIRD_UP_IMG = "res/sprites/bird-upflap.png"
BIRD_MID_IMG = "res/sprites/bird-midflap.png"
BIRD_DOWN_IMG = "res/sprites/bird-downflap.png"
PIPE_UP_IMG = "res/sprites/pipe_up.png"
PIPE_DOWN_IMG = "res/sprites/pipe_down.png"
BACKGROUND_IMG = "res/sprites/background-day.png"
BASE_IMG = "res/sprites/base.png"
RESTART_IMG = "res/sprites/restart.png"
BOARD_IMG = "res/sprites/score-board.png"
DIGIT_IMAGES = tuple(f"res/sprites/{digit}.png" for digit in range(10))

HIT_AUDIO = "res/audio/audio_hit.wav"
POINT_AUDIO = "res/audio/audio_point.wav"


class GameState(enum.Enum):
    """The phase the game is in."""

    START = enum.auto()
    PLAYING = enum.auto()
    GAME_OVER = enum.auto()


def asset_path(name, root=None):
    """Return the path of asset ``name`` under ``root``, or as given when no root."""
    if root is None:
        return os.fspath(name)
    return os.path.join(os.fspath(root), os.fspath(name))