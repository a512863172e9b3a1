"""The game: scenes, scoring and the main loop."""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

import pygame

from .engine.core import init_engine
from .engine.gameobj import GameObj
from .engine.input import Key
from .engine.sprite import AssetError
from .objects.background import Background
from .objects.base import Base
from .objects.bird import Bird
from .objects.board import Board
from .objects.pipe_manager import PipeManager
from .objects.restart_button import RestartButton
from .objects.score import Score
from .settings import (
    FRAME_RATE,
    HEIGHT,
    HIT_AUDIO,
    POINT_AUDIO,
    VOLUME,
    WIDTH,
    GameState,
    asset_path,
)

log = logging.getLogger(__name__)

WINDOW_TITLE = "Flappy Bird Game"


@dataclass
class _Latch:
    """Turns held inputs into single presses."""

    mouse: bool = False
    space: bool = False

    def fired(self, mouse_down, space_down):
        fired = (not self.mouse and mouse_down) or (not self.space and space_down)
        if fired:
            self.mouse = self.space = True
        if not mouse_down:
            self.mouse = False
        if not space_down:
            self.space = False
        return fired


def _score_value(digits):
    hundreds, tens, ones = digits
    return hundreds * 100 + tens * 10 + ones


class Game:
    """Owns the engine and every game object and switches between scenes."""

    def __init__(self, root=None, engine=None):
        self.root = root
        if engine is None:
            engine = init_engine(WIDTH, HEIGHT, FRAME_RATE, WINDOW_TITLE, VOLUME * 100)
        else:
            GameObj.set_engine(engine)
        self.engine = engine
        self.state = GameState.START
        self.points = [0, 0, 0]
        self.best_score = [0, 0, 0]

        self._start_latch = _Latch()
        self._playing_latch = _Latch()
        self._game_over_latch = _Latch()

        self.bird = Bird(self._current_state, root)
        self.background = Background(root)
        self.base = Base(self._current_state, self.bird.transform.position, root)
        self.score = Score(self.points, root)
        self.restart_button = RestartButton(root)
        self.board = Board(self.points, self.best_score, root)
        self.pipe_manager = PipeManager(self._current_state, self.bird.transform.position, root)

    def _current_state(self):
        return self.state

    def run(self):
        """Start a round and play until the window is closed."""
        self._start_scene()
        while self.engine.window.is_open():
            self.step()

    def step(self):
        """Run one frame: handle the scene, then draw and update everything."""
        if self.state is GameState.START:
            self._start()
        elif self.state is GameState.PLAYING:
            self._playing()
        elif self.state is GameState.GAME_OVER:
            self._game_over()
        self.engine.render_all()
        self.engine.update_all()

    def _space_down(self):
        return self.engine.input.is_key_pressed(Key.SPACEBAR)

    def _play(self, audio):
        try:
            self.engine.sound.play_sound(asset_path(audio, self.root))
        except AssetError as exc:
            log.warning("%s", exc)

    def _start(self):
        if self._start_latch.fired(self.engine.input.mouse_click(), self._space_down()):
            self._playing_scene()
            self.bird.jump()

    def _playing(self):
        if self._playing_latch.fired(self.engine.input.mouse_click(), self._space_down()):
            self.bird.jump()

        if self.base.is_triggered() or self.pipe_manager.pipe_is_triggered():
            log.debug("bird hit an obstacle")
            self._play(HIT_AUDIO)
            self._game_over_scene()

        if self.pipe_manager.point_check():
            log.debug("point")
            self._add_point()
            self._play(POINT_AUDIO)

    def _game_over(self):
        if self._game_over_latch.fired(self.restart_button.is_pressed(), self._space_down()):
            self._start_scene()

    def _add_point(self):
        points = self.points
        points[2] += 1
        if points[2] >= 10:
            points[2] = 0
            points[1] += 1
        if points[1] >= 10:
            points[1] = 0
            points[0] = (points[0] + 1) % 256

    def _start_scene(self):
        self.state = GameState.START
        self._reset()
        log.debug("best score %s", "".join(str(digit) for digit in self.best_score))

    def _playing_scene(self):
        self.state = GameState.PLAYING
        self.score.show()

    def _game_over_scene(self):
        self.state = GameState.GAME_OVER
        if _score_value(self.points) > _score_value(self.best_score):
            self.best_score[:] = self.points
        self.score.hide()
        self.board.show()
        self.restart_button.show()

    def _reset(self):
        self.points[:] = [0, 0, 0]
        self.bird.reset()
        self.score.hide()
        self.restart_button.hide()
        self.board.hide()
        self.pipe_manager.reset()


def main(argv=None):
    """Open the game window and play."""
    parser = argparse.ArgumentParser(prog="flapbird", description="Play Flappy Bird.")
    parser.add_argument(
        "--assets",
        metavar="DIR",
        default=None,
        help="directory that holds the res/ folder (default: current directory)",
    )
    args = parser.parse_args(argv)
    try:
        Game(root=args.assets).run()
    finally:
        pygame.quit()
    return 0