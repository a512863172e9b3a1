import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from flapbird.engine.animator import Animator
from flapbird.engine.core import Engine, init_engine
from flapbird.engine.gameobj import Component, GameObj


@pytest.fixture
def engine():
    eng = init_engine(80, 60, 60, "test", 100)
    yield eng
    eng.window.close()
    GameObj.set_engine(None)
    Animator.set_frame_rate(0)


class _Counter(GameObj):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def update(self):
        self.calls += 1


def test_init_engine_wires_everything(engine):
    assert isinstance(engine, Engine)
    assert GameObj.engine is engine
    assert Animator.frame_rate == 60
    assert engine.sound.volume == 100.0
    assert engine.window.surface.get_size() == (80, 60)


def test_new_objects_register(engine):
    first = GameObj()
    second = GameObj()
    assert len(engine.game_obj_manager) == 2
    assert list(engine.game_obj_manager) == [first, second]


def test_update_all_updates_objects(engine):
    counter = _Counter()
    obj = GameObj()
    obj.add_component(Component.SPRITE)
    obj.transform.set_position(3, 4)
    engine.update_all()
    engine.update_all()
    assert counter.calls == 2
    assert obj.sprite.position == (3, 4)


def test_update_all_handles_close(engine):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    engine.update_all()
    assert engine.window.is_open() is False


def test_render_all_sorts_by_depth(engine):
    objs = [GameObj() for _ in range(3)]
    for obj, z in zip(objs, (3, 1, 2)):
        obj.transform.position.z = z
    engine.render_all()
    depths = [obj.transform.position.z for obj in engine.game_obj_manager]
    assert depths == sorted(depths)


def test_render_all_draws_sprites(engine):
    obj = GameObj()
    obj.add_component(Component.SPRITE)
    image = pygame.Surface((6, 6))
    image.fill((0, 255, 0))
    obj.sprite.set_texture(image)
    obj.transform.set_position(10, 10)
    engine.update_all()
    engine.render_all()
    assert engine.window.surface.get_at((12, 12))[:3] == (0, 255, 0)
    assert engine.window.surface.get_at((2, 2))[:3] == (0, 0, 0)