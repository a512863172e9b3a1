import pygame
import pytest

from flapbird.engine.animator import Animator
from flapbird.engine.sprite import AssetError, Sprite
from flapbird.engine.transform import Transform

COLORS = [(255, 0, 0), (0, 255, 0), (0, 0, 255), (255, 255, 0)]


@pytest.fixture(autouse=True)
def frame_rate():
    Animator.set_frame_rate(60)
    yield
    Animator.set_frame_rate(0)


@pytest.fixture
def paths(tmp_path):
    result = []
    for index, color in enumerate(COLORS):
        surface = pygame.Surface((2, 2))
        surface.fill(color)
        path = tmp_path / f"frame{index}.bmp"
        pygame.image.save(surface, str(path))
        result.append(str(path))
    return result


@pytest.fixture
def animated(paths):
    sprite = Sprite(Transform())
    sprite.create(paths[0])
    animator = Animator(sprite)
    animator.animation(paths, 12)
    return sprite, animator


def _color(sprite):
    return tuple(sprite.image.get_at((0, 0)))[:3]


def test_frame_switches_after_frame_rate_ratio(animated):
    sprite, animator = animated
    for _ in range(4):
        animator.update()
    assert sprite.image is sprite.texture
    animator.update()
    assert _color(sprite) == COLORS[1]
    assert animator.loop == 0


def test_frames_cycle_in_order(animated):
    sprite, animator = animated
    seen = []
    for _ in range(4):
        for _ in range(5):
            animator.update()
        seen.append(_color(sprite))
    assert seen == [COLORS[1], COLORS[2], COLORS[3], COLORS[0]]


def test_stop_restores_default_and_halts(animated):
    sprite, animator = animated
    for _ in range(5):
        animator.update()
    animator.stop()
    assert sprite.image is sprite.texture
    for _ in range(10):
        animator.update()
    assert sprite.image is sprite.texture
    animator.play()
    for _ in range(5):
        animator.update()
    assert _color(sprite) == COLORS[2]


def test_no_animation_does_nothing(paths):
    sprite = Sprite(Transform())
    sprite.create(paths[0])
    animator = Animator(sprite)
    animator.update()
    assert animator.loop == 0
    assert sprite.image is sprite.texture


def test_wrong_frame_count_rejected(paths, animated):
    _, animator = animated
    with pytest.raises(ValueError):
        animator.animation(paths[:3], 12)


def test_missing_frame_raises(paths, tmp_path, animated):
    _, animator = animated
    with pytest.raises(AssetError):
        animator.animation(paths[:3] + [str(tmp_path / "missing.bmp")], 12)