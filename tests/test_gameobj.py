from types import SimpleNamespace

import pytest

from flapbird.engine.gameobj import Component, GameObj, GameObjManager


@pytest.fixture
def manager():
    manager = GameObjManager()
    GameObj.set_engine(SimpleNamespace(game_obj_manager=manager))
    yield manager
    GameObj.set_engine(None)


class Counter(GameObj):
    def __init__(self):
        super().__init__()
        self.calls = 0

    def update(self):
        self.calls += 1


def test_objects_register_on_creation(manager):
    first, second = GameObj(), GameObj()
    assert len(manager) == 2
    assert manager[0] is first and manager[1] is second
    assert list(manager) == [first, second]


def test_destroy_unregisters_and_clears(manager):
    obj = GameObj()
    keep = GameObj()
    obj.add_component(Component.SPRITE)
    obj.add_component(Component.COLLIDER)
    obj.destroy()
    assert list(manager) == [keep]
    assert obj.sprite is None and obj.collider is None and obj.animator is None


def test_remove_unknown_is_ignored(manager):
    obj = GameObj()
    manager.remove(object())
    assert list(manager) == [obj]


def test_add_component_is_idempotent(manager):
    obj = GameObj()
    obj.add_component(Component.SPRITE)
    sprite = obj.sprite
    obj.add_component(Component.SPRITE)
    assert obj.sprite is sprite
    assert sprite.transform is obj.transform


def test_animator_binds_to_sprite(manager):
    obj = GameObj()
    obj.add_component(Component.SPRITE)
    obj.add_component(Component.ANIMATOR)
    assert obj.animator.sprite is obj.sprite
    obj.delete_component(Component.ANIMATOR)
    assert obj.animator is None


def test_sort_by_depth_is_stable(manager):
    depths = [5, 1, 3, 1]
    objects = []
    for z in depths:
        obj = GameObj()
        obj.transform.set_position(0, 0, z)
        objects.append(obj)
    manager.sort()
    result = list(manager)
    assert [obj.transform.position.z for obj in result] == sorted(depths)
    assert result[0] is objects[1] and result[1] is objects[3]


def test_update_all_calls_update_and_moves_sprites(manager):
    counter = Counter()
    obj = GameObj()
    obj.add_component(Component.SPRITE)
    obj.transform.set_position(7, 8, 0)
    manager.update_all()
    manager.update_all()
    assert counter.calls == 2
    assert obj.sprite.position == (7, 8)
    assert list(manager) == [counter, obj]


def test_update_all_triggers_overlapping_colliders(manager):
    first = GameObj()
    first.add_component(Component.COLLIDER)
    first.collider.set_size(10, 10)
    first.transform.set_position(0, 0, 0)
    second = GameObj()
    second.add_component(Component.COLLIDER)
    second.collider.set_size(10, 10)
    second.transform.set_position(5, 5, 0)
    manager.update_all()
    states = (bool(first.collider.is_triggered), bool(second.collider.is_triggered))
    assert states == (True, True)
    second.transform.set_position(100, 100)
    manager.update_all()
    states = (bool(first.collider.is_triggered), bool(second.collider.is_triggered))
    assert states == (False, False)