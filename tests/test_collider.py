from flapbird.engine.collider import Collider
from flapbird.engine.transform import Transform


def _placed(x, y):
    transform = Transform()
    transform.set_position(x, y, 0)
    return transform


def _states(*colliders):
    return tuple(bool(collider.is_triggered) for collider in colliders)


def test_overlapping_corner_triggers_both():
    first = Collider(_placed(0, 0))
    first.set_size(10, 10)
    second = Collider(_placed(5, 5))
    second.set_size(10, 10)
    first.update(second)
    assert _states(first, second) == (True, True)


def test_separate_areas_do_not_trigger():
    first = Collider(_placed(0, 0))
    first.set_size(10, 10)
    second = Collider(_placed(50, 50))
    second.set_size(10, 10)
    first.update(second)
    assert _states(first, second) == (False, False)


def test_touching_edges_count_as_hit():
    first = Collider(_placed(0, 0))
    first.set_size(10, 10)
    second = Collider(_placed(10, 10))
    second.set_size(5, 5)
    first.update(second)
    assert _states(first, second) == (True, True)


def test_update_resets_only_self():
    first = Collider(_placed(0, 0))
    first.set_size(10, 10)
    second = Collider(_placed(5, 5))
    second.set_size(10, 10)
    first.update(second)
    far = Collider(_placed(100, 100))
    far.set_size(1, 1)
    first.update(far)
    assert _states(first, second, far) == (False, True, False)


def test_other_enclosing_self_is_not_detected():
    small = Collider(_placed(5, 5))
    small.set_size(2, 2)
    large = Collider(_placed(0, 0))
    large.set_size(20, 20)
    small.update(large)
    assert _states(small, large) == (False, False)
    large.update(small)
    assert _states(small, large) == (True, True)


def test_set_size_single_value_is_square():
    collider = Collider(Transform())
    collider.set_size(7)
    assert (collider.width, collider.height) == (7, 7)