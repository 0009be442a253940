from silkengine.transform import Transform
from silkengine.vector import UNIT_VECTOR, ZERO_VECTOR, Vector2


def test_default_is_identity():
    t = Transform()
    assert t.position == ZERO_VECTOR
    assert t.rotation == 0.0
    assert t.scale == UNIT_VECTOR


def test_explicit_values_kept():
    t = Transform(Vector2(1, 2), 45.0, Vector2(2, 3))
    assert t.position == Vector2(1, 2)
    assert t.rotation == 45.0
    assert t.scale == Vector2(2, 3)


def test_copy_is_equal_but_independent():
    original = Transform(Vector2(1, 2), 10.0, Vector2(2, 2))
    duplicate = original.copy()
    assert duplicate == original
    assert duplicate is not original
    original.position = original.position + Vector2(5, 5)
    original.rotation = 90.0
    assert duplicate.position == Vector2(1, 2)
    assert duplicate.rotation == 10.0


def test_default_instances_do_not_share_state():
    first = Transform()
    second = Transform()
    first.position = Vector2(3, 3)
    assert second.position == ZERO_VECTOR