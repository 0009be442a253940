import pytest

from silkengine.structs import CombinePattern, HitResult, PhysicsMaterial, combine_materials
from silkengine.vector import ZERO_VECTOR, Vector2


def test_default_material():
    material = PhysicsMaterial()
    assert material.friction == pytest.approx(0.4)
    assert material.bounciness == 0


def test_combine_mid_is_average():
    a = PhysicsMaterial(0.2, 0.4)
    b = PhysicsMaterial(0.6, 0.8)
    combined = combine_materials(a, b)
    assert combined.friction == pytest.approx(0.4)
    assert combined.bounciness == pytest.approx(0.6)


def test_combine_min_and_max():
    a = PhysicsMaterial(0.2, 0.9)
    b = PhysicsMaterial(0.6, 0.1)
    assert combine_materials(a, b, CombinePattern.MIN) == PhysicsMaterial(0.2, 0.1)
    assert combine_materials(a, b, CombinePattern.MAX) == PhysicsMaterial(0.6, 0.9)


def test_combine_is_symmetric():
    a = PhysicsMaterial(0.3, 0.5)
    b = PhysicsMaterial(0.7, 0.2)
    for pattern in CombinePattern:
        assert combine_materials(a, b, pattern) == combine_materials(b, a, pattern)


def test_default_hit_result_is_empty():
    hit = HitResult()
    assert hit.impact_point == ZERO_VECTOR
    assert hit.impact_normal == ZERO_VECTOR
    assert hit.hit_object is None


def test_mirrored_hit_reverses_normal():
    owner, component = object(), object()
    hit = HitResult(Vector2(1, 2), Vector2(0, 1), "a", "b")
    mirrored = hit.mirrored(owner, component)
    assert mirrored.impact_point == hit.impact_point
    assert mirrored.impact_normal == -hit.impact_normal
    assert mirrored.hit_object is owner
    assert mirrored.hit_component is component