import pytest

from silkengine.character import Character, MovementState
from silkengine.collider import BoxCollider
from silkengine.rigidbody import RigidBody
from silkengine.structs import HitResult
from silkengine.vector import Vector2
from silkengine.world import World


@pytest.fixture
def hero():
    return Character(World())


def test_has_collider_and_body(hero):
    assert hero.get_component_by_class(BoxCollider) is hero.box
    assert hero.get_component_by_class(RigidBody) is hero.rigid
    assert hero.box.parent is hero.root


def test_input_applies_impulse(hero):
    hero.add_input_x(100.0)
    assert hero.rigid.velocity.x == pytest.approx(100.0)


def test_input_flips_scale(hero):
    hero.add_input_x(-10.0)
    assert hero.local_scale.x == -1.0
    hero.add_input_x(10.0)
    assert hero.local_scale.x == 1.0


def test_input_without_scale_control(hero):
    hero.add_input_x(-10.0, False)
    assert hero.local_scale.x == 1.0


def test_speed_is_capped(hero):
    hero.set_max_walking_speed(50.0)
    hero.rigid.velocity = Vector2(80.0, 3.0)
    hero.add_input_x(10.0)
    assert hero.rigid.velocity == Vector2(50.0, 3.0)


def test_negative_max_speed_becomes_zero(hero):
    hero.set_max_walking_speed(-5.0)
    assert hero.max_walking_speed == 0.0


def test_no_contacts_means_flying(hero):
    hero.update(0.0)
    assert hero.movement_state is MovementState.FLYING


def test_horizontal_velocity_stops_after_input_ends(hero):
    hero.add_input_x(100.0)
    for _ in range(4):
        hero.update(0.0)
    assert hero.rigid.velocity.x > 0
    hero.update(0.0)
    assert hero.rigid.velocity.x == 0.0


def test_touching_ground_sets_state(hero):
    hero.update(0.0)
    hero.on_touching(None, None, None, Vector2(0.0, -1.0), HitResult())
    assert hero.movement_state is MovementState.STANDING
    hero.rigid.velocity = Vector2(5.0, 0.0)
    hero.on_touching(None, None, None, Vector2(0.0, -1.0), HitResult())
    assert hero.movement_state is MovementState.RUNNING


def test_touching_from_below_keeps_state(hero):
    hero.update(0.0)
    hero.on_touching(None, None, None, Vector2(0.0, 1.0), HitResult())
    assert hero.movement_state is MovementState.FLYING


def test_begin_play_listens_for_stay(hero):
    hero.begin_play()
    hero.update(0.0)
    assert len(hero.box.on_component_stay) == 1
    hero.box.on_component_stay.broadcast(None, None, None, Vector2(0.0, -1.0), HitResult())
    assert hero.movement_state is MovementState.STANDING