import pytest

from silkengine.actor import Actor
from silkengine.rigidbody import RigidBody
from silkengine.structs import PhysicsMaterial
from silkengine.vector import ZERO_VECTOR, Vector2
from silkengine.world import World


def make_body(world=None):
    actor = Actor(world)
    body = actor.construct_component(RigidBody)
    return actor, body


def test_add_impulse_divides_by_mass():
    _, body = make_body()
    body.mass = 2.0
    pulse = Vector2(4.0, 6.0)
    body.add_impulse(pulse)
    assert body.velocity == pulse / body.mass


def test_not_moveable_stops_and_ignores_impulse():
    _, body = make_body()
    body.velocity = Vector2(3.0, 4.0)
    body.set_moveable(False)
    body.add_impulse(Vector2(10.0, 10.0))
    assert body.velocity == ZERO_VECTOR


def test_not_rotatable_stops_spin():
    _, body = make_body()
    body.angular_velocity = 45.0
    body.set_rotatable(False)
    assert body.angular_velocity == 0.0


def test_precise_update_applies_gravity_and_moves():
    actor, body = make_body()
    body.linear_drag = 0.0
    body.precise_update(0.5)
    assert body.velocity.y == pytest.approx(body.gravity * 0.5)
    assert actor.local_position.y == pytest.approx(body.velocity.y * 0.5)
    assert actor.local_position.x == 0.0


def test_precise_update_without_gravity_keeps_still():
    actor, body = make_body()
    body.gravity_enabled = False
    body.precise_update(1.0)
    assert actor.local_position == ZERO_VECTOR


def test_precise_update_clamps_to_max_speed():
    actor, body = make_body()
    body.gravity_enabled = False
    body.velocity = Vector2(body.max_speed * 3, 0.0)
    body.precise_update(1.0)
    assert actor.local_position.x == pytest.approx(body.max_speed)


def test_precise_update_does_nothing_when_not_moveable():
    actor, body = make_body()
    body.set_moveable(False)
    body.precise_update(1.0)
    assert actor.local_position == ZERO_VECTOR


def test_linear_drag_slows_velocity():
    _, body = make_body()
    body.velocity = Vector2(10.0, -10.0)
    body.linear_drag = 0.5
    body.update(1.0)
    assert body.velocity.x == pytest.approx(10.0 * (1 - 0.5))
    assert body.velocity.y == pytest.approx(-10.0 * (1 - 0.5))


def test_linear_drag_does_not_reverse_direction():
    _, body = make_body()
    body.velocity = Vector2(10.0, -10.0)
    body.linear_drag = 5.0
    body.update(1.0)
    assert body.velocity == ZERO_VECTOR


def test_rotation_follows_angular_velocity():
    actor, body = make_body()
    body.angular_velocity = 90.0
    body.update(0.5)
    assert actor.local_rotation == pytest.approx(body.angular_velocity * 0.5)


def test_angular_drag_never_flips_sign():
    _, body = make_body()
    body.angular_velocity = 20.0
    body.angular_drag = 100.0
    body.update(1.0)
    assert body.angular_velocity == 0.0


def test_update_without_owner_changes_nothing():
    body = RigidBody()
    body.velocity = Vector2(10.0, 0.0)
    body.update(1.0)
    assert body.velocity == Vector2(10.0, 0.0)


def test_bounce_off_static_surface():
    _, body = make_body()
    body.velocity = Vector2(0.0, 100.0)
    material = PhysicsMaterial(0.0, 0.5)
    body.restrict_velocity(Vector2(0.0, -1.0), material)
    assert body.velocity.x == pytest.approx(0.0)
    assert body.velocity.y == pytest.approx(-material.bounciness * 100.0)


def test_staying_contact_removes_normal_velocity():
    _, body = make_body()
    body.velocity = Vector2(30.0, 100.0)
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 1.0), None, True)
    assert body.velocity.x == pytest.approx(30.0)
    assert body.velocity.y == pytest.approx(0.0)


def test_friction_reduces_tangential_speed():
    _, body = make_body()
    body.velocity = Vector2(30.0, 100.0)
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.1, 0.0))
    assert 0.0 < body.velocity.x < 30.0
    assert body.velocity.y == pytest.approx(0.0)


def test_moving_away_is_unchanged():
    _, body = make_body()
    body.velocity = Vector2(5.0, -100.0)
    body.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.4, 1.0))
    assert body.velocity == Vector2(5.0, -100.0)


def test_elastic_collision_of_equal_masses_swaps_velocities():
    _, first = make_body()
    _, second = make_body()
    first.velocity = Vector2(0.0, 10.0)
    second.velocity = Vector2(0.0, -10.0)
    first.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 1.0), second)
    assert first.velocity.y == pytest.approx(-10.0)
    assert second.velocity.y == pytest.approx(10.0)


def test_collision_conserves_momentum():
    _, first = make_body()
    _, second = make_body()
    first.mass, second.mass = 2.0, 3.0
    first.velocity = Vector2(0.0, 12.0)
    second.velocity = Vector2(0.0, -4.0)
    before = first.mass * first.velocity.y + second.mass * second.velocity.y
    first.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 0.3), second)
    after = first.mass * first.velocity.y + second.mass * second.velocity.y
    assert after == pytest.approx(before)


def test_separating_bodies_are_unchanged():
    _, first = make_body()
    _, second = make_body()
    first.velocity = Vector2(0.0, -10.0)
    second.velocity = Vector2(0.0, 10.0)
    first.restrict_velocity(Vector2(0.0, -1.0), PhysicsMaterial(0.0, 1.0), second)
    assert first.velocity == Vector2(0.0, -10.0)
    assert second.velocity == Vector2(0.0, 10.0)


def test_registers_with_world_and_leaves_on_end_play():
    world = World()
    _, body = make_body(world)
    assert body in world.rigids
    body.end_play()
    assert body not in world.rigids


def test_register_dont_destroy():
    world = World()
    _, body = make_body(world)
    body.register_dont_destroy()
    assert body in world.overall_rigids