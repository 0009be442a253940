import pytest

from silkengine.actor import Actor
from silkengine.box import box_from_center
from silkengine.camera import Camera
from silkengine.vector import ZERO_VECTOR, Vector2, distance
from silkengine.world import World


@pytest.fixture
def rig():
    world = World()
    actor = Actor(world)
    camera = actor.construct_component(Camera)
    camera.attach_to(actor.root)
    return world, actor, camera


def test_smoothness_is_clamped(rig):
    _, _, camera = rig
    camera.set_smoothness(150)
    assert camera.smoothness == 100
    camera.set_smoothness(-5)
    assert camera.smoothness == 0


def test_spring_arm_length_is_clamped(rig):
    _, _, camera = rig
    camera.set_spring_arm_length(0)
    assert camera.spring_arm_length == 1.0
    camera.set_spring_arm_length(20000)
    assert camera.spring_arm_length == 10000.0


def test_distance_threshold_is_clamped(rig):
    _, _, camera = rig
    camera.set_distance_threshold(900)
    assert camera.distance_threshold == 500.0


def test_set_main_camera_registers_on_world(rig):
    world, _, camera = rig
    world.main_camera = None
    camera.set_main_camera()
    assert world.main_camera is camera


def test_zero_smoothness_snaps_to_position(rig):
    _, actor, camera = rig
    camera.begin_play()
    camera.set_smoothness(0)
    actor.local_position = Vector2(120.0, -40.0)
    camera.calculate()
    assert camera.virtual_position == Vector2(120.0, -40.0)


def test_smoothing_moves_partway(rig):
    _, actor, camera = rig
    camera.begin_play()
    actor.local_position = Vector2(300.0, 0.0)
    camera.calculate()
    assert 0.0 < camera.virtual_position.x < 300.0


def test_frame_clamps_position(rig):
    _, actor, camera = rig
    camera.begin_play()
    camera.set_smoothness(0)
    frame = box_from_center(ZERO_VECTOR, 10.0, 10.0)
    camera.set_rect_frame(frame)
    actor.local_position = Vector2(100.0, 100.0)
    camera.calculate()
    assert camera.virtual_position == frame.center() + frame.half()


def test_spring_arm_eases_towards_target(rig):
    _, _, camera = rig
    camera.begin_play()
    camera.set_spring_arm_length(200)
    camera.calculate()
    assert 20.0 < camera.virtual_spring_arm_length < 200.0


def test_spring_arm_without_smoothing_snaps(rig):
    _, _, camera = rig
    camera.begin_play()
    camera.set_spring_arm_smoothness(0)
    camera.set_spring_arm_length(200)
    camera.calculate()
    assert camera.virtual_spring_arm_length == 200.0


def test_shake_offsets_by_intensity_and_decays(rig):
    _, actor, camera = rig
    camera.begin_play()
    camera.set_smoothness(0)
    actor.local_position = Vector2(50.0, 50.0)
    camera.shake_camera(30)
    camera.calculate()
    assert distance(camera.virtual_position, Vector2(50.0, 50.0)) == pytest.approx(30.0, abs=1e-3)
    assert camera.shake_intensity < 30.0


def test_shake_intensity_is_clamped(rig):
    _, _, camera = rig
    camera.shake_camera(500, 0)
    assert camera.shake_intensity == 100.0
    assert camera.shake_decay == 1


def test_disabled_camera_does_not_move(rig):
    _, actor, camera = rig
    camera.begin_play()
    camera.enabled = False
    actor.local_position = Vector2(300.0, 0.0)
    camera.calculate()
    assert camera.virtual_position == Vector2(0.0, 0.0)