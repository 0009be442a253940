import pytest

from silkengine.actor import Actor
from silkengine.collider import BoxCollider
from silkengine.controller import WINDOW_HEIGHT, WINDOW_WIDTH, Controller
from silkengine.inputs import InputType, KeyCode
from silkengine.vector import Vector2
from silkengine.world import World

CENTRE = Vector2(WINDOW_WIDTH * 0.5, WINDOW_HEIGHT * 0.5)


@pytest.fixture
def world():
    return World()


def test_controller_becomes_main_camera(world):
    controller = Controller(world)
    assert world.main_camera is controller.camera


def test_setup_input_component_called_on_begin_play(world):
    class Recording(Controller):
        received = None

        def setup_input_component(self, input_component):
            self.received = input_component

    controller = Recording(world)
    controller.begin_play()
    assert controller.received is controller.input_component


def test_cursor_at_screen_centre_is_camera_position(world):
    controller = Controller(world)
    controller.local_position = Vector2(30.0, -12.0)
    controller.mouse_tick(CENTRE)
    assert controller.cursor_position() == controller.camera.world_position()


def test_cursor_offset_scales_with_spring_arm(world):
    controller = Controller(world)
    controller.mouse_tick(CENTRE + Vector2(10.0, 6.0))
    first = controller.cursor_position() - controller.camera.world_position()
    controller.camera.virtual_spring_arm_length *= 2
    second = controller.cursor_position() - controller.camera.world_position()
    assert second.x == pytest.approx(first.x * 2)
    assert second.y == pytest.approx(first.y * 2)


def test_hit_result_under_cursor_finds_collider(world):
    controller = Controller(world)
    target = Actor(world)
    box = target.construct_component(BoxCollider)
    box.set_size(Vector2(50.0, 50.0))
    box.collider_zone_tick()
    controller.mouse_tick(CENTRE)
    hit = controller.hit_result_under_cursor()
    assert hit.hit_component is box
    assert hit.hit_object is target


def test_hit_result_empty_without_colliders(world):
    controller = Controller(world)
    controller.mouse_tick(CENTRE)
    hit = controller.hit_result_under_cursor()
    assert hit.hit_component is None
    assert hit.hit_object is None


def test_key_queries_delegate_to_input(world):
    controller = Controller(world)
    assert controller.is_any_key_pressed() is False
    controller.input_component.pressed_keys.add(KeyCode.A)
    assert controller.is_key_pressed(KeyCode.A) is True
    assert controller.is_any_key_pressed() is True


def test_enable_input_blocks_clicks(world):
    controller = Controller(world)
    controller.input_component.pressed_keys.add(KeyCode.LBUTTON)
    assert controller.is_mouse_clicked() is True
    controller.enable_input(False)
    assert controller.is_mouse_clicked() is False


def test_peek_info_fires_actions(world):
    controller = Controller(world)
    calls = []
    controller.input_component.set_mapping("jump", KeyCode.SPACE)
    controller.input_component.bind_action("jump", InputType.PRESSED, lambda: calls.append("jump"))
    controller.input_component.pressed_keys.add(KeyCode.SPACE)
    controller.peek_info()
    assert calls == ["jump"]