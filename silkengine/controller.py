"""The player controller: camera, input and cursor queries."""

from __future__ import annotations

from .actor import Actor
from .camera import Camera
from .inputs import InputComponent
from .structs import HitResult
from .vector import ZERO_VECTOR, Vector2
from .world import zone_index

WINDOW_WIDTH = 1200
WINDOW_HEIGHT = 800
_PIXELS_PER_ARM = 20.0


class Controller(Actor):
    """An actor that owns the main camera and handles player input."""

    def __init__(self, world=None):
        super().__init__(world)
        self.camera = self.construct_component(Camera)
        self.camera.attach_to(self.root)
        self.camera.set_main_camera()
        self.input_component = self.construct_component(InputComponent)

    def begin_play(self):
        """Start play and let subclasses set up their input bindings."""
        super().begin_play()
        self.setup_input_component(self.input_component)

    def setup_input_component(self, input_component):
        """Hook for binding actions; does nothing by default."""

    def peek_info(self):
        """Fire point-like input actions."""
        self.input_component.peek_info()

    def peek_info_axis(self):
        """Fire held input actions."""
        self.input_component.peek_info_axis()

    def mouse_tick(self, position):
        """Record the mouse position on screen."""
        self.input_component.mouse_tick(position)

    def _view_camera(self):
        world = self.world
        if world is not None and world.main_camera is not None:
            return world.main_camera
        return self.camera

    def cursor_position(self):
        """Mouse position in world coordinates."""
        camera = self._view_camera()
        centre = Vector2(WINDOW_WIDTH, WINDOW_HEIGHT) * 0.5
        screen = self.input_component.mouse_position()
        factor = camera.virtual_spring_arm_length / _PIXELS_PER_ARM
        return (screen - centre) * factor + camera.world_position()

    def is_mouse_clicked(self):
        """Whether the left mouse button is down."""
        return self.input_component.is_mouse_button_pressed()

    def is_any_key_pressed(self):
        """Whether any key is down."""
        return self.input_component.is_any_key_pressed()

    def is_key_pressed(self, key):
        """Whether a key is down."""
        return self.input_component.is_key_pressed(key)

    def hit_result_under_cursor(self):
        """The topmost collider under the cursor, or an empty result."""
        position = self.cursor_position()
        world = self.world
        if world is None:
            return HitResult()
        column, row = zone_index(position.x, position.y)
        zone = world.collider_zones[column][row]
        for collider in sorted(zone, key=lambda c: (c.layer, id(c)), reverse=True):
            if collider.is_mouse_over(position):
                return HitResult(position, ZERO_VECTOR, collider.owner, collider)
        return HitResult()

    def enable_input(self, enable):
        """Turn input handling on or off."""
        self.input_component.enable_input(enable)