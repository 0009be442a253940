"""A controllable character with a box collider and a rigid body."""

from __future__ import annotations

import enum
import math

from .collider import BoxCollider
from .controller import Controller
from .rigidbody import RigidBody
from .vector import Vector2

MOVE_FLAG_FRAMES = 5


class MovementState(enum.Enum):
    """What the character is doing."""

    STANDING = 0
    RUNNING = 1
    FLYING = 2


class Character(Controller):
    """A controller that walks, stands and falls."""

    def __init__(self, world=None):
        super().__init__(world)
        self.movement_state = MovementState.STANDING
        self.max_walking_speed = 500.0
        self.move_flag = 0
        self.box = self.construct_component(BoxCollider)
        self.rigid = self.construct_component(RigidBody)
        self.box.attach_to(self.root)

    def begin_play(self):
        """Start play and listen for ground contacts."""
        super().begin_play()
        self.box.on_component_stay.add(self.on_touching)

    def update(self, delta_time):
        """Update components, detect flight and stop walking when input ends."""
        super().update(delta_time)
        if self.box.is_collisions_empty():
            self.movement_state = MovementState.FLYING
        if self.move_flag > -1:
            self.move_flag -= 1
        if self.move_flag == 0:
            self.rigid.velocity = Vector2(0.0, self.rigid.velocity.y)

    def add_input_x(self, input_value, control_scale=True):
        """Push the character horizontally; positive is to the right."""
        if control_scale:
            self.local_scale = Vector2(1.0 if input_value >= 0 else -1.0, 1.0)
        self.move_flag = MOVE_FLAG_FRAMES
        velocity = self.rigid.velocity
        if abs(velocity.x) >= self.max_walking_speed:
            capped = math.copysign(self.max_walking_speed, velocity.x)
            self.rigid.velocity = Vector2(capped, velocity.y)
            return
        self.rigid.add_impulse(Vector2(input_value, 0.0))

    def on_touching(self, hit_comp, other_comp, other_actor, normal_impulse, hit_result):
        """Stand or run when resting on something below."""
        if normal_impulse.y < 0:
            if self.rigid.velocity.x == 0:
                self.movement_state = MovementState.STANDING
            else:
                self.movement_state = MovementState.RUNNING

    def set_max_walking_speed(self, max_speed):
        """Highest walking speed; negative values become zero."""
        self.max_walking_speed = max_speed if max_speed > 0 else 0.0