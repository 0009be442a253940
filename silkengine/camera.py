"""A smoothly following 2D camera with spring-arm zoom and screen shake."""

from __future__ import annotations

import math

from . import fmath
from .box import box_from_center
from .components import SceneComponent
from .vector import ZERO_VECTOR, Vector2, distance

_SMALL_NUMBER = 1.0e-8


def _smooth_step(x):
    x = max(x, 1.0)
    return x * x


def _lerp(a, b, alpha):
    return a + (b - a) * alpha


def _is_empty_frame(frame):
    return frame.size() == ZERO_VECTOR and frame.center() == ZERO_VECTOR


class Camera(SceneComponent):
    """Follows its world position with a lagging virtual position and zoom."""

    def __init__(self):
        super().__init__()
        self.virtual_position = ZERO_VECTOR
        self.virtual_rotation = 0.0
        self.frame = box_from_center(ZERO_VECTOR, 0.0, 0.0)
        self.distance_threshold = 100.0
        self.smoothness = 30
        self.shake_intensity = 0.0
        self.shaking = False
        self.shake_decay = 5
        self._last_shake = ZERO_VECTOR
        self.spring_arm_length = 20.0
        self.virtual_spring_arm_length = 100.0
        self.spring_arm_smoothness = 20

    def begin_play(self):
        """Start the virtual camera exactly where the camera is."""
        super().begin_play()
        self.virtual_position = self.world_position()
        self.virtual_rotation = self.world_rotation()
        self.virtual_spring_arm_length = self.spring_arm_length

    def set_main_camera(self):
        """Make this the camera the world is viewed through."""
        world = self.world
        if world is not None:
            world.main_camera = self

    def set_smoothness(self, smooth):
        """Movement smoothness, from 0 (instant) to 100."""
        self.smoothness = fmath.clamp(int(smooth), 0, 100)

    def set_distance_threshold(self, threshold):
        """Distance beyond which the camera catches up faster, 0 to 500."""
        self.distance_threshold = fmath.clamp(float(threshold), 0.0, 500.0)

    def set_spring_arm_length(self, length):
        """Zoom distance, from 1 to 10000."""
        self.spring_arm_length = fmath.clamp(float(length), 1.0, 10000.0)

    def set_spring_arm_smoothness(self, smooth):
        """Zoom smoothness, from 0 (instant) to 100."""
        self.spring_arm_smoothness = fmath.clamp(int(smooth), 0, 100)

    def shake_camera(self, intensity, decay=10):
        """Start shaking with an intensity of 0 to 100 that decays at 1 to 100."""
        self.shake_intensity = float(fmath.clamp(int(intensity), 0, 100))
        self.shake_decay = fmath.clamp(int(decay), 1, 100)
        self.shaking = True

    def set_rect_frame(self, frame):
        """Box the camera position is kept inside; an empty box means none."""
        self.frame = frame

    def _framed(self, position):
        frame = self.frame
        if frame is None or _is_empty_frame(frame):
            return position
        low = frame.center() - frame.half()
        high = frame.center() + frame.half()
        return Vector2(
            fmath.clamp(position.x, low.x, high.x),
            fmath.clamp(position.y, low.y, high.y),
        )

    def calculate(self):
        """Advance the virtual position, zoom and shake by one step."""
        if not self.enabled:
            return

        position = self._framed(self.world_position())
        gap = distance(self.virtual_position, position)
        if self.smoothness and gap > _SMALL_NUMBER:
            ratio = gap / self.distance_threshold if self.distance_threshold else math.inf
            alpha = 0.1 / self.smoothness * _smooth_step(ratio)
            alpha = fmath.clamp(alpha, 0.001, 0.1)
            self.virtual_position = _lerp(self.virtual_position, position, alpha)
        else:
            self.virtual_position = position

        if self.spring_arm_smoothness:
            self.virtual_spring_arm_length = _lerp(
                self.virtual_spring_arm_length,
                self.spring_arm_length,
                0.1 / self.spring_arm_smoothness,
            )
        else:
            self.virtual_spring_arm_length = self.spring_arm_length

        if self.shaking:
            if self.shake_intensity <= 0:
                self.shaking = False
                return
            radian = fmath.degree_to_radian(fmath.rand_real(0, 360))
            self.virtual_position = self.virtual_position - self._last_shake
            self._last_shake = Vector2(math.cos(radian), math.sin(radian)) * self.shake_intensity
            self.virtual_position = self.virtual_position + self._last_shake
            self.shake_intensity -= self.shake_decay * 0.005