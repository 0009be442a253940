"""Rigid bodies: a simple model of 2D motion, drag, gravity and impacts."""

from __future__ import annotations

from . import fmath
from .components import ActorComponent
from .structs import combine_materials
from .vector import ZERO_VECTOR, Vector2, dot_product, project_vector


def _damped(value, factor):
    """Reduce value by a drag factor, stopping at zero rather than reversing."""
    if fmath.is_small_number(value):
        return value
    buffer = value - value * factor
    return 0.0 if (value < 0) != (buffer < 0) else buffer


def _is_blocking(collider):
    """Whether a collider takes part in solid collisions rather than overlaps."""
    mode = collider.mode
    return getattr(mode, "name", mode) == "COLLISION"


class RigidBody(ActorComponent):
    """Moves its owning actor by velocity, gravity and contact responses."""

    def __init__(self):
        self._owner = None
        self.colliders = set()
        super().__init__()
        self.velocity = ZERO_VECTOR
        self.max_speed = 5000.0
        self.moveable = True
        self.gravity = 980.0
        self.gravity_enabled = True
        self.angular_velocity = 0.0
        self.rotatable = True
        self.mass = 1.0
        self.linear_drag = 0.05
        self.angular_drag = 0.0

    @property
    def owner(self):
        return self._owner

    @owner.setter
    def owner(self, value):
        old_world = None if self._owner is None else self._owner.world
        if old_world is not None:
            old_world.rigids.discard(self)
        self._owner = value
        new_world = None if value is None else value.world
        if new_world is not None:
            new_world.rigids.add(self)

    def end_play(self):
        """Leave the world and detach from every collider using this body."""
        world = self.world
        if world is not None:
            world.rigids.discard(self)
        for collider in list(self.colliders):
            collider.rigid_attached = None
        self.colliders.clear()

    def update(self, delta_time):
        """Apply linear drag and rotation for one frame."""
        if self.owner is None or not self.enabled:
            return

        if self.moveable and self.linear_drag:
            factor = self.linear_drag * delta_time / self.mass
            self.velocity = Vector2(
                _damped(self.velocity.x, factor), _damped(self.velocity.y, factor)
            )

        if self.rotatable:
            offset = self.angular_velocity * delta_time
            self.owner.add_rotation(0.0 if fmath.is_small_number(offset) else offset)
            if self.angular_drag:
                factor = self.angular_drag * delta_time / self.mass
                self.angular_velocity = _damped(self.angular_velocity, factor)

    def precise_update(self, delta_time):
        """Apply gravity and contacts, then move the owner by the velocity."""
        if not self.moveable or self.owner is None:
            return
        if self.gravity_enabled:
            self.velocity = Vector2(self.velocity.x, self.velocity.y + self.gravity * delta_time)

        for collider in list(self.colliders):
            if not _is_blocking(collider):
                continue
            for another in list(collider.collisions):
                if not _is_blocking(another):
                    continue
                hit = collider.collision_hit(another)
                self.restrict_velocity(
                    -hit.impact_normal,
                    combine_materials(collider.material, another.material),
                    another.rigid_attached,
                    True,
                )

        offset = self.velocity.clamp_axes(-self.max_speed, self.max_speed) * delta_time
        self.owner.add_position(
            Vector2(
                0.0 if fmath.is_small_number(offset.x) else offset.x,
                0.0 if fmath.is_small_number(offset.y) else offset.y,
            )
        )

    def add_impulse(self, pulse):
        """Change the velocity by an impulse divided by the mass."""
        if self.moveable:
            self.velocity = self.velocity + pulse / self.mass

    def set_moveable(self, moveable):
        """Allow or forbid movement; forbidding stops the body."""
        self.moveable = moveable
        if not moveable:
            self.velocity = ZERO_VECTOR

    def set_rotatable(self, rotatable):
        """Allow or forbid rotation; forbidding stops the spin."""
        self.rotatable = rotatable
        if not rotatable:
            self.angular_velocity = 0.0

    def register_dont_destroy(self):
        """Keep this body across level changes."""
        world = self.world
        if world is not None:
            world.overall_rigids.add(self)

    def restrict_velocity(self, impact_normal, material, another=None, is_stay=False):
        """Resolve the velocity against a contact with the given normal."""
        tangent = Vector2(impact_normal.y, -impact_normal.x)
        normal_velocity = project_vector(self.velocity, impact_normal)
        tangent_velocity = project_vector(self.velocity, tangent)

        friction = material.friction
        bounciness = fmath.clamp(material.bounciness, 0.0, 1.0)

        if another is None or not another.moveable:
            if dot_product(self.velocity, impact_normal) < 0:
                multiplier = 1.0 - normal_velocity.size() * friction * fmath.inv_sqrt(
                    tangent_velocity.size_squared()
                )
                multiplier = fmath.clamp(multiplier, 0.0, 1.0)
                bounce = ZERO_VECTOR if is_stay else normal_velocity
                self.velocity = tangent_velocity * multiplier - bounciness * bounce
            return

        other_normal = project_vector(another.velocity, impact_normal)
        other_tangent = project_vector(another.velocity, tangent)
        if dot_product(normal_velocity - other_normal, impact_normal) >= 0:
            return

        total = self.mass + another.mass
        new_normal = (
            (self.mass - bounciness * another.mass) * normal_velocity
            + (1 + bounciness) * another.mass * other_normal
        ) / total
        new_other = (
            (another.mass - bounciness * self.mass) * other_normal
            + (1 + bounciness) * self.mass * normal_velocity
        ) / total

        self.velocity = new_normal + tangent_velocity
        another.velocity = new_other + other_tangent