"""Colliders: circle and box shapes that detect and resolve contacts."""

from __future__ import annotations

import enum

from . import fmath
from .box import box_from_center
from .components import SceneComponent
from .delegate import MulticastDelegate
from .rigidbody import RigidBody
from .structs import HitResult, PhysicsMaterial, combine_materials
from .vector import ZERO_VECTOR, Vector2, dist_squared, distance
from .world import zone_index

DEFAULT_COLLISION_TYPE = "Default"


class ColliderShape(enum.Enum):
    """Geometric shape of a collider."""

    CIRCLE = 0
    BOX = 1
    POLYGON = 2


class CollisionMode(enum.Enum):
    """How a collider takes part in collisions."""

    NONE = 0
    TRIGGER = 1
    COLLISION = 2


def _corners(rect):
    center = rect.center()
    half = rect.half()
    return center - half, center + half


def _circle_and_box(c1, c2):
    if c1.shape is ColliderShape.CIRCLE:
        return c1, c2
    return c2, c1


def _judge_circle_circle(c1, c2):
    reach = c1.rect().half().x + c2.rect().half().x
    return dist_squared(c1.world_position(), c2.world_position()) <= reach * reach


def _judge_circle_box(c1, c2):
    circle, box = _circle_and_box(c1, c2)
    radius = circle.rect().half().x
    position = circle.world_position()
    rect = box.rect()
    if rect.is_inside_or_on(position):
        return True
    return dist_squared(position, rect.closest_point_to(position)) <= radius * radius


def _judge_box_box(c1, c2):
    return c1.rect().intersects(c2.rect())


def _hit_circle_circle(c1, c2):
    normal = (c2.world_position() - c1.world_position()).get_safe_normal()
    point = c1.world_position() + normal * c1.rect().half().x
    return HitResult(point, normal, c2.owner, c2)


def _hit_circle_box(c1, c2):
    circle, box = _circle_and_box(c1, c2)
    position = circle.world_position()
    rect = box.rect()
    if rect.is_inside_or_on(position):
        point = position
        normal = (c2.world_position() - c1.world_position()).get_safe_normal()
    else:
        point = rect.closest_point_to(position)
        normal = (point - position).get_safe_normal()
    sign = 1.0 if c1 is circle else -1.0
    return HitResult(point, normal * sign, c2.owner, c2)


def _hit_box_box(c1, c2):
    overlap = c1.rect().overlaps(c2.rect())
    size = overlap.size()
    p1, p2 = c1.world_position(), c2.world_position()
    if size.x >= size.y:
        normal = Vector2(0.0, -1.0) if p1.y - p2.y > 0 else Vector2(0.0, 1.0)
    else:
        normal = Vector2(-1.0, 0.0) if p1.x - p2.x > 0 else Vector2(1.0, 0.0)
    return HitResult(overlap.center(), normal, c2.owner, c2)


def _separate(c1, c2, normal, separation):
    separation -= fmath.KINDA_SMALL_NUMBER
    if separation <= 0:
        return
    first, second = c1.is_kinematics(), c2.is_kinematics()
    if first and second:
        c1.owner.add_position(-normal * (separation * 0.5))
        c2.owner.add_position(normal * (separation * 0.5))
    elif first:
        c1.owner.add_position(-normal * separation)
    elif second:
        c2.owner.add_position(normal * separation)


def _adjust_circle_circle(c1, c2, hit):
    separation = (
        c1.rect().half().x
        + c2.rect().half().x
        - distance(c1.world_position(), c2.world_position())
    )
    _separate(c1, c2, hit.impact_normal, separation)


def _adjust_circle_box(c1, c2, hit):
    circle, _ = _circle_and_box(c1, c2)
    separation = circle.rect().half().x - distance(hit.impact_point, circle.world_position())
    _separate(c1, c2, hit.impact_normal, separation)


def _adjust_box_box(c1, c2, hit):
    size = c1.rect().overlaps(c2.rect()).size()
    normal = hit.impact_normal
    separation = size.x * abs(normal.x) + size.y * abs(normal.y)
    _separate(c1, c2, normal, separation)


_CIRCLE = frozenset({ColliderShape.CIRCLE})
_MIXED = frozenset({ColliderShape.CIRCLE, ColliderShape.BOX})
_BOX = frozenset({ColliderShape.BOX})

_JUDGES = {_CIRCLE: _judge_circle_circle, _MIXED: _judge_circle_box, _BOX: _judge_box_box}
_HITS = {_CIRCLE: _hit_circle_circle, _MIXED: _hit_circle_box, _BOX: _hit_box_box}
_ADJUSTS = {_CIRCLE: _adjust_circle_circle, _MIXED: _adjust_circle_box, _BOX: _adjust_box_box}


def _dispatch(table, c1, c2):
    key = frozenset((c1.shape, c2.shape))
    try:
        return table[key]
    except KeyError:
        raise ValueError(
            f"no collision handling between {c1.shape.name} and {c2.shape.name}"
        ) from None


def collision_test_circle_to_circle(c1, c2):
    """Whether two circular colliders touch."""
    return _judge_circle_circle(c1, c2)


class Collider(SceneComponent):
    """Base collider: tracks contacts, zones and collision events."""

    def __init__(self):
        self._owner = None
        self.collisions = set()
        super().__init__()
        self.material = PhysicsMaterial()
        self.shape = ColliderShape.CIRCLE
        self.bounds = box_from_center(ZERO_VECTOR, 0.0, 0.0)
        self.layer = 0
        self.collision_type = DEFAULT_COLLISION_TYPE
        self.mode = CollisionMode.TRIGGER
        self.tag = ""
        self.rigid_attached = None
        self._zone_min = None
        self._zone_max = None

        self.on_component_begin_overlap = MulticastDelegate()
        self.on_component_end_overlap = MulticastDelegate()
        self.on_component_overlap = MulticastDelegate()
        self.on_component_hit = MulticastDelegate()
        self.on_component_stay = MulticastDelegate()

    @property
    def owner(self):
        return self._owner

    @owner.setter
    def owner(self, value):
        old_world = None if self._owner is None else self._owner.world
        if old_world is not None:
            old_world.colliders.discard(self)
        self._owner = value
        new_world = None if value is None else value.world
        if new_world is not None:
            new_world.colliders.add(self)

    def begin_play(self):
        """Attach to the owner's rigid body, if it has one."""
        super().begin_play()
        if self.owner is None:
            return
        self.rigid_attached = self.owner.get_component_by_class(RigidBody)
        if self.rigid_attached is not None:
            self.rigid_attached.colliders.add(self)

    def end_play(self):
        """Leave the world, the rigid body and every contact."""
        super().end_play()
        if self.rigid_attached is not None:
            self.rigid_attached.colliders.discard(self)
        world = self.world
        if world is not None:
            world.colliders.discard(self)
        self.clear()

    def update(self, delta_time):
        """Broadcast ongoing contacts, resolve solid ones and refresh zones."""
        super().update(delta_time)
        if self.mode is CollisionMode.NONE or not self.enabled:
            return
        for another in list(self.collisions):
            if self._both_solid(another):
                hit = self.collision_hit(another)
                self.on_component_stay.broadcast(
                    self, another, another.owner, -hit.impact_normal, hit
                )
                another.on_component_stay.broadcast(
                    another, self, self.owner, hit.impact_normal, hit.mirrored(self.owner, self)
                )
                self.collision_adjust(another, hit)
            else:
                self.on_component_overlap.broadcast(self, another, another.owner)
                another.on_component_overlap.broadcast(another, self, self.owner)
        self.collider_zone_tick()

    def deactivate(self):
        """Disable the collider and queue it to be cleared from the world."""
        super().deactivate()
        world = self.world
        if world is not None:
            world.colliders_to_clear.add(self)

    def get_collisions(self, collision_type):
        """Owners of the touching colliders of the given collision type."""
        return [another.owner for another in self.collisions if another.collision_type == collision_type]

    def set_collision_mode(self, mode):
        """Change the mode; switching to NONE queues the collider to be cleared."""
        if mode is CollisionMode.NONE and self.mode is not CollisionMode.NONE:
            world = self.world
            if world is not None:
                world.colliders_to_clear.add(self)
        self.mode = mode

    def is_collisions_empty(self):
        """Whether nothing touches this collider."""
        return not self.collisions

    def is_kinematics(self):
        """Whether the collider is attached to a moveable rigid body."""
        return self.rigid_attached is not None and self.rigid_attached.moveable

    def register_dont_destroy(self):
        """Keep this collider across level changes."""
        world = self.world
        if world is not None:
            world.overall_colliders.add(self)

    def reset_zone(self):
        """Forget the collision zones this collider was placed in."""
        self._zone_min = None
        self._zone_max = None

    def _zone_cells(self):
        if self._zone_min is None:
            return
        for column in range(self._zone_min[0], self._zone_max[0] + 1):
            for row in range(self._zone_min[1], self._zone_max[1] + 1):
                yield column, row

    def collider_zone_tick(self):
        """Move the collider into the world zones its bounds cover."""
        world = self.world
        if self.mode is CollisionMode.NONE or not self.enabled or world is None:
            return
        low, high = _corners(self.rect())
        new_min = zone_index(low.x, low.y)
        new_max = zone_index(high.x, high.y)
        if new_min == self._zone_min and new_max == self._zone_max:
            return
        for column, row in self._zone_cells():
            world.collider_zones[column][row].discard(self)
        self._zone_min, self._zone_max = new_min, new_max
        for column, row in self._zone_cells():
            world.collider_zones[column][row].add(self)

    def clear(self):
        """End every contact and remove the collider from the world zones."""
        for another in list(self.collisions):
            another.collisions.discard(self)
            self.on_component_end_overlap.broadcast(self, another, another.owner)
            another.on_component_end_overlap.broadcast(another, self, self.owner)
        self.collisions.clear()
        world = self.world
        if world is not None:
            for column, row in self._zone_cells():
                world.collider_zones[column][row].discard(self)
        self.reset_zone()

    def _mapping_allows(self, another):
        world = self.world
        manager = None if world is None else world.collision_manager
        if manager is None:
            return True
        return bool(manager(self.collision_type, another.collision_type))

    def _both_solid(self, another):
        return self.mode is CollisionMode.COLLISION and another.mode is CollisionMode.COLLISION

    def insert(self, another):
        """Record a new contact with another collider and fire its events."""
        if another in self.collisions or not self._mapping_allows(another):
            return
        if not self.collision_judge(another):
            return
        self.collisions.add(another)
        another.collisions.add(self)
        if self._both_solid(another):
            hit = self.collision_hit(another)
            self.on_component_hit.broadcast(self, another, another.owner, -hit.impact_normal, hit)
            another.on_component_hit.broadcast(
                another, self, self.owner, hit.impact_normal, hit.mirrored(self.owner, self)
            )
            if self.rigid_attached is not None:
                self.rigid_attached.restrict_velocity(
                    -hit.impact_normal,
                    combine_materials(self.material, another.material),
                    another.rigid_attached,
                )
            self.collision_adjust(another, hit)
        else:
            self.on_component_begin_overlap.broadcast(self, another, another.owner)
            another.on_component_begin_overlap.broadcast(another, self, self.owner)

    def erase(self):
        """Drop contacts with colliders that no longer touch this one."""
        for another in list(self.collisions):
            if self.collision_judge(another):
                continue
            another.collisions.discard(self)
            self.collisions.discard(another)
            self.on_component_end_overlap.broadcast(self, another, another.owner)
            another.on_component_end_overlap.broadcast(another, self, self.owner)

    def collision_judge(self, another):
        """Whether this collider touches another."""
        return _dispatch(_JUDGES, self, another)(self, another)

    def collision_hit(self, another):
        """Contact point and normal from this collider towards another."""
        return _dispatch(_HITS, self, another)(self, another)

    def collision_adjust(self, another, hit_result):
        """Push kinematic colliders apart so they no longer overlap."""
        _dispatch(_ADJUSTS, self, another)(self, another, hit_result)

    def rect(self):
        """Bounding box of the collider in world coordinates."""
        return self.bounds

    def is_mouse_over(self, point):
        """Whether a world point lies over the collider."""
        return self.rect().is_inside(point)


class CircleCollider(Collider):
    """A circular collider whose radius follows the world scale."""

    def __init__(self):
        super().__init__()
        self.shape = ColliderShape.CIRCLE
        self.radius = 0.0
        self._radius_ini = 0.0

    def update(self, delta_time):
        """Run the collider update and rescale the radius."""
        super().update(delta_time)
        scale = self.world_scale()
        self.radius = self._radius_ini * abs(scale.x * scale.y) ** 0.5

    def set_radius(self, radius):
        """Set the current radius, remembering it relative to the scale."""
        self.radius = abs(radius)
        scale = self.world_scale()
        self._radius_ini = self.radius * fmath.inv_sqrt(abs(scale.x * scale.y))

    def rect(self):
        """Square bounding the circle."""
        return box_from_center(self.world_position(), self.radius * 2, self.radius * 2)

    def is_mouse_over(self, point):
        """Whether a world point lies within the circle."""
        return distance(self.world_position(), point) <= self.radius


class BoxCollider(Collider):
    """An axis-aligned box collider whose size follows the world scale."""

    def __init__(self):
        super().__init__()
        self.shape = ColliderShape.BOX
        self.size = ZERO_VECTOR
        self._size_ini = ZERO_VECTOR

    def update(self, delta_time):
        """Run the collider update and rescale the size."""
        super().update(delta_time)
        self.size = (self._size_ini * self.world_scale()).get_abs()

    def set_size(self, size):
        """Set the current size, remembering it relative to the scale."""
        self.size = size.get_abs()
        self._size_ini = (size / self.world_scale()).get_abs()

    def rect(self):
        """The box in world coordinates."""
        return box_from_center(self.world_position(), self.size.x, self.size.y)

    def is_mouse_over(self, point):
        """Whether a world point lies strictly inside the box."""
        return self.rect().is_inside(point)