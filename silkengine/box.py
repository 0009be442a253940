"""Axis-aligned rectangles."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import ZERO_VECTOR, Vector2


@dataclass(frozen=True)
class Box2:
    """An axis-aligned box; an inverted or flat box collapses to the zero box."""

    min: Vector2 = field(default=ZERO_VECTOR)
    max: Vector2 = field(default=ZERO_VECTOR)

    def __post_init__(self):
        if self.min.x >= self.max.x or self.min.y >= self.max.y:
            object.__setattr__(self, "min", ZERO_VECTOR)
            object.__setattr__(self, "max", ZERO_VECTOR)

    @classmethod
    def _unchecked(cls, lower, upper):
        box = object.__new__(cls)
        object.__setattr__(box, "min", lower)
        object.__setattr__(box, "max", upper)
        return box

    def center(self):
        """Centre point of the box."""
        return (self.min + self.max) * 0.5

    def size(self):
        """Width and height as a vector."""
        return self.max - self.min

    def half(self):
        """Half of the size."""
        return 0.5 * (self.max - self.min)

    def area(self):
        """Area of the box."""
        return (self.max.x - self.min.x) * (self.max.y - self.min.y)

    def is_inside(self, point):
        """Whether the point lies strictly inside."""
        return self.min.x < point.x < self.max.x and self.min.y < point.y < self.max.y

    def is_inside_or_on(self, point):
        """Whether the point lies inside or on the edge."""
        return self.min.x <= point.x <= self.max.x and self.min.y <= point.y <= self.max.y

    def is_on(self, point):
        """Whether the point lies exactly on the edge."""
        return not self.is_inside(point) and self.is_inside_or_on(point)

    def intersects(self, other):
        """Whether two boxes touch or overlap."""
        if self.min.x > other.max.x or other.min.x > self.max.x:
            return False
        if self.min.y > other.max.y or other.min.y > self.max.y:
            return False
        return True

    def overlaps(self, other):
        """The overlapping box, or the empty box when there is none."""
        if not self.intersects(other):
            return EMPTY_BOX
        lower = Vector2(max(self.min.x, other.min.x), max(self.min.y, other.min.y))
        upper = Vector2(min(self.max.x, other.max.x), min(self.max.y, other.max.y))
        return Box2(lower, upper)

    def closest_point_to(self, point):
        """Point of the box closest to the given point."""
        x, y = point.x, point.y
        if x < self.min.x:
            x = self.min.x
        elif x > self.max.x:
            x = self.max.x
        if y < self.min.y:
            y = self.min.y
        elif y > self.max.y:
            y = self.max.y
        return Vector2(x, y)


EMPTY_BOX = Box2()


def box_from_center(center, width, height):
    """Box of the given width and height centred on a point, unchecked."""
    half = Vector2(width * 0.5, height * 0.5)
    return Box2._unchecked(center - half, center + half)