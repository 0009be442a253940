"""Rays and line segments in the plane."""

from __future__ import annotations

import math

from . import fmath
from .vector import UNIT_VECTOR, ZERO_VECTOR, Vector2, cross_product, dot_product
from .vector import dist_squared as _dist_squared


class Ray2:
    """A ray from an origin along a unit direction."""

    __slots__ = ("origin", "direction")
    __hash__ = None

    def __init__(self, origin=ZERO_VECTOR, direction=UNIT_VECTOR):
        self.origin = origin
        self.direction = direction.get_safe_normal()

    def __repr__(self):
        return f"Ray2(origin={self.origin!r}, direction={self.direction!r})"

    def __eq__(self, other):
        if not isinstance(other, Ray2):
            return NotImplemented
        return self.origin == other.origin and self.direction.equals(other.direction)

    def point_at(self, parameter):
        """Point at a distance along the ray."""
        return self.origin + parameter * self.direction

    def parameter(self, point):
        """Signed distance from the origin to the projection of a point."""
        return dot_product(point - self.origin, self.direction)

    def is_on(self, point):
        """Whether the point lies on the ray."""
        if point == self.origin:
            return True
        return fmath.is_small_number(self.dist_squared(point))

    def dist_squared(self, point):
        """Squared distance from a point to the ray."""
        return _dist_squared(self.closest_point(point), point)

    def dist(self, point):
        """Distance from a point to the ray."""
        return math.sqrt(self.dist_squared(point))

    def closest_point(self, point):
        """Point on the ray closest to the given point."""
        parameter = self.parameter(point)
        if parameter < 0:
            return self.origin
        return self.point_at(parameter)


class Segment2:
    """A segment between two points, held as two opposing rays."""

    __slots__ = ("ray1", "ray2")
    __hash__ = None

    def __init__(self, start, end):
        self.ray1 = Ray2(start, end - start)
        self.ray2 = Ray2(end, start - end)

    @property
    def start(self):
        return self.ray1.origin

    @property
    def end(self):
        return self.ray2.origin

    def __repr__(self):
        return f"Segment2({self.start!r}, {self.end!r})"

    def __eq__(self, other):
        if not isinstance(other, Segment2):
            return NotImplemented
        return {self.start, self.end} == {other.start, other.end}

    def _between(self, point):
        return self.ray1.parameter(point) >= 0 and self.ray2.parameter(point) >= 0

    def is_on(self, point):
        """Whether the point lies on the segment."""
        return self.ray1.is_on(point) and self.ray2.is_on(point)

    def dist_squared(self, point):
        """Squared distance from a point to the segment."""
        if self._between(point):
            return self.ray1.dist_squared(point)
        return min(_dist_squared(point, self.start), _dist_squared(point, self.end))

    def dist(self, point):
        """Distance from a point to the segment."""
        return math.sqrt(self.dist_squared(point))

    def closest_point(self, point):
        """Point on the segment closest to the given point."""
        if self._between(point):
            return self.ray1.point_at(self.ray1.parameter(point))
        if self.ray1.parameter(point) < 0:
            return self.start
        return self.end

    def intersects(self, other):
        """Whether two segments touch or cross."""
        axis1 = Vector2(-self.ray1.direction.y, self.ray1.direction.x)
        a = dot_product(self.start, axis1)
        projections = (dot_product(other.start, axis1), dot_product(other.end, axis1))
        if a > max(projections) or min(projections) > a:
            return False

        axis2 = Vector2(-other.ray1.direction.y, other.ray1.direction.x)
        b = dot_product(other.start, axis2)
        projections = (dot_product(self.start, axis2), dot_product(self.end, axis2))
        if min(projections) > b or b > max(projections):
            return False

        if fmath.is_small_number(cross_product(self.ray1.direction, other.ray1.direction)):
            length = self.ray1.parameter(self.end)
            along = (self.ray1.parameter(other.start), self.ray1.parameter(other.end))
            return max(along) >= 0 and min(along) <= length
        return True