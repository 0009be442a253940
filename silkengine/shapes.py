"""Circles and polygons used for collision geometry."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from . import fmath
from .box import Box2
from .vector import (
    UNIT_VECTOR,
    ZERO_VECTOR,
    Vector2,
    cross_product,
    dot_product,
    rotate_vector,
)


@dataclass
class Circle:
    """A circle whose radius follows the scale it is updated with."""

    center: Vector2 = field(default=ZERO_VECTOR)
    radius: float = 0.0
    init_radius: float = field(init=False)
    rotational_inertia: float = 0.0

    def __post_init__(self):
        self.init_radius = self.radius

    def extents(self):
        """Bounding box of the circle."""
        offset = Vector2(self.radius, self.radius)
        return Box2(self.center - offset, self.center + offset)

    def update_transform(self, new_center, new_scale=UNIT_VECTOR):
        """Move the circle and rescale its radius from the initial one."""
        self.center = new_center
        if new_scale != UNIT_VECTOR:
            self.radius = self.init_radius * math.sqrt(new_scale.x * new_scale.y)


@dataclass(frozen=True)
class PolygonContact:
    """Result of a polygon intersection: penetration depth and its normal."""

    depth: float
    normal: Vector2


def _corner_turns(vertices):
    """Cross product at each vertex of a closed polygon, in order."""
    count = len(vertices)
    for index, current in enumerate(vertices):
        previous = vertices[index - 1]
        following = vertices[(index + 1) % count]
        yield cross_product(previous - current, current - following)


def is_convex(vertices):
    """Whether the ordered vertices form a convex polygon."""
    if len(vertices) < 3:
        return False
    signs = {turn > 0 for turn in _corner_turns(vertices)}
    return len(signs) == 1


def arithmetic_mean(vertices):
    """Arithmetic centre of a set of points."""
    if not vertices:
        raise ValueError("cannot take the mean of no vertices")
    total = ZERO_VECTOR
    for vertex in vertices:
        total = total + vertex
    return total / len(vertices)


def simplify_vertices(vertices):
    """Drop vertices lying on an edge and centre the rest on the origin."""
    if len(vertices) < 3:
        return []
    kept = [
        vertex
        for vertex, turn in zip(vertices, _corner_turns(vertices))
        if not fmath.is_small_number(turn)
    ]
    if not kept:
        return []
    offset = arithmetic_mean(kept)
    return [vertex - offset for vertex in kept]


def _project(vertices, axis):
    projections = [dot_product(vertex, axis) for vertex in vertices]
    return min(projections), max(projections)


def _edge_axes(vertices):
    previous = vertices[-1:] + vertices[:-1]
    for start, end in zip(previous, vertices):
        edge = end - start
        yield Vector2(-edge.y, edge.x).get_safe_normal()


class Polygon:
    """A polygon given by vertices relative to its mean, placed in the world."""

    def __init__(self, vertices=(), mean=ZERO_VECTOR):
        vertices = list(vertices)
        if vertices:
            self.init_vertices = simplify_vertices(vertices)
            self.convex = is_convex(self.init_vertices)
        else:
            self.init_vertices = []
            self.convex = True
        self.vertices = [ZERO_VECTOR] * len(self.init_vertices)
        self.mean = mean
        self.valid = len(vertices) >= 3

    def __repr__(self):
        return f"Polygon(vertices={self.vertices!r}, mean={self.mean!r})"

    def update_transform(self, new_mean, new_degree=0.0, new_scale=UNIT_VECTOR):
        """Place the polygon at a mean, rotated and scaled from its initial shape."""
        self.mean = new_mean
        vertices = self.init_vertices
        if new_scale != UNIT_VECTOR:
            vertices = [vertex * new_scale for vertex in vertices]
        if new_degree != 0:
            vertices = [rotate_vector(new_degree, vertex) for vertex in vertices]
        self.vertices = [vertex + new_mean for vertex in vertices]

    def extents(self):
        """Bounding box of the placed vertices."""
        if not self.vertices:
            raise ValueError("polygon has no vertices")
        xs = [vertex.x for vertex in self.vertices]
        ys = [vertex.y for vertex in self.vertices]
        return Box2(Vector2(min(xs), min(ys)), Vector2(max(xs), max(ys)))

    def is_inside(self, point):
        """Whether a point lies inside, by counting crossings of an upward ray."""
        if not self.valid:
            return False
        crossings = 0
        previous = self.vertices[-1:] + self.vertices[:-1]
        for start, end in zip(previous, self.vertices):
            if fmath.is_small_number(end.x - start.x):
                continue
            y = (end.y - start.y) / (end.x - start.x) * (point.x - end.x) + end.y
            if min(end.y, start.y) < y <= max(end.y, start.y) and y > point.y:
                crossings += 1
        return crossings % 2 == 1

    def intersects(self, other):
        """Contact with another polygon, or None when they do not overlap."""
        if not (self.valid and other.valid and self.vertices and other.vertices):
            return None
        if not (self.convex and other.convex):
            if any(self.is_inside(vertex) for vertex in other.vertices):
                return PolygonContact(0.0, ZERO_VECTOR)
            return None

        depth = math.inf
        normal = ZERO_VECTOR
        towards_other = other.mean - self.mean
        for polygon in (self, other):
            for axis in _edge_axes(polygon.vertices):
                min_a, max_a = _project(self.vertices, axis)
                min_b, max_b = _project(other.vertices, axis)
                if min_a >= max_b or min_b >= max_a:
                    return None
                axis_depth = min(max_b - min_a, max_a - min_b)
                if axis_depth < depth:
                    depth = axis_depth
                    normal = axis if dot_product(axis, towards_other) > 0 else -axis
        return PolygonContact(depth, normal)