"""Two-dimensional vectors."""

from __future__ import annotations

from dataclasses import dataclass

from . import fmath


@dataclass(frozen=True, slots=True)
class Vector2:
    """An immutable 2D vector with component-wise arithmetic."""

    x: float = 0.0
    y: float = 0.0

    def size_squared(self):
        """Sum of the squared components."""
        return self.x * self.x + self.y * self.y

    def size(self):
        """Length of the vector."""
        return (self.x * self.x + self.y * self.y) ** 0.5

    def get_abs(self):
        """Vector with the absolute value of each component."""
        return Vector2(abs(self.x), abs(self.y))

    def zeroed(self, tolerance=fmath.KINDA_SMALL_NUMBER):
        """Copy with components smaller than tolerance set to zero."""
        return Vector2(
            0 if abs(self.x) < tolerance else self.x,
            0 if abs(self.y) < tolerance else self.y,
        )

    def get_safe_normal(self, tolerance=fmath.SMALL_NUMBER):
        """Unit vector in the same direction, or zero if too short."""
        square_sum = self.size_squared()
        if square_sum > tolerance:
            return self * fmath.inv_sqrt(square_sum)
        return ZERO_VECTOR

    def clamp_axes(self, min_value, max_value):
        """Clamp each component to the given range."""
        return Vector2(
            fmath.clamp(self.x, min_value, max_value),
            fmath.clamp(self.y, min_value, max_value),
        )

    def is_nearly_zero(self, tolerance=fmath.KINDA_SMALL_NUMBER):
        """Whether both components are within tolerance of zero."""
        return abs(self.x) <= tolerance and abs(self.y) <= tolerance

    def equals(self, other, tolerance=fmath.KINDA_SMALL_NUMBER):
        """Whether both components are within tolerance of another vector."""
        return abs(self.x - other.x) <= tolerance and abs(self.y - other.y) <= tolerance

    def __str__(self):
        return f"({int(self.x)},{int(self.y)})"

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other):
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self):
        return Vector2(-self.x, -self.y)

    def __mul__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x * other.x, self.y * other.y)
        return Vector2(self.x * other, self.y * other)

    def __rmul__(self, other):
        return Vector2(self.x * other, self.y * other)

    def __truediv__(self, other):
        if isinstance(other, Vector2):
            return Vector2(self.x / other.x, self.y / other.y)
        return Vector2(self.x / other, self.y / other)

    def __getitem__(self, index):
        return self.x if fmath.clamp(index, 0, 1) == 0 else self.y

    def __or__(self, other):
        return self.x * other.x + self.y * other.y

    def __xor__(self, other):
        return self.x * other.y - other.x * self.y

    def __gt__(self, other):
        return self.x > other.x and self.y > other.y

    def __lt__(self, other):
        return self.x < other.x and self.y < other.y

    def __ge__(self, other):
        return self.x >= other.x and self.y >= other.y

    def __le__(self, other):
        return self.x <= other.x and self.y <= other.y


ZERO_VECTOR = Vector2(0.0, 0.0)
UNIT_VECTOR = Vector2(1.0, 1.0)


def dot_product(v1, v2):
    """Dot product of two vectors."""
    return v1 | v2


def cross_product(v1, v2):
    """Z component of the cross product of two vectors."""
    return v1 ^ v2


def dist_squared(v1, v2):
    """Squared distance between two points."""
    return (v1 - v2).size_squared()


def distance(v1, v2):
    """Distance between two points."""
    return dist_squared(v1, v2) ** 0.5


def vector_to_degree(v):
    """Angle of a vector in degrees, with the y axis pointing down."""
    if v == ZERO_VECTOR:
        return 0.0
    return fmath.radian_to_degree(fmath.atan2(-v.y, v.x))


def degree_to_vector(angle):
    """Unit vector for an angle in degrees, with the y axis pointing down."""
    import math

    radian = -fmath.degree_to_radian(angle)
    return Vector2(math.cos(radian), math.sin(radian))


def rotate_vector(angle, v):
    """Rotate a vector by an angle in degrees."""
    import math

    radian = fmath.degree_to_radian(angle)
    s, c = math.sin(radian), math.cos(radian)
    return Vector2(v.x * c - v.y * s, v.x * s + v.y * c)


def rotate_around(angle, center, p):
    """Rotate point p about center by an angle in degrees."""
    return rotate_vector(angle, p - center) + center


def project_vector(u, v):
    """Project u onto the line of v."""
    scalar = dot_product(u, v) * fmath.inv_sqrt(v.size_squared())
    return v.get_safe_normal() * scalar