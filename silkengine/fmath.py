"""Scalar math helpers used throughout the engine."""

from __future__ import annotations

import math
import random

PI = 3.14159265
SMALL_NUMBER = 1.0e-8
KINDA_SMALL_NUMBER = 1.0e-4
BIG_NUMBER = 3.4e38
EULERS_NUMBER = 2.71828183
GOLDEN_RATIO = 1.61803399

_ATAN_COEFFICIENTS = (
    7.2128853633444123e-03,
    -3.5059680836411644e-02,
    8.1675882859940430e-02,
    -1.3374657325451267e-01,
    1.9856563505717162e-01,
    -3.3324998579202170e-01,
    1.0,
)


def rand_int(lower, upper):
    """Return a random integer in the closed range, in either bound order."""
    if lower > upper:
        lower, upper = upper, lower
    return random.randint(lower, upper)


def rand_real(lower, upper):
    """Return a random real number between the bounds, in either order."""
    if lower > upper:
        lower, upper = upper, lower
    return random.uniform(lower, upper)


def rand_perc():
    """Return a random number in [0, 1)."""
    return random.random()


def clamp(value, lower, upper):
    """Limit value to the range spanned by lower and upper, in either order."""
    low, high = min(lower, upper), max(lower, upper)
    return min(max(value, low), high)


def mid(a, b, c):
    """Return the median of three numbers."""
    return a + b + c - max(a, b, c) - min(a, b, c)


def inv_sqrt(value):
    """Return 1/sqrt(value); zero maps to zero and negatives to NaN."""
    if value == 0:
        return 0.0
    if value < 0:
        return math.nan
    return 1.0 / math.sqrt(value)


def is_small_number(value):
    """Whether the magnitude of value is within SMALL_NUMBER."""
    return abs(value) <= SMALL_NUMBER


def fmod(a, b):
    """Floating remainder of a / b, or zero when b is negligibly small."""
    if is_small_number(b):
        return 0.0
    return math.fmod(a, b)


def radian_to_degree(radian):
    """Convert radians to degrees."""
    return radian * 180 / PI


def degree_to_radian(degree):
    """Convert degrees to radians."""
    return degree * PI / 180


def normalize_degree(angle):
    """Map an angle into the range [0, 360)."""
    ang = fmod(angle, 360.0)
    return ang if ang >= 0 else ang + 360


def lerp(a, b, alpha):
    """Linear interpolation from a to b; works for numbers and vectors."""
    return a + alpha * (b - a)


def smooth_step(a, b, x):
    """Hermite interpolation of x between the bounds a and b, in [0, 1]."""
    if x < a:
        return 0
    if x >= b:
        return 1
    t = (x - a) / (b - a)
    return t * t * (3.0 - 2.0 * t)


def atan2(y, x):
    """Arctangent of y/x using a minimax polynomial approximation."""
    abs_x = abs(x)
    abs_y = abs(y)
    y_bigger = abs_y > abs_x
    t0 = abs_y if y_bigger else abs_x
    t1 = abs_x if y_bigger else abs_y
    if t0 == 0:
        return 0.0

    t3 = t1 / t0
    t4 = t3 * t3
    poly = _ATAN_COEFFICIENTS[0]
    for coefficient in _ATAN_COEFFICIENTS[1:]:
        poly = poly * t4 + coefficient
    t3 = poly * t3

    if y_bigger:
        t3 = 0.5 * PI - t3
    if x < 0:
        t3 = PI - t3
    if y < 0:
        t3 = -t3
    return t3