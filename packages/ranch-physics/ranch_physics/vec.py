"""2D vector helpers operating on (x, y) float tuples."""
from __future__ import annotations

import math

Vec = tuple[float, float]

ZERO: Vec = (0.0, 0.0)


def add(a: Vec, b: Vec) -> Vec:
    return (a[0] + b[0], a[1] + b[1])


def sub(a: Vec, b: Vec) -> Vec:
    return (a[0] - b[0], a[1] - b[1])


def scale(v: Vec, s: float) -> Vec:
    return (v[0] * s, v[1] * s)


def dot(a: Vec, b: Vec) -> float:
    return a[0] * b[0] + a[1] * b[1]


def magnitude_sq(v: Vec) -> float:
    return v[0] * v[0] + v[1] * v[1]


def magnitude(v: Vec) -> float:
    return math.hypot(v[0], v[1])


def normalize(v: Vec) -> Vec:
    """Unit vector along v. The zero vector is returned unchanged."""
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def distance_sq(a: Vec, b: Vec) -> float:
    return magnitude_sq(sub(a, b))


def distance(a: Vec, b: Vec) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def midpoint(a: Vec, b: Vec) -> Vec:
    return ((a[0] + b[0]) * 0.5, (a[1] + b[1]) * 0.5)


def from_angle(angle: float, length: float = 1.0) -> Vec:
    return (math.cos(angle) * length, math.sin(angle) * length)


def reflect(v: Vec, normal: Vec) -> Vec:
    """Mirror v across the plane with unit ``normal``."""
    d = 2.0 * dot(v, normal)
    return (v[0] - d * normal[0], v[1] - d * normal[1])


def clamp_magnitude(v: Vec, max_mag: float) -> Vec:
    sq = magnitude_sq(v)
    if sq <= max_mag * max_mag:
        return v
    return scale(normalize(v), max_mag)


def is_finite(v: Vec) -> bool:
    return math.isfinite(v[0]) and math.isfinite(v[1])
