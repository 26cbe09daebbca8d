"""Circle vs axis-aligned rectangle contact and bounce response.

Rectangles are given by their top-left corner and (width, height), which
is how the widget layer reports them.
"""
from __future__ import annotations

import math
import random as _random
from dataclasses import dataclass

from ranch_physics import vec
from ranch_physics.vec import Vec


@dataclass(frozen=True)
class Contact:
    """Overlap between a circle and a rectangle.

    ``normal`` points out of the rectangle toward the circle. ``embedded``
    is set when the circle centre lies on or inside the rectangle, in which
    case the normal is the face of minimum penetration.
    """

    normal: Vec
    depth: float
    embedded: bool = False


def nearest_point(point: Vec, rect_pos: Vec, rect_size: Vec) -> Vec:
    """Closest point of the rectangle (boundary or interior) to ``point``."""
    left, top = rect_pos
    right = left + rect_size[0]
    bottom = top + rect_size[1]
    return (
        max(left, min(point[0], right)),
        max(top, min(point[1], bottom)),
    )


def distance_to_rect(point: Vec, rect_pos: Vec, rect_size: Vec) -> tuple[float, Vec]:
    """Return (distance, nearest point). Distance is 0 inside the rectangle."""
    closest = nearest_point(point, rect_pos, rect_size)
    return vec.distance(point, closest), closest


def circle_vs_rect(
    center: Vec,
    radius: float,
    rect_pos: Vec,
    rect_size: Vec,
) -> Contact | None:
    """Detect circle/rectangle overlap. Touching is not a collision."""
    closest = nearest_point(center, rect_pos, rect_size)
    offset = vec.sub(center, closest)
    dist_sq = vec.magnitude_sq(offset)

    if dist_sq >= radius * radius:
        return None

    if dist_sq == 0.0:
        # Centre is inside: leave through the nearest face.
        left, top = rect_pos
        faces = (
            (center[0] - left, (-1.0, 0.0)),
            ((left + rect_size[0]) - center[0], (1.0, 0.0)),
            (center[1] - top, (0.0, -1.0)),
            ((top + rect_size[1]) - center[1], (0.0, 1.0)),
        )
        min_pen, normal = min(faces, key=lambda f: f[0])
        return Contact(normal=normal, depth=radius + min_pen, embedded=True)

    dist = math.sqrt(dist_sq)
    normal = vec.scale(offset, 1.0 / dist)
    return Contact(normal=normal, depth=radius - dist)


Limits = tuple[Vec, Vec]


def _within(point: Vec, limits: Limits) -> bool:
    (lo_x, lo_y), (hi_x, hi_y) = limits
    return lo_x <= point[0] <= hi_x and lo_y <= point[1] <= hi_y


def _face_exits(center: Vec, clearance: float, rect_pos: Vec, rect_size: Vec) -> list[tuple[Vec, Vec]]:
    """(exit point, outward normal) for leaving straight through each face."""
    left, top = rect_pos
    right = left + rect_size[0]
    bottom = top + rect_size[1]
    return [
        ((left - clearance, center[1]), (-1.0, 0.0)),
        ((right + clearance, center[1]), (1.0, 0.0)),
        ((center[0], top - clearance), (0.0, -1.0)),
        ((center[0], bottom + clearance), (0.0, 1.0)),
    ]


def bounce_off_rect(
    center: Vec,
    velocity: Vec,
    radius: float,
    rect_pos: Vec,
    rect_size: Vec,
    *,
    separation: float,
    impulse: float,
    min_speed: float,
    embedded_speed: float,
    rng: _random.Random | None = None,
    limits: Limits | None = None,
) -> tuple[Vec, Vec] | None:
    """Push a circle out of a rectangle and bounce its velocity.

    Returns the corrected (center, velocity), or None when there is no
    overlap. The circle ends ``separation`` beyond touching distance.

    ``limits`` is the ((min_x, min_y), (max_x, max_y)) box the centre will
    later be clamped to. When the usual push-out lands outside it (an
    obstacle flush with a canvas edge), the circle leaves through the
    nearest face whose exit point is reachable instead. If no face is
    reachable the usual push-out is kept.
    """
    contact = circle_vs_rect(center, radius, rect_pos, rect_size)
    if contact is None:
        return None

    normal = contact.normal
    pushed = vec.add(center, vec.scale(normal, contact.depth + separation))
    if limits is not None and not _within(pushed, limits):
        exits = [
            (vec.distance(center, point), point, face)
            for point, face in _face_exits(center, radius + separation, rect_pos, rect_size)
            if _within(point, limits)
        ]
        if exits:
            _, pushed, normal = min(exits, key=lambda e: e[0])
    center = pushed

    if contact.embedded:
        r = rng if rng is not None else _random
        base = math.atan2(normal[1], normal[0])
        angle = base + r.uniform(-math.pi / 2, math.pi / 2)
        return center, vec.from_angle(angle, embedded_speed)

    if vec.dot(velocity, normal) < 0.0:
        velocity = vec.reflect(velocity, normal)
    velocity = vec.add(velocity, vec.scale(normal, impulse))

    speed = vec.magnitude(velocity)
    if 0.0 < speed < min_speed:
        velocity = vec.scale(velocity, min_speed / speed)
    return center, velocity
