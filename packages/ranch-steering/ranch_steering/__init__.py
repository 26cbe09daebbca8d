"""ranch-steering - Idle wandering and avoidance for ranch pets."""
from __future__ import annotations

from ranch_steering.config import SteeringConfig
from ranch_steering.forces import (
    avoid_edges,
    avoid_obstacles,
    cap_speed,
    flee,
    random_walk,
    seek,
    steer,
)
from ranch_steering.systems import make_steering_system

__all__ = [
    "SteeringConfig",
    "avoid_edges",
    "avoid_obstacles",
    "cap_speed",
    "flee",
    "make_steering_system",
    "random_walk",
    "seek",
    "steer",
]
