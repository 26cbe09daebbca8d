"""Steering tuning."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SteeringConfig:
    """Immutable tuning for idle steering.

    Attributes:
        max_speed: Speed cap after all forces, px/s. Also the base of
            seek/flee nudges.
        walk_interval_ms: Base time between random-walk decisions.
        walk_jitter_ms: Uniform extra time added to each interval.
        move_probability: Chance a decision starts a walk instead of a rest.
        min_walk_speed: Lower bound of a new walk speed, px/s.
        max_walk_speed: Upper bound of a new walk speed, px/s.
        edge_margin: Distance from a canvas edge where pushback starts.
        edge_force: Velocity added per tick away from a near edge.
        avoidance_radius: Extra reach around obstacles where repulsion acts.
        avoidance_force: Repulsion at full penetration of the avoidance zone.
    """

    max_speed: float = 100.0
    walk_interval_ms: float = 1000.0
    walk_jitter_ms: float = 2000.0
    move_probability: float = 0.7
    min_walk_speed: float = 50.0
    max_walk_speed: float = 100.0
    edge_margin: float = 50.0
    edge_force: float = 100.0
    avoidance_radius: float = 80.0
    avoidance_force: float = 200.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.move_probability <= 1.0:
            raise ValueError("move_probability must be within [0, 1]")
        if self.max_speed <= 0:
            raise ValueError("max_speed must be positive")
        if self.avoidance_radius <= 0:
            raise ValueError("avoidance_radius must be positive")
        if self.min_walk_speed > self.max_walk_speed:
            raise ValueError("min_walk_speed must not exceed max_walk_speed")
