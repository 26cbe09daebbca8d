"""Pet entity: kinematic state, behaviour state, and per-frame integration."""
from __future__ import annotations

import logging
import random as _random
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable

from ranch.types import EntityId

from ranch_physics import vec
from ranch_physics.collision import bounce_off_rect
from ranch_physics.obstacles import Obstacle
from ranch_physics.vec import Vec

logger = logging.getLogger(__name__)


class BehaviorState(Enum):
    """What a pet is doing. INTERACTING is owned by the interaction layer."""

    IDLE = "idle"
    MOVING = "moving"
    INTERACTING = "interacting"


@dataclass(frozen=True)
class PetConfig:
    """Physical tuning shared by every pet on a ranch.

    Attributes:
        size: Sprite diameter in px; also the bounds-clamp margin.
        friction: Velocity multiplier applied once per tick. This is a
            per-frame factor, so damping is stronger at higher frame rates.
        stop_epsilon: Velocity is zeroed when both components fall below it.
        interaction_cooldown_ms: Cooldown applied when an interaction ends.
        separation: Extra clearance left after pushing out of an obstacle.
        bounce_impulse: Speed added along the contact normal on a bounce.
        min_bounce_speed: Nonzero post-bounce speeds are lifted to this.
        embedded_bounce_speed: Speed given when the centre ends up inside
            an obstacle and a random outward heading is picked.
    """

    size: float = 32.0
    friction: float = 0.95
    stop_epsilon: float = 0.1
    interaction_cooldown_ms: float = 2000.0
    separation: float = 1.0
    bounce_impulse: float = 40.0
    min_bounce_speed: float = 60.0
    embedded_bounce_speed: float = 80.0

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("size must be positive")
        if not 0.0 <= self.friction <= 1.0:
            raise ValueError("friction must be within [0, 1]")


@dataclass(frozen=True)
class CurrentInteraction:
    """The pet's side of an active interaction."""

    kind: Enum
    partner_id: EntityId
    started_at: float


@dataclass
class Pet:
    id: EntityId
    position: Vec
    velocity: Vec = (0.0, 0.0)
    size: float = 32.0
    name: str = ""
    state: BehaviorState = BehaviorState.IDLE
    idle_timer: float = 0.0
    interaction_cooldown: float = 0.0
    interaction: CurrentInteraction | None = None
    config: PetConfig = field(default_factory=PetConfig, repr=False)

    def __post_init__(self) -> None:
        if not self.name:
            self.name = str(self.id)

    @property
    def radius(self) -> float:
        return self.size / 2.0

    @property
    def interacting(self) -> bool:
        return self.state is BehaviorState.INTERACTING

    def distance_to(self, other: Pet) -> float:
        return vec.distance(self.position, other.position)

    def bounds_limits(self, bounds: Vec) -> tuple[Vec, Vec]:
        """Box the centre is clamped to: [size, W - size] x [size, H - size]."""
        width, height = bounds
        return (self.size, self.size), (width - self.size, height - self.size)

    def clamp_to_bounds(self, position: Vec, bounds: Vec) -> Vec:
        (lo_x, lo_y), (hi_x, hi_y) = self.bounds_limits(bounds)
        return (
            max(lo_x, min(hi_x, position[0])),
            max(lo_y, min(hi_y, position[1])),
        )

    def advance(
        self,
        dt: float,
        bounds: Vec,
        obstacles: Iterable[Obstacle] = (),
        rng: _random.Random | None = None,
    ) -> None:
        """Integrate one frame: move, collide, clamp, then apply friction."""
        if self.interacting:
            return

        cfg = self.config
        if self.interaction_cooldown > 0:
            self.interaction_cooldown -= dt * 1000.0

        position = vec.add(self.position, vec.scale(self.velocity, dt))
        velocity = self.velocity
        limits = self.bounds_limits(bounds)
        for obstacle in obstacles:
            hit = bounce_off_rect(
                position,
                velocity,
                self.radius,
                obstacle.position,
                obstacle.size,
                separation=cfg.separation,
                impulse=cfg.bounce_impulse,
                min_speed=cfg.min_bounce_speed,
                embedded_speed=cfg.embedded_bounce_speed,
                rng=rng,
                limits=limits,
            )
            if hit is not None:
                position, velocity = hit

        position = self.clamp_to_bounds(position, bounds)
        velocity = vec.scale(velocity, cfg.friction)
        if abs(velocity[0]) < cfg.stop_epsilon and abs(velocity[1]) < cfg.stop_epsilon:
            velocity = vec.ZERO

        if not (vec.is_finite(position) and vec.is_finite(velocity)):
            logger.warning("pet %r produced a non-finite state; holding position", self.id)
            self.velocity = vec.ZERO
            return

        self.position = position
        self.velocity = velocity

    # -- Interaction bookkeeping --

    def is_available_for_interaction(self) -> bool:
        return not self.interacting and self.interaction_cooldown <= 0

    def start_interaction(
        self, kind: Enum, partner_id: EntityId, started_at: float = 0.0,
    ) -> None:
        self.state = BehaviorState.INTERACTING
        self.interaction = CurrentInteraction(
            kind=kind, partner_id=partner_id, started_at=started_at,
        )

    def end_interaction(self, cooldown_ms: float | None = None) -> None:
        self.state = BehaviorState.IDLE
        self.interaction = None
        if cooldown_ms is None:
            cooldown_ms = self.config.interaction_cooldown_ms
        self.interaction_cooldown = cooldown_ms
