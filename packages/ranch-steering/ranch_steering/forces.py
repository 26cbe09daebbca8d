"""Steering behaviours. Each one adds to or replaces a pet's velocity.

Edge and obstacle avoidance are additive, so several can act on the same
pet in one tick; the speed cap is applied last.
"""
from __future__ import annotations

import math
import random as _random
from typing import Iterable

from ranch_physics import BehaviorState, Obstacle, Pet, vec
from ranch_physics.collision import distance_to_rect
from ranch_physics.vec import Vec

from ranch_steering.config import SteeringConfig

_DEFAULT = SteeringConfig()


def random_walk(pet: Pet, rng: _random.Random, config: SteeringConfig = _DEFAULT) -> None:
    """Either set off in a random direction or settle down."""
    if rng.random() < config.move_probability:
        speed = rng.uniform(config.min_walk_speed, config.max_walk_speed)
        pet.velocity = vec.from_angle(rng.uniform(0.0, math.tau), speed)
        pet.state = BehaviorState.MOVING
    else:
        pet.velocity = vec.ZERO
        pet.state = BehaviorState.IDLE


def avoid_edges(pet: Pet, bounds: Vec, config: SteeringConfig = _DEFAULT) -> None:
    width, height = bounds
    x, y = pet.position
    vx, vy = pet.velocity
    margin = config.edge_margin
    force = config.edge_force

    if x < margin:
        vx += force
    if x > width - margin:
        vx -= force
    if y < margin:
        vy += force
    if y > height - margin:
        vy -= force
    pet.velocity = (vx, vy)


def avoid_obstacles(
    pet: Pet, obstacles: Iterable[Obstacle], config: SteeringConfig = _DEFAULT,
) -> None:
    """Soft repulsion from nearby obstacles, stronger the closer the pet is.

    A pet whose centre already touches an obstacle gets no push here; hard
    collision in the integration step deals with it.
    """
    reach = config.avoidance_radius + pet.radius
    for obstacle in obstacles:
        dist, closest = distance_to_rect(pet.position, obstacle.position, obstacle.size)
        if dist >= reach or dist <= 0.0:
            continue
        strength = (reach - dist) / config.avoidance_radius
        away = vec.scale(vec.sub(pet.position, closest), 1.0 / dist)
        pet.velocity = vec.add(pet.velocity, vec.scale(away, config.avoidance_force * strength))


def cap_speed(pet: Pet, max_speed: float) -> None:
    pet.velocity = vec.clamp_magnitude(pet.velocity, max_speed)


def _pull(pet: Pet, direction: Vec, strength: float, max_speed: float) -> None:
    distance = vec.magnitude(direction)
    if distance <= 0.0:
        return
    force = (max_speed * strength) / max(distance, 1.0)
    pet.velocity = vec.add(pet.velocity, vec.scale(direction, force / distance))


def seek(pet: Pet, target: Vec, strength: float = 1.0, max_speed: float = _DEFAULT.max_speed) -> None:
    """Nudge velocity toward ``target``; the nudge shrinks with distance."""
    _pull(pet, vec.sub(target, pet.position), strength, max_speed)


def flee(pet: Pet, target: Vec, strength: float = 1.0, max_speed: float = _DEFAULT.max_speed) -> None:
    """Nudge velocity away from ``target``; the nudge shrinks with distance."""
    _pull(pet, vec.sub(pet.position, target), strength, max_speed)


def steer(
    pet: Pet,
    dt: float,
    bounds: Vec,
    obstacles: Iterable[Obstacle],
    rng: _random.Random,
    config: SteeringConfig = _DEFAULT,
) -> None:
    """Full idle-behaviour update for one pet. Interacting pets are skipped."""
    if pet.interacting:
        return

    if pet.idle_timer <= 0:
        random_walk(pet, rng, config)
        pet.idle_timer = config.walk_interval_ms + rng.random() * config.walk_jitter_ms
    else:
        pet.idle_timer -= dt * 1000.0

    avoid_edges(pet, bounds, config)
    avoid_obstacles(pet, obstacles, config)
    cap_speed(pet, config.max_speed)
