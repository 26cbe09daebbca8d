"""Per-type motion scripts run every tick while an interaction is active.

Scripts own the pair's motion outright: interacting pets are skipped by
steering and integration, so anything that should move a pet here has to
move its position directly.
"""
from __future__ import annotations

import math
from typing import TYPE_CHECKING, Callable

from ranch_physics import Pet, vec
from ranch_physics.vec import Vec
from ranch_steering import flee, seek

from ranch_social.config import InteractionConfig
from ranch_social.types import ActiveInteraction, InteractionType

if TYPE_CHECKING:
    from ranch import TickContext

Script = Callable[[ActiveInteraction, "TickContext", Vec, InteractionConfig], None]


def _drift(pet: Pet, dt: float, bounds: Vec, max_speed: float) -> None:
    pet.velocity = vec.clamp_magnitude(pet.velocity, max_speed)
    position = vec.add(pet.position, vec.scale(pet.velocity, dt))
    pet.position = pet.clamp_to_bounds(position, bounds)


def play(inter: ActiveInteraction, ctx: TickContext, bounds: Vec, config: InteractionConfig) -> None:
    """Orbit the shared midpoint, half a turn apart."""
    a, b = inter.first, inter.second
    center = vec.midpoint(a.position, b.position)
    angle = inter.elapsed_ms / config.play_angle_divisor_ms
    r = config.play_orbit_radius
    a.position = a.clamp_to_bounds(vec.add(center, vec.from_angle(angle, r)), bounds)
    b.position = b.clamp_to_bounds(vec.add(center, vec.from_angle(angle + math.pi, r)), bounds)
    a.velocity = vec.ZERO
    b.velocity = vec.ZERO


def rest(inter: ActiveInteraction, ctx: TickContext, bounds: Vec, config: InteractionConfig) -> None:
    inter.first.velocity = vec.ZERO
    inter.second.velocity = vec.ZERO


def follow(inter: ActiveInteraction, ctx: TickContext, bounds: Vec, config: InteractionConfig) -> None:
    """First trails second; second ambles about slowly."""
    follower, leader = inter.first, inter.second
    seek(follower, leader.position, config.follow_strength, config.max_speed)
    if ctx.random.random() < config.follow_wander_chance:
        angle = ctx.random.uniform(0.0, math.tau)
        leader.velocity = vec.from_angle(angle, config.follow_wander_speed)
    _drift(follower, ctx.dt, bounds, config.max_speed)
    _drift(leader, ctx.dt, bounds, config.max_speed)


def group(inter: ActiveInteraction, ctx: TickContext, bounds: Vec, config: InteractionConfig) -> None:
    a, b = inter.first, inter.second
    seek(a, b.position, config.group_strength, config.max_speed)
    seek(b, a.position, config.group_strength, config.max_speed)
    _drift(a, ctx.dt, bounds, config.max_speed)
    _drift(b, ctx.dt, bounds, config.max_speed)


def avoid(inter: ActiveInteraction, ctx: TickContext, bounds: Vec, config: InteractionConfig) -> None:
    a, b = inter.first, inter.second
    flee(a, b.position, config.avoid_strength, config.max_speed)
    flee(b, a.position, config.avoid_strength, config.max_speed)
    _drift(a, ctx.dt, bounds, config.max_speed)
    _drift(b, ctx.dt, bounds, config.max_speed)


SCRIPTS: dict[InteractionType, Script] = {
    InteractionType.PLAY: play,
    InteractionType.REST: rest,
    InteractionType.FOLLOW: follow,
    InteractionType.GROUP: group,
    InteractionType.AVOID: avoid,
}
