"""System factory for idle steering."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ranch_physics import Arena, Pet

from ranch_steering.config import SteeringConfig
from ranch_steering.forces import steer

if TYPE_CHECKING:
    from ranch import TickContext, World


def make_steering_system(
    arena: Arena,
    config: SteeringConfig | None = None,
) -> Callable[["World", "TickContext"], None]:
    """Apply random walk, edge and obstacle avoidance, and the speed cap."""
    cfg = config if config is not None else SteeringConfig()

    def steering_system(world: "World", ctx: "TickContext") -> None:
        bounds = arena.bounds
        obstacles = tuple(arena.obstacles)
        for pet in world.entities():
            if isinstance(pet, Pet):
                steer(pet, ctx.dt, bounds, obstacles, ctx.random, cfg)

    return steering_system
