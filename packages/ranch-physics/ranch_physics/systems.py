"""System factory for pet integration."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ranch_physics.obstacles import Arena
from ranch_physics.pet import Pet

if TYPE_CHECKING:
    from ranch import TickContext, World


def make_integration_system(arena: Arena) -> Callable[["World", "TickContext"], None]:
    """Advance every non-interacting pet by one frame.

    ``arena`` is read each tick, so resizing it or swapping its obstacle
    list between ticks takes effect immediately.
    """

    def integration_system(world: "World", ctx: "TickContext") -> None:
        bounds = arena.bounds
        obstacles = tuple(arena.obstacles)
        for pet in world.entities():
            if isinstance(pet, Pet):
                pet.advance(ctx.dt, bounds, obstacles, ctx.random)

    return integration_system
