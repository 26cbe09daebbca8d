"""System factory and world hook for the interaction coordinator."""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from ranch_physics import Arena, Pet

from ranch_social.coordinator import InteractionCoordinator

if TYPE_CHECKING:
    from ranch import EntityId, TickContext, World


def make_interaction_system(
    coordinator: InteractionCoordinator,
    arena: Arena,
) -> Callable[["World", "TickContext"], None]:
    """Run after integration so scripted motion overrides the frame's movement."""

    def interaction_system(world: "World", ctx: "TickContext") -> None:
        pets = [e for e in world.entities() if isinstance(e, Pet)]
        coordinator.update(pets, ctx, arena.bounds)

    return interaction_system


def make_despawn_hook(
    coordinator: InteractionCoordinator,
) -> Callable[["World", "EntityId", Any], None]:
    """World despawn hook that releases the removed pet's partner."""

    def on_despawn(world: "World", entity_id: "EntityId", entity: Any) -> None:
        coordinator.remove_pet(entity_id)

    return on_despawn
