"""Ranch - wires the engine, physics, steering and interactions together."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterable

from ranch import Engine, EntityId, FrameClock, TickContext, World
from ranch_physics import Arena, BehaviorState, Obstacle, Pet, make_integration_system
from ranch_physics.vec import Vec
from ranch_signal import (
    InteractionEnded,
    InteractionStarted,
    PetAdded,
    PetRemoved,
    SignalBus,
    make_signal_system,
)
from ranch_social import (
    ActiveInteraction,
    InteractionCoordinator,
    InteractionType,
    PairKey,
    make_despawn_hook,
    make_interaction_system,
)
from ranch_steering import make_steering_system

from ranch_sim.config import RanchConfig

logger = logging.getLogger(__name__)

# New pets without an explicit position are placed at least this far from
# the canvas edges.
SPAWN_MARGIN = 50.0


@dataclass(frozen=True)
class PetView:
    """What the renderer needs to place a sprite."""

    id: EntityId
    name: str
    position: Vec
    size: float
    state: BehaviorState


@dataclass(frozen=True)
class InteractionView:
    """What the renderer needs to draw an interaction effect."""

    pair: PairKey
    kind: InteractionType
    positions: tuple[Vec, Vec]
    elapsed_ms: float
    duration_ms: float


class Ranch:
    """A running pet ranch.

    Each ``step`` runs, in order: steering for every pet, integration for
    every pet, then the interaction pass (finish/execute running
    interactions, then trigger checks), and finally signal delivery.
    Interaction scripts therefore always have the last word on a frame's
    motion.
    """

    def __init__(
        self,
        config: RanchConfig | None = None,
        seed: int | None = None,
        obstacles: Iterable[Obstacle] = (),
    ) -> None:
        self._config = config if config is not None else RanchConfig()
        cfg = self._config
        self._engine = Engine(max_dt=cfg.max_dt, seed=seed)
        self._arena = Arena(cfg.width, cfg.height, list(obstacles))
        self._bus = SignalBus()
        self._coordinator = InteractionCoordinator(
            cfg.interaction,
            on_start=self._interaction_started,
            on_end=self._interaction_ended,
        )

        world = self._engine.world
        # Release the partner before announcing the removal.
        world.on_despawn(make_despawn_hook(self._coordinator))
        world.on_spawn(self._pet_spawned)
        world.on_despawn(self._pet_despawned)

        # Order matters!
        self._engine.add_system(make_steering_system(self._arena, cfg.steering))
        self._engine.add_system(make_integration_system(self._arena))
        self._engine.add_system(make_interaction_system(self._coordinator, self._arena))
        self._engine.add_system(make_signal_system(self._bus))

    # -- Accessors --

    @property
    def config(self) -> RanchConfig:
        return self._config

    @property
    def engine(self) -> Engine:
        return self._engine

    @property
    def world(self) -> World:
        return self._engine.world

    @property
    def clock(self) -> FrameClock:
        return self._engine.clock

    @property
    def arena(self) -> Arena:
        return self._arena

    @property
    def coordinator(self) -> InteractionCoordinator:
        return self._coordinator

    @property
    def bus(self) -> SignalBus:
        return self._bus

    @property
    def seed(self) -> int:
        return self._engine.seed

    def __len__(self) -> int:
        return len(self._engine.world)

    def __contains__(self, pet_id: object) -> bool:
        return pet_id in self._engine.world

    # -- Roster --

    def add_pet(
        self,
        pet_id: EntityId,
        position: Vec | None = None,
        name: str | None = None,
    ) -> Pet:
        """Create a pet. A position of None picks a random spot on the canvas.

        Raises DuplicateEntityError if ``pet_id`` is taken.
        """
        if position is None:
            position = self.random_position()
        pet = Pet(
            id=pet_id,
            position=(float(position[0]), float(position[1])),
            size=self._config.pet.size,
            name=name or "",
            config=self._config.pet,
        )
        self._engine.world.spawn(pet_id, pet)
        return pet

    def remove_pet(self, pet_id: EntityId) -> None:
        """Remove a pet, ending its interaction. Unknown ids are ignored."""
        self._engine.world.despawn(pet_id)

    def clear(self) -> None:
        """Remove every pet. Running interactions end first, as ``removed``."""
        self._coordinator.end_all()
        self._engine.world.clear()

    def get(self, pet_id: EntityId) -> Pet:
        return self._engine.world.get(pet_id)

    def random_position(self) -> Vec:
        rng = self._engine.random
        w, h = self._arena.bounds
        margin_x = min(SPAWN_MARGIN, w / 2)
        margin_y = min(SPAWN_MARGIN, h / 2)
        return (rng.uniform(margin_x, w - margin_x), rng.uniform(margin_y, h - margin_y))

    # -- Arena --

    @property
    def obstacles(self) -> list[Obstacle]:
        return self._arena.obstacles

    def set_obstacles(self, obstacles: Iterable[Obstacle]) -> None:
        self._arena.set_obstacles(list(obstacles))

    def resize(self, width: float, height: float) -> None:
        self._arena.resize(width, height)

    # -- Simulation --

    def step(self, dt: float, obstacles: Iterable[Obstacle] | None = None) -> TickContext:
        """Advance one host frame. ``dt`` is in seconds and gets clamped."""
        if obstacles is not None:
            self.set_obstacles(obstacles)
        return self._engine.step(dt)

    def run(self, frames: int, dt: float) -> None:
        self._engine.run(frames, dt)

    # -- Views --

    def pets(self) -> list[PetView]:
        return [
            PetView(
                id=pet.id,
                name=pet.name,
                position=pet.position,
                size=pet.size,
                state=pet.state,
            )
            for pet in self._engine.world.entities()
        ]

    def interactions(self) -> list[InteractionView]:
        return [
            InteractionView(
                pair=inter.key,
                kind=inter.kind,
                positions=(inter.first.position, inter.second.position),
                elapsed_ms=inter.elapsed_ms,
                duration_ms=inter.duration_ms,
            )
            for inter in self._coordinator.active()
        ]

    # -- Hooks --

    def _pet_spawned(self, world: World, pet_id: EntityId, pet: Any) -> None:
        logger.info("pet %r added (%d on ranch)", pet_id, len(world))
        self._bus.emit(PetAdded(pet_id))

    def _pet_despawned(self, world: World, pet_id: EntityId, pet: Any) -> None:
        logger.info("pet %r removed (%d on ranch)", pet_id, len(world))
        self._bus.emit(PetRemoved(pet_id))

    def _interaction_started(self, inter: ActiveInteraction) -> None:
        self._bus.emit(InteractionStarted(inter.key, inter.kind))

    def _interaction_ended(self, inter: ActiveInteraction, reason: str) -> None:
        self._bus.emit(InteractionEnded(inter.key, inter.kind, reason))
