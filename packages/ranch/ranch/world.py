"""World - ordered entity storage with deferred structural changes."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterator

from ranch.types import DeadEntityError, DuplicateEntityError, EntityId

logger = logging.getLogger(__name__)

# Hook callback signature.
HookCallback = Callable[["World", EntityId, Any], None]


class World:
    """Holds every simulated entity, keyed by its caller-supplied id.

    Iteration order is insertion order. While a tick is running,
    ``spawn``/``despawn`` are queued and applied in request order when the
    tick ends, so systems always iterate a stable population.
    """

    def __init__(self) -> None:
        self._entities: dict[EntityId, Any] = {}
        # Ids that will be alive once pending changes are applied.
        self._reserved: set[EntityId] = set()
        self._pending: list[tuple[str, EntityId, Any]] = []
        self._ticking: bool = False
        self._on_spawn: list[HookCallback] = []
        self._on_despawn: list[HookCallback] = []

    def spawn(self, entity_id: EntityId, entity: Any) -> Any:
        if entity_id in self._reserved:
            raise DuplicateEntityError(
                entity_id, f"Entity {entity_id!r} already exists"
            )
        self._reserved.add(entity_id)
        if self._ticking:
            self._pending.append(("spawn", entity_id, entity))
        else:
            self._insert(entity_id, entity)
        return entity

    def despawn(self, entity_id: EntityId) -> None:
        if entity_id not in self._reserved:
            logger.debug("despawn of unknown entity %r ignored", entity_id)
            return
        self._reserved.discard(entity_id)
        if self._ticking:
            self._pending.append(("despawn", entity_id, None))
        else:
            self._remove(entity_id)

    def _insert(self, entity_id: EntityId, entity: Any) -> None:
        self._entities[entity_id] = entity
        for cb in list(self._on_spawn):
            cb(self, entity_id, entity)

    def _remove(self, entity_id: EntityId) -> None:
        entity = self._entities.pop(entity_id, None)
        if entity is None:
            return
        for cb in list(self._on_despawn):
            cb(self, entity_id, entity)

    def get(self, entity_id: EntityId) -> Any:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise DeadEntityError(
                entity_id, f"Entity {entity_id!r} is not alive"
            ) from None

    def find(self, entity_id: EntityId) -> Any | None:
        return self._entities.get(entity_id)

    def alive(self, entity_id: EntityId) -> bool:
        return entity_id in self._entities

    def ids(self) -> list[EntityId]:
        return list(self._entities)

    def entities(self) -> list[Any]:
        """Snapshot of live entities in insertion order."""
        return list(self._entities.values())

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.entities())

    def __contains__(self, entity_id: object) -> bool:
        return entity_id in self._entities

    # -- Tick bracketing --

    @property
    def ticking(self) -> bool:
        return self._ticking

    def begin_tick(self) -> None:
        self._ticking = True

    def end_tick(self) -> None:
        self._ticking = False
        pending = self._pending
        self._pending = []
        for op, entity_id, entity in pending:
            if op == "spawn":
                self._insert(entity_id, entity)
            else:
                self._remove(entity_id)

    def clear(self) -> None:
        for entity_id in self.ids():
            self.despawn(entity_id)

    # -- Change hooks --

    def on_spawn(self, callback: HookCallback) -> None:
        self._on_spawn.append(callback)

    def on_despawn(self, callback: HookCallback) -> None:
        self._on_despawn.append(callback)

    def off_spawn(self, callback: HookCallback) -> None:
        try:
            self._on_spawn.remove(callback)
        except ValueError:
            pass

    def off_despawn(self, callback: HookCallback) -> None:
        try:
            self._on_despawn.remove(callback)
        except ValueError:
            pass
