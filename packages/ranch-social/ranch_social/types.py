"""Interaction kinds, pair keys, and the active-interaction record."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ranch.types import EntityId
from ranch_physics import Pet

PairKey = tuple[EntityId, EntityId]


class InteractionType(Enum):
    """Scripted joint behaviours two pets can fall into."""

    PLAY = "play"
    REST = "rest"
    FOLLOW = "follow"
    GROUP = "group"
    AVOID = "avoid"


def _order(entity_id: EntityId) -> tuple[str, EntityId]:
    # Type name first: ids of different types are never compared directly.
    return type(entity_id).__name__, entity_id


def pair_key(a: EntityId, b: EntityId) -> PairKey:
    """Order-independent key for an unordered pair of ids."""
    return (a, b) if _order(a) <= _order(b) else (b, a)


@dataclass
class ActiveInteraction:
    """One running interaction. ``first``/``second`` keep trigger order,
    which matters for FOLLOW (first follows second)."""

    first: Pet
    second: Pet
    kind: InteractionType
    started_at: float
    duration_ms: float
    elapsed_ms: float = 0.0

    @property
    def key(self) -> PairKey:
        return pair_key(self.first.id, self.second.id)

    @property
    def finished(self) -> bool:
        return self.elapsed_ms >= self.duration_ms

    def partner_of(self, pet_id: EntityId) -> Pet:
        if pet_id == self.first.id:
            return self.second
        if pet_id == self.second.id:
            return self.first
        raise KeyError(f"Pet {pet_id!r} is not part of interaction {self.key!r}")

    def involves(self, pet_id: EntityId) -> bool:
        return pet_id == self.first.id or pet_id == self.second.id
