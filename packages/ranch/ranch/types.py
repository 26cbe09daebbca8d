"""Shared type aliases and errors for the ranch core."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Union

# Caller-supplied and opaque. One world may mix int and str ids.
EntityId = Union[int, str]


@dataclass(frozen=True, slots=True)
class TickContext:
    tick_number: int
    dt: float
    elapsed: float
    random: _random.Random


class DeadEntityError(KeyError):
    """Raised when looking up an entity that is not in the world."""

    def __init__(self, entity_id: EntityId, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


class DuplicateEntityError(KeyError):
    """Raised when spawning an entity under an id that is already taken."""

    def __init__(self, entity_id: EntityId, message: str) -> None:
        self.entity_id = entity_id
        super().__init__(message)


if TYPE_CHECKING:
    from ranch.world import World

System = Callable[["World", TickContext], None]
