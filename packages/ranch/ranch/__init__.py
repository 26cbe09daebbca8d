"""ranch - Frame-driven simulation core for the pet ranch."""

from ranch.clock import FrameClock
from ranch.engine import Engine
from ranch.types import (
    DeadEntityError,
    DuplicateEntityError,
    EntityId,
    System,
    TickContext,
)
from ranch.world import World

__all__ = [
    "Engine",
    "World",
    "FrameClock",
    "TickContext",
    "EntityId",
    "System",
    "DeadEntityError",
    "DuplicateEntityError",
]
