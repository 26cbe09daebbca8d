"""Signals published by a ranch, as names and as typed records.

Each record class carries its signal name in ``signal``; its fields are
the payload keys, so ``SignalBus.emit(PetAdded("mochi"))`` delivers
``{"pet_id": "mochi"}`` to plain ``subscribe`` handlers.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from ranch.types import EntityId

PET_ADDED = "pet_added"
PET_REMOVED = "pet_removed"
INTERACTION_STARTED = "interaction_started"
INTERACTION_ENDED = "interaction_ended"


@dataclass(frozen=True)
class PetAdded:
    signal: ClassVar[str] = PET_ADDED

    pet_id: EntityId


@dataclass(frozen=True)
class PetRemoved:
    signal: ClassVar[str] = PET_REMOVED

    pet_id: EntityId


@dataclass(frozen=True)
class InteractionStarted:
    signal: ClassVar[str] = INTERACTION_STARTED

    pair: tuple[EntityId, EntityId]
    kind: Enum


@dataclass(frozen=True)
class InteractionEnded:
    """``reason`` is ``"completed"`` or ``"removed"``."""

    signal: ClassVar[str] = INTERACTION_ENDED

    pair: tuple[EntityId, EntityId]
    kind: Enum
    reason: str
