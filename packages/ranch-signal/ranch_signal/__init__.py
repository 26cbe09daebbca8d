"""ranch-signal - Event bus for ranch notifications."""
from __future__ import annotations

from ranch_signal.bus import Handler, SignalBus
from ranch_signal.signals import (
    INTERACTION_ENDED,
    INTERACTION_STARTED,
    PET_ADDED,
    PET_REMOVED,
    InteractionEnded,
    InteractionStarted,
    PetAdded,
    PetRemoved,
)
from ranch_signal.systems import make_signal_system

__all__ = [
    "INTERACTION_ENDED",
    "INTERACTION_STARTED",
    "PET_ADDED",
    "PET_REMOVED",
    "Handler",
    "InteractionEnded",
    "InteractionStarted",
    "PetAdded",
    "PetRemoved",
    "SignalBus",
    "make_signal_system",
]
