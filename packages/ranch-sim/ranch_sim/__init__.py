"""ranch-sim - The pet ranch simulation facade."""
from __future__ import annotations

from ranch_sim.config import MAX_PETS, RanchConfig
from ranch_sim.simulation import InteractionView, PetView, Ranch

__all__ = [
    "MAX_PETS",
    "InteractionView",
    "PetView",
    "Ranch",
    "RanchConfig",
]
