"""ranch-social - Pairwise scripted interactions between ranch pets."""
from __future__ import annotations

from ranch_social.config import DEFAULT_DURATIONS_MS, InteractionConfig
from ranch_social.coordinator import COMPLETED, REMOVED, InteractionCoordinator
from ranch_social.scripts import SCRIPTS
from ranch_social.systems import make_despawn_hook, make_interaction_system
from ranch_social.types import ActiveInteraction, InteractionType, PairKey, pair_key

__all__ = [
    "COMPLETED",
    "DEFAULT_DURATIONS_MS",
    "REMOVED",
    "SCRIPTS",
    "ActiveInteraction",
    "InteractionConfig",
    "InteractionCoordinator",
    "InteractionType",
    "PairKey",
    "make_despawn_hook",
    "make_interaction_system",
    "pair_key",
]
