"""Top-level ranch configuration."""
from __future__ import annotations

from dataclasses import dataclass, field

from ranch_physics import PetConfig
from ranch_social import InteractionConfig
from ranch_steering import SteeringConfig

# Roster capacity. Enforced by callers, not by Ranch itself.
MAX_PETS = 25


@dataclass(frozen=True)
class RanchConfig:
    """Immutable configuration for a whole ranch.

    Attributes:
        width: Canvas width in px.
        height: Canvas height in px.
        max_dt: Upper bound on a single frame's delta, seconds.
        pet: Physical tuning for every pet.
        steering: Idle steering tuning.
        interaction: Pairwise interaction tuning.
    """

    width: float = 800.0
    height: float = 600.0
    max_dt: float = 0.1
    pet: PetConfig = field(default_factory=PetConfig)
    steering: SteeringConfig = field(default_factory=SteeringConfig)
    interaction: InteractionConfig = field(default_factory=InteractionConfig)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("width and height must be positive")
        if self.max_dt <= 0:
            raise ValueError("max_dt must be positive")
