"""Interaction tuning."""
from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping

from ranch_social.types import InteractionType

DEFAULT_DURATIONS_MS: Mapping[InteractionType, float] = MappingProxyType({
    InteractionType.PLAY: 3000.0,
    InteractionType.REST: 4000.0,
    InteractionType.FOLLOW: 5000.0,
    InteractionType.GROUP: 3500.0,
    InteractionType.AVOID: 2000.0,
})


@dataclass(frozen=True)
class InteractionConfig:
    """Immutable tuning for pairwise interactions.

    Attributes:
        radius: Pets at most this far apart may start an interaction.
        trigger_probability: Chance per tick, per eligible pair in range.
            Applied per frame, so higher frame rates trigger more often.
        kinds: Interaction types picked from, uniformly.
        durations_ms: Fixed duration for each type.
        play_orbit_radius: Orbit radius around the pair's midpoint.
        play_angle_divisor_ms: Elapsed ms per radian of orbit.
        follow_strength: Seek strength of the follower.
        follow_wander_chance: Per-tick chance the leader picks a new heading.
        follow_wander_speed: Leader speed after picking a heading.
        group_strength: Mutual seek strength.
        avoid_strength: Mutual flee strength.
        max_speed: Speed cap for scripted drifting, and the seek/flee base.
    """

    radius: float = 80.0
    trigger_probability: float = 0.01
    kinds: tuple[InteractionType, ...] = tuple(InteractionType)
    durations_ms: Mapping[InteractionType, float] = field(
        default_factory=lambda: DEFAULT_DURATIONS_MS
    )
    play_orbit_radius: float = 40.0
    play_angle_divisor_ms: float = 100.0
    follow_strength: float = 0.5
    follow_wander_chance: float = 0.1
    follow_wander_speed: float = 20.0
    group_strength: float = 0.3
    avoid_strength: float = 0.8
    max_speed: float = 100.0

    def __post_init__(self) -> None:
        if not 0.0 <= self.trigger_probability <= 1.0:
            raise ValueError("trigger_probability must be within [0, 1]")
        if not self.kinds:
            raise ValueError("kinds must not be empty")
        missing = [k.value for k in self.kinds if k not in self.durations_ms]
        if missing:
            raise ValueError(f"no duration configured for: {', '.join(missing)}")

    def duration_for(self, kind: InteractionType) -> float:
        return self.durations_ms[kind]
