"""ranch-physics - Pet kinematics and obstacle collision for the ranch core."""
from __future__ import annotations

from ranch_physics import vec
from ranch_physics.collision import Contact, bounce_off_rect, circle_vs_rect
from ranch_physics.obstacles import Arena, Obstacle
from ranch_physics.pet import BehaviorState, CurrentInteraction, Pet, PetConfig
from ranch_physics.systems import make_integration_system

__all__ = [
    "Arena",
    "BehaviorState",
    "Contact",
    "CurrentInteraction",
    "Obstacle",
    "Pet",
    "PetConfig",
    "bounce_off_rect",
    "circle_vs_rect",
    "make_integration_system",
    "vec",
]
