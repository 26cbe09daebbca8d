"""Obstacles and the arena they sit in."""
from __future__ import annotations

from dataclasses import dataclass, field

from ranch.types import EntityId

from ranch_physics.collision import nearest_point
from ranch_physics.vec import Vec


@dataclass
class Obstacle:
    """Axis-aligned rectangle. ``position`` is the top-left corner.

    Owned by the widget layer; the simulation only reads it. Only the
    position changes during a run (dragging).
    """

    id: EntityId
    position: Vec
    width: float
    height: float

    @property
    def size(self) -> Vec:
        return (self.width, self.height)

    @property
    def rect(self) -> tuple[float, float, float, float]:
        return (self.position[0], self.position[1], self.width, self.height)

    def move_to(self, x: float, y: float) -> None:
        self.position = (float(x), float(y))

    def contains(self, point: Vec) -> bool:
        x, y = point
        left, top = self.position
        return left <= x <= left + self.width and top <= y <= top + self.height

    def nearest_point(self, point: Vec) -> Vec:
        return nearest_point(point, self.position, self.size)


@dataclass
class Arena:
    """Canvas bounds plus the obstacles currently placed on it."""

    width: float
    height: float
    obstacles: list[Obstacle] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("arena width and height must be positive")

    @property
    def bounds(self) -> Vec:
        return (self.width, self.height)

    def resize(self, width: float, height: float) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("arena width and height must be positive")
        self.width = width
        self.height = height

    def set_obstacles(self, obstacles: list[Obstacle] | tuple[Obstacle, ...]) -> None:
        self.obstacles = list(obstacles)
