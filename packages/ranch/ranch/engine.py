"""Engine - ordered systems driven by host frames."""

import os
import random

from ranch.clock import FrameClock
from ranch.types import System, TickContext
from ranch.world import World


class Engine:
    def __init__(self, max_dt: float = 0.1, seed: int | None = None) -> None:
        self._clock = FrameClock(max_dt)
        self._world = World()
        self._systems: list[System] = []

        if seed is None:
            seed = int.from_bytes(os.urandom(8), "big")
        self._seed = seed
        self._rng = random.Random(seed)

    @property
    def world(self) -> World:
        return self._world

    @property
    def clock(self) -> FrameClock:
        return self._clock

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def random(self) -> random.Random:
        return self._rng

    def add_system(self, system: System) -> None:
        self._systems.append(system)

    def step(self, dt: float) -> TickContext:
        """Run every system once, in registration order, for one frame."""
        self._clock.advance(dt)
        ctx = self._clock.context(self._rng)
        self._world.begin_tick()
        try:
            for system in self._systems:
                system(self._world, ctx)
        finally:
            self._world.end_tick()
        return ctx

    def run(self, n: int, dt: float) -> None:
        for _ in range(n):
            self.step(dt)
