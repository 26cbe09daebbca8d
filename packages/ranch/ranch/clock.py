"""Frame clock - variable timestep with a hard upper bound."""

import logging
import math
import random

from ranch.types import TickContext

logger = logging.getLogger(__name__)


class FrameClock:
    """Counts host frames and accumulates logical time.

    The host reports wall-clock deltas; the clock clamps each one to
    ``[0, max_dt]`` so a backgrounded tab or a long pause never turns into
    one huge integration step.
    """

    def __init__(self, max_dt: float = 0.1) -> None:
        if max_dt <= 0:
            raise ValueError("max_dt must be positive")
        self._max_dt = max_dt
        self._tick_number = 0
        self._elapsed = 0.0
        self._dt = 0.0

    @property
    def max_dt(self) -> float:
        return self._max_dt

    @property
    def dt(self) -> float:
        """Clamped delta of the most recent tick."""
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def clamp(self, dt: float) -> float:
        if math.isnan(dt) or dt < 0.0:
            return 0.0
        return min(dt, self._max_dt)

    def advance(self, dt: float) -> float:
        clamped = self.clamp(dt)
        if clamped != dt:
            logger.debug("frame delta %.4fs clamped to %.4fs", dt, clamped)
        self._tick_number += 1
        self._elapsed += clamped
        self._dt = clamped
        return clamped

    def context(self, rng: random.Random) -> TickContext:
        return TickContext(
            tick_number=self._tick_number,
            dt=self._dt,
            elapsed=self._elapsed,
            random=rng,
        )

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0
        self._dt = 0.0
