"""System factory for signal delivery."""
from __future__ import annotations

from typing import TYPE_CHECKING, Callable

from ranch_signal.bus import SignalBus

if TYPE_CHECKING:
    from ranch import TickContext, World


def make_signal_system(bus: SignalBus) -> Callable[["World", "TickContext"], None]:
    """Deliver the tick's signals. Register it last."""

    def signal_system(world: "World", ctx: "TickContext") -> None:
        bus.flush()

    return signal_system
