"""InteractionCoordinator - pairwise interaction registry and lifecycle."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Iterator, Sequence

from ranch.types import EntityId
from ranch_physics import Pet
from ranch_physics.vec import Vec

from ranch_social.config import InteractionConfig
from ranch_social.scripts import SCRIPTS, Script
from ranch_social.types import ActiveInteraction, InteractionType, PairKey, pair_key

if TYPE_CHECKING:
    from ranch import TickContext

logger = logging.getLogger(__name__)

COMPLETED = "completed"
REMOVED = "removed"

_StartHook = Callable[[ActiveInteraction], None]
_EndHook = Callable[[ActiveInteraction, str], None]


class InteractionCoordinator:
    """Owns every active interaction, keyed by unordered pet pair.

    A pet is in at most one interaction. Both sides are started and ended
    together, so ``pet.state is INTERACTING`` holds exactly while its pair
    is registered here.
    """

    def __init__(
        self,
        config: InteractionConfig | None = None,
        on_start: _StartHook | None = None,
        on_end: _EndHook | None = None,
        scripts: dict[InteractionType, Script] | None = None,
    ) -> None:
        self._config = config if config is not None else InteractionConfig()
        self._active: dict[PairKey, ActiveInteraction] = {}
        self._on_start = on_start
        self._on_end = on_end
        self._scripts = dict(SCRIPTS)
        if scripts:
            self._scripts.update(scripts)

    @property
    def config(self) -> InteractionConfig:
        return self._config

    # -- Queries --

    def active(self) -> list[ActiveInteraction]:
        return list(self._active.values())

    def get(self, a: EntityId, b: EntityId) -> ActiveInteraction | None:
        return self._active.get(pair_key(a, b))

    def interaction_for(self, pet_id: EntityId) -> ActiveInteraction | None:
        for inter in self._active.values():
            if inter.involves(pet_id):
                return inter
        return None

    def __len__(self) -> int:
        return len(self._active)

    def __iter__(self) -> Iterator[ActiveInteraction]:
        return iter(self.active())

    def __contains__(self, key: object) -> bool:
        return key in self._active

    # -- Lifecycle --

    def start(
        self, first: Pet, second: Pet, kind: InteractionType, started_at: float = 0.0,
    ) -> ActiveInteraction:
        key = pair_key(first.id, second.id)
        inter = ActiveInteraction(
            first=first,
            second=second,
            kind=kind,
            started_at=started_at,
            duration_ms=self._config.duration_for(kind),
        )
        first.start_interaction(kind, second.id, started_at)
        second.start_interaction(kind, first.id, started_at)
        self._active[key] = inter
        logger.debug("interaction %s started for %r", kind.value, key)
        if self._on_start is not None:
            self._on_start(inter)
        return inter

    def end(self, key: PairKey, reason: str = COMPLETED) -> None:
        inter = self._active.pop(key, None)
        if inter is None:
            return
        inter.first.end_interaction()
        inter.second.end_interaction()
        logger.debug("interaction %s ended for %r (%s)", inter.kind.value, key, reason)
        if self._on_end is not None:
            self._on_end(inter, reason)

    def remove_pet(self, pet_id: EntityId) -> None:
        """End, without waiting, any interaction the pet is part of."""
        inter = self.interaction_for(pet_id)
        if inter is not None:
            self.end(inter.key, REMOVED)

    def end_all(self, reason: str = REMOVED) -> None:
        for key in list(self._active):
            self.end(key, reason)

    # -- Per-tick update --

    def update(self, pets: Sequence[Pet], ctx: TickContext, bounds: Vec) -> None:
        """Advance running interactions, then look for new pairs."""
        self._advance_active(ctx, bounds)
        self._check_new(pets, ctx)

    def _advance_active(self, ctx: TickContext, bounds: Vec) -> None:
        for key, inter in list(self._active.items()):
            inter.elapsed_ms += ctx.dt * 1000.0
            if inter.finished:
                self.end(key, COMPLETED)
            else:
                self._scripts[inter.kind](inter, ctx, bounds, self._config)

    def _check_new(self, pets: Sequence[Pet], ctx: TickContext) -> None:
        cfg = self._config
        if cfg.trigger_probability <= 0.0:
            return
        for i in range(len(pets)):
            first = pets[i]
            for j in range(i + 1, len(pets)):
                if not first.is_available_for_interaction():
                    break
                second = pets[j]
                if not second.is_available_for_interaction():
                    continue
                if pair_key(first.id, second.id) in self._active:
                    continue
                if first.distance_to(second) > cfg.radius:
                    continue
                if ctx.random.random() < cfg.trigger_probability:
                    kind = ctx.random.choice(cfg.kinds)
                    self.start(first, second, kind, ctx.elapsed)
