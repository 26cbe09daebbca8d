"""Tests for the per-type interaction scripts."""
from __future__ import annotations

import math

from ranch import TickContext
from ranch_physics import Pet, vec
from ranch_social import ActiveInteraction, InteractionConfig, InteractionType
from ranch_social.scripts import avoid, follow, group, play, rest

BOUNDS = (800.0, 600.0)
CONFIG = InteractionConfig()


class StubRandom:
    def __init__(self, draw: float) -> None:
        self.draw = draw

    def random(self) -> float:
        return self.draw

    def uniform(self, a: float, b: float) -> float:
        return a


def ctx(draw: float = 0.5, dt: float = 0.1) -> TickContext:
    return TickContext(tick_number=1, dt=dt, elapsed=dt, random=StubRandom(draw))


def make_interaction(kind, first_pos, second_pos, elapsed_ms=0.0) -> ActiveInteraction:
    return ActiveInteraction(
        first=Pet(id="a", position=first_pos, velocity=(10.0, 10.0)),
        second=Pet(id="b", position=second_pos, velocity=(-10.0, 10.0)),
        kind=kind,
        started_at=0.0,
        duration_ms=CONFIG.duration_for(kind),
        elapsed_ms=elapsed_ms,
    )


def test_play_orbits_midpoint_opposite_each_other():
    inter = make_interaction(InteractionType.PLAY, (100.0, 100.0), (140.0, 100.0))
    play(inter, ctx(), BOUNDS, CONFIG)
    a, b = inter.first, inter.second
    assert math.isclose(a.position[0], 160.0)
    assert math.isclose(b.position[0], 80.0)
    assert math.isclose(vec.distance(a.position, b.position), 80.0)
    assert a.velocity == vec.ZERO
    assert b.velocity == vec.ZERO


def test_play_angle_follows_elapsed_time():
    inter = make_interaction(InteractionType.PLAY, (200.0, 200.0), (200.0, 200.0),
                             elapsed_ms=100.0 * math.pi / 2)
    play(inter, ctx(), BOUNDS, CONFIG)
    assert math.isclose(inter.first.position[0], 200.0, abs_tol=1e-9)
    assert math.isclose(inter.first.position[1], 240.0)
    assert math.isclose(inter.second.position[1], 160.0)


def test_play_stays_in_bounds():
    inter = make_interaction(InteractionType.PLAY, (32.0, 32.0), (40.0, 32.0),
                             elapsed_ms=100.0 * math.pi)
    play(inter, ctx(), BOUNDS, CONFIG)
    for pet in (inter.first, inter.second):
        assert 32.0 <= pet.position[0] <= 768.0
        assert 32.0 <= pet.position[1] <= 568.0


def test_rest_holds_still():
    inter = make_interaction(InteractionType.REST, (100.0, 100.0), (140.0, 100.0))
    rest(inter, ctx(), BOUNDS, CONFIG)
    assert inter.first.velocity == vec.ZERO
    assert inter.second.velocity == vec.ZERO
    assert inter.first.position == (100.0, 100.0)


def test_follow_moves_follower_toward_leader():
    inter = make_interaction(InteractionType.FOLLOW, (100.0, 100.0), (150.0, 100.0))
    inter.first.velocity = vec.ZERO
    inter.second.velocity = vec.ZERO
    follow(inter, ctx(draw=0.5), BOUNDS, CONFIG)
    assert inter.first.position[0] > 100.0
    assert inter.second.position == (150.0, 100.0)


def test_follow_leader_sometimes_wanders():
    inter = make_interaction(InteractionType.FOLLOW, (100.0, 100.0), (150.0, 100.0))
    follow(inter, ctx(draw=0.05), BOUNDS, CONFIG)
    assert math.isclose(vec.magnitude(inter.second.velocity), 20.0)
    assert math.isclose(inter.second.position[0], 152.0)


def test_group_draws_pair_together():
    inter = make_interaction(InteractionType.GROUP, (100.0, 100.0), (160.0, 100.0))
    inter.first.velocity = vec.ZERO
    inter.second.velocity = vec.ZERO
    before = vec.distance(inter.first.position, inter.second.position)
    group(inter, ctx(), BOUNDS, CONFIG)
    assert vec.distance(inter.first.position, inter.second.position) < before


def test_avoid_pushes_pair_apart():
    inter = make_interaction(InteractionType.AVOID, (100.0, 100.0), (160.0, 100.0))
    inter.first.velocity = vec.ZERO
    inter.second.velocity = vec.ZERO
    before = vec.distance(inter.first.position, inter.second.position)
    avoid(inter, ctx(), BOUNDS, CONFIG)
    assert vec.distance(inter.first.position, inter.second.position) > before


def test_drift_respects_speed_cap():
    inter = make_interaction(InteractionType.GROUP, (100.0, 100.0), (101.0, 100.0))
    inter.first.velocity = (500.0, 0.0)
    group(inter, ctx(), BOUNDS, CONFIG)
    assert vec.magnitude(inter.first.velocity) <= CONFIG.max_speed + 1e-9
