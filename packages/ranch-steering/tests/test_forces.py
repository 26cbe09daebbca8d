"""Tests for steering behaviours."""
from __future__ import annotations

import math
import random

import pytest

from ranch_physics import BehaviorState, Obstacle, Pet, vec
from ranch_steering import (
    SteeringConfig,
    avoid_edges,
    avoid_obstacles,
    cap_speed,
    flee,
    random_walk,
    seek,
    steer,
)

BOUNDS = (800.0, 600.0)


class StubRandom:
    """Returns a fixed draw from random(); uniform() returns its lower bound."""

    def __init__(self, draw: float) -> None:
        self.draw = draw

    def random(self) -> float:
        return self.draw

    def uniform(self, a: float, b: float) -> float:
        return a


def make_pet(position=(400.0, 300.0), velocity=(0.0, 0.0)) -> Pet:
    return Pet(id="pet", position=position, velocity=velocity)


# --- random_walk ---

def test_random_walk_starts_moving():
    pet = make_pet()
    random_walk(pet, StubRandom(0.5))
    assert pet.state is BehaviorState.MOVING
    assert math.isclose(pet.velocity[0], 50.0)
    assert math.isclose(pet.velocity[1], 0.0, abs_tol=1e-9)


def test_random_walk_settles():
    pet = make_pet(velocity=(30.0, 30.0))
    pet.state = BehaviorState.MOVING
    random_walk(pet, StubRandom(0.9))
    assert pet.state is BehaviorState.IDLE
    assert pet.velocity == vec.ZERO


def test_random_walk_speed_range():
    rng = random.Random(11)
    pet = make_pet()
    for _ in range(50):
        random_walk(pet, rng)
        speed = vec.magnitude(pet.velocity)
        if pet.state is BehaviorState.MOVING:
            assert 50.0 - 1e-9 <= speed <= 100.0 + 1e-9
        else:
            assert speed == 0.0


# --- avoid_edges ---

@pytest.mark.parametrize(
    "position,expected",
    [
        ((10.0, 300.0), (100.0, 0.0)),
        ((790.0, 300.0), (-100.0, 0.0)),
        ((400.0, 10.0), (0.0, 100.0)),
        ((400.0, 590.0), (0.0, -100.0)),
        ((10.0, 10.0), (100.0, 100.0)),
        ((400.0, 300.0), (0.0, 0.0)),
    ],
)
def test_avoid_edges(position, expected):
    pet = make_pet(position=position)
    avoid_edges(pet, BOUNDS)
    assert pet.velocity == expected


def test_avoid_edges_is_additive():
    pet = make_pet(position=(10.0, 300.0), velocity=(-50.0, 5.0))
    avoid_edges(pet, BOUNDS)
    assert pet.velocity == (50.0, 5.0)


# --- avoid_obstacles ---

def test_avoid_obstacle_in_range():
    obstacle = Obstacle(id="w", position=(150.0, 80.0), width=50.0, height=50.0)
    pet = make_pet(position=(100.0, 100.0))
    avoid_obstacles(pet, [obstacle])
    # reach = 80 + 16, dist = 50 -> strength (96 - 50) / 80
    assert math.isclose(pet.velocity[0], -200.0 * (46.0 / 80.0))
    assert math.isclose(pet.velocity[1], 0.0)


def test_avoid_obstacle_out_of_range():
    obstacle = Obstacle(id="w", position=(300.0, 80.0), width=50.0, height=50.0)
    pet = make_pet(position=(100.0, 100.0))
    avoid_obstacles(pet, [obstacle])
    assert pet.velocity == vec.ZERO


def test_avoid_obstacle_skips_when_inside():
    obstacle = Obstacle(id="w", position=(50.0, 50.0), width=100.0, height=100.0)
    pet = make_pet(position=(100.0, 100.0))
    avoid_obstacles(pet, [obstacle])
    assert pet.velocity == vec.ZERO


def test_avoid_obstacles_sum():
    left = Obstacle(id="l", position=(40.0, 80.0), width=10.0, height=40.0)
    right = Obstacle(id="r", position=(150.0, 80.0), width=10.0, height=40.0)
    pet = make_pet(position=(100.0, 100.0))
    avoid_obstacles(pet, [left, right])
    assert math.isclose(pet.velocity[0], 0.0, abs_tol=1e-9)


# --- cap_speed / seek / flee ---

def test_cap_speed():
    pet = make_pet(velocity=(300.0, 400.0))
    cap_speed(pet, 100.0)
    assert math.isclose(vec.magnitude(pet.velocity), 100.0)


def test_seek_nudges_toward_target():
    pet = make_pet(position=(0.0, 0.0))
    seek(pet, (10.0, 0.0))
    assert math.isclose(pet.velocity[0], 10.0)
    assert math.isclose(pet.velocity[1], 0.0)


def test_seek_close_target_uses_unit_floor():
    pet = make_pet(position=(0.0, 0.0))
    seek(pet, (0.5, 0.0))
    assert math.isclose(pet.velocity[0], 100.0)


def test_seek_same_position_is_noop():
    pet = make_pet(velocity=(1.0, 2.0))
    seek(pet, pet.position)
    flee(pet, pet.position)
    assert pet.velocity == (1.0, 2.0)


def test_flee_pushes_away():
    pet = make_pet(position=(0.0, 0.0))
    flee(pet, (0.0, 20.0), strength=0.8)
    assert math.isclose(pet.velocity[1], -4.0)


# --- steer ---

def test_steer_skips_interacting_pet():
    pet = make_pet(position=(10.0, 10.0), velocity=(1.0, 1.0))
    pet.state = BehaviorState.INTERACTING
    steer(pet, 0.1, BOUNDS, (), random.Random(1))
    assert pet.velocity == (1.0, 1.0)


def test_steer_counts_down_timer_and_caps():
    pet = make_pet(velocity=(300.0, 0.0))
    pet.idle_timer = 5000.0
    steer(pet, 0.1, BOUNDS, (), random.Random(1))
    assert math.isclose(pet.idle_timer, 4900.0)
    assert math.isclose(pet.velocity[0], 100.0)


def test_steer_expired_timer_picks_new_walk():
    pet = make_pet()
    steer(pet, 0.1, BOUNDS, (), StubRandom(0.5))
    assert pet.state is BehaviorState.MOVING
    assert math.isclose(pet.idle_timer, 1000.0 + 0.5 * 2000.0)


def test_steer_edge_force_before_cap():
    pet = make_pet(position=(40.0, 300.0), velocity=(-50.0, 0.0))
    pet.idle_timer = 5000.0
    steer(pet, 0.016, BOUNDS, (), random.Random(1))
    assert pet.velocity == (50.0, 0.0)


def test_config_validation():
    with pytest.raises(ValueError):
        SteeringConfig(move_probability=1.5)
    with pytest.raises(ValueError):
        SteeringConfig(min_walk_speed=120.0)
