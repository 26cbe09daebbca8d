"""Tests for pair keys and the active-interaction record."""
from __future__ import annotations

import pytest

from ranch_physics import Pet
from ranch_social import ActiveInteraction, InteractionType, pair_key


def test_pair_key_is_order_independent():
    assert pair_key("b", "a") == pair_key("a", "b") == ("a", "b")
    assert pair_key(7, 3) == (3, 7)


def test_pair_key_with_mixed_id_types():
    assert pair_key(1, "b") == pair_key("b", 1) == (1, "b")
    assert pair_key("a", 2) == (2, "a")


def test_interaction_type_values():
    assert [k.value for k in InteractionType] == ["play", "rest", "follow", "group", "avoid"]


def make_interaction(**kwargs) -> ActiveInteraction:
    return ActiveInteraction(
        first=Pet(id="z", position=(0.0, 0.0)),
        second=Pet(id="a", position=(10.0, 0.0)),
        kind=InteractionType.FOLLOW,
        started_at=0.0,
        duration_ms=5000.0,
        **kwargs,
    )


def test_key_is_canonical():
    assert make_interaction().key == ("a", "z")


def test_finished():
    inter = make_interaction(elapsed_ms=4999.0)
    assert not inter.finished
    inter.elapsed_ms = 5000.0
    assert inter.finished


def test_partner_of():
    inter = make_interaction()
    assert inter.partner_of("z").id == "a"
    assert inter.partner_of("a").id == "z"
    with pytest.raises(KeyError):
        inter.partner_of("nobody")


def test_involves():
    inter = make_interaction()
    assert inter.involves("a")
    assert inter.involves("z")
    assert not inter.involves("m")
