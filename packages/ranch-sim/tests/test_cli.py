"""Tests for the headless runner."""
from __future__ import annotations

import argparse

import pytest

from ranch_sim import MAX_PETS
from ranch_sim.cli import build_ranch, main, parse_args, parse_obstacle, summarize


def test_parse_obstacle():
    assert parse_obstacle("10,20,200,150") == (10.0, 20.0, 200.0, 150.0)


@pytest.mark.parametrize("text", ["10,20,200", "a,b,c,d", ""])
def test_parse_obstacle_rejects_bad_input(text):
    with pytest.raises(argparse.ArgumentTypeError):
        parse_obstacle(text)


def test_parse_args_defaults():
    args = parse_args([])
    assert args.pets == 8
    assert args.seed == 42
    assert args.obstacle == []


def test_parse_args_clamps_pets():
    assert parse_args(["--pets", "100"]).pets == MAX_PETS
    assert parse_args(["--pets", "-3"]).pets == 0


def test_build_ranch():
    args = parse_args(["--pets", "3", "--obstacle", "100,100,50,50", "--obstacle", "400,300,80,40"])
    ranch = build_ranch(args)
    assert len(ranch) == 3
    assert [o.id for o in ranch.obstacles] == ["obstacle-0", "obstacle-1"]
    assert "pet-00" in ranch


def test_summarize_counts_states():
    ranch = build_ranch(parse_args(["--pets", "4"]))
    summary = summarize(ranch)
    assert summary["pets"] == 4
    assert summary["idle"] + summary["moving"] + summary["interacting"] == 4
    assert summary["interactions"] == 0


def test_main_runs(caplog):
    caplog.set_level("INFO")
    code = main(["--pets", "5", "--seconds", "2", "--stats-every", "1",
                 "--trigger-probability", "0.5"])
    assert code == 0
    assert "interactions started" in caplog.text
