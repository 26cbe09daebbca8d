"""Headless ranch runner.

Steps a ranch at a fixed frame rate with no rendering and logs a summary
at regular intervals of simulated time.

Run: python -m ranch_sim --pets 12 --seconds 60
"""
from __future__ import annotations

import argparse
import logging
from collections import Counter

from ranch_physics import Obstacle
from ranch_signal import InteractionEnded, InteractionStarted
from ranch_social import InteractionConfig

from ranch_sim.config import MAX_PETS, RanchConfig
from ranch_sim.simulation import Ranch

logger = logging.getLogger("ranch_sim")


def parse_obstacle(text: str) -> tuple[float, float, float, float]:
    """Parse ``x,y,width,height``."""
    parts = text.split(",")
    if len(parts) != 4:
        raise argparse.ArgumentTypeError(f"expected x,y,width,height, got {text!r}")
    try:
        x, y, w, h = (float(p) for p in parts)
    except ValueError:
        raise argparse.ArgumentTypeError(f"non-numeric obstacle {text!r}") from None
    return x, y, w, h


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pet ranch - headless simulation run")
    p.add_argument("--pets", type=int, default=8, help=f"Pets to add (0-{MAX_PETS}, default: 8)")
    p.add_argument("--seconds", type=float, default=30.0, help="Simulated seconds (default: 30)")
    p.add_argument("--fps", type=int, default=60, help="Frames per simulated second (default: 60)")
    p.add_argument("--seed", type=int, default=42, help="Random seed (default: 42)")
    p.add_argument("--width", type=float, default=800.0, help="Canvas width (default: 800)")
    p.add_argument("--height", type=float, default=600.0, help="Canvas height (default: 600)")
    p.add_argument("--obstacle", type=parse_obstacle, action="append", default=[],
                   metavar="X,Y,W,H", help="Add a rectangular obstacle (repeatable)")
    p.add_argument("--trigger-probability", type=float, default=0.01,
                   help="Per-tick interaction chance for a pair in range (default: 0.01)")
    p.add_argument("--stats-every", type=float, default=5.0,
                   help="Log a summary every N simulated seconds (default: 5)")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)
    args.pets = max(0, min(MAX_PETS, args.pets))
    args.fps = max(1, args.fps)
    return args


def build_ranch(args: argparse.Namespace) -> Ranch:
    config = RanchConfig(
        width=args.width,
        height=args.height,
        interaction=InteractionConfig(trigger_probability=args.trigger_probability),
    )
    obstacles = [
        Obstacle(id=f"obstacle-{i}", position=(x, y), width=w, height=h)
        for i, (x, y, w, h) in enumerate(args.obstacle)
    ]
    ranch = Ranch(config, seed=args.seed, obstacles=obstacles)
    for i in range(args.pets):
        ranch.add_pet(f"pet-{i:02d}")
    return ranch


def summarize(ranch: Ranch) -> dict[str, int]:
    states = Counter(view.state.value for view in ranch.pets())
    return {
        "pets": len(ranch),
        "idle": states.get("idle", 0),
        "moving": states.get("moving", 0),
        "interacting": states.get("interacting", 0),
        "interactions": len(ranch.coordinator),
    }


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    ranch = build_ranch(args)
    totals: Counter[str] = Counter()

    def _on_started(signal: InteractionStarted) -> None:
        totals[signal.kind.value] += 1
        logger.info("%s and %s start to %s", *signal.pair, signal.kind.value)

    def _on_ended(signal: InteractionEnded) -> None:
        logger.debug("%s and %s stop (%s)", *signal.pair, signal.reason)

    ranch.bus.on(InteractionStarted, _on_started)
    ranch.bus.on(InteractionEnded, _on_ended)

    dt = 1.0 / args.fps
    frames = int(args.seconds * args.fps)
    stats_frames = max(1, int(args.stats_every * args.fps))
    logger.info(
        "running %d pet(s) for %.1fs at %d fps (seed %d)",
        len(ranch), args.seconds, args.fps, ranch.seed,
    )
    for frame in range(1, frames + 1):
        ranch.step(dt)
        if frame % stats_frames == 0:
            logger.info("t=%.1fs %s", ranch.clock.elapsed, summarize(ranch))

    logger.info("interactions started: %s", dict(totals) or "none")
    return 0
