"""Pet Ranch - pygame host for the ranch simulation.

Pets wander the canvas, pair up for short scripted interactions, and keep
clear of the desktop widgets, which can be dragged around by their title
bars.

Controls:
  A            Add a pet at a random spot
  D            Remove the most recently added pet
  C            Remove every pet
  1 / 2 / 3    Add a timer / sticky note / to-do list at the mouse
  Left-drag    Move a widget by its title bar
  Left-click   Widget action (start/stop timer, cycle note color, tick item)
  Right-click  Remove the pet under the mouse
  Space        Pause / Resume
  Escape       Quit
"""
from __future__ import annotations

import argparse
import itertools
import sys

import pygame

from game.widgets import NOTE, TIMER, TODO, Widget, make_widget, widget_at
from ranch_physics import vec
from ranch_signal import InteractionEnded, InteractionStarted, PetAdded, PetRemoved
from ranch_sim import MAX_PETS, Ranch, RanchConfig
from ranch_social import InteractionConfig
from ui.constants import FPS, HEIGHT, LOG_H, WIDTH
from ui.render import (
    EventLogPanel,
    draw_background,
    draw_interactions,
    draw_pets,
    draw_widget,
)

PET_NAMES = [
    "Mochi", "Bun", "Pip", "Tofu", "Clover", "Biscuit", "Nori", "Pebble",
    "Sprout", "Maple", "Dumpling", "Fig", "Juniper", "Waffle", "Olive",
]

WIDGET_KEYS = {pygame.K_1: TIMER, pygame.K_2: NOTE, pygame.K_3: TODO}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pet Ranch - pygame demo")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--pets", type=int, default=6, help=f"Starting pets (0-{MAX_PETS}, default: 6)")
    p.add_argument("--trigger-probability", type=float, default=0.01,
                   help="Per-frame interaction chance for a pair in range (default: 0.01)")
    args = p.parse_args()
    args.pets = max(0, min(MAX_PETS, args.pets))
    return args


def main() -> None:
    args = parse_args()
    canvas_h = HEIGHT - LOG_H
    ranch = Ranch(
        RanchConfig(
            width=WIDTH,
            height=canvas_h,
            interaction=InteractionConfig(trigger_probability=args.trigger_probability),
        ),
        seed=args.seed,
    )

    counter = itertools.count(1)
    roster: list[str] = []

    def add_pet() -> None:
        if len(ranch) >= MAX_PETS:
            log.add(f"The ranch is full ({MAX_PETS} pets)")
            return
        n = next(counter)
        pet_id = f"pet-{n}"
        ranch.add_pet(pet_id, name=f"{PET_NAMES[(n - 1) % len(PET_NAMES)]}")
        roster.append(pet_id)

    def remove_pet(pet_id: str) -> None:
        ranch.remove_pet(pet_id)
        if pet_id in roster:
            roster.remove(pet_id)

    widgets: list[Widget] = [
        make_widget(TIMER, "timer-1", WIDTH - 230, 30),
        make_widget(NOTE, "note-1", 40, canvas_h - 220),
    ]
    widget_ids = itertools.count(2)
    dragging: Widget | None = None

    log = EventLogPanel()

    def _name(pet_id: str) -> str:
        pet = ranch.world.find(pet_id)
        return pet.name if pet is not None else pet_id

    def _on_added(signal: PetAdded) -> None:
        log.add(f"{_name(signal.pet_id)} joined the ranch")

    def _on_removed(signal: PetRemoved) -> None:
        log.add(f"{signal.pet_id} left the ranch")

    def _on_started(signal: InteractionStarted) -> None:
        a, b = (_name(pid) for pid in signal.pair)
        log.add(f"{a} and {b}: {signal.kind.value}")

    def _on_ended(signal: InteractionEnded) -> None:
        if signal.reason != "completed":
            log.add(f"{signal.kind.value} interrupted")

    ranch.bus.on(PetAdded, _on_added)
    ranch.bus.on(PetRemoved, _on_removed)
    ranch.bus.on(InteractionStarted, _on_started)
    ranch.bus.on(InteractionEnded, _on_ended)

    for _ in range(args.pets):
        add_pet()

    pygame.init()
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    pygame.display.set_caption("Pet Ranch")
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("monospace", 12)

    paused = False
    running = True

    while running:
        dt = clock.tick(FPS) / 1000.0

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    running = False
                elif event.key == pygame.K_SPACE:
                    paused = not paused
                elif event.key == pygame.K_a:
                    add_pet()
                elif event.key == pygame.K_d and roster:
                    remove_pet(roster[-1])
                elif event.key == pygame.K_c:
                    ranch.clear()
                    roster.clear()
                elif event.key in WIDGET_KEYS:
                    kind = WIDGET_KEYS[event.key]
                    mx, my = pygame.mouse.get_pos()
                    widgets.append(make_widget(kind, f"{kind}-{next(widget_ids)}", mx, my))

            elif event.type == pygame.MOUSEBUTTONDOWN:
                point = (float(event.pos[0]), float(event.pos[1]))
                if event.button == 1:
                    widget = widget_at(widgets, point)
                    if widget is not None:
                        # Bring to front.
                        widgets.remove(widget)
                        widgets.append(widget)
                        if widget.in_header(point):
                            widget.start_drag(point)
                            dragging = widget
                        else:
                            widget.handle_click(point)
                elif event.button == 3:
                    for view in ranch.pets():
                        if vec.distance(view.position, point) <= view.size / 2:
                            remove_pet(view.id)
                            break

            elif event.type == pygame.MOUSEMOTION and dragging is not None:
                dragging.drag_to((float(event.pos[0]), float(event.pos[1])))

            elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and dragging is not None:
                dragging.stop_drag()
                dragging = None

        # --- Update ---
        for widget in widgets:
            widget.update(dt)
        if not paused:
            ranch.step(dt, obstacles=[w.body for w in widgets])

        # --- Draw ---
        canvas = screen.subsurface((0, 0, WIDTH, canvas_h))
        draw_background(canvas, WIDTH, canvas_h)
        draw_interactions(canvas, font, ranch.interactions())
        draw_pets(canvas, font, ranch.pets())
        for widget in widgets:
            draw_widget(canvas, font, widget)

        status = f"Pets: {len(ranch)}/{MAX_PETS}   Interactions: {len(ranch.coordinator)}   FPS: {clock.get_fps():.0f}"
        if paused:
            status += "   [PAUSED]"
        screen.blit(font.render(status, True, (30, 30, 40)), (10, 8))
        log.draw(screen, font, 0, canvas_h, WIDTH, LOG_H)

        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
