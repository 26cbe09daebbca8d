"""Ranch rendering - background, widgets, pets, interaction effects."""
from __future__ import annotations

from collections import deque
from functools import lru_cache

import pygame

from game.widgets import HEADER_H, NOTE, TIMER, TODO, TODO_ROW_H, Widget
from ranch_sim import InteractionView, PetView
from ui.constants import (
    COLOR_GROUND,
    COLOR_LOG_BG,
    COLOR_LOG_TEXT,
    COLOR_SKY_BOTTOM,
    COLOR_SKY_TOP,
    COLOR_TEXT,
    GROUND_H,
    INTERACTION_COLORS,
    NOTE_FILL,
    STATE_RING,
)


def pet_color(name: str) -> pygame.Color:
    """Stable hue per pet name."""
    h = 0
    for ch in name:
        h = (ord(ch) + ((h << 5) - h)) & 0xFFFFFFFF
    color = pygame.Color(0, 0, 0)
    color.hsla = (h % 360, 70, 60, 100)
    return color


def draw_background(surface: pygame.Surface, width: int, height: int) -> None:
    for y in range(height):
        t = y / max(1, height - 1)
        color = [int(a + (b - a) * t) for a, b in zip(COLOR_SKY_TOP, COLOR_SKY_BOTTOM)]
        pygame.draw.line(surface, color, (0, y), (width, y))
    pygame.draw.rect(surface, COLOR_GROUND, (0, height - GROUND_H, width, GROUND_H))


@lru_cache(maxsize=None)
def _big_font() -> pygame.font.Font:
    return pygame.font.SysFont("monospace", 36, bold=True)


def _format_ms(ms: float) -> str:
    total = max(0, int(ms // 1000))
    return f"{total // 60:02d}:{total % 60:02d}"


def draw_widget(surface: pygame.Surface, font: pygame.font.Font, widget: Widget) -> None:
    x, y, w, h = (int(v) for v in widget.body.rect)
    if widget.kind == NOTE:
        fill = NOTE_FILL[widget.color]
    elif widget.kind == TIMER and widget.finished:
        fill = (255, 200, 200) if (pygame.time.get_ticks() // 250) % 2 else (255, 255, 255)
    else:
        fill = (255, 255, 255)
    pygame.draw.rect(surface, fill, (x, y, w, h))
    pygame.draw.rect(surface, (51, 51, 51), (x, y, w, h), 2)
    pygame.draw.line(surface, (51, 51, 51), (x, y + HEADER_H), (x + w, y + HEADER_H))
    surface.blit(font.render(widget.title, True, COLOR_TEXT), (x + 6, y + 4))

    if widget.kind == TIMER:
        text = _big_font().render(_format_ms(widget.remaining_ms), True, COLOR_TEXT)
        surface.blit(text, text.get_rect(center=(x + w // 2, y + h // 2 + 8)))
        hint = "running" if widget.running else ("done - click to reset" if widget.finished else "click to start")
        surface.blit(font.render(hint, True, COLOR_TEXT), (x + 6, y + h - 18))
    elif widget.kind == NOTE:
        surface.blit(font.render(widget.text, True, COLOR_TEXT), (x + 8, y + HEADER_H + 8))
    elif widget.kind == TODO:
        for i, item in enumerate(widget.items):
            mark = "[x]" if item.done else "[ ]"
            row_y = y + HEADER_H + 4 + i * TODO_ROW_H
            surface.blit(font.render(f"{mark} {item.text}", True, COLOR_TEXT), (x + 8, row_y))


def draw_interactions(surface: pygame.Surface, font: pygame.font.Font, views: list[InteractionView]) -> None:
    for view in views:
        color = INTERACTION_COLORS.get(view.kind.value, (255, 255, 255))
        (ax, ay), (bx, by) = view.positions
        pygame.draw.line(surface, color, (int(ax), int(ay)), (int(bx), int(by)), 2)
        label = font.render(view.kind.value, True, color)
        surface.blit(label, label.get_rect(center=(int((ax + bx) / 2), int((ay + by) / 2) - 12)))


def draw_pets(surface: pygame.Surface, font: pygame.font.Font, views: list[PetView]) -> None:
    for view in views:
        x, y = int(view.position[0]), int(view.position[1])
        radius = int(view.size / 2)
        pygame.draw.circle(surface, pet_color(view.name), (x, y), radius)
        pygame.draw.circle(surface, STATE_RING[view.state.value], (x, y), radius, 2)
        name = font.render(view.name, True, COLOR_TEXT)
        surface.blit(name, name.get_rect(center=(x, y + radius + 8)))


class EventLogPanel:
    """Scrolling list of recent ranch events."""

    def __init__(self, max_entries: int = 50) -> None:
        self.entries: deque[str] = deque(maxlen=max_entries)

    def add(self, text: str) -> None:
        self.entries.append(text)

    def draw(self, surface: pygame.Surface, font: pygame.font.Font, x: int, y: int, w: int, h: int) -> None:
        pygame.draw.rect(surface, COLOR_LOG_BG, (x, y, w, h))
        line_h = 14
        max_lines = max(1, (h - 8) // line_h)
        ty = y + 4
        for text in list(self.entries)[-max_lines:]:
            surface.blit(font.render(text, True, COLOR_LOG_TEXT), (x + 6, ty))
            ty += line_h
