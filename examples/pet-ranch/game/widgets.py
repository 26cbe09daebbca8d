"""Desktop widgets that sit on the ranch as draggable obstacles.

Widgets are one tagged type rather than a class hierarchy: ``kind`` picks
the click behaviour, and every widget carries the same capabilities
(contains, handle_click, update, drag).
"""
from __future__ import annotations

from dataclasses import dataclass, field

from ranch_physics import Obstacle
from ranch_physics.vec import Vec

TIMER = "timer"
NOTE = "note"
TODO = "todo"

HEADER_H = 22
TODO_ROW_H = 20
NOTE_COLORS = ["yellow", "pink", "blue", "green"]

DEFAULT_SIZES: dict[str, tuple[float, float]] = {
    TIMER: (200.0, 140.0),
    NOTE: (200.0, 150.0),
    TODO: (220.0, 160.0),
}


@dataclass
class TodoItem:
    text: str
    done: bool = False


@dataclass
class Widget:
    kind: str
    body: Obstacle
    # timer
    set_ms: float = 0.0
    remaining_ms: float = 0.0
    running: bool = False
    finished: bool = False
    # note
    text: str = ""
    color: str = NOTE_COLORS[0]
    # todo
    items: list[TodoItem] = field(default_factory=list)
    # drag state
    drag_offset: Vec | None = None

    @property
    def id(self) -> str:
        return str(self.body.id)

    @property
    def title(self) -> str:
        return {TIMER: "Countdown Timer", NOTE: "Sticky Note", TODO: "To-Do"}[self.kind]

    def contains(self, point: Vec) -> bool:
        return self.body.contains(point)

    def in_header(self, point: Vec) -> bool:
        return self.contains(point) and point[1] <= self.body.position[1] + HEADER_H

    # -- Dragging --

    def start_drag(self, point: Vec) -> None:
        x, y = self.body.position
        self.drag_offset = (point[0] - x, point[1] - y)

    def drag_to(self, point: Vec) -> None:
        if self.drag_offset is not None:
            self.body.move_to(point[0] - self.drag_offset[0], point[1] - self.drag_offset[1])

    def stop_drag(self) -> None:
        self.drag_offset = None

    # -- Behaviour --

    def update(self, dt: float) -> None:
        if self.kind == TIMER and self.running:
            self.remaining_ms = max(0.0, self.remaining_ms - dt * 1000.0)
            if self.remaining_ms <= 0.0:
                self.running = False
                self.finished = True

    def set_timer(self, minutes: int, seconds: int) -> None:
        if minutes < 0 or not 0 <= seconds < 60:
            raise ValueError("timer takes minutes >= 0 and seconds in [0, 60)")
        self.set_ms = (minutes * 60 + seconds) * 1000.0
        self.reset_timer()

    def reset_timer(self) -> None:
        self.running = False
        self.finished = False
        self.remaining_ms = self.set_ms

    def handle_click(self, point: Vec) -> None:
        if self.kind == TIMER:
            if self.finished:
                self.reset_timer()
            elif self.set_ms > 0:
                self.running = not self.running
        elif self.kind == NOTE:
            i = NOTE_COLORS.index(self.color)
            self.color = NOTE_COLORS[(i + 1) % len(NOTE_COLORS)]
        elif self.kind == TODO:
            row = int((point[1] - self.body.position[1] - HEADER_H) // TODO_ROW_H)
            if 0 <= row < len(self.items):
                self.items[row].done = not self.items[row].done


def make_widget(kind: str, widget_id: str, x: float, y: float) -> Widget:
    width, height = DEFAULT_SIZES[kind]
    widget = Widget(kind=kind, body=Obstacle(id=widget_id, position=(x, y), width=width, height=height))
    if kind == TIMER:
        widget.set_timer(5, 0)
    elif kind == NOTE:
        widget.text = "Feed the pets"
    elif kind == TODO:
        widget.items = [TodoItem("Stretch"), TodoItem("Drink water"), TodoItem("Pet a pet")]
    return widget


def widget_at(widgets: list[Widget], point: Vec) -> Widget | None:
    """Topmost widget under ``point`` (last drawn wins)."""
    for widget in reversed(widgets):
        if widget.contains(point):
            return widget
    return None
