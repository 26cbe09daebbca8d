"""Layout, color, and rendering constants."""
from __future__ import annotations

WIDTH, HEIGHT = 1024, 700
FPS = 60
LOG_H = 90

COLOR_SKY_TOP = (135, 206, 235)
COLOR_SKY_BOTTOM = (224, 246, 255)
COLOR_GROUND = (144, 238, 144)
GROUND_H = 50
COLOR_TEXT = (30, 30, 40)
COLOR_LOG_BG = (18, 18, 25)
COLOR_LOG_TEXT = (200, 200, 200)

STATE_RING: dict[str, tuple[int, int, int]] = {
    "idle": (90, 90, 90),
    "moving": (40, 40, 40),
    "interacting": (255, 215, 0),
}

INTERACTION_COLORS: dict[str, tuple[int, int, int]] = {
    "play": (255, 105, 180),
    "rest": (120, 160, 255),
    "follow": (255, 165, 0),
    "group": (60, 200, 120),
    "avoid": (230, 60, 60),
}

NOTE_FILL: dict[str, tuple[int, int, int]] = {
    "yellow": (255, 245, 157),
    "pink": (248, 187, 208),
    "blue": (179, 229, 252),
    "green": (200, 230, 201),
}
