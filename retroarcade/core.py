"""Geometry, input state, collision tests and colours shared by the games."""

from __future__ import annotations

import enum
from dataclasses import dataclass

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (253, 249, 0)
LIGHTGRAY = (200, 200, 200)
GRAY = (130, 130, 130)
DARKGRAY = (80, 80, 80)
RED = (230, 41, 55)
GREEN = (0, 228, 48)
BLUE = (0, 121, 241)
MAGENTA = (255, 0, 255)
SKYBLUE = (102, 191, 255)
MAROON = (190, 33, 55)


class Key(enum.Enum):
    """Keys the games react to."""

    LEFT = enum.auto()
    RIGHT = enum.auto()
    UP = enum.auto()
    DOWN = enum.auto()
    SPACE = enum.auto()
    ENTER = enum.auto()
    W = enum.auto()
    A = enum.auto()
    S = enum.auto()
    D = enum.auto()
    P = enum.auto()


@dataclass
class Vec2:
    """A 2D point or vector."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Rect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    x: float = 0.0
    y: float = 0.0
    width: float = 0.0
    height: float = 0.0


@dataclass(frozen=True)
class Controls:
    """Keyboard state for one frame: keys held and keys newly pressed."""

    held: frozenset[Key] = frozenset()
    pressed: frozenset[Key] = frozenset()

    def is_down(self, key: Key) -> bool:
        """Return whether the key is held during this frame."""
        return key in self.held

    def is_pressed(self, key: Key) -> bool:
        """Return whether the key went down in this frame."""
        return key in self.pressed


def check_collision_recs(a: Rect, b: Rect) -> bool:
    """Return whether two rectangles overlap; touching edges do not count."""
    return (
        a.x < b.x + b.width
        and a.x + a.width > b.x
        and a.y < b.y + b.height
        and a.y + a.height > b.y
    )


def check_collision_circle_rec(center: Vec2, radius: float, rec: Rect) -> bool:
    """Return whether a circle and a rectangle overlap."""
    half_w = rec.width / 2.0
    half_h = rec.height / 2.0
    dx = abs(center.x - (rec.x + half_w))
    dy = abs(center.y - (rec.y + half_h))

    if dx > half_w + radius or dy > half_h + radius:
        return False
    if dx <= half_w or dy <= half_h:
        return True

    corner_sq = (dx - half_w) ** 2 + (dy - half_h) ** 2
    return corner_sq <= radius * radius