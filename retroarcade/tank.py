"""Tank: two players drive tanks around obstacles and fire shells."""

from __future__ import annotations

import argparse
import math
from dataclasses import dataclass, field

import pygame

from retroarcade.core import (
    BLACK,
    DARKGRAY,
    GRAY,
    GREEN,
    WHITE,
    YELLOW,
    Controls,
    Key,
    Rect,
    Vec2,
    check_collision_recs,
)
from retroarcade.display import run_game

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 900

TANK_SIZE = 32
TANK_SPEED = 2.0
TANK_ROT_SPEED = 2.5

BULLET_SPEED = 5.0
BULLET_RADIUS = 4
MAX_BULLETS = 3

OBSTACLE_SIZE = 64

TITLE = "tank"

_HALF = TANK_SIZE // 2
_BODY_HALF_HEIGHT = TANK_SIZE * 0.3


def _forward(rotation: float) -> Vec2:
    rad = math.radians(rotation)
    return Vec2(math.sin(rad), -math.cos(rad))


@dataclass
class Bullet:
    """A shell fired by a tank."""

    position: Vec2 = field(default_factory=Vec2)
    rotation: float = 0.0
    active: bool = False


@dataclass
class Tank:
    """A tank with its own keys and a fixed stock of shells."""

    position: Vec2
    rotation: float
    color: tuple[int, int, int]
    up_key: Key
    down_key: Key
    left_key: Key
    right_key: Key
    fire_key: Key
    bullets: list[Bullet] = field(
        default_factory=lambda: [Bullet() for _ in range(MAX_BULLETS)]
    )


def _obstacles() -> list[Rect]:
    return [
        Rect(SCREEN_WIDTH // 2 - OBSTACLE_SIZE // 2, 200, OBSTACLE_SIZE, OBSTACLE_SIZE),
        Rect(100, 400, OBSTACLE_SIZE, OBSTACLE_SIZE),
        Rect(SCREEN_WIDTH - 100 - OBSTACLE_SIZE, 400, OBSTACLE_SIZE, OBSTACLE_SIZE),
        Rect(SCREEN_WIDTH // 2 - OBSTACLE_SIZE // 2, 600, OBSTACLE_SIZE, OBSTACLE_SIZE),
        Rect(200, 700, OBSTACLE_SIZE, OBSTACLE_SIZE),
        Rect(SCREEN_WIDTH - 200 - OBSTACLE_SIZE, 700, OBSTACLE_SIZE, OBSTACLE_SIZE),
    ]


class TankGame:
    """State and rules of a two-player tank game."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Place both tanks at their corners with no shells in flight."""
        self.tanks = [
            Tank(Vec2(100, 100), 0.0, GREEN, Key.W, Key.S, Key.A, Key.D, Key.SPACE),
            Tank(
                Vec2(SCREEN_WIDTH - 100, SCREEN_HEIGHT - 100),
                180.0,
                YELLOW,
                Key.UP,
                Key.DOWN,
                Key.LEFT,
                Key.RIGHT,
                Key.ENTER,
            ),
        ]
        self.obstacles = _obstacles()

    def blocked(self, position: Vec2) -> bool:
        """Return whether a tank body centred at ``position`` hits an obstacle."""
        body = Rect(
            position.x - _HALF,
            position.y - _BODY_HALF_HEIGHT,
            TANK_SIZE,
            TANK_SIZE * 0.6,
        )
        return any(check_collision_recs(body, obstacle) for obstacle in self.obstacles)

    def _update_tank(self, tank: Tank, controls: Controls) -> None:
        rotation = tank.rotation
        if controls.is_down(tank.left_key):
            rotation -= TANK_ROT_SPEED
        if controls.is_down(tank.right_key):
            rotation += TANK_ROT_SPEED
        forward = _forward(rotation)

        pos = tank.position
        next_pos = Vec2(pos.x, pos.y)
        if controls.is_down(tank.up_key):
            attempt = Vec2(pos.x + forward.x * TANK_SPEED, pos.y + forward.y * TANK_SPEED)
            if not self.blocked(attempt):
                next_pos = attempt
        if controls.is_down(tank.down_key):
            attempt = Vec2(pos.x - forward.x * TANK_SPEED, pos.y - forward.y * TANK_SPEED)
            if not self.blocked(attempt):
                next_pos = attempt

        next_pos.x = min(max(next_pos.x, _HALF), SCREEN_WIDTH - _HALF)
        next_pos.y = min(max(next_pos.y, _HALF), SCREEN_HEIGHT - _HALF)

        tank.rotation = rotation
        tank.position = next_pos

        if controls.is_pressed(tank.fire_key):
            shell = next((b for b in tank.bullets if not b.active), None)
            if shell is not None:
                reach = _HALF + BULLET_RADIUS
                shell.active = True
                shell.position = Vec2(
                    next_pos.x + forward.x * reach,
                    next_pos.y + forward.y * reach,
                )
                shell.rotation = tank.rotation

    @staticmethod
    def _update_bullets(tank: Tank) -> None:
        for shell in tank.bullets:
            if not shell.active:
                continue
            direction = _forward(shell.rotation)
            shell.position.x += direction.x * BULLET_SPEED
            shell.position.y += direction.y * BULLET_SPEED
            p = shell.position
            if p.x < 0 or p.x > SCREEN_WIDTH or p.y < 0 or p.y > SCREEN_HEIGHT:
                shell.active = False

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        for tank in self.tanks:
            self._update_tank(tank, controls)
        for tank in self.tanks:
            self._update_bullets(tank)

    @staticmethod
    def _draw_tank(surface, tank: Tank) -> None:
        centre = tank.position
        rad = math.radians(tank.rotation)
        cos_r, sin_r = math.cos(rad), math.sin(rad)
        corners = [
            (-_HALF, -_BODY_HALF_HEIGHT),
            (_HALF, -_BODY_HALF_HEIGHT),
            (_HALF, _BODY_HALF_HEIGHT),
            (-_HALF, _BODY_HALF_HEIGHT),
        ]
        points = [
            (centre.x + x * cos_r - y * sin_r, centre.y + x * sin_r + y * cos_r)
            for x, y in corners
        ]
        pygame.draw.polygon(surface, tank.color, points)
        barrel_end = (
            centre.x + math.sin(rad) * _HALF,
            centre.y - math.cos(rad) * _HALF,
        )
        pygame.draw.line(surface, BLACK, (centre.x, centre.y), barrel_end, 6)

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(DARKGRAY)
        for tank in self.tanks:
            self._draw_tank(surface, tank)
        for tank in self.tanks:
            for shell in tank.bullets:
                if shell.active:
                    pygame.draw.circle(
                        surface,
                        WHITE,
                        (int(shell.position.x), int(shell.position.y)),
                        BULLET_RADIUS,
                    )
        for obstacle in self.obstacles:
            box = (int(obstacle.x), int(obstacle.y), int(obstacle.width), int(obstacle.height))
            pygame.draw.rect(surface, GRAY, box)
            pygame.draw.rect(surface, BLACK, box, 2)


def main(argv=None) -> int:
    """Play the two-player tank game in a window."""
    parser = argparse.ArgumentParser(prog="tank", description="Play a two-player tank game.")
    parser.parse_args(argv)
    run_game(TankGame(), TITLE, 60)
    return 0