"""Sandbox: a test bed where one enemy swoops along an arc after a delay."""

from __future__ import annotations

import argparse
import logging
import math
import time

import pygame

from retroarcade.core import (
    BLACK,
    RED,
    SKYBLUE,
    WHITE,
    YELLOW,
    Controls,
    Key,
    Rect,
)
from retroarcade.display import load_sound, run_game
from retroarcade.galaxian import Bullet, Enemy
from retroarcade.timer import Timer

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 900
STARTING_LIVES = 3

PLAYER_WIDTH = 48
PLAYER_HEIGHT = 32
PLAYER_SPEED = 6

BULLET_WIDTH = 4
BULLET_HEIGHT = 16
BULLET_SPEED = 12

ENEMY_WIDTH = 40
ENEMY_HEIGHT = 32

ATTACK_DELAY = 1.0
CURVE_DURATION = 2.0
ARC_RADIUS = 200.0
ARC_CENTER_X = SCREEN_WIDTH / 2.0
ARC_CENTER_Y = SCREEN_HEIGHT / 2.0

TITLE = "galaxian"
MUSIC_PATH = "resources/background_music.ogg"
LASER_PATH = "resources/laser.wav"

_log = logging.getLogger(__name__)
_fonts: dict[int, pygame.font.Font] = {}


def _draw_text(surface, text, x, y, size, color):
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    surface.blit(font.render(text, True, color), (x, y))


def _as_tuple(rect: Rect) -> tuple[int, int, int, int]:
    return int(rect.x), int(rect.y), int(rect.width), int(rect.height)


def _lerp(start: float, end: float, amount: float) -> float:
    return start + amount * (end - start)


class SandboxGame:
    """A player ship and one enemy that follows a curved path once a timer ends."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT
    music_path = MUSIC_PATH
    frame_time_aware = True

    def __init__(self, laser_sound=None, clock=time.monotonic) -> None:
        self.laser_sound = laser_sound
        self.timer = Timer(clock=clock)
        self.bullet = Bullet()
        self.enemy = Enemy(Rect(), alive=True)
        # Progress along the curve survives restarts of the game.
        self.curve_progress = 0.0
        self.reset()

    def reset(self) -> None:
        """Put the player and the enemy back in place and restart the delay."""
        self.player = Rect(
            (SCREEN_WIDTH - PLAYER_WIDTH) // 2,
            SCREEN_HEIGHT - PLAYER_HEIGHT - 40,
            PLAYER_WIDTH,
            PLAYER_HEIGHT,
        )
        self.bullet.active = False
        self.enemy.rect = Rect(
            (SCREEN_WIDTH - ENEMY_WIDTH) // 2,
            SCREEN_HEIGHT // 2 - ENEMY_HEIGHT // 2,
            ENEMY_WIDTH,
            ENEMY_HEIGHT,
        )
        self.enemy.alive = True
        self.timer.start(ATTACK_DELAY)
        self.score = 0
        self.lives = STARTING_LIVES

    def _move_enemy(self, dt: float) -> None:
        enemy = self.enemy
        self.curve_progress += dt / CURVE_DURATION
        t = self.curve_progress
        if t < 0.5:
            angle = _lerp(3.0 * math.pi / 4.0, math.pi / 4.0, t * 2.0)
        else:
            angle = _lerp(math.pi / 4.0, 5.0 * math.pi / 4.0, (t - 0.5) * 2.0)
        _log.debug("t: %.2f", angle)

        enemy.rect.x = ARC_CENTER_X + ARC_RADIUS * math.cos(angle) - ENEMY_WIDTH / 2.0
        enemy.rect.y = ARC_CENTER_Y + ARC_RADIUS * math.sin(angle) - ENEMY_HEIGHT / 2.0

        if enemy.rect.y > SCREEN_HEIGHT - ENEMY_HEIGHT:
            enemy.rect.x = (SCREEN_WIDTH - ENEMY_WIDTH) // 2
            enemy.rect.y = SCREEN_HEIGHT // 2 - ENEMY_HEIGHT // 2
            self.curve_progress = 0.0
            self.timer.start(ATTACK_DELAY)

    def update(self, controls: Controls, dt: float) -> None:
        """Advance the game by one frame that lasted ``dt`` seconds."""
        if self.timer.done() and self.enemy.alive:
            self._move_enemy(dt)

        player, bullet = self.player, self.bullet
        if controls.is_down(Key.LEFT):
            player.x -= PLAYER_SPEED
        if controls.is_down(Key.RIGHT):
            player.x += PLAYER_SPEED
        player.x = min(max(player.x, 0), SCREEN_WIDTH - PLAYER_WIDTH)

        if controls.is_pressed(Key.SPACE) and not bullet.active:
            bullet.rect = Rect(
                player.x + PLAYER_WIDTH // 2 - BULLET_WIDTH // 2,
                player.y - BULLET_HEIGHT,
                BULLET_WIDTH,
                BULLET_HEIGHT,
            )
            bullet.active = True
            if self.laser_sound is not None:
                self.laser_sound.play()

        if bullet.active:
            bullet.rect.y -= BULLET_SPEED
            if bullet.rect.y + BULLET_HEIGHT < 0:
                bullet.active = False

        if self.lives <= 0:
            self.reset()

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)
        pygame.draw.rect(surface, SKYBLUE, _as_tuple(self.player))
        if self.bullet.active:
            pygame.draw.rect(surface, YELLOW, _as_tuple(self.bullet.rect))
        if self.enemy.alive:
            pygame.draw.rect(surface, RED, _as_tuple(self.enemy.rect))
        done = "true" if self.timer.done() else "false"
        _draw_text(surface, f"Timer done: {done}", 20, 60, 32, WHITE)
        _draw_text(surface, f"Score: {self.score}", 20, 20, 32, WHITE)
        _draw_text(surface, f"Lives: {self.lives}", SCREEN_WIDTH - 160, 20, 32, WHITE)


def main(argv=None) -> int:
    """Run the sandbox in a window."""
    parser = argparse.ArgumentParser(prog="sandbox", description="Run the enemy-path sandbox.")
    parser.parse_args(argv)
    game = SandboxGame(laser_sound=load_sound(LASER_PATH))
    run_game(game, TITLE, 60)
    return 0