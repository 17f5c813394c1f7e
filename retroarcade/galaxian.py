"""Galaxian: shoot down a fleet of enemies before they reach the player."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

import pygame

from retroarcade.core import (
    BLACK,
    SKYBLUE,
    WHITE,
    YELLOW,
    Controls,
    Key,
    Rect,
    check_collision_recs,
)
from retroarcade.display import _draw_text, _rect_tuple, load_sound, run_game

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 900
STARTING_LIVES = 3

PLAYER_WIDTH = 48
PLAYER_HEIGHT = 32
PLAYER_SPEED = 6

BULLET_WIDTH = 4
BULLET_HEIGHT = 16
BULLET_SPEED = 12

ENEMY_COLS = 8
ENEMY_ROWS = 4
ENEMY_WIDTH = 40
ENEMY_HEIGHT = 32
ENEMY_HORZ_SPACING = 16
ENEMY_VERT_SPACING = 16

ENEMY_COLOR = (255, 0, 128)
TITLE = "galaxian"
MUSIC_PATH = "resources/background_music.ogg"
LASER_PATH = "resources/laser.wav"


@dataclass
class Bullet:
    """The player's single shot."""

    rect: Rect = field(default_factory=Rect)
    active: bool = False


@dataclass
class Enemy:
    """One member of the enemy fleet."""

    rect: Rect
    alive: bool = True


def _new_fleet() -> list[list[Enemy]]:
    return [
        [
            Enemy(
                Rect(
                    80 + col * (ENEMY_WIDTH + ENEMY_HORZ_SPACING),
                    80 + row * (ENEMY_HEIGHT + ENEMY_VERT_SPACING),
                    ENEMY_WIDTH,
                    ENEMY_HEIGHT,
                )
            )
            for col in range(ENEMY_COLS)
        ]
        for row in range(ENEMY_ROWS)
    ]


class GalaxianGame:
    """State and rules of a game of Galaxian."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT
    music_path = MUSIC_PATH

    def __init__(self, laser_sound=None) -> None:
        self.laser_sound = laser_sound
        self.bullet = Bullet()
        self.reset()

    def reset(self) -> None:
        """Start a new game with the full fleet and fresh lives."""
        self.player = Rect(
            (SCREEN_WIDTH - PLAYER_WIDTH) // 2,
            SCREEN_HEIGHT - PLAYER_HEIGHT - 40,
            PLAYER_WIDTH,
            PLAYER_HEIGHT,
        )
        self.bullet.active = False
        self.enemies = _new_fleet()
        self.score = 0
        self.lives = STARTING_LIVES

    def _all_enemies(self):
        return (enemy for row in self.enemies for enemy in row)

    def _fire(self) -> None:
        player = self.player
        self.bullet.rect = Rect(
            player.x + PLAYER_WIDTH // 2 - BULLET_WIDTH // 2,
            player.y - BULLET_HEIGHT,
            BULLET_WIDTH,
            BULLET_HEIGHT,
        )
        self.bullet.active = True
        if self.laser_sound is not None:
            self.laser_sound.play()

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        player, bullet = self.player, self.bullet

        step = PLAYER_SPEED * (controls.is_down(Key.RIGHT) - controls.is_down(Key.LEFT))
        player.x = min(max(player.x + step, 0), SCREEN_WIDTH - PLAYER_WIDTH)

        if controls.is_pressed(Key.SPACE) and not bullet.active:
            self._fire()

        if bullet.active:
            bullet.rect.y -= BULLET_SPEED
            if bullet.rect.y + BULLET_HEIGHT < 0:
                bullet.active = False

        if bullet.active:
            for enemy in self._all_enemies():
                if enemy.alive and check_collision_recs(bullet.rect, enemy.rect):
                    enemy.alive = False
                    bullet.active = False
                    self.score += 100

        if any(e.alive and e.rect.y + ENEMY_HEIGHT >= player.y for e in self._all_enemies()):
            self.lives -= 1
            self.reset()
            return

        if not any(enemy.alive for enemy in self._all_enemies()) or self.lives <= 0:
            self.reset()

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)
        pygame.draw.rect(surface, SKYBLUE, _rect_tuple(self.player))
        if self.bullet.active:
            pygame.draw.rect(surface, YELLOW, _rect_tuple(self.bullet.rect))
        for enemy in self._all_enemies():
            if enemy.alive:
                pygame.draw.rect(surface, ENEMY_COLOR, _rect_tuple(enemy.rect))
        _draw_text(surface, f"Score: {self.score}", 20, 20, 32, WHITE)
        _draw_text(surface, f"Lives: {self.lives}", SCREEN_WIDTH - 160, 20, 32, WHITE)


def main(argv=None) -> int:
    """Play Galaxian in a window."""
    parser = argparse.ArgumentParser(prog="galaxian", description="Play Galaxian.")
    parser.parse_args(argv)
    game = GalaxianGame(laser_sound=load_sound(LASER_PATH))
    run_game(game, TITLE, 60)
    return 0