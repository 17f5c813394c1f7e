"""Space Invaders: clear the descending grid of invaders with your ship."""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from retroarcade.core import (
    BLACK,
    GRAY,
    LIGHTGRAY,
    MAROON,
    WHITE,
    Controls,
    Key,
    Rect,
    Vec2,
    check_collision_recs,
)
from retroarcade.display import run_game

SCREEN_WIDTH = 600
SCREEN_HEIGHT = 800

NUM_SHOOTS = 5
NUM_MAX_ENEMIES = 50
GRID_WIDTH = 10
GRID_HEIGHT = 5
GRID_SPACING_X = 50
GRID_SPACING_Y = 50
GRID_OFFSET_X = 65
GRID_OFFSET_Y = 120

PLAYER_SIZE = 40
PLAYER_SPEED = 5
ENEMY_SIZE = 20
ENEMY_BASE_SPEED = 0.5
SHOT_WIDTH = 5
SHOT_HEIGHT = 10
SHOT_SPEED = 7
FLEET_DROP = 10
KILL_SCORE = 100

TITLE = "classic game: space invaders"
PLAYER_IMAGE_PATH = "resources/player-ship.png"

_fonts: dict[int, pygame.font.Font] = {}


def _font(size: int) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    return font


def _draw_text(surface, text, x, y, size, color):
    surface.blit(_font(size).render(text, True, color), (x, y))


def _text_width(text: str, size: int) -> int:
    return _font(size).size(text)[0]


def _as_tuple(rect: Rect) -> tuple[int, int, int, int]:
    return int(rect.x), int(rect.y), int(rect.width), int(rect.height)


@dataclass
class Player:
    """The player's ship."""

    rec: Rect
    speed: Vec2
    color: tuple[int, int, int] = BLACK


@dataclass
class Enemy:
    """One invader of the grid."""

    rec: Rect
    speed: Vec2
    base_speed: float = ENEMY_BASE_SPEED
    active: bool = True
    color: tuple[int, int, int] = GRAY


@dataclass
class Shot:
    """A shot fired upwards by the player."""

    rec: Rect
    speed: Vec2 = field(default_factory=lambda: Vec2(0, SHOT_SPEED))
    active: bool = False
    color: tuple[int, int, int] = MAROON


class SpaceInvadersGame:
    """State and rules of a game of Space Invaders."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self, player_image=None) -> None:
        self.player_image = player_image
        self.high_score = 0
        # Fleet movement state carries over from one game to the next.
        self.direction = 1
        self.reset()

    def reset(self) -> None:
        """Start a new game with a full grid of invaders."""
        self.shoot_rate = 0
        self.paused = False
        self.game_over = False
        self.victory = False
        self.enemies_killed = 0
        self.score = 0

        self.player = Player(
            Rect(SCREEN_WIDTH // 2, SCREEN_HEIGHT - 50, PLAYER_SIZE, PLAYER_SIZE),
            Vec2(PLAYER_SPEED, PLAYER_SPEED),
        )
        self.enemies = [
            Enemy(
                Rect(
                    (i % GRID_WIDTH) * GRID_SPACING_X + GRID_OFFSET_X,
                    (i // GRID_WIDTH) * GRID_SPACING_Y + GRID_OFFSET_Y,
                    ENEMY_SIZE,
                    ENEMY_SIZE,
                ),
                Vec2(ENEMY_BASE_SPEED, ENEMY_BASE_SPEED),
            )
            for i in range(GRID_WIDTH * GRID_HEIGHT)
        ]
        rec = self.player.rec
        self.shots = [
            Shot(Rect(rec.x + rec.width / 4, rec.y, SHOT_WIDTH, SHOT_HEIGHT))
            for _ in range(NUM_SHOOTS)
        ]

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        if self.game_over:
            if controls.is_pressed(Key.ENTER):
                self.reset()
                self.game_over = False
            return

        if controls.is_pressed(Key.P):
            self.paused = not self.paused
        if self.paused:
            return

        rec, speed = self.player.rec, self.player.speed
        if controls.is_down(Key.RIGHT):
            rec.x += speed.x
        if controls.is_down(Key.LEFT):
            rec.x -= speed.x
        if controls.is_down(Key.UP):
            rec.y -= speed.y
        if controls.is_down(Key.DOWN):
            rec.y += speed.y

        if any(check_collision_recs(rec, enemy.rec) for enemy in self.enemies):
            self.game_over = True

        self._move_fleet()

        if rec.x <= 0:
            rec.x = 0
        if rec.x + rec.width >= SCREEN_WIDTH:
            rec.x = SCREEN_WIDTH - rec.width
        if rec.y <= 0:
            rec.y = 0
        if rec.y + rec.height >= SCREEN_HEIGHT:
            rec.y = SCREEN_HEIGHT - rec.height

        if controls.is_down(Key.SPACE):
            self.shoot_rate += 5
            if self.shoot_rate % 20 == 0:
                shot = next((s for s in self.shots if not s.active), None)
                if shot is not None:
                    shot.rec.x = rec.x + rec.width / 4
                    shot.rec.y = rec.y
                    shot.active = True

        self._move_shots()

    def _move_fleet(self) -> None:
        active = [enemy for enemy in self.enemies if enemy.active]
        reached_edge = False
        for enemy in active:
            enemy.rec.x += enemy.speed.x * self.direction
            if enemy.rec.x <= 0 or enemy.rec.x + enemy.rec.width >= SCREEN_WIDTH:
                reached_edge = True

        drop = 0
        if reached_edge:
            self.direction *= -1
            drop = FLEET_DROP
        for enemy in active:
            enemy.rec.y += drop

    def _move_shots(self) -> None:
        for shot in self.shots:
            if not shot.active:
                continue
            shot.rec.y -= shot.speed.y
            for enemy in self.enemies:
                if not enemy.active:
                    continue
                if check_collision_recs(shot.rec, enemy.rec):
                    shot.active = False
                    enemy.active = False
                    enemy.rec.x = 0
                    enemy.rec.y = 0
                    self.shoot_rate = 0
                    self.enemies_killed += 1
                    self.score += KILL_SCORE
                    factor = 1 + ((self.enemies_killed * 2.0) / NUM_MAX_ENEMIES) ** 4
                    for other in self.enemies:
                        other.speed.x = other.base_speed * factor
                if shot.rec.y + shot.rec.height < 0:
                    shot.active = False
                    self.shoot_rate = 0

    def _draw_player(self, surface) -> None:
        rec = self.player.rec
        image = self.player_image
        if image is None:
            pygame.draw.rect(surface, WHITE, _as_tuple(rec))
            return
        scale = rec.width / image.get_width()
        surface.blit(pygame.transform.rotozoom(image, 0.0, scale), (int(rec.x), int(rec.y)))

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)
        if self.game_over:
            text = "PRESS [ENTER] TO PLAY AGAIN"
            x = surface.get_width() // 2 - _text_width(text, 20) // 2
            _draw_text(surface, text, x, surface.get_height() // 2 - 50, 20, GRAY)
            return

        self._draw_player(surface)
        for enemy in self.enemies:
            if enemy.active:
                pygame.draw.rect(surface, enemy.color, _as_tuple(enemy.rec))
        for shot in self.shots:
            if shot.active:
                pygame.draw.rect(surface, shot.color, _as_tuple(shot.rec))

        hi_width = _text_width("HI-SCORE", 20)
        p2_width = _text_width("SCORE<2>", 20)
        _draw_text(surface, "SCORE<1>", 20, 20, 25, LIGHTGRAY)
        _draw_text(surface, "HI-SCORE", SCREEN_WIDTH // 2 - hi_width // 2, 20, 25, LIGHTGRAY)
        _draw_text(surface, "SCORE<2>", SCREEN_WIDTH - 40 - p2_width, 20, 25, LIGHTGRAY)
        _draw_text(surface, f"{self.score:04d}", 30, 60, 25, LIGHTGRAY)
        _draw_text(
            surface, f"{self.high_score:04d}", SCREEN_WIDTH // 2 - hi_width // 4, 60, 25, LIGHTGRAY
        )
        _draw_text(surface, "0000", SCREEN_WIDTH - 20 - p2_width, 60, 25, LIGHTGRAY)

        centre_y = SCREEN_HEIGHT // 2 - 40
        if self.victory:
            x = SCREEN_WIDTH // 2 - _text_width("YOU WIN", 40) // 2
            _draw_text(surface, "YOU WIN", x, centre_y, 40, BLACK)
        if self.paused:
            x = SCREEN_WIDTH // 2 - _text_width("GAME PAUSED", 40) // 2
            _draw_text(surface, "GAME PAUSED", x, centre_y, 40, GRAY)


def _load_image(path):
    path = Path(path)
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except pygame.error:
        return None


def main(argv=None) -> int:
    """Play Space Invaders in a window."""
    parser = argparse.ArgumentParser(prog="space-invaders", description="Play Space Invaders.")
    parser.parse_args(argv)
    game = SpaceInvadersGame(player_image=_load_image(PLAYER_IMAGE_PATH))
    run_game(game, TITLE, 60)
    return 0