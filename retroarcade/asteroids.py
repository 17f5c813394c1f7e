"""Asteroids: steer a ship and shoot the drifting rocks into pieces."""

from __future__ import annotations

import argparse
import math
import random
from dataclasses import dataclass, field

import pygame

from retroarcade.core import BLACK, GRAY, WHITE, YELLOW, Controls, Key, Vec2
from retroarcade.display import load_sound, run_game

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 900
STARTING_LIVES = 3
SHIP_SIZE = 30
SHIP_TURN_SPEED = 5.0
SHIP_ACCELERATION = 0.2
SHIP_FRICTION = 0.99
BULLET_SPEED = 8.0
BULLET_LIFETIME = 60
MAX_BULLETS = 10
MAX_ASTEROIDS = 16
ASTEROID_MIN_SIZE = 20
ASTEROID_MAX_SIZE = 60
ASTEROID_MIN_SPEED = 1.0
ASTEROID_MAX_SPEED = 3.0
INITIAL_ASTEROIDS = 5
SPLIT_SCORE = 20
DESTROY_SCORE = 50

TITLE = "asteroids"
MUSIC_PATH = "resources/background_music.ogg"
LASER_PATH = "resources/laser.wav"
EXPLODE_PATH = "resources/sfx_asteroid_explode.ogg"

_fonts: dict[int, pygame.font.Font] = {}


def _draw_text(surface, text, x, y, size, color):
    if not pygame.font.get_init():
        pygame.font.init()
        _fonts.clear()
    font = _fonts.get(size)
    if font is None:
        font = _fonts[size] = pygame.font.Font(None, size)
    surface.blit(font.render(text, True, color), (x, y))


def _wrap(pos: Vec2) -> None:
    if pos.x < 0:
        pos.x += SCREEN_WIDTH
    if pos.x > SCREEN_WIDTH:
        pos.x -= SCREEN_WIDTH
    if pos.y < 0:
        pos.y += SCREEN_HEIGHT
    if pos.y > SCREEN_HEIGHT:
        pos.y -= SCREEN_HEIGHT


def _polar(origin: Vec2, degrees: float, length: float) -> tuple[float, float]:
    rad = math.radians(degrees)
    return origin.x + math.cos(rad) * length, origin.y + math.sin(rad) * length


@dataclass
class Bullet:
    """A bullet slot; ``age`` counts the frames since it was fired."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    active: bool = False
    age: int = 0


@dataclass
class Asteroid:
    """An asteroid slot."""

    pos: Vec2 = field(default_factory=Vec2)
    vel: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    size: float = 0.0
    sides: int = 8
    active: bool = False


@dataclass
class Ship:
    """The player's ship."""

    pos: Vec2 = field(default_factory=lambda: Vec2(SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2))
    vel: Vec2 = field(default_factory=Vec2)
    angle: float = 0.0
    radius: float = SHIP_SIZE // 2


class AsteroidsGame:
    """State and rules of a game of Asteroids."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT
    music_path = MUSIC_PATH

    def __init__(self, rng=None, laser_sound=None, explode_sound=None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.laser_sound = laser_sound
        self.explode_sound = explode_sound
        self.bullets = [Bullet() for _ in range(MAX_BULLETS)]
        self.asteroids = [Asteroid() for _ in range(MAX_ASTEROIDS)]
        self.can_shoot = True
        self.score = 0
        self.lives = STARTING_LIVES
        self.reset()

    def reset(self) -> None:
        """Recentre the ship, clear the field and spawn fresh asteroids.

        Score and lives are left as they are.
        """
        self.ship = Ship()
        for bullet in self.bullets:
            bullet.active = False
        for asteroid in self.asteroids:
            asteroid.active = False
        for _ in range(INITIAL_ASTEROIDS):
            pos = Vec2(self.rng.randint(0, SCREEN_WIDTH), self.rng.randint(0, SCREEN_HEIGHT))
            self.spawn_asteroid(pos, ASTEROID_MAX_SIZE)

    def fire_bullet(self) -> None:
        """Fire from the ship's nose if a bullet slot is free."""
        bullet = next((b for b in self.bullets if not b.active), None)
        if bullet is None:
            return
        rad = math.radians(self.ship.angle)
        bullet.active = True
        bullet.pos = Vec2(self.ship.pos.x, self.ship.pos.y)
        bullet.vel = Vec2(math.cos(rad) * BULLET_SPEED, math.sin(rad) * BULLET_SPEED)
        bullet.age = 0
        if self.laser_sound is not None:
            self.laser_sound.play()

    def spawn_asteroid(self, pos, size) -> None:
        """Put an asteroid of ``size`` at ``pos`` if a slot is free."""
        asteroid = next((a for a in self.asteroids if not a.active), None)
        if asteroid is None:
            return
        rng = self.rng
        asteroid.active = True
        asteroid.pos = Vec2(pos.x, pos.y)
        heading = math.radians(rng.randint(0, 359))
        spread = ASTEROID_MAX_SPEED - ASTEROID_MIN_SPEED
        speed = ASTEROID_MIN_SPEED + rng.randint(0, 100) / 100.0 * spread
        asteroid.vel = Vec2(math.cos(heading) * speed, math.sin(heading) * speed)
        asteroid.angle = rng.randint(0, 359)
        asteroid.size = size
        asteroid.sides = 8 + rng.randint(0, 3)

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        ship = self.ship
        if controls.is_down(Key.LEFT):
            ship.angle -= SHIP_TURN_SPEED
        if controls.is_down(Key.RIGHT):
            ship.angle += SHIP_TURN_SPEED
        if controls.is_down(Key.UP):
            rad = math.radians(ship.angle)
            ship.vel.x += math.cos(rad) * SHIP_ACCELERATION
            ship.vel.y += math.sin(rad) * SHIP_ACCELERATION
        ship.vel.x *= SHIP_FRICTION
        ship.vel.y *= SHIP_FRICTION
        ship.pos.x += ship.vel.x
        ship.pos.y += ship.vel.y
        _wrap(ship.pos)

        if controls.is_down(Key.SPACE):
            if self.can_shoot:
                self.fire_bullet()
                self.can_shoot = False
        else:
            self.can_shoot = True

        for bullet in self.bullets:
            if bullet.active:
                bullet.pos.x += bullet.vel.x
                bullet.pos.y += bullet.vel.y
                bullet.age += 1
                _wrap(bullet.pos)
                if bullet.age > BULLET_LIFETIME:
                    bullet.active = False

        for asteroid in self.asteroids:
            if asteroid.active:
                asteroid.pos.x += asteroid.vel.x
                asteroid.pos.y += asteroid.vel.y
                _wrap(asteroid.pos)

        self._shoot_asteroids()
        self._check_ship_hit()

    def _shoot_asteroids(self) -> None:
        for bullet in self.bullets:
            if not bullet.active:
                continue
            for rock in self.asteroids:
                if not rock.active:
                    continue
                dist = math.hypot(bullet.pos.x - rock.pos.x, bullet.pos.y - rock.pos.y)
                if dist < rock.size:
                    bullet.active = False
                    rock.active = False
                    if rock.size > ASTEROID_MIN_SIZE:
                        self.score += SPLIT_SCORE
                        # The freed slot may be reused by the first fragment.
                        for _ in range(2):
                            self.spawn_asteroid(rock.pos, rock.size / 2)
                    else:
                        self.score += DESTROY_SCORE
                    if self.explode_sound is not None:
                        self.explode_sound.play()
                    break

    def _check_ship_hit(self) -> None:
        ship = self.ship
        for rock in self.asteroids:
            if not rock.active:
                continue
            dist = math.hypot(ship.pos.x - rock.pos.x, ship.pos.y - rock.pos.y)
            if dist < rock.size + ship.radius:
                self.lives -= 1
                if self.lives <= 0:
                    self.score = 0
                    self.lives = STARTING_LIVES
                self.reset()
                break

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)
        _draw_text(surface, f"Score: {self.score}", 20, 20, 32, WHITE)
        _draw_text(surface, f"Lives: {self.lives}", SCREEN_WIDTH - 160, 20, 32, WHITE)

        ship = self.ship
        nose = _polar(ship.pos, ship.angle, SHIP_SIZE)
        left = _polar(ship.pos, ship.angle + 140, SHIP_SIZE * 0.6)
        right = _polar(ship.pos, ship.angle - 140, SHIP_SIZE * 0.6)
        pygame.draw.polygon(surface, WHITE, [nose, right, left])

        for bullet in self.bullets:
            if bullet.active:
                pygame.draw.circle(surface, YELLOW, (int(bullet.pos.x), int(bullet.pos.y)), 2)

        for rock in self.asteroids:
            if not rock.active:
                continue
            step = 360.0 / rock.sides
            points = [
                _polar(
                    rock.pos,
                    rock.angle + v * step,
                    rock.size * (0.75 + 0.25 * self.rng.randint(0, 100) / 100.0),
                )
                for v in range(rock.sides)
            ]
            pygame.draw.lines(surface, GRAY, True, points)


def main(argv=None) -> int:
    """Play Asteroids in a window."""
    parser = argparse.ArgumentParser(prog="asteroids", description="Play Asteroids.")
    parser.parse_args(argv)
    game = AsteroidsGame(
        laser_sound=load_sound(LASER_PATH),
        explode_sound=load_sound(EXPLODE_PATH),
    )
    run_game(game, TITLE, 60)
    return 0