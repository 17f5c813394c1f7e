"""Pac-Man: eat the pellets of the maze while four ghosts roam and chase."""

from __future__ import annotations

import argparse
import enum
import math
import random
from collections import deque
from dataclasses import dataclass, field
from pathlib import Path

import pygame

from retroarcade.core import (
    BLACK,
    BLUE,
    DARKGRAY,
    GREEN,
    MAGENTA,
    RED,
    WHITE,
    YELLOW,
    Controls,
    Key,
    Vec2,
)
from retroarcade.display import load_sound, run_game

SCREEN_WIDTH = 800
SCREEN_HEIGHT = 1000

MAZE_ROWS = 31
MAZE_COLS = 28
TILE_SIZE = 28

PACMAN_SPEED = 4.0
PACMAN_RADIUS = 16.0
GHOST_SPEED = 3.0
GHOST_RADIUS = 16.0
GHOST_COLORS = (RED, GREEN, BLUE, MAGENTA)
CHASE_DISTANCE = 200.0
SNAP_DISTANCE = 2.0
SPRITE_SCALE = 0.3
PELLET_RADIUS = 4

TITLE = "Pacman"
SPRITE_PATH = "resources/pacman.png"
COIN_PATH = "resources/coin.wav"

# Neighbour order used both for path finding and for wandering.
DIRECTIONS = ((1, 0), (-1, 0), (0, 1), (0, -1))


class Tile(enum.IntEnum):
    """What occupies one cell of the maze."""

    EMPTY = 0
    WALL = 1
    PELLET = 2


_LAYOUT = (
    "1111111111111111111111111111",
    "1222222222222112222222222221",
    "1211112111112112111112111121",
    "1211112111112112111112111121",
    "1211112111112112111112111121",
    "1222222222222222222222222221",
    "1211112112111111112112111121",
    "1211112112111111112112111121",
    "1222222112222112222112222221",
    "1111112111110110111112111111",
    "0000012111110110111112100000",
    "0000012110000000000112100000",
    "0000012110111001110112100000",
    "1111112110100000010112111111",
    "0000002000100000010002000000",
    "1111112110100000010112111111",
    "0000012110111111110112100000",
    "0000012110000000000112100000",
    "0000012110111111110112100000",
    "1111112110111111110112111111",
    "1222222222222112222222222221",
    "1211112111112112111112111121",
    "1211112111112112111112111121",
    "1222112222222222222222112221",
    "1112112112111111112112112111",
    "1112112112111111112112112111",
    "1222222112222112222112222221",
    "1211111111112112111111111121",
    "1211111111112112111111111121",
    "1222222222222222222222222221",
    "1111111111111111111111111111",
)


def new_maze() -> list[list[Tile]]:
    """Return a fresh copy of the maze with every pellet in place."""
    return [[Tile(int(ch)) for ch in row] for row in _LAYOUT]


def _in_bounds(col: int, row: int) -> bool:
    return 0 <= row < MAZE_ROWS and 0 <= col < MAZE_COLS


def _open(maze, col: int, row: int) -> bool:
    return _in_bounds(col, row) and maze[row][col] != Tile.WALL


def next_step_towards(maze, start, goal):
    """Return the first step ``(dx, dy)`` of a shortest path from start to goal.

    Cells are given as ``(col, row)``. Returns ``(0, 0)`` when start is the
    goal and ``None`` when the goal cannot be reached.
    """
    start = (int(start[0]), int(start[1]))
    goal = (int(goal[0]), int(goal[1]))
    if not _in_bounds(*start):
        raise ValueError(f"start cell {start} lies outside the maze")
    if not _in_bounds(*goal):
        return None
    if start == goal:
        return (0, 0)

    previous = {start: None}
    queue = deque([start])
    while queue and goal not in previous:
        col, row = queue.popleft()
        for dx, dy in DIRECTIONS:
            cell = (col + dx, row + dy)
            if cell in previous or not _open(maze, *cell):
                continue
            previous[cell] = (col, row)
            queue.append(cell)
            if cell == goal:
                break

    if goal not in previous:
        return None

    cell = goal
    while previous[cell] != start:
        cell = previous[cell]
    return (cell[0] - start[0], cell[1] - start[1])


def _grid_of(position: Vec2) -> tuple[int, int]:
    return int(position.x / TILE_SIZE), int(position.y / TILE_SIZE)


def _cell_centre(col: int, row: int) -> Vec2:
    return Vec2(col * TILE_SIZE + TILE_SIZE / 2.0, row * TILE_SIZE + TILE_SIZE / 2.0)


@dataclass
class Pacman:
    """The player."""

    position: Vec2
    direction: Vec2 = field(default_factory=Vec2)
    speed: float = PACMAN_SPEED
    radius: float = PACMAN_RADIUS


@dataclass
class Ghost:
    """A ghost that wanders the maze and chases Pac-Man when near."""

    position: Vec2
    color: tuple[int, int, int]
    direction: Vec2 = field(default_factory=lambda: Vec2(0, -1))
    speed: float = GHOST_SPEED
    radius: float = GHOST_RADIUS


class PacmanGame:
    """State and rules of a game of Pac-Man."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self, rng=None, sprite=None, coin_sound=None) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.sprite = sprite
        self.coin_sound = coin_sound
        self.reset()

    def reset(self) -> None:
        """Refill the maze and put Pac-Man and the ghosts at their starts."""
        self.maze = new_maze()
        start = 20 * TILE_SIZE + TILE_SIZE // 2
        self.pacman = Pacman(Vec2(start, start))
        self.desired_direction = Vec2(0, 0)
        home = 14 * TILE_SIZE + TILE_SIZE // 2
        self.ghosts = [
            Ghost(Vec2(home, home + i * 10), color)
            for i, color in enumerate(GHOST_COLORS)
        ]

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        for key, (dx, dy) in (
            (Key.RIGHT, (1, 0)),
            (Key.LEFT, (-1, 0)),
            (Key.UP, (0, -1)),
            (Key.DOWN, (0, 1)),
        ):
            if controls.is_down(key):
                self.desired_direction = Vec2(dx, dy)
                break

        pacman, desired = self.pacman, self.desired_direction
        col, row = _grid_of(pacman.position)
        if _in_bounds(col, row) and self.maze[row][col] == Tile.PELLET:
            self.maze[row][col] = Tile.EMPTY
            if self.coin_sound is not None:
                self.coin_sound.play()

        centre = _cell_centre(col, row)
        to_centre = math.hypot(pacman.position.x - centre.x, pacman.position.y - centre.y)
        if to_centre <= SNAP_DISTANCE:
            next_col, next_row = col + int(desired.x), row + int(desired.y)
            if _in_bounds(next_col, next_row):
                if self.maze[next_row][next_col] != Tile.WALL:
                    pacman.direction = Vec2(desired.x, desired.y)
                    pacman.position = centre
                elif (int(desired.x), int(desired.y)) == (
                    int(pacman.direction.x),
                    int(pacman.direction.y),
                ):
                    pacman.direction = Vec2(0, 0)
            else:
                pacman.direction = Vec2(0, 0)

        pacman.position.x += pacman.direction.x * pacman.speed
        pacman.position.y += pacman.direction.y * pacman.speed

        self.update_ghosts()

    def _wander(self, ghost: Ghost, col: int, row: int) -> tuple[int, int]:
        current = (int(ghost.direction.x), int(ghost.direction.y))
        valid = [d for d in DIRECTIONS if _open(self.maze, col + d[0], row + d[1])]
        if current in valid:
            return current
        if valid:
            return valid[self.rng.randint(0, len(valid) - 1)]
        return (0, 0)

    def update_ghosts(self) -> None:
        """Steer each ghost at a cell centre and move it along the grid."""
        target = self.pacman.position
        goal = _grid_of(target)
        for ghost in self.ghosts:
            col, row = _grid_of(ghost.position)
            centre = _cell_centre(col, row)
            to_centre = math.hypot(ghost.position.x - centre.x, ghost.position.y - centre.y)
            distance = math.hypot(target.x - ghost.position.x, target.y - ghost.position.y)

            if to_centre <= SNAP_DISTANCE:
                new_dir = (ghost.direction.x, ghost.direction.y)
                if distance <= CHASE_DISTANCE:
                    step = next_step_towards(self.maze, (col, row), goal)
                    if step is not None:
                        new_dir = step
                else:
                    new_dir = self._wander(ghost, col, row)

                if _open(self.maze, col + int(new_dir[0]), row + int(new_dir[1])):
                    ghost.direction = Vec2(new_dir[0], new_dir[1])
                    ghost.position = centre
                else:
                    ghost.direction = Vec2(0, 0)

            ghost.position.x += ghost.direction.x * ghost.speed
            ghost.position.y += ghost.direction.y * ghost.speed

    def _draw_pacman(self, surface) -> None:
        pacman = self.pacman
        centre = (int(pacman.position.x), int(pacman.position.y))
        if self.sprite is None:
            pygame.draw.circle(surface, YELLOW, centre, int(pacman.radius))
            return
        angle = math.degrees(math.atan2(pacman.direction.y, pacman.direction.x))
        if angle < 0:
            angle += 360.0
        image = pygame.transform.rotozoom(self.sprite, -angle, SPRITE_SCALE)
        surface.blit(image, image.get_rect(center=centre))

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)
        for row, tiles in enumerate(self.maze):
            for col, tile in enumerate(tiles):
                x, y = col * TILE_SIZE, row * TILE_SIZE
                if tile == Tile.WALL:
                    pygame.draw.rect(surface, DARKGRAY, (x, y, TILE_SIZE, TILE_SIZE))
                elif tile == Tile.PELLET:
                    half = TILE_SIZE // 2
                    pygame.draw.circle(surface, WHITE, (x + half, y + half), PELLET_RADIUS)
        self._draw_pacman(surface)
        for ghost in self.ghosts:
            pygame.draw.circle(
                surface,
                ghost.color,
                (int(ghost.position.x), int(ghost.position.y)),
                int(ghost.radius),
            )


def _load_image(path):
    path = Path(path)
    if not path.is_file():
        return None
    try:
        return pygame.image.load(str(path))
    except pygame.error:
        return None


def main(argv=None) -> int:
    """Play Pac-Man in a window."""
    parser = argparse.ArgumentParser(prog="pacman", description="Play Pac-Man.")
    parser.parse_args(argv)
    game = PacmanGame(sprite=_load_image(SPRITE_PATH), coin_sound=load_sound(COIN_PATH))
    run_game(game, TITLE, 60)
    return 0