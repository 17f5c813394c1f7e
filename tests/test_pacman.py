import random

import pygame
import pytest

from retroarcade.core import DARKGRAY, WHITE, Controls, Key, Vec2
from retroarcade.pacman import (
    GHOST_SPEED,
    MAZE_COLS,
    MAZE_ROWS,
    PACMAN_SPEED,
    TILE_SIZE,
    PacmanGame,
    Tile,
    new_maze,
    next_step_towards,
)


class _CountingSound:
    def __init__(self):
        self.plays = 0

    def play(self):
        self.plays += 1


def _controls(*keys):
    return Controls(held=frozenset(keys), pressed=frozenset(keys))


def _centre(col, row):
    return Vec2(col * TILE_SIZE + TILE_SIZE / 2, row * TILE_SIZE + TILE_SIZE / 2)


def test_new_maze_shape_and_border():
    maze = new_maze()
    assert len(maze) == MAZE_ROWS
    assert all(len(row) == MAZE_COLS for row in maze)
    assert all(tile == Tile.WALL for tile in maze[0])
    assert all(tile == Tile.WALL for tile in maze[-1])
    assert maze[20][20] == Tile.PELLET


def test_new_maze_returns_independent_copies():
    first = new_maze()
    first[1][1] = Tile.EMPTY
    assert new_maze()[1][1] == Tile.PELLET


def test_step_along_corridor():
    assert next_step_towards(new_maze(), (1, 1), (3, 1)) == (1, 0)


def test_step_to_same_cell_is_zero():
    assert next_step_towards(new_maze(), (5, 5), (5, 5)) == (0, 0)


def test_wall_goal_is_unreachable():
    assert next_step_towards(new_maze(), (1, 1), (0, 0)) is None


def test_goal_outside_maze_is_unreachable():
    assert next_step_towards(new_maze(), (1, 1), (-1, 14)) is None


def test_start_outside_maze_raises():
    with pytest.raises(ValueError):
        next_step_towards(new_maze(), (MAZE_COLS, 0), (1, 1))


def test_following_steps_reaches_goal():
    maze = new_maze()
    cell, goal = (1, 1), (26, 29)
    for _ in range(MAZE_ROWS * MAZE_COLS):
        if cell == goal:
            break
        dx, dy = next_step_towards(maze, cell, goal)
        assert abs(dx) + abs(dy) == 1
        cell = (cell[0] + dx, cell[1] + dy)
        assert maze[cell[1]][cell[0]] != Tile.WALL
    assert cell == goal


def test_pacman_eats_pellet_under_it():
    sound = _CountingSound()
    game = PacmanGame(rng=random.Random(1), coin_sound=sound)
    game.update(_controls())
    assert game.maze[20][20] == Tile.EMPTY
    assert sound.plays == 1


def test_pacman_moves_right():
    game = PacmanGame(rng=random.Random(1))
    start = game.pacman.position.x
    game.update(_controls(Key.RIGHT))
    assert game.pacman.direction == Vec2(1, 0)
    assert game.pacman.position.x == start + PACMAN_SPEED


def test_turn_into_wall_from_rest_does_not_move():
    game = PacmanGame(rng=random.Random(1))
    before = Vec2(game.pacman.position.x, game.pacman.position.y)
    game.update(_controls(Key.UP))
    assert game.pacman.direction == Vec2(0, 0)
    assert game.pacman.position == before


def test_pacman_stops_at_wall_ahead():
    game = PacmanGame(rng=random.Random(1))
    game.pacman.position = _centre(26, 20)
    game.pacman.direction = Vec2(1, 0)
    game.update(_controls(Key.RIGHT))
    assert game.pacman.direction == Vec2(0, 0)
    assert game.pacman.position == _centre(26, 20)


def test_far_ghost_keeps_open_direction():
    game = PacmanGame(rng=random.Random(1))
    ghost = game.ghosts[0]
    start_y = ghost.position.y
    game.update_ghosts()
    assert ghost.direction == Vec2(0, -1)
    assert ghost.position.y == start_y - GHOST_SPEED


def test_near_ghost_follows_shortest_path():
    game = PacmanGame(rng=random.Random(1))
    game.pacman.position = _centre(5, 1)
    ghost = game.ghosts[0]
    ghost.position = _centre(1, 1)
    expected = next_step_towards(game.maze, (1, 1), (5, 1))
    game.update_ghosts()
    assert (ghost.direction.x, ghost.direction.y) == expected


def test_reset_refills_maze():
    game = PacmanGame(rng=random.Random(1))
    game.update(_controls())
    game.reset()
    assert game.maze == new_maze()
    assert len(game.ghosts) == 4


def test_draw_paints_walls_and_pellets():
    game = PacmanGame(rng=random.Random(1))
    surface = pygame.Surface((game.width, game.height))
    game.draw(surface)
    assert tuple(surface.get_at((0, 0)))[:3] == DARKGRAY
    centre = _centre(1, 1)
    assert tuple(surface.get_at((int(centre.x), int(centre.y))))[:3] == WHITE