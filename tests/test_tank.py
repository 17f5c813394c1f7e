import pygame
import pytest

from retroarcade.core import DARKGRAY, GRAY, Controls, Key, Vec2
from retroarcade.tank import (
    MAX_BULLETS,
    SCREEN_HEIGHT,
    SCREEN_WIDTH,
    TANK_ROT_SPEED,
    TANK_SIZE,
    TANK_SPEED,
    TankGame,
    main,
)

NO_KEYS = Controls()


def held(*keys):
    return Controls(held=frozenset(keys))


def pressed(*keys):
    return Controls(held=frozenset(keys), pressed=frozenset(keys))


@pytest.fixture
def game():
    return TankGame()


def test_reset_places_tanks(game):
    first, second = game.tanks
    assert (first.position.x, first.position.y) == (100, 100)
    assert first.rotation == 0.0
    assert (second.position.x, second.position.y) == (SCREEN_WIDTH - 100, SCREEN_HEIGHT - 100)
    assert second.rotation == 180.0
    assert len(game.obstacles) == 6
    assert all(len(t.bullets) == MAX_BULLETS for t in game.tanks)


def test_rotation_keys(game):
    game.update(held(Key.A))
    assert game.tanks[0].rotation == -TANK_ROT_SPEED
    game.update(held(Key.RIGHT))
    assert game.tanks[1].rotation == 180.0 + TANK_ROT_SPEED


def test_forward_moves_up_at_zero_rotation(game):
    game.update(held(Key.W))
    tank = game.tanks[0]
    assert tank.position.x == pytest.approx(100)
    assert tank.position.y == pytest.approx(100 - TANK_SPEED)


def test_backward_reverses_forward(game):
    game.update(held(Key.S))
    assert game.tanks[0].position.y == pytest.approx(100 + TANK_SPEED)


def test_blocked(game):
    obstacle = game.obstacles[0]
    centre = Vec2(obstacle.x + obstacle.width / 2, obstacle.y + obstacle.height / 2)
    assert game.blocked(centre)
    assert not game.blocked(game.tanks[0].position)


def test_obstacle_stops_movement(game):
    obstacle = game.obstacles[0]
    tank = game.tanks[0]
    start = Vec2(obstacle.x + obstacle.width / 2, obstacle.y + obstacle.height + TANK_SIZE * 0.3 + 1)
    tank.position = Vec2(start.x, start.y)
    assert not game.blocked(tank.position)
    game.update(held(Key.W))
    assert (tank.position.x, tank.position.y) == (start.x, start.y)


def test_position_clamped_to_screen(game):
    tank = game.tanks[0]
    tank.position = Vec2(-50, -50)
    game.update(NO_KEYS)
    assert (tank.position.x, tank.position.y) == (TANK_SIZE // 2, TANK_SIZE // 2)
    tank.position = Vec2(SCREEN_WIDTH + 50, SCREEN_HEIGHT + 50)
    game.update(NO_KEYS)
    assert tank.position.x == SCREEN_WIDTH - TANK_SIZE // 2
    assert tank.position.y == SCREEN_HEIGHT - TANK_SIZE // 2


def test_fire_launches_shell_ahead(game):
    game.update(pressed(Key.SPACE))
    tank = game.tanks[0]
    active = [b for b in tank.bullets if b.active]
    assert len(active) == 1
    shell = active[0]
    assert shell.position.x == pytest.approx(tank.position.x)
    assert shell.position.y < tank.position.y - TANK_SIZE // 2
    assert shell.rotation == tank.rotation


def test_fire_limited_to_stock(game):
    for _ in range(MAX_BULLETS + 2):
        game.update(pressed(Key.ENTER))
    assert sum(b.active for b in game.tanks[1].bullets) == MAX_BULLETS
    assert not any(b.active for b in game.tanks[0].bullets)


def test_shell_leaves_screen(game):
    game.update(pressed(Key.SPACE))
    for _ in range(100):
        game.update(NO_KEYS)
    assert not any(b.active for b in game.tanks[0].bullets)


def test_draw_paints_background_and_obstacles(game):
    surface = pygame.Surface((SCREEN_WIDTH, SCREEN_HEIGHT))
    game.draw(surface)
    obstacle = game.obstacles[0]
    inside = (int(obstacle.x + obstacle.width / 2), int(obstacle.y + obstacle.height / 2))
    assert tuple(surface.get_at(inside))[:3] == GRAY
    assert tuple(surface.get_at((5, SCREEN_HEIGHT // 2)))[:3] == DARKGRAY


def test_main_help_exits_cleanly():
    with pytest.raises(SystemExit) as info:
        main(["--help"])
    assert info.value.code == 0