import pygame
import pytest

from retroarcade import breakout
from retroarcade.breakout import BreakoutGame
from retroarcade.core import BLACK, Controls, Key

IDLE = Controls()
BRICK_TOTAL = breakout.BRICK_ROWS * breakout.BRICK_COLS


def keys(*held, pressed=()):
    return Controls(held=frozenset(held), pressed=frozenset(pressed))


def set_ball(game, x, y, vx, vy):
    game.ball_active = True
    game.ball.x, game.ball.y = x, y
    game.ball_speed.x, game.ball_speed.y = vx, vy


def drop_ball(game):
    set_ball(game, breakout.SCREEN_WIDTH / 2, breakout.SCREEN_HEIGHT + 1, 0, breakout.BALL_SPEED)
    game.update(IDLE)


def test_reset_builds_full_wall():
    game = BreakoutGame()
    assert [len(row) for row in game.bricks] == [breakout.BRICK_COLS] * breakout.BRICK_ROWS
    assert all(b.active for row in game.bricks for b in row)
    assert (game.lives, game.score) == (breakout.STARTING_LIVES, 0)


def test_brick_spacing_follows_layout():
    game = BreakoutGame()
    first = game.bricks[0][0].rect
    assert (first.x, first.y) == (breakout.BRICK_OFFSET_LEFT, breakout.BRICK_OFFSET_TOP)
    assert game.bricks[0][1].rect.x - first.x == breakout.BRICK_WIDTH + breakout.BRICK_PADDING
    assert game.bricks[1][0].rect.y - first.y == breakout.BRICK_HEIGHT + breakout.BRICK_PADDING


def test_ball_follows_paddle_before_launch():
    game = BreakoutGame()
    game.update(keys(Key.RIGHT))
    assert game.paddle.x == (breakout.SCREEN_WIDTH - breakout.PADDLE_WIDTH) // 2 + breakout.PADDLE_SPEED
    assert game.ball.x == game.paddle.x + game.paddle.width / 2
    assert game.ball.y == game.paddle.y - breakout.BALL_RADIUS - 2
    assert not game.ball_active


@pytest.mark.parametrize(
    "key, edge",
    [(Key.LEFT, 0), (Key.RIGHT, breakout.SCREEN_WIDTH - breakout.PADDLE_WIDTH)],
)
def test_paddle_stops_at_screen_edge(key, edge):
    game = BreakoutGame()
    for _ in range(200):
        game.update(keys(key))
    assert game.paddle.x == edge


def test_space_launches_ball_upwards():
    game = BreakoutGame()
    start_y = game.ball.y
    game.update(keys(Key.SPACE, pressed=[Key.SPACE]))
    assert game.ball_active
    assert game.ball.y < start_y


@pytest.mark.parametrize(
    "offset, expected_vx",
    [(0.5, 0), (1.0, breakout.BALL_SPEED)],
)
def test_paddle_hit_position_sets_sideways_speed(offset, expected_vx):
    game = BreakoutGame()
    paddle = game.paddle
    set_ball(game, paddle.x + paddle.width * offset, paddle.y - 12, 0, breakout.BALL_SPEED)
    game.update(IDLE)
    assert game.ball_speed.y == -breakout.BALL_SPEED
    assert game.ball_speed.x == expected_vx
    assert game.ball.y == paddle.y - breakout.BALL_RADIUS - 1


def test_brick_hit_scores_and_bounces():
    game = BreakoutGame()
    brick = game.bricks[5][0]
    rect = brick.rect
    set_ball(
        game,
        rect.x + rect.width / 2,
        rect.y + rect.height / 2 + breakout.BALL_SPEED,
        0,
        -breakout.BALL_SPEED,
    )
    game.update(IDLE)
    assert not brick.active
    assert game.score == 10
    assert game.ball_speed.y == breakout.BALL_SPEED
    assert sum(b.active for row in game.bricks for b in row) == BRICK_TOTAL - 1


def test_losing_ball_costs_a_life():
    game = BreakoutGame()
    drop_ball(game)
    assert game.lives == breakout.STARTING_LIVES - 1
    assert not game.ball_active
    assert not game.game_over


def test_last_life_lost_ends_game_and_enter_restarts():
    game = BreakoutGame()
    game.lives = 1
    game.score = 40
    drop_ball(game)
    assert game.game_over
    game.update(keys(Key.LEFT))
    assert game.game_over
    assert game.score == 40
    game.update(keys(Key.ENTER, pressed=[Key.ENTER]))
    assert not game.game_over
    assert (game.lives, game.score) == (breakout.STARTING_LIVES, 0)


def test_clearing_wall_wins_and_freezes_play():
    game = BreakoutGame()
    for row in game.bricks:
        for brick in row:
            brick.active = False
    game.update(IDLE)
    assert game.game_won
    paddle_x = game.paddle.x
    game.update(keys(Key.LEFT))
    assert game.paddle.x == paddle_x


def test_draw_paints_bricks_and_ball():
    game = BreakoutGame()
    game.bricks[1][0].active = False
    surface = pygame.Surface((game.width, game.height))
    game.draw(surface)

    def colour_inside(rect):
        return surface.get_at((int(rect.x + 5), int(rect.y + 5)))[:3]

    assert colour_inside(game.bricks[0][0].rect) == (200, 200, 100)
    assert colour_inside(game.bricks[1][0].rect) == BLACK
    assert surface.get_at((int(game.ball.x), int(game.ball.y)))[:3] == breakout.YELLOW