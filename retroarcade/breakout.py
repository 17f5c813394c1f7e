"""Breakout: bounce the ball off the paddle to clear the wall of bricks."""

from __future__ import annotations

import argparse
from dataclasses import dataclass

import pygame

from retroarcade.core import (
    BLACK,
    GRAY,
    GREEN,
    LIGHTGRAY,
    RED,
    WHITE,
    YELLOW,
    Controls,
    Key,
    Rect,
    Vec2,
    check_collision_circle_rec,
)
from retroarcade.display import _draw_text, _rect_tuple, run_game

SCREEN_WIDTH = 720
SCREEN_HEIGHT = 900

PADDLE_WIDTH = 120
PADDLE_HEIGHT = 20
PADDLE_SPEED = 8

BALL_RADIUS = 10
BALL_SPEED = 6

BRICK_ROWS = 6
BRICK_COLS = 10
BRICK_WIDTH = 60
BRICK_HEIGHT = 30
BRICK_PADDING = 8
BRICK_OFFSET_TOP = 60
BRICK_OFFSET_LEFT = 30

STARTING_LIVES = 3
TITLE = "classic game: breakout"


@dataclass
class Brick:
    """One brick of the wall."""

    rect: Rect
    active: bool = True


def _new_wall() -> list[list[Brick]]:
    return [
        [
            Brick(
                Rect(
                    BRICK_OFFSET_LEFT + col * (BRICK_WIDTH + BRICK_PADDING),
                    BRICK_OFFSET_TOP + row * (BRICK_HEIGHT + BRICK_PADDING),
                    BRICK_WIDTH,
                    BRICK_HEIGHT,
                )
            )
            for col in range(BRICK_COLS)
        ]
        for row in range(BRICK_ROWS)
    ]


class BreakoutGame:
    """State and rules of a game of Breakout."""

    width = SCREEN_WIDTH
    height = SCREEN_HEIGHT

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start a new game with a full wall and the ball on the paddle."""
        self.paddle = Rect(
            (SCREEN_WIDTH - PADDLE_WIDTH) // 2,
            SCREEN_HEIGHT - 60,
            PADDLE_WIDTH,
            PADDLE_HEIGHT,
        )
        self.ball = Vec2(self.paddle.x + PADDLE_WIDTH // 2, self.paddle.y - BALL_RADIUS - 2)
        self.ball_speed = Vec2(BALL_SPEED, -BALL_SPEED)
        self.ball_active = False
        self.bricks = _new_wall()
        self.lives = STARTING_LIVES
        self.score = 0
        self.game_over = False
        self.game_won = False

    def _all_bricks(self):
        return (brick for row in self.bricks for brick in row)

    def update(self, controls: Controls) -> None:
        """Advance the game by one frame."""
        if self.game_over or self.game_won:
            if controls.is_pressed(Key.ENTER):
                self.reset()
            return

        paddle = self.paddle
        if controls.is_down(Key.LEFT):
            paddle.x -= PADDLE_SPEED
        if controls.is_down(Key.RIGHT):
            paddle.x += PADDLE_SPEED
        paddle.x = min(max(paddle.x, 0), SCREEN_WIDTH - paddle.width)

        if not self.ball_active:
            self.ball.x = paddle.x + paddle.width / 2
            self.ball.y = paddle.y - BALL_RADIUS - 2
            if controls.is_pressed(Key.SPACE):
                self.ball_active = True

        if self.ball_active:
            self._move_ball()

        if not any(brick.active for brick in self._all_bricks()):
            self.game_won = True

    def _move_ball(self) -> None:
        ball, speed, paddle = self.ball, self.ball_speed, self.paddle
        ball.x += speed.x
        ball.y += speed.y

        if ball.x < BALL_RADIUS:
            ball.x = BALL_RADIUS
            speed.x *= -1
        if ball.x > SCREEN_WIDTH - BALL_RADIUS:
            ball.x = SCREEN_WIDTH - BALL_RADIUS
            speed.x *= -1
        if ball.y < BALL_RADIUS:
            ball.y = BALL_RADIUS
            speed.y *= -1

        if check_collision_circle_rec(ball, BALL_RADIUS, paddle):
            ball.y = paddle.y - BALL_RADIUS - 1
            speed.y *= -1
            half = paddle.width / 2
            speed.x = BALL_SPEED * (ball.x - (paddle.x + half)) / half

        for brick in self._all_bricks():
            if brick.active and check_collision_circle_rec(ball, BALL_RADIUS, brick.rect):
                brick.active = False
                self.score += 10
                rect = brick.rect
                if ball.x < rect.x or ball.x > rect.x + rect.width:
                    speed.x *= -1
                else:
                    speed.y *= -1

        if ball.y > SCREEN_HEIGHT:
            self.lives -= 1
            self.ball_active = False
            if self.lives <= 0:
                self.game_over = True

    def draw(self, surface) -> None:
        """Render the current frame onto a pygame surface."""
        surface.fill(BLACK)

        for row_index, row in enumerate(self.bricks):
            color = (200, 200 - row_index * 30, 100 + row_index * 20)
            for brick in row:
                if brick.active:
                    pygame.draw.rect(surface, color, _rect_tuple(brick.rect))

        pygame.draw.rect(surface, WHITE, _rect_tuple(self.paddle))
        pygame.draw.circle(surface, YELLOW, (int(self.ball.x), int(self.ball.y)), BALL_RADIUS)

        bottom = SCREEN_HEIGHT - 40
        _draw_text(surface, f"LIVES: {self.lives}", 20, bottom, 24, LIGHTGRAY)
        _draw_text(surface, f"SCORE: {self.score}", SCREEN_WIDTH - 180, bottom, 24, LIGHTGRAY)

        centre_x, centre_y = SCREEN_WIDTH // 2, SCREEN_HEIGHT // 2
        messages = (
            (
                not self.ball_active and not self.game_over and not self.game_won,
                "PRESS SPACE TO LAUNCH", -160, 28, GRAY,
            ),
            (self.game_over, "GAME OVER! PRESS ENTER TO RESTART", -260, 32, RED),
            (self.game_won, "YOU WIN! PRESS ENTER TO RESTART", -220, 32, GREEN),
        )
        for shown, text, offset, size, color in messages:
            if shown:
                _draw_text(surface, text, centre_x + offset, centre_y, size, color)


def main(argv=None) -> int:
    """Play Breakout in a window."""
    parser = argparse.ArgumentParser(prog="breakout", description="Play Breakout.")
    parser.parse_args(argv)
    run_game(BreakoutGame(), TITLE, 60)
    return 0