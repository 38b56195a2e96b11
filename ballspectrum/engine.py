"""Rules of the brick-breaking ball game, free of any drawing."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum

WIDTH = 720
HEIGHT = 640
BALL_RADIUS = 20
BONUS_RADIUS = 15
PADDLE_Y = 10
PADDLE_WIDTH = 100
PADDLE_STEP = 40
PADDLE_GROWTH = 50
LOST_DEPTH = -50
SPEED = 2
MAX_SPEED = 50
MIN_SPEED = 2
BONUS_GRAVITY = 0.2
BONUS_SPEEDUP = 1.5
BRICK_ROWS = 5
BRICK_COLUMNS = 8
BONUS_BRICK_COUNT = 3


class GameOver(Exception):
    """Raised when the ball falls out through the bottom of the field."""


class MenuAction(Enum):
    NEW_GAME = "new game"
    EXIT = "exit"


@dataclass
class Brick:
    left: int
    top: int
    right: int
    bottom: int
    alive: bool = True

    @property
    def center_x(self) -> int:
        return self.left + (self.right - self.left) // 2


@dataclass
class Paddle:
    x1: int = 320
    x2: int = 420

    def clamp(self) -> None:
        """Snap the paddle back inside the field at its default width."""
        if self.x1 <= 0:
            self.x1, self.x2 = 0, PADDLE_WIDTH
        elif self.x2 >= WIDTH:
            self.x1, self.x2 = WIDTH - PADDLE_WIDTH, WIDTH


def ranged_rand(rng: random.Random, low: int, high: int) -> int:
    """Return a random integer in ``[low, high)``."""
    return int(rng.random() * (high - low) + low)


def build_bricks() -> list[Brick]:
    """Lay out the rows of bricks at the top of the field."""
    bricks = []
    y = HEIGHT
    for _ in range(BRICK_ROWS):
        x = 20
        for _ in range(BRICK_COLUMNS):
            bricks.append(Brick(left=x, top=y - 10, right=x + 80, bottom=y - 40))
            x += 85
        y -= 50
    return bricks


def reflect(vx: float, vy: float, nx: float, ny: float) -> tuple[float, float]:
    """Mirror a velocity off a surface with unit normal ``(nx, ny)``."""
    dot = vx * nx + vy * ny
    return vx - 2 * dot * nx, vy - 2 * dot * ny


def menu_action(x: int, y: int) -> MenuAction | None:
    """Return the menu button under a click at window coordinates ``(x, y)``."""
    world_y = HEIGHT - y
    if 250 <= x <= 440 and 440 <= world_y <= 500:
        return MenuAction.NEW_GAME
    if 250 <= x <= 450 and 220 <= world_y <= 280:
        return MenuAction.EXIT
    return None


class Game:
    """State of one game: bricks, paddle, ball and the falling bonus."""

    def __init__(self, rng: random.Random | None = None) -> None:
        rng = rng if rng is not None else random.Random()
        self.bricks = build_bricks()
        self.paddle = Paddle()
        self.ball_x = float(ranged_rand(rng, 200, 500))
        self.ball_y = float(ranged_rand(rng, 200, 500))
        self.ball_vx = -3.0
        self.ball_vy = -1.0
        self.bonus_bricks = tuple(
            ranged_rand(rng, 0, len(self.bricks) - 1) for _ in range(BONUS_BRICK_COUNT)
        )
        self.bonus_x = 0.0
        self.bonus_y = 0.0
        self.bonus_vx = 0.0
        self.bonus_vy = -1.0
        self.bonus_active = False
        self.bonus_hits = 0
        self.started = False

    def start(self) -> None:
        """Begin play; the ball speeds up only the first time."""
        if not self.started:
            self.ball_vx *= SPEED
            self.ball_vy *= SPEED
            self.started = True

    def press_key(self, key: str) -> None:
        """Handle a key: s/w slow down or speed up, a/d move the paddle."""
        if key == "s":
            if abs(int(self.ball_vx)) > MIN_SPEED:
                self.ball_vx /= 2
                self.ball_vy /= 2
        elif key == "w":
            if abs(int(self.ball_vx)) < MAX_SPEED:
                self.ball_vx *= 2
                self.ball_vy *= 2
        elif key == "d":
            self.paddle.x1 += PADDLE_STEP
            self.paddle.x2 += PADDLE_STEP
            self.step()
        elif key == "a":
            self.paddle.x1 -= PADDLE_STEP
            self.paddle.x2 -= PADDLE_STEP
            self.step()

    def step(self) -> None:
        """Advance the ball and bonus by one tick and resolve collisions."""
        self.ball_x += self.ball_vx
        self.ball_y += self.ball_vy
        left = self.ball_x - BALL_RADIUS
        right = self.ball_x + BALL_RADIUS
        bottom = self.ball_y - BALL_RADIUS
        top = self.ball_y + BALL_RADIUS

        normal: tuple[float, float] | None = None
        reverse = False
        at_top, at_bottom = top >= HEIGHT, bottom <= 0
        at_left, at_right = left <= 0, right >= WIDTH
        if at_top or at_bottom or at_left or at_right:
            if (at_left or at_right) and (at_top or at_bottom):
                reverse = True
            elif at_top:
                normal = (0.0, -1.0)
            elif at_right:
                normal = (-1.0, 0.0)
            elif bottom <= LOST_DEPTH:
                raise GameOver("the ball was lost")
            elif at_left:
                normal = (1.0, 0.0)
        elif bottom <= PADDLE_Y and self.paddle.x1 < self.ball_x < self.paddle.x2:
            normal = (0.0, 1.0)
        elif (
            self.bonus_y - BONUS_RADIUS <= PADDLE_Y
            and self.paddle.x1 < self.bonus_x < self.paddle.x2
        ):
            self.paddle.x1 -= PADDLE_GROWTH
            self.paddle.x2 += PADDLE_GROWTH
        else:
            normal = self._hit_brick(top)

        if reverse:
            self.ball_vx, self.ball_vy = -self.ball_vx, -self.ball_vy
        elif normal is not None:
            self.ball_vx, self.ball_vy = reflect(self.ball_vx, self.ball_vy, *normal)

        if self.bonus_active:
            self.bonus_x += self.bonus_vx
            self.bonus_y += self.bonus_vy
            self.bonus_vy -= BONUS_GRAVITY

        self.paddle.clamp()

    def _hit_brick(self, top: float) -> tuple[float, float] | None:
        for index, brick in enumerate(self.bricks):
            if not brick.alive:
                continue
            if top >= brick.bottom and brick.left <= self.ball_x <= brick.right:
                brick.alive = False
                self.bonus_vx, self.bonus_vy = 0.0, -1.0
                if index in self.bonus_bricks:
                    self.bonus_x = float(brick.center_x)
                    self.bonus_y = float(brick.bottom)
                    self.bonus_active = True
                    self.bonus_hits += 1
                    if abs(int(self.ball_vx)) < MAX_SPEED and self.bonus_hits == 1:
                        self.ball_vx *= BONUS_SPEEDUP
                        self.ball_vy *= BONUS_SPEEDUP
                return (0.0, -1.0)
        return None