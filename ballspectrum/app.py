"""Window, drawing and event loop for the ball game."""

from __future__ import annotations

import argparse
import math
import random

import pygame

from ballspectrum.engine import (
    BALL_RADIUS,
    BONUS_RADIUS,
    HEIGHT,
    PADDLE_Y,
    WIDTH,
    Game,
    GameOver,
    MenuAction,
    menu_action,
)

WHITE = (255, 255, 255)
BLACK = (0, 0, 0)
BUTTON_COLOR = (0, 0, 51)
BRICK_COLOR = (128, 204, 51)
LINE_WIDTH = 2
CIRCLE_VERTICES = 40
FRAMES_PER_SECOND = 100
TITLE = "Ball"

_NEW_GAME_BUTTON = (250, 500, 450, 440)
_EXIT_BUTTON = (250, 280, 450, 220)


def _to_screen(x: float, y: float) -> tuple[int, int]:
    """Map world coordinates (origin bottom left) to surface coordinates."""
    return round(x), HEIGHT - round(y)


def _world_rect(x1: int, y1: int, x2: int, y2: int) -> pygame.Rect:
    left, right = sorted((x1, x2))
    bottom, top = sorted((y1, y2))
    return pygame.Rect(left, HEIGHT - top, right - left, top - bottom)


def _draw_text(surface: pygame.Surface, x: int, y: int, text: str, color) -> None:
    if not pygame.font.get_init():
        pygame.font.init()
    font = pygame.font.Font(None, 32)
    image = font.render(text, True, color)
    rect = image.get_rect(bottomleft=_to_screen(x, y))
    surface.blit(image, rect)


def _draw_ngon(surface: pygame.Surface, cx: float, cy: float, radius: float) -> None:
    points = [
        _to_screen(
            cx + radius * math.cos(2 * math.pi * k / CIRCLE_VERTICES),
            cy + radius * math.sin(2 * math.pi * k / CIRCLE_VERTICES),
        )
        for k in range(CIRCLE_VERTICES)
    ]
    pygame.draw.polygon(surface, BLACK, points, LINE_WIDTH)


def render_menu(surface: pygame.Surface) -> None:
    """Draw the start menu with its New Game and Exit buttons."""
    surface.fill(WHITE)
    pygame.draw.rect(surface, BUTTON_COLOR, _world_rect(*_NEW_GAME_BUTTON))
    pygame.draw.rect(surface, BUTTON_COLOR, _world_rect(*_EXIT_BUTTON))
    _draw_text(surface, 300, 550, "Ball Game", BLACK)
    _draw_text(surface, 300, 465, "New Game", WHITE)
    _draw_text(surface, 325, 245, "Exit", WHITE)


def render_game(surface: pygame.Surface, game: Game) -> None:
    """Draw the bricks still standing, the paddle, the ball and any bonus."""
    surface.fill(WHITE)
    for index, brick in enumerate(game.bricks):
        if not brick.alive:
            continue
        color = BRICK_COLOR if index % 2 == 0 else BLACK
        rect = _world_rect(brick.left, brick.top, brick.right, brick.bottom)
        pygame.draw.rect(surface, color, rect)

    pygame.draw.line(
        surface,
        BLACK,
        _to_screen(game.paddle.x1, PADDLE_Y),
        _to_screen(game.paddle.x2, PADDLE_Y),
        LINE_WIDTH,
    )
    _draw_ngon(surface, game.ball_x, game.ball_y, BALL_RADIUS)
    if game.bonus_active:
        _draw_ngon(surface, game.bonus_x, game.bonus_y, BONUS_RADIUS)


def main(argv: list[str] | None = None) -> int:
    """Open the game window and run until the player quits or loses the ball."""
    parser = argparse.ArgumentParser(prog="ballspectrum", description="Brick-breaking ball game.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random layout")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode((WIDTH, HEIGHT))
        pygame.display.set_caption(TITLE)
        clock = pygame.time.Clock()
        game = Game(random.Random(args.seed))
        playing = False
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                    action = menu_action(*event.pos)
                    if action is MenuAction.NEW_GAME:
                        game.start()
                        playing = True
                    elif action is MenuAction.EXIT:
                        return 0
                elif event.type == pygame.KEYDOWN and event.unicode:
                    game.press_key(event.unicode)
            if playing:
                game.step()
                render_game(screen, game)
            else:
                render_menu(screen)
            pygame.display.flip()
            clock.tick(FRAMES_PER_SECOND)
    except GameOver:
        return 0
    finally:
        pygame.quit()