# render.py
from typing import Sequence, Tuple
import pygame  # type: ignore

from .clock import format_elapsed
from .config import BOARD, GRID_LINE, SNAKE_HEAD, SNAKE_BODY, FOOD, HUD_BG, TEXT, HUD_HEIGHT
from .game import Snapshot, Status
from .geometry import Point


def draw_cell(screen: pygame.Surface, point: Point, color: Tuple[int, int, int], cell_size: int) -> None:
    rect = pygame.Rect(point.x * cell_size, HUD_HEIGHT + point.y * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)


def draw_grid(screen: pygame.Surface, width: int, height: int, cell_size: int) -> None:
    bottom = HUD_HEIGHT + height * cell_size
    right = width * cell_size
    for row in range(height):
        y = HUD_HEIGHT + row * cell_size
        pygame.draw.line(screen, GRID_LINE, (0, y), (right, y))
    for col in range(width):
        x = col * cell_size
        pygame.draw.line(screen, GRID_LINE, (x, HUD_HEIGHT), (x, bottom))


def draw_hud(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot) -> None:
    pygame.draw.rect(screen, HUD_BG, pygame.Rect(0, 0, screen.get_width(), HUD_HEIGHT))
    score = font.render(f"Score: {snap.score}", True, TEXT)
    clock = font.render(format_elapsed(snap.elapsed_ms), True, TEXT)
    screen.blit(score, (8, 8))
    screen.blit(clock, clock.get_rect(topright=(screen.get_width() - 8, 8)))


def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, lines: Sequence[str]) -> None:
    # Dim with translucent overlay
    overlay = pygame.Surface(screen.get_size(), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    cx, cy = screen.get_width() // 2, screen.get_height() // 2
    top = cy - 14 * (len(lines) - 1)
    for i, line in enumerate(lines):
        surf = font.render(line, True, (240, 240, 250))
        screen.blit(surf, surf.get_rect(center=(cx, top + 28 * i)))


def draw_game(screen: pygame.Surface, font: pygame.font.Font, snap: Snapshot, cell_size: int) -> None:
    screen.fill(BOARD)
    # food
    draw_cell(screen, snap.food, FOOD, cell_size)
    # snake, head last
    for point in snap.snake[:-1]:
        draw_cell(screen, point, SNAKE_BODY, cell_size)
    draw_cell(screen, snap.head, SNAKE_HEAD, cell_size)
    draw_grid(screen, snap.width, snap.height, cell_size)
    draw_hud(screen, font, snap)

    if snap.status is Status.NOT_STARTED:
        draw_overlay(screen, font, ["SNAKE", "Press SPACE to start"])
    elif snap.status is Status.GAME_OVER:
        draw_overlay(screen, font, ["GAME OVER", f"Score: {snap.score}", "Press R to restart"])
