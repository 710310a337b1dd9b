# main.py
from __future__ import annotations
import argparse
import logging
import random
from typing import Optional, Sequence

import pygame  # type: ignore

from .clock import TickGate
from .config import Config, ConfigError, LOG_LEVELS, load_config
from .food import FOOD_STRATEGIES
from .game import SnakeGame, Status
from .geometry import Direction
from .render import draw_game

logger = logging.getLogger(__name__)

DIRECTION_BY_KEY = {
    pygame.K_UP: Direction.UP,
    pygame.K_w: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_s: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_a: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_d: Direction.RIGHT,
}
START_KEYS = {pygame.K_SPACE, pygame.K_RETURN}


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def parse_args(argv: Optional[Sequence[str]] = None) -> Config:
    """Environment config first, then command-line flags on top."""
    parser = argparse.ArgumentParser(prog="gridsnake", description="Grid snake game")
    try:
        cfg = load_config()
    except ConfigError as exc:
        parser.error(str(exc))

    parser.add_argument("--seed", type=int, default=cfg.seed, help="RNG seed (random if omitted)")
    parser.add_argument("--tick-ms", type=int, default=cfg.tick_ms, help="minimum ms between moves")
    parser.add_argument("--width", type=int, default=cfg.grid_w, help="board width in cells")
    parser.add_argument("--height", type=int, default=cfg.grid_h, help="board height in cells")
    parser.add_argument("--cell-size", type=int, default=cfg.cell_size, help="pixels per cell")
    parser.add_argument(
        "--food-strategy",
        default=cfg.food_strategy,
        choices=sorted(FOOD_STRATEGIES),
        help="sample: rejection sampling; enumerate: pick among free cells",
    )
    parser.add_argument(
        "--log-level",
        default=cfg.log_level,
        type=str.upper,
        choices=sorted(LOG_LEVELS),
    )
    args = parser.parse_args(argv)

    try:
        return Config(
            seed=args.seed,
            tick_ms=args.tick_ms,
            grid_w=args.width,
            grid_h=args.height,
            cell_size=args.cell_size,
            food_strategy=args.food_strategy,
            log_level=args.log_level,
        ).validate()
    except ConfigError as exc:
        parser.error(str(exc))


def handle_event(game: SnakeGame, gate: TickGate, event: pygame.event.Event) -> bool:
    """Forward one input event to the game. Return False to quit."""
    if event.type == pygame.QUIT:
        return False
    if event.type != pygame.KEYDOWN:
        return True
    if event.key == pygame.K_ESCAPE:
        return False

    direction = DIRECTION_BY_KEY.get(event.key)
    if direction is not None:
        if game.request_direction_change(direction):
            logger.debug("heading %s", direction.name)
    elif event.key in START_KEYS and game.status is Status.NOT_STARTED:
        game.start()
        gate.reset()
    elif event.key == pygame.K_r and game.status is Status.GAME_OVER:
        game.reset()
    return True


def main(argv: Optional[Sequence[str]] = None) -> None:
    cfg = parse_args(argv)
    setup_logging(cfg.log_level)

    pygame.init()
    font = pygame.font.SysFont(None, 28)
    screen = pygame.display.set_mode(cfg.window_size)
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    game = SnakeGame(
        cfg.grid_w,
        cfg.grid_h,
        rng=random.Random(cfg.seed),
        clock=pygame.time.get_ticks,
        food_strategy=cfg.food_strategy,
    )
    gate = TickGate(cfg.tick_ms)
    logger.info("board %dx%d, tick %dms, seed %s", cfg.grid_w, cfg.grid_h, cfg.tick_ms, cfg.seed)

    running = True
    while running:
        # 1) input
        for event in pygame.event.get():
            if not handle_event(game, gate, event):
                running = False
                break

        # 2) update
        if game.status is Status.RUNNING and gate.due(pygame.time.get_ticks()):
            game.tick()

        # 3) render
        draw_game(screen, font, game.snapshot(), cfg.cell_size)
        pygame.display.flip()
        clock.tick(60)  # high FPS; movement gated by TickGate

    pygame.quit()


if __name__ == "__main__":
    main()
