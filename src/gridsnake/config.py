# config.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import os

from .food import FOOD_STRATEGIES
from .snake import INITIAL_LENGTH


class ConfigError(ValueError):
    """Raised when a configuration value is missing or invalid."""


# ----- Grid & window -----
CELL_SIZE = 32
GRID_W, GRID_H = 20, 16
HUD_HEIGHT = 36

# ----- Colors -----
BOARD = (0, 0, 0)
GRID_LINE = (30, 30, 36)
SNAKE_HEAD = (0x34, 0x32, 0xA8)
SNAKE_BODY = (0x27, 0x8E, 0xA5)
FOOD = (0xFD, 0x00, 0x00)
HUD_BG = (20, 20, 24)
TEXT = (220, 220, 230)

LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
ENV_PREFIX = "GRIDSNAKE_"


# ----- Tunables -----
@dataclass
class Config:
    seed: Optional[int] = None
    tick_ms: int = 100
    grid_w: int = GRID_W
    grid_h: int = GRID_H
    cell_size: int = CELL_SIZE
    food_strategy: str = "sample"
    log_level: str = "INFO"

    @property
    def window_size(self) -> tuple[int, int]:
        return self.grid_w * self.cell_size, self.grid_h * self.cell_size + HUD_HEIGHT

    def validate(self) -> Config:
        if self.tick_ms < 1:
            raise ConfigError(f"tick_ms must be >= 1, got {self.tick_ms}")
        if self.grid_w < 4 or self.grid_h < 1:
            raise ConfigError(f"grid must be at least 4 cells wide, got {self.grid_w}x{self.grid_h}")
        if self.grid_w * self.grid_h <= INITIAL_LENGTH + 1:
            raise ConfigError(f"grid {self.grid_w}x{self.grid_h} leaves no room to grow")
        if self.cell_size < 1:
            raise ConfigError(f"cell_size must be >= 1, got {self.cell_size}")
        if self.food_strategy not in FOOD_STRATEGIES:
            allowed = ", ".join(sorted(FOOD_STRATEGIES))
            raise ConfigError(f"Invalid food strategy: {self.food_strategy}. Allowed: {allowed}")
        if self.log_level not in LOG_LEVELS:
            raise ConfigError(f"Invalid log level: {self.log_level}")
        return self


def _get_int(name: str, default: Optional[int]) -> Optional[int]:
    value = os.getenv(ENV_PREFIX + name)
    if value is None or not value.strip():
        return default
    try:
        return int(value)
    except ValueError:
        raise ConfigError(f"Invalid integer for {ENV_PREFIX}{name}: {value}") from None


def _get_str(name: str, default: str) -> str:
    value = os.getenv(ENV_PREFIX + name)
    return value.strip() if value and value.strip() else default


def load_config() -> Config:
    """Defaults overridden by GRIDSNAKE_* environment variables."""
    defaults = Config()
    return Config(
        seed=_get_int("SEED", defaults.seed),
        tick_ms=_get_int("TICK_MS", defaults.tick_ms),
        grid_w=_get_int("GRID_W", defaults.grid_w),
        grid_h=_get_int("GRID_H", defaults.grid_h),
        cell_size=_get_int("CELL_SIZE", defaults.cell_size),
        food_strategy=_get_str("FOOD_STRATEGY", defaults.food_strategy).lower(),
        log_level=_get_str("LOG_LEVEL", defaults.log_level).upper(),
    ).validate()
