# config.py
from __future__ import annotations
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Tuple
import os

Cell = Tuple[int, int]

# ----- Window & grid -----
WIDTH, HEIGHT = 600, 600
CELL_SIZE = 30
GRID_W, GRID_H = WIDTH // CELL_SIZE, HEIGHT // CELL_SIZE

# ----- Colors -----
BG        = (26, 26, 46)
GRID_LINE = (22, 33, 62)
FOOD      = (231, 76, 60)
HEAD      = (46, 204, 113)
BODY      = (39, 174, 96)
EYE       = (255, 255, 255)
TEXT      = (220, 220, 230)

# ----- Directions (dx, dy) -----
UP, DOWN, LEFT, RIGHT = (0, -1), (0, 1), (-1, 0), (1, 0)
DIRECTIONS = (UP, DOWN, LEFT, RIGHT)

# ----- Speed presets: name -> ms per tick (smaller is faster) -----
SPEED_CONFIG: Dict[str, int] = {
    "slow": 250,
    "normal": 150,
    "fast": 100,
    "veryFast": 60,
}
DEFAULT_SPEED = "normal"

# ----- Persisted store -----
STORE_ENV = "GRIDSNAKE_STORE"
HIGH_SCORE_KEY = "snakeHighScore"
SPEED_KEY = "snakeSpeed"


def default_store_path() -> Path:
    env = os.environ.get(STORE_ENV)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".gridsnake.json"


# ----- Tunables -----
@dataclass
class Config:
    grid_width: int = GRID_W
    grid_height: int = GRID_H
    cell_size: int = CELL_SIZE
    score_increment: int = 10
    initial_snake: Tuple[Cell, ...] = ((10, 10), (9, 10), (8, 10))  # head first
    initial_direction: Cell = RIGHT
    default_speed: str = DEFAULT_SPEED
    seed: int | None = None
    store_path: Path = field(default_factory=default_store_path)

    def __post_init__(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(f"grid must be non-empty, got {self.grid_width}x{self.grid_height}")
        if not self.initial_snake:
            raise ValueError("initial_snake needs at least one cell")
        for x, y in self.initial_snake:
            if not (0 <= x < self.grid_width and 0 <= y < self.grid_height):
                raise ValueError(f"initial snake cell {(x, y)} is outside the grid")
        if self.initial_direction not in DIRECTIONS:
            raise ValueError(f"not a direction: {self.initial_direction}")
        if self.score_increment < 0:
            raise ValueError("score_increment must be non-negative")
        if self.default_speed not in SPEED_CONFIG:
            raise ValueError(f"unknown speed: {self.default_speed!r}")

    @property
    def window_size(self) -> Tuple[int, int]:
        return self.grid_width * self.cell_size, self.grid_height * self.cell_size


CFG = Config()
