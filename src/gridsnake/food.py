# food.py
from __future__ import annotations
from typing import Optional
import logging
import random

from .config import Cell
from .grid import Grid
from .snake import Snake

logger = logging.getLogger(__name__)


def place_food(
    grid: Grid,
    snake: Snake,
    rng: random.Random,
    max_attempts: Optional[int] = None,
) -> Optional[Cell]:
    """
    Pick a uniformly random cell not covered by the snake.

    Rejection-samples like the classic loop. After max_attempts misses
    (default 4x the board size) it draws from the explicit free-cell list
    instead, which keeps the distribution uniform and always terminates.
    Returns None when the snake covers the whole board.
    """
    if len(snake) >= grid.size:
        return None

    if max_attempts is None:
        max_attempts = grid.size * 4

    for _ in range(max_attempts):
        cell = grid.random_cell(rng)
        if not snake.occupies(cell):
            return cell

    free = [c for c in grid.cells() if not snake.occupies(c)]
    logger.debug("food: %d random misses, choosing among %d free cells", max_attempts, len(free))
    if not free:
        return None
    return rng.choice(free)
