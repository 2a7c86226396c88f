# collision.py
from __future__ import annotations
from enum import Enum

from .config import Cell
from .grid import Grid
from .snake import Snake


class Collision(Enum):
    NONE = "none"
    WALL = "wall"
    SELF = "self"


def check_collision(head: Cell, grid: Grid, snake: Snake) -> Collision:
    """
    Classify a candidate head against the pre-move snake.

    Self hits are tested against segments 1..n of the current body, old tail
    included, so the same check serves the growing and the plain move case.
    A head stepping onto the cell its tail is leaving counts as a hit.
    """
    if not grid.contains(head):
        return Collision.WALL
    if head in snake.body:
        return Collision.SELF
    return Collision.NONE
