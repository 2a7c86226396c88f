# grid.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterator
import random

from .config import Cell


@dataclass(frozen=True)
class Grid:
    """Fixed rectangular board of width x height cells."""
    width: int
    height: int

    def contains(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    @property
    def size(self) -> int:
        return self.width * self.height

    def cells(self) -> Iterator[Cell]:
        # row-major
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    def random_cell(self, rng: random.Random) -> Cell:
        return (rng.randrange(self.width), rng.randrange(self.height))
