# snake.py
from __future__ import annotations
from typing import Iterable, Iterator, List, Tuple

from .config import Cell, DIRECTIONS

# ---------- Direction helpers ----------
def is_direction(d) -> bool:
    """True for the four unit vectors; rejects (0, 0) and anything else."""
    try:
        return tuple(d) in DIRECTIONS
    except TypeError:
        return False

def is_opposite(a: Cell, b: Cell) -> bool:
    return a[0] == -b[0] and a[1] == -b[1]

def add_vectors(a: Cell, b: Cell) -> Cell:
    return (a[0] + b[0], a[1] + b[1])

# ---------- Snake ----------
class Snake:
    """
    Ordered cells, head at index 0.

    advance() only computes the next head; the caller validates it with the
    collision detector before committing grow() or move_without_growth().
    """

    def __init__(self, cells: Iterable[Cell]):
        self._cells: List[Cell] = [tuple(c) for c in cells]
        if not self._cells:
            raise ValueError("a snake needs at least one cell")

    @property
    def head(self) -> Cell:
        return self._cells[0]

    @property
    def tail(self) -> Cell:
        return self._cells[-1]

    @property
    def body(self) -> Tuple[Cell, ...]:
        return tuple(self._cells[1:])

    @property
    def segments(self) -> Tuple[Cell, ...]:
        return tuple(self._cells)

    def advance(self, direction: Cell) -> Cell:
        return add_vectors(self.head, direction)

    def grow(self, new_head: Cell) -> None:
        self._cells.insert(0, new_head)

    def move_without_growth(self, new_head: Cell) -> None:
        self._cells.insert(0, new_head)
        self._cells.pop()

    def occupies(self, cell: Cell) -> bool:
        return tuple(cell) in self._cells

    def __len__(self) -> int:
        return len(self._cells)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._cells)

    def __repr__(self) -> str:
        return f"Snake({self._cells!r})"
