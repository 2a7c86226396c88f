# render.py
from __future__ import annotations
from typing import Optional, TextIO, Tuple
import sys

import numpy as np  # type: ignore
import pygame       # type: ignore

from .config import (
    CELL_SIZE,
    BG, GRID_LINE, FOOD, HEAD, BODY, EYE, TEXT,
    UP, DOWN, LEFT, RIGHT,
)
from .game import GameState, Snapshot
from .grid import Grid

# Board codes for the array projection
EMPTY, SNAKE_BODY, FOOD_CELL, SNAKE_HEAD = 0, 1, 2, 7

_CHARS = {EMPTY: ".", SNAKE_BODY: "o", FOOD_CELL: "*", SNAKE_HEAD: "@"}


def board_array(snap: Snapshot, grid: Grid) -> np.ndarray:
    """
    Project a snapshot onto an H x W int8 matrix:
      0 = empty, 1 = body, 2 = food, 7 = head
    Cells outside the grid are skipped.
    """
    board = np.zeros((grid.height, grid.width), dtype=np.int8)
    if snap.food is not None and grid.contains(snap.food):
        fx, fy = snap.food
        board[fy, fx] = FOOD_CELL
    for x, y in snap.snake[1:]:
        if grid.contains((x, y)):
            board[y, x] = SNAKE_BODY
    if grid.contains(snap.head):
        hx, hy = snap.head
        board[hy, hx] = SNAKE_HEAD
    return board


class TextRenderer:
    """Headless sink: writes the board as characters plus a status line."""

    def __init__(self, grid: Grid, stream: Optional[TextIO] = None):
        self.grid = grid
        self.stream = stream if stream is not None else sys.stdout

    def render(self, snap: Snapshot) -> str:
        board = board_array(snap, self.grid)
        rows = ["".join(_CHARS[int(v)] for v in row) for row in board]
        status = f"score={snap.score} best={snap.high_score} state={snap.state.value}"
        if snap.end_reason is not None:
            status += f" reason={snap.end_reason.value}"
        return "\n".join(rows + [status])

    def draw(self, snap: Snapshot) -> None:
        print(self.render(snap), file=self.stream)


# ---------- pygame ----------
def _eye_offsets(direction: Tuple[int, int], cell: int) -> Tuple[Tuple[int, int], Tuple[int, int]]:
    """Top-left pixel offsets of the two eyes inside the head cell."""
    near, far = cell * 8 // 30, cell * 18 // 30
    if direction == RIGHT:
        return (far, near), (far, far)
    if direction == LEFT:
        return (near, near), (near, far)
    if direction == UP:
        return (near, near), (far, near)
    if direction == DOWN:
        return (near, far), (far, far)
    return (near, near), (far, near)


class PygameRenderer:
    """
    Draws snapshots onto a pygame surface. With no surface every call is a
    no-op, so the game runs the same with or without a window.
    """

    def __init__(
        self,
        surface: Optional[pygame.Surface],
        grid: Grid,
        cell_size: int = CELL_SIZE,
        font: Optional[pygame.font.Font] = None,
    ):
        self.surface = surface
        self.grid = grid
        self.cell = cell_size
        self.font = font

    def draw(self, snap: Snapshot) -> None:
        if self.surface is None:
            return
        self.surface.fill(BG)
        self._draw_grid()
        self._draw_food(snap)
        self._draw_snake(snap)
        if self.font is not None:
            self._draw_hud(snap)

    def _draw_grid(self) -> None:
        w, h = self.grid.width * self.cell, self.grid.height * self.cell
        for i in range(self.grid.width + 1):
            pygame.draw.line(self.surface, GRID_LINE, (i * self.cell, 0), (i * self.cell, h))
        for j in range(self.grid.height + 1):
            pygame.draw.line(self.surface, GRID_LINE, (0, j * self.cell), (w, j * self.cell))

    def _draw_food(self, snap: Snapshot) -> None:
        if snap.food is None:
            return
        fx, fy = snap.food
        center = (fx * self.cell + self.cell // 2, fy * self.cell + self.cell // 2)
        pygame.draw.circle(self.surface, FOOD, center, max(self.cell // 2 - 2, 1))

    def _draw_snake(self, snap: Snapshot) -> None:
        # Body first so the head stays on top
        for x, y in reversed(snap.snake[1:]):
            self._fill_cell(x, y, BODY)
        hx, hy = snap.head
        self._fill_cell(hx, hy, HEAD)

        eye = max(self.cell * 4 // 30, 1)
        for ox, oy in _eye_offsets(snap.direction, self.cell):
            rect = pygame.Rect(hx * self.cell + ox, hy * self.cell + oy, eye, eye)
            pygame.draw.rect(self.surface, EYE, rect)

    def _fill_cell(self, gx: int, gy: int, color) -> None:
        rect = pygame.Rect(gx * self.cell + 2, gy * self.cell + 2, self.cell - 4, self.cell - 4)
        pygame.draw.rect(self.surface, color, rect)

    def _draw_hud(self, snap: Snapshot) -> None:
        txt = self.font.render(
            f"Score: {snap.score}   Best: {snap.high_score}   Speed: {snap.speed}", True, TEXT
        )
        self.surface.blit(txt, (8, 6))

        if snap.state is GameState.PAUSED:
            self._draw_banner("PAUSED", "Press SPACE to resume")
        elif snap.state is GameState.OVER:
            self._draw_banner("GAME OVER", "Press ENTER to play again", f"Score: {snap.score}")
        elif snap.state is GameState.IDLE:
            self._draw_banner("SNAKE", "Press ENTER to start")

    def _draw_banner(self, title: str, *lines: str) -> None:
        width, height = self.surface.get_size()
        # Dim with translucent overlay
        overlay = pygame.Surface((width, height), pygame.SRCALPHA)
        overlay.fill((0, 0, 0, 140))  # RGBA
        self.surface.blit(overlay, (0, 0))

        y = height // 2 - 16
        for i, text in enumerate((title, *lines)):
            color = (240, 240, 250) if i == 0 else TEXT
            surf = self.font.render(text, True, color)
            self.surface.blit(surf, surf.get_rect(center=(width // 2, y)))
            y += 32
