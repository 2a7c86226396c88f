import io

import numpy as np
import pygame

from gridsnake.config import BG, BODY, FOOD, HEAD, RIGHT
from gridsnake.game import EndReason, GameState, Snapshot
from gridsnake.grid import Grid
from gridsnake.render import PygameRenderer, TextRenderer, board_array


def make_snap(**overrides):
    values = dict(
        snake=((2, 1), (1, 1), (0, 1)),
        food=(3, 3),
        direction=RIGHT,
        score=20,
        high_score=50,
        state=GameState.RUNNING,
        speed="normal",
    )
    values.update(overrides)
    return Snapshot(**values)


def test_board_array_codes():
    board = board_array(make_snap(), Grid(4, 4))
    assert board.shape == (4, 4)
    assert board.dtype == np.int8
    assert board[1, 2] == 7
    assert board[1, 1] == 1 and board[1, 0] == 1
    assert board[3, 3] == 2
    assert int((board == 0).sum()) == 12


def test_text_renderer():
    out = io.StringIO()
    snap = make_snap(state=GameState.OVER, end_reason=EndReason.WALL)
    TextRenderer(Grid(4, 4), out).draw(snap)
    lines = out.getvalue().splitlines()
    assert lines[:4] == ["....", "oo@.", "....", "...*"]
    assert lines[4] == "score=20 best=50 state=over reason=wall"


def test_pygame_renderer_draws_cells():
    surface = pygame.Surface((4 * 30, 4 * 30))
    PygameRenderer(surface, Grid(4, 4), cell_size=30).draw(make_snap())
    assert surface.get_at((3 * 30 + 15, 3 * 30 + 15))[:3] == FOOD
    assert surface.get_at((1 * 30 + 15, 1 * 30 + 15))[:3] == BODY
    assert surface.get_at((2 * 30 + 4, 1 * 30 + 26))[:3] == HEAD
    assert surface.get_at((0 * 30 + 15, 3 * 30 + 15))[:3] == BG


def test_pygame_renderer_without_surface_is_noop():
    PygameRenderer(None, Grid(4, 4)).draw(make_snap())
