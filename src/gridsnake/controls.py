# controls.py
from __future__ import annotations
from typing import Iterable

import pygame  # type: ignore

from .config import UP, DOWN, LEFT, RIGHT
from .game import GameState, SnakeGame

DIRECTION_KEYS = {
    pygame.K_UP: UP,    pygame.K_w: UP,
    pygame.K_DOWN: DOWN,  pygame.K_s: DOWN,
    pygame.K_LEFT: LEFT,  pygame.K_a: LEFT,
    pygame.K_RIGHT: RIGHT, pygame.K_d: RIGHT,
}

SPEED_KEYS = {
    pygame.K_1: "slow",
    pygame.K_2: "normal",
    pygame.K_3: "fast",
    pygame.K_4: "veryFast",
}

PAUSE_KEYS = (pygame.K_SPACE, pygame.K_p)
QUIT_KEYS = (pygame.K_ESCAPE, pygame.K_q)


def handle_key(game: SnakeGame, key: int) -> bool:
    """Map one key press onto a controller call. Returns False to quit."""
    if key in QUIT_KEYS:
        return False
    if key in DIRECTION_KEYS:
        # change_direction ignores turns unless the game is running
        game.change_direction(DIRECTION_KEYS[key])
    elif key in PAUSE_KEYS:
        game.toggle_pause()
    elif key == pygame.K_RETURN:
        if game.state is GameState.OVER:
            game.restart()
        else:
            game.start()
    elif key == pygame.K_r:
        game.reset()
    elif key in SPEED_KEYS:
        game.change_speed(SPEED_KEYS[key])
    return True


def handle_events(game: SnakeGame, events: Iterable[pygame.event.Event]) -> bool:
    """Process events; unknown keys are ignored. Return False to quit."""
    for event in events:
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN and not handle_key(game, event.key):
            return False
    return True
