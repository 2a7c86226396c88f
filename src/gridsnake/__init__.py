# src/gridsnake/__init__.py
"""Grid snake: tick-driven game core with a pygame front end."""

from .game import EndReason, GameState, SnakeGame, Snapshot

__all__ = ["EndReason", "GameState", "SnakeGame", "Snapshot"]
