import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pytest

from gridsnake.clock import GameClock
from gridsnake.config import Config
from gridsnake.game import SnakeGame
from gridsnake.storage import ScoreStore


class FakeTime:
    """Millisecond time source the tests move by hand."""

    def __init__(self, start: int = 0):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, ms: int) -> None:
        self.now += ms


class ScriptedRandom(random.Random):
    """Returns queued randrange values first, then behaves like a seeded Random."""

    def __init__(self, *values: int, seed: int = 0):
        super().__init__(seed)
        self.queue = list(values)

    def randrange(self, *args, **kwargs):
        if self.queue:
            return self.queue.pop(0)
        return super().randrange(*args, **kwargs)


@pytest.fixture
def fake_time():
    return FakeTime()


@pytest.fixture
def clock(fake_time):
    return GameClock(now=fake_time)


@pytest.fixture
def store(tmp_path):
    return ScoreStore(tmp_path / "store.json")


@pytest.fixture
def make_game(store, clock):
    """Build a game; food_at pins the first food cell."""

    def _make(food_at=None, **config_kwargs):
        config_kwargs.setdefault("store_path", store.path)
        config = Config(**config_kwargs)
        rng = ScriptedRandom(*(food_at or ()))
        return SnakeGame(config, store=store, clock=clock, rng=rng)

    return _make
