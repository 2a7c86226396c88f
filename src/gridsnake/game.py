# game.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple
import logging
import random

from .clock import GameClock
from .collision import Collision, check_collision
from .config import CFG, SPEED_CONFIG, Cell, Config
from .food import place_food
from .grid import Grid
from .snake import Snake, is_direction, is_opposite
from .storage import ScoreStore

logger = logging.getLogger(__name__)


class GameState(Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"
    OVER = "over"


class EndReason(Enum):
    WALL = "wall"
    SELF = "self"
    BOARD_FULL = "board_full"


@dataclass(frozen=True)
class Snapshot:
    """Immutable view of one moment of the game, handed to renderers."""
    snake: Tuple[Cell, ...]      # head at index 0
    food: Optional[Cell]
    direction: Cell
    score: int
    high_score: int
    state: GameState
    speed: str
    end_reason: Optional[EndReason] = None

    @property
    def head(self) -> Cell:
        return self.snake[0]


Listener = Callable[[Snapshot], None]


class SnakeGame:
    """
    Owns the only mutable copy of the game and drives it.

    Input sources call change_direction/start/pause/... directly; they never
    touch the snake, food or score. The main loop calls update() every frame,
    which runs one tick when the clock says one is due.
    """

    def __init__(
        self,
        config: Config = CFG,
        store: Optional[ScoreStore] = None,
        clock: Optional[GameClock] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config
        self.grid = Grid(config.grid_width, config.grid_height)
        self.store = store if store is not None else ScoreStore(config.store_path)
        self.rng = rng if rng is not None else random.Random(config.seed)

        self._high_score = self.store.load_high_score()
        self._speed = self.store.load_speed(config.default_speed)
        self.clock = clock if clock is not None else GameClock()
        self.clock.reconfigure(SPEED_CONFIG[self._speed])

        self._listeners: List[Listener] = []
        self._in_tick = False
        self._new_round()
        self._state = GameState.IDLE

    # ---------- Accessors ----------
    @property
    def state(self) -> GameState:
        return self._state

    @property
    def score(self) -> int:
        return self._score

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def speed(self) -> str:
        return self._speed

    @property
    def direction(self) -> Cell:
        return self._direction

    @property
    def pending_direction(self) -> Cell:
        return self._pending

    @property
    def food(self) -> Optional[Cell]:
        return self._food

    @property
    def snake(self) -> Tuple[Cell, ...]:
        return self._snake.segments

    @property
    def end_reason(self) -> Optional[EndReason]:
        return self._end_reason

    def snapshot(self) -> Snapshot:
        return Snapshot(
            snake=self._snake.segments,
            food=self._food,
            direction=self._direction,
            score=self._score,
            high_score=self._high_score,
            state=self._state,
            speed=self._speed,
            end_reason=self._end_reason,
        )

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _notify(self) -> None:
        snap = self.snapshot()
        for listener in self._listeners:
            listener(snap)

    # ---------- Lifecycle ----------
    def _new_round(self) -> None:
        self._snake = Snake(self.config.initial_snake)
        self._direction = self.config.initial_direction
        self._pending = self.config.initial_direction
        self._score = 0
        self._end_reason: Optional[EndReason] = None
        self._food = place_food(self.grid, self._snake, self.rng)

    def start(self) -> None:
        if self._state is not GameState.IDLE:
            return
        self._state = GameState.RUNNING
        self.clock.start(SPEED_CONFIG[self._speed])
        logger.info("Game started at %s speed", self._speed)
        self._notify()

    def pause(self) -> None:
        if self._state is not GameState.RUNNING:
            return
        self.clock.stop()
        self._state = GameState.PAUSED
        logger.info("Paused")
        self._notify()

    def resume(self) -> None:
        if self._state is not GameState.PAUSED:
            return
        self._state = GameState.RUNNING
        self.clock.start(SPEED_CONFIG[self._speed])
        logger.info("Resumed")
        self._notify()

    def toggle_pause(self) -> None:
        if self._state is GameState.RUNNING:
            self.pause()
        elif self._state is GameState.PAUSED:
            self.resume()

    def reset(self) -> None:
        self.clock.stop()
        self._new_round()
        self._state = GameState.IDLE
        logger.info("Reset")
        self._notify()

    def restart(self) -> None:
        self.reset()
        self.start()

    def _end(self, reason: EndReason) -> None:
        self.clock.stop()
        self._state = GameState.OVER
        self._end_reason = reason
        logger.info("Game over (%s): score %d, best %d", reason.value, self._score, self._high_score)

    # ---------- Input ----------
    def change_direction(self, direction: Cell) -> bool:
        """Buffer a turn for the next tick. Returns whether it was accepted."""
        if self._state is not GameState.RUNNING:
            return False
        if not is_direction(direction):
            logger.debug("Ignoring non-direction %r", direction)
            return False
        direction = tuple(direction)
        # Compared with the committed direction, not the pending one.
        if is_opposite(direction, self._direction):
            logger.debug("Ignoring reversal %r", direction)
            return False
        self._pending = direction
        return True

    def change_speed(self, speed: str) -> bool:
        if speed not in SPEED_CONFIG:
            logger.warning("Unknown speed %r", speed)
            return False
        self._speed = speed
        self.store.save_speed(speed)
        # Only re-arms the timer while it is running; paused games pick the
        # new interval up on resume.
        self.clock.reconfigure(SPEED_CONFIG[speed])
        logger.info("Speed set to %s (%d ms)", speed, SPEED_CONFIG[speed])
        self._notify()
        return True

    # ---------- Update ----------
    def update(self) -> bool:
        """Run one tick if the clock says one is due. Returns whether it ran."""
        if self._state is not GameState.RUNNING:
            return False
        if not self.clock.poll():
            return False
        self.tick()
        return True

    def tick(self) -> None:
        if self._state is not GameState.RUNNING or self._in_tick:
            return
        self._in_tick = True
        try:
            self._step()
        finally:
            self._in_tick = False
        self._notify()

    def _step(self) -> None:
        # Commit direction once per tick
        self._direction = self._pending

        new_head = self._snake.advance(self._direction)
        hit = check_collision(new_head, self.grid, self._snake)
        if hit is Collision.WALL:
            self._end(EndReason.WALL)
            return
        if hit is Collision.SELF:
            self._end(EndReason.SELF)
            return

        if new_head == self._food:
            self._snake.grow(new_head)
            self._score += self.config.score_increment
            if self._score > self._high_score:
                self._high_score = self._score
                self.store.save_high_score(self._high_score)
                logger.info("New best score: %d", self._high_score)
            self._food = place_food(self.grid, self._snake, self.rng)
            if self._food is None:
                self._end(EndReason.BOARD_FULL)
            else:
                logger.debug("Food placed at %s", self._food)
        else:
            self._snake.move_without_growth(new_head)
