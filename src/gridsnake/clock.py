# clock.py
from __future__ import annotations
from typing import Callable, Optional
import logging

import pygame  # type: ignore

logger = logging.getLogger(__name__)


class GameClock:
    """
    Fixed-interval tick scheduler gated on a millisecond time source.

    The main loop calls poll() every frame; poll() answers True once per
    elapsed interval. start/stop/reconfigure mirror an interval timer:
    a speed change disarms the old schedule and arms a new one, so the new
    period counts from the moment of the change.
    """

    def __init__(self, now: Optional[Callable[[], int]] = None, interval_ms: int = 150):
        self._now = now or pygame.time.get_ticks
        self._interval_ms = interval_ms
        self._next_due: Optional[int] = None

    @property
    def running(self) -> bool:
        return self._next_due is not None

    @property
    def interval_ms(self) -> int:
        return self._interval_ms

    def start(self, interval_ms: Optional[int] = None) -> None:
        if self.running:
            return
        if interval_ms is None:
            interval_ms = self._interval_ms
        if interval_ms <= 0:
            raise ValueError(f"interval must be positive, got {interval_ms}")
        self._interval_ms = interval_ms
        self._next_due = self._now() + self._interval_ms
        logger.debug("clock armed: every %d ms", self._interval_ms)

    def stop(self) -> None:
        if self.running:
            logger.debug("clock stopped")
        self._next_due = None

    def reconfigure(self, interval_ms: int) -> None:
        if self.running:
            self.stop()
            self.start(interval_ms)
        else:
            self._interval_ms = interval_ms

    def poll(self) -> bool:
        """True if a tick is due. At most one tick per call, no catch-up bursts."""
        if self._next_due is None:
            return False
        now = self._now()
        if now < self._next_due:
            return False
        self._next_due = now + self._interval_ms
        return True
