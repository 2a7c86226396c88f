# storage.py
"""
Best-effort key-value persistence for the high score and speed preference.

Values live in a small JSON object on disk. Anything missing or malformed
reads back as the default; a failed write is logged and otherwise ignored.
"""
from __future__ import annotations
from pathlib import Path
from typing import Any, Dict
import json
import logging

from .config import DEFAULT_SPEED, HIGH_SCORE_KEY, SPEED_CONFIG, SPEED_KEY

logger = logging.getLogger(__name__)


class ScoreStore:
    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._data: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: expected a JSON object", self.path)
            return {}
        return data

    def _write(self) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")
        except OSError as e:
            logger.error("Could not save %s: %s", self.path, e)

    # ---------- High score ----------
    def load_high_score(self) -> int:
        raw = self._data.get(HIGH_SCORE_KEY, 0)
        try:
            value = int(raw)
        except (TypeError, ValueError, OverflowError):
            logger.warning("Bad high score %r in %s, using 0", raw, self.path)
            return 0
        if isinstance(raw, bool) or value < 0:
            logger.warning("Bad high score %r in %s, using 0", raw, self.path)
            return 0
        return value

    def save_high_score(self, score: int) -> None:
        self._data[HIGH_SCORE_KEY] = int(score)
        self._write()

    # ---------- Speed ----------
    def load_speed(self, default: str = DEFAULT_SPEED) -> str:
        speed = self._data.get(SPEED_KEY, default)
        if not isinstance(speed, str) or speed not in SPEED_CONFIG:
            logger.warning("Unknown speed %r in %s, using %s", speed, self.path, default)
            return default
        return speed

    def save_speed(self, speed: str) -> None:
        self._data[SPEED_KEY] = speed
        self._write()
