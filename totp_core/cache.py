"""
cache.py — per-time-step memo of the current code.

Polling loops (UI refresh, API endpoints) ask for the current code far more
often than it changes. TimeStepCache computes the code once per period and
serves the stored value until the time step moves on.
"""

import logging
import threading
import time
from typing import NamedTuple, Optional

from .engine import TOTPEngine, time_step

logger = logging.getLogger(__name__)


class CacheEntry(NamedTuple):
    time_step: int
    code: str


class TimeStepCache:
    """
    Wraps one engine and one (time_step, code) entry.

    The entry is replaced as a whole under a lock: concurrent callers crossing
    a period boundary trigger a single recomputation and never see a code
    paired with the wrong time step.
    """

    def __init__(self, engine: TOTPEngine):
        self.engine = engine
        self._entry: Optional[CacheEntry] = None
        self._lock = threading.Lock()

    @property
    def entry(self) -> Optional[CacheEntry]:
        return self._entry

    def current_code(self, timestamp: Optional[float] = None) -> str:
        """Same result as ``engine.generate(timestamp)``, computed at most once per step."""
        if timestamp is None:
            timestamp = time.time()
        step = time_step(timestamp, self.engine.period)
        with self._lock:
            entry = self._entry
            if entry is not None and entry.time_step == step:
                logger.debug("TOTP cache hit for time step %d", step)
                return entry.code
            code = self.engine.generate(timestamp)
            self._entry = CacheEntry(step, code)
            logger.debug("TOTP cache refreshed for time step %d", step)
            return code

    def current(self, timestamp: Optional[float] = None) -> dict:
        """
        Code plus countdown, the payload display loops and the /totp route use.

        Returns:
            dict: {"code", "remaining", "period"}
        """
        if timestamp is None:
            timestamp = time.time()
        return {
            "code": self.current_code(timestamp),
            "remaining": self.engine.remaining_seconds(timestamp),
            "period": self.engine.period,
        }
