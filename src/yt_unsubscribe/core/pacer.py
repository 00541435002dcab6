"""Pacing primitive for UI timing.

Every suspension point in the loader and sequencer routes through a
Pacer, so the whole timing policy lives in one PacingConfig.
"""

import time
from enum import Enum
from typing import Callable

from yt_unsubscribe.core.config import PacingConfig
from yt_unsubscribe.core.logging import logForDebugging


class Duration(str, Enum):
    """Named duration classes understood by the Pacer."""

    SHORT = "short"
    LONG = "long"
    SETTLE = "settle"


class Pacer:
    """Issues bounded delays drawn from a PacingConfig.

    The sleep function is injectable so callers (and tests) can replace
    real waiting with a recorder.
    """

    def __init__(
        self,
        config: PacingConfig | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._config = config or PacingConfig()
        self._sleep = sleep

    @property
    def config(self) -> PacingConfig:
        return self._config

    def duration_ms(self, duration: Duration) -> int:
        """Resolve a duration class to milliseconds."""
        if duration is Duration.SHORT:
            return self._config.short_ms
        if duration is Duration.LONG:
            return self._config.long_ms
        return self._config.scroll_settle_ms

    def wait(self, duration: Duration, times: int = 1) -> None:
        """Block for `times` multiples of the given duration class."""
        total_ms = self.duration_ms(duration) * times
        if total_ms <= 0:
            return
        logForDebugging(f"Waiting {total_ms}ms ({duration.value} x{times})")
        self._sleep(total_ms / 1000)
