"""Game clock helpers shared by frontends.

The engine never measures wall-clock time.  ``Ticker`` is the external
scheduler that turns real seconds into ``tick`` calls, and is polled from
the same loop that handles keypresses so ticks and moves never interleave.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

logger = logging.getLogger(__name__)


def format_time(seconds: int) -> str:
    """Format *seconds* as ``MM:SS``; minutes keep counting past 59."""
    m, s = divmod(int(seconds), 60)
    return f"{m:02d}:{s:02d}"


class Ticker:
    """Fires *on_tick* once per whole *interval* while a game is playing."""

    def __init__(
        self,
        on_tick: Callable[[], None],
        clock: Callable[[], float] = time.monotonic,
        interval: float = 1.0,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}.")
        self.on_tick = on_tick
        self.clock = clock
        self.interval = interval
        self._next: float | None = None

    @property
    def running(self) -> bool:
        return self._next is not None

    def restart(self) -> None:
        """Re-base the schedule, e.g. when a new game starts."""
        self._next = self.clock() + self.interval

    def stop(self) -> None:
        if self._next is not None:
            logger.debug("Ticker stopped")
        self._next = None

    def sync(self, playing: bool) -> int:
        """Fire every tick that is due and return how many fired.

        Must be called with the session's current playing state; leaving
        the playing state always stops the ticker.
        """
        if not playing:
            self.stop()
            return 0
        if self._next is None:
            self.restart()
            return 0

        fired = 0
        now = self.clock()
        while self._next <= now:
            self.on_tick()
            self._next += self.interval
            fired += 1
        return fired
