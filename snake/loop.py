from __future__ import annotations

import logging
import time
from typing import Callable, Optional

from snake.game import SnakeGame

logger = logging.getLogger(__name__)


def monotonic_ms() -> int:
    return int(time.monotonic() * 1000)


class GameLoop:
    """Fires SnakeGame.tick() every `game.speed` milliseconds.

    The host polls the loop once per frame after handling that frame's input
    events, so every input received before a tick is visible to it. The timer
    is re-armed when a session starts or a tick changes the speed. Pausing
    leaves it alone: paused ticks are no-ops and the phase of the interval is
    kept.
    """

    def __init__(self, game: SnakeGame, clock: Callable[[], int] = monotonic_ms) -> None:
        self.game = game
        self.clock = clock
        self.running = False

        self._deadline: Optional[int] = None
        self._interval: Optional[int] = None
        self._session: Optional[int] = None

    @property
    def armed(self) -> bool:
        return self._deadline is not None

    @property
    def interval(self) -> Optional[int]:
        return self._interval

    def start(self) -> None:
        self.running = True
        self._disarm()

    def stop(self) -> None:
        self.running = False
        self._disarm()

    def poll(self, now: Optional[int] = None) -> bool:
        """Fire at most one due tick. Returns True if a tick fired."""
        if not self.running:
            return False
        if now is None:
            now = self.clock()

        if not self.game.active:
            self._disarm()
            return False

        if self._session != self.game.session or self._deadline is None:
            self._arm(now)
            return False

        if now < self._deadline:
            return False

        self.game.tick()

        if not self.game.active:
            self._disarm()
        elif self.game.speed != self._interval:
            self._arm(now)
        else:
            self._deadline += self._interval
            if self._deadline <= now:
                # fell behind; do not try to catch up with a burst of ticks
                self._deadline = now + self._interval
        return True

    def _arm(self, now: int) -> None:
        self._session = self.game.session
        self._interval = self.game.speed
        self._deadline = now + self._interval
        logger.debug("Loop armed: interval=%dms next=%d", self._interval, self._deadline)

    def _disarm(self) -> None:
        self._deadline = None
        self._interval = None
        self._session = None
