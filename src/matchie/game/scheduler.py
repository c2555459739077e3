"""Virtual-time scheduler for headless runs and deterministic tests."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Callable

from matchie.game.interfaces import CancelToken, IScheduler


class ManualScheduler(IScheduler):
    """Scheduler whose clock only moves when :meth:`advance` is called.

    Callbacks run in due-time order; ties run in scheduling order.
    A callback that schedules another one inside the advanced window
    sees it fire during the same ``advance`` call.
    """

    __slots__ = ("_now_ms", "_queue", "_callbacks", "_seq")

    def __init__(self) -> None:
        self._now_ms = 0
        self._queue: list[tuple[int, int, CancelToken]] = []
        self._callbacks: dict[CancelToken, Callable[[], None]] = {}
        self._seq = itertools.count(1)

    # ── IScheduler implementation ────────────────────────────────────────

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> CancelToken:
        if delay_ms < 0:
            raise ValueError("delay_ms must be >= 0")
        token = next(self._seq)
        self._callbacks[token] = callback
        heapq.heappush(self._queue, (self._now_ms + delay_ms, token, token))
        return token

    def cancel(self, token: CancelToken) -> None:
        self._callbacks.pop(token, None)

    # ── Extra helpers ────────────────────────────────────────────────────

    @property
    def now_ms(self) -> int:
        return self._now_ms

    @property
    def pending_count(self) -> int:
        return len(self._callbacks)

    def advance(self, ms: int) -> int:
        """Move the clock forward *ms* and run what fell due.

        Returns the number of callbacks that ran.
        """
        if ms < 0:
            raise ValueError("Cannot move time backwards")
        target = self._now_ms + ms
        ran = 0
        while self._queue and self._queue[0][0] <= target:
            due, _, token = heapq.heappop(self._queue)
            callback = self._callbacks.pop(token, None)
            if callback is None:
                continue  # cancelled
            self._now_ms = due
            callback()
            ran += 1
        self._now_ms = target
        return ran
