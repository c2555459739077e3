"""Round clock driven by an injected scheduler."""

from __future__ import annotations

from collections.abc import Callable

from matchie.game.interfaces import CancelToken, IScheduler


class RoundClock:
    """Periodic ticker for the elapsed-time counter.

    Each tick re-arms a single one-shot callback, so at most one tick is
    ever outstanding and :meth:`stop` cancels it outright.
    """

    __slots__ = ("_scheduler", "_interval_ms", "_on_tick", "_token", "_ticks")

    def __init__(
        self,
        scheduler: IScheduler,
        interval_ms: int,
        on_tick: Callable[[], None],
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self._scheduler = scheduler
        self._interval_ms = interval_ms
        self._on_tick = on_tick
        self._token: CancelToken | None = None
        self._ticks = 0

    def start(self) -> None:
        """(Re)start from zero; a running clock is stopped first."""
        self.stop()
        self._ticks = 0
        self._arm()

    def stop(self) -> None:
        if self._token is not None:
            self._scheduler.cancel(self._token)
            self._token = None

    @property
    def is_running(self) -> bool:
        return self._token is not None

    @property
    def ticks(self) -> int:
        """Ticks delivered since the last :meth:`start`."""
        return self._ticks

    # ── Internal ─────────────────────────────────────────────────────────

    def _arm(self) -> None:
        self._token = self._scheduler.schedule(self._interval_ms, self._fire)

    def _fire(self) -> None:
        self._token = None
        self._ticks += 1
        self._arm()
        # Armed before the handler so a stop() inside it cancels the next tick.
        self._on_tick()
