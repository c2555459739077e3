"""QTimer-backed scheduler for the Qt main thread."""

from __future__ import annotations

import itertools
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from matchie.game.interfaces import CancelToken, IScheduler


class QtScheduler(IScheduler):
    """One single-shot :class:`QTimer` per scheduled callback."""

    __slots__ = ("_parent", "_timers", "_seq")

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent
        self._timers: dict[CancelToken, QTimer] = {}
        self._seq = itertools.count(1)

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> CancelToken:
        token = next(self._seq)
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.timeout.connect(lambda: self._fire(token, callback))
        self._timers[token] = timer
        timer.start(max(0, delay_ms))
        return token

    def cancel(self, token: CancelToken) -> None:
        timer = self._timers.pop(token, None)
        if timer is None:
            return
        timer.stop()
        timer.deleteLater()

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def shutdown(self) -> None:
        """Cancel everything still scheduled."""
        for token in list(self._timers):
            self.cancel(token)

    def _fire(self, token: CancelToken, callback: Callable[[], None]) -> None:
        timer = self._timers.pop(token, None)
        if timer is None:
            return  # cancelled after the timeout was queued
        timer.deleteLater()
        callback()
