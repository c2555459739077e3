"""Tests for the QTimer-backed scheduler."""

from __future__ import annotations

from PyQt6.QtTest import QTest

from matchie.ui.qt_scheduler import QtScheduler


def test_callback_fires_after_delay(qapp: object) -> None:
    del qapp
    scheduler = QtScheduler()
    fired: list[bool] = []
    scheduler.schedule(10, lambda: fired.append(True))
    assert scheduler.pending_count == 1

    QTest.qWait(100)

    assert fired == [True]
    assert scheduler.pending_count == 0


def test_cancel_prevents_callback(qapp: object) -> None:
    del qapp
    scheduler = QtScheduler()
    fired: list[bool] = []
    token = scheduler.schedule(10, lambda: fired.append(True))
    scheduler.cancel(token)
    scheduler.cancel(token)

    QTest.qWait(100)

    assert fired == []
    assert scheduler.pending_count == 0


def test_shutdown_cancels_everything(qapp: object) -> None:
    del qapp
    scheduler = QtScheduler()
    fired: list[int] = []
    for i in range(3):
        scheduler.schedule(10, lambda i=i: fired.append(i))
    scheduler.shutdown()

    QTest.qWait(100)

    assert fired == []
