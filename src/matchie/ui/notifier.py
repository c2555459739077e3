"""Status-bar notification sink."""

from __future__ import annotations

from collections.abc import Callable

from matchie.core.enums import NotificationKind
from matchie.game.interfaces import INotificationSink

_DURATION_MS: dict[NotificationKind, int] = {
    NotificationKind.INFO: 1500,
    NotificationKind.SUCCESS: 5000,
}


class StatusBarNotifier(INotificationSink):
    """Forwards notifications to ``show_message(text, timeout_ms)``.

    ``QStatusBar.showMessage`` has exactly that signature.
    """

    __slots__ = ("_show_message",)

    def __init__(self, show_message: Callable[[str, int], None]) -> None:
        self._show_message = show_message

    def notify(self, title: str, body: str, kind: NotificationKind) -> None:
        text = f"{title} {body}" if body else title
        self._show_message(text, _DURATION_MS.get(kind, 3000))
