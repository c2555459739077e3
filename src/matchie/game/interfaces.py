"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the high-level RoundController depends on
these ABCs, not on Qt timers, QSettings or concrete widgets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from matchie.core.card import CardView
    from matchie.core.enums import Difficulty, NotificationKind, RoundStatus

CancelToken = int


# ── Timing configuration ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RoundTiming:
    """Delays that model card animations, in milliseconds.

    Args:
        match_delay_ms: Settle delay before a matching pair locks in.
        mismatch_delay_ms: How long a mismatched pair stays face-up.
        tick_interval_ms: Real time per elapsed-time unit.
    """

    match_delay_ms: int = 500
    mismatch_delay_ms: int = 1000
    tick_interval_ms: int = 1000

    def __post_init__(self) -> None:
        if min(self.match_delay_ms, self.mismatch_delay_ms, self.tick_interval_ms) <= 0:
            raise ValueError("Round timing values must be positive")
        if self.match_delay_ms >= self.mismatch_delay_ms:
            raise ValueError("match_delay_ms must be shorter than mismatch_delay_ms")

    def settle_delay(self, is_match: bool) -> int:
        return self.match_delay_ms if is_match else self.mismatch_delay_ms

    def __repr__(self) -> str:
        return (
            f"RoundTiming(match={self.match_delay_ms}ms, "
            f"mismatch={self.mismatch_delay_ms}ms, tick={self.tick_interval_ms}ms)"
        )


# ── Abstract interfaces ─────────────────────────────────────────────────────


class IScheduler(ABC):
    """Deferred callbacks on the caller's (single) thread."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> CancelToken:
        """Run *callback* once after *delay_ms*."""

    @abstractmethod
    def cancel(self, token: CancelToken) -> None:
        """Drop a scheduled callback. Unknown or fired tokens are ignored."""


class IKeyValueStore(ABC):
    """Minimal persistent storage."""

    @abstractmethod
    def get(self, key: str) -> Any | None:
        """Stored value for *key*, or ``None`` when absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None: ...


class INotificationSink(ABC):
    """Fire-and-forget user notifications (toasts, status bar, ...)."""

    @abstractmethod
    def notify(self, title: str, body: str, kind: NotificationKind) -> None: ...


class IRoundController(ABC):
    """Interface for the round orchestrator."""

    @abstractmethod
    def start_round(self, difficulty: Difficulty) -> None:
        """Deal a new board and start the clock."""

    @abstractmethod
    def handle_card_click(self, card_id: int) -> bool:
        """Flip a card. Returns True if the click was accepted."""

    @abstractmethod
    def reset_round(self) -> None:
        """Abandon the current round and cancel its timers."""

    @abstractmethod
    def board_view(self) -> tuple[CardView, ...]:
        """Cards with unrevealed symbols masked."""

    @property
    @abstractmethod
    def status(self) -> RoundStatus: ...

    @property
    @abstractmethod
    def moves(self) -> int: ...

    @property
    @abstractmethod
    def elapsed(self) -> int: ...

    @property
    @abstractmethod
    def score(self) -> int: ...

    @property
    @abstractmethod
    def best_score(self) -> int: ...
