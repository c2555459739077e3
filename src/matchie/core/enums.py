"""Core enumerations for the memory-matching domain."""

from __future__ import annotations

from enum import IntEnum, StrEnum, auto


class Difficulty(StrEnum):
    """Board size and scoring level of a round."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def pairs(self) -> int:
        """Number of symbol pairs on the board."""
        return _PAIRS[self]

    @property
    def board_size(self) -> int:
        return 2 * self.pairs

    @property
    def max_time_budget(self) -> int:
        """Elapsed seconds at which the time penalty saturates."""
        return _MAX_TIME_BUDGET[self]

    @property
    def match_points(self) -> int:
        """Live score awarded per matched pair."""
        return _MATCH_POINTS[self]

    @property
    def difficulty_bonus(self) -> int:
        return _DIFFICULTY_BONUS[self]

    @property
    def columns(self) -> int:
        """Grid width used when laying out the board."""
        return _COLUMNS[self]

    @property
    def label(self) -> str:
        return self.value.capitalize()


_PAIRS: dict[Difficulty, int] = {
    Difficulty.EASY: 6,
    Difficulty.MEDIUM: 10,
    Difficulty.HARD: 12,
}

_MAX_TIME_BUDGET: dict[Difficulty, int] = {
    Difficulty.EASY: 60,
    Difficulty.MEDIUM: 120,
    Difficulty.HARD: 180,
}

_MATCH_POINTS: dict[Difficulty, int] = {
    Difficulty.EASY: 50,
    Difficulty.MEDIUM: 75,
    Difficulty.HARD: 100,
}

_DIFFICULTY_BONUS: dict[Difficulty, int] = {
    Difficulty.EASY: 0,
    Difficulty.MEDIUM: 300,
    Difficulty.HARD: 600,
}

_COLUMNS: dict[Difficulty, int] = {
    Difficulty.EASY: 4,
    Difficulty.MEDIUM: 5,
    Difficulty.HARD: 6,
}


class CardFace(IntEnum):
    """Visibility state of a single card."""

    HIDDEN = auto()
    PENDING = auto()  # face-up, awaiting resolution
    MATCHED = auto()  # terminal


class RoundStatus(IntEnum):
    """Finite-state-machine states for a round."""

    NOT_STARTED = auto()
    IN_PROGRESS = auto()
    OVER = auto()


class NotificationKind(StrEnum):
    """Severity hint passed to the notification sink."""

    INFO = "info"
    SUCCESS = "success"
