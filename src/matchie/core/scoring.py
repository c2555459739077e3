"""Score arithmetic for live and final round scores."""

from __future__ import annotations

import math

from matchie.core.enums import Difficulty

BASE_SCORE = 1000
MAX_PENALTY = 500


def _round_half_up(value: float) -> int:
    # Built-in round() uses banker's rounding; scores round .5 upwards.
    return math.floor(value + 0.5)


def live_increment(difficulty: Difficulty) -> int:
    """Points added to the live score for one matched pair."""
    return difficulty.match_points


def time_penalty(elapsed: int, difficulty: Difficulty) -> float:
    return min(elapsed / difficulty.max_time_budget, 1.0) * MAX_PENALTY


def moves_penalty(moves: int, difficulty: Difficulty) -> float:
    return min(moves / difficulty.board_size, 1.0) * MAX_PENALTY


def final_score(elapsed: int, moves: int, difficulty: Difficulty) -> int:
    """Time/efficiency score computed once when a round completes.

    Each penalty saturates at ``MAX_PENALTY``.  The result is not floored,
    so it can drop below zero.

    >>> final_score(45, 14, Difficulty.EASY)
    125
    """
    if elapsed < 0 or moves < 0:
        raise ValueError("elapsed and moves must be non-negative")
    raw = (
        BASE_SCORE
        - time_penalty(elapsed, difficulty)
        - moves_penalty(moves, difficulty)
        + difficulty.difficulty_bonus
    )
    return _round_half_up(raw)


def format_time(seconds: int) -> str:
    """Render elapsed seconds as ``M:SS``."""
    s = max(0, int(seconds))
    return f"{s // 60}:{s % 60:02d}"
