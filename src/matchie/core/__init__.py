"""Core domain layer — pure memory-matching logic with zero external dependencies.

Quick start::

    import random

    from matchie.core import DEFAULT_SYMBOLS, Difficulty, click, generate, new_round

    board = generate(Difficulty.EASY, DEFAULT_SYMBOLS, random.Random(7))
    state = new_round(board, Difficulty.EASY)
    state = click(state, 0).state
"""

from matchie.core.card import Board, Card, CardView
from matchie.core.deck import DEFAULT_SYMBOLS, RandomSource, generate, shuffle_in_place
from matchie.core.enums import CardFace, Difficulty, NotificationKind, RoundStatus
from matchie.core.errors import ConfigurationError
from matchie.core.rules import (
    Effect,
    MatchFound,
    PairFlipped,
    PairRejected,
    RoundCompleted,
    RoundState,
    Transition,
    click,
    new_round,
    resolve,
    tick,
)
from matchie.core.scoring import final_score, format_time, live_increment

__all__ = [
    # Enums
    "CardFace",
    "Difficulty",
    "NotificationKind",
    "RoundStatus",
    # Domain objects
    "Board",
    "Card",
    "CardView",
    "ConfigurationError",
    "RoundState",
    # Deck
    "DEFAULT_SYMBOLS",
    "RandomSource",
    "generate",
    "shuffle_in_place",
    # Transitions
    "Effect",
    "MatchFound",
    "PairFlipped",
    "PairRejected",
    "RoundCompleted",
    "Transition",
    "click",
    "new_round",
    "resolve",
    "tick",
    # Scoring
    "final_score",
    "format_time",
    "live_increment",
]
