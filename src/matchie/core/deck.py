"""Deck generation: shuffled boards of symbol pairs."""

from __future__ import annotations

from collections.abc import Iterable, MutableSequence
from typing import Protocol, TypeVar

from matchie.core.card import Board, Card
from matchie.core.enums import Difficulty
from matchie.core.errors import ConfigurationError

T = TypeVar("T")

DEFAULT_SYMBOLS: tuple[str, ...] = (
    "🐶", "🐱", "🐭", "🐹", "🐰", "🦊", "🐻", "🐼",
    "🐨", "🐯", "🦁", "🐮", "🐷", "🐸", "🐵", "🐔",
    "🐧", "🦆", "🦉", "🦇", "🐺", "🐗", "🐴", "🦄",
)  # fmt: skip


class RandomSource(Protocol):
    """Anything with ``random() -> float in [0, 1)``; ``random.Random`` fits."""

    def random(self) -> float: ...


def _randbelow(rng: RandomSource, n: int) -> int:
    # Guard against sources that return exactly 1.0 through rounding.
    return min(int(rng.random() * n), n - 1)


def shuffle_in_place(items: MutableSequence[T], rng: RandomSource) -> None:
    """Fisher-Yates shuffle driven by *rng*."""
    for i in range(len(items) - 1, 0, -1):
        j = _randbelow(rng, i + 1)
        items[i], items[j] = items[j], items[i]


def choose_symbols(pool: Iterable[str], count: int, rng: RandomSource) -> list[str]:
    """Pick *count* distinct symbols from *pool* uniformly at random.

    Duplicates in *pool* are collapsed first (order preserved).

    Raises:
        ConfigurationError: The pool holds fewer than *count* distinct symbols.
    """
    distinct = list(dict.fromkeys(pool))
    if len(distinct) < count:
        raise ConfigurationError(
            f"Symbol pool has {len(distinct)} distinct symbols, need {count}"
        )
    # Partial Fisher-Yates: the first *count* slots end up a uniform sample.
    for i in range(count):
        j = i + _randbelow(rng, len(distinct) - i)
        distinct[i], distinct[j] = distinct[j], distinct[i]
    return distinct[:count]


def generate(
    difficulty: Difficulty,
    symbol_pool: Iterable[str],
    rng: RandomSource,
) -> Board:
    """Build a shuffled board of ``difficulty.pairs`` pairs.

    Deterministic for a deterministic *rng*.
    """
    chosen = choose_symbols(symbol_pool, difficulty.pairs, rng)
    deck = chosen + chosen
    shuffle_in_place(deck, rng)
    return tuple(Card(index=i, symbol=symbol) for i, symbol in enumerate(deck))
