"""Persisted best score."""

from __future__ import annotations

import logging
from typing import Any

from matchie.game.interfaces import IKeyValueStore

_LOGGER = logging.getLogger(__name__)

BEST_SCORE_KEY = "memory/best_score"


class InMemoryStore(IKeyValueStore):
    """Dict-backed store; nothing survives the process."""

    __slots__ = ("_data",)

    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class BestScoreStore:
    """Single global best score on top of a key-value store.

    The value is read once on construction.  Storage failures never
    propagate: an unreadable value counts as "no best score" (0) and a
    failed write is discarded while the in-memory value still updates.
    """

    __slots__ = ("_store", "_key", "_best")

    def __init__(self, store: IKeyValueStore, key: str = BEST_SCORE_KEY) -> None:
        self._store = store
        self._key = key
        self._best = self._load()

    @property
    def best(self) -> int:
        return self._best

    def submit(self, score: int) -> bool:
        """Record *score* if it beats the current best. Returns True on a record."""
        if score <= self._best:
            return False
        self._best = score
        try:
            self._store.set(self._key, score)
        except Exception:
            _LOGGER.warning("Could not persist best score %d", score, exc_info=True)
        else:
            _LOGGER.info("New best score: %d", score)
        return True

    def _load(self) -> int:
        try:
            raw = self._store.get(self._key)
        except Exception:
            _LOGGER.warning("Could not read best score", exc_info=True)
            return 0
        if raw is None:
            return 0
        try:
            value = int(raw)
        except (TypeError, ValueError):
            _LOGGER.warning("Ignoring corrupt best score value %r", raw)
            return 0
        return max(0, value)
