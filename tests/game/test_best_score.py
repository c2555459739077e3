"""Tests for BestScoreStore."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from matchie.game.best_score import BEST_SCORE_KEY, BestScoreStore, InMemoryStore
from matchie.game.interfaces import IKeyValueStore


class _BrokenStore(IKeyValueStore):
    """Every access fails."""

    def get(self, key: str) -> Any | None:
        raise OSError("disk gone")

    def set(self, key: str, value: Any) -> None:
        raise OSError("disk gone")


class _WriteOnlyFails(InMemoryStore):
    def set(self, key: str, value: Any) -> None:
        raise OSError("read-only")


class TestLoad:
    def test_absent_is_zero(self) -> None:
        assert BestScoreStore(InMemoryStore()).best == 0

    def test_reads_existing(self) -> None:
        store = InMemoryStore({BEST_SCORE_KEY: 740})
        assert BestScoreStore(store).best == 740

    def test_reads_string_values(self) -> None:
        store = InMemoryStore({BEST_SCORE_KEY: "812"})
        assert BestScoreStore(store).best == 812

    def test_corrupt_value_is_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        store = InMemoryStore({BEST_SCORE_KEY: "lots"})
        with caplog.at_level(logging.WARNING):
            assert BestScoreStore(store).best == 0
        assert "corrupt" in caplog.text

    def test_read_failure_is_zero(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert BestScoreStore(_BrokenStore()).best == 0
        assert "Could not read" in caplog.text


class TestSubmit:
    def test_new_record_is_persisted(self) -> None:
        store = InMemoryStore()
        best = BestScoreStore(store)
        assert best.submit(600)
        assert best.best == 600
        assert store.get(BEST_SCORE_KEY) == 600

    def test_lower_or_equal_score_ignored(self) -> None:
        store = InMemoryStore({BEST_SCORE_KEY: 600})
        best = BestScoreStore(store)
        assert not best.submit(600)
        assert not best.submit(100)
        assert store.get(BEST_SCORE_KEY) == 600

    def test_negative_score_never_a_record(self) -> None:
        best = BestScoreStore(InMemoryStore())
        assert not best.submit(-40)
        assert best.best == 0

    def test_write_failure_is_swallowed(self, caplog: pytest.LogCaptureFixture) -> None:
        best = BestScoreStore(_WriteOnlyFails())
        with caplog.at_level(logging.WARNING):
            assert best.submit(300)
        assert best.best == 300
        assert "Could not persist" in caplog.text

    def test_shared_across_instances(self) -> None:
        store = InMemoryStore()
        BestScoreStore(store).submit(420)
        assert BestScoreStore(store).best == 420

    def test_custom_key(self) -> None:
        store = InMemoryStore()
        BestScoreStore(store, key="other").submit(5)
        assert store.get("other") == 5
        assert store.get(BEST_SCORE_KEY) is None
