"""Tests for the pure round transitions."""

from dataclasses import replace

import pytest

from matchie.core.card import Card
from matchie.core.enums import CardFace, Difficulty, RoundStatus
from matchie.core.rules import (
    MatchFound,
    PairFlipped,
    PairRejected,
    RoundCompleted,
    RoundState,
    click,
    new_round,
    resolve,
    tick,
)

# Easy board, pairs sit next to each other: A A B B C C ...
_SYMBOLS = "ABCDEF"


def _easy_state() -> RoundState:
    cards = tuple(
        Card(index=i, symbol=_SYMBOLS[i // 2]) for i in range(Difficulty.EASY.board_size)
    )
    return new_round(cards, Difficulty.EASY)


def _flip(state: RoundState, *ids: int) -> RoundState:
    for card_id in ids:
        state = click(state, card_id).state
    return state


class TestNewRound:
    def test_in_progress_with_zero_counters(self) -> None:
        state = _easy_state()
        assert state.status == RoundStatus.IN_PROGRESS
        assert (state.moves, state.elapsed, state.score) == (0, 0, 0)
        assert state.pending == ()
        assert state.final_score is None

    def test_rejects_wrong_board_size(self) -> None:
        cards = (Card(0, "A"), Card(1, "A"))
        with pytest.raises(AssertionError):
            new_round(cards, Difficulty.EASY)


class TestClick:
    def test_first_card_becomes_pending(self) -> None:
        result = click(_easy_state(), 0)
        assert result.state.cards[0].face == CardFace.PENDING
        assert result.state.pending == (0,)
        assert result.state.moves == 0
        assert result.effects == ()

    def test_second_card_counts_move_and_flags_match(self) -> None:
        state = _flip(_easy_state(), 0)
        result = click(state, 1)
        assert result.state.pending == (0, 1)
        assert result.state.moves == 1
        assert result.effects == (PairFlipped(0, 1, True),)

    def test_second_card_flags_mismatch(self) -> None:
        state = _flip(_easy_state(), 0)
        result = click(state, 2)
        assert result.state.moves == 1
        assert result.effects == (PairFlipped(0, 2, False),)

    def test_click_while_two_pending_is_noop(self) -> None:
        state = _flip(_easy_state(), 0, 2)
        result = click(state, 4)
        assert result.state is state
        assert result.effects == ()

    def test_click_on_pending_card_is_noop(self) -> None:
        state = _flip(_easy_state(), 0)
        assert click(state, 0).state is state

    def test_click_on_matched_card_is_noop(self) -> None:
        state = resolve(_flip(_easy_state(), 0, 1)).state
        assert click(state, 0).state is state

    def test_click_when_not_started_is_noop(self) -> None:
        state = RoundState()
        assert click(state, 0).state is state

    def test_click_when_over_is_noop(self) -> None:
        state = replace(_easy_state(), status=RoundStatus.OVER)
        assert click(state, 0).state is state

    def test_unknown_card_raises(self) -> None:
        with pytest.raises(IndexError):
            click(_easy_state(), 12)
        with pytest.raises(IndexError):
            click(_easy_state(), -1)

    def test_input_state_is_not_mutated(self) -> None:
        state = _easy_state()
        click(state, 0)
        assert state.cards[0].face == CardFace.HIDDEN
        assert state.pending == ()


class TestResolve:
    def test_match(self) -> None:
        result = resolve(_flip(_easy_state(), 0, 1))
        state = result.state
        assert state.cards[0].matched and state.cards[1].matched
        assert state.pending == ()
        assert state.score == 50
        assert state.moves == 1
        assert result.effects == (MatchFound(0, 1, "A", 50),)

    def test_mismatch(self) -> None:
        result = resolve(_flip(_easy_state(), 0, 2))
        state = result.state
        assert state.cards[0].face == CardFace.HIDDEN
        assert state.cards[2].face == CardFace.HIDDEN
        assert state.pending == ()
        assert state.score == 0
        assert state.moves == 1
        assert result.effects == (PairRejected(0, 2),)

    def test_requires_two_pending(self) -> None:
        with pytest.raises(AssertionError):
            resolve(_flip(_easy_state(), 0))

    def test_completion(self) -> None:
        state = _easy_state()
        for pair in range(5):
            state = resolve(_flip(state, 2 * pair, 2 * pair + 1)).state
        assert state.status == RoundStatus.IN_PROGRESS

        state = replace(state, elapsed=30)
        result = resolve(_flip(state, 10, 11))
        final = result.state
        assert final.status == RoundStatus.OVER
        assert final.is_complete
        assert final.score == 300
        # 1000 - 30/60*500 - 6/12*500
        assert final.final_score == 500
        assert result.effects[-1] == RoundCompleted(Difficulty.EASY, 30, 6, 500)

    def test_not_over_until_all_matched(self) -> None:
        state = _easy_state()
        for pair in range(5):
            state = resolve(_flip(state, 2 * pair, 2 * pair + 1)).state
            assert state.status == RoundStatus.IN_PROGRESS
            assert not state.is_complete


class TestTick:
    def test_increments_in_progress(self) -> None:
        assert tick(_easy_state()).elapsed == 1

    def test_frozen_when_over(self) -> None:
        state = replace(_easy_state(), status=RoundStatus.OVER, elapsed=7)
        assert tick(state) is state

    def test_noop_when_not_started(self) -> None:
        state = RoundState()
        assert tick(state) is state


class TestBoardView:
    def test_masks_hidden_symbols(self) -> None:
        state = _flip(_easy_state(), 0)
        views = state.board_view()
        assert views[0].symbol == "A"
        assert all(view.symbol is None for view in views[1:])

    def test_reveals_matched(self) -> None:
        state = resolve(_flip(_easy_state(), 2, 3)).state
        views = state.board_view()
        assert views[2].symbol == views[3].symbol == "B"
        assert views[2].face == CardFace.MATCHED
