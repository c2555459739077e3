"""Pure round transitions.

Every operation takes an immutable :class:`RoundState` and returns a new
one together with the effects the caller has to carry out (scheduling a
resolution, notifying, persisting).  Nothing here touches timers, storage
or the UI.

Flip state machine per card::

    HIDDEN -> PENDING -> MATCHED   (terminal)
                      -> HIDDEN    (mismatch)
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, replace
from typing import TypeAlias

from matchie.core.card import Board, CardView
from matchie.core.enums import CardFace, Difficulty, RoundStatus
from matchie.core.scoring import final_score, live_increment

MAX_PENDING = 2


# ── State ────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class RoundState:
    """Authoritative snapshot of a round."""

    status: RoundStatus = RoundStatus.NOT_STARTED
    difficulty: Difficulty | None = None
    cards: Board = ()
    pending: tuple[int, ...] = ()
    moves: int = 0
    elapsed: int = 0
    score: int = 0
    final_score: int | None = None

    @property
    def awaiting_resolution(self) -> bool:
        return len(self.pending) == MAX_PENDING

    @property
    def is_complete(self) -> bool:
        return bool(self.cards) and all(card.matched for card in self.cards)

    @property
    def matched_pairs(self) -> int:
        return sum(1 for card in self.cards if card.matched) // 2

    def board_view(self) -> tuple[CardView, ...]:
        return tuple(card.view() for card in self.cards)


# ── Effects ──────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PairFlipped:
    """Second card of a pair went face-up; a resolution must be scheduled."""

    first: int
    second: int
    is_match: bool


@dataclass(frozen=True, slots=True)
class MatchFound:
    first: int
    second: int
    symbol: str
    points: int


@dataclass(frozen=True, slots=True)
class PairRejected:
    first: int
    second: int


@dataclass(frozen=True, slots=True)
class RoundCompleted:
    difficulty: Difficulty
    elapsed: int
    moves: int
    final_score: int


Effect: TypeAlias = PairFlipped | MatchFound | PairRejected | RoundCompleted


@dataclass(frozen=True, slots=True)
class Transition:
    state: RoundState
    effects: tuple[Effect, ...] = ()


# ── Transitions ──────────────────────────────────────────────────────────────


def new_round(cards: Board, difficulty: Difficulty) -> RoundState:
    """Fresh in-progress state over a generated board."""
    counts = Counter(card.symbol for card in cards)
    assert len(cards) == difficulty.board_size, "board size mismatch"
    assert all(n == 2 for n in counts.values()), "every symbol must appear twice"
    assert all(card.face == CardFace.HIDDEN for card in cards)
    return RoundState(
        status=RoundStatus.IN_PROGRESS,
        difficulty=difficulty,
        cards=cards,
    )


def click(state: RoundState, card_id: int) -> Transition:
    """Flip *card_id* face-up if the guards allow it.

    Rejected clicks return the input state unchanged with no effects.
    Accepting the second card of a pair counts one move and emits
    :class:`PairFlipped`.

    Raises:
        IndexError: *card_id* is not on the board of an in-progress round.
    """
    if state.status != RoundStatus.IN_PROGRESS:
        return Transition(state)
    if not 0 <= card_id < len(state.cards):
        raise IndexError(f"No card with id {card_id}")
    assert len(state.pending) <= MAX_PENDING

    card = state.cards[card_id]
    if card.face != CardFace.HIDDEN or state.awaiting_resolution:
        return Transition(state)

    cards = _with_faces(state.cards, (card_id,), CardFace.PENDING)
    pending = (*state.pending, card_id)

    if len(pending) < MAX_PENDING:
        return Transition(replace(state, cards=cards, pending=pending))

    first, second = pending
    is_match = cards[first].symbol == cards[second].symbol
    new_state = replace(state, cards=cards, pending=pending, moves=state.moves + 1)
    return Transition(new_state, (PairFlipped(first, second, is_match),))


def resolve(state: RoundState) -> Transition:
    """Settle the two pending cards into MATCHED or back to HIDDEN."""
    assert state.status == RoundStatus.IN_PROGRESS, "resolve outside a round"
    assert state.awaiting_resolution, f"resolve with pending={state.pending}"
    assert state.difficulty is not None

    first, second = state.pending
    symbol = state.cards[first].symbol
    if symbol != state.cards[second].symbol:
        cards = _with_faces(state.cards, state.pending, CardFace.HIDDEN)
        return Transition(
            replace(state, cards=cards, pending=()),
            (PairRejected(first, second),),
        )

    points = live_increment(state.difficulty)
    cards = _with_faces(state.cards, state.pending, CardFace.MATCHED)
    new_state = replace(state, cards=cards, pending=(), score=state.score + points)
    effects: list[Effect] = [MatchFound(first, second, symbol, points)]

    if new_state.is_complete:
        final = final_score(new_state.elapsed, new_state.moves, state.difficulty)
        new_state = replace(new_state, status=RoundStatus.OVER, final_score=final)
        effects.append(
            RoundCompleted(
                difficulty=state.difficulty,
                elapsed=new_state.elapsed,
                moves=new_state.moves,
                final_score=final,
            )
        )
    return Transition(new_state, tuple(effects))


def tick(state: RoundState) -> RoundState:
    """Advance the elapsed counter by one unit while the round runs."""
    if state.status != RoundStatus.IN_PROGRESS:
        return state
    return replace(state, elapsed=state.elapsed + 1)


# ── Internal ─────────────────────────────────────────────────────────────────


def _with_faces(cards: Board, indices: tuple[int, ...], face: CardFace) -> Board:
    targets = set(indices)
    return tuple(
        card.with_face(face) if card.index in targets else card for card in cards
    )
