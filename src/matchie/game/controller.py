"""RoundController — the central orchestrator of a memory round.

Coordinates: deck generation, RoundClock, the pure transitions in
:mod:`matchie.core.rules`, BestScoreStore and the notification sink.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from matchie.core.card import CardView
from matchie.core.deck import DEFAULT_SYMBOLS, RandomSource, generate
from matchie.core.enums import Difficulty, NotificationKind, RoundStatus
from matchie.core.rules import (
    Effect,
    MatchFound,
    PairFlipped,
    RoundCompleted,
    RoundState,
    Transition,
    click,
    new_round,
    resolve,
    tick,
)
from matchie.core.scoring import format_time
from matchie.game.best_score import BestScoreStore, InMemoryStore
from matchie.game.clock import RoundClock
from matchie.game.interfaces import (
    CancelToken,
    IKeyValueStore,
    INotificationSink,
    IRoundController,
    IScheduler,
    RoundTiming,
)

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

StateCallback = Callable[[RoundState], None]
MatchCallback = Callable[[MatchFound], None]
RoundOverCallback = Callable[[RoundCompleted], None]


@dataclass
class RoundEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_state_changed: list[StateCallback] = field(default_factory=list)
    on_match: list[MatchCallback] = field(default_factory=list)
    on_round_over: list[RoundOverCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class RoundController(IRoundController):
    """Owns the authoritative :class:`RoundState` and every timer of a round.

    Thread-safety: all methods, including scheduler callbacks, must run on
    a single thread (the Qt main thread in the app).

    Args:
        scheduler: Source of settle-delay and clock-tick callbacks.
        store: Persistence for the best score; in-memory when omitted.
        notifier: Receives match / completion messages; optional.
        rng: Randomness for deck generation; a fresh ``random.Random``
            when omitted.
        symbols: Pool the deck draws its pairs from.
        timing: Settle delays and tick interval.
    """

    __slots__ = (
        "_scheduler",
        "_best",
        "_notifier",
        "_rng",
        "_symbols",
        "_timing",
        "_clock",
        "_state",
        "_settle_token",
        "_generation",
        "_is_new_best",
        "events",
    )

    def __init__(
        self,
        *,
        scheduler: IScheduler,
        store: IKeyValueStore | None = None,
        notifier: INotificationSink | None = None,
        rng: RandomSource | None = None,
        symbols: Iterable[str] = DEFAULT_SYMBOLS,
        timing: RoundTiming | None = None,
    ) -> None:
        self._scheduler = scheduler
        self._best = BestScoreStore(store if store is not None else InMemoryStore())
        self._notifier = notifier
        self._rng: RandomSource = rng if rng is not None else random.Random()
        self._symbols = tuple(symbols)
        self._timing = timing or RoundTiming()
        self._clock = RoundClock(scheduler, self._timing.tick_interval_ms, self._on_tick)
        self._state = RoundState()
        self._settle_token: CancelToken | None = None
        self._generation = 0
        self._is_new_best = False
        self.events = RoundEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def status(self) -> RoundStatus:
        return self._state.status

    @property
    def difficulty(self) -> Difficulty | None:
        return self._state.difficulty

    @property
    def moves(self) -> int:
        return self._state.moves

    @property
    def elapsed(self) -> int:
        return self._state.elapsed

    @property
    def score(self) -> int:
        return self._state.score

    @property
    def final_score(self) -> int | None:
        return self._state.final_score

    @property
    def best_score(self) -> int:
        return self._best.best

    @property
    def round_id(self) -> int:
        """Changes whenever a round is started or reset."""
        return self._generation

    @property
    def is_new_best(self) -> bool:
        """Whether the last completed round set a record."""
        return self._is_new_best

    @property
    def timing(self) -> RoundTiming:
        return self._timing

    @property
    def clock(self) -> RoundClock:
        return self._clock

    @property
    def is_resolving(self) -> bool:
        return self._settle_token is not None

    def board_view(self) -> tuple[CardView, ...]:
        return self._state.board_view()

    # ── IRoundController impl ────────────────────────────────────────────

    def start_round(self, difficulty: Difficulty) -> None:
        # Generate first: a ConfigurationError must leave the old round intact.
        cards = generate(difficulty, self._symbols, self._rng)

        self._cancel_timers()
        self._generation += 1
        self._is_new_best = False
        self._state = new_round(cards, difficulty)
        self._clock.start()
        _LOGGER.debug("Round %d started (%s)", self._generation, difficulty)
        self._emit_state()

    def handle_card_click(self, card_id: int) -> bool:
        transition = click(self._state, card_id)
        if transition.state is self._state:
            return False
        _LOGGER.debug("Card %d flipped", card_id)
        self._apply(transition)
        return True

    def reset_round(self) -> None:
        self._cancel_timers()
        self._generation += 1
        self._is_new_best = False
        self._state = RoundState()
        _LOGGER.debug("Round reset")
        self._emit_state()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _apply(self, transition: Transition) -> None:
        self._state = transition.state
        for effect in transition.effects:
            self._handle_effect(effect)
        self._emit_state()

    def _handle_effect(self, effect: Effect) -> None:
        if isinstance(effect, PairFlipped):
            self._schedule_resolution(effect)
        elif isinstance(effect, MatchFound):
            self._notify(
                "Match!",
                f"You found a pair of {effect.symbol}",
                NotificationKind.INFO,
            )
            for cb in self.events.on_match:
                cb(effect)
        elif isinstance(effect, RoundCompleted):
            self._finish_round(effect)

    def _schedule_resolution(self, flipped: PairFlipped) -> None:
        assert self._settle_token is None, "resolution already outstanding"
        generation = self._generation
        delay = self._timing.settle_delay(flipped.is_match)

        def _settle() -> None:
            self._settle_token = None
            if generation != self._generation:
                return  # round was replaced or reset
            _LOGGER.debug(
                "Resolving cards %d and %d (match=%s)",
                flipped.first,
                flipped.second,
                flipped.is_match,
            )
            self._apply(resolve(self._state))

        self._settle_token = self._scheduler.schedule(delay, _settle)

    def _finish_round(self, completed: RoundCompleted) -> None:
        self._clock.stop()
        self._is_new_best = self._best.submit(completed.final_score)
        _LOGGER.info(
            "Round complete: %s, %ds, %d moves, score %d",
            completed.difficulty,
            completed.elapsed,
            completed.moves,
            completed.final_score,
        )
        body = (
            f"You finished in {format_time(completed.elapsed)} "
            f"with {completed.moves} moves! Score: {completed.final_score}"
        )
        if self._is_new_best:
            body += " New best score!"
        self._notify("Game Complete!", body, NotificationKind.SUCCESS)
        for cb in self.events.on_round_over:
            cb(completed)

    def _on_tick(self) -> None:
        new_state = tick(self._state)
        if new_state is self._state:
            self._clock.stop()
            return
        self._state = new_state
        self._emit_state()

    def _cancel_timers(self) -> None:
        self._clock.stop()
        if self._settle_token is not None:
            self._scheduler.cancel(self._settle_token)
            self._settle_token = None

    def _notify(self, title: str, body: str, kind: NotificationKind) -> None:
        if self._notifier is None:
            return
        try:
            self._notifier.notify(title, body, kind)
        except Exception:
            _LOGGER.warning("Notification sink failed: %s", title, exc_info=True)

    def _emit_state(self) -> None:
        for cb in self.events.on_state_changed:
            cb(self._state)
