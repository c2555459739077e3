"""Game management layer — controller, clock, scheduler, best score.

Quick start::

    from matchie.core import Difficulty
    from matchie.game import ManualScheduler, RoundController

    scheduler = ManualScheduler()
    ctrl = RoundController(scheduler=scheduler)
    ctrl.start_round(Difficulty.EASY)
    ctrl.handle_card_click(0)
    ctrl.handle_card_click(1)
    scheduler.advance(1000)
"""

from matchie.game.best_score import BEST_SCORE_KEY, BestScoreStore, InMemoryStore
from matchie.game.clock import RoundClock
from matchie.game.controller import RoundController, RoundEvents
from matchie.game.interfaces import (
    CancelToken,
    IKeyValueStore,
    INotificationSink,
    IRoundController,
    IScheduler,
    RoundTiming,
)
from matchie.game.scheduler import ManualScheduler

__all__ = [
    # Interfaces
    "CancelToken",
    "IKeyValueStore",
    "INotificationSink",
    "IRoundController",
    "IScheduler",
    "RoundTiming",
    # Concrete
    "BEST_SCORE_KEY",
    "BestScoreStore",
    "InMemoryStore",
    "ManualScheduler",
    "RoundClock",
    "RoundController",
    "RoundEvents",
]
