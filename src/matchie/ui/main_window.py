"""MainWindow — top-level window assembling the memory game UI."""

from __future__ import annotations

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QComboBox,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from matchie.core.enums import Difficulty, RoundStatus
from matchie.core.rules import RoundCompleted, RoundState
from matchie.core.scoring import format_time
from matchie.game.controller import RoundController
from matchie.game.interfaces import IKeyValueStore
from matchie.ui.board.board_widget import BoardWidget
from matchie.ui.notifier import StatusBarNotifier
from matchie.ui.panels.status_panel import StatusPanel
from matchie.ui.qt_scheduler import QtScheduler
from matchie.ui.settings_store import QSettingsStore


class MainWindow(QMainWindow):
    """Main application window for Matchie."""

    def __init__(self, store: IKeyValueStore | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Memory Matching Game")
        self.setMinimumSize(560, 520)

        self._scheduler = QtScheduler(self)
        self._status_bar = QStatusBar(self)
        self.setStatusBar(self._status_bar)
        self._controller = RoundController(
            scheduler=self._scheduler,
            store=store if store is not None else QSettingsStore(),
            notifier=StatusBarNotifier(self._status_bar.showMessage),
        )
        self._shown_round_id: int | None = None

        self._setup_ui()
        self._connect_signals()
        self._sync(self._controller.state)

    @property
    def controller(self) -> RoundController:
        return self._controller

    @property
    def board(self) -> BoardWidget:
        return self._board

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget(self)
        root = QVBoxLayout(central)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(10)

        controls = QHBoxLayout()
        self._combo_difficulty = QComboBox()
        for difficulty in Difficulty:
            self._combo_difficulty.addItem(
                f"{difficulty.label} ({difficulty.board_size} cards)", difficulty
            )
        controls.addWidget(self._combo_difficulty)

        self._btn_start = QPushButton("Start Game")
        self._btn_reset = QPushButton("Reset")
        controls.addWidget(self._btn_start)
        controls.addWidget(self._btn_reset)
        controls.addStretch(1)
        root.addLayout(controls)

        self._status_panel = StatusPanel()
        root.addWidget(self._status_panel)

        self._board = BoardWidget()
        root.addWidget(self._board, 1)

        self._summary = QLabel()
        self._summary.setWordWrap(True)
        root.addWidget(self._summary)

        self.setCentralWidget(central)

    def _connect_signals(self) -> None:
        self._btn_start.clicked.connect(self._on_start)
        self._btn_reset.clicked.connect(self._on_reset)
        self._board.card_clicked.connect(self._controller.handle_card_click)
        self._controller.events.on_state_changed.append(self._sync)
        self._controller.events.on_round_over.append(self._on_round_over)

    # ── Slots ────────────────────────────────────────────────────────────

    def selected_difficulty(self) -> Difficulty:
        data = self._combo_difficulty.currentData()
        return Difficulty(data) if data else Difficulty.EASY

    def _on_start(self) -> None:
        self._controller.start_round(self.selected_difficulty())

    def _on_reset(self) -> None:
        play_again = self._controller.status == RoundStatus.OVER
        self._controller.reset_round()
        if play_again:
            self._controller.start_round(self.selected_difficulty())

    def _on_round_over(self, completed: RoundCompleted) -> None:
        lines = [
            "Congratulations!",
            f"You completed the game in {format_time(completed.elapsed)} "
            f"with {completed.moves} moves.",
            f"Score: {completed.final_score}",
        ]
        if self._controller.is_new_best:
            lines.append("New best score!")
        self._summary.setText("\n".join(lines))

    def _sync(self, state: RoundState) -> None:
        views = state.board_view()
        round_id = self._controller.round_id
        if round_id != self._shown_round_id:
            columns = state.difficulty.columns if state.difficulty else 1
            self._board.set_board(views, columns)
            self._shown_round_id = round_id
        else:
            self._board.update_cards(views)

        self._status_panel.update_state(state, self._controller.best_score)
        in_progress = state.status == RoundStatus.IN_PROGRESS
        self._combo_difficulty.setEnabled(state.status == RoundStatus.NOT_STARTED)
        self._btn_start.setEnabled(state.status == RoundStatus.NOT_STARTED)
        self._btn_reset.setEnabled(state.status != RoundStatus.NOT_STARTED)
        self._btn_reset.setText("Reset" if in_progress else "Play Again")
        if state.status != RoundStatus.OVER:
            self._summary.clear()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.reset_round()
        self._scheduler.shutdown()
        super().closeEvent(event)
