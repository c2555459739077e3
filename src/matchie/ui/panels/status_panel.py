"""StatusPanel — moves / time / score / best readouts."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QLabel, QVBoxLayout, QWidget

from matchie.core.rules import RoundState
from matchie.core.scoring import format_time


class _Readout(QWidget):
    """Caption over a bold value."""

    def __init__(self, caption: str, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(0)

        self._caption = QLabel(caption.upper())
        self._caption.setFont(QFont("Adwaita Sans", 8))
        self._caption.setStyleSheet("color: #aaa;")
        self._value = QLabel("0")
        self._value.setFont(QFont("Adwaita Sans", 16, QFont.Weight.Bold))
        for label in (self._caption, self._value):
            label.setAlignment(Qt.AlignmentFlag.AlignCenter)
            layout.addWidget(label)

    def text(self) -> str:
        return self._value.text()

    def set_text(self, text: str) -> None:
        self._value.setText(text)


class StatusPanel(QWidget):
    """Live round counters."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.moves = _Readout("Moves")
        self.time = _Readout("Time")
        self.score = _Readout("Score")
        self.best = _Readout("Best")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(24)
        for readout in (self.moves, self.time, self.score, self.best):
            layout.addWidget(readout)

    def update_state(self, state: RoundState, best_score: int) -> None:
        self.moves.set_text(str(state.moves))
        self.time.set_text(format_time(state.elapsed))
        score = state.final_score if state.final_score is not None else state.score
        self.score.set_text(str(score))
        self.best.set_text(str(best_score))
