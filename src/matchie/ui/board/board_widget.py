"""BoardWidget — clickable grid of memory cards."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QCursor
from PyQt6.QtWidgets import QGridLayout, QPushButton, QSizePolicy, QWidget

from matchie.core.card import CardView
from matchie.core.enums import CardFace
from matchie.ui.styles.theme import CardTheme

HIDDEN_GLYPH = "?"


class CardButton(QPushButton):
    """A single card. Shows ``?`` until revealed."""

    def __init__(
        self, index: int, theme: CardTheme, parent: QWidget | None = None
    ) -> None:
        super().__init__(parent)
        self.index = index
        self._theme = theme
        self._face = CardFace.HIDDEN
        self.setMinimumSize(72, 72)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.set_view(CardView(index=index, face=CardFace.HIDDEN, symbol=None))

    @property
    def face(self) -> CardFace:
        return self._face

    def set_view(self, view: CardView) -> None:
        self._face = view.face
        if view.face == CardFace.HIDDEN or view.symbol is None:
            self.setText(HIDDEN_GLYPH)
        else:
            self.setText(view.symbol)
        self.setEnabled(view.face != CardFace.MATCHED)
        self.setStyleSheet(self._theme.style_for(view.face))


class BoardWidget(QWidget):
    """Lays cards out in a grid and reports clicks by card index."""

    card_clicked = pyqtSignal(int)

    def __init__(
        self, parent: QWidget | None = None, theme: CardTheme | None = None
    ) -> None:
        super().__init__(parent)
        self._theme = theme or CardTheme.default()
        self._buttons: list[CardButton] = []
        self._layout = QGridLayout(self)
        self._layout.setContentsMargins(8, 8, 8, 8)
        self._layout.setSpacing(8)

    @property
    def buttons(self) -> list[CardButton]:
        return list(self._buttons)

    def set_board(self, views: tuple[CardView, ...], columns: int) -> None:
        """Rebuild the grid for a new board."""
        self.clear()
        for view in views:
            button = CardButton(view.index, self._theme, self)
            button.set_view(view)
            button.clicked.connect(
                lambda _checked=False, i=view.index: self.card_clicked.emit(i)
            )
            row, col = divmod(view.index, max(1, columns))
            self._layout.addWidget(button, row, col)
            self._buttons.append(button)

    def update_cards(self, views: tuple[CardView, ...]) -> None:
        """Refresh faces in place; the board layout must not have changed."""
        if len(views) != len(self._buttons):
            return
        for button, view in zip(self._buttons, views):
            button.set_view(view)

    def clear(self) -> None:
        for button in self._buttons:
            self._layout.removeWidget(button)
            button.deleteLater()
        self._buttons = []
