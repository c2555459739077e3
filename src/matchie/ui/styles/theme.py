"""Visual theme constants and QSS styles for Matchie."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from matchie.core.enums import CardFace


@dataclass(frozen=True)
class CardTheme:
    """Colour scheme for memory cards."""

    back: QColor  # face-down card
    front: QColor  # face-up, pending
    matched: QColor
    back_text: QColor
    front_text: QColor

    @classmethod
    def default(cls) -> CardTheme:
        return cls(
            back=QColor(91, 75, 196),  # violet
            front=QColor(250, 250, 250),
            matched=QColor(198, 239, 206),  # pale green
            back_text=QColor(255, 255, 255),
            front_text=QColor(30, 30, 30),
        )

    def style_for(self, face: CardFace) -> str:
        """QSS for a card button in *face* state."""
        if face == CardFace.HIDDEN:
            bg, fg = self.back, self.back_text
        elif face == CardFace.PENDING:
            bg, fg = self.front, self.front_text
        else:
            bg, fg = self.matched, self.front_text
        return (
            f"background-color: {bg.name()}; color: {fg.name()}; "
            "border-radius: 8px; font-size: 28px;"
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QComboBox {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 4px 8px;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}
QPushButton:disabled {
    color: #666;
    background: #2b2b2b;
}

QStatusBar {
    background: #1e1e1e;
    color: #d4d4d4;
}
"""
