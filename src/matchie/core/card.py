"""Card value types."""

from __future__ import annotations

from dataclasses import dataclass, replace

from matchie.core.enums import CardFace


@dataclass(frozen=True, slots=True)
class Card:
    """A single card on the board.

    ``index`` is the stable position of the card (0..N-1) and ``symbol``
    never changes after the deck is generated.  Only ``face`` moves.
    """

    index: int
    symbol: str
    face: CardFace = CardFace.HIDDEN

    @property
    def matched(self) -> bool:
        return self.face == CardFace.MATCHED

    @property
    def is_revealed(self) -> bool:
        return self.face != CardFace.HIDDEN

    def with_face(self, face: CardFace) -> Card:
        return replace(self, face=face)

    def view(self) -> CardView:
        """Presentation-safe projection; hidden cards carry no symbol."""
        return CardView(
            index=self.index,
            face=self.face,
            symbol=self.symbol if self.is_revealed else None,
        )

    def __str__(self) -> str:
        return f"Card({self.index}, {self.symbol}, {self.face.name.lower()})"


@dataclass(frozen=True, slots=True)
class CardView:
    """What the presentation layer may know about a card."""

    index: int
    face: CardFace
    symbol: str | None


Board = tuple[Card, ...]
