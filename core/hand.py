"""Hand evaluation for twenty-one."""

from dataclasses import dataclass, field
from typing import Iterator

from core.cards import Card

BUST_THRESHOLD = 21


@dataclass
class Hand:
    """Cards held by one participant, in draw order."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        """Add a card to the hand."""
        self.cards.append(card)

    def clear(self) -> None:
        """Remove all cards from the hand."""
        self.cards.clear()

    def _reduce(self) -> tuple[int, int]:
        """Return the scored total and how many reductions it took."""
        total = sum(card.face_value for card in self.cards)
        reductions = sorted(
            card.reduction for card in self.cards if card.reduction is not None
        )

        applied = 0
        for reduction in reductions:
            # Soften only while the hand would otherwise bust
            if total > BUST_THRESHOLD:
                total -= reduction
                applied += 1

        return total, applied

    @property
    def total(self) -> int:
        """
        Calculate the hand total.

        Every card starts at its face value (aces at 11). Aces are then
        softened to 1, one at a time, only while the total is over 21.
        The total is recomputed from the cards on every read.
        """
        return self._reduce()[0]

    @property
    def is_soft(self) -> bool:
        """Check if an ace is still counted as 11."""
        aces = sum(1 for card in self.cards if card.is_ace)
        return aces > self._reduce()[1]

    @property
    def is_busted(self) -> bool:
        """Check if the hand has busted (total > 21)."""
        return self.total > BUST_THRESHOLD

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        cards_str = " ".join(str(card) for card in self.cards)
        total_str = f"({self.total})"
        if self.is_soft:
            total_str = f"(soft {self.total})"
        if self.is_busted:
            total_str = "(BUST)"
        return f"{cards_str} {total_str}"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, total={self.total})"
