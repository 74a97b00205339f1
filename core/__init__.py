"""Core twenty-one engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit
from core.errors import DeckExhausted, InvalidDecision, TwentyOneError
from core.hand import BUST_THRESHOLD, Hand

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "DeckExhausted",
    "InvalidDecision",
    "TwentyOneError",
    "BUST_THRESHOLD",
    "Hand",
]
