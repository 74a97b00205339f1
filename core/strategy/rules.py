"""Twenty-one table rules."""

from dataclasses import dataclass

from core.hand import BUST_THRESHOLD


@dataclass(frozen=True)
class RuleSet:
    """
    Fixed table rules.

    There is one rule set; only the dealer threshold and opening sizes
    may differ, and only within the bounds checked below.
    """

    # Totals above this bust
    bust_threshold: int = BUST_THRESHOLD

    # Dealer hits while under this total
    dealer_hit_threshold: int = 17

    # Opening hand sizes
    dealer_opening_cards: int = 1
    player_opening_cards: int = 2

    def __post_init__(self) -> None:
        """Validate rule combinations."""
        if self.bust_threshold != BUST_THRESHOLD:
            raise ValueError(f"bust_threshold is fixed at {BUST_THRESHOLD}")
        if not 0 < self.dealer_hit_threshold <= self.bust_threshold:
            raise ValueError("dealer_hit_threshold must be between 1 and bust_threshold")
        if self.dealer_opening_cards < 1 or self.player_opening_cards < 1:
            raise ValueError("opening hands must have at least 1 card")

    @classmethod
    def standard(cls) -> "RuleSet":
        """The house rules: bust over 21, dealer stays on 17."""
        return cls()
