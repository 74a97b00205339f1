"""Errors raised by the twenty-one engine."""


class TwentyOneError(Exception):
    """Base class for engine errors that end the current round."""


class DeckExhausted(TwentyOneError, IndexError):
    """A card was requested from a deck with no cards left."""


class InvalidDecision(TwentyOneError, ValueError):
    """A decision policy returned something other than hit or stay."""

    def __init__(self, participant: str, decision: object) -> None:
        self.participant = participant
        self.decision = decision
        super().__init__(f"{participant} made an invalid decision: {decision!r}")
