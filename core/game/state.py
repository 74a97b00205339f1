"""Turn and round state enumerations."""

from enum import Enum, auto


class TurnState(Enum):
    """
    Participant turn states.

    Flow: IDLE → AWAITING_DECISION → (hit)* → BUSTED | STAYING
    """

    # Before the participant's turn (or after a reset)
    IDLE = auto()

    # Waiting on the decision policy
    AWAITING_DECISION = auto()

    # Terminal: total went over 21
    BUSTED = auto()

    # Terminal: chose to stay
    STAYING = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

    @property
    def is_terminal(self) -> bool:
        """Check if the turn is over."""
        return self in (TurnState.BUSTED, TurnState.STAYING)


class RoundState(Enum):
    """
    Round controller states.

    Flow: DEALING → PLAYING → RESOLVING → COMPLETE
    """

    # Deck built, nobody holds cards yet
    DEALING = auto()

    # Participants take their turns
    PLAYING = auto()

    # No turns left, winner not yet picked
    RESOLVING = auto()

    # Winner (or tie) decided
    COMPLETE = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()

