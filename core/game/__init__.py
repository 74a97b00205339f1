"""Turn and round engine."""

from core.game.events import GameEvent, EventEmitter, EventType
from core.game.state import RoundState, TurnState
from core.game.participant import Participant, Role
from core.game.round import Outcome, Round, pick_winner

__all__ = [
    "GameEvent",
    "EventEmitter",
    "EventType",
    "RoundState",
    "TurnState",
    "Participant",
    "Role",
    "Outcome",
    "Round",
    "pick_winner",
]
