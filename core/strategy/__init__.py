"""Table rules and decision policies."""

from core.strategy.rules import RuleSet
from core.strategy.policies import (
    Action,
    DealerPolicy,
    DecisionPolicy,
    InputSource,
    ParticipantView,
    PlayerPolicy,
    RoundView,
)

__all__ = [
    "RuleSet",
    "Action",
    "DealerPolicy",
    "DecisionPolicy",
    "InputSource",
    "ParticipantView",
    "PlayerPolicy",
    "RoundView",
]
