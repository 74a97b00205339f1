"""Decision policies: how a participant chooses to hit or stay."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto

from core.cards import Card
from core.strategy.rules import RuleSet


class Action(Enum):
    """Possible turn actions."""

    HIT = auto()
    STAY = auto()

    def __str__(self) -> str:
        return self.name.title()


@dataclass(frozen=True)
class ParticipantView:
    """What everyone at the table can see of a participant."""

    name: str
    cards: tuple[Card, ...]
    total: int
    is_busted: bool
    is_staying: bool
    is_dealer: bool = False


@dataclass(frozen=True)
class RoundView:
    """
    Read-only context handed to a decision policy.

    A fresh snapshot is built for every decision.
    """

    me: ParticipantView
    opponents: tuple[ParticipantView, ...]
    rules: RuleSet

    @property
    def total(self) -> int:
        """Return the deciding participant's current total."""
        return self.me.total


class DecisionPolicy(ABC):
    """Chooses the next action for a participant awaiting a decision."""

    @abstractmethod
    def decide(self, view: RoundView) -> Action:
        """Return Action.HIT or Action.STAY."""
        ...


class DealerPolicy(DecisionPolicy):
    """Hit while under the dealer threshold, otherwise stay."""

    def decide(self, view: RoundView) -> Action:
        if view.total < view.rules.dealer_hit_threshold:
            return Action.HIT
        return Action.STAY


class InputSource(ABC):
    """
    Something that asks a human to choose.

    Implementations validate and retry until they have a valid choice; the
    engine trusts whatever they return.
    """

    @abstractmethod
    def request_choice(self, options: tuple[Action, ...]) -> Action:
        """Block until one of ``options`` is chosen and return it."""
        ...


class PlayerPolicy(DecisionPolicy):
    """Defers every decision to an input source."""

    OPTIONS = (Action.HIT, Action.STAY)

    def __init__(self, source: InputSource) -> None:
        self.source = source

    def decide(self, view: RoundView) -> Action:
        return self.source.request_choice(self.OPTIONS)
