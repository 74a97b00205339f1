"""Participants and their turn state machine."""

from dataclasses import dataclass
from typing import Callable, Literal

from transitions import Machine

from core.cards import Card, Deck
from core.errors import InvalidDecision
from core.game.events import EventEmitter, EventType
from core.game.state import TurnState
from core.hand import Hand
from core.strategy.policies import (
    Action,
    DealerPolicy,
    DecisionPolicy,
    InputSource,
    ParticipantView,
    PlayerPolicy,
    RoundView,
)
from core.strategy.rules import RuleSet


@dataclass(frozen=True)
class Role:
    """
    What makes a dealer a dealer and a player a player.

    Lower priorities go first: players move before the dealer, and the
    dealer is displayed above the players.
    """

    kind: Literal["dealer", "player"]
    opening_draw_count: int
    move_priority: int
    display_priority: int

    @classmethod
    def dealer(cls, rules: RuleSet | None = None) -> "Role":
        rules = rules or RuleSet()
        return cls("dealer", rules.dealer_opening_cards, move_priority=1, display_priority=0)

    @classmethod
    def player(cls, rules: RuleSet | None = None) -> "Role":
        rules = rules or RuleSet()
        return cls("player", rules.player_opening_cards, move_priority=0, display_priority=1)

    @property
    def is_dealer(self) -> bool:
        return self.kind == "dealer"


class Participant:
    """
    One seat at the table: a dealer or a player.

    The role and the decision policy are injected; everything else
    (hand, turn state, bust detection) is shared.
    """

    STATES = [s.name.lower() for s in TurnState]

    TRANSITIONS = [
        {"trigger": "begin_turn", "source": "idle", "dest": "awaiting_decision"},
        {"trigger": "keep_deciding", "source": "awaiting_decision", "dest": "awaiting_decision"},
        {"trigger": "go_bust", "source": "awaiting_decision", "dest": "busted"},
        {"trigger": "stay", "source": "awaiting_decision", "dest": "staying"},
        {"trigger": "clear_turn", "source": "*", "dest": "idle"},
    ]

    def __init__(self, name: str, role: Role, policy: DecisionPolicy) -> None:
        self.name = name
        self.role = role
        self.policy = policy
        self.hand = Hand()

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="idle",
            auto_transitions=False,
            model_attribute="_turn_state",
        )

    @classmethod
    def dealer(cls, name: str = "Dealer", rules: RuleSet | None = None) -> "Participant":
        """Create a dealer playing the house threshold rule."""
        return cls(name, Role.dealer(rules), DealerPolicy())

    @classmethod
    def player(
        cls,
        source: InputSource,
        name: str = "Player",
        rules: RuleSet | None = None,
    ) -> "Participant":
        """Create a player whose choices come from ``source``."""
        return cls(name, Role.player(rules), PlayerPolicy(source))

    @property
    def turn_state(self) -> TurnState:
        """Get current turn state as enum."""
        return TurnState[self._turn_state.upper()]  # type: ignore

    @property
    def staying(self) -> bool:
        """Check if the participant ended its turn voluntarily."""
        return self.turn_state == TurnState.STAYING

    @property
    def total(self) -> int:
        return self.hand.total

    @property
    def is_busted(self) -> bool:
        return self.hand.is_busted

    @property
    def opening_draw_count(self) -> int:
        return self.role.opening_draw_count

    @property
    def move_priority(self) -> int:
        return self.role.move_priority

    @property
    def display_priority(self) -> int:
        return self.role.display_priority

    def view(self) -> ParticipantView:
        """Snapshot of what the table can see."""
        return ParticipantView(
            name=self.name,
            cards=tuple(self.hand.cards),
            total=self.hand.total,
            is_busted=self.hand.is_busted,
            is_staying=self.staying,
            is_dealer=self.role.is_dealer,
        )

    def take(self, card: Card) -> None:
        """Put a dealt card into the hand."""
        self.hand.add_card(card)

    def reset(self) -> None:
        """
        Discard the hand and clear the turn, ready for a new round.

        Works from any state, including a turn cut short by DeckExhausted
        or InvalidDecision.
        """
        self.hand = Hand()
        if self.turn_state != TurnState.IDLE:
            self.clear_turn()

    def decide(self, view: RoundView) -> Action:
        """Ask the policy for the next action."""
        action = self.policy.decide(view)
        if action not in (Action.HIT, Action.STAY):
            raise InvalidDecision(self.name, action)
        return action

    def play_turn(
        self,
        deck: Deck,
        view: Callable[[], RoundView],
        on_bust: Callable[["Participant"], None],
        events: EventEmitter | None = None,
    ) -> TurnState:
        """
        Run this participant's turn to completion.

        Args:
            deck: The round's deck; the only source of cards for hits
            view: Builds a fresh read-only snapshot for each decision
            on_bust: Called once, synchronously, if the hand busts
            events: Where to report hits, stays and busts

        Returns:
            The terminal state reached (BUSTED or STAYING)

        Every hit removes a card from a finite deck, so the loop ends in a
        terminal state or with DeckExhausted.
        """
        events = events or EventEmitter()
        self.begin_turn()
        events.emit_new(EventType.TURN_STARTED, participant=self.view())

        if self.hand.is_busted:
            self._bust(on_bust, events)

        while self.turn_state == TurnState.AWAITING_DECISION:
            action = self.decide(view())

            if action == Action.STAY:
                self.stay()
                events.emit_new(EventType.PARTICIPANT_STAYS, participant=self.view())
                continue

            card = deck.deal()
            self.take(card)
            events.emit_new(
                EventType.PARTICIPANT_HIT,
                card=card,
                participant=self.view(),
            )

            if self.hand.is_busted:
                self._bust(on_bust, events)
            else:
                self.keep_deciding()

        return self.turn_state

    def _bust(
        self,
        on_bust: Callable[["Participant"], None],
        events: EventEmitter,
    ) -> None:
        self.go_bust()
        events.emit_new(EventType.PARTICIPANT_BUSTS, participant=self.view())
        on_bust(self)

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"Participant({self.name!r}, {self.role.kind}, {self.turn_state.name})"
