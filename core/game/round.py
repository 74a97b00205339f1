"""Round controller: deal, sequence turns, pick the winner."""

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, Iterable, Sequence

from transitions import Machine, MachineError

from core.cards import Deck
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.participant import Participant
from core.game.state import RoundState
from core.strategy.policies import RoundView
from core.strategy.rules import RuleSet

logger = logging.getLogger(__name__)


def pick_winner(contenders: Sequence[Participant]) -> Participant | None:
    """
    Pick the winner among participants still in contention.

    A lone contender wins without any comparison. Otherwise the unique
    holder of the highest total wins; a tie at the top, or nobody left,
    means there is no winner.
    """
    if not contenders:
        return None
    if len(contenders) == 1:
        return contenders[0]

    best = max(p.total for p in contenders)
    leaders = [p for p in contenders if p.total == best]
    if len(leaders) > 1:
        return None
    return leaders[0]


@dataclass(frozen=True)
class Outcome:
    """How a round ended."""

    winner: Participant | None
    standings: tuple[tuple[str, int, bool], ...]  # (name, total, busted) in seat order

    @property
    def is_tie(self) -> bool:
        return self.winner is None

    def __str__(self) -> str:
        if self.winner is None:
            return "It's a tie!"
        return f"{self.winner.name} wins!"


class Round:
    """
    One game of twenty-one.

    The round owns the deck for its whole life and is the only thing that
    hands it out, one turn at a time.
    """

    STATES = [s.name.lower() for s in RoundState]

    TRANSITIONS = [
        {"trigger": "start_turns", "source": "dealing", "dest": "playing"},
        {"trigger": "finish_turns", "source": "playing", "dest": "resolving"},
        {"trigger": "finish", "source": "resolving", "dest": "complete"},
    ]

    def __init__(
        self,
        participants: Iterable[Participant],
        deck: Deck | None = None,
        rules: RuleSet | None = None,
        rng: Random | None = None,
        events: EventEmitter | None = None,
    ) -> None:
        """
        Set up a round.

        Args:
            participants: Seats in dealing order
            deck: Deck to play from (a fresh 52-card deck if not provided)
            rules: Table rules (uses defaults if not provided)
            rng: Random number generator for a fresh deck's shuffle
            events: Emitter to report on (a private one if not provided)
        """
        self.participants: list[Participant] = list(participants)
        if not self.participants:
            raise ValueError("A round needs at least one participant")
        if len({id(p) for p in self.participants}) != len(self.participants):
            raise ValueError("A participant can only take one seat")

        self.rules = rules or RuleSet()
        self.deck = deck if deck is not None else Deck(rng=rng)
        self.events = events or EventEmitter()

        self._in_contention: list[Participant] = list(self.participants)
        self._winner: Participant | None = None

        self.machine = Machine(
            model=self,
            states=self.STATES,
            transitions=self.TRANSITIONS,
            initial="dealing",
            auto_transitions=False,
            model_attribute="_round_state",
        )

    @property
    def state(self) -> RoundState:
        """Get current round state as enum."""
        return RoundState[self._round_state.upper()]  # type: ignore

    @property
    def in_contention(self) -> tuple[Participant, ...]:
        """Participants that have not busted, in seat order."""
        return tuple(self._in_contention)

    @property
    def winner(self) -> Participant | None:
        """The winner once resolved; None before that or on a tie."""
        return self._winner

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to round events."""
        self.events.subscribe(handler, event_type)

    def in_move_order(self) -> list[Participant]:
        """Participants sorted by move priority; seat order breaks ties."""
        return sorted(self.participants, key=lambda p: p.move_priority)

    def initial_deal(self) -> None:
        """Shuffle, then deal every participant its opening hand in seat order."""
        if self.state != RoundState.DEALING:
            raise MachineError(f"Cannot deal while the round is {self.state}")

        self.events.emit_new(
            EventType.ROUND_STARTED,
            participants=[p.name for p in self.participants],
        )

        self.deck.shuffle()
        self.events.emit_new(EventType.DECK_SHUFFLED, cards_remaining=len(self.deck))

        for participant in self.participants:
            for _ in range(participant.opening_draw_count):
                card = self.deck.deal()
                participant.take(card)
                self.events.emit_new(
                    EventType.CARD_DEALT,
                    card=card,
                    participant=participant.view(),
                )

        logger.debug(
            "Dealt opening hands: %s",
            ", ".join(f"{p.name}={p.total}" for p in self.participants),
        )
        self.start_turns()

    def run_turns(self) -> None:
        """
        Play every turn in move order.

        Once a turn leaves a single participant in contention, the remaining
        turns are skipped.
        """
        if self.state != RoundState.PLAYING:
            raise MachineError(f"Cannot run turns while the round is {self.state}")

        order = self.in_move_order()

        for index, participant in enumerate(order):
            participant.play_turn(
                self.deck,
                view=lambda p=participant: self.view_for(p),
                on_bust=self._eliminate,
                events=self.events,
            )

            if len(self._in_contention) <= 1:
                skipped = order[index + 1:]
                if skipped:
                    logger.debug("Last participant standing; skipping %d turn(s)", len(skipped))
                    self.events.emit_new(
                        EventType.TURNS_SKIPPED,
                        skipped=[p.name for p in skipped],
                    )
                break

        self.finish_turns()

    def resolve_winner(self) -> Participant | None:
        """Decide the winner, or None on a tie. Safe to call again once complete."""
        if self.state == RoundState.COMPLETE:
            return self._winner

        self.finish()
        self._winner = pick_winner(self._in_contention)

        outcome = self.outcome()
        logger.debug("Round resolved: %s", outcome)
        self.events.emit_new(
            EventType.ROUND_ENDED,
            winner=self._winner.name if self._winner else None,
            participants=[p.view() for p in self.participants],
            message=str(outcome),
        )
        return self._winner

    def play(self) -> Outcome:
        """Deal, play all turns and resolve."""
        self.initial_deal()
        self.run_turns()
        self.resolve_winner()
        return self.outcome()

    def outcome(self) -> Outcome:
        """Summarise the round as it stands."""
        return Outcome(
            winner=self._winner,
            standings=tuple((p.name, p.total, p.is_busted) for p in self.participants),
        )

    def view_for(self, participant: Participant) -> RoundView:
        """Build the read-only context a participant decides on."""
        return RoundView(
            me=participant.view(),
            opponents=tuple(p.view() for p in self.participants if p is not participant),
            rules=self.rules,
        )

    def _eliminate(self, participant: Participant) -> None:
        """Take a busted participant out of contention (at most once)."""
        if participant in self._in_contention:
            self._in_contention.remove(participant)
            logger.debug("%s busted with %d", participant.name, participant.total)
