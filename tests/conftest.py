"""Pytest fixtures for twenty-one tests."""

import pytest
from random import Random

from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit
from core.game import EventEmitter, Participant, Role
from core.hand import Hand
from core.strategy import Action, DecisionPolicy, InputSource, RuleSet


def make_hand(*cards: str) -> Hand:
    """Build a hand from card strings like 'AS', '10H'."""
    hand = Hand()
    for card in cards:
        hand.add_card(Card.from_string(card))
    return hand


class StackedDeck(Deck):
    """A deck dealt in a fixed order; shuffling leaves it alone."""

    def __init__(self, *cards: str) -> None:
        super().__init__()
        self._cards = [Card.from_string(c) for c in cards]

    def shuffle(self) -> None:
        pass


class ScriptedInput(InputSource):
    """Answers choices from a script, recording each request."""

    def __init__(self, *answers: Action) -> None:
        self._answers = list(answers)
        self.requests: list[tuple[Action, ...]] = []

    def request_choice(self, options: tuple[Action, ...]) -> Action:
        self.requests.append(options)
        return self._answers.pop(0)


class FixedPolicy(DecisionPolicy):
    """Plays a script of actions, then stays."""

    def __init__(self, *actions: object) -> None:
        self._actions = list(actions)
        self.calls = 0

    def decide(self, view) -> Action:
        self.calls += 1
        if self._actions:
            return self._actions.pop(0)
        return Action.STAY


def make_player(name: str, *actions: object) -> Participant:
    """A player whose decisions follow ``actions``."""
    return Participant(name, Role.player(), FixedPolicy(*actions))


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def deck(rng):
    """A shuffled deck."""
    d = Deck(rng=rng)
    d.shuffle()
    return d


@pytest.fixture
def rules():
    """Default ruleset."""
    return RuleSet()


@pytest.fixture
def events():
    """A fresh event emitter."""
    return EventEmitter()


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    return make_hand("AS", "6H")


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    return make_hand("10S", "6H")


@pytest.fixture
def soft_21_hand():
    """A soft 21 hand (A-K)."""
    return make_hand("AS", "KH")


@pytest.fixture
def bust_hand():
    """A busted hand."""
    return make_hand("10S", "6H", "KC")


@pytest.fixture
def dealer(rules):
    """A dealer with an empty hand."""
    return Participant.dealer(rules=rules)


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(Rank)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


@st.composite
def hand_strategy(draw, min_cards=0, max_cards=8):
    """Generate a random hand."""
    cards = draw(st.lists(card_strategy(), min_size=min_cards, max_size=max_cards))
    hand = Hand()
    for card in cards:
        hand.add_card(card)
    return hand


def deal(participant: Participant, *cards: str) -> None:
    """Hand cards straight to a participant, bypassing any deck."""
    for card in cards:
        participant.take(Card.from_string(card))
