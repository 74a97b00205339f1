"""Tests for the participant turn state machine."""

import pytest
from transitions import MachineError

from core.errors import DeckExhausted, InvalidDecision
from core.game import EventType, Participant, Role, Round, TurnState
from core.strategy import Action, RoundView, RuleSet
from conftest import FixedPolicy, ScriptedInput, StackedDeck, deal, make_player


def play(participant, deck, events=None):
    """Run a turn with no opponents, collecting bust signals."""
    busts = []
    state = participant.play_turn(
        deck,
        view=lambda: RoundView(participant.view(), (), RuleSet()),
        on_bust=busts.append,
        events=events,
    )
    return state, busts


class TestRole:
    """Tests for role defaults."""

    def test_dealer_role(self):
        role = Role.dealer()
        assert role.is_dealer
        assert role.opening_draw_count == 1

    def test_player_role(self):
        role = Role.player()
        assert not role.is_dealer
        assert role.opening_draw_count == 2

    def test_players_move_before_dealer(self):
        assert Role.player().move_priority < Role.dealer().move_priority

    def test_dealer_displayed_first(self):
        assert Role.dealer().display_priority < Role.player().display_priority


class TestTurn:
    """Tests for a single turn."""

    def test_starts_idle(self):
        player = make_player("Ann")
        assert player.turn_state == TurnState.IDLE
        assert not player.staying

    def test_stay_ends_turn(self):
        player = make_player("Ann", Action.STAY)
        deal(player, "10S")
        deck = StackedDeck("5H")

        state, busts = play(player, deck)

        assert state == TurnState.STAYING
        assert player.staying
        assert busts == []
        assert len(deck) == 1  # Nothing drawn

    def test_hit_draws_exactly_one_card(self):
        player = make_player("Ann", Action.HIT, Action.STAY)
        deck = StackedDeck("5H", "6H", "7H")

        play(player, deck)

        assert [str(c) for c in player.hand] == ["5♥"]
        assert len(deck) == 2

    def test_bust_after_hit(self):
        player = make_player("Ann", Action.HIT, Action.HIT)
        deal(player, "10S", "6H")
        deck = StackedDeck("KC", "2D")

        state, busts = play(player, deck)

        assert state == TurnState.BUSTED
        assert busts == [player]
        assert player.hand.total == 26
        assert len(deck) == 1  # Second HIT never asked for

    def test_policy_not_consulted_after_bust(self):
        policy = FixedPolicy(Action.HIT, Action.HIT, Action.HIT)
        player = Participant("Ann", Role.player(), policy)
        deal(player, "KS", "QS")

        play(player, StackedDeck("5H", "5D", "5C"))

        assert policy.calls == 1

    def test_soft_hand_survives_a_hit(self):
        player = make_player("Ann", Action.HIT, Action.STAY)
        deal(player, "AS", "6H")

        state, busts = play(player, StackedDeck("9C"))

        assert state == TurnState.STAYING
        assert player.total == 16
        assert busts == []

    def test_already_busted_hand_busts_without_deciding(self):
        policy = FixedPolicy()
        player = Participant("Ann", Role.player(), policy)
        deal(player, "KS", "QS", "5S")

        state, busts = play(player, StackedDeck())

        assert state == TurnState.BUSTED
        assert busts == [player]
        assert policy.calls == 0

    def test_dealer_hits_to_seventeen(self, dealer):
        deal(dealer, "5S")
        deck = StackedDeck("6H", "4D", "3C", "9S")

        state, _ = play(dealer, deck)

        assert state == TurnState.STAYING
        assert dealer.total == 18
        assert len(deck) == 1

    def test_player_driven_by_input(self):
        source = ScriptedInput(Action.HIT, Action.STAY)
        player = Participant.player(source, name="Ann")

        play(player, StackedDeck("2C", "3C"))

        assert len(source.requests) == 2
        assert player.total == 2

    def test_invalid_decision_raises(self):
        player = make_player("Ann", "hit")

        with pytest.raises(InvalidDecision) as exc_info:
            play(player, StackedDeck("2C"))

        assert exc_info.value.participant == "Ann"
        assert exc_info.value.decision == "hit"

    def test_invalid_decision_is_a_value_error(self):
        assert issubclass(InvalidDecision, ValueError)

    def test_empty_deck_propagates(self):
        player = make_player("Ann", Action.HIT)
        with pytest.raises(DeckExhausted):
            play(player, StackedDeck())

    def test_turn_cannot_start_twice(self):
        player = make_player("Ann", Action.STAY)
        play(player, StackedDeck())
        with pytest.raises(MachineError):
            play(player, StackedDeck())

    def test_events(self, events):
        player = make_player("Ann", Action.HIT, Action.HIT)
        deal(player, "10S")

        play(player, StackedDeck("9S", "5H"), events=events)

        types = [e.event_type for e in events.history]
        assert types == [
            EventType.TURN_STARTED,
            EventType.PARTICIPANT_HIT,
            EventType.PARTICIPANT_HIT,
            EventType.PARTICIPANT_BUSTS,
        ]
        bust = events.of_type(EventType.PARTICIPANT_BUSTS)[0]
        assert bust.data["participant"].total == 24
        assert bust.data["participant"].is_busted


class TestReset:
    """Tests for clearing a participant between rounds."""

    def test_reset_discards_hand_and_stay(self):
        player = make_player("Ann", Action.STAY)
        deal(player, "10S")
        old_hand = player.hand
        play(player, StackedDeck())

        player.reset()

        assert player.turn_state == TurnState.IDLE
        assert not player.staying
        assert len(player.hand) == 0
        assert player.hand is not old_hand

    def test_reset_when_idle(self):
        player = make_player("Ann")
        player.reset()
        assert player.turn_state == TurnState.IDLE

    def test_reset_after_deck_runs_out_mid_turn(self, dealer):
        player = make_player("Ann", Action.HIT, Action.HIT)
        round_ = Round([player, dealer], deck=StackedDeck("2S", "3S", "4S"))

        with pytest.raises(DeckExhausted):
            round_.play()
        assert player.turn_state == TurnState.AWAITING_DECISION

        player.reset()

        assert player.turn_state == TurnState.IDLE
        assert len(player.hand) == 0

    def test_reset_after_invalid_decision(self):
        player = make_player("Ann", "double")
        with pytest.raises(InvalidDecision):
            play(player, StackedDeck("2C"))

        player.reset()

        assert player.turn_state == TurnState.IDLE

    def test_participant_reusable_after_aborted_round(self, dealer):
        player = make_player("Ann", Action.HIT, Action.STAY)
        with pytest.raises(DeckExhausted):
            Round([player, dealer], deck=StackedDeck("2S", "3S", "4S")).play()

        player.reset()
        dealer.reset()
        outcome = Round([player, dealer], deck=StackedDeck("10S", "9S", "10H", "8H")).play()

        assert outcome.winner is player


class TestTurnState:
    """Tests for the turn state enum."""

    def test_terminal_states(self):
        assert TurnState.BUSTED.is_terminal
        assert TurnState.STAYING.is_terminal
        assert not TurnState.AWAITING_DECISION.is_terminal
