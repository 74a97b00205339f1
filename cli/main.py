"""Entry point for the terminal twenty-one game."""

import logging
import sys
from random import Random
from typing import Sequence

from cli.display import TerminalDisplay
from cli.terminal import TerminalInput
from config import AppConfig, config
from core.cards import Deck
from core.errors import TwentyOneError
from core.game.participant import Participant
from core.game.round import Outcome, Round
from core.strategy.rules import RuleSet

logger = logging.getLogger(__name__)


class GameHandler:
    """Plays rounds with the same participants until the player has had enough."""

    def __init__(
        self,
        participants: Sequence[Participant],
        terminal: TerminalInput,
        display: TerminalDisplay | None = None,
        rules: RuleSet | None = None,
        rng: Random | None = None,
    ) -> None:
        self.participants = list(participants)
        self.terminal = terminal
        self.display = display
        self.rules = rules or RuleSet()
        self.rng = rng or Random()
        self.outcomes: list[Outcome] = []

    def new_deck(self) -> Deck:
        """A full deck for the next game; the round shuffles it."""
        return Deck(rng=self.rng)

    def play_round(self) -> Outcome:
        """Play one game from deal to winner."""
        round_ = Round(self.participants, deck=self.new_deck(), rules=self.rules)
        if self.display is not None:
            round_.subscribe(self.display.handle)

        outcome = round_.play()
        self.outcomes.append(outcome)
        logger.info("Game %d: %s", len(self.outcomes), outcome)
        return outcome

    def reset(self) -> None:
        """Clear every participant's hand and turn."""
        for participant in self.participants:
            participant.reset()

    def start(self) -> None:
        """Play, ask for a rematch, repeat."""
        while True:
            self.play_round()
            if not self.terminal.ask_rematch():
                break
            self.reset()


def build_handler(app_config: AppConfig = config) -> GameHandler:
    """Wire the table from configuration: one player against the dealer."""
    game = app_config.game
    rules = RuleSet.standard()
    terminal = TerminalInput()

    participants = [
        Participant.player(terminal, name=game.player_name, rules=rules),
        Participant.dealer(name=game.dealer_name, rules=rules),
    ]
    display = TerminalDisplay(
        participants,
        dealer_move_delay=game.dealer_move_delay,
        clear_screen=game.clear_screen,
    )
    return GameHandler(
        participants,
        terminal,
        display=display,
        rules=rules,
        rng=Random(game.seed),
    )


def main() -> int:
    """Console entry point."""
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    handler = build_handler()
    try:
        handler.start()
    except (KeyboardInterrupt, EOFError):
        print("\nProgram aborted", file=sys.stderr)
        return 1
    except TwentyOneError as exc:
        logger.error("Round ended early: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
