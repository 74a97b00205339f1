"""Redraws the table as round events arrive."""

import sys
import time
from typing import Callable, Sequence, TextIO

from cli.render import render_table
from cli.terminal import clear_terminal, prompt
from core.game.events import EventType, GameEvent
from core.game.participant import Participant


class TerminalDisplay:
    """
    Event subscriber that prints the table.

    It only reads participant state; nothing here feeds back into the round.
    """

    REDRAW_ON = (
        EventType.TURN_STARTED,
        EventType.PARTICIPANT_HIT,
        EventType.ROUND_ENDED,
    )

    def __init__(
        self,
        participants: Sequence[Participant],
        dealer_move_delay: float = 1.5,
        clear_screen: bool = True,
        out: TextIO | None = None,
        sleep: Callable[[float], None] = time.sleep,
        clear: Callable[[], None] = clear_terminal,
    ) -> None:
        self.participants = sorted(participants, key=lambda p: p.display_priority)
        self.dealer_move_delay = dealer_move_delay
        self.clear_screen = clear_screen
        self._out = out or sys.stdout
        self._sleep = sleep
        self._clear = clear

    def handle(self, event: GameEvent) -> None:
        """Event handler; subscribe it to a round."""
        if event.event_type not in self.REDRAW_ON:
            return

        if event.event_type == EventType.PARTICIPANT_HIT and self._is_dealer_draw(event):
            self._sleep(self.dealer_move_delay)

        self.redraw()

        if event.event_type == EventType.ROUND_ENDED:
            prompt(event.data["message"], out=self._out)

    def redraw(self) -> None:
        """Clear (if enabled) and print every participant in display order."""
        if self.clear_screen:
            self._clear()
        print(render_table(p.view() for p in self.participants), file=self._out)

    def _is_dealer_draw(self, event: GameEvent) -> bool:
        # The dealer's first hit after its opening hand is not delayed
        view = event.data["participant"]
        if not view.is_dealer:
            return False
        opening = next(
            p.opening_draw_count for p in self.participants if p.name == view.name
        )
        return len(view.cards) > opening + 1
