"""Plain-text rendering of cards and hands."""

from typing import Iterable

from core.cards import Card
from core.strategy.policies import ParticipantView

CARD_WIDTH = 3
CARD_EDGES = {"top": "_", "side": "|", "bottom": "‾"}


def _edge_row(cards: list[Card], edge: str) -> str:
    return "".join(
        (CARD_EDGES[edge] * CARD_WIDTH).center(CARD_WIDTH + 2) for _ in cards
    )


def _framed_row(cells: Iterable[str]) -> str:
    side = CARD_EDGES["side"]
    return "".join(f"{side}{cell}{side}" for cell in cells)


def render_cards(cards: Iterable[Card]) -> str:
    """
    Draw cards side by side as five rows of ASCII art.

    Example for A♠ and 10♥::

         ___  ___
        |  A|| 10|
        | ♠ || ♥ |
        |A  ||10 |
         ‾‾‾  ‾‾‾
    """
    cards = list(cards)
    if not cards:
        return ""

    rows = [
        _edge_row(cards, "top"),
        _framed_row(str(c.rank).rjust(CARD_WIDTH) for c in cards),
        _framed_row(c.suit.symbol.center(CARD_WIDTH) for c in cards),
        _framed_row(str(c.rank).ljust(CARD_WIDTH) for c in cards),
        _edge_row(cards, "bottom"),
    ]
    return "\n".join(rows)


def render_participant(view: ParticipantView) -> str:
    """Name, hand art and total for one participant."""
    total_line = f"total: {view.total}"
    if view.is_busted:
        total_line += " (busted)"

    lines = [f"{view.name}:"]
    art = render_cards(view.cards)
    if art:
        lines.append(art)
    lines.append(total_line)
    return "\n".join(lines) + "\n"


def render_table(views: Iterable[ParticipantView]) -> str:
    """Every participant, in the order given."""
    return "\n".join(render_participant(view) for view in views)
