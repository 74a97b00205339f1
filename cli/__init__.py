"""Terminal front end for the twenty-one engine."""

from cli.display import TerminalDisplay
from cli.terminal import TerminalInput, get_choice, prompt

__all__ = [
    "TerminalDisplay",
    "TerminalInput",
    "get_choice",
    "prompt",
]
