"""Prompts and validated keyboard input."""

import os
import sys
from typing import Callable, Mapping, TextIO

from core.strategy.policies import Action, InputSource

PROMPT = ">> "

Reader = Callable[[], str]


def clear_terminal() -> None:
    """Clear the screen on Windows or POSIX terminals."""
    os.system("cls" if os.name == "nt" else "clear")


def prompt(*messages: str, out: TextIO | None = None) -> None:
    """Print each message on its own prompt line."""
    out = out or sys.stdout
    for message in messages:
        print(PROMPT + message, file=out)


def _read_line() -> str:
    return input()


def get_choice(
    message: str,
    expected: Mapping[str, object] | None = None,
    invalid_msg: str = "Invalid input!",
    read: Reader = _read_line,
    out: TextIO | None = None,
) -> str:
    """
    Ask until the answer is acceptable.

    Args:
        message: The question
        expected: Accepted answers (lowercase); any non-empty answer if None
        invalid_msg: Shown after each rejected answer
        read: Source of raw answers
        out: Where prompts go

    Returns:
        The accepted answer, stripped and lowercased

    EOFError and KeyboardInterrupt from ``read`` propagate to the caller.
    """
    prompt(message, out=out)
    while True:
        answer = read().strip().lower()
        if answer and (expected is None or answer in expected):
            return answer
        prompt(invalid_msg, out=out)


class TerminalInput(InputSource):
    """Keyboard input for the player and the rematch question."""

    CHOICES = {"h": Action.HIT, "s": Action.STAY}

    def __init__(self, read: Reader = _read_line, out: TextIO | None = None) -> None:
        self._read = read
        self._out = out

    def request_choice(self, options: tuple[Action, ...]) -> Action:
        choices = {key: action for key, action in self.CHOICES.items() if action in options}
        labels = " or ".join(f"<{key}>{action.name.lower()[1:]}" for key, action in choices.items())
        answer = get_choice(
            f"Please choose: {labels}",
            expected=choices,
            invalid_msg="Please choose " + " or ".join(f'"{key}"' for key in choices),
            read=self._read,
            out=self._out,
        )
        return choices[answer]

    def ask_rematch(self) -> bool:
        """Ask whether to play another game."""
        answer = get_choice(
            "Would you like to play again? (y/n)",
            expected={"y": True, "n": False},
            invalid_msg="Please choose 'y' or 'n'",
            read=self._read,
            out=self._out,
        )
        return answer == "y"
