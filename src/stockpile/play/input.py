"""Human input handling."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from stockpile.game.commands import Command, Draw, GetState, Move, Place

QUIT_WORDS = ("q", "quit", "exit")

HELP_TEXT = "Commands: d (draw), g (show state), p STACK (place), m FROM TO AMOUNT (move), q (quit)"


def _parse_index(token: str) -> Optional[int]:
    # Non-negative decimal only; "-1" and "+1" are rejected
    if not (token.isascii() and token.isdigit()):
        return None
    return int(token)


def parse_command(line: str) -> Optional[Command]:
    """Parse one line of player input.

    Returns:
        The command, or None if the line is not a well-formed command
    """
    words = line.strip().lower().split(" ")
    name, args = words[0], words[1:]
    if name == "d":
        return Draw()
    if name == "g":
        return GetState()
    if name == "p":
        if len(args) < 1:
            return None
        stack = _parse_index(args[0])
        if stack is None:
            return None
        return Place(stack=stack)
    if name == "m":
        if len(args) < 3:
            return None
        numbers = [_parse_index(arg) for arg in args[:3]]
        if any(n is None for n in numbers):
            return None
        src, dest, amount = numbers
        return Move(src=src, dest=dest, amount=amount)  # type: ignore[arg-type]
    return None


@dataclass
class InputResult:
    """Result of human input."""

    command: Optional[Command] = None
    quit: bool = False
    error: Optional[str] = None


class CommandReader:
    """Reads and parses commands typed by a player."""

    def __init__(self, input_fn: Callable[[str], str] = input):
        self.input_fn = input_fn

    def read(self, prompt: str = "> ") -> InputResult:
        """Read one command.

        Returns:
            InputResult with a command, the quit flag, or an error message.
            A blank line gives an empty result.
        """
        try:
            raw = self.input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            return InputResult(quit=True)

        text = raw.strip()
        if text.lower() in QUIT_WORDS:
            return InputResult(quit=True)

        if not text:
            return InputResult()

        command = parse_command(text)
        if command is None:
            return InputResult(error=f"Invalid command '{text}'. {HELP_TEXT}")

        return InputResult(command=command)
