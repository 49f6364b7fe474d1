"""Interactive play on the terminal."""

from stockpile.play.display import StateRenderer
from stockpile.play.input import CommandReader, InputResult, parse_command
from stockpile.play.session import PlaySession, SessionConfig

__all__ = [
    "StateRenderer",
    "CommandReader",
    "InputResult",
    "parse_command",
    "PlaySession",
    "SessionConfig",
]
