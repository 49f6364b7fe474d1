"""Game state machine and the channels that feed it."""

from stockpile.game.commands import Command, Draw, Move, Place, GetState
from stockpile.game.config import GameConfig, STACK_COUNT, FOUNDATION_COUNT, DRAW_COUNT
from stockpile.game.state import State
from stockpile.game.channel import Channel, ChannelClosedError
from stockpile.game.engine import Game, CommandOutcome

__all__ = [
    "Command",
    "Draw",
    "Move",
    "Place",
    "GetState",
    "GameConfig",
    "STACK_COUNT",
    "FOUNDATION_COUNT",
    "DRAW_COUNT",
    "State",
    "Channel",
    "ChannelClosedError",
    "Game",
    "CommandOutcome",
]
