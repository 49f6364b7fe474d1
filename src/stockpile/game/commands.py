"""Commands accepted by the game state machine."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


def _check_non_negative(**values: int) -> None:
    for name, value in values.items():
        if value < 0:
            raise ValueError(f"{name} must be non-negative, got {value}")


@dataclass(frozen=True)
class Draw:
    """Draw cards from the stock into the waste (dealing the tableau first if needed)."""


@dataclass(frozen=True)
class Move:
    """Move the top ``amount`` cards of stack ``src`` onto stack ``dest``."""

    src: int
    dest: int
    amount: int

    def __post_init__(self):
        _check_non_negative(src=self.src, dest=self.dest, amount=self.amount)


@dataclass(frozen=True)
class Place:
    """Place the most recently drawn waste card onto ``stack``."""

    stack: int

    def __post_init__(self):
        _check_non_negative(stack=self.stack)


@dataclass(frozen=True)
class GetState:
    """Publish a snapshot of the game state to the observer."""


Command = Union[Draw, Move, Place, GetState]
