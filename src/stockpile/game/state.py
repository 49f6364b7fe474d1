"""Game state: deck, tableau, waste and foundations."""

from __future__ import annotations

import copy
import random
from collections import deque
from dataclasses import dataclass, field
from typing import Optional

from stockpile.cards.card import Card
from stockpile.cards.deck import Deck, standard_deck
from stockpile.game.config import FOUNDATION_COUNT, STACK_COUNT


def _empty_stacks() -> list[deque[Card]]:
    return [deque() for _ in range(STACK_COUNT)]


def _empty_foundations() -> list[Optional[Card]]:
    return [None] * FOUNDATION_COUNT


@dataclass
class State:
    """Everything on the table.

    Stacks and the waste are double-ended; the back (right end) is the top
    card. Foundation slots hold the top card per suit but no command reads
    or writes them yet.
    """

    deck: Deck[Card]
    stacks: list[deque[Card]] = field(default_factory=_empty_stacks)
    unplaced: deque[Card] = field(default_factory=deque)
    foundations: list[Optional[Card]] = field(default_factory=_empty_foundations)

    @classmethod
    def new(cls, rng: Optional[random.Random] = None) -> "State":
        """Fresh table: unshuffled standard deck, nothing dealt."""
        return cls(deck=standard_deck(rng=rng))

    def snapshot(self) -> "State":
        """Deep, independent copy. Mutating it never affects this state."""
        return copy.deepcopy(self)

    def stack_sizes(self) -> list[int]:
        return [len(stack) for stack in self.stacks]
