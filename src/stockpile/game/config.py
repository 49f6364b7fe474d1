"""Game configuration."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Optional

# Table layout
STACK_COUNT = 8
FOUNDATION_COUNT = 4
DRAW_COUNT = 3


@dataclass
class GameConfig:
    """Configuration for a game.

    The defaults favour not losing cards: an invalid move destination puts
    the cards back, and a missing observer only drops the snapshot. The
    ``strict`` preset reproduces the reference behaviour instead.
    """

    seed: Optional[int] = None
    shuffle: bool = False
    restore_on_invalid_destination: bool = True
    strict_observer: bool = False

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)

    @classmethod
    def strict(cls, seed: Optional[int] = None, shuffle: bool = False) -> "GameConfig":
        """Reference behaviour: discard cards moved to a bad stack, fail on a closed observer."""
        return cls(
            seed=seed,
            shuffle=shuffle,
            restore_on_invalid_destination=False,
            strict_observer=True,
        )

    def make_rng(self) -> random.Random:
        return random.Random(self.seed)
