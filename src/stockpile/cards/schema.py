"""Core card enumerations."""

from __future__ import annotations

from enum import Enum


class Suit(Enum):
    """Playing card suits.

    Suits are nominal: they compare equal or not equal, never less or greater.
    Declaration order is the order a standard deck is built in.
    """

    CLUBS = "C"
    HEARTS = "H"
    DIAMONDS = "D"
    SPADES = "S"


class Rank(Enum):
    """Playing card ranks, lowest first (aces are high)."""

    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"
    ACE = "A"

    @property
    def order(self) -> int:
        """Position of this rank, 0 for TWO up to 12 for ACE."""
        return _RANK_ORDER[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order < other.order

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order <= other.order

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order > other.order

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.order >= other.order


_RANK_ORDER = {rank: i for i, rank in enumerate(Rank)}


class Ordering(Enum):
    """Result of comparing two values under a partial order."""

    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"
    INCOMPARABLE = "incomparable"

    @classmethod
    def of(cls, a: int, b: int) -> "Ordering":
        """Total comparison of two integers."""
        if a < b:
            return cls.LESS
        if a > b:
            return cls.GREATER
        return cls.EQUAL
