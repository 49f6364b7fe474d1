"""Immutable playing card with a per-suit partial order."""

from __future__ import annotations

from dataclasses import dataclass

from stockpile.cards.display import format_card
from stockpile.cards.schema import Ordering, Rank, Suit


@dataclass(frozen=True)
class Card:
    """Immutable playing card.

    Cards of the same suit are ordered by rank. Cards of different suits are
    incomparable: `compare` reports INCOMPARABLE and every rich comparison
    operator returns False, the same convention sets use for inclusion.
    """

    rank: Rank
    suit: Suit

    def compare(self, other: Card) -> Ordering:
        """Compare two cards under the partial order."""
        if self.suit != other.suit:
            return Ordering.INCOMPARABLE
        return Ordering.of(self.rank.order, other.rank.order)

    def comparable_with(self, other: Card) -> bool:
        return self.suit == other.suit

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) in (Ordering.LESS, Ordering.EQUAL)

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Card):
            return NotImplemented
        return self.compare(other) in (Ordering.GREATER, Ordering.EQUAL)

    def __str__(self) -> str:
        return format_card(self)
