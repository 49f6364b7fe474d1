"""Fixed-capacity deck with a draw cursor."""

from __future__ import annotations

import random
from typing import Generic, Iterable, Optional, TypeVar

from stockpile.cards.card import Card
from stockpile.cards.schema import Rank, Suit

T = TypeVar("T")

STANDARD_DECK_SIZE = 52


class Deck(Generic[T]):
    """A fixed number of elements split into a drawn part and a stock.

    The elements live in one list that is never resized. A single cursor,
    ``top``, marks the boundary: indices below it have been drawn, indices
    at or above it are the stock still available to draw or peek at.
    Drawing only advances the cursor; nothing is removed from the list, so
    ``reset`` can return every drawn element to its previous position.
    """

    def __init__(
        self,
        elements: Iterable[T],
        size: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Build a deck with the cursor at 0.

        Args:
            elements: The exact contents, in draw order
            size: Expected number of elements, checked when given
            rng: Random source for shuffle (system-seeded if None)

        Raises:
            ValueError: If ``size`` is given and does not match
        """
        items = list(elements)
        if size is not None and len(items) != size:
            raise ValueError(f"Deck needs exactly {size} elements, got {len(items)}")

        self._elements: list[T] = items
        self._top = 0
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def from_elements(
        cls,
        elements: Iterable[T],
        size: Optional[int] = None,
        rng: Optional[random.Random] = None,
    ) -> "Deck[T]":
        return cls(elements, size=size, rng=rng)

    @property
    def size(self) -> int:
        """Total number of elements, drawn or not."""
        return len(self._elements)

    @property
    def top(self) -> int:
        """Index of the next element to draw."""
        return self._top

    @property
    def remaining(self) -> int:
        return len(self._elements) - self._top

    def draw_one(self) -> Optional[T]:
        """Draw the element at the cursor, or None if the stock is exhausted."""
        if self._top >= len(self._elements):
            return None
        element = self._elements[self._top]
        self._top += 1
        return element

    def draw_many(self, n: int) -> list[T]:
        """Draw up to n elements, fewer if the stock runs out."""
        drawn = self.get_many(n)
        self._top += len(drawn)
        return drawn

    def get_one(self) -> Optional[T]:
        """Peek at the next element without drawing it."""
        if self._top >= len(self._elements):
            return None
        return self._elements[self._top]

    def get_many(self, n: int) -> list[T]:
        """Peek at up to n elements from the cursor."""
        n = max(0, min(n, self.remaining))
        return self._elements[self._top:self._top + n]

    def get_all(self) -> list[T]:
        """The whole stock, in draw order."""
        return self.get_many(self.size)

    def drawn(self) -> list[T]:
        """Elements already drawn, in the order they were drawn."""
        return self._elements[:self._top]

    def reset(self) -> None:
        """Return all drawn elements to the stock without reordering."""
        self._top = 0

    def shuffle(self) -> None:
        """Randomly permute the stock. Drawn elements and the cursor stay put."""
        stock = self._elements[self._top:]
        self._rng.shuffle(stock)
        self._elements[self._top:] = stock

    def is_full(self) -> bool:
        """True while nothing has been drawn (cursor at 0).

        The game uses this to decide when the tableau still has to be dealt.
        """
        return self._top == 0

    def is_empty(self) -> bool:
        """True once every element has been drawn."""
        return self._top >= len(self._elements)

    def __repr__(self) -> str:
        return f"Deck(size={self.size}, top={self._top})"


def standard_deck(rng: Optional[random.Random] = None) -> Deck[Card]:
    """Unshuffled 52-card deck, suit by suit, each from TWO up to ACE."""
    cards = [Card(rank=rank, suit=suit) for suit in Suit for rank in Rank]
    return Deck(cards, size=STANDARD_DECK_SIZE, rng=rng)
