"""Card model and the generic deck container."""

from stockpile.cards.schema import Rank, Suit, Ordering
from stockpile.cards.card import Card
from stockpile.cards.deck import Deck, STANDARD_DECK_SIZE, standard_deck
from stockpile.cards.display import format_card, format_cards

__all__ = [
    "Rank",
    "Suit",
    "Ordering",
    "Card",
    "Deck",
    "STANDARD_DECK_SIZE",
    "standard_deck",
    "format_card",
    "format_cards",
]
