"""Terminal formatting for cards."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

from stockpile.cards.schema import Rank, Suit

if TYPE_CHECKING:
    from stockpile.cards.card import Card


# Single-character ranks keep tableau columns aligned
RANK_SYMBOLS = {
    Rank.TWO: "2",
    Rank.THREE: "3",
    Rank.FOUR: "4",
    Rank.FIVE: "5",
    Rank.SIX: "6",
    Rank.SEVEN: "7",
    Rank.EIGHT: "8",
    Rank.NINE: "9",
    Rank.TEN: "X",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
    Rank.ACE: "A",
}

# Unicode card symbols
SUIT_SYMBOLS = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    return f"{RANK_SYMBOLS[card.rank]}{SUIT_SYMBOLS[card.suit]}"


def format_cards(cards: Iterable[Card], empty: str = "(empty)") -> str:
    """Format a run of cards bottom to top, space separated."""
    text = " ".join(format_card(card) for card in cards)
    return text or empty
