"""Tests for the card model and its partial order."""

import pytest
from stockpile.cards import Card, Ordering, Rank, Suit, format_card

RANKS = list(Rank)
SUITS = list(Suit)


def test_rank_order_is_two_to_ace() -> None:
    """Ranks run from TWO up to ACE."""
    assert RANKS[0] == Rank.TWO
    assert RANKS[-1] == Rank.ACE
    assert Rank.TWO < Rank.THREE < Rank.TEN < Rank.KING < Rank.ACE


def test_rank_comparison_matches_position() -> None:
    for i, a in enumerate(RANKS):
        for j, b in enumerate(RANKS):
            assert (a < b) == (i < j)
            assert (a >= b) == (i >= j)
            assert (a == b) == (i == j)


def test_suit_equality_only() -> None:
    """Suits compare for equality but have no ordering."""
    for i, a in enumerate(SUITS):
        for j, b in enumerate(SUITS):
            assert (a == b) == (i == j)

    with pytest.raises(TypeError):
        Suit.CLUBS < Suit.HEARTS  # type: ignore[operator]


def test_card_immutability() -> None:
    """Test Card is immutable."""
    card = Card(rank=Rank.ACE, suit=Suit.HEARTS)
    assert card.rank == Rank.ACE

    with pytest.raises(AttributeError):
        card.rank = Rank.KING  # type: ignore


def test_card_structural_equality() -> None:
    assert Card(Rank.FIVE, Suit.SPADES) == Card(Rank.FIVE, Suit.SPADES)
    assert Card(Rank.FIVE, Suit.SPADES) != Card(Rank.FIVE, Suit.CLUBS)
    assert len({Card(Rank.FIVE, Suit.SPADES), Card(Rank.FIVE, Suit.SPADES)}) == 1


def test_card_compare_grid() -> None:
    """Same suit follows rank order, different suits are incomparable."""
    for i, rank_a in enumerate(RANKS):
        for j, rank_b in enumerate(RANKS):
            for suit_a in SUITS:
                for suit_b in SUITS:
                    a = Card(rank_a, suit_a)
                    b = Card(rank_b, suit_b)
                    if suit_a == suit_b:
                        assert a.compare(b) == Ordering.of(i, j)
                    else:
                        assert a.compare(b) is Ordering.INCOMPARABLE


class TestCardOperators:
    """Rich comparisons follow the partial order."""

    def test_same_suit(self):
        low = Card(Rank.THREE, Suit.HEARTS)
        high = Card(Rank.QUEEN, Suit.HEARTS)

        assert low < high
        assert low <= high
        assert high > low
        assert high >= low
        assert low <= Card(Rank.THREE, Suit.HEARTS)

    def test_cross_suit_is_never_ordered(self):
        """No relation holds between suits, in either direction."""
        a = Card(Rank.TWO, Suit.CLUBS)
        b = Card(Rank.ACE, Suit.SPADES)

        assert not a < b
        assert not a <= b
        assert not a > b
        assert not a >= b
        assert not b < a
        assert not b >= a
        assert a != b
        assert not a.comparable_with(b)

    def test_comparison_with_other_types(self):
        with pytest.raises(TypeError):
            Card(Rank.TWO, Suit.CLUBS) < 3  # type: ignore[operator]


class TestFormatCard:
    """Tests for card display."""

    def test_symbols(self):
        assert format_card(Card(Rank.ACE, Suit.SPADES)) == "A♠"
        assert format_card(Card(Rank.TEN, Suit.HEARTS)) == "X♥"
        assert format_card(Card(Rank.TWO, Suit.DIAMONDS)) == "2♦"
        assert format_card(Card(Rank.QUEEN, Suit.CLUBS)) == "Q♣"

    def test_str_uses_display_form(self):
        assert str(Card(Rank.KING, Suit.CLUBS)) == "K♣"
