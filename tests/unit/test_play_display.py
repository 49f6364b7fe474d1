"""Tests for state rendering."""

from stockpile.cards import Card, Rank, Suit, format_cards
from stockpile.game.state import State
from stockpile.play.display import StateRenderer


def test_fresh_state() -> None:
    output = StateRenderer().render(State.new())

    assert "=== Stock: 52 of 52 cards ===" in output
    assert "[0] (empty)" in output
    assert "[7] (empty)" in output
    assert "Waste: (empty)" in output
    assert "Foundations: -C  -H  -D  -S" in output


def test_stacks_bottom_to_top() -> None:
    state = State.new()
    state.stacks[2].extend([Card(Rank.KING, Suit.SPADES), Card(Rank.TEN, Suit.HEARTS)])
    state.unplaced.append(Card(Rank.ACE, Suit.DIAMONDS))

    output = StateRenderer().render(state)

    assert "[2] K♠ X♥" in output
    assert "Waste: A♦" in output


def test_filled_foundation() -> None:
    state = State.new()
    state.foundations[1] = Card(Rank.FIVE, Suit.HEARTS)

    output = StateRenderer().render(state)

    assert "Foundations: -C  5♥  -D  -S" in output


def test_debug_shows_cursor() -> None:
    state = State.new()
    state.deck.draw_many(4)

    output = StateRenderer().render(state, debug=True)

    assert "--- Debug Info ---" in output
    assert "Cursor: 4" in output
    assert "Next in stock: 6♣ 7♣ 8♣" in output


def test_format_cards_empty_label() -> None:
    assert format_cards([], empty="(none)") == "(none)"
