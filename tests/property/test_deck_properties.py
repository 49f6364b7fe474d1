"""Property-based tests for the deck container."""

import random
from collections import Counter

from hypothesis import given, strategies as st
from stockpile.cards import Deck

elements = st.lists(st.one_of(st.none(), st.integers()), min_size=0, max_size=60)


@given(items=elements)
def test_construction_round_trip(items: list[int | None]) -> None:
    """Property: a new deck exposes its input unchanged with the cursor at 0."""
    deck = Deck(items, size=len(items))

    assert deck.top == 0
    assert deck.get_all() == items


@given(items=elements)
def test_draw_one_exhausts_in_order(items: list[int | None]) -> None:
    """Property: N single draws give every element once, in order, then nothing."""
    deck = Deck(items)

    drawn = [deck.draw_one() for _ in range(len(items))]

    assert drawn == items
    assert deck.draw_one() is None
    assert deck.top == len(items)


@given(items=elements, data=st.data())
def test_sequential_draws_compose(items: list[int | None], data: st.DataObject) -> None:
    """Property: draw_many(k1) then draw_many(k2) equals draw_many(k1 + k2)."""
    k1 = data.draw(st.integers(min_value=0, max_value=len(items)))
    k2 = data.draw(st.integers(min_value=0, max_value=len(items) - k1))

    split = Deck(items)
    whole = Deck(items)

    assert split.draw_many(k1) + split.draw_many(k2) == whole.draw_many(k1 + k2)
    assert split.top == whole.top


@given(items=elements, data=st.data(), seed=st.integers(min_value=0, max_value=2**32 - 1))
def test_shuffle_permutes_stock_only(items: list[int | None], data: st.DataObject, seed: int) -> None:
    """Property: shuffle keeps the stock's multiset, the drawn part and the cursor."""
    deck = Deck(items, rng=random.Random(seed))
    deck.draw_many(data.draw(st.integers(min_value=0, max_value=len(items))))

    drawn_before = deck.drawn()
    stock_before = deck.get_all()
    top_before = deck.top

    deck.shuffle()

    assert deck.top == top_before
    assert deck.drawn() == drawn_before
    assert Counter(deck.get_all()) == Counter(stock_before)


@given(items=elements, data=st.data())
def test_reset_recovers_original(items: list[int | None], data: st.DataObject) -> None:
    """Property: reset after any number of draws gives back the full sequence."""
    deck = Deck(items)
    deck.draw_many(data.draw(st.integers(min_value=0, max_value=len(items) + 5)))

    deck.reset()

    assert deck.get_all() == items
    deck.reset()
    assert deck.get_all() == items
