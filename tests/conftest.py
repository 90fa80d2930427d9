"""Pytest fixtures for blackjack_hand tests."""

import pytest
from hypothesis import strategies as st

from blackjack_hand.cards import Card, Rank, Suit
from blackjack_hand.hand import Hand


@pytest.fixture
def empty_hand():
    """An empty hand."""
    return Hand()


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.insert(Card(Rank.ACE, Suit.SPADES))
    hand.insert(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    hand = Hand()
    hand.insert(Card(Rank.ACE, Suit.SPADES))
    hand.insert(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.insert(Card(Rank.TEN, Suit.SPADES))
    hand.insert(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def pair_8s_hand():
    """A pair of 8s hand."""
    hand = Hand()
    hand.insert(Card(Rank.EIGHT, Suit.SPADES))
    hand.insert(Card(Rank.EIGHT, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand (10-7-5)."""
    hand = Hand()
    hand.insert(Card(Rank.TEN, Suit.SPADES))
    hand.insert(Card(Rank.SEVEN, Suit.HEARTS))
    hand.insert(Card(Rank.FIVE, Suit.CLUBS))
    return hand


# Hypothesis strategies for property-based testing
@st.composite
def card_strategy(draw, ranks=tuple(Rank)):
    """Generate a random card."""
    rank = draw(st.sampled_from(list(ranks)))
    suit = draw(st.sampled_from(list(Suit)))
    return Card(rank, suit)


def cards_strategy(min_cards=0, max_cards=11, ranks=tuple(Rank)):
    """Generate a list of random cards."""
    return st.lists(card_strategy(ranks=ranks), min_size=min_cards, max_size=max_cards)
