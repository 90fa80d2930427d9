"""Blackjack valuation over card ranks."""

from enum import Enum, auto
from typing import Iterable

from blackjack_hand.cards import Card, Rank
from blackjack_hand.config import config


class HandValue(Enum):
    """Classification of a hand's value."""

    EMPTY = auto()
    HARD = auto()
    SOFT = auto()
    BLACKJACK = auto()
    BUST = auto()

    def __str__(self) -> str:
        return self.name.title()


def _reduce(ranks: Iterable[Rank]) -> tuple[int, int] | None:
    """
    Count every rank at its highest value, then soften one rank at a time.

    Returns:
        (total, soft_remaining) where soft_remaining is the number of ranks
        still counted at their high value, or None if there are no ranks
    """
    limit = config.rules.bust_limit
    total = 0
    reductions: list[int] = []
    count = 0

    for rank in ranks:
        count += 1
        low, high = rank.points[0], rank.points[-1]
        total += high
        if high != low:
            reductions.append(high - low)

    if count == 0:
        return None

    # Reduce aces from 11 to 1 as needed
    while total > limit and reductions:
        total -= reductions.pop()

    return total, len(reductions)


def best_total(ranks: Iterable[Rank]) -> int | None:
    """
    Calculate the best legal blackjack total.

    Returns:
        The highest total not above 21, or None if the ranks bust or are empty
    """
    reduced = _reduce(ranks)
    if reduced is None:
        return None
    total, _ = reduced
    if total > config.rules.bust_limit:
        return None
    return total


def is_soft_total(ranks: Iterable[Rank]) -> bool:
    """Check if the best total still counts at least one ace as 11."""
    reduced = _reduce(ranks)
    if reduced is None:
        return False
    total, soft_remaining = reduced
    return total <= config.rules.bust_limit and soft_remaining > 0


def classify(cards: Iterable[Card]) -> HandValue:
    """Classify a collection of cards as empty, hard, soft, blackjack or bust."""
    ranks = [card.rank for card in cards]
    if not ranks:
        return HandValue.EMPTY

    total = best_total(ranks)
    if total is None:
        return HandValue.BUST
    if len(ranks) == config.rules.natural_cards and total == config.rules.bust_limit:
        return HandValue.BLACKJACK
    if is_soft_total(ranks):
        return HandValue.SOFT
    return HandValue.HARD
