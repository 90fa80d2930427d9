"""Hand evaluation for blackjack."""

import logging
from collections import Counter
from enum import Enum, auto
from typing import Iterable, Iterator

from blackjack_hand.cards import Card
from blackjack_hand.log import get_logger
from blackjack_hand.valuation import HandValue, best_total, classify, is_soft_total

logger = get_logger(__name__)


class Hand:
    """
    A blackjack hand with value calculation.

    Cards are only ever added. Every derived property is recomputed from the
    current cards, so the value depends on the card multiset alone.
    """

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        """Initialize a hand, optionally with starting cards."""
        self._cards: list[Card] = list(cards)

    def insert(self, card: Card) -> None:
        """Add a card to the hand."""
        debug = logger.isEnabledFor(logging.DEBUG)
        was_bust = debug and self.is_bust
        self._cards.append(card)
        if debug:
            logger.debug("Inserted %s into hand of %d cards", card, len(self._cards))
            if not was_bust and self.is_bust:
                logger.debug("Hand busted: %s", self)

    @property
    def cards(self) -> tuple[Card, ...]:
        """Return the cards in insertion order."""
        return tuple(self._cards)

    @property
    def value(self) -> int | None:
        """
        Calculate the best hand value.

        Returns the highest total that doesn't bust, or None when the hand is
        bust or empty. Use is_bust or is_empty to tell those apart.
        """
        return best_total(card.rank for card in self._cards)

    @property
    def kind(self) -> HandValue:
        """Return the classification of the hand's value."""
        return classify(self._cards)

    @property
    def is_soft(self) -> bool:
        """
        Check if the hand is soft (has an ace counted as 11).

        Busted and empty hands are never soft.
        """
        return is_soft_total(card.rank for card in self._cards)

    @property
    def is_hard(self) -> bool:
        """Check if the hand has a value with every ace counted as 1."""
        return self.value is not None and not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Check if the hand is a natural blackjack (21 with 2 cards)."""
        return self.kind is HandValue.BLACKJACK

    @property
    def is_bust(self) -> bool:
        """Check if the hand has busted (over 21 with every ace counted as 1)."""
        return bool(self._cards) and self.value is None

    @property
    def is_empty(self) -> bool:
        """Check if the hand has no cards."""
        return not self._cards

    @property
    def can_double(self) -> bool:
        """Check if the hand can be doubled down."""
        return len(self._cards) == 2

    @property
    def can_split(self) -> bool:
        """Check if the hand is a pair (two cards of same rank)."""
        return len(self._cards) == 2 and self._cards[0].rank == self._cards[1].rank

    @property
    def card_count(self) -> int:
        """Return the number of cards in the hand."""
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Hand):
            return NotImplemented
        return Counter(self._cards) == Counter(other._cards)

    def __str__(self) -> str:
        cards_str = ", ".join(str(card) for card in self._cards)
        if self.is_empty:
            return f"[{cards_str}] (Empty)"
        if self.is_bust:
            return f"[{cards_str}] (Bust)"
        return f"[{cards_str}] (Value: {self.value})"

    def __repr__(self) -> str:
        return f"Hand({self._cards!r}, value={self.value})"


class Outcome(Enum):
    """Result of a player hand against the dealer."""

    BLACKJACK = auto()
    WIN = auto()
    LOSE = auto()
    PUSH = auto()

    def __str__(self) -> str:
        return self.name.title()


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> Outcome:
    """
    Compare player and dealer hands.

    Raises:
        ValueError: If either hand has no cards
    """
    if player_hand.is_empty or dealer_hand.is_empty:
        raise ValueError("Cannot evaluate an empty hand")

    # Dealer blackjack only pushes against another blackjack
    if dealer_hand.is_blackjack:
        return Outcome.PUSH if player_hand.is_blackjack else Outcome.LOSE

    if player_hand.is_blackjack:
        return Outcome.BLACKJACK

    # Player busts always loses
    if player_hand.is_bust:
        return Outcome.LOSE

    if dealer_hand.is_bust:
        return Outcome.WIN

    player_value = player_hand.value
    dealer_value = dealer_hand.value
    if player_value > dealer_value:
        return Outcome.WIN
    if dealer_value > player_value:
        return Outcome.LOSE
    return Outcome.PUSH
