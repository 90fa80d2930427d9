"""Blackjack cards, hands, and hand valuation - embeddable and UI-agnostic."""

from blackjack_hand.cards import Card, Rank, Suit
from blackjack_hand.errors import BlackjackHandError, CardParseError
from blackjack_hand.hand import Hand, Outcome, evaluate_hands
from blackjack_hand.log import configure_logging
from blackjack_hand.valuation import HandValue, best_total, classify, is_soft_total

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "Hand",
    "HandValue",
    "Outcome",
    "evaluate_hands",
    "best_total",
    "classify",
    "is_soft_total",
    "configure_logging",
    "BlackjackHandError",
    "CardParseError",
]
