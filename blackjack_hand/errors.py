"""Exceptions raised by blackjack_hand."""


class BlackjackHandError(Exception):
    """Base class for library errors."""


class CardParseError(BlackjackHandError, ValueError):
    """Raised when a card string cannot be parsed."""
