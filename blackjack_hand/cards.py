"""Suit, Rank, and Card - immutable card representations."""

from dataclasses import dataclass
from enum import Enum, auto
from functools import total_ordering

from blackjack_hand.errors import CardParseError
from blackjack_hand.log import get_logger

logger = get_logger(__name__)


@total_ordering
class Suit(Enum):
    """Card suits."""

    SPADES = auto()
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()

    def __str__(self) -> str:
        symbols = {
            Suit.SPADES: "♠",
            Suit.HEARTS: "♥",
            Suit.DIAMONDS: "♦",
            Suit.CLUBS: "♣",
        }
        return symbols[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Suit):
            return NotImplemented
        return self.value < other.value


@total_ordering
class Rank(Enum):
    """Card ranks, ace low."""

    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13

    def __str__(self) -> str:
        if 2 <= self.value <= 10:
            return str(self.value)
        return {
            Rank.ACE: "A",
            Rank.JACK: "J",
            Rank.QUEEN: "Q",
            Rank.KING: "K",
        }[self]

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value

    @property
    def points(self) -> tuple[int, ...]:
        """
        Return the candidate blackjack point values, ascending.

        Aces are the only rank with two candidates: (1, 11).
        """
        if self == Rank.ACE:
            return (1, 11)
        return (min(self.value, 10),)

    @property
    def is_ace(self) -> bool:
        """Check if this rank is an Ace."""
        return self == Rank.ACE

    @property
    def is_ten_value(self) -> bool:
        """Check if this rank has a value of 10."""
        return self.points == (10,)

    @property
    def hilo_tag(self) -> int:
        """Return the Hi-Lo count tag: +1 for 2-6, 0 for 7-9, -1 for tens and aces."""
        if self.is_ace or self.is_ten_value:
            return -1
        if self.value <= 6:
            return 1
        return 0


_RANKS_BY_SYMBOL = {
    "A": Rank.ACE,
    "2": Rank.TWO,
    "3": Rank.THREE,
    "4": Rank.FOUR,
    "5": Rank.FIVE,
    "6": Rank.SIX,
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "10": Rank.TEN,
    "T": Rank.TEN,
    "J": Rank.JACK,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
}

_SUITS_BY_SYMBOL = {
    "S": Suit.SPADES,
    "♠": Suit.SPADES,
    "H": Suit.HEARTS,
    "♥": Suit.HEARTS,
    "D": Suit.DIAMONDS,
    "♦": Suit.DIAMONDS,
    "C": Suit.CLUBS,
    "♣": Suit.CLUBS,
}


@dataclass(frozen=True, slots=True, order=True)
class Card:
    """Immutable playing card."""

    rank: Rank
    suit: Suit

    def __post_init__(self) -> None:
        if not isinstance(self.rank, Rank):
            raise TypeError(f"rank must be a Rank, got {self.rank!r}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"suit must be a Suit, got {self.suit!r}")

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def points(self) -> tuple[int, ...]:
        """Return the candidate blackjack point values, ascending."""
        return self.rank.points

    @property
    def is_ace(self) -> bool:
        """Check if this card is an Ace."""
        return self.rank.is_ace

    @property
    def is_ten_value(self) -> bool:
        """Check if this card has a value of 10."""
        return self.rank.is_ten_value

    @property
    def hilo_tag(self) -> int:
        """Return the Hi-Lo count tag of the card's rank."""
        return self.rank.hilo_tag

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Create a card from a string like 'AS', '10h', 'T♦' or 'K♣'.

        Raises:
            CardParseError: If the rank or suit is not recognised.
        """
        text = s.strip().upper()
        if len(text) < 2:
            logger.debug("Rejected card string %r: too short", s)
            raise CardParseError(f"Invalid card string: {s!r}")

        rank_str, suit_str = text[:-1], text[-1]

        if rank_str not in _RANKS_BY_SYMBOL:
            logger.debug("Rejected card string %r: bad rank %r", s, rank_str)
            raise CardParseError(f"Invalid rank: {rank_str!r}")
        if suit_str not in _SUITS_BY_SYMBOL:
            logger.debug("Rejected card string %r: bad suit %r", s, suit_str)
            raise CardParseError(f"Invalid suit: {suit_str!r}")

        return cls(_RANKS_BY_SYMBOL[rank_str], _SUITS_BY_SYMBOL[suit_str])
