"""
This module defines the `Suit`, `Rank`, and `Card` types used to represent playing cards.

- `Suit`: An enum for the four suits of a standard deck: Clubs, Hearts,
Spades and Diamonds.

- `Rank`: An enum for the thirteen ranks of a standard deck, ordered Ace
through King.

- `Card`: An immutable playing card identified by its rank and suit. Two cards
are equal when both rank and suit match.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    CLUBS = "♣"
    HEARTS = "♥"
    SPADES = "♠"
    DIAMONDS = "♦"

    @property
    def outline_symbol(self) -> str:
        """The hollow glyph used by the terminal table."""
        return _OUTLINE_SYMBOLS[self]

    def __str__(self) -> str:
        return self.value


_OUTLINE_SYMBOLS = {
    Suit.CLUBS: "♧",
    Suit.HEARTS: "♡",
    Suit.SPADES: "♤",
    Suit.DIAMONDS: "♢",
}


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck, Ace low in declaration order.
    """

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

    @property
    def rank_str(self) -> str:
        """A short string representation of the rank."""
        if self in (Rank.ACE, Rank.JACK, Rank.QUEEN, Rank.KING):
            return self.name[0]
        return str(self.value)

    def __str__(self) -> str:
        return self.rank_str


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card.

    >>> card = Card(Rank.ACE, Suit.HEARTS)
    >>> print(card)
    A of ♥
    >>> card.short_str()
    '[A ♡]'
    """

    rank: Rank
    suit: Suit

    def __post_init__(self):
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")

    def short_str(self) -> str:
        """Compact form shown on the table, e.g. ``[10 ♢]``."""
        return f"[{self.rank.rank_str} {self.suit.outline_symbol}]"

    def __repr__(self) -> str:
        return f"Card(Rank.{self.rank.name}, Suit.{self.suit.name})"

    def __str__(self) -> str:
        return f"{self.rank.rank_str} of {self.suit}"
