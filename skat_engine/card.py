"""Playing cards of Skat: suits, ranks and single cards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Suit(Enum):
    """The four suits, valued 0 (Clubs) to 3 (Diamonds)."""

    CLUBS = 0
    SPADES = 1
    HEARTS = 2
    DIAMONDS = 3

    def reiz_factor(self) -> int:
        """Base value of the suit when bidding."""
        return _SUIT_REIZ_FACTORS[self]

    @classmethod
    def from_char(cls, symbol: str) -> Suit:
        """Parse a suit symbol: K = Clubs, P = Spades, H = Hearts, C = Diamonds."""
        try:
            return _SUIT_BY_SYMBOL[symbol]
        except KeyError:
            raise ValueError(
                "Unknown symbol: use K = Club, P = Spades, H = Hearts, C = Diamonds"
            ) from None

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]


_SUIT_REIZ_FACTORS = {
    Suit.CLUBS: 12,
    Suit.SPADES: 11,
    Suit.HEARTS: 10,
    Suit.DIAMONDS: 9,
}

_SUIT_SYMBOLS = {
    Suit.CLUBS: "K",
    Suit.SPADES: "P",
    Suit.HEARTS: "H",
    Suit.DIAMONDS: "C",
}

_SUIT_BY_SYMBOL = {symbol: suit for suit, symbol in _SUIT_SYMBOLS.items()}


class Rank(Enum):
    """The eight ranks, valued by their display symbol."""

    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    JACK = "B"
    QUEEN = "D"
    KING = "K"
    TEN = "Z"
    ACE = "A"

    def points(self) -> int:
        """Points the rank counts when scoring a game."""
        return _RANK_POINTS[self]

    @classmethod
    def from_char(cls, symbol: str) -> Rank:
        """Parse a rank symbol; German and English letters are accepted."""
        try:
            return _RANK_BY_SYMBOL[symbol]
        except KeyError:
            raise ValueError(
                "Unknown symbol: use 7,8,9, Z/T = ten, B/J = Jack, "
                "D/Q = Queen, K = King, A = Ace"
            ) from None

    def __str__(self) -> str:
        return self.value


_RANK_POINTS = {
    Rank.SEVEN: 0,
    Rank.EIGHT: 0,
    Rank.NINE: 0,
    Rank.JACK: 2,
    Rank.QUEEN: 3,
    Rank.KING: 4,
    Rank.TEN: 10,
    Rank.ACE: 11,
}

_RANK_BY_SYMBOL = {
    "7": Rank.SEVEN,
    "8": Rank.EIGHT,
    "9": Rank.NINE,
    "B": Rank.JACK,
    "J": Rank.JACK,
    "D": Rank.QUEEN,
    "Q": Rank.QUEEN,
    "K": Rank.KING,
    "Z": Rank.TEN,
    "T": Rank.TEN,
    "A": Rank.ACE,
}

_HIGH_RANKS = frozenset({Rank.JACK, Rank.KING, Rank.TEN, Rank.ACE})


@dataclass(frozen=True)
class Card:
    """A single playing card."""

    suit: Suit
    rank: Rank

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse a two-symbol card name such as "KB" or "KJ" for the Jack of Clubs."""
        if len(text) != 2:
            raise ValueError("Need two symbols")
        return cls(Suit.from_char(text[0]), Rank.from_char(text[1]))

    def is_high_card(self) -> bool:
        """Jack, Ace, Ten and King are high; Queen, Nine, Eight and Seven are low."""
        return self.rank in _HIGH_RANKS

    def suit_value(self) -> int:
        """0 = Clubs, 1 = Spades, 2 = Hearts, 3 = Diamonds."""
        return self.suit.value

    def points(self) -> int:
        return self.rank.points()

    def __str__(self) -> str:
        return f"{self.suit}{self.rank}"