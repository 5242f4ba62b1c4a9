"""The kinds of game a player can announce."""

from __future__ import annotations

from enum import Enum

from skat_engine.card import Suit


class GameType(Enum):
    """The Skat game a player announced."""

    GRAND = "Grand"
    CLUBS = "Clubs"
    SPADES = "Spades"
    HEARTS = "Hearts"
    DIAMONDS = "Diamonds"
    NULL = "Null"
    RAMSCH = "Ramsch"
    NONE = "None"

    @classmethod
    def from_suit(cls, suit: Suit) -> GameType:
        """The suit game in which the given suit is trump."""
        return _BY_SUIT[suit]

    def __str__(self) -> str:
        return self.value


_BY_SUIT = {
    Suit.CLUBS: GameType.CLUBS,
    Suit.SPADES: GameType.SPADES,
    Suit.HEARTS: GameType.HEARTS,
    Suit.DIAMONDS: GameType.DIAMONDS,
}