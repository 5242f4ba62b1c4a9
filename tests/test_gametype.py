import pytest

from skat_engine.card import Suit
from skat_engine.gametype import GameType


@pytest.mark.parametrize(
    "suit,expected",
    [
        (Suit.CLUBS, GameType.CLUBS),
        (Suit.SPADES, GameType.SPADES),
        (Suit.HEARTS, GameType.HEARTS),
        (Suit.DIAMONDS, GameType.DIAMONDS),
    ],
)
def test_from_suit(suit, expected):
    assert GameType.from_suit(suit) is expected


@pytest.mark.parametrize(
    "game_type,text",
    [
        (GameType.GRAND, "Grand"),
        (GameType.CLUBS, "Clubs"),
        (GameType.SPADES, "Spades"),
        (GameType.HEARTS, "Hearts"),
        (GameType.DIAMONDS, "Diamonds"),
        (GameType.NULL, "Null"),
        (GameType.RAMSCH, "Ramsch"),
        (GameType.NONE, "None"),
    ],
)
def test_display(game_type, text):
    assert str(game_type) == text


def test_suit_games_are_distinct():
    assert len({GameType.from_suit(suit) for suit in Suit}) == len(Suit)