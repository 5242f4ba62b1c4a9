"""The 32-card Skat deck and the deal."""

from __future__ import annotations

import random

from skat_engine.card import Card, Rank, Suit
from skat_engine.cardholder import CardHolder

DECK_SIZE = 32

_DECK_RANKS = (
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
    Rank.TEN,
    Rank.ACE,
)


class Deck:
    """The 32 cards of the game, dealt to three players and the Skat.

    Dealing moves the cards to the holders, leaving the deck empty.
    """

    def __init__(self, shuffled: bool = True, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self.cards: list[Card] = [
            Card(suit, rank) for suit in Suit for rank in _DECK_RANKS
        ]
        if shuffled:
            self.shuffle()

    def __len__(self) -> int:
        return len(self.cards)

    def shuffle(self) -> None:
        self._rng.shuffle(self.cards)

    def deal(self) -> tuple[CardHolder, CardHolder, CardHolder, CardHolder]:
        """Deal 3-Skat-4-3 from the top of the deck.

        Returns the three players and the Skat; the first player's hand is sorted.
        """
        if len(self.cards) < DECK_SIZE:
            raise ValueError("the deck has already been dealt")

        hands: list[list[Card]] = [[], [], []]
        skat: list[Card] = []

        def deal_rounds(rounds: int) -> None:
            for _ in range(rounds):
                for hand in hands:
                    hand.append(self.cards.pop())

        deal_rounds(3)
        skat.extend(self.cards.pop() for _ in range(2))
        deal_rounds(4)
        deal_rounds(3)

        player1 = CardHolder("Player 1", hands[0])
        player1.sort_cards()
        player2 = CardHolder("Player 2", hands[1])
        player3 = CardHolder("Player 3", hands[2])
        return player1, player2, player3, CardHolder("Skat", skat)