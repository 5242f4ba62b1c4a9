"""A holder of cards: one of the players or the Skat."""

from __future__ import annotations

from collections.abc import Iterable

from skat_engine.card import Card, Rank, Suit
from skat_engine.gametype import GameType

_RANK_ORDER = {
    Rank.ACE: 8,
    Rank.TEN: 7,
    Rank.KING: 6,
    Rank.QUEEN: 5,
    Rank.NINE: 3,
    Rank.EIGHT: 2,
    Rank.SEVEN: 1,
}


def _sort_key(card: Card) -> tuple[int, int, int]:
    # Jacks first by suit, then the other cards grouped by suit, highest rank first.
    if card.rank is Rank.JACK:
        return (0, card.suit.value, 0)
    return (1, card.suit.value, -_RANK_ORDER[card.rank])


class CardHolder:
    """A player or the Skat, holding any number of cards."""

    def __init__(self, name: str, cards: Iterable[Card]) -> None:
        self.name = name
        self.cards: list[Card] = list(cards)
        self.reizen_current = 0
        self.game_type = GameType.NONE
        self._reizen_max: int | None = None

    @classmethod
    def with_skat(cls, player: CardHolder, skat: CardHolder) -> CardHolder:
        """The player's hand merged with the Skat, named after the player."""
        return cls(player.name, [*player.cards, *skat.cards])

    @classmethod
    def from_names(cls, name: str, card_names: Iterable[str]) -> CardHolder:
        """Build a holder from card names like "KB" or "KJ"."""
        return cls(name, [Card.parse(card_name) for card_name in card_names])

    @property
    def num_jacks(self) -> int:
        return self.num_cards_rank(Rank.JACK)

    def total_points(self) -> int:
        return sum(card.points() for card in self.cards)

    def holds_card(self, suit: Suit, rank: Rank) -> bool:
        return Card(suit, rank) in self.cards

    def num_cards_rank(self, rank: Rank) -> int:
        return sum(1 for card in self.cards if card.rank is rank)

    def num_cards_suit(self, suit: Suit) -> int:
        """Number of cards of the suit, jacks not counted."""
        return sum(
            1 for card in self.cards if card.rank is not Rank.JACK and card.suit is suit
        )

    def num_cards_all_suits(self) -> tuple[int, int, int, int]:
        """Cards per suit (Clubs, Spades, Hearts, Diamonds), jacks not counted."""
        clubs, spades, hearts, diamonds = (self.num_cards_suit(suit) for suit in Suit)
        return clubs, spades, hearts, diamonds

    def _suit_counts_and_points(self) -> tuple[list[int], list[int]]:
        counts = [0] * len(Suit)
        points = [0] * len(Suit)
        for card in self.cards:
            if card.rank is not Rank.JACK:
                counts[card.suit.value] += 1
                points[card.suit.value] += card.points()
        return counts, points

    def reizen_max(self) -> int:
        """The highest bid this hand supports, evaluated once on first use."""
        if self._reizen_max is None:
            self.reizen_v1()
        return self._reizen_max

    def reizen_v1(self) -> int:
        """Evaluate the hand for bidding; 0 means pass.

        A suit game is bid with at least five trumps and an ace in a side suit,
        or with six trumps or more.
        """
        self._reizen_max = 0
        num_jacks = self.num_jacks

        counts, points = self._suit_counts_and_points()
        max_count = max(counts)
        trump_count = num_jacks + max_count
        if trump_count < 5:
            return 0

        aces = [0] * len(Suit)
        for card in self.cards:
            if card.rank is Rank.ACE:
                aces[card.suit.value] = 1
        aces_count = self.num_cards_rank(Rank.ACE)
        if trump_count == 5 and aces_count == 0:
            return 0

        max_suit = 0
        for index, (count, suit_points) in enumerate(zip(counts, points)):
            if count == max_count and (
                trump_count > 5 or suit_points >= 10 or num_jacks > 2
            ):
                if max_suit == 0:
                    max_suit = index
                elif aces[index] < aces[max_suit]:
                    # Prefer the suit without an ace, keeping the ace as a side card.
                    max_suit = index
        if max_suit == 0:
            return 0
        if trump_count == 5 and aces_count - aces[max_suit] == 0:
            return 0

        suit = Suit(max_suit)
        factor = abs(self._jack_factor()) + 1
        self.game_type = GameType.from_suit(suit)
        self._reizen_max = suit.reiz_factor() * factor
        return self._reizen_max

    def _jack_factor(self) -> int:
        """Positive "with n" when the Clubs jack is held, else negative "without n"."""
        num_jacks = self.num_jacks
        if num_jacks == 0:
            return -4
        if num_jacks == 4:
            return 4
        clubs, spades, hearts, _ = (self.holds_card(suit, Rank.JACK) for suit in Suit)
        if clubs:
            if spades:
                return 3 if hearts else 2
            return 1
        if not spades:
            return -3 if not hearts else -2
        return -1

    def sort_cards(self) -> None:
        """Sort for display: jacks first, then by suit, highest rank first."""
        self.cards.sort(key=_sort_key)

    def trump_suit_cards(self) -> tuple[Suit, int, int]:
        """The suit with the most cards (jacks excluded), its card count and points.

        Ties on the count go to the suit with more points, then to the higher suit.
        """
        counts, points = self._suit_counts_and_points()
        max_count = max(counts)
        max_suit = 0
        max_points = 0
        for index, (count, suit_points) in enumerate(zip(counts, points)):
            if count == max_count and suit_points > max_points:
                max_suit = index
                max_points = suit_points
        return Suit(max_suit), max_count, max_points

    def cards_to_string(self) -> str:
        return ", ".join(str(card) for card in self.cards)

    def __str__(self) -> str:
        return f"{self.name}: [{self.cards_to_string()}]"

    def __repr__(self) -> str:
        return f"CardHolder({self.name!r}, [{self.cards_to_string()}])"