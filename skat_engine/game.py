"""One game of Skat: three players and the Skat."""

from __future__ import annotations

from skat_engine.cardholder import CardHolder
from skat_engine.deck import Deck

# Seat order after the forehand (Vorhand): middlehand, rearhand.
_FOLLOWING_SEATS = {0: (1, 2), 1: (2, 0), 2: (0, 1)}


class Game:
    """A game with three players and the Skat, dealt from a deck on creation."""

    def __init__(self, vorhand: int = 0, deck: Deck | None = None) -> None:
        if deck is None:
            deck = Deck(shuffled=True)
        player1, player2, player3, skat = deck.deal()
        self.players: list[CardHolder] = [player1, player2, player3]
        self.skat = skat
        self.vorhand = vorhand
        self.player_playing: int | None = None

    def reizen(self) -> int | None:
        """Index of the player with the highest bid, or None if everyone passes.

        On equal bids the player earlier in seat order keeps the game.
        """
        try:
            mittelhand, hinterhand = _FOLLOWING_SEATS[self.vorhand]
        except KeyError:
            raise ValueError(f"Invalid player number: {self.vorhand}") from None

        best = self.vorhand
        for candidate in (mittelhand, hinterhand):
            if self.players[candidate].reizen_max() > self.players[best].reizen_max():
                best = candidate

        winner = self.players[best]
        if winner.reizen_max() == 0:
            return None
        winner.reizen_current = winner.reizen_max()
        self.player_playing = best
        return best

    def reizen_simple(self) -> CardHolder:
        """The player holding the most jacks; earlier players win ties."""
        best = self.players[0]
        for player in self.players[1:]:
            if player.num_jacks > best.num_jacks:
                best = player
        return best

    def play_with_4_jacks(self) -> tuple[bool, bool]:
        """Whether a player holds all four jacks, without and with the Skat."""
        without_skat = any(player.num_jacks == 4 for player in self.players)
        skat_jacks = self.skat.num_jacks
        if without_skat or skat_jacks == 0:
            return without_skat, False
        with_skat = any(skat_jacks + player.num_jacks == 4 for player in self.players)
        return without_skat, with_skat

    def sort_cards(self) -> None:
        """Sort every holder's cards for display."""
        for player in self.players:
            player.sort_cards()
        self.skat.sort_cards()

    def player_id(self, index: int) -> CardHolder:
        return self.players[index]