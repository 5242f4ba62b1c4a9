import random

import pytest

from skat_engine.card import Card, Rank, Suit
from skat_engine.cardholder import CardHolder
from skat_engine.deck import Deck
from skat_engine.game import Game
from skat_engine.gametype import GameType

STRONG = ["KB", "PB", "HB", "CB", "PA", "PZ", "PK", "PD", "P9", "P8"]
WEAK_LOW = ["K7", "K8", "K9", "H7", "H8", "H9", "C7", "C8", "C9", "P7"]
WEAK_HIGH = ["KA", "KZ", "KK", "KD", "HA", "HZ", "HK", "HD", "CA", "CZ"]
SKAT = ["CK", "CD"]


def _game(hands, skat, vorhand=0):
    game = Game(vorhand, deck=Deck(rng=random.Random(0)))
    game.players = [
        CardHolder.from_names(f"Player {i + 1}", names) for i, names in enumerate(hands)
    ]
    game.skat = CardHolder.from_names("Skat", skat)
    return game


def test_new_game_deals_cards():
    game = Game(deck=Deck(rng=random.Random(1)))
    assert [len(p.cards) for p in game.players] == [10, 10, 10]
    assert len(game.skat.cards) == 2
    assert game.vorhand == 0
    assert game.player_playing is None


def test_default_game_uses_all_cards():
    game = Game(2)
    dealt = [c for p in game.players for c in p.cards] + game.skat.cards
    assert set(dealt) == {Card(s, r) for s in Suit for r in Rank}
    assert game.vorhand == 2


@pytest.mark.parametrize("vorhand", [0, 1, 2])
def test_reizen_picks_strong_hand(vorhand):
    game = _game([WEAK_LOW, STRONG, WEAK_HIGH], SKAT, vorhand)
    assert game.reizen() == 1
    assert game.player_playing == 1
    winner = game.player_id(1)
    assert winner.reizen_current == winner.reizen_max()
    assert winner.reizen_current > 0
    assert winner.game_type is GameType.SPADES


def test_reizen_everyone_passes():
    hands = [WEAK_LOW, WEAK_HIGH, ["KB", "PB", "HB", "CB", "PA", "PZ", "PK", "PD", "P9", "P8"]]
    game = _game([WEAK_LOW, WEAK_HIGH, WEAK_LOW], SKAT)
    assert game.reizen() is None
    assert game.player_playing is None
    assert hands[0] == WEAK_LOW


def test_reizen_invalid_vorhand():
    game = _game([WEAK_LOW, STRONG, WEAK_HIGH], SKAT, vorhand=3)
    with pytest.raises(ValueError):
        game.reizen()


def test_reizen_simple_most_jacks():
    game = _game([WEAK_LOW, STRONG, WEAK_HIGH], SKAT)
    assert game.reizen_simple() is game.player_id(1)


def test_reizen_simple_tie_keeps_first():
    game = _game([WEAK_LOW, WEAK_HIGH, WEAK_LOW], SKAT)
    assert game.reizen_simple() is game.player_id(0)


def test_four_jacks_in_hand():
    game = _game([WEAK_LOW, STRONG, WEAK_HIGH], SKAT)
    assert game.play_with_4_jacks() == (True, False)


def test_four_jacks_with_skat():
    hand = ["KB", "PB", "PA", "PZ", "PK", "PD", "P9", "P8", "CK", "CD"]
    game = _game([hand, WEAK_LOW, WEAK_HIGH], ["HB", "CB"])
    assert game.play_with_4_jacks() == (False, True)


def test_skat_without_jacks_never_completes():
    hand = ["KB", "PB", "HB", "PA", "PZ", "PK", "PD", "P9", "P8", "CB"]
    game = _game([WEAK_LOW, hand, WEAK_HIGH], ["CK", "CD"])
    assert game.play_with_4_jacks() == (True, False)


def test_sort_cards_sorts_every_holder():
    game = Game(deck=Deck(rng=random.Random(21)))
    game.sort_cards()
    for holder in [*game.players, game.skat]:
        reference = CardHolder("copy", reversed(holder.cards))
        reference.sort_cards()
        assert holder.cards == reference.cards


def test_sort_puts_jacks_first():
    game = _game([STRONG, WEAK_LOW, WEAK_HIGH], SKAT)
    game.sort_cards()
    ranks = [card.rank for card in game.player_id(0).cards]
    assert ranks[:4] == [Rank.JACK] * 4
    assert [card.suit for card in game.player_id(0).cards[:4]] == list(Suit)


def test_player_id_returns_player():
    game = _game([WEAK_LOW, STRONG, WEAK_HIGH], SKAT)
    assert game.player_id(2).cards_to_string() == ", ".join(WEAK_HIGH)