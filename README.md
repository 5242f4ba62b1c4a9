# skat_engine

A small library for the German card game Skat. It models the 32-card deck,
deals hands to three players and the Skat, and estimates how high a hand
can bid in a suit game.

## Installation

```
pip install .
```

To run the tests, install with the `test` extra:

```
pip install ".[test]"
pytest
```

## Cards

`skat_engine.card` holds `Suit`, `Rank` and `Card`. Cards are written as two
symbols: the suit, then the rank.

- Suits: `K` Clubs, `P` Spades, `H` Hearts, `C` Diamonds
- Ranks: `7`, `8`, `9`, `B`/`J` Jack, `D`/`Q` Queen, `K` King, `Z`/`T` Ten, `A` Ace

```python
from skat_engine.card import Card, Rank, Suit

jack = Card.parse("KB")          # Jack of Clubs
assert jack == Card(Suit.CLUBS, Rank.JACK)
print(jack, jack.points())       # KB 2
print(jack.is_high_card())       # True
print(jack.suit_value())         # 0
print(Suit.SPADES.reiz_factor()) # 11
```

A symbol that cannot be read, or a name that is not two symbols long,
raises `ValueError`. Cards print with the German letters (`B`, `D`, `Z`).

## Hands and bidding

A `CardHolder` (in `skat_engine.cardholder`) is a player's hand or the Skat.

```python
from skat_engine.cardholder import CardHolder

hand = CardHolder.from_names(
    "Player 1",
    ["HB", "KB", "PB", "PA", "PZ", "PK", "P9", "KA", "H7", "C8"],
)
hand.sort_cards()
print(hand)                      # Player 1: [KB, PB, HB, PA, PZ, PK, P9, KA, H7, C8]
print(hand.total_points())       # 42
print(hand.trump_suit_cards())   # (Suit.SPADES, 4, 25): suit, card count, points
print(hand.num_jacks)            # 3
print(hand.reizen_max())         # 44
print(hand.game_type)            # Spades
```

`reizen_max()` evaluates the hand once and then returns the stored value;
`reizen_v1()` evaluates it again. A result of 0 means pass. A suit game is
bid with at least five trumps (jacks plus the longest suit) and an ace in a
side suit, or with six trumps or more. The bid is the suit's value times
"with/without n jacks" plus one, and the chosen suit is stored as the
holder's `game_type` (a `GameType` from `skat_engine.gametype`). As written,
the evaluation never picks Clubs as the trump suit.

Other helpers: `holds_card(suit, rank)`, `num_cards_rank(rank)`,
`num_cards_suit(suit)` and `num_cards_all_suits()` (jacks not counted in
suits), `cards_to_string()`, and `CardHolder.with_skat(player, skat)`, which
joins a hand with the Skat into one holder named after the player.

## Dealing and a game

```python
import random

from skat_engine.deck import Deck
from skat_engine.game import Game

deck = Deck(rng=random.Random(7))  # shuffled unless shuffled=False
player1, player2, player3, skat = deck.deal()

game = Game(0)                   # player 0 is in forehand (Vorhand)
game.sort_cards()
winner = game.reizen()           # index of the highest bidder, or None
print(game.reizen_simple())      # the player holding the most jacks
print(game.play_with_4_jacks())  # (without Skat, with Skat)
print(game.player_id(0))
print(game.skat)
```

`Deck.deal()` deals 3 cards each, 2 to the Skat, then 4 and 3 each, and
sorts the first player's hand. A deck can be dealt once; dealing again
raises `ValueError`. `Game` deals from a fresh shuffled deck unless one is
passed as `deck=`. `reizen()` raises `ValueError` when `vorhand` is not 0,
1 or 2; on equal bids the player earlier in seat order wins.

## What it does not do

There is no trick play, no scoring of a finished game, no actual bidding
dialogue between players and no command-line program. The library deals
cards and estimates bids; playing the hand is left to the caller.