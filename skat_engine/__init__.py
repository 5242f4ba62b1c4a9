"""Cards, dealing and bidding estimates for the card game Skat."""

__version__ = "0.1.0"
__all__ = ["card", "cardholder", "deck", "game", "gametype"]