"""Core blackjack engine - 100% UI-agnostic."""

from core.cards import Card, Deck, Rank, Suit, build_deck, shuffle_deck
from core.hand import Hand, get_hand_value

__all__ = [
    "Card",
    "Deck",
    "Rank",
    "Suit",
    "build_deck",
    "shuffle_deck",
    "Hand",
    "get_hand_value",
]
