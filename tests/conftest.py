"""Pytest fixtures for blackjack tests."""

import pytest
from random import Random

from core.cards import Card, Deck, Rank, Suit
from core.hand import Hand
from core.game import BlackjackGame


def cards_from(*names: str) -> list[Card]:
    """Build cards from short strings like 'AS', '10H', 'KC'."""
    return [Card.from_string(s) for s in names]


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return Random(42)


@pytest.fixture
def make_hand():
    """Factory for hands built from card strings."""

    def _make(*names: str) -> Hand:
        return Hand(cards=cards_from(*names))

    return _make


@pytest.fixture
def stacked_game():
    """Factory for a dealt game whose deck is in a known order.

    Cards are dealt player, dealer, player, dealer; the rest are drawn
    in order by hits and the dealer.
    """

    def _make(*names: str) -> BlackjackGame:
        order = cards_from(*names)
        game = BlackjackGame(deck_factory=lambda _rng: Deck(order))
        game.deal_initial()
        return game

    return _make


@pytest.fixture
def game(rng):
    """A new game instance (not dealt yet)."""
    return BlackjackGame(rng=rng)


@pytest.fixture
def dealt_game(game):
    """A game with the first round dealt."""
    game.deal_initial()
    return game


@pytest.fixture
def blackjack_hand():
    """A natural blackjack hand."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.KING, Suit.HEARTS))
    return hand


@pytest.fixture
def soft_17_hand():
    """A soft 17 hand (A-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.ACE, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def hard_16_hand():
    """A hard 16 hand (10-6)."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    return hand


@pytest.fixture
def bust_hand():
    """A busted hand."""
    hand = Hand()
    hand.add_card(Card(Rank.TEN, Suit.SPADES))
    hand.add_card(Card(Rank.SIX, Suit.HEARTS))
    hand.add_card(Card(Rank.KING, Suit.CLUBS))
    return hand
