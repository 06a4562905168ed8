"""Tests for Hand evaluation."""

import pytest

from core.cards import Card, Rank, Suit
from core.hand import Hand, evaluate_hands, get_hand_value


class TestGetHandValue:
    """Tests for the hand scorer."""

    def test_empty_hand_is_zero(self):
        assert get_hand_value([]) == 0

    @pytest.mark.parametrize(
        "names, expected",
        [
            (["AS", "KH"], 21),
            (["AS", "AH"], 12),
            (["AS", "AH", "9C"], 21),
            (["KS", "QH", "2C"], 22),
            (["AS", "AH", "AC", "AD"], 14),
            (["AS", "5H", "8C"], 14),
            (["10S", "6H"], 16),
            (["7S", "7H", "7C"], 21),
            (["AS", "AH", "AC", "9D"], 12),
        ],
    )
    def test_values(self, make_hand, names, expected):
        assert get_hand_value(make_hand(*names).cards) == expected

    def test_aces_downgrade_one_at_a_time(self, make_hand):
        # A-A-9: 31, one downgrade reaches 21 so the second ace stays at 11
        assert get_hand_value(make_hand("AS", "AH", "9C")) == 21
        # A-A-9-K: 41 → 31 → 21
        assert get_hand_value(make_hand("AS", "AH", "9C", "KD")) == 21

    def test_accepts_any_iterable(self):
        cards = (Card(Rank.ACE, Suit.SPADES), Card(Rank.SIX, Suit.HEARTS))
        assert get_hand_value(iter(cards)) == 17


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self):
        hand = Hand()
        assert len(hand) == 0
        assert hand.value == 0
        assert not hand.is_soft
        assert not hand.is_blackjack
        assert not hand.is_busted

    def test_add_card(self):
        hand = Hand()
        hand.add_card(Card(Rank.TEN, Suit.SPADES))
        assert len(hand) == 1
        assert hand.value == 10

    def test_value_follows_contents(self):
        """Value is recomputed every time the hand changes."""
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        assert hand.value == 11
        hand.add_card(Card(Rank.KING, Suit.SPADES))
        assert hand.value == 21
        hand.add_card(Card(Rank.FIVE, Suit.SPADES))
        assert hand.value == 16
        hand.clear()
        assert hand.value == 0

    def test_hard_hand_value(self, hard_16_hand):
        assert hard_16_hand.value == 16
        assert hard_16_hand.is_hard

    def test_soft_hand_value(self, soft_17_hand):
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_blackjack(self, blackjack_hand):
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.value == 21

    def test_three_card_21_is_not_blackjack(self, make_hand):
        hand = make_hand("7S", "7H", "7C")
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_bust(self, bust_hand):
        assert bust_hand.is_busted
        assert bust_hand.value == 26

    def test_soft_to_hard_transition(self):
        hand = Hand()
        hand.add_card(Card(Rank.ACE, Suit.SPADES))
        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        # Ace now counts as 1
        assert hand.value == 14
        assert hand.is_hard

    def test_str(self, make_hand):
        assert str(make_hand("AS", "6H")).endswith("(soft 17)")
        assert str(make_hand("KS", "QH", "2C")).endswith("(BUST)")
        assert str(make_hand("10S", "6H")).endswith("(16)")


class TestEvaluateHands:
    """Tests for comparing hands."""

    def test_higher_player_wins(self, make_hand):
        assert evaluate_hands(make_hand("KS", "QS"), make_hand("KH", "8H")) == 1

    def test_higher_dealer_wins(self, make_hand):
        assert evaluate_hands(make_hand("KS", "7S"), make_hand("KH", "8H")) == -1

    def test_equal_is_push(self, make_hand):
        assert evaluate_hands(make_hand("KS", "8S"), make_hand("QH", "8H")) == 0

    def test_player_bust_loses_even_if_dealer_busts(self, make_hand):
        player = make_hand("KS", "QS", "5S")
        dealer = make_hand("KH", "QH", "5H")
        assert evaluate_hands(player, dealer) == -1

    def test_dealer_bust_loses(self, make_hand):
        assert evaluate_hands(make_hand("2S", "3S"), make_hand("KH", "QH", "5H")) == 1

    def test_blackjack_is_compared_by_total(self, make_hand):
        assert evaluate_hands(make_hand("AS", "KS"), make_hand("7H", "7D", "7C")) == 0
