"""Property-based tests for deck shuffling, hand values and round play."""

from hypothesis import given, settings
from hypothesis import strategies as st

from core.cards import Card, Deck, Rank, Suit, build_deck, shuffle_deck
from core.game import BlackjackGame, GameState, RoundOutcome
from core.hand import Hand, get_hand_value

cards = st.builds(Card, st.sampled_from(Rank), st.sampled_from(Suit))


@given(st.randoms(use_true_random=False))
def test_shuffle_is_always_a_permutation(rng):
    deck = build_deck()
    shuffled = shuffle_deck(deck, rng)
    assert len(shuffled) == 52
    assert set(shuffled) == set(deck)
    assert deck == build_deck()


@given(st.lists(cards, max_size=12))
def test_hand_value_counts_at_most_one_ace_high(hand_cards):
    hard = sum(1 if c.is_ace else c.value for c in hand_cards)
    has_ace = any(c.is_ace for c in hand_cards)

    expected = hard + 10 if has_ace and hard + 10 <= 21 else hard
    assert get_hand_value(hand_cards) == expected


@given(st.lists(cards, min_size=1, max_size=12))
def test_soft_hand_is_never_busted(hand_cards):
    hand = Hand(cards=list(hand_cards))
    if hand.is_soft:
        assert hand.value <= 21


@settings(max_examples=50)
@given(st.randoms(use_true_random=False), st.integers(min_value=0, max_value=6))
def test_round_always_resolves(rng, hits):
    """However many times the player hits, standing ends the round."""
    game = BlackjackGame(rng=rng)
    game.deal_initial()

    for _ in range(hits):
        if game.state != GameState.IN_PROGRESS:
            break
        game.hit()
    game.stand()

    assert game.state == GameState.ROUND_OVER
    assert game.outcome != RoundOutcome.IN_PROGRESS
    assert game.result_message
    if game.outcome != RoundOutcome.PLAYER_BUST:
        assert game.dealer_hand.value >= game.dealer_stands_on

    dealt = list(game.player_hand) + list(game.dealer_hand) + list(game.deck)
    assert sorted(dealt, key=repr) == sorted(build_deck(), key=repr)


@given(st.permutations(build_deck()))
def test_dealer_never_stops_below_17_with_cards_left(order):
    game = BlackjackGame(deck_factory=lambda _rng: Deck(order))
    game.deal_initial()
    game.stand()
    assert game.dealer_hand.value >= 17
