"""Hand scoring and comparison for a single blackjack round."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator

from core.cards import Card

BLACKJACK = 21


def _hard_total(cards: Iterable[Card]) -> tuple[int, int]:
    """Return (total with every Ace at 1, number of Aces)."""
    total = 0
    aces = 0
    for card in cards:
        if card.is_ace:
            aces += 1
            total += 1
        else:
            total += card.value
    return total, aces


def get_hand_value(cards: Iterable[Card]) -> int:
    """
    Best blackjack total for some cards.

    Every Ace starts at 11; while the total is over 21, Aces are dropped
    to 1 one at a time. No cards score 0.
    """
    hard, aces = _hard_total(cards)
    total = hard + 10 * aces
    while total > BLACKJACK and aces:
        total -= 10
        aces -= 1
    return total


@dataclass
class Hand:
    """Cards held by the player or the dealer, scored on demand."""

    cards: list[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.cards.append(card)

    def clear(self) -> None:
        self.cards.clear()

    @property
    def value(self) -> int:
        """Current best total; recomputed from the cards every time."""
        return get_hand_value(self.cards)

    @property
    def is_soft(self) -> bool:
        """True when an Ace is being counted as 11."""
        hard, aces = _hard_total(self.cards)
        return aces > 0 and hard + 10 <= BLACKJACK

    @property
    def is_hard(self) -> bool:
        return not self.is_soft

    @property
    def is_blackjack(self) -> bool:
        """Two-card 21. Informational only; it pays the same as any win."""
        return len(self.cards) == 2 and self.value == BLACKJACK

    @property
    def is_busted(self) -> bool:
        return self.value > BLACKJACK

    @property
    def num_cards(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def __str__(self) -> str:
        if self.is_busted:
            total = "BUST"
        elif self.is_soft:
            total = f"soft {self.value}"
        else:
            total = str(self.value)
        return f"{' '.join(map(str, self.cards))} ({total})"

    def __repr__(self) -> str:
        return f"Hand({self.cards!r}, value={self.value})"


def evaluate_hands(player_hand: Hand, dealer_hand: Hand) -> int:
    """
    Settle a finished round.

    Returns:
        1 if the player wins, -1 if the dealer wins, 0 for a push.
        A busted player loses even when the dealer also busts.
    """
    if player_hand.is_busted:
        return -1
    if dealer_hand.is_busted:
        return 1

    diff = player_hand.value - dealer_hand.value
    return (diff > 0) - (diff < 0)
