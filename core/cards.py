"""Playing cards, the 52-card deck and the shuffle."""

from dataclasses import dataclass
from enum import Enum, auto
from random import Random
from typing import Iterable, Iterator


class Suit(Enum):
    """Card suits, in the order the ordered deck is built."""

    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return _SUIT_SYMBOLS[self]

    @property
    def display_name(self) -> str:
        """'Hearts', 'Spades', ..."""
        return self.name.title()

    @property
    def asset_name(self) -> str:
        return self.name.lower()

    @property
    def is_red(self) -> bool:
        return self in (Suit.HEARTS, Suit.DIAMONDS)


_SUIT_SYMBOLS = {
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
    Suit.SPADES: "♠",
}


class Rank(Enum):
    """Card ranks, Two low through Ace high."""

    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13
    ACE = 14

    @property
    def is_face(self) -> bool:
        return self in (Rank.JACK, Rank.QUEEN, Rank.KING)

    @property
    def is_ace(self) -> bool:
        return self is Rank.ACE

    def __str__(self) -> str:
        if self.value <= 10:
            return str(self.value)
        return self.name[0]

    @property
    def blackjack_value(self) -> int:
        """Points before any Ace adjustment: pips, 10 for faces, 11 for an Ace."""
        if self.is_ace:
            return 11
        return 10 if self.is_face else self.value

    @property
    def asset_name(self) -> str:
        """Rank part of an image name: '2'..'10', 'jack', 'queen', 'king', 'ace'."""
        if self.value <= 10:
            return str(self.value)
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Card:
    """An immutable card. Two cards with the same rank and suit are equal."""

    rank: Rank
    suit: Suit

    def __str__(self) -> str:
        return f"{self.rank}{self.suit}"

    def __repr__(self) -> str:
        return f"Card({self.rank.name}, {self.suit.name})"

    @property
    def value(self) -> int:
        return self.rank.blackjack_value

    @property
    def is_ace(self) -> bool:
        return self.rank.is_ace

    @property
    def asset_name(self) -> str:
        """Image file stem, e.g. 'queen_of_hearts' or '10_of_clubs'."""
        return f"{self.rank.asset_name}_of_{self.suit.asset_name}"

    @property
    def label(self) -> str:
        """Readable name, e.g. 'Q of Hearts'."""
        return f"{self.rank} of {self.suit.display_name}"

    @classmethod
    def from_string(cls, s: str) -> "Card":
        """
        Parse a short card name: rank then suit, e.g. 'AS', '10h', 'K♣'.

        Raises:
            ValueError: If the rank or suit is not recognised
        """
        s = s.strip().upper()
        if len(s) < 2:
            raise ValueError(f"Invalid card string: {s!r}")

        rank = _RANKS_BY_TEXT.get(s[:-1])
        suit = _SUITS_BY_TEXT.get(s[-1])
        if rank is None:
            raise ValueError(f"Invalid rank: {s[:-1]!r}")
        if suit is None:
            raise ValueError(f"Invalid suit: {s[-1]!r}")
        return cls(rank, suit)


_RANKS_BY_TEXT = {str(rank): rank for rank in Rank}
_RANKS_BY_TEXT["T"] = Rank.TEN
_SUITS_BY_TEXT = {suit.name[0]: suit for suit in Suit}
_SUITS_BY_TEXT.update({symbol: suit for suit, symbol in _SUIT_SYMBOLS.items()})


def build_deck() -> list[Card]:
    """All 52 cards, suits outer and ranks inner. Always the same order."""
    return [Card(rank, suit) for suit in Suit for rank in Rank]


def shuffle_deck(deck: Iterable[Card], rng: Random | None = None) -> list[Card]:
    """
    Fisher-Yates shuffle into a new list; ``deck`` is left as it was.

    For i from the last index down to 1, swap position i with a uniformly
    chosen j in [0, i].
    """
    rng = rng or Random()
    cards = list(deck)
    for i in range(len(cards) - 1, 0, -1):
        j = rng.randint(0, i)
        cards[i], cards[j] = cards[j], cards[i]
    return cards


class Deck:
    """Undealt cards for one round. Cards are dealt from the front."""

    def __init__(self, cards: Iterable[Card] | None = None) -> None:
        """
        Args:
            cards: Cards in dealing order; an ordered full deck if omitted
        """
        self._cards: list[Card] = build_deck() if cards is None else list(cards)

    @classmethod
    def fresh(cls, rng: Random | None = None) -> "Deck":
        """A new shuffled 52-card deck."""
        return cls(shuffle_deck(build_deck(), rng))

    def draw(self) -> Card:
        """
        Take the front card.

        Raises:
            IndexError: If the deck is empty
        """
        if not self._cards:
            raise IndexError("Cannot draw from empty deck")
        return self._cards.pop(0)

    @property
    def cards(self) -> tuple[Card, ...]:
        return tuple(self._cards)

    @property
    def cards_remaining(self) -> int:
        return len(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __bool__(self) -> bool:
        return bool(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self._cards)
