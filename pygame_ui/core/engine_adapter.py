"""Adapter connecting the core blackjack engine to the PyGame UI."""

import logging
import os
from dataclasses import dataclass
from random import Random
from typing import Callable, Optional

from core.cards import Card
from core.game.engine import BlackjackGame
from core.game.events import EventType, GameEvent
from core.game.state import GameState, RoundOutcome

logger = logging.getLogger(__name__)

CARD_BACK_ASSET = "back"


@dataclass(frozen=True)
class UICardInfo:
    """Card information for the UI layer.

    A face-down card carries no identity, so the hole card cannot leak
    through a snapshot.
    """

    value: str  # "A", "2", "K", etc. or "?" when face down
    suit: str  # "hearts", "diamonds", "clubs", "spades" or "" when face down
    face_up: bool = True
    asset_name: str = CARD_BACK_ASSET
    label: str = "Hidden card"

    @classmethod
    def from_core_card(cls, card: Card, face_up: bool = True) -> "UICardInfo":
        """Create UICardInfo from a core Card."""
        if not face_up:
            return cls.hidden()
        return cls(
            value=str(card.rank),
            suit=card.suit.asset_name,
            face_up=True,
            asset_name=card.asset_name,
            label=card.label,
        )

    @classmethod
    def hidden(cls) -> "UICardInfo":
        return cls(value="?", suit="", face_up=False)

    @property
    def is_red(self) -> bool:
        return self.suit in ("hearts", "diamonds")

    def image_path(self, asset_dir: str) -> str:
        """Path of the image for this card, e.g. 'cards/ace_of_spades.png'."""
        return os.path.join(asset_dir, f"{self.asset_name}.png")


@dataclass(frozen=True)
class GameSnapshot:
    """Snapshot of game state for UI rendering."""

    state: GameState
    player_cards: list[UICardInfo]
    dealer_cards: list[UICardInfo]
    dealer_hole_card_hidden: bool
    player_value: int
    dealer_value_label: str
    cards_remaining: int
    can_hit: bool
    can_stand: bool
    outcome: RoundOutcome
    result_message: str

    @property
    def is_round_over(self) -> bool:
        return self.state == GameState.ROUND_OVER


class EngineAdapter:
    """Adapter between the core BlackjackGame and PyGame UI.

    Owns the game session, subscribes to engine events and translates
    them to UI callbacks.
    """

    def __init__(
        self,
        rng: Random | None = None,
        dealer_stands_on: int = 17,
        game: BlackjackGame | None = None,
    ):
        """Initialize the adapter.

        Args:
            rng: Random number generator for shuffling
            dealer_stands_on: Dealer draws while below this total
            game: Existing engine to wrap (a new one is created otherwise)
        """
        self.game = game or BlackjackGame(rng=rng, dealer_stands_on=dealer_stands_on)

        # UI callbacks
        self._on_card_dealt: Optional[Callable[[str, UICardInfo], None]] = None
        self._on_round_over: Optional[Callable[[RoundOutcome, str], None]] = None
        self._on_dealer_reveal: Optional[Callable[[UICardInfo], None]] = None
        self._on_invalid_action: Optional[Callable[[str], None]] = None

        self.game.subscribe(self._handle_event)

    def _handle_event(self, event: GameEvent) -> None:
        """Handle events from the core engine."""
        etype = event.event_type
        data = event.data

        if etype == EventType.CARD_DEALT:
            if self._on_card_dealt:
                self._on_card_dealt(data.get("hand", "player"), self._card_info(data.get("card", "??")))
        elif etype == EventType.DEALER_REVEALS:
            if self._on_dealer_reveal:
                self._on_dealer_reveal(self._card_info(data.get("card", "??")))
        elif etype == EventType.ROUND_ENDED:
            if self._on_round_over:
                self._on_round_over(self.game.outcome, data.get("message", ""))
        elif etype == EventType.INVALID_ACTION:
            if self._on_invalid_action:
                self._on_invalid_action(data.get("message", "Invalid action"))

    @staticmethod
    def _card_info(card_str: str) -> UICardInfo:
        """Convert an event's card string into UI card info."""
        if card_str == "??":
            return UICardInfo.hidden()
        return UICardInfo.from_core_card(Card.from_string(card_str))

    # Public API for UI

    def set_callbacks(
        self,
        on_card_dealt: Callable[[str, UICardInfo], None] = None,
        on_round_over: Callable[[RoundOutcome, str], None] = None,
        on_dealer_reveal: Callable[[UICardInfo], None] = None,
        on_invalid_action: Callable[[str], None] = None,
    ) -> None:
        """Set UI callback functions.

        Args:
            on_card_dealt: Called when a card is dealt (hand_type, card_info)
            on_round_over: Called when the round ends (outcome, message)
            on_dealer_reveal: Called when the dealer turns the hole card
            on_invalid_action: Called when an action was ignored (message)
        """
        self._on_card_dealt = on_card_dealt
        self._on_round_over = on_round_over
        self._on_dealer_reveal = on_dealer_reveal
        self._on_invalid_action = on_invalid_action

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self.game.state

    def get_snapshot(self) -> GameSnapshot:
        """Get a snapshot of the current game state."""
        hole_hidden = not self.game.is_round_over

        dealer_cards = [
            UICardInfo.from_core_card(card, face_up=not (i == 1 and hole_hidden))
            for i, card in enumerate(self.game.dealer_hand.cards)
        ]
        player_cards = [UICardInfo.from_core_card(c) for c in self.game.player_hand.cards]

        return GameSnapshot(
            state=self.game.state,
            player_cards=player_cards,
            dealer_cards=dealer_cards,
            dealer_hole_card_hidden=hole_hidden,
            player_value=self.game.player_hand.value,
            dealer_value_label="?" if hole_hidden else str(self.game.dealer_hand.value),
            cards_remaining=self.game.cards_remaining,
            can_hit=self.game.can_hit,
            can_stand=self.game.can_stand,
            outcome=self.game.outcome,
            result_message=self.game.result_message,
        )

    # Game actions

    def deal(self) -> None:
        """Deal a new round."""
        self.game.deal_initial()

    def new_game(self) -> None:
        """Start a new game (deals a fresh round)."""
        logger.debug("New game requested")
        self.game.new_game()

    def hit(self) -> bool:
        """Player hits."""
        return self.game.hit()

    def stand(self) -> bool:
        """Player stands."""
        return self.game.stand()
