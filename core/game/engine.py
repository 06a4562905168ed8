"""Blackjack game engine with state machine."""

import logging
from random import Random
from typing import Callable

from transitions import Machine

from core.cards import Card, Deck
from core.hand import Hand, evaluate_hands
from core.game.events import EventEmitter, EventType, GameEvent
from core.game.state import GameState, RoundOutcome

logger = logging.getLogger(__name__)

DEALER_STANDS_ON = 17


class BlackjackGame:
    """
    Single-player blackjack round engine using a state machine.

    This is the core game logic, completely UI-agnostic. The game owns
    the deck and both hands; callers drive it with ``deal_initial``,
    ``hit`` and ``stand`` and read state back through properties.
    Actions that do not apply in the current state are ignored rather
    than raised.
    """

    # State machine transitions
    TRANSITIONS = [
        {"trigger": "start_round", "source": "*", "dest": GameState.IN_PROGRESS},
        {"trigger": "player_busts", "source": GameState.IN_PROGRESS, "dest": GameState.ROUND_OVER},
        {"trigger": "dealer_done", "source": GameState.IN_PROGRESS, "dest": GameState.ROUND_OVER},
    ]

    def __init__(
        self,
        rng: Random | None = None,
        dealer_stands_on: int = DEALER_STANDS_ON,
        deck_factory: Callable[[Random], Deck] | None = None,
    ) -> None:
        """
        Initialize a new blackjack game.

        Args:
            rng: Random number generator used to shuffle each new deck
            dealer_stands_on: Dealer draws while below this total
            deck_factory: Builds the deck for each round (a fresh shuffled
                52-card deck if not provided)
        """
        self._rng = rng or Random()
        self._deck_factory = deck_factory or Deck.fresh
        self.dealer_stands_on = dealer_stands_on

        self._deck = Deck([])
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self._outcome = RoundOutcome.IN_PROGRESS
        self.events = EventEmitter()

        # Initialize state machine
        self.machine = Machine(
            model=self,
            states=GameState,
            transitions=self.TRANSITIONS,
            initial=GameState.NOT_STARTED,
            auto_transitions=False,
            model_attribute="_machine_state",
        )

    @property
    def state(self) -> GameState:
        """Get current game state."""
        return self._machine_state  # type: ignore[attr-defined]

    @property
    def deck(self) -> tuple[Card, ...]:
        """Remaining undealt cards, front first."""
        return self._deck.cards

    @property
    def cards_remaining(self) -> int:
        return len(self._deck)

    @property
    def is_round_over(self) -> bool:
        return self.state == GameState.ROUND_OVER

    @property
    def outcome(self) -> RoundOutcome:
        """Round outcome; IN_PROGRESS until the round is over."""
        return self._outcome

    @property
    def result_message(self) -> str:
        return self._outcome.message

    @property
    def can_hit(self) -> bool:
        """Check if hitting would draw a card."""
        return self.state == GameState.IN_PROGRESS and bool(self._deck)

    @property
    def can_stand(self) -> bool:
        """Check if standing is allowed."""
        return self.state == GameState.IN_PROGRESS

    def subscribe(
        self,
        handler: Callable[[GameEvent], None],
        event_type: EventType | None = None,
    ) -> None:
        """Subscribe to game events."""
        self.events.subscribe(handler, event_type)

    def deal_initial(self) -> None:
        """
        Start a new round from any state.

        Builds and shuffles a fresh deck, then deals player, dealer,
        player, dealer. The dealer's second card is the hole card.
        """
        self._deck = self._deck_factory(self._rng)
        self.player_hand = Hand()
        self.dealer_hand = Hand()
        self._outcome = RoundOutcome.IN_PROGRESS
        self.events.clear_history()

        # Deal: player, dealer, player, dealer (face down)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand)
        self._deal_card_to_hand(self.player_hand)
        self._deal_card_to_hand(self.dealer_hand, face_up=False)

        self.start_round()  # Trigger state transition
        self.events.emit_new(
            EventType.ROUND_STARTED,
            player_value=self.player_hand.value,
            cards_remaining=len(self._deck),
        )
        logger.info(
            "Round started: player %s, dealer shows %s",
            self.player_hand,
            self.dealer_hand.cards[0] if self.dealer_hand.cards else "nothing",
        )

    def new_game(self) -> None:
        """Start over with a fresh round (same as ``deal_initial``)."""
        self.deal_initial()

    def _deal_card_to_hand(self, hand: Hand, face_up: bool = True) -> Card | None:
        """Move the front card of the deck into a hand, if there is one."""
        if not self._deck:
            return None

        card = self._deck.draw()
        hand.add_card(card)
        is_dealer = hand is self.dealer_hand
        self.events.emit_new(
            EventType.CARD_DEALT,
            card=str(card) if face_up else "??",
            hand="dealer" if is_dealer else "player",
            hand_value=hand.value if face_up or not is_dealer else None,
        )
        return card

    def hit(self) -> bool:
        """
        Player hits (takes the front card).

        Returns:
            True if a card was drawn; False if the round is not in progress
            or the deck is empty
        """
        if self.state != GameState.IN_PROGRESS:
            self._ignore("hit")
            return False

        if not self._deck:
            logger.debug("Hit ignored: deck is empty")
            self.events.emit_new(EventType.DECK_EXHAUSTED, action="hit")
            return False

        card = self._deal_card_to_hand(self.player_hand)
        self.events.emit_new(
            EventType.PLAYER_HIT,
            card=str(card),
            hand_value=self.player_hand.value,
        )

        if self.player_hand.is_busted:
            self.events.emit_new(EventType.PLAYER_BUSTS, hand_value=self.player_hand.value)
            self.player_busts()
            self._end_round(RoundOutcome.PLAYER_BUST)

        return True

    def stand(self) -> bool:
        """
        Player stands; the dealer plays out and the round is resolved.

        Returns:
            True if the round was resolved; False if it was not in progress
        """
        if self.state != GameState.IN_PROGRESS:
            self._ignore("stand")
            return False

        self.events.emit_new(EventType.PLAYER_STAND, hand_value=self.player_hand.value)
        self._play_dealer()
        self.dealer_done()
        self._end_round(self._resolve_outcome())
        return True

    def _play_dealer(self) -> None:
        """Dealer reveals the hole card and draws to the stand total."""
        if len(self.dealer_hand.cards) >= 2:
            self.events.emit_new(
                EventType.DEALER_REVEALS,
                card=str(self.dealer_hand.cards[1]),
                hand_value=self.dealer_hand.value,
            )

        while self.dealer_hand.value < self.dealer_stands_on:
            if not self._deck:
                # No reshuffle: the dealer stands on whatever it has
                logger.debug("Dealer stopped at %d: deck is empty", self.dealer_hand.value)
                self.events.emit_new(EventType.DECK_EXHAUSTED, action="dealer")
                break
            self._deal_card_to_hand(self.dealer_hand)
            self.events.emit_new(EventType.DEALER_HITS, hand_value=self.dealer_hand.value)

        if self.dealer_hand.is_busted:
            self.events.emit_new(EventType.DEALER_BUSTS, hand_value=self.dealer_hand.value)
        else:
            self.events.emit_new(EventType.DEALER_STANDS, hand_value=self.dealer_hand.value)

    def _resolve_outcome(self) -> RoundOutcome:
        """Determine the outcome after the dealer has played."""
        if self.dealer_hand.is_busted:
            return RoundOutcome.DEALER_BUST

        result = evaluate_hands(self.player_hand, self.dealer_hand)
        if result == 1:
            return RoundOutcome.PLAYER_WIN
        if result == -1:
            return RoundOutcome.DEALER_WIN
        return RoundOutcome.PUSH

    def _end_round(self, outcome: RoundOutcome) -> None:
        """Record the outcome and announce it."""
        self._outcome = outcome

        if outcome.player_won:
            self.events.emit_new(EventType.PLAYER_WINS, outcome=outcome.name)
        elif outcome == RoundOutcome.PUSH:
            self.events.emit_new(EventType.PUSH, outcome=outcome.name)
        else:
            self.events.emit_new(EventType.PLAYER_LOSES, outcome=outcome.name)

        self.events.emit_new(
            EventType.ROUND_ENDED,
            outcome=outcome.name,
            message=outcome.message,
            player_value=self.player_hand.value,
            dealer_value=self.dealer_hand.value,
        )
        logger.info(
            "Round over: %s (player %d, dealer %d)",
            outcome.name,
            self.player_hand.value,
            self.dealer_hand.value,
        )

    def _ignore(self, action: str) -> None:
        """Report an action that does not apply in the current state."""
        logger.debug("%s ignored in state %s", action.title(), self.state.name)
        self.events.emit_new(
            EventType.INVALID_ACTION,
            message=f"Cannot {action} in current state",
            action=action,
            state=self.state.name,
        )
