"""Game state and round outcome enumerations."""

from enum import Enum, auto


class GameState(Enum):
    """
    Game state machine states.

    Flow: NOT_STARTED → IN_PROGRESS → ROUND_OVER → IN_PROGRESS → ...
    """

    # No round dealt yet
    NOT_STARTED = auto()

    # Player's turn
    IN_PROGRESS = auto()

    # Round finished with a resolved outcome
    ROUND_OVER = auto()

    def __str__(self) -> str:
        return self.name.replace("_", " ").title()


class RoundOutcome(Enum):
    """Result of a round, derived from the final hand values."""

    IN_PROGRESS = auto()
    PLAYER_BUST = auto()
    PLAYER_WIN = auto()
    DEALER_WIN = auto()
    DEALER_BUST = auto()
    PUSH = auto()

    @property
    def message(self) -> str:
        """Message shown to the player, empty while the round is running."""
        return _OUTCOME_MESSAGES[self]

    @property
    def is_final(self) -> bool:
        return self != RoundOutcome.IN_PROGRESS

    @property
    def player_won(self) -> bool:
        return self in (RoundOutcome.PLAYER_WIN, RoundOutcome.DEALER_BUST)


_OUTCOME_MESSAGES: dict[RoundOutcome, str] = {
    RoundOutcome.IN_PROGRESS: "",
    RoundOutcome.PLAYER_BUST: "You busted!",
    RoundOutcome.PLAYER_WIN: "You win!",
    RoundOutcome.DEALER_WIN: "Dealer wins!",
    RoundOutcome.DEALER_BUST: "Dealer busted! You win!",
    RoundOutcome.PUSH: "Push! It's a tie.",
}


# Valid state transitions
VALID_TRANSITIONS: dict[GameState, list[GameState]] = {
    GameState.NOT_STARTED: [GameState.IN_PROGRESS],
    GameState.IN_PROGRESS: [GameState.IN_PROGRESS, GameState.ROUND_OVER],
    GameState.ROUND_OVER: [GameState.IN_PROGRESS],
}


def is_valid_transition(from_state: GameState, to_state: GameState) -> bool:
    """
    Check if a state transition is valid.

    Args:
        from_state: Current state
        to_state: Desired state

    Returns:
        True if the transition is allowed
    """
    return to_state in VALID_TRANSITIONS.get(from_state, [])
