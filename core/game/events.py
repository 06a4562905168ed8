"""Round events published by the blackjack engine."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import Any, Callable


class EventType(Enum):
    """What happened at the table."""

    ROUND_STARTED = auto()
    ROUND_ENDED = auto()

    CARD_DEALT = auto()
    # A hit or a dealer draw found no cards left
    DECK_EXHAUSTED = auto()

    PLAYER_HIT = auto()
    PLAYER_STAND = auto()

    DEALER_REVEALS = auto()
    DEALER_HITS = auto()
    DEALER_STANDS = auto()
    DEALER_BUSTS = auto()

    PLAYER_BUSTS = auto()
    PLAYER_WINS = auto()
    PLAYER_LOSES = auto()
    PUSH = auto()

    # hit/stand outside a running round
    INVALID_ACTION = auto()


@dataclass(frozen=True)
class GameEvent:
    """
    A single thing the engine did, with its details in ``data``.

    Listeners use events for feedback (logging, sounds, the result
    banner). Table state is always read back from the engine itself.
    """

    event_type: EventType
    data: dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=datetime.now)

    def __str__(self) -> str:
        return f"{self.event_type.name}: {self.data}"


EventHandler = Callable[[GameEvent], None]


class EventEmitter:
    """
    Publishes events to listeners and remembers the current round's events.

    A listener registered with ``event_type=None`` hears everything, after
    the listeners for the specific type.
    """

    def __init__(self) -> None:
        self._listeners: dict[EventType | None, list[EventHandler]] = {}
        self._recorded: list[GameEvent] = []

    def subscribe(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        """Register ``handler`` for one event type, or for all when ``event_type`` is None."""
        self._listeners.setdefault(event_type, []).append(handler)

    def unsubscribe(self, handler: EventHandler, event_type: EventType | None = None) -> None:
        """Drop a listener. Handlers that were never registered are ignored."""
        listeners = self._listeners.get(event_type, [])
        if handler in listeners:
            listeners.remove(handler)

    def emit(self, event: GameEvent) -> None:
        self._recorded.append(event)

        # Copies, so a listener may unsubscribe while being called
        for handler in list(self._listeners.get(event.event_type, [])):
            handler(event)
        for handler in list(self._listeners.get(None, [])):
            handler(event)

    def emit_new(self, event_type: EventType, **data: Any) -> GameEvent:
        """Build an event from keyword data, emit it and return it."""
        event = GameEvent(event_type=event_type, data=data)
        self.emit(event)
        return event

    @property
    def history(self) -> list[GameEvent]:
        """Events recorded since the last ``clear_history``, oldest first."""
        return list(self._recorded)

    def of_type(self, event_type: EventType) -> list[GameEvent]:
        return [event for event in self._recorded if event.event_type == event_type]

    def clear_history(self) -> None:
        self._recorded.clear()
