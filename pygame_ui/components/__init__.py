"""UI components for the blackjack table."""

from pygame_ui.components.card import CardSprite, CardGroup
from pygame_ui.components.button import Button, ActionButton

__all__ = [
    "CardSprite",
    "CardGroup",
    "Button",
    "ActionButton",
]
