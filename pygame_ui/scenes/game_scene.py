"""Blackjack table scene - renders engine state and forwards player actions."""

import logging
from typing import List, Optional

import pygame

from core.game.state import RoundOutcome
from pygame_ui.components.button import ActionButton
from pygame_ui.components.card import CardGroup
from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import EngineAdapter, GameSnapshot
from pygame_ui.scenes.base_scene import BaseScene

logger = logging.getLogger(__name__)


def render_outlined(
    font: pygame.font.Font,
    text: str,
    color=COLORS.TEXT_WHITE,
    outline=COLORS.OUTLINE,
) -> pygame.Surface:
    """Render text with a one-pixel outline, like the table headings."""
    base = font.render(text, True, color)
    surface = pygame.Surface((base.get_width() + 2, base.get_height() + 2), pygame.SRCALPHA)
    shadow = font.render(text, True, outline)
    for dx, dy in ((0, 0), (2, 0), (0, 2), (2, 2)):
        surface.blit(shadow, (dx, dy))
    surface.blit(base, (1, 1))
    return surface


class GameScene(BaseScene):
    """The blackjack table.

    The scene never changes game state itself: buttons and hotkeys call
    the engine adapter, and every frame the table is redrawn from a fresh
    snapshot.
    """

    def __init__(self, engine: EngineAdapter, asset_dir: Optional[str] = None):
        super().__init__()

        self.engine = engine
        self.asset_dir = asset_dir

        self.dealer_hand = CardGroup(DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_HAND_Y, asset_dir)
        self.player_hand = CardGroup(DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_HAND_Y, asset_dir)
        self.buttons: List[ActionButton] = []

        self._snapshot: Optional[GameSnapshot] = None
        self._fonts: dict[str, pygame.font.Font] = {}

    def on_enter(self) -> None:
        """Set up the table and deal the first round."""
        super().on_enter()

        self.engine.set_callbacks(
            on_round_over=self._on_round_over,
            on_invalid_action=self._on_invalid_action,
        )
        self._setup_buttons()
        self.engine.deal()
        self._refresh()

    def on_exit(self) -> None:
        super().on_exit()
        self.dealer_hand.clear()
        self.player_hand.clear()

    def _setup_buttons(self) -> None:
        """Set up the Hit, Stand and New Game buttons."""
        y = DIMENSIONS.BUTTON_Y
        spacing = DIMENSIONS.BUTTON_SPACING

        self.buttons = [
            ActionButton(
                x=DIMENSIONS.CENTER_X - spacing,
                y=y,
                text="Hit",
                action="hit",
                on_click=self._on_hit,
                hotkey="H",
            ),
            ActionButton(
                x=DIMENSIONS.CENTER_X,
                y=y,
                text="Stand",
                action="stand",
                on_click=self._on_stand,
                hotkey="S",
            ),
            ActionButton(
                x=DIMENSIONS.CENTER_X + spacing,
                y=y,
                text="New Game",
                action="new_game",
                on_click=self._on_new_game,
                hotkey="N",
            ),
        ]

    def _font(self, name: str, size: int) -> pygame.font.Font:
        if name not in self._fonts:
            self._fonts[name] = pygame.font.Font(None, size)
        return self._fonts[name]

    def _refresh(self) -> None:
        """Pull a new snapshot and sync cards and buttons to it."""
        snapshot = self.engine.get_snapshot()
        self._snapshot = snapshot

        self.dealer_hand.sync(snapshot.dealer_cards)
        self.player_hand.sync(snapshot.player_cards)

        for button in self.buttons:
            if button.action == "hit":
                button.set_enabled(snapshot.can_hit)
            elif button.action == "stand":
                button.set_enabled(snapshot.can_stand)

    # Engine callbacks

    def _on_round_over(self, outcome: RoundOutcome, message: str) -> None:
        logger.debug("Table shows result %s: %s", outcome.name, message)

    def _on_invalid_action(self, message: str) -> None:
        logger.debug("Ignored input: %s", message)

    # Actions

    def _on_hit(self) -> None:
        self.engine.hit()
        self._refresh()

    def _on_stand(self) -> None:
        self.engine.stand()
        self._refresh()

    def _on_new_game(self) -> None:
        self.engine.new_game()
        self._refresh()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Handle input events."""
        for button in self.buttons:
            if button.enabled and button.handle_event(event):
                return True

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_h:
                self._on_hit()
                return True
            elif event.key == pygame.K_s:
                self._on_stand()
                return True
            elif event.key == pygame.K_n:
                self._on_new_game()
                return True

        return False

    def update(self, dt: float) -> None:
        for button in self.buttons:
            button.update(dt)

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the table."""
        snapshot = self._snapshot or self.engine.get_snapshot()
        surface.fill(COLORS.FELT_GREEN)

        title = render_outlined(self._font("title", 72), "BlackJack")
        surface.blit(title, title.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.TITLE_Y)))

        heading_font = self._font("heading", 32)
        dealer_label = render_outlined(heading_font, f"Dealer Hand ({snapshot.dealer_value_label})")
        surface.blit(
            dealer_label, dealer_label.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.DEALER_LABEL_Y))
        )
        self.dealer_hand.draw(surface)

        player_label = render_outlined(heading_font, f"Player Hand ({snapshot.player_value})")
        surface.blit(
            player_label, player_label.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.PLAYER_LABEL_Y))
        )
        self.player_hand.draw(surface)

        for button in self.buttons:
            button.draw(surface)

        # Result stays blank until the round is over
        if snapshot.is_round_over and snapshot.result_message:
            message = render_outlined(self._font("message", 40), snapshot.result_message)
            surface.blit(message, message.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.MESSAGE_Y)))

        hint = self._font("hint", 22).render(
            f"H: Hit | S: Stand | N: New Game | ESC: Quit | Cards left: {snapshot.cards_remaining}",
            True,
            COLORS.TEXT_WHITE,
        )
        surface.blit(hint, hint.get_rect(center=(DIMENSIONS.CENTER_X, DIMENSIONS.SCREEN_HEIGHT - 20)))
