"""Card sprite drawn from a card image or, failing that, by hand."""

import logging
import os
from typing import Dict, List, Optional

import pygame

from pygame_ui.config import COLORS, DIMENSIONS
from pygame_ui.core.engine_adapter import UICardInfo

logger = logging.getLogger(__name__)

# Loaded images by path; None marks a file that could not be loaded
_image_cache: Dict[str, Optional[pygame.Surface]] = {}


def load_card_image(path: str) -> Optional[pygame.Surface]:
    """Load and scale a card image, or return None if it is unavailable."""
    if path not in _image_cache:
        image = None
        if os.path.exists(path):
            try:
                image = pygame.image.load(path)
                image = pygame.transform.smoothscale(
                    image, (DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT)
                )
            except (pygame.error, FileNotFoundError) as e:
                logger.warning("Could not load card image %s: %s", path, e)
                image = None
        _image_cache[path] = image
    return _image_cache[path]


class CardSprite:
    """A single card on the table.

    The card sits on a white mat with a drop shadow. Face-down cards show
    the back and are dimmed, the way the hole card looks until the round
    is over.
    """

    def __init__(
        self,
        card: UICardInfo,
        x: float = 0,
        y: float = 0,
        asset_dir: Optional[str] = None,
    ):
        self.card = card
        self.x = x
        self.y = y
        self.asset_dir = asset_dir
        self._surface: Optional[pygame.Surface] = None

    @property
    def rect(self) -> pygame.Rect:
        """Card mat rectangle, centered on (x, y)."""
        pad = DIMENSIONS.CARD_PADDING
        rect = pygame.Rect(0, 0, DIMENSIONS.CARD_WIDTH + pad * 2, DIMENSIONS.CARD_HEIGHT + pad * 2)
        rect.center = (int(self.x), int(self.y))
        return rect

    def _render_card_face(self, width: int, height: int) -> pygame.Surface:
        """Render the face-up side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=DIMENSIONS.CARD_CORNER_RADIUS)
        pygame.draw.rect(
            surface, COLORS.CARD_BLACK, rect, width=1, border_radius=DIMENSIONS.CARD_CORNER_RADIUS
        )

        color = COLORS.CARD_RED if self.card.is_red else COLORS.CARD_BLACK
        suit_symbols = {
            "hearts": "♥",
            "diamonds": "♦",
            "clubs": "♣",
            "spades": "♠",
        }
        suit_symbol = suit_symbols.get(self.card.suit, "?")

        font_size = max(16, int(height * 0.2))
        font = pygame.font.Font(None, font_size)
        surface.blit(font.render(self.card.value, True, color), (6, 5))
        surface.blit(font.render(suit_symbol, True, color), (6, 5 + font_size - 6))

        center_font = pygame.font.Font(None, int(height * 0.45))
        center = center_font.render(suit_symbol, True, color)
        surface.blit(center, center.get_rect(center=(width // 2, height // 2)))

        corner = pygame.transform.rotate(font.render(self.card.value, True, color), 180)
        surface.blit(corner, (width - 6 - corner.get_width(), height - 5 - corner.get_height()))

        return surface

    def _render_card_back(self, width: int, height: int) -> pygame.Surface:
        """Render the face-down (back) side of the card."""
        surface = pygame.Surface((width, height), pygame.SRCALPHA)
        rect = pygame.Rect(0, 0, width, height)
        pygame.draw.rect(surface, COLORS.CARD_BACK, rect, border_radius=DIMENSIONS.CARD_CORNER_RADIUS)

        inner_rect = rect.inflate(-10, -10)
        pygame.draw.rect(surface, COLORS.CARD_BACK_PATTERN, inner_rect, border_radius=4)

        # Diamond grid
        pattern_color = (*COLORS.CARD_BACK[:3], 90)
        for i in range(-height, width + height, 14):
            pygame.draw.line(surface, pattern_color, (i, 5), (i + height, height - 5), 1)
            pygame.draw.line(surface, pattern_color, (i + height, 5), (i, height - 5), 1)

        return surface

    def _render(self) -> pygame.Surface:
        width, height = DIMENSIONS.CARD_WIDTH, DIMENSIONS.CARD_HEIGHT

        image = None
        if self.asset_dir:
            image = load_card_image(self.card.image_path(self.asset_dir))
        if image is None and self.card.face_up:
            image = self._render_card_face(width, height)
        elif image is None:
            image = self._render_card_back(width, height)

        if not self.card.face_up:
            # Dim the hidden card
            image = image.copy()
            image.fill((178, 178, 178), special_flags=pygame.BLEND_RGB_MULT)

        return image

    def draw(self, surface: pygame.Surface) -> None:
        """Draw the card mat, shadow and card."""
        if self._surface is None:
            self._surface = self._render()

        rect = self.rect
        shadow = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(shadow, COLORS.SHADOW, shadow.get_rect(), border_radius=DIMENSIONS.CARD_CORNER_RADIUS)
        surface.blit(shadow, rect.move(DIMENSIONS.CARD_SHADOW_OFFSET, DIMENSIONS.CARD_SHADOW_OFFSET))
        pygame.draw.rect(surface, COLORS.CARD_WHITE, rect, border_radius=DIMENSIONS.CARD_CORNER_RADIUS)

        pad = DIMENSIONS.CARD_PADDING
        surface.blit(self._surface, (rect.x + pad, rect.y + pad))


class CardGroup:
    """A row of cards (e.g., a hand), kept centered on a point."""

    def __init__(self, center_x: float, y: float, asset_dir: Optional[str] = None):
        self.cards: List[CardSprite] = []
        self.center_x = center_x
        self.y = y
        self.asset_dir = asset_dir

    def sync(self, cards: List[UICardInfo]) -> None:
        """Match the sprites to a hand, rebuilding only cards that changed."""
        for i, info in enumerate(cards):
            if i < len(self.cards):
                if self.cards[i].card != info:
                    self.cards[i] = CardSprite(info, asset_dir=self.asset_dir)
            else:
                self.cards.append(CardSprite(info, asset_dir=self.asset_dir))
        del self.cards[len(cards):]
        self._arrange()

    def clear(self) -> None:
        """Remove all cards."""
        self.cards.clear()

    def _arrange(self) -> None:
        """Lay the cards out in a centered row."""
        total_width = (len(self.cards) - 1) * DIMENSIONS.HAND_SPACING
        start_x = self.center_x - total_width / 2
        for i, card in enumerate(self.cards):
            card.x = start_x + i * DIMENSIONS.HAND_SPACING
            card.y = self.y

    def draw(self, surface: pygame.Surface) -> None:
        """Draw all cards left to right."""
        for card in self.cards:
            card.draw(surface)
