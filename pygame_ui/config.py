"""Configuration constants for the PyGame blackjack table."""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Colors:
    """Color palette for the blackjack UI."""

    # Felt and background
    FELT_GREEN: Tuple[int, int, int] = (46, 139, 87)
    FELT_DARK: Tuple[int, int, int] = (38, 118, 73)

    # Card colors
    CARD_WHITE: Tuple[int, int, int] = (255, 255, 255)
    CARD_RED: Tuple[int, int, int] = (192, 57, 57)
    CARD_BLACK: Tuple[int, int, int] = (28, 28, 32)
    CARD_BACK: Tuple[int, int, int] = (65, 85, 130)
    CARD_BACK_PATTERN: Tuple[int, int, int] = (85, 105, 150)

    # Effects
    SHADOW: Tuple[int, int, int, int] = (0, 0, 0, 60)
    OUTLINE: Tuple[int, int, int] = (34, 34, 34)

    # Text
    TEXT_WHITE: Tuple[int, int, int] = (240, 240, 240)
    TEXT_MUTED: Tuple[int, int, int] = (150, 150, 160)

    # Buttons
    BUTTON_DEFAULT: Tuple[int, int, int] = (255, 255, 255)
    BUTTON_HOVER: Tuple[int, int, int] = (230, 230, 230)
    BUTTON_PRESSED: Tuple[int, int, int] = (200, 200, 200)
    BUTTON_DISABLED: Tuple[int, int, int] = (120, 140, 128)
    BUTTON_TEXT: Tuple[int, int, int] = (34, 34, 34)


@dataclass(frozen=True)
class Dimensions:
    """Dimension constants for layout and sizing."""

    # Screen
    SCREEN_WIDTH: int = 900
    SCREEN_HEIGHT: int = 720

    # Cards
    CARD_WIDTH: int = 72
    CARD_HEIGHT: int = 104
    CARD_PADDING: int = 4
    CARD_CORNER_RADIUS: int = 6
    CARD_SHADOW_OFFSET: int = 3
    HAND_SPACING: int = 88

    # Layout
    TITLE_Y: int = 60
    DEALER_LABEL_Y: int = 140
    DEALER_HAND_Y: int = 240
    PLAYER_LABEL_Y: int = 340
    PLAYER_HAND_Y: int = 440
    BUTTON_Y: int = 560
    MESSAGE_Y: int = 640
    CENTER_X: int = SCREEN_WIDTH // 2

    # UI Elements
    BUTTON_WIDTH: int = 130
    BUTTON_HEIGHT: int = 44
    BUTTON_SPACING: int = 150
    BUTTON_CORNER_RADIUS: int = 6


# Global instances for easy import
COLORS = Colors()
DIMENSIONS = Dimensions()
