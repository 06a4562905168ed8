"""Table buttons (Hit, Stand, New Game)."""

from enum import Enum, auto
from typing import Callable, Optional, Tuple

import pygame

from pygame_ui.config import COLORS, DIMENSIONS


class ButtonState(Enum):
    NORMAL = auto()
    HOVERED = auto()
    PRESSED = auto()
    DISABLED = auto()


class Button:
    """A rounded white button centered on (x, y).

    A click fires on left-button release inside the button, and only if
    the press also started inside it. While disabled the button ignores
    input and is drawn greyed out.
    """

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        on_click: Optional[Callable[[], None]] = None,
        width: float = DIMENSIONS.BUTTON_WIDTH,
        height: float = DIMENSIONS.BUTTON_HEIGHT,
        font_size: int = 28,
        enabled: bool = True,
    ):
        self.center_x = x
        self.center_y = y
        self.text = text
        self.on_click = on_click
        self.width = width
        self.height = height
        self.font_size = font_size

        self.enabled = enabled
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED
        self._pressed = False
        self._font: Optional[pygame.font.Font] = None

        # Sink while held, eased in update()
        self.y_offset = 0.0
        self._target_offset = 0.0

    @property
    def font(self) -> pygame.font.Font:
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    @property
    def rect(self) -> pygame.Rect:
        rect = pygame.Rect(0, 0, int(self.width), int(self.height))
        rect.center = (int(self.center_x), int(self.center_y))
        return rect

    def set_enabled(self, enabled: bool) -> None:
        if enabled == self.enabled:
            return
        self.enabled = enabled
        self._pressed = False
        self._target_offset = 0.0
        self.state = ButtonState.NORMAL if enabled else ButtonState.DISABLED

    def _hit(self, pos: Tuple[int, int]) -> bool:
        return self.rect.collidepoint(pos)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Track hover/press from mouse events. Returns True on a click."""
        if not self.enabled:
            return False

        if event.type == pygame.MOUSEMOTION and not self._pressed:
            self.state = ButtonState.HOVERED if self._hit(event.pos) else ButtonState.NORMAL

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self._hit(event.pos):
                self.state = ButtonState.PRESSED
                self._pressed = True
                self._target_offset = 2.0

        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1 and self._pressed:
            self._pressed = False
            self._target_offset = 0.0
            if not self._hit(event.pos):
                self.state = ButtonState.NORMAL
                return False
            self.state = ButtonState.HOVERED
            if self.on_click:
                self.on_click()
            return True

        return False

    def update(self, dt: float) -> None:
        self.y_offset += (self._target_offset - self.y_offset) * min(1.0, 20.0 * dt)

    def _colors(self) -> Tuple[Tuple[int, int, int], Tuple[int, int, int]]:
        """Background and text color for the current state."""
        if not self.enabled:
            return COLORS.BUTTON_DISABLED, COLORS.TEXT_MUTED
        background = {
            ButtonState.PRESSED: COLORS.BUTTON_PRESSED,
            ButtonState.HOVERED: COLORS.BUTTON_HOVER,
        }.get(self.state, COLORS.BUTTON_DEFAULT)
        return background, COLORS.BUTTON_TEXT

    def draw(self, surface: pygame.Surface) -> None:
        background, text_color = self._colors()
        rect = self.rect.move(0, int(self.y_offset))
        radius = DIMENSIONS.BUTTON_CORNER_RADIUS

        shadow = pygame.Surface(rect.size, pygame.SRCALPHA)
        pygame.draw.rect(shadow, COLORS.SHADOW, shadow.get_rect(), border_radius=radius)
        surface.blit(shadow, rect.move(0, 2))
        pygame.draw.rect(surface, background, rect, border_radius=radius)

        label = self.font.render(self.text, True, text_color)
        surface.blit(label, label.get_rect(center=rect.center))


class ActionButton(Button):
    """A button bound to a table action, with its hotkey shown underneath."""

    def __init__(
        self,
        x: float,
        y: float,
        text: str,
        action: str,
        on_click: Optional[Callable[[], None]] = None,
        hotkey: Optional[str] = None,
        **kwargs,
    ):
        super().__init__(x=x, y=y, text=text, on_click=on_click, **kwargs)
        self.action = action
        self.hotkey = hotkey

    def draw(self, surface: pygame.Surface) -> None:
        super().draw(surface)

        if self.hotkey and self.enabled:
            hint = pygame.font.Font(None, 18).render(f"[{self.hotkey}]", True, COLORS.TEXT_WHITE)
            surface.blit(
                hint,
                hint.get_rect(
                    centerx=int(self.center_x),
                    top=int(self.rect.bottom + 6 + self.y_offset),
                ),
            )
