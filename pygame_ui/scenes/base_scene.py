"""Common interface for screens driven by the SceneManager."""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

import pygame

if TYPE_CHECKING:
    from pygame_ui.core.scene_manager import SceneManager


class BaseScene(ABC):
    """A screen of the app.

    The manager calls ``on_enter``/``on_exit`` when the scene is switched
    in or out, and ``handle_event``, ``update`` and ``draw`` once per
    frame while it is active.
    """

    def __init__(self):
        self.scene_manager: Optional["SceneManager"] = None
        self._is_active = False

    @property
    def is_active(self) -> bool:
        return self._is_active

    def on_enter(self) -> None:
        self._is_active = True

    def on_exit(self) -> None:
        self._is_active = False

    @abstractmethod
    def handle_event(self, event: pygame.event.Event) -> bool:
        """React to one input event; return True if it was used."""

    @abstractmethod
    def update(self, dt: float) -> None:
        """Advance animations by ``dt`` seconds."""

    @abstractmethod
    def draw(self, surface: pygame.Surface) -> None:
        """Render the scene onto ``surface``."""
