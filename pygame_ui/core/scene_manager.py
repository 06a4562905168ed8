"""Registry of named scenes and dispatch to the active one."""

import logging
from typing import Dict, Optional, TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from pygame_ui.scenes.base_scene import BaseScene

logger = logging.getLogger(__name__)


class SceneManager:
    """Holds the app's scenes by name and forwards the main loop to one of them.

    Only one scene is active at a time; switching calls ``on_exit`` on the
    old scene and ``on_enter`` on the new one.
    """

    def __init__(self, screen: pygame.Surface):
        """
        Args:
            screen: Display surface the active scene draws onto
        """
        self.screen = screen
        self._scenes: Dict[str, "BaseScene"] = {}
        self._active: Optional["BaseScene"] = None

    @property
    def current_scene(self) -> Optional["BaseScene"]:
        return self._active

    def register(self, name: str, scene: "BaseScene") -> None:
        """Add a scene under ``name`` and give it a reference back to the manager."""
        self._scenes[name] = scene
        scene.scene_manager = self

    def get_scene(self, name: str) -> Optional["BaseScene"]:
        return self._scenes.get(name)

    def change_to(self, scene_name: str) -> None:
        """Make a registered scene the active one.

        Raises:
            ValueError: If no scene was registered under ``scene_name``
        """
        scene = self._scenes.get(scene_name)
        if scene is None:
            raise ValueError(f"Scene '{scene_name}' not registered")

        if self._active is not None:
            self._active.on_exit()
        logger.debug("Switching to scene %s", scene_name)
        self._active = scene
        scene.on_enter()

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forward an input event. Returns True if the active scene consumed it."""
        if self._active is None:
            return False
        return self._active.handle_event(event)

    def update(self, dt: float) -> None:
        if self._active is not None:
            self._active.update(dt)

    def draw(self) -> None:
        """Draw the active scene (or a blank screen) and flip the display."""
        if self._active is None:
            self.screen.fill((0, 0, 0))
        else:
            self._active.draw(self.screen)
        pygame.display.flip()
