"""Scene classes for the blackjack table."""

from pygame_ui.scenes.base_scene import BaseScene
from pygame_ui.scenes.game_scene import GameScene

__all__ = ["BaseScene", "GameScene"]
