"""Main entry point for the PyGame blackjack table."""

import argparse
import logging
from random import Random

import pygame

from config import config
from pygame_ui.config import DIMENSIONS
from pygame_ui.core.engine_adapter import EngineAdapter
from pygame_ui.core.scene_manager import SceneManager
from pygame_ui.scenes.game_scene import GameScene

logger = logging.getLogger(__name__)


class Application:
    """Main application class managing the game loop."""

    def __init__(self, asset_dir: str, seed: int | None = None, fps: int = 60):
        """Initialize the application.

        Args:
            asset_dir: Directory holding card images named like 'ace_of_spades.png'
            seed: Shuffle seed, or None for an unseeded game
            fps: Frame rate cap
        """
        pygame.init()
        pygame.display.set_caption(config.display.window_title)

        self.screen = pygame.display.set_mode(
            (DIMENSIONS.SCREEN_WIDTH, DIMENSIONS.SCREEN_HEIGHT)
        )
        self.clock = pygame.time.Clock()
        self.fps = fps
        self.running = True

        engine = EngineAdapter(
            rng=Random(seed) if seed is not None else None,
            dealer_stands_on=config.game.dealer_stands_on,
        )

        self.scene_manager = SceneManager(self.screen)
        self.scene_manager.register("game", GameScene(engine, asset_dir=asset_dir))
        self.scene_manager.change_to("game")

    def handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                continue
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False
                continue

            self.scene_manager.handle_event(event)

    def run(self) -> None:
        """Main application loop."""
        while self.running:
            dt = self.clock.tick(self.fps) / 1000.0

            self.handle_events()
            self.scene_manager.update(dt)
            self.scene_manager.draw()

        pygame.quit()


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Play single-player blackjack")
    parser.add_argument(
        "--assets",
        default=config.display.card_assets_dir,
        help="Directory with card images (default: %(default)s)",
    )
    parser.add_argument("--seed", type=int, default=config.game.seed, help="Shuffle seed")
    parser.add_argument("--debug", action="store_true", default=config.debug, help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Entry point for the pygame UI."""
    args = parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    else:
        logging.basicConfig(level=logging.INFO)

    logger.info("Starting blackjack table (card images from %s)", args.assets)
    app = Application(asset_dir=args.assets, seed=args.seed, fps=config.display.fps)
    app.run()


if __name__ == "__main__":
    main()
