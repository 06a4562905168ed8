"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True)
class GameConfig:
    """Game rules configuration."""

    dealer_stands_on: int = 17
    # Seed for the shuffle; None means unseeded (no reproducibility)
    seed: int | None = field(default_factory=lambda: _parse_optional_int("BLACKJACK_SEED"))


@dataclass(frozen=True)
class DisplayConfig:
    """Window and asset configuration for the pygame front end."""

    card_assets_dir: str = field(
        default_factory=lambda: os.getenv("BLACKJACK_CARD_ASSETS", "cards")
    )
    fps: int = field(default_factory=lambda: int(os.getenv("BLACKJACK_FPS", "60")))
    window_title: str = "BlackJack"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)


# Global configuration instance
config = AppConfig()
