"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED environment variable."""
    raw = os.getenv("BLACKJACK_SEED", "").strip()
    if not raw:
        return None
    return int(raw)


@dataclass(frozen=True)
class GameConfig:
    """Game rule configuration."""

    dealer_stand_threshold: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_DEALER_STANDS", "17"))
    )
    reset_deck_each_round: bool = field(
        default_factory=lambda: os.getenv("BLACKJACK_FRESH_DECK", "true").lower() == "true"
    )
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        if not 2 <= self.dealer_stand_threshold <= 21:
            raise ValueError("Dealer stand threshold must be between 2 and 21")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
