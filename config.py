"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_bool(name: str, default: str) -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes")


def _parse_seed() -> int | None:
    """Parse GAME_SEED; unset or empty means a random shuffle."""
    raw = os.getenv("GAME_SEED", "").strip()
    return int(raw) if raw else None


@dataclass(frozen=True)
class GameConfig:
    """Terminal game configuration."""

    player_name: str = field(default_factory=lambda: os.getenv("PLAYER_NAME", "Player"))
    dealer_name: str = "Dealer"
    dealer_move_delay: float = field(
        default_factory=lambda: float(os.getenv("DEALER_MOVE_DELAY", "1.5"))
    )
    clear_screen: bool = field(default_factory=lambda: _parse_bool("CLEAR_SCREEN", "true"))
    seed: int | None = field(default_factory=_parse_seed)

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.dealer_move_delay < 0:
            raise ValueError("dealer_move_delay cannot be negative")
        if not self.player_name.strip():
            raise ValueError("player_name cannot be blank")


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: _parse_bool("DEBUG", "false"))
    game: GameConfig = field(default_factory=GameConfig)


# Global configuration instance
config = AppConfig()
