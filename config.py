"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field

from humanshuffle.logging_utils import LOG_FORMAT


def _parse_seed() -> int | None:
    """Parse SHUFFLE_SEED environment variable."""
    seed = os.getenv("SHUFFLE_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class ShuffleConfig:
    """Default shuffle configuration."""

    style: str = field(default_factory=lambda: os.getenv("SHUFFLE_STYLE", "overhand"))
    split_precision: float = field(
        default_factory=lambda: float(os.getenv("SHUFFLE_SPLIT_PRECISION", "0.2"))
    )
    dealer_is_right_handed: bool = field(
        default_factory=lambda: os.getenv("DEALER_IS_RIGHT_HANDED", "true").lower() == "true"
    )
    passes: int = field(default_factory=lambda: int(os.getenv("SHUFFLE_PASSES", "1000")))


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "WARNING").upper())
    format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", LOG_FORMAT))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    seed: int | None = field(default_factory=_parse_seed)

    shuffle: ShuffleConfig = field(default_factory=ShuffleConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
