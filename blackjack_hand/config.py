"""Configuration management with environment variable support."""

import logging
import os
from dataclasses import dataclass, field


def _parse_log_level() -> str:
    """
    Parse BLACKJACK_HAND_LOG_LEVEL environment variable.

    The name is only normalised here; configure_logging validates it.
    """
    return os.getenv("BLACKJACK_HAND_LOG_LEVEL", "WARNING").strip().upper()


def validate_log_level(level: str) -> str:
    """Return the normalised level name, or raise ValueError if it is unknown."""
    name = level.strip().upper()
    if name not in logging.getLevelNamesMapping():
        raise ValueError(f"Unknown log level: {level}")
    return name


@dataclass(frozen=True)
class RulesConfig:
    """Blackjack scoring constants."""

    bust_limit: int = 21
    natural_cards: int = 2


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(default_factory=_parse_log_level)


@dataclass(frozen=True)
class LibraryConfig:
    """Library configuration."""

    rules: RulesConfig = field(default_factory=RulesConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = LibraryConfig()
