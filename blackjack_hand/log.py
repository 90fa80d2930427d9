"""Logger helpers for the blackjack_hand package."""

import logging

from blackjack_hand.config import LoggingConfig, validate_log_level

ROOT_LOGGER_NAME = "blackjack_hand"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package root logger."""
    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """
    Set the package logger level.

    Args:
        level: Level name or number; defaults to BLACKJACK_HAND_LOG_LEVEL,
            read at call time

    Returns:
        The package root logger

    Raises:
        ValueError: If a level name is not a standard logging level
    """
    if level is None:
        level = LoggingConfig().level
    if isinstance(level, str):
        level = validate_log_level(level)
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    return root
