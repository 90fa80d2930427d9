"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from blackjack_hand.config import (
    LibraryConfig,
    LoggingConfig,
    RulesConfig,
    _parse_log_level,
    config,
    validate_log_level,
)


class TestRulesConfig:
    """Tests for RulesConfig class."""

    def test_defaults(self):
        """Test standard blackjack constants."""
        rules = RulesConfig()
        assert rules.bust_limit == 21
        assert rules.natural_cards == 2

    def test_frozen(self):
        """Test that rules cannot be changed after creation."""
        rules = RulesConfig()
        with pytest.raises(AttributeError):
            rules.bust_limit = 22


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        """Test that the default level is WARNING."""
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "WARNING"

    def test_level_from_env(self):
        """Test that the level is read and normalised from the environment."""
        with patch.dict(os.environ, {"BLACKJACK_HAND_LOG_LEVEL": " debug "}):
            assert _parse_log_level() == "DEBUG"
            assert LoggingConfig().level == "DEBUG"

    def test_unknown_level_kept_until_used(self):
        """Test that building the config does not reject an unknown level."""
        with patch.dict(os.environ, {"BLACKJACK_HAND_LOG_LEVEL": "chatty"}):
            assert LoggingConfig().level == "CHATTY"

    def test_validate_log_level(self):
        """Test level validation normalises known names and rejects others."""
        assert validate_log_level(" info ") == "INFO"
        with pytest.raises(ValueError):
            validate_log_level("trace")


class TestLibraryConfig:
    """Tests for LibraryConfig class."""

    def test_nested_defaults(self):
        """Test that nested configs are created."""
        cfg = LibraryConfig()
        assert isinstance(cfg.rules, RulesConfig)
        assert isinstance(cfg.logging, LoggingConfig)

    def test_global_instance(self):
        """Test that the global config uses standard rules."""
        assert config.rules.bust_limit == 21
