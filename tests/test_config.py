"""Tests for configuration classes."""

import os
from unittest.mock import patch

import pytest

from blackjack.config import AppConfig, GameConfig, LoggingConfig


class TestGameConfig:
    """Tests for GameConfig class."""

    def test_defaults(self):
        """Defaults follow the standard house rules."""
        with patch.dict(os.environ, {}, clear=True):
            cfg = GameConfig()
        assert cfg.dealer_stand_threshold == 17
        assert cfg.reset_deck_each_round is True
        assert cfg.seed is None

    def test_env_overrides(self):
        """Settings are read from the environment."""
        env = {
            "BLACKJACK_DEALER_STANDS": "16",
            "BLACKJACK_FRESH_DECK": "false",
            "BLACKJACK_SEED": "99",
        }
        with patch.dict(os.environ, env, clear=True):
            cfg = GameConfig()
        assert cfg.dealer_stand_threshold == 16
        assert cfg.reset_deck_each_round is False
        assert cfg.seed == 99

    def test_invalid_threshold(self):
        with pytest.raises(ValueError):
            GameConfig(dealer_stand_threshold=30)

    def test_frozen(self):
        cfg = GameConfig()
        with pytest.raises(AttributeError):
            cfg.seed = 1


class TestLoggingConfig:
    def test_level_from_env(self):
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}, clear=True):
            assert LoggingConfig().level == "DEBUG"

    def test_default_level(self):
        with patch.dict(os.environ, {}, clear=True):
            assert AppConfig().logging.level == "WARNING"
