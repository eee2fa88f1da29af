"""Tests for configuration classes."""

import os
from unittest.mock import patch

from config import AppConfig, LoggingConfig, ShuffleConfig


class TestShuffleConfig:
    """Tests for ShuffleConfig class."""

    def test_defaults(self):
        """Test defaults when no environment variables are set."""
        with patch.dict(os.environ, {}, clear=True):
            config = ShuffleConfig()

            assert config.style == "overhand"
            assert config.split_precision == 0.2
            assert config.dealer_is_right_handed is True
            assert config.passes == 1000

    def test_reads_env_vars(self):
        """Test values are read from the environment."""
        env = {
            "SHUFFLE_STYLE": "riffle",
            "SHUFFLE_SPLIT_PRECISION": "0.7",
            "DEALER_IS_RIGHT_HANDED": "False",
            "SHUFFLE_PASSES": "3",
        }
        with patch.dict(os.environ, env):
            config = ShuffleConfig()

            assert config.style == "riffle"
            assert config.split_precision == 0.7
            assert config.dealer_is_right_handed is False
            assert config.passes == 3


class TestLoggingConfig:
    """Tests for LoggingConfig class."""

    def test_default_level(self):
        """Test logging is quiet by default."""
        with patch.dict(os.environ, {}, clear=True):
            assert LoggingConfig().level == "WARNING"

    def test_level_is_upper_cased(self):
        """Test the level from the environment is normalised."""
        with patch.dict(os.environ, {"LOG_LEVEL": "debug"}):
            assert LoggingConfig().level == "DEBUG"


class TestAppConfig:
    """Tests for AppConfig class."""

    def test_seed_unset(self):
        """Test no seed by default."""
        with patch.dict(os.environ, {}, clear=True):
            config = AppConfig()

            assert config.seed is None
            assert config.debug is False
            assert isinstance(config.shuffle, ShuffleConfig)
            assert isinstance(config.logging, LoggingConfig)

    def test_seed_from_env(self):
        """Test the seed is parsed as an integer."""
        with patch.dict(os.environ, {"SHUFFLE_SEED": "42", "DEBUG": "true"}):
            config = AppConfig()

            assert config.seed == 42
            assert config.debug is True
