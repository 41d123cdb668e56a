"""Unit tests for configuration management."""

import os
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from decograph.core.config import DecographConfig, get_config, reload_config


class TestDecographConfig:
    """Tests for DecographConfig."""

    def test_default_values(self) -> None:
        """Test default configuration values."""
        # Clear env and disable .env file loading
        with patch.dict(os.environ, {}, clear=True):
            config = DecographConfig(_env_file=None)

            assert config.propagation_passes == 6
            assert config.decorator_name == "@"
            assert config.default_packages == ["org.eolang"]
            assert config.log_level == "WARNING"

    def test_env_override(self) -> None:
        """Test environment variable override."""
        with patch.dict(
            os.environ,
            {
                "DECOGRAPH_PROPAGATION_PASSES": "10",
                "DECOGRAPH_DECORATOR_NAME": "phi",
                "DECOGRAPH_DEFAULT_PACKAGES": '["org.eolang", "org.example"]',
            },
        ):
            config = DecographConfig(_env_file=None)
            assert config.propagation_passes == 10
            assert config.decorator_name == "phi"
            assert config.default_packages == ["org.eolang", "org.example"]

    def test_validation_passes_min(self) -> None:
        """Test pass count minimum validation."""
        with patch.dict(os.environ, {"DECOGRAPH_PROPAGATION_PASSES": "0"}):
            with pytest.raises(ValueError):
                DecographConfig(_env_file=None)

    def test_validation_passes_max(self) -> None:
        """Test pass count maximum validation."""
        with patch.dict(os.environ, {"DECOGRAPH_PROPAGATION_PASSES": "100"}):
            with pytest.raises(ValueError):
                DecographConfig(_env_file=None)

    def test_log_level_normalized(self) -> None:
        with patch.dict(os.environ, {"DECOGRAPH_LOG_LEVEL": "debug"}):
            config = DecographConfig(_env_file=None)
            assert config.log_level == "DEBUG"

    def test_validation_unknown_log_level(self) -> None:
        """Test log level must name a logging level."""
        with patch.dict(os.environ, {"DECOGRAPH_LOG_LEVEL": "verbose"}):
            with pytest.raises(ValidationError):
                DecographConfig(_env_file=None)

    def test_validation_empty_decorator_name(self) -> None:
        with patch.dict(os.environ, {"DECOGRAPH_DECORATOR_NAME": ""}):
            with pytest.raises(ValueError):
                DecographConfig(_env_file=None)


class TestConfigCache:
    """Tests for cached config access."""

    def test_get_config_is_cached(self) -> None:
        assert get_config() is get_config()

    def test_reload_config_picks_up_env(self) -> None:
        get_config()
        with patch.dict(os.environ, {"DECOGRAPH_PROPAGATION_PASSES": "3"}):
            config = reload_config()
        assert config.propagation_passes == 3
