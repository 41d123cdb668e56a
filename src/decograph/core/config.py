"""Global configuration for decograph.

This module provides centralized configuration management with support for
environment variables and sensible defaults.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DecographConfig(BaseSettings):
    """decograph configuration settings.

    Values can be overridden via environment variables with DECOGRAPH_ prefix.
    Example: DECOGRAPH_PROPAGATION_PASSES=8 overrides propagation_passes.
    """

    # Inner propagation
    propagation_passes: int = Field(
        default=6,
        ge=1,
        le=64,
        description="Number of passes over all decorators during inner propagation",
    )
    decorator_name: str = Field(
        default="@",
        min_length=1,
        description="Object name marking an inner application (decorator)",
    )

    # Reference lookup
    default_packages: list[str] = Field(
        default_factory=lambda: ["org.eolang"],
        description="Packages searched for a base name after the object's own package",
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level used by the CLI",
    )

    @field_validator("log_level")
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return level

    model_config = {
        "env_prefix": "DECOGRAPH_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_config() -> DecographConfig:
    """Get cached configuration instance.

    Returns:
        DecographConfig singleton instance.
    """
    return DecographConfig()


def reload_config() -> DecographConfig:
    """Reload configuration (clears cache).

    Returns:
        Fresh DecographConfig instance.
    """
    get_config.cache_clear()
    return get_config()
