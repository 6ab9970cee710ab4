"""
Demo configuration.

All settings are configurable via environment variables with PATTERNS_ prefix.
"""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.constants import (
    DEFAULT_COUNTER_START,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MIN_NAME_LENGTH,
)

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class DemoConfig(BaseSettings):
    """Configuration for the pattern demos."""

    log_level: str = Field(
        default=DEFAULT_LOG_LEVEL,
        description="Logging level for the demo driver",
    )

    # Proxy validation
    min_name_length: int = Field(
        default=DEFAULT_MIN_NAME_LENGTH,
        description="Minimum length accepted for 'name' by the person validation policy",
    )

    # Singleton
    counter_start: int = Field(
        default=DEFAULT_COUNTER_START,
        description="Initial value of the singleton counter",
    )

    # Output
    echo_output: bool = Field(
        default=True,
        description="Print demo lines to stdout in addition to returning them",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Normalize and validate the logging level name."""
        level = v.upper()
        if level not in VALID_LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("min_name_length")
    @classmethod
    def validate_min_name_length(cls, v: int) -> int:
        """Validate the minimum name length is positive."""
        if v < 1:
            raise ValueError("min_name_length must be at least 1")
        return v

    class Config:
        env_prefix = "PATTERNS_"
        case_sensitive = False


# Global config instance (singleton)
_config: Optional[DemoConfig] = None


def get_config() -> DemoConfig:
    """Get or create the demo configuration singleton."""
    global _config
    if _config is None:
        _config = DemoConfig()
        logger.debug(f"Demo config loaded: {_config.model_dump()}")
    return _config


def reset_config() -> None:
    """Reset config singleton (for testing)."""
    global _config
    _config = None
