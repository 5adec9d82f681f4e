"""Configuration loading for the Birthing Unit.

This module provides centralized configuration management:
- Load settings from environment variables and .env files
- Validate configuration using pydantic
- Provide typed access to all settings
"""

from datetime import datetime
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from birthing_unit.core.models import (
    DEFAULT_NAMES,
    MAX_RANDOM_AGE,
    MIN_RANDOM_AGE,
    FactoryConfig,
)
from birthing_unit.core.registry import MAX_NAME_LENGTH


class Settings(BaseSettings):
    """Application configuration loaded from environment.

    Every field can be set through a BIRTHING_UNIT_-prefixed environment
    variable or a .env file. List values are given as JSON.
    """

    model_config = SettingsConfigDict(
        env_prefix="BIRTHING_UNIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Person factory configuration
    names: list[str] = Field(
        default_factory=lambda: list(DEFAULT_NAMES),
        description="Pool of names drawn from when generating people",
    )
    min_random_age: int = Field(
        default=MIN_RANDOM_AGE,
        description="Youngest age (inclusive) of generated people",
    )
    max_random_age: int = Field(
        default=MAX_RANDOM_AGE,
        description="Oldest age (inclusive) of generated people",
    )
    random_seed: int | None = Field(
        default=None,
        description="Seed for the random source; unset for a fresh sequence",
    )

    # Registry configuration
    max_name_length: int = Field(
        default=MAX_NAME_LENGTH,
        description="Length at which married names are truncated",
    )

    # Demo configuration
    demo_count: int = Field(
        default=5,
        description="Number of random people seeded by the demo command",
    )
    fixed_now: datetime | None = Field(
        default=None,
        description="Pin the clock to this instant instead of the wall clock",
    )

    # Logging configuration
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Log level",
    )
    log_format: Literal["json", "text"] = Field(
        default="text",
        description="Log format",
    )

    @field_validator("names")
    @classmethod
    def validate_names(cls, v: list[str]) -> list[str]:
        """Ensure the name pool is non-empty and has no blank entries."""
        if not v:
            raise ValueError("names must not be empty")
        if any(not name.strip() for name in v):
            raise ValueError("names must not contain blank entries")
        return v

    @field_validator("min_random_age", "max_random_age")
    @classmethod
    def validate_age(cls, v: int) -> int:
        """Ensure ages are non-negative."""
        if v < 0:
            raise ValueError("ages must be non-negative")
        return v

    @field_validator("max_name_length")
    @classmethod
    def validate_max_name_length(cls, v: int) -> int:
        """Ensure the truncation length is positive."""
        if v <= 0:
            raise ValueError("max_name_length must be positive")
        return v

    @field_validator("demo_count")
    @classmethod
    def validate_demo_count(cls, v: int) -> int:
        """Ensure the demo count is non-negative."""
        if v < 0:
            raise ValueError("demo_count must be non-negative")
        return v

    @model_validator(mode="after")
    def validate_age_range(self) -> "Settings":
        """Ensure the age range is not inverted."""
        if self.min_random_age > self.max_random_age:
            raise ValueError(
                f"min_random_age ({self.min_random_age}) cannot exceed "
                f"max_random_age ({self.max_random_age})"
            )
        return self

    def factory_config(self) -> FactoryConfig:
        """Build the PersonFactory configuration from these settings."""
        return FactoryConfig(
            names=tuple(self.names),
            min_age=self.min_random_age,
            max_age=self.max_random_age,
        )


def load_settings(env_file: str | None = None) -> Settings:
    """Load application settings from environment.

    Args:
        env_file: Optional path to .env file. If not provided,
                 uses the default .env in the current directory.

    Returns:
        Validated Settings instance.

    Raises:
        ValidationError: If settings validation fails.
    """
    if env_file:
        return Settings(_env_file=env_file)  # type: ignore[call-arg]
    return Settings()


__all__ = ["Settings", "load_settings"]
