"""
Shared settings base for archdraft configuration classes.

Every settings class reads the process environment and an optional .env
file, ignoring variables it does not declare. Subclasses add an
``env_prefix`` (LLM_, DATABASE_, AUTH_, CONVERSATION_, SPEECH_); the
unprefixed fields here describe the deployment itself.

Dependencies: pydantic, pydantic_settings
System role: Foundation for all configuration classes
"""

import logging
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings as PydanticBaseSettings, SettingsConfigDict


class BaseSettings(PydanticBaseSettings):
    """Deployment-wide settings inherited by every archdraft config class."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    environment: Literal["development", "test", "staging", "production"] = Field(
        default="development",
        description="Deployment the API runs in",
    )
    debug: bool = Field(
        default=False,
        description="Force DEBUG logging regardless of log_level",
    )
    log_level: str = Field(
        default="INFO",
        description="Root log level name for the API process",
    )

    @field_validator("log_level")
    @classmethod
    def _known_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @property
    def effective_log_level(self) -> str:
        """Level handed to configure_logging."""
        return "DEBUG" if self.debug else self.log_level
