"""
Unified application settings.

Aggregates all configuration modules into a single Settings class.
Provides dependency injection factory for FastAPI.

Dependencies: All config modules
System role: Central configuration aggregator for the application
"""

from functools import lru_cache

from archdraft.configs.auth import AuthSettings
from archdraft.configs.base import BaseSettings
from archdraft.configs.conversation import ConversationSettings
from archdraft.configs.database import DatabaseSettings
from archdraft.configs.llm import LLMSettings
from archdraft.configs.speech import SpeechSettings


class Settings(BaseSettings):
    """Unified application settings aggregating all config modules."""

    # Aggregated settings
    llm: LLMSettings = LLMSettings()
    database: DatabaseSettings = DatabaseSettings()
    auth: AuthSettings = AuthSettings()
    conversation: ConversationSettings = ConversationSettings()
    speech: SpeechSettings = SpeechSettings()


@lru_cache
def get_settings() -> Settings:
    """
    Get application settings singleton.

    Returns Settings instance, cached for dependency injection.
    Environment variables loaded once at startup.

    Returns:
        Settings: Application settings instance

    Usage:
        from archdraft.configs import get_settings
        settings = get_settings()
    """
    return Settings()
