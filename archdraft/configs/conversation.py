"""
Conversation configuration settings.

Dependencies: pydantic, pydantic_settings
System role: Session registry sizing
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from archdraft.configs.base import BaseSettings


class ConversationSettings(BaseSettings):
    """Conversation session registry configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CONVERSATION_",
        case_sensitive=False,
        extra="ignore",
    )

    max_sessions: int | None = Field(
        default=None,
        ge=1,
        description=(
            "Upper bound on tracked sessions; least recently used sessions are "
            "evicted beyond it. None keeps every session for the process lifetime"
        ),
    )
