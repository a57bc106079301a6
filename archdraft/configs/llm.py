"""
LLM configuration settings.

Selects the chat model provider backing the generation capability and
tunes the diagram retry loop and validator classification policy.

Dependencies: pydantic, pydantic_settings
System role: Generation capability configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from archdraft.configs.base import BaseSettings


class LLMSettings(BaseSettings):
    """Chat model and generation loop configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LLM_",
        case_sensitive=False,
        extra="ignore",
    )

    provider: Literal["google_genai", "bedrock"] = Field(
        default="google_genai",
        description="LangChain chat model provider",
    )
    model_id: str = Field(
        default="gemini-3-flash-preview",
        description="Model identifier passed to the provider",
    )
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="Sampling temperature",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region (bedrock provider only)",
    )
    max_retries: int = Field(
        default=3,
        ge=1,
        description="Maximum generation attempts per diagram",
    )
    validation_policy: Literal["substring", "leading_keyword"] = Field(
        default="substring",
        description=(
            "How validator replies are classified: 'substring' treats any reply "
            "containing 'valid' as valid, 'leading_keyword' inspects only the first word"
        ),
    )
