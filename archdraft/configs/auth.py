"""
Authentication configuration settings.

JWT verification parameters used to resolve a caller to a user id.

Dependencies: pydantic, pydantic_settings
System role: Identity resolution configuration
"""

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from archdraft.configs.base import BaseSettings


class AuthSettings(BaseSettings):
    """JWT bearer token configuration."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="AUTH_",
        case_sensitive=False,
        extra="ignore",
    )

    jwt_secret: str = Field(
        default="change-me",
        description="Shared secret used to verify bearer tokens",
    )
    jwt_algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    user_id_claim: str = Field(
        default="userId",
        description="Claim holding the stable user identifier",
    )
