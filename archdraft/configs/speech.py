"""
Speech synthesis configuration settings.

Chat replies are voiced only when SPEECH_ENABLED is set; the synthesizer
is Amazon Polly.

Dependencies: pydantic, pydantic_settings
System role: Text-to-speech configuration
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import SettingsConfigDict

from archdraft.configs.base import BaseSettings


class SpeechSettings(BaseSettings):
    """Polly voice configuration for chat replies."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="SPEECH_",
        case_sensitive=False,
        extra="ignore",
    )

    enabled: bool = Field(
        default=False,
        description="Attach synthesized audio to chat replies",
    )
    voice_id: str = Field(
        default="Joanna",
        description="Polly voice",
    )
    engine: Literal["standard", "neural"] = Field(
        default="neural",
        description="Polly synthesis engine",
    )
    output_format: Literal["mp3", "ogg_vorbis", "pcm"] = Field(
        default="mp3",
        description="Encoding of the returned audio",
    )
    region: str = Field(
        default="us-east-1",
        description="AWS region of the Polly endpoint",
    )
