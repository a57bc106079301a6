"""
Speech synthesis boundary.

Chat replies can be voiced by any collaborator implementing
SpeechSynthesizer; the application treats it as optional. The shipped
implementation calls Amazon Polly and is built from SpeechSettings.

Dependencies: boto3, archdraft.configs
System role: Text-to-speech boundary
"""

import logging
from typing import Any, Protocol, runtime_checkable

import boto3

from archdraft.configs.speech import SpeechSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class SpeechSynthesizer(Protocol):
    def synthesize(self, text: str) -> bytes:
        """Return encoded audio for text."""
        ...


class PollySpeechSynthesizer:
    """Amazon Polly text-to-speech client."""

    def __init__(
        self,
        client: Any,
        voice_id: str = "Joanna",
        engine: str = "neural",
        output_format: str = "mp3",
    ) -> None:
        """
        Initialize Polly synthesizer.

        Args:
            client: boto3 Polly client
            voice_id: Polly voice
            engine: standard or neural
            output_format: mp3, ogg_vorbis or pcm
        """
        self._client = client
        self.voice_id = voice_id
        self.engine = engine
        self.output_format = output_format

    def synthesize(self, text: str) -> bytes:
        """
        Voice text.

        Returns:
            bytes: Audio in output_format

        Raises:
            ClientError: If Polly rejects the request
        """
        response = self._client.synthesize_speech(
            Text=text,
            VoiceId=self.voice_id,
            Engine=self.engine,
            OutputFormat=self.output_format,
        )
        with response["AudioStream"] as stream:
            audio = stream.read()
        logger.debug(f"{__name__}:synthesize - text_len={len(text)}, audio_len={len(audio)}")
        return audio


def create_speech_synthesizer(settings: SpeechSettings) -> SpeechSynthesizer | None:
    """Build the configured synthesizer, or None when speech is disabled."""
    if not settings.enabled:
        return None
    logger.info(
        f"{__name__}:create_speech_synthesizer - Polly voice={settings.voice_id}, "
        f"region={settings.region}"
    )
    return PollySpeechSynthesizer(
        boto3.client("polly", region_name=settings.region),
        voice_id=settings.voice_id,
        engine=settings.engine,
        output_format=settings.output_format,
    )
