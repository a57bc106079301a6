"""
Text generation capability adapter.

Defines the prompt-in/text-out boundary the core depends on and a LangChain
chat-model implementation of it. Transport failures are re-raised as
GenerationCapabilityError so callers can tell them apart from their own bugs.

Dependencies: langchain_core, langchain_google_genai, langchain_aws, archdraft.configs
System role: Generation capability boundary
"""

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from archdraft.core.exceptions import GenerationCapabilityError

if TYPE_CHECKING:
    from langchain_core.language_models.chat_models import BaseChatModel

    from archdraft.configs.llm import LLMSettings

logger = logging.getLogger(__name__)


@runtime_checkable
class TextGenerator(Protocol):
    """
    Stateless prompt completion capability.

    Implementations should raise GenerationCapabilityError for transport,
    quota and provider failures. The diagram loop also treats a bare
    TimeoutError or ConnectionError as a failed attempt; anything else
    ends generation.
    """

    def generate(self, prompt: str) -> str:
        """Return the completion text for a prompt."""
        ...


def _content_to_text(content) -> str:
    """Flatten LangChain message content (str or list of parts) to text."""
    if isinstance(content, str):
        return content
    parts: list[str] = []
    for part in content or []:
        if isinstance(part, str):
            parts.append(part)
        elif isinstance(part, dict) and part.get("type") == "text":
            parts.append(part.get("text", ""))
    return "".join(parts)


class LangChainTextGenerator:
    """TextGenerator backed by a LangChain chat model."""

    def __init__(self, model: "BaseChatModel", provider: str | None = None) -> None:
        """
        Initialize generator with a chat model.

        Args:
            model: Any LangChain chat model (Gemini, Bedrock, ...)
            provider: Provider name used in error context
        """
        self._model = model
        self._provider = provider

    def generate(self, prompt: str) -> str:
        """
        Send a single human prompt and return the reply text.

        Args:
            prompt: Fully rendered prompt text

        Returns:
            str: Model reply text

        Raises:
            GenerationCapabilityError: If the model call fails for any reason
        """
        logger.debug(f"{__name__}:generate - prompt_len={len(prompt)}")
        try:
            message = self._model.invoke(prompt)
        except Exception as e:
            logger.error(f"{__name__}:generate - {type(e).__name__}: {e}")
            raise GenerationCapabilityError(
                f"Text generation failed: {e}",
                provider=self._provider,
            ) from e

        text = _content_to_text(message.content)
        logger.debug(f"{__name__}:generate - response_len={len(text)}")
        return text


def build_chat_model(settings: "LLMSettings") -> "BaseChatModel":
    """
    Create the LangChain chat model selected by settings.

    Provider packages are imported lazily so only the configured one
    needs credentials at startup.

    Args:
        settings: LLM configuration

    Returns:
        BaseChatModel: Configured chat model

    Raises:
        ValueError: If the provider is not supported
    """
    if settings.provider == "google_genai":
        from langchain_google_genai import ChatGoogleGenerativeAI

        return ChatGoogleGenerativeAI(
            model=settings.model_id,
            temperature=settings.temperature,
        )
    if settings.provider == "bedrock":
        from langchain_aws import ChatBedrockConverse

        return ChatBedrockConverse(
            model=settings.model_id,
            region_name=settings.region,
            temperature=settings.temperature,
        )
    raise ValueError(f"Unsupported LLM provider: {settings.provider}")


def create_text_generator(settings: "LLMSettings") -> LangChainTextGenerator:
    """Build a LangChainTextGenerator from settings."""
    return LangChainTextGenerator(
        model=build_chat_model(settings),
        provider=settings.provider,
    )
