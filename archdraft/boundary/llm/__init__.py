"""Generation capability boundary."""

from archdraft.boundary.llm.text_generator import (
    LangChainTextGenerator,
    TextGenerator,
    build_chat_model,
    create_text_generator,
)

__all__ = [
    "TextGenerator",
    "LangChainTextGenerator",
    "build_chat_model",
    "create_text_generator",
]
