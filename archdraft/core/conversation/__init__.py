"""Requirement-gathering conversation."""

from archdraft.core.conversation.conversation_engine import ConversationEngine
from archdraft.core.conversation.conversation_schema import (
    ConversationState,
    Phase,
    TurnResult,
)
from archdraft.core.conversation.session_store import SessionStore

__all__ = [
    "ConversationEngine",
    "ConversationState",
    "Phase",
    "SessionStore",
    "TurnResult",
]
