"""
Chat service for conversational requirement gathering.

Runs one turn through the conversation engine and optionally voices the
reply through a speech synthesizer.

Dependencies: archdraft.core.conversation, archdraft.boundary.speech, archdraft.models,
    archdraft.observability
System role: Chat service orchestration layer
"""

import base64
import logging

from archdraft.boundary.speech import SpeechSynthesizer
from archdraft.core.conversation.conversation_engine import ConversationEngine
from archdraft.models.chat import ChatResponse
from archdraft.observability.log_utils import log_with_context

logger = logging.getLogger(__name__)


class ChatService:
    """
    Chat service for requirement-gathering conversations.

    Thin application layer over ConversationEngine: shapes the turn result
    as an API response and attaches synthesized audio when configured.
    """

    def __init__(
        self,
        engine: ConversationEngine,
        synthesizer: SpeechSynthesizer | None = None,
    ) -> None:
        """
        Initialize chat service.

        Args:
            engine: Shared conversation engine
            synthesizer: Optional text-to-speech collaborator
        """
        self.engine = engine
        self.synthesizer = synthesizer

    def send_message(
        self,
        user_id: str,
        message: str,
        auth_token: str | None = None,
    ) -> ChatResponse:
        """
        Process one user message.

        Args:
            user_id: Caller identity
            message: User utterance
            auth_token: Caller credential

        Returns:
            ChatResponse: Reply, phase and project information
        """
        turn = self.engine.process_turn(user_id, message, auth_token=auth_token)
        return ChatResponse(
            response=turn.reply,
            phase=turn.phase.value,
            requirements_gathered=turn.requirements_gathered,
            project_id=turn.project_id,
            audio_data=self._synthesize(user_id, turn.reply),
        )

    def clear(self, user_id: str) -> bool:
        """Discard the caller's conversation."""
        return self.engine.reset(user_id)

    def _synthesize(self, user_id: str, text: str) -> str | None:
        if self.synthesizer is None or not text:
            return None
        try:
            audio = self.synthesizer.synthesize(text)
        except Exception as e:
            # A reply without audio is still a valid reply
            log_with_context(
                logger,
                logging.WARNING,
                f"{__name__}:_synthesize - Speech synthesis failed: {e}",
                user_id=user_id,
                error_type=type(e).__name__,
            )
            return None
        return base64.b64encode(audio).decode("ascii") if audio else None
