"""
Test suite for ChatService.

System role: Verification of chat turn shaping and speech attachment
"""

import base64
import uuid
from unittest.mock import MagicMock

import pytest

from archdraft.application.services.chat_service import ChatService
from archdraft.core.conversation.conversation_engine import ConversationEngine
from archdraft.core.conversation.conversation_schema import Phase, TurnResult


@pytest.fixture
def mock_engine() -> MagicMock:
    """Provide mock conversation engine."""
    engine = MagicMock(spec=ConversationEngine)
    engine.process_turn.return_value = TurnResult(
        reply="What should it do?",
        phase=Phase.GATHERING,
        requirements_gathered=False,
        project_id=None,
    )
    return engine


class TestSendMessage:
    """Test suite for ChatService.send_message()."""

    def test_should_shape_turn_as_response(self, mock_engine: MagicMock) -> None:
        """Test turn fields map onto ChatResponse."""
        # Arrange
        service = ChatService(mock_engine)

        # Act
        response = service.send_message("user-1", "Build me a todo app", auth_token="tok")

        # Assert
        mock_engine.process_turn.assert_called_once_with(
            "user-1", "Build me a todo app", auth_token="tok"
        )
        assert response.response == "What should it do?"
        assert response.phase == "gathering"
        assert response.requirements_gathered is False
        assert response.project_id is None
        assert response.audio_data is None

    def test_should_report_project_id_when_done(self, mock_engine: MagicMock) -> None:
        """Test finished turns expose the project."""
        # Arrange
        project_id = uuid.uuid4()
        mock_engine.process_turn.return_value = TurnResult(
            reply="Created!",
            phase=Phase.DONE,
            requirements_gathered=True,
            project_id=project_id,
        )
        service = ChatService(mock_engine)

        # Act
        response = service.send_message("user-1", "Go")

        # Assert
        assert response.phase == "done"
        assert response.requirements_gathered is True
        assert response.project_id == project_id

    def test_should_attach_base64_audio(self, mock_engine: MagicMock) -> None:
        """Test synthesized audio is base64 encoded."""
        # Arrange
        synthesizer = MagicMock()
        synthesizer.synthesize.return_value = b"RIFF-audio"
        service = ChatService(mock_engine, synthesizer=synthesizer)

        # Act
        response = service.send_message("user-1", "hi")

        # Assert
        synthesizer.synthesize.assert_called_once_with("What should it do?")
        assert base64.b64decode(response.audio_data) == b"RIFF-audio"

    def test_should_still_reply_when_synthesis_fails(self, mock_engine: MagicMock) -> None:
        """Test speech failures drop audio only."""
        # Arrange
        synthesizer = MagicMock()
        synthesizer.synthesize.side_effect = RuntimeError("polly down")
        service = ChatService(mock_engine, synthesizer=synthesizer)

        # Act
        response = service.send_message("user-1", "hi")

        # Assert
        assert response.response == "What should it do?"
        assert response.audio_data is None

    def test_should_propagate_engine_errors(self, mock_engine: MagicMock) -> None:
        """Test turn failures reach the caller."""
        # Arrange
        mock_engine.process_turn.side_effect = RuntimeError("boom")
        service = ChatService(mock_engine)

        # Act & Assert
        with pytest.raises(RuntimeError):
            service.send_message("user-1", "hi")


class TestClear:
    """Test suite for ChatService.clear()."""

    def test_should_reset_engine_session(self, mock_engine: MagicMock) -> None:
        """Test clear delegates to engine.reset."""
        # Arrange
        mock_engine.reset.return_value = True
        service = ChatService(mock_engine)

        # Act & Assert
        assert service.clear("user-1") is True
        mock_engine.reset.assert_called_once_with("user-1")
