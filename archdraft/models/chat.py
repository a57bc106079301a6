"""
Chat domain models and schemas.

Request/response schemas for the requirement-gathering conversation.

Dependencies: pydantic
System role: Chat API contracts
"""

import uuid

from pydantic import BaseModel, Field


class ChatRequest(BaseModel):
    """Request schema for one conversational turn."""

    message: str = Field(..., min_length=1, description="User utterance")


class ChatResponse(BaseModel):
    """Response schema for one conversational turn."""

    response: str = Field(description="Assistant reply")
    phase: str = Field(description="Conversation phase after this turn")
    requirements_gathered: bool = Field(
        description="Whether requirements were gathered and generation started"
    )
    project_id: uuid.UUID | None = Field(
        default=None, description="Project created by this conversation, if any"
    )
    audio_data: str | None = Field(
        default=None, description="Base64 encoded speech for the reply"
    )
