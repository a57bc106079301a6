"""
Chat API endpoints.

Routes:
- POST /chat - Process one requirement-gathering turn for the caller
- DELETE /chat - Discard the caller's conversation

Dependencies: archdraft.application.services.chat_service, archdraft.models
System role: Conversational requirement gathering HTTP API
"""

import logging

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from archdraft.api.deps import get_chat_service
from archdraft.api.routers.router_utils import to_http_exception
from archdraft.application.services.chat_service import ChatService
from archdraft.boundary.auth import CurrentUser, get_current_user
from archdraft.core.exceptions import ArchdraftException
from archdraft.models.chat import ChatRequest, ChatResponse
from archdraft.models.common import ERROR_RESPONSES

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"], responses=ERROR_RESPONSES)


@router.post("", response_model=ChatResponse)
async def send_message(
    request: ChatRequest,
    user: CurrentUser = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """
    Process a chat message for the authenticated caller.

    Model calls block, so the turn runs in the threadpool; the per-user
    lock inside the engine serialises concurrent turns.

    Args:
        request: ChatRequest with the user's message
        user: Authenticated caller
        chat_service: Injected ChatService

    Returns:
        ChatResponse: Reply with phase and project information

    Raises:
        HTTPException(502): Model call failed
        HTTPException(500): Project creation failed
    """
    try:
        return await run_in_threadpool(
            chat_service.send_message,
            user.user_id,
            request.message,
            user.token,
        )
    except ArchdraftException as e:
        raise to_http_exception(e, "chat", user_id=user.user_id) from e


@router.delete("", status_code=204)
async def clear_conversation(
    user: CurrentUser = Depends(get_current_user),
    chat_service: ChatService = Depends(get_chat_service),
) -> None:
    """Discard the caller's conversation; the next message starts a new project."""
    chat_service.clear(user.user_id)
