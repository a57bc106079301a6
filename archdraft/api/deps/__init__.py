"""API-specific dependencies."""

# Re-export common dependencies
from .dependencies import (
    get_chat_service,
    get_conversation_engine,
    get_diagram_service,
    get_orchestrator,
    get_project_service,
    get_requirement_extractor,
    get_service_cache,
)

__all__ = [
    "get_chat_service",
    "get_conversation_engine",
    "get_diagram_service",
    "get_orchestrator",
    "get_project_service",
    "get_requirement_extractor",
    "get_service_cache",
]
