"""
Application services.

Orchestrate core components and boundary adapters for the HTTP layer.
"""

from archdraft.application.services.chat_service import ChatService
from archdraft.application.services.diagram_service import DiagramService
from archdraft.application.services.project_service import ProjectService

__all__ = [
    "ChatService",
    "DiagramService",
    "ProjectService",
]
