"""
Core business logic module.

Contains diagram generation, validation and orchestration, the
requirement-gathering conversation, and the exception hierarchy.
"""

from archdraft.core.exceptions import (
    ArchdraftException,
    AuthenticationError,
    DiagramGenerationError,
    DiagramNotFoundError,
    DiagramPayloadError,
    GenerationCapabilityError,
    PersistenceError,
    ProjectNotFoundError,
    UnsupportedDiagramKindError,
    ValidationError,
)

__all__ = [
    "ArchdraftException",
    "AuthenticationError",
    "DiagramGenerationError",
    "DiagramNotFoundError",
    "DiagramPayloadError",
    "GenerationCapabilityError",
    "PersistenceError",
    "ProjectNotFoundError",
    "UnsupportedDiagramKindError",
    "ValidationError",
]
