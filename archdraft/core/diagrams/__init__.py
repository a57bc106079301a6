"""Diagram generation, validation and orchestration."""

from archdraft.core.diagrams.diagram_kinds import DiagramKind, resolve_diagram_kind
from archdraft.core.diagrams.diagram_schema import (
    FailureDomain,
    GenerationFailure,
    GenerationRequest,
    GenerationSuccess,
    ProjectContext,
    SavedDiagram,
    ValidationOutcome,
)
from archdraft.core.diagrams.generator import MAX_RETRIES, DiagramGenerator
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator, create_orchestrator
from archdraft.core.diagrams.validator import DiagramValidator

__all__ = [
    "MAX_RETRIES",
    "DiagramGenerator",
    "DiagramKind",
    "DiagramOrchestrator",
    "DiagramValidator",
    "FailureDomain",
    "GenerationFailure",
    "GenerationRequest",
    "GenerationSuccess",
    "ProjectContext",
    "SavedDiagram",
    "ValidationOutcome",
    "create_orchestrator",
    "resolve_diagram_kind",
]
