"""
Storage interfaces consumed by the core.

The core never talks to a database directly; it depends on these
protocols and the boundary layer provides SQLAlchemy implementations.

Dependencies: archdraft.core.diagrams.diagram_schema
System role: Persistence boundary contracts
"""

from typing import Protocol
from uuid import UUID

from archdraft.core.diagrams.diagram_schema import ProjectContext, SavedDiagram


class DiagramStore(Protocol):
    def insert_diagram(
        self,
        project_id: UUID,
        name: str,
        kind_label: str,
        content: str,
    ) -> SavedDiagram | None:
        """Persist a diagram; None signals that no row was written."""
        ...


class ProjectStore(Protocol):
    def create_project(self, user_id: str, name: str, description: str) -> ProjectContext:
        """Create a project owned by user_id."""
        ...
