"""
Diagram service.

Project-scoped diagram CRUD plus generation, explanation and SQL
derivation through the diagram orchestrator.

Dependencies: sqlalchemy, archdraft.boundary.db, archdraft.core.diagrams
System role: Diagram management orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from archdraft.boundary.db.CRUD.diagram_crud import diagram_crud
from archdraft.boundary.db.CRUD.project_crud import project_crud
from archdraft.boundary.db.models import DiagramModel, ProjectModel
from archdraft.boundary.db.stores import to_project_context
from archdraft.core.diagrams.diagram_kinds import resolve_general_type
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator
from archdraft.core.exceptions import (
    DiagramNotFoundError,
    PersistenceError,
    ProjectNotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class DiagramService:
    """Diagram management service scoped to projects owned by the caller."""

    def __init__(self, db: Session, orchestrator: DiagramOrchestrator) -> None:
        """
        Initialize diagram service.

        Args:
            db: Request-scoped database session
            orchestrator: Diagram orchestrator
        """
        self.db = db
        self.orchestrator = orchestrator

    def _get_project(self, project_id: UUID, user_id: str) -> ProjectModel:
        project = project_crud.get_for_user(self.db, project_id, user_id)
        if project is None:
            raise ProjectNotFoundError(str(project_id))
        return project

    def list_diagrams(self, project_id: UUID, user_id: str) -> Sequence[DiagramModel]:
        self._get_project(project_id, user_id)
        return diagram_crud.list_for_project(self.db, project_id)

    def get_diagram(self, project_id: UUID, diagram_id: UUID, user_id: str) -> DiagramModel:
        """
        Get a diagram within a caller-owned project.

        Raises:
            ProjectNotFoundError: If the project is missing or not owned
            DiagramNotFoundError: If the diagram is not in the project
        """
        self._get_project(project_id, user_id)
        diagram = diagram_crud.get_in_project(self.db, diagram_id, project_id)
        if diagram is None:
            raise DiagramNotFoundError(str(diagram_id))
        return diagram

    def create_diagram(
        self,
        project_id: UUID,
        user_id: str,
        requirement: str,
        general_type: str | None = None,
    ) -> DiagramModel:
        """
        Generate and store a diagram for a project.

        Args:
            project_id: Target project
            user_id: Caller
            requirement: Requirement text
            general_type: Optional coarse type; inferred from the text when None

        Returns:
            DiagramModel: Stored diagram

        Raises:
            ValidationError: Unknown general_type
            DiagramGenerationError: Generator gave up
            PersistenceError: Diagram could not be stored
        """
        project = self._get_project(project_id, user_id)
        context = to_project_context(project)

        if general_type:
            kind = resolve_general_type(general_type)
            saved = self.orchestrator.generate_and_save(context, kind.label, requirement)
        else:
            saved = self.orchestrator.generate_from_request(context, requirement)

        diagram = diagram_crud.get_by_id(self.db, saved.id)
        if diagram is None:
            raise PersistenceError(
                f"Saved diagram {saved.id} could not be read back",
                operation="get_diagram",
            )
        logger.info(
            f"{__name__}:create_diagram - Created {diagram.kind_label} {diagram.id} "
            f"for project {project_id}"
        )
        return diagram

    def update_diagram(
        self,
        project_id: UUID,
        diagram_id: UUID,
        user_id: str,
        name: str | None = None,
        content: str | None = None,
    ) -> DiagramModel:
        """
        Update a diagram's name and/or content.

        Raises:
            ValidationError: If neither field is supplied
        """
        diagram = self.get_diagram(project_id, diagram_id, user_id)
        changes = {
            field: value
            for field, value in (("name", name), ("content", content))
            if value is not None
        }
        if not changes:
            raise ValidationError("Nothing to update", field="name")

        updated = diagram_crud.update_by_id(self.db, diagram.id, **changes)
        self.db.commit()
        return updated

    def delete_diagram(self, project_id: UUID, diagram_id: UUID, user_id: str) -> None:
        diagram = self.get_diagram(project_id, diagram_id, user_id)
        diagram_crud.delete_by_id(self.db, diagram.id)
        self.db.commit()
        logger.info(f"{__name__}:delete_diagram - Deleted diagram {diagram_id}")

    def explain_diagram(self, project_id: UUID, diagram_id: UUID, user_id: str) -> str:
        diagram = self.get_diagram(project_id, diagram_id, user_id)
        return self.orchestrator.explain_diagram(diagram.kind_label, diagram.content)

    def generate_sql(self, project_id: UUID, diagram_id: UUID, user_id: str) -> str:
        """
        Derive SQL from an ERD diagram.

        Raises:
            ValidationError: If the diagram is not an ERD
        """
        diagram = self.get_diagram(project_id, diagram_id, user_id)
        return self.orchestrator.generate_sql(diagram.kind_label, diagram.content)
