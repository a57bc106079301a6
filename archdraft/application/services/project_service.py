"""
Project service.

Owner-scoped project listing and lookup, plus project creation that
expands the description into detailed requirements and generates the
best-fitting diagram.

Dependencies: sqlalchemy, archdraft.boundary.db, archdraft.core.diagrams, archdraft.observability
System role: Project management orchestration
"""

import logging
from typing import Sequence
from uuid import UUID

from sqlalchemy.orm import Session

from archdraft.boundary.db.CRUD.project_crud import project_crud
from archdraft.boundary.db.models import ProjectModel
from archdraft.boundary.db.stores import to_project_context
from archdraft.core.diagrams.diagram_schema import SavedDiagram
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator
from archdraft.core.diagrams.requirement_extractor import RequirementExtractor
from archdraft.core.exceptions import ProjectNotFoundError
from archdraft.observability.log_utils import log_exception_with_context

logger = logging.getLogger(__name__)


class ProjectService:
    """Project management service."""

    def __init__(
        self,
        db: Session,
        orchestrator: DiagramOrchestrator,
        requirement_extractor: RequirementExtractor,
    ) -> None:
        """
        Initialize project service.

        Args:
            db: Request-scoped database session
            orchestrator: Diagram orchestrator
            requirement_extractor: Expands descriptions into requirements
        """
        self.db = db
        self.orchestrator = orchestrator
        self.requirement_extractor = requirement_extractor

    def list_projects(self, user_id: str) -> Sequence[ProjectModel]:
        return project_crud.list_for_user(self.db, user_id)

    def get_project(self, project_id: UUID, user_id: str) -> ProjectModel:
        """
        Get a project owned by the caller.

        Raises:
            ProjectNotFoundError: If missing or owned by someone else
        """
        project = project_crud.get_for_user(self.db, project_id, user_id)
        if project is None:
            raise ProjectNotFoundError(str(project_id))
        return project

    def create_project(
        self,
        user_id: str,
        name: str,
        description: str,
    ) -> tuple[ProjectModel, SavedDiagram | None]:
        """
        Create a project and generate its optimal diagram.

        The project is committed before generation starts. Failures while
        extracting requirements or generating the diagram are logged and
        leave the project without a diagram.

        Args:
            user_id: Owning user
            name: Project name
            description: Project description

        Returns:
            tuple: Created project and the saved diagram (None if skipped or failed)
        """
        logger.info(f"{__name__}:create_project - START user_id={user_id}, name='{name}'")
        project = project_crud.create(
            self.db, user_id=user_id, name=name, description=description or ""
        )
        self.db.commit()

        diagram = self._generate_optimal_diagram(project)
        logger.info(
            f"{__name__}:create_project - END project_id={project.id}, "
            f"diagram_id={diagram.id if diagram else None}"
        )
        return project, diagram

    def _generate_optimal_diagram(self, project: ProjectModel) -> SavedDiagram | None:
        try:
            requirements = self.requirement_extractor.extract(project.name, project.description)
            if not requirements:
                logger.warning(
                    f"{__name__}:_generate_optimal_diagram - Skipping diagram generation for "
                    f"project {project.id} due to empty detailed requirements"
                )
                return None
            return self.orchestrator.generate_optimal(to_project_context(project), requirements)
        except Exception as e:
            log_exception_with_context(
                logger,
                f"{__name__}:_generate_optimal_diagram - Error determining or generating "
                f"optimal diagram for project {project.id}",
                e,
                user_id=project.user_id,
                project_id=project.id,
            )
            return None
