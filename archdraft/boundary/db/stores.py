"""
SQLAlchemy implementations of the core store interfaces.

Each call runs in its own session and commits before returning, so a
saved diagram is durable independently of the generation that produced it.

Dependencies: sqlalchemy, archdraft.boundary.db.CRUD, archdraft.core.diagrams
System role: Project and diagram persistence adapters
"""

import logging
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from archdraft.boundary.db.CRUD.diagram_crud import diagram_crud
from archdraft.boundary.db.CRUD.project_crud import project_crud
from archdraft.boundary.db.models import DiagramModel, ProjectModel
from archdraft.core.diagrams.diagram_schema import ProjectContext, SavedDiagram
from archdraft.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)


def to_project_context(row: ProjectModel) -> ProjectContext:
    return ProjectContext(id=row.id, name=row.name, description=row.description or "")


def to_saved_diagram(row: DiagramModel) -> SavedDiagram:
    return SavedDiagram(
        id=row.id,
        project_id=row.project_id,
        name=row.name,
        kind_label=row.kind_label,
        content=row.content,
    )


class SqlProjectStore:
    """ProjectStore backed by the projects table."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def create_project(self, user_id: str, name: str, description: str) -> ProjectContext:
        """
        Insert a project owned by user_id.

        Raises:
            PersistenceError: If the insert fails
        """
        with self._session_factory() as session:
            try:
                row = project_crud.create(
                    session, user_id=str(user_id), name=name, description=description or ""
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"{__name__}:create_project - {type(e).__name__}: {e}")
                raise PersistenceError(
                    f"Failed to create project '{name}': {e}",
                    operation="create_project",
                ) from e

            logger.info(f"{__name__}:create_project - Created project {row.id} for user {user_id}")
            return to_project_context(row)


class SqlDiagramStore:
    """DiagramStore backed by the diagrams table."""

    def __init__(self, session_factory: sessionmaker) -> None:
        self._session_factory = session_factory

    def insert_diagram(
        self,
        project_id: UUID,
        name: str,
        kind_label: str,
        content: str,
    ) -> SavedDiagram | None:
        """
        Insert a diagram row.

        Returns:
            SavedDiagram, or None when the project does not exist or the
            insert fails
        """
        with self._session_factory() as session:
            if not project_crud.exists(session, project_id):
                logger.warning(
                    f"{__name__}:insert_diagram - Project {project_id} not found, nothing saved"
                )
                return None
            try:
                row = diagram_crud.create(
                    session,
                    project_id=project_id,
                    name=name,
                    kind_label=kind_label,
                    content=content,
                )
                session.commit()
            except SQLAlchemyError as e:
                session.rollback()
                logger.error(f"{__name__}:insert_diagram - {type(e).__name__}: {e}")
                return None

            logger.info(
                f"{__name__}:insert_diagram - Saved {kind_label} {row.id} for project {project_id}"
            )
            return to_saved_diagram(row)
