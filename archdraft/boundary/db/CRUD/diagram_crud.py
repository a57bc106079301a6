"""
Diagram CRUD operations.

Provides Create, Read, Update, Delete operations for DiagramModel
with project-scoped query methods.

Dependencies: sqlalchemy, archdraft.boundary.db.models
System role: Diagram persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from archdraft.boundary.db.CRUD.base_crud import BaseCRUD
from archdraft.boundary.db.models.diagram_model import DiagramModel


class DiagramCRUD(BaseCRUD[DiagramModel]):
    """CRUD operations for DiagramModel scoped by project."""

    def __init__(self) -> None:
        """Initialize DiagramCRUD with DiagramModel."""
        super().__init__(DiagramModel)

    def list_for_project(self, session: Session, project_id: UUID) -> Sequence[DiagramModel]:
        """
        Retrieve all diagrams of a project in creation order.

        Args:
            session: Database session
            project_id: Project UUID

        Returns:
            Sequence of DiagramModel
        """
        stmt = (
            select(DiagramModel)
            .where(DiagramModel.project_id == project_id)
            .order_by(DiagramModel.created_at)
        )
        return session.execute(stmt).scalars().all()

    def get_in_project(
        self,
        session: Session,
        diagram_id: UUID,
        project_id: UUID,
    ) -> DiagramModel | None:
        """
        Retrieve a diagram only if it belongs to the project.

        Args:
            session: Database session
            diagram_id: Diagram UUID
            project_id: Project UUID

        Returns:
            DiagramModel if found, None otherwise
        """
        stmt = select(DiagramModel).where(
            DiagramModel.id == diagram_id,
            DiagramModel.project_id == project_id,
        )
        return session.execute(stmt).scalar_one_or_none()


diagram_crud = DiagramCRUD()
