"""
Project CRUD operations.

Provides Create, Read, Update, Delete operations for ProjectModel
with owner-scoped query methods.

Dependencies: sqlalchemy, archdraft.boundary.db.models
System role: Project persistence operations
"""

from typing import Sequence
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.orm import Session

from archdraft.boundary.db.CRUD.base_crud import BaseCRUD
from archdraft.boundary.db.models.project_model import ProjectModel


class ProjectCRUD(BaseCRUD[ProjectModel]):
    """CRUD operations for ProjectModel scoped by owning user."""

    def __init__(self) -> None:
        """Initialize ProjectCRUD with ProjectModel."""
        super().__init__(ProjectModel)

    def list_for_user(self, session: Session, user_id: str) -> Sequence[ProjectModel]:
        """
        Retrieve a user's projects, newest first.

        Args:
            session: Database session
            user_id: Owning user identifier

        Returns:
            Sequence of ProjectModel
        """
        stmt = (
            select(ProjectModel)
            .where(ProjectModel.user_id == user_id)
            .order_by(ProjectModel.created_at.desc())
        )
        return session.execute(stmt).scalars().all()

    def get_for_user(
        self,
        session: Session,
        project_id: UUID,
        user_id: str,
    ) -> ProjectModel | None:
        """
        Retrieve a project only if the user owns it.

        Args:
            session: Database session
            project_id: Project UUID
            user_id: Owning user identifier

        Returns:
            ProjectModel if found and owned, None otherwise
        """
        stmt = select(ProjectModel).where(
            ProjectModel.id == project_id,
            ProjectModel.user_id == user_id,
        )
        return session.execute(stmt).scalar_one_or_none()


project_crud = ProjectCRUD()
