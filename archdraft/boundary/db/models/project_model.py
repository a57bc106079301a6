"""
Project ORM model.

A project is owned by one user and groups the diagrams generated for it.

Dependencies: sqlalchemy, archdraft.boundary.db.base
System role: Project persistence
"""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from archdraft.boundary.db.base import Base, TimestampMixin, UUIDMixin


class ProjectModel(Base, UUIDMixin, TimestampMixin):
    """
    Project ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        user_id: Owning user identifier (from the identity token)
        name: Project name
        description: Free-text project description
        diagrams: DiagramModel rows for this project (cascading delete)
    """

    __tablename__ = "projects"

    user_id: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")

    diagrams = relationship(
        "DiagramModel",
        back_populates="project",
        cascade="all, delete-orphan",
    )
