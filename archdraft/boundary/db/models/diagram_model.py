"""
Diagram ORM model.

Stores the Mermaid source and canonical kind label of a generated diagram.

Dependencies: sqlalchemy, archdraft.boundary.db.base
System role: Diagram persistence
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from archdraft.boundary.db.base import Base, TimestampMixin, UUIDMixin


class DiagramModel(Base, UUIDMixin, TimestampMixin):
    """
    Diagram ORM model.

    Attributes:
        id: UUID primary key (auto-generated)
        project_id: Owning project (cascade delete)
        name: Diagram name chosen by the model
        kind_label: Canonical kind label ("ERD", "Flowchart", ...)
        content: Mermaid source
    """

    __tablename__ = "diagrams"

    project_id: Mapped[UUID] = mapped_column(
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    kind_label: Mapped[str] = mapped_column(String(50), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)

    project = relationship("ProjectModel", back_populates="diagrams")
