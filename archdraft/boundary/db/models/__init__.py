"""
Database models package.

Exports:
  - ProjectModel: Project ORM model
  - DiagramModel: Diagram ORM model

Dependencies: sqlalchemy, archdraft.boundary.db.base
System role: Database model definitions for domain entities
"""

from archdraft.boundary.db.models.diagram_model import DiagramModel
from archdraft.boundary.db.models.project_model import ProjectModel

__all__ = [
    "DiagramModel",
    "ProjectModel",
]
