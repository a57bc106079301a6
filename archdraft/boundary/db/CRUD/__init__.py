"""
CRUD operations for database models.

Exports base CRUD class and model-specific CRUD implementations
with pre-instantiated singletons for direct use.

Usage:
    from archdraft.boundary.db.CRUD import project_crud, diagram_crud

    project = project_crud.get_for_user(db, project_id, user_id)
"""

from archdraft.boundary.db.CRUD.base_crud import BaseCRUD
from archdraft.boundary.db.CRUD.diagram_crud import DiagramCRUD, diagram_crud
from archdraft.boundary.db.CRUD.project_crud import ProjectCRUD, project_crud

__all__ = [
    "BaseCRUD",
    "DiagramCRUD",
    "diagram_crud",
    "ProjectCRUD",
    "project_crud",
]
