"""
Database boundary: ORM models, CRUD helpers and store adapters.

Dependencies: sqlalchemy
System role: Relational persistence
"""

from archdraft.boundary.db.base import Base
from archdraft.boundary.db.connection import (
    create_tables,
    get_db,
    get_engine,
    get_session_factory,
)
from archdraft.boundary.db.stores import SqlDiagramStore, SqlProjectStore

__all__ = [
    "Base",
    "SqlDiagramStore",
    "SqlProjectStore",
    "create_tables",
    "get_db",
    "get_engine",
    "get_session_factory",
]
