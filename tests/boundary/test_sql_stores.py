"""
Test suite for the SQLAlchemy project and diagram stores.

System role: Verification of persistence adapters
"""

import uuid
from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from archdraft.boundary.db import SqlDiagramStore, SqlProjectStore
from archdraft.boundary.db.CRUD.diagram_crud import diagram_crud
from archdraft.boundary.db.CRUD.project_crud import project_crud
from archdraft.core.diagrams.diagram_schema import ProjectContext, SavedDiagram
from archdraft.core.exceptions import PersistenceError


def broken_session_factory() -> MagicMock:
    """Session factory whose sessions fail on flush."""
    session = MagicMock()
    session.flush.side_effect = OperationalError("INSERT", {}, Exception("db down"))
    factory = MagicMock()
    factory.return_value.__enter__.return_value = session
    return factory


class TestSqlProjectStore:
    """Test suite for SqlProjectStore.create_project()."""

    def test_should_persist_and_return_context(self, session_factory) -> None:
        """Test project is committed and mapped to ProjectContext."""
        # Arrange
        store = SqlProjectStore(session_factory)

        # Act
        project = store.create_project(
            user_id="user-1", name="Todo App", description="Tasks and lists"
        )

        # Assert
        assert isinstance(project, ProjectContext)
        assert project.name == "Todo App"
        assert project.description == "Tasks and lists"
        with session_factory() as session:
            row = project_crud.get_by_id(session, project.id)
            assert row.user_id == "user-1"

    def test_should_raise_persistence_error_on_database_failure(self) -> None:
        """Test SQLAlchemy errors are translated."""
        # Arrange
        store = SqlProjectStore(broken_session_factory())

        # Act & Assert
        with pytest.raises(PersistenceError) as exc_info:
            store.create_project(user_id="user-1", name="Todo App", description="")

        assert exc_info.value.details["operation"] == "create_project"


class TestSqlDiagramStore:
    """Test suite for SqlDiagramStore.insert_diagram()."""

    def test_should_insert_for_existing_project(self, session_factory) -> None:
        """Test a saved diagram is readable from a fresh session."""
        # Arrange
        project = SqlProjectStore(session_factory).create_project(
            user_id="user-1", name="Todo App", description=""
        )
        store = SqlDiagramStore(session_factory)

        # Act
        saved = store.insert_diagram(
            project_id=project.id,
            name="Task Flow",
            kind_label="Flowchart",
            content="graph TD\nA-->B",
        )

        # Assert
        assert isinstance(saved, SavedDiagram)
        assert saved.project_id == project.id
        with session_factory() as session:
            row = diagram_crud.get_in_project(session, saved.id, project.id)
            assert row.content == "graph TD\nA-->B"
            assert row.kind_label == "Flowchart"

    def test_should_return_none_for_missing_project(self, session_factory) -> None:
        """Test insert into an unknown project saves nothing."""
        # Arrange
        store = SqlDiagramStore(session_factory)

        # Act
        saved = store.insert_diagram(
            project_id=uuid.uuid4(), name="Flow", kind_label="Flowchart", content="graph TD"
        )

        # Assert
        assert saved is None
