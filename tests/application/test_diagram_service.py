"""
Test suite for DiagramService.

Uses the in-memory SQLite schema; the mocked orchestrator writes rows
through the same session so read-back behaves as in production.

System role: Verification of diagram management orchestration
"""

import uuid
from unittest.mock import MagicMock

import pytest

from archdraft.application.services.diagram_service import DiagramService
from archdraft.boundary.db.CRUD.diagram_crud import diagram_crud
from archdraft.boundary.db.CRUD.project_crud import project_crud
from archdraft.boundary.db.stores import to_saved_diagram
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator
from archdraft.core.exceptions import (
    DiagramNotFoundError,
    ProjectNotFoundError,
    ValidationError,
)


@pytest.fixture
def project(db_session):
    """Insert a project owned by user-1."""
    row = project_crud.create(db_session, user_id="user-1", name="Todo App", description="")
    db_session.commit()
    return row


@pytest.fixture
def diagram(db_session, project):
    """Insert an ERD into the project."""
    row = diagram_crud.create(
        db_session,
        project_id=project.id,
        name="Task Schema",
        kind_label="ERD",
        content="erDiagram\nUSER ||--o{ TASK : owns",
    )
    db_session.commit()
    return row


@pytest.fixture
def mock_orchestrator(db_session) -> MagicMock:
    """Provide mock orchestrator that persists through db_session."""
    orchestrator = MagicMock(spec=DiagramOrchestrator)

    def save(project, kind_label, requirements):
        row = diagram_crud.create(
            db_session,
            project_id=project.id,
            name="Generated",
            kind_label=kind_label,
            content="graph TD\nA-->B",
        )
        db_session.commit()
        return to_saved_diagram(row)

    orchestrator.generate_and_save.side_effect = save
    orchestrator.generate_from_request.side_effect = lambda project, request: save(
        project, "Flowchart", request
    )
    return orchestrator


@pytest.fixture
def service(db_session, mock_orchestrator) -> DiagramService:
    return DiagramService(db_session, mock_orchestrator)


class TestCreateDiagram:
    """Test suite for DiagramService.create_diagram()."""

    @pytest.mark.parametrize(
        "general_type,kind_label",
        [
            ("System Architecture", "Class Diagram"),
            ("Workflow", "Flowchart"),
            ("Database Schema", "ERD"),
        ],
    )
    def test_should_map_general_type_to_kind(
        self, service, mock_orchestrator, project, general_type: str, kind_label: str
    ) -> None:
        """Test explicit general types route to generate_and_save."""
        # Act
        diagram = service.create_diagram(project.id, "user-1", "Users own tasks", general_type)

        # Assert
        assert diagram.kind_label == kind_label
        mock_orchestrator.generate_and_save.assert_called_once()
        assert mock_orchestrator.generate_and_save.call_args.args[1] == kind_label
        mock_orchestrator.generate_from_request.assert_not_called()

    def test_should_infer_kind_without_general_type(
        self, service, mock_orchestrator, project
    ) -> None:
        """Test free-text requests go through inference."""
        # Act
        diagram = service.create_diagram(project.id, "user-1", "Show the checkout flow")

        # Assert
        assert diagram.project_id == project.id
        mock_orchestrator.generate_from_request.assert_called_once()

    def test_should_reject_unknown_general_type(self, service, project) -> None:
        """Test unknown general type is an input error."""
        with pytest.raises(ValidationError):
            service.create_diagram(project.id, "user-1", "reqs", "Mind Map")

    def test_should_reject_foreign_project(self, service, project) -> None:
        """Test callers cannot generate into another user's project."""
        with pytest.raises(ProjectNotFoundError):
            service.create_diagram(project.id, "user-2", "reqs")


class TestReadUpdateDelete:
    """Test suite for diagram CRUD within a project."""

    def test_list_diagrams_should_return_project_diagrams(self, service, project, diagram) -> None:
        """Test listing."""
        assert [d.id for d in service.list_diagrams(project.id, "user-1")] == [diagram.id]

    def test_get_diagram_should_raise_for_unknown_id(self, service, project) -> None:
        """Test missing diagram."""
        with pytest.raises(DiagramNotFoundError):
            service.get_diagram(project.id, uuid.uuid4(), "user-1")

    def test_update_diagram_should_change_content(self, service, project, diagram) -> None:
        """Test partial update."""
        # Act
        updated = service.update_diagram(
            project.id, diagram.id, "user-1", content="erDiagram\nUSER {}"
        )

        # Assert
        assert updated.content == "erDiagram\nUSER {}"
        assert updated.name == "Task Schema"

    def test_update_diagram_should_require_a_field(self, service, project, diagram) -> None:
        """Test empty update."""
        with pytest.raises(ValidationError):
            service.update_diagram(project.id, diagram.id, "user-1")

    def test_delete_diagram_should_remove_row(self, service, db_session, project, diagram) -> None:
        """Test deletion."""
        # Act
        service.delete_diagram(project.id, diagram.id, "user-1")

        # Assert
        assert diagram_crud.exists(db_session, diagram.id) is False


class TestExplainAndSql:
    """Test suite for explanation and SQL derivation."""

    def test_explain_should_pass_kind_and_content(
        self, service, mock_orchestrator, project, diagram
    ) -> None:
        """Test explanation routing."""
        # Arrange
        mock_orchestrator.explain_diagram.return_value = "Users own tasks."

        # Act
        explanation = service.explain_diagram(project.id, diagram.id, "user-1")

        # Assert
        assert explanation == "Users own tasks."
        mock_orchestrator.explain_diagram.assert_called_once_with("ERD", diagram.content)

    def test_generate_sql_should_pass_kind_and_content(
        self, service, mock_orchestrator, project, diagram
    ) -> None:
        """Test SQL routing."""
        # Arrange
        mock_orchestrator.generate_sql.return_value = "CREATE TABLE users (id INT);"

        # Act
        sql = service.generate_sql(project.id, diagram.id, "user-1")

        # Assert
        assert sql == "CREATE TABLE users (id INT);"
        mock_orchestrator.generate_sql.assert_called_once_with("ERD", diagram.content)
