"""
Test suite for diagram API endpoints.

System role: Verification of diagram HTTP surface and error mapping
"""

import uuid
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from archdraft.api.deps import get_diagram_service
from archdraft.api.routers.diagrams import router
from archdraft.application.services.diagram_service import DiagramService
from archdraft.boundary.auth import CurrentUser, get_current_user
from archdraft.boundary.db.models import DiagramModel
from archdraft.core.exceptions import (
    DiagramGenerationError,
    DiagramNotFoundError,
    GenerationCapabilityError,
    ValidationError,
)

PROJECT_ID = uuid.uuid4()
BASE = f"/api/v1/projects/{PROJECT_ID}/diagrams"


def make_diagram(kind_label: str = "ERD", content: str = "erDiagram") -> DiagramModel:
    now = datetime.now(timezone.utc)
    return DiagramModel(
        id=uuid.uuid4(),
        project_id=PROJECT_ID,
        name="Task Schema",
        kind_label=kind_label,
        content=content,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_diagram_service() -> MagicMock:
    """Provide mock DiagramService."""
    return MagicMock(spec=DiagramService)


@pytest.fixture
def client(mock_diagram_service: MagicMock) -> TestClient:
    """Provide test client with diagram router."""
    app = FastAPI()
    app.include_router(router, prefix="/api/v1")
    app.dependency_overrides[get_diagram_service] = lambda: mock_diagram_service
    app.dependency_overrides[get_current_user] = lambda: CurrentUser(
        user_id="user-1", token="tok"
    )
    return TestClient(app)


class TestCreateDiagram:
    """Test suite for POST /projects/{project_id}/diagrams."""

    def test_should_create_diagram(self, client, mock_diagram_service) -> None:
        """Test generation returns 201 with the stored diagram."""
        # Arrange
        diagram = make_diagram()
        mock_diagram_service.create_diagram.return_value = diagram

        # Act
        response = client.post(
            BASE, json={"requirement": "Users own tasks", "general_type": "Database Schema"}
        )

        # Assert
        assert response.status_code == 201
        assert response.json()["id"] == str(diagram.id)
        assert response.json()["kind_label"] == "ERD"
        mock_diagram_service.create_diagram.assert_called_once_with(
            PROJECT_ID, "user-1", "Users own tasks", "Database Schema"
        )

    def test_should_map_unknown_general_type_to_400(self, client, mock_diagram_service) -> None:
        """Test input errors."""
        # Arrange
        mock_diagram_service.create_diagram.side_effect = ValidationError(
            "Unknown general type: Mind Map", field="general_type"
        )

        # Act
        response = client.post(BASE, json={"requirement": "r", "general_type": "Mind Map"})

        # Assert
        assert response.status_code == 400
        assert "Mind Map" in response.json()["detail"]

    @pytest.mark.parametrize(
        "error",
        [
            DiagramGenerationError("Failed to generate valid ERD after 3 attempts"),
            GenerationCapabilityError("quota exceeded"),
        ],
    )
    def test_should_map_generation_failures_to_502(
        self, client, mock_diagram_service, error
    ) -> None:
        """Test generator and capability failures."""
        # Arrange
        mock_diagram_service.create_diagram.side_effect = error

        # Act
        response = client.post(BASE, json={"requirement": "r"})

        # Assert
        assert response.status_code == 502
        assert response.json()["detail"] == error.message


class TestReadUpdateDelete:
    """Test suite for diagram CRUD routes."""

    def test_list_should_return_diagrams(self, client, mock_diagram_service) -> None:
        """Test listing."""
        # Arrange
        mock_diagram_service.list_diagrams.return_value = [make_diagram()]

        # Act
        response = client.get(BASE)

        # Assert
        assert response.status_code == 200
        assert len(response.json()) == 1

    def test_get_should_return_404_for_missing_diagram(
        self, client, mock_diagram_service
    ) -> None:
        """Test not found mapping."""
        # Arrange
        diagram_id = uuid.uuid4()
        mock_diagram_service.get_diagram.side_effect = DiagramNotFoundError(str(diagram_id))

        # Act
        response = client.get(f"{BASE}/{diagram_id}")

        # Assert
        assert response.status_code == 404

    def test_put_should_update_diagram(self, client, mock_diagram_service) -> None:
        """Test update passes both fields."""
        # Arrange
        diagram = make_diagram(content="erDiagram\nUSER {}")
        mock_diagram_service.update_diagram.return_value = diagram

        # Act
        response = client.put(f"{BASE}/{diagram.id}", json={"content": "erDiagram\nUSER {}"})

        # Assert
        assert response.status_code == 200
        mock_diagram_service.update_diagram.assert_called_once_with(
            PROJECT_ID, diagram.id, "user-1", name=None, content="erDiagram\nUSER {}"
        )

    def test_delete_should_return_204(self, client, mock_diagram_service) -> None:
        """Test deletion."""
        # Arrange
        diagram_id = uuid.uuid4()

        # Act
        response = client.delete(f"{BASE}/{diagram_id}")

        # Assert
        assert response.status_code == 204
        mock_diagram_service.delete_diagram.assert_called_once_with(
            PROJECT_ID, diagram_id, "user-1"
        )


class TestExplainAndSql:
    """Test suite for explanation and SQL routes."""

    def test_explain_should_return_explanation(self, client, mock_diagram_service) -> None:
        """Test explanation payload."""
        # Arrange
        diagram_id = uuid.uuid4()
        mock_diagram_service.explain_diagram.return_value = "Users own tasks."

        # Act
        response = client.post(f"{BASE}/{diagram_id}/explain")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "diagram_id": str(diagram_id),
            "explanation": "Users own tasks.",
        }

    def test_sql_should_return_statements(self, client, mock_diagram_service) -> None:
        """Test SQL payload."""
        # Arrange
        diagram_id = uuid.uuid4()
        mock_diagram_service.generate_sql.return_value = "CREATE TABLE users (id INT);"

        # Act
        response = client.post(f"{BASE}/{diagram_id}/sql")

        # Assert
        assert response.status_code == 200
        assert response.json()["sql"] == "CREATE TABLE users (id INT);"

    def test_sql_should_reject_non_erd(self, client, mock_diagram_service) -> None:
        """Test SQL on a flowchart is an input error."""
        # Arrange
        mock_diagram_service.generate_sql.side_effect = ValidationError(
            "SQL generation is only supported for ERD diagrams", field="diagram_kind"
        )

        # Act
        response = client.post(f"{BASE}/{uuid.uuid4()}/sql")

        # Assert
        assert response.status_code == 400
