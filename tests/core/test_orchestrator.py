"""
Test suite for the diagram orchestrator.

Covers kind resolution and aliases, failure surfacing, persistence
errors, kind inference fallback and free-text routing.

System role: Verification of diagram routing and persistence
"""

import uuid
from unittest.mock import MagicMock

import pytest

from conftest import ScriptedTextGenerator, payload_json

from archdraft.core.diagrams.diagram_kinds import DiagramKind
from archdraft.core.diagrams.diagram_schema import (
    GenerationRequest,
    GenerationSuccess,
    SavedDiagram,
)
from archdraft.core.diagrams.orchestrator import DiagramOrchestrator, create_orchestrator
from archdraft.core.diagrams.validator import DiagramValidator
from archdraft.core.exceptions import (
    DiagramGenerationError,
    GenerationCapabilityError,
    PersistenceError,
    UnsupportedDiagramKindError,
    ValidationError,
)

ERD = "erDiagram\nUSER ||--o{ TASK : owns"


@pytest.fixture
def diagram_store() -> MagicMock:
    """Provide mock diagram store echoing inserts back as SavedDiagram."""
    store = MagicMock()

    def insert(project_id, name, kind_label, content):
        return SavedDiagram(
            id=uuid.uuid4(),
            project_id=project_id,
            name=name,
            kind_label=kind_label,
            content=content,
        )

    store.insert_diagram.side_effect = insert
    return store


def make_orchestrator(llm, store) -> DiagramOrchestrator:
    return create_orchestrator(llm, DiagramValidator(llm), store)


class TestGenerateAndSave:
    """Test suite for DiagramOrchestrator.generate_and_save()."""

    @pytest.mark.parametrize(
        "label,expected",
        [
            ("ERD", DiagramKind.ERD),
            ("entity relationship diagram", DiagramKind.ERD),
            ("Flow Chart", DiagramKind.FLOWCHART),
            ("  flowchart ", DiagramKind.FLOWCHART),
            ("SEQUENCE DIAGRAM", DiagramKind.SEQUENCE),
            ("Class Diagram", DiagramKind.CLASS),
        ],
    )
    def test_should_resolve_labels_and_aliases(
        self, project, diagram_store, label: str, expected: DiagramKind
    ) -> None:
        """Test labels resolve case-insensitively and store the canonical label."""
        # Arrange
        llm = ScriptedTextGenerator(payload_json("Diagram", "graph TD\nA-->B"), "valid")
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        saved = orchestrator.generate_and_save(project, label, "reqs")

        # Assert
        assert saved.kind_label == expected.label
        assert f"Requirements for {expected.label}:" in llm.prompts[0]

    def test_should_persist_generated_diagram(self, project, diagram_store) -> None:
        """Test successful generation is inserted with name and code."""
        # Arrange
        llm = ScriptedTextGenerator(payload_json("Task Schema", ERD), "valid")
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        saved = orchestrator.generate_and_save(project, "ERD", "Users own tasks")

        # Assert
        diagram_store.insert_diagram.assert_called_once_with(
            project_id=project.id,
            name="Task Schema",
            kind_label="ERD",
            content=ERD,
        )
        assert saved.project_id == project.id
        assert saved.content == ERD

    def test_should_reject_unknown_kind_before_any_model_call(
        self, project, diagram_store
    ) -> None:
        """Test 'Gantt Chart' fails without touching capability or store."""
        # Arrange
        llm = ScriptedTextGenerator()
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act & Assert
        with pytest.raises(UnsupportedDiagramKindError) as exc_info:
            orchestrator.generate_and_save(project, "Gantt Chart", "reqs")

        assert exc_info.value.details["label"] == "Gantt Chart"
        assert llm.prompts == []
        diagram_store.insert_diagram.assert_not_called()

    def test_should_raise_when_generation_fails(self, project, diagram_store) -> None:
        """Test generator Failure surfaces as DiagramGenerationError."""
        # Arrange
        llm = ScriptedTextGenerator(*["nope"] * 3)
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act & Assert
        with pytest.raises(DiagramGenerationError) as exc_info:
            orchestrator.generate_and_save(project, "Flowchart", "reqs")

        assert exc_info.value.message == "Failed to generate valid flowchart after 3 attempts"
        assert exc_info.value.details["failure_domain"] == "attempts_exhausted"
        diagram_store.insert_diagram.assert_not_called()

    def test_should_raise_when_store_returns_nothing(self, project) -> None:
        """Test missing row is a fatal persistence error."""
        # Arrange
        store = MagicMock()
        store.insert_diagram.return_value = None
        llm = ScriptedTextGenerator(payload_json("Flow", "graph TD\nA-->B"), "valid")
        orchestrator = make_orchestrator(llm, store)

        # Act & Assert
        with pytest.raises(PersistenceError) as exc_info:
            orchestrator.generate_and_save(project, "Flowchart", "reqs")

        assert exc_info.value.details["operation"] == "insert_diagram"


class TestGenerate:
    """Test suite for DiagramOrchestrator.generate()."""

    def test_should_return_result_without_persisting(self, project, diagram_store) -> None:
        """Test generate() routes by kind and skips the store."""
        # Arrange
        llm = ScriptedTextGenerator(payload_json("Login", "sequenceDiagram\nA->>B: hi"), "valid")
        orchestrator = make_orchestrator(llm, diagram_store)
        request = GenerationRequest(project=project, diagram_kind="sequence", requirements="r")

        # Act
        result = orchestrator.generate(request)

        # Assert
        assert isinstance(result, GenerationSuccess)
        diagram_store.insert_diagram.assert_not_called()

    def test_init_should_require_all_generators(self, diagram_store) -> None:
        """Test orchestrator refuses an incomplete generator set."""
        # Act & Assert
        with pytest.raises(ValueError):
            DiagramOrchestrator({}, diagram_store, ScriptedTextGenerator())


class TestInferOptimalKind:
    """Test suite for DiagramOrchestrator.infer_optimal_kind()."""

    @pytest.mark.parametrize(
        "reply,expected",
        [
            ("ERD", DiagramKind.ERD),
            ("  Sequence Diagram\n", DiagramKind.SEQUENCE),
            ("Class Diagram", DiagramKind.CLASS),
            ("Flowchart", DiagramKind.FLOWCHART),
            ("sequence diagram", DiagramKind.FLOWCHART),
            ("I recommend an ERD", DiagramKind.FLOWCHART),
            ("Gantt Chart", DiagramKind.FLOWCHART),
            ("", DiagramKind.FLOWCHART),
        ],
    )
    def test_should_require_exact_canonical_label(self, diagram_store, reply, expected) -> None:
        """Test only exact labels are accepted, anything else falls back to Flowchart."""
        # Arrange
        llm = ScriptedTextGenerator(reply)
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        kind = orchestrator.infer_optimal_kind("Users own tasks")

        # Assert
        assert kind is expected
        assert "Available types: ERD, Flowchart, Sequence Diagram, Class Diagram." in llm.prompts[0]
        assert "Users own tasks" in llm.prompts[0]

    def test_should_propagate_capability_error(self, diagram_store) -> None:
        """Test transport errors are not masked by the fallback."""
        # Arrange
        llm = ScriptedTextGenerator(GenerationCapabilityError("timeout"))
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act & Assert
        with pytest.raises(GenerationCapabilityError):
            orchestrator.infer_optimal_kind("reqs")


class TestRoutingAndExtras:
    """Test suite for inferred generation, explanation and SQL."""

    def test_generate_optimal_should_generate_inferred_kind(self, project, diagram_store) -> None:
        """Test inferred kind is generated and saved."""
        # Arrange
        llm = ScriptedTextGenerator("ERD", payload_json("Task Schema", ERD), "valid")
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        saved = orchestrator.generate_optimal(project, "Users own tasks")

        # Assert
        assert saved.kind_label == "ERD"
        assert len(llm.prompts) == 3

    def test_generate_from_request_should_reject_blank_text(self, project, diagram_store) -> None:
        """Test empty free-text requests are input errors."""
        # Arrange
        llm = ScriptedTextGenerator()
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act & Assert
        with pytest.raises(ValidationError):
            orchestrator.generate_from_request(project, "   ")
        assert llm.prompts == []

    def test_explain_diagram_should_use_kind_generator(self, diagram_store) -> None:
        """Test explanation is routed by kind label."""
        # Arrange
        llm = ScriptedTextGenerator("A login handshake.")
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        explanation = orchestrator.explain_diagram("Sequence Diagram", "sequenceDiagram\nA->>B: hi")

        # Assert
        assert explanation == "A login handshake."
        assert "Explain the following Mermaid sequence diagram code" in llm.prompts[0]

    def test_generate_sql_should_only_accept_erd(self, diagram_store) -> None:
        """Test SQL derivation is refused for non-ERD kinds."""
        # Arrange
        llm = ScriptedTextGenerator()
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act & Assert
        with pytest.raises(ValidationError):
            orchestrator.generate_sql("Flowchart", "graph TD\nA-->B")
        assert llm.prompts == []

    def test_generate_sql_should_return_model_output_for_erd(self, diagram_store) -> None:
        """Test ERD SQL derivation."""
        # Arrange
        llm = ScriptedTextGenerator("CREATE TABLE users (id INT PRIMARY KEY);")
        orchestrator = make_orchestrator(llm, diagram_store)

        # Act
        sql = orchestrator.generate_sql("ERD", ERD)

        # Assert
        assert sql == "CREATE TABLE users (id INT PRIMARY KEY);"
