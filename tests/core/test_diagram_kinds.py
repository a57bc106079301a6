"""
Test suite for diagram kind labels and payload schemas.

System role: Verification of kind resolution and result schemas
"""

import pytest
from pydantic import TypeAdapter

from archdraft.core.diagrams.diagram_kinds import (
    CANONICAL_LABELS,
    DiagramKind,
    match_canonical_label,
    resolve_diagram_kind,
    resolve_general_type,
)
from archdraft.core.diagrams.diagram_schema import (
    FailureDomain,
    GenerationFailure,
    GenerationResult,
    GenerationSuccess,
)
from archdraft.core.exceptions import UnsupportedDiagramKindError, ValidationError


class TestResolveDiagramKind:
    """Test suite for resolve_diagram_kind()."""

    def test_canonical_labels_should_cover_four_kinds(self) -> None:
        """Test label catalogue."""
        assert CANONICAL_LABELS == ("ERD", "Flowchart", "Sequence Diagram", "Class Diagram")

    def test_should_pass_through_enum_members(self) -> None:
        """Test DiagramKind input is returned unchanged."""
        assert resolve_diagram_kind(DiagramKind.CLASS) is DiagramKind.CLASS

    @pytest.mark.parametrize("label", ["", "Gantt Chart", "pie", None])
    def test_should_reject_unknown_labels(self, label) -> None:
        """Test unknown labels raise an input error."""
        with pytest.raises(UnsupportedDiagramKindError) as exc_info:
            resolve_diagram_kind(label)

        assert isinstance(exc_info.value, ValidationError)
        assert exc_info.value.details["field"] == "diagram_kind"

    def test_match_canonical_label_should_not_accept_aliases(self) -> None:
        """Test inference matching is exact."""
        assert match_canonical_label("ERD") is DiagramKind.ERD
        assert match_canonical_label("erd") is None
        assert match_canonical_label("flow chart") is None


class TestResolveGeneralType:
    """Test suite for resolve_general_type()."""

    @pytest.mark.parametrize(
        "general_type,expected",
        [
            ("System Architecture", DiagramKind.CLASS),
            ("Workflow", DiagramKind.FLOWCHART),
            ("Database Schema", DiagramKind.ERD),
        ],
    )
    def test_should_map_general_types(self, general_type: str, expected: DiagramKind) -> None:
        """Test general type mapping."""
        assert resolve_general_type(general_type) is expected

    def test_should_reject_unknown_general_type(self) -> None:
        """Test unknown general types are input errors."""
        with pytest.raises(ValidationError) as exc_info:
            resolve_general_type("Mind Map")

        assert "System Architecture" in exc_info.value.message


class TestGenerationResult:
    """Test suite for the tagged result union."""

    def test_should_discriminate_on_status(self) -> None:
        """Test union parsing picks the right variant."""
        # Arrange
        adapter = TypeAdapter(GenerationResult)

        # Act
        success = adapter.validate_python(
            {"status": "success", "name": "Flow", "diagram_code": "graph TD", "attempts": 2}
        )
        failure = adapter.validate_python(
            {"status": "failure", "error_message": "boom", "domain": "fatal"}
        )

        # Assert
        assert isinstance(success, GenerationSuccess) and success.success
        assert isinstance(failure, GenerationFailure) and not failure.success
        assert failure.domain is FailureDomain.FATAL

    def test_success_should_require_non_empty_fields(self) -> None:
        """Test Success fields are non-empty."""
        with pytest.raises(ValueError):
            GenerationSuccess(name="", diagram_code="graph TD")
        with pytest.raises(ValueError):
            GenerationSuccess(name="Flow", diagram_code="")
