"""
Diagram orchestrator.

Routes a generation request to the generator for its kind, persists the
validated diagram, and infers the most suitable kind from free text.

Flow for generate_and_save:
1. Resolve the kind label (aliases, case-insensitive); unknown labels fail
   before any model call
2. Run the kind generator's bounded retry loop
3. Surface a Failure result as DiagramGenerationError
4. Insert the diagram; a missing row is a PersistenceError

Dependencies: archdraft.core.diagrams, archdraft.boundary.llm
System role: Diagram generation routing and persistence
"""

import logging

from archdraft.boundary.llm.text_generator import TextGenerator
from archdraft.core.diagrams.diagram_kinds import (
    DEFAULT_DIAGRAM_KIND,
    DiagramKind,
    match_canonical_label,
    resolve_diagram_kind,
)
from archdraft.core.diagrams.diagram_schema import (
    GenerationRequest,
    GenerationResult,
    ProjectContext,
    SavedDiagram,
)
from archdraft.core.diagrams.generator import MAX_RETRIES, DiagramGenerator
from archdraft.core.diagrams.kind_generators import GENERATOR_CLASSES, ERDGenerator
from archdraft.core.diagrams.orchestration_prompt import KIND_INFERENCE_PROMPT
from archdraft.core.diagrams.stores import DiagramStore
from archdraft.core.diagrams.validator import DiagramValidator
from archdraft.core.exceptions import (
    DiagramGenerationError,
    PersistenceError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class DiagramOrchestrator:
    """Stateless router over the kind-specific generators."""

    def __init__(
        self,
        generators: dict[DiagramKind, DiagramGenerator],
        diagram_store: DiagramStore,
        text_generator: TextGenerator,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            generators: One generator per supported kind
            diagram_store: Destination for validated diagrams
            text_generator: Capability used for kind inference
        """
        missing = [kind.label for kind in DiagramKind if kind not in generators]
        if missing:
            raise ValueError(f"Missing generators for: {', '.join(missing)}")
        self._generators = generators
        self._store = diagram_store
        self._llm = text_generator

    def get_generator(self, kind: DiagramKind | str) -> DiagramGenerator:
        """Return the generator for a kind label or alias."""
        return self._generators[resolve_diagram_kind(kind)]

    def generate(self, request: GenerationRequest) -> GenerationResult:
        """
        Run generation for a request without persisting.

        Raises:
            UnsupportedDiagramKindError: If the kind label is unknown
        """
        generator = self.get_generator(request.diagram_kind)
        return generator.generate(request.project, request.requirements)

    def generate_and_save(
        self,
        project: ProjectContext,
        kind_label: str,
        requirements: str,
    ) -> SavedDiagram:
        """
        Generate a diagram of the requested kind and persist it.

        Args:
            project: Project the diagram belongs to
            kind_label: Canonical label or alias
            requirements: Requirement text for the generator

        Returns:
            SavedDiagram: Persisted diagram

        Raises:
            UnsupportedDiagramKindError: If kind_label is unknown
            DiagramGenerationError: If the generator returned a Failure
            PersistenceError: If the store wrote no row
        """
        kind = resolve_diagram_kind(kind_label)
        logger.info(
            f"{__name__}:generate_and_save - START project_id={project.id}, kind={kind.label}"
        )

        result = self._generators[kind].generate(project, requirements)
        if not result.success:
            logger.error(
                f"{__name__}:generate_and_save - Generation failed for project "
                f"{project.id}: {result.error_message}"
            )
            raise DiagramGenerationError(
                result.error_message,
                diagram_kind=kind.label,
                failure_domain=result.domain.value,
            )

        saved = self._store.insert_diagram(
            project_id=project.id,
            name=result.name,
            kind_label=kind.label,
            content=result.diagram_code,
        )
        if saved is None:
            raise PersistenceError(
                f"Failed to save {kind.label} for project {project.id}",
                operation="insert_diagram",
            )

        logger.info(
            f"{__name__}:generate_and_save - END diagram_id={saved.id}, attempts={result.attempts}"
        )
        return saved

    def infer_optimal_kind(self, requirements: str) -> DiagramKind:
        """
        Ask the model which single kind best visualises the requirements.

        Any reply other than an exact canonical label (after trimming)
        falls back to Flowchart.

        Raises:
            GenerationCapabilityError: If the capability call fails
        """
        prompt = KIND_INFERENCE_PROMPT.format(requirements=requirements)
        reply = (self._llm.generate(prompt) or "").strip()
        kind = match_canonical_label(reply)
        if kind is None:
            logger.warning(
                f"{__name__}:infer_optimal_kind - Model returned invalid diagram type "
                f"'{reply[:80]}'. Defaulting to {DEFAULT_DIAGRAM_KIND.label}."
            )
            return DEFAULT_DIAGRAM_KIND
        logger.info(f"{__name__}:infer_optimal_kind - Determined {kind.label}")
        return kind

    def generate_optimal(self, project: ProjectContext, requirements: str) -> SavedDiagram:
        """Infer the best kind for the requirements, then generate and save it."""
        kind = self.infer_optimal_kind(requirements)
        return self.generate_and_save(project, kind.label, requirements)

    def generate_from_request(self, project: ProjectContext, request_text: str) -> SavedDiagram:
        """Route a free-text diagram request to the inferred kind."""
        if not (request_text or "").strip():
            raise ValidationError("Diagram request must not be empty", field="request")
        return self.generate_optimal(project, request_text)

    def explain_diagram(self, kind_label: str, diagram_code: str) -> str:
        """Explain diagram code using the explanation prompt for its kind."""
        return self.get_generator(kind_label).explain(diagram_code)

    def generate_sql(self, kind_label: str, diagram_code: str) -> str:
        """
        Derive SQL DDL from an ERD.

        Raises:
            ValidationError: If the diagram is not an ERD
        """
        generator = self.get_generator(kind_label)
        if not isinstance(generator, ERDGenerator):
            raise ValidationError(
                "SQL can only be generated from ERD diagrams", field="diagram_kind"
            )
        return generator.generate_sql(diagram_code)


def create_generators(
    text_generator: TextGenerator,
    validator: DiagramValidator,
    max_attempts: int = MAX_RETRIES,
) -> dict[DiagramKind, DiagramGenerator]:
    """Build one generator per kind sharing the capability and validator."""
    return {
        kind: generator_cls(text_generator, validator, max_attempts=max_attempts)
        for kind, generator_cls in GENERATOR_CLASSES.items()
    }


def create_orchestrator(
    text_generator: TextGenerator,
    validator: DiagramValidator,
    diagram_store: DiagramStore,
    max_attempts: int = MAX_RETRIES,
) -> DiagramOrchestrator:
    """
    Create a fully wired DiagramOrchestrator.

    Args:
        text_generator: Generation capability
        validator: Diagram validator
        diagram_store: Diagram persistence
        max_attempts: Attempts per generation

    Returns:
        DiagramOrchestrator: Ready-to-use orchestrator
    """
    return DiagramOrchestrator(
        generators=create_generators(text_generator, validator, max_attempts),
        diagram_store=diagram_store,
        text_generator=text_generator,
    )
