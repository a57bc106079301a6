"""
Diagram generator base class.

Runs the bounded generate → parse → validate loop for one diagram kind and
reports the outcome as a GenerationResult. Failures come from one of two
domains:
- ATTEMPTS_EXHAUSTED: every attempt ended in a parse failure, a validator
  rejection or a model call error (GenerationCapabilityError, TimeoutError,
  ConnectionError); the message names the attempt count.
- FATAL: an exception escaped the attempt scope (prompt rendering, graph
  execution, unexpected errors from collaborators); no further attempts.

Retries always reuse the original requirements text; validator feedback is
logged but not fed into the next prompt.

Dependencies: langgraph, pydantic, archdraft.boundary.llm, archdraft.core.diagrams
System role: Kind-specific diagram generation with self-correction
"""

import logging

from pydantic import ValidationError as PydanticValidationError

from archdraft.boundary.llm.text_generator import TextGenerator
from archdraft.core.diagrams.diagram_kinds import DiagramKind
from archdraft.core.diagrams.diagram_prompts import (
    get_explanation_prompt,
    get_generation_prompt,
)
from archdraft.core.diagrams.diagram_schema import (
    DiagramPayload,
    FailureDomain,
    GenerationFailure,
    GenerationResult,
    GenerationState,
    GenerationSuccess,
    ProjectContext,
)
from archdraft.core.diagrams.generation_graph import create_generation_graph
from archdraft.core.diagrams.validator import DiagramValidator
from archdraft.core.exceptions import DiagramPayloadError

logger = logging.getLogger(__name__)

MAX_RETRIES = 3


class DiagramGenerator:
    """Base generator; subclasses set ``kind`` and ``display_name``."""

    kind: DiagramKind
    display_name: str

    def __init__(
        self,
        text_generator: TextGenerator,
        validator: DiagramValidator,
        max_attempts: int = MAX_RETRIES,
    ) -> None:
        """
        Initialize generator and compile its retry graph.

        Args:
            text_generator: Generation capability
            validator: Checklist validator for generated diagrams
            max_attempts: Attempts before giving up (default 3)

        Raises:
            ValueError: If max_attempts is below 1
        """
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.text_generator = text_generator
        self.validator = validator
        self.max_attempts = max_attempts
        self._graph = create_generation_graph(self)

    def build_prompt(self, project: ProjectContext, requirements: str) -> str:
        """Render the kind-specific generation prompt."""
        return get_generation_prompt(self.kind).format(
            project_name=project.name,
            project_description=project.description,
            requirements=requirements,
        )

    def parse_payload(self, raw: str) -> DiagramPayload:
        """
        Parse a model reply as the two-field name/diagram JSON object.

        Raises:
            DiagramPayloadError: If the reply is not JSON or a field is missing/blank
        """
        try:
            return DiagramPayload.model_validate_json(raw or "")
        except PydanticValidationError as e:
            raise DiagramPayloadError(
                "Missing 'name' or 'diagram' in model JSON response",
                details={"errors": e.error_count(), "response": (raw or "")[:200]},
            ) from e

    def generate(self, project: ProjectContext, requirements: str) -> GenerationResult:
        """
        Generate and validate a diagram for a project.

        Args:
            project: Project context embedded in the prompt
            requirements: Requirement text, passed through verbatim

        Returns:
            GenerationResult: GenerationSuccess or GenerationFailure
        """
        logger.info(
            f"{__name__}:generate - START kind={self.kind.label}, "
            f"project_id={project.id}, requirements_len={len(requirements or '')}"
        )

        initial_state: GenerationState = {
            "project": project,
            "requirements": requirements,
            "max_attempts": self.max_attempts,
            "attempts": 0,
            "payload": None,
            "valid": False,
            "last_error": None,
        }

        try:
            final_state = self._graph.invoke(
                initial_state,
                config={"recursion_limit": self.max_attempts * 2 + 5},
            )
        except Exception as e:
            logger.error(
                f"{__name__}:generate - Error generating {self.display_name} "
                f"for project {project.id}: {type(e).__name__}: {e}",
                exc_info=True,
            )
            return GenerationFailure(
                error_message=f"Error generating {self.display_name}: {e}",
                domain=FailureDomain.FATAL,
            )

        attempts = final_state.get("attempts", 0)
        payload = final_state.get("payload")

        if final_state.get("valid") and payload is not None:
            logger.info(
                f"{__name__}:generate - END success name='{payload.name}', attempts={attempts}"
            )
            return GenerationSuccess(
                name=payload.name,
                diagram_code=payload.diagram,
                attempts=attempts,
            )

        logger.error(
            f"{__name__}:generate - END failure after {attempts} attempts for project "
            f"{project.id}. Last error: {final_state.get('last_error')}"
        )
        return GenerationFailure(
            error_message=(
                f"Failed to generate valid {self.display_name} after {attempts} attempts"
            ),
            domain=FailureDomain.ATTEMPTS_EXHAUSTED,
            attempts=attempts,
        )

    def explain(self, diagram_code: str) -> str:
        """Explain a diagram of this kind in plain language."""
        prompt = get_explanation_prompt(self.kind).format(diagram_code=diagram_code)
        return self.text_generator.generate(prompt)
