"""
Diagram validator.

Submits a generated diagram back to the generation capability with a
kind-specific checklist and classifies the reply.

Two classification policies exist:
- "substring": valid when the reply contains the case-sensitive text "valid"
  anywhere. A reply such as "invalid: missing end node" therefore counts as
  valid. This lenient, false-positive-biased behaviour is the default.
- "leading_keyword": valid only when the first word of the reply is "valid".

Dependencies: archdraft.boundary.llm, archdraft.core.diagrams
System role: Syntactic validation of generated diagrams
"""

import logging
import re
from typing import Literal

from archdraft.boundary.llm.text_generator import TextGenerator
from archdraft.core.diagrams.diagram_kinds import DiagramKind, resolve_diagram_kind
from archdraft.core.diagrams.diagram_schema import ValidationOutcome
from archdraft.core.diagrams.validation_prompt import (
    IMPROVEMENT_PROMPT,
    get_validation_prompt,
)

logger = logging.getLogger(__name__)

ValidationPolicy = Literal["substring", "leading_keyword"]

VALID_TOKEN = "valid"
EMPTY_REPLY_FEEDBACK = "Validator returned an empty response"

_LEADING_WORD = re.compile(r"^\W*(\w+)")


def classify_reply(reply: str, policy: ValidationPolicy = "substring") -> ValidationOutcome:
    """
    Turn a raw validator reply into a ValidationOutcome.

    Args:
        reply: Raw model reply
        policy: Classification policy (see module docstring)

    Returns:
        ValidationOutcome: valid with empty feedback, or invalid with the reply as feedback
    """
    if policy == "leading_keyword":
        match = _LEADING_WORD.match(reply or "")
        is_valid = bool(match) and match.group(1).lower() == VALID_TOKEN
    else:
        is_valid = VALID_TOKEN in (reply or "")

    if is_valid:
        return ValidationOutcome(valid=True)
    return ValidationOutcome(valid=False, feedback=(reply or "").strip() or EMPTY_REPLY_FEEDBACK)


class DiagramValidator:
    """Checklist validator backed by the generation capability."""

    def __init__(
        self,
        text_generator: TextGenerator,
        policy: ValidationPolicy = "substring",
    ) -> None:
        """
        Initialize validator.

        Args:
            text_generator: Generation capability used to judge diagrams
            policy: Reply classification policy
        """
        self._llm = text_generator
        self._policy = policy

    @property
    def policy(self) -> ValidationPolicy:
        return self._policy

    def validate(self, diagram_code: str, kind: DiagramKind | str) -> ValidationOutcome:
        """
        Validate a diagram against the checklist for its kind.

        Args:
            diagram_code: Mermaid source
            kind: Diagram kind or label

        Returns:
            ValidationOutcome: Classified verdict

        Raises:
            GenerationCapabilityError: If the capability call fails
        """
        kind = resolve_diagram_kind(kind)
        prompt = get_validation_prompt(kind).format(diagram_code=diagram_code)
        reply = self._llm.generate(prompt)
        outcome = classify_reply(reply, self._policy)
        logger.info(
            f"{__name__}:validate - kind={kind.label}, valid={outcome.valid}, "
            f"reply_len={len(reply or '')}"
        )
        return outcome

    def suggest_improvements(self, diagram_code: str, kind: DiagramKind | str) -> str:
        """
        Ask for actionable improvement suggestions for a diagram.

        Args:
            diagram_code: Mermaid source
            kind: Diagram kind or label

        Returns:
            str: Free-text suggestions
        """
        kind = resolve_diagram_kind(kind)
        prompt = IMPROVEMENT_PROMPT.format(kind_label=kind.label, diagram_code=diagram_code)
        return self._llm.generate(prompt)
