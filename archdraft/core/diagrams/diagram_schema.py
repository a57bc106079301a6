"""Diagram generation schemas.

This module defines:
- ProjectContext and SavedDiagram records exchanged with the stores
- DiagramPayload, the two-field structured output requested from the model
- GenerationResult, the tagged Success/Failure union returned by generators
- ValidationOutcome returned by the validator
- TypedDict schema for the LangGraph retry loop state

Dependencies: pydantic, typing
System role: Data schemas for the diagram generation pipeline
"""

from enum import Enum
from typing import Annotated, Literal, TypedDict, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StrictStr, field_validator, model_validator


class ProjectContext(BaseModel):
    """Project a diagram is generated for. Frozen once handed to a generator."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    name: str
    description: str = ""


class SavedDiagram(BaseModel):
    """Diagram row as returned by the diagram store."""

    model_config = ConfigDict(frozen=True)

    id: UUID
    project_id: UUID
    name: str
    kind_label: str
    content: str


class DiagramPayload(BaseModel):
    """Structured output expected from the generation prompt.

    Extra keys are ignored; both fields must be non-blank strings.
    """

    model_config = ConfigDict(extra="ignore")

    name: StrictStr = Field(description="Concise diagram name")
    diagram: StrictStr = Field(description="Mermaid source of the diagram")

    @field_validator("name", "diagram")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class FailureDomain(str, Enum):
    """Where a generation failure originated."""

    # every attempt failed parsing, validation or a capability call
    ATTEMPTS_EXHAUSTED = "attempts_exhausted"
    # raised outside the attempt scope; no further attempts were made
    FATAL = "fatal"


class GenerationSuccess(BaseModel):
    """Validated diagram produced by a generator."""

    model_config = ConfigDict(frozen=True)

    status: Literal["success"] = "success"
    name: str = Field(min_length=1)
    diagram_code: str = Field(min_length=1)
    attempts: int = Field(default=1, ge=1)

    @property
    def success(self) -> bool:
        return True


class GenerationFailure(BaseModel):
    """Generator gave up; error_message explains why."""

    model_config = ConfigDict(frozen=True)

    status: Literal["failure"] = "failure"
    error_message: str = Field(min_length=1)
    domain: FailureDomain
    attempts: int = Field(default=0, ge=0)

    @property
    def success(self) -> bool:
        return False


GenerationResult = Annotated[
    Union[GenerationSuccess, GenerationFailure],
    Field(discriminator="status"),
]


class ValidationOutcome(BaseModel):
    """Validator verdict. Feedback is empty exactly when the artifact is valid."""

    model_config = ConfigDict(frozen=True)

    valid: bool
    feedback: str = ""

    @model_validator(mode="after")
    def _feedback_matches_verdict(self) -> "ValidationOutcome":
        if self.valid and self.feedback:
            raise ValueError("valid outcome must not carry feedback")
        if not self.valid and not self.feedback:
            raise ValueError("invalid outcome requires feedback")
        return self


class GenerationState(TypedDict, total=False):
    """LangGraph state schema for the diagram retry loop.

    TypedDict with total=False allows optional fields for flexibility.
    """

    # Loop inputs (unchanged across attempts)
    project: ProjectContext
    requirements: str
    max_attempts: int

    # Attempt bookkeeping
    attempts: int
    last_error: str | None

    # Generation output of the current attempt
    payload: DiagramPayload | None

    # Validation output of the current attempt
    valid: bool


class GenerationRequest(BaseModel):
    """Input to a single diagram generation run."""

    model_config = ConfigDict(frozen=True)

    project: ProjectContext
    diagram_kind: str
    requirements: str = ""
