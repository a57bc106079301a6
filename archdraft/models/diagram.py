"""
Diagram domain models and schemas.

Dependencies: pydantic
System role: Diagram API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateDiagramRequest(BaseModel):
    """Request schema for generating a diagram within a project.

    general_type maps onto a concrete kind ("System Architecture",
    "Workflow", "Database Schema"). When omitted, the kind is inferred from
    the requirement text.
    """

    requirement: str = Field(..., min_length=1, description="What the diagram should show")
    general_type: str | None = Field(default=None, description="Coarse diagram type")


class UpdateDiagramRequest(BaseModel):
    """Request schema for editing a stored diagram."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    content: str | None = Field(default=None, min_length=1)


class DiagramResponse(BaseModel):
    """Response schema for diagram operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    project_id: uuid.UUID
    name: str
    kind_label: str
    content: str
    created_at: datetime
    updated_at: datetime


class ExplanationResponse(BaseModel):
    diagram_id: uuid.UUID
    explanation: str


class SqlResponse(BaseModel):
    diagram_id: uuid.UUID
    sql: str
