"""
Project domain models and schemas.

Dependencies: pydantic
System role: Project API contracts
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CreateProjectRequest(BaseModel):
    """Request schema for creating a project."""

    name: str = Field(..., min_length=1, max_length=255, description="Project name")
    description: str = Field(default="", description="Project description")


class ProjectResponse(BaseModel):
    """Response schema for project operations."""

    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    user_id: str
    name: str
    description: str
    created_at: datetime
    updated_at: datetime


class CreateProjectResponse(BaseModel):
    """Created project plus the diagram generated for it, if any."""

    project: ProjectResponse
    diagram_id: uuid.UUID | None = None
