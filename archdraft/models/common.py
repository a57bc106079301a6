"""
Common response models.

Dependencies: pydantic
System role: Common API response structures
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error response schema."""

    detail: str = Field(description="Error message")


ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid input"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    404: {"model": ErrorResponse, "description": "Project or diagram not found"},
    500: {"model": ErrorResponse, "description": "Persistence failure"},
    502: {"model": ErrorResponse, "description": "Diagram generation failed"},
}
