"""
Diagram API endpoints.

Routes:
- GET /projects/{project_id}/diagrams - List diagrams
- POST /projects/{project_id}/diagrams - Generate a diagram
- GET /projects/{project_id}/diagrams/{diagram_id} - Get diagram
- PUT /projects/{project_id}/diagrams/{diagram_id} - Update name/content
- DELETE /projects/{project_id}/diagrams/{diagram_id} - Delete diagram
- POST /projects/{project_id}/diagrams/{diagram_id}/explain - Explain diagram
- POST /projects/{project_id}/diagrams/{diagram_id}/sql - SQL from an ERD

Dependencies: archdraft.application.services.diagram_service, archdraft.models
System role: Diagram management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from archdraft.api.deps import get_diagram_service
from archdraft.api.routers.router_utils import to_http_exception
from archdraft.application.services.diagram_service import DiagramService
from archdraft.boundary.auth import CurrentUser, get_current_user
from archdraft.core.exceptions import ArchdraftException
from archdraft.models.common import ERROR_RESPONSES
from archdraft.models.diagram import (
    CreateDiagramRequest,
    DiagramResponse,
    ExplanationResponse,
    SqlResponse,
    UpdateDiagramRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/projects/{project_id}/diagrams",
    tags=["diagrams"],
    responses=ERROR_RESPONSES,
)


@router.get("", response_model=list[DiagramResponse])
def list_diagrams(
    project_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> list[DiagramResponse]:
    """
    List diagrams of a caller-owned project.

    Raises:
        HTTPException(404): Project not found
    """
    try:
        diagrams = diagram_service.list_diagrams(project_id, user.user_id)
    except ArchdraftException as e:
        raise to_http_exception(
            e, "list_diagrams", user_id=user.user_id, project_id=project_id
        ) from e
    return [DiagramResponse.model_validate(diagram) for diagram in diagrams]


@router.post("", response_model=DiagramResponse, status_code=201)
async def create_diagram(
    project_id: UUID,
    request: CreateDiagramRequest,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """
    Generate and store a diagram.

    Raises:
        HTTPException(400): Unknown general_type
        HTTPException(404): Project not found
        HTTPException(502): Generation failed after all attempts
        HTTPException(500): Diagram could not be saved
    """
    try:
        diagram = await run_in_threadpool(
            diagram_service.create_diagram,
            project_id,
            user.user_id,
            request.requirement,
            request.general_type,
        )
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "create_diagram",
            user_id=user.user_id,
            project_id=project_id,
            diagram_kind=request.general_type,
        ) from e
    return DiagramResponse.model_validate(diagram)


@router.get("/{diagram_id}", response_model=DiagramResponse)
def get_diagram(
    project_id: UUID,
    diagram_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """Get a diagram."""
    try:
        diagram = diagram_service.get_diagram(project_id, diagram_id, user.user_id)
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "get_diagram",
            user_id=user.user_id,
            project_id=project_id,
            diagram_id=diagram_id,
        ) from e
    return DiagramResponse.model_validate(diagram)


@router.put("/{diagram_id}", response_model=DiagramResponse)
def update_diagram(
    project_id: UUID,
    diagram_id: UUID,
    request: UpdateDiagramRequest,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> DiagramResponse:
    """
    Update a diagram's name and/or Mermaid content.

    Raises:
        HTTPException(400): Neither field supplied
        HTTPException(404): Project or diagram not found
    """
    try:
        diagram = diagram_service.update_diagram(
            project_id,
            diagram_id,
            user.user_id,
            name=request.name,
            content=request.content,
        )
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "update_diagram",
            user_id=user.user_id,
            project_id=project_id,
            diagram_id=diagram_id,
        ) from e
    return DiagramResponse.model_validate(diagram)


@router.delete("/{diagram_id}", status_code=204)
def delete_diagram(
    project_id: UUID,
    diagram_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> None:
    """Delete a diagram."""
    try:
        diagram_service.delete_diagram(project_id, diagram_id, user.user_id)
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "delete_diagram",
            user_id=user.user_id,
            project_id=project_id,
            diagram_id=diagram_id,
        ) from e


@router.post("/{diagram_id}/explain", response_model=ExplanationResponse)
async def explain_diagram(
    project_id: UUID,
    diagram_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> ExplanationResponse:
    """Explain a diagram in plain language."""
    try:
        explanation = await run_in_threadpool(
            diagram_service.explain_diagram, project_id, diagram_id, user.user_id
        )
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "explain_diagram",
            user_id=user.user_id,
            project_id=project_id,
            diagram_id=diagram_id,
        ) from e
    return ExplanationResponse(diagram_id=diagram_id, explanation=explanation)


@router.post("/{diagram_id}/sql", response_model=SqlResponse)
async def generate_sql(
    project_id: UUID,
    diagram_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    diagram_service: DiagramService = Depends(get_diagram_service),
) -> SqlResponse:
    """
    Generate SQL CREATE TABLE statements from an ERD.

    Raises:
        HTTPException(400): Diagram is not an ERD
    """
    try:
        sql = await run_in_threadpool(
            diagram_service.generate_sql, project_id, diagram_id, user.user_id
        )
    except ArchdraftException as e:
        raise to_http_exception(
            e,
            "generate_sql",
            user_id=user.user_id,
            project_id=project_id,
            diagram_id=diagram_id,
        ) from e
    return SqlResponse(diagram_id=diagram_id, sql=sql)
