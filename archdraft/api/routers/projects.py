"""
Project API endpoints.

Routes:
- GET /projects - List the caller's projects
- POST /projects - Create a project and generate its optimal diagram
- GET /projects/{project_id} - Get one project

Dependencies: archdraft.application.services.project_service, archdraft.models
System role: Project management HTTP API
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from archdraft.api.deps import get_project_service
from archdraft.api.routers.router_utils import to_http_exception
from archdraft.application.services.project_service import ProjectService
from archdraft.boundary.auth import CurrentUser, get_current_user
from archdraft.core.exceptions import ArchdraftException
from archdraft.models.common import ERROR_RESPONSES
from archdraft.models.project import (
    CreateProjectRequest,
    CreateProjectResponse,
    ProjectResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/projects", tags=["projects"], responses=ERROR_RESPONSES)


@router.get("", response_model=list[ProjectResponse])
def list_projects(
    user: CurrentUser = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service),
) -> list[ProjectResponse]:
    """List projects owned by the caller, newest first."""
    projects = project_service.list_projects(user.user_id)
    return [ProjectResponse.model_validate(project) for project in projects]


@router.post("", response_model=CreateProjectResponse)
async def create_project(
    request: CreateProjectRequest,
    user: CurrentUser = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service),
) -> CreateProjectResponse:
    """
    Create a project and generate the best-fitting diagram for it.

    Diagram generation failures do not fail the request; the response then
    carries no diagram_id.

    Raises:
        HTTPException(500): Project creation failed
    """
    try:
        project, diagram = await run_in_threadpool(
            project_service.create_project,
            user.user_id,
            request.name,
            request.description,
        )
    except ArchdraftException as e:
        raise to_http_exception(e, "create_project", user_id=user.user_id) from e

    return CreateProjectResponse(
        project=ProjectResponse.model_validate(project),
        diagram_id=diagram.id if diagram else None,
    )


@router.get("/{project_id}", response_model=ProjectResponse)
def get_project(
    project_id: UUID,
    user: CurrentUser = Depends(get_current_user),
    project_service: ProjectService = Depends(get_project_service),
) -> ProjectResponse:
    """
    Get a project owned by the caller.

    Raises:
        HTTPException(404): Project not found
    """
    try:
        return ProjectResponse.model_validate(
            project_service.get_project(project_id, user.user_id)
        )
    except ArchdraftException as e:
        raise to_http_exception(
            e, "get_project", user_id=user.user_id, project_id=project_id
        ) from e
