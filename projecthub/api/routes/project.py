from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects import (
    CreateProjectCommand,
    CreateProjectUseCase,
    DeleteProjectResponse,
    DeleteProjectUseCase,
    GetProjectUseCase,
    ListProjectsUseCase,
    ProjectInfo,
    ProjectListResponse,
    UpdateProjectCommand,
    UpdateProjectUseCase,
)
from projecthub.depends import get_current_user, get_unit_of_work
from projecthub.result import Error

router = APIRouter(prefix="/projects", tags=["Projects"])


def raise_project_error(error: Error):
    """Map project registry error codes to HTTP errors"""
    if error.code == "VALIDATION_ERROR":
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code == "INSUFFICIENT_ROLE":
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code == "PROJECT_NOT_FOUND":
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    raise ServerError(error)


@router.get("", status_code=status.HTTP_200_OK, response_model=ProjectListResponse)
async def list_projects(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Accessible Projects

    Projects the caller owns or is a member of, most recently updated first.
    """
    use_case = ListProjectsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise ServerError(result.error)

    return result.value


class CreateProjectRequest(BaseModel):
    name: str = Field(..., max_length=255, description="Project name")
    description: Optional[str] = Field(None, description="Free-text description")
    tags: List[str] = Field(default_factory=list, description="Labels")


@router.post("", status_code=status.HTTP_201_CREATED, response_model=ProjectInfo)
async def create_project(
    request: CreateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Create Project

    Raises:
        - 400 Bad Request: VALIDATION_ERROR (blank name)
        - 401 Unauthorized: Invalid or expired JWT
    """
    command = CreateProjectCommand(
        name=request.name, description=request.description, tags=request.tags
    )

    use_case = CreateProjectUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), command)

    if result.is_err():
        raise_project_error(result.error)

    return result.value


@router.get("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectInfo)
async def get_project(
    project_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Project

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND (missing or not shared with the caller)
    """
    use_case = GetProjectUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id)

    if result.is_err():
        raise_project_error(result.error)

    return result.value


class UpdateProjectRequest(BaseModel):
    """Omitted fields stay as they are"""

    name: Optional[str] = Field(None, max_length=255)
    description: Optional[str] = None
    tags: Optional[List[str]] = None


@router.patch("/{project_id}", status_code=status.HTTP_200_OK, response_model=ProjectInfo)
async def update_project(
    project_id: UUID,
    request: UpdateProjectRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Project

    Raises:
        - 400 Bad Request: VALIDATION_ERROR
        - 403 Forbidden: INSUFFICIENT_ROLE (members cannot edit)
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    command = UpdateProjectCommand(**request.model_dump())

    use_case = UpdateProjectUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id, command)

    if result.is_err():
        raise_project_error(result.error)

    return result.value


@router.delete(
    "/{project_id}", status_code=status.HTTP_200_OK, response_model=DeleteProjectResponse
)
async def delete_project(
    project_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Delete Project

    Removes the project with all its memberships and invitations.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    use_case = DeleteProjectUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id)

    if result.is_err():
        raise_project_error(result.error)

    return result.value
