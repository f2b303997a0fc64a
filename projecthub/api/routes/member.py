from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from config import ApplicationConfig
from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.members import (
    ListMembersUseCase,
    MemberListResponse,
    QuitProjectResponse,
    QuitProjectUseCase,
    RemoveMemberResponse,
    RemoveMemberUseCase,
    TransferOwnershipResponse,
    TransferOwnershipUseCase,
)
from projecthub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/projects/{project_id}", tags=["Members"])


@router.get("/members", status_code=status.HTTP_200_OK, response_model=MemberListResponse)
async def list_members(
    project_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    List Members

    Owner entry first, then members in join order.

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    use_case = ListMembersUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id)

    if result.is_err():
        error = result.error
        if error.code == "PROJECT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/members/me", status_code=status.HTTP_200_OK, response_model=QuitProjectResponse
)
async def quit_project(
    project_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Quit Project

    Succeeds with status "not_a_member" when there is nothing to leave.

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND
        - 409 Conflict: OWNER_CANNOT_QUIT
    """
    use_case = QuitProjectUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id)

    if result.is_err():
        error = result.error
        if error.code == "PROJECT_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "OWNER_CANNOT_QUIT":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


@router.delete(
    "/members/{user_id}", status_code=status.HTTP_200_OK, response_model=RemoveMemberResponse
)
async def remove_member(
    project_id: UUID,
    user_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Remove Member

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PROJECT_NOT_FOUND, MEMBERSHIP_NOT_FOUND
        - 409 Conflict: CANNOT_REMOVE_OWNER
    """
    use_case = RemoveMemberUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id, user_id)

    if result.is_err():
        error = result.error
        if error.code == "INSUFFICIENT_ROLE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in ("PROJECT_NOT_FOUND", "MEMBERSHIP_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code == "CANNOT_REMOVE_OWNER":
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class TransferOwnershipRequest(BaseModel):
    new_owner_id: UUID = Field(..., description="User ID of an existing member")


@router.post(
    "/transfer-ownership",
    status_code=status.HTTP_200_OK,
    response_model=TransferOwnershipResponse,
)
async def transfer_ownership(
    project_id: UUID,
    request: TransferOwnershipRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Transfer Ownership

    The previous owner stays on as a member when KEEP_FORMER_OWNER_AS_MEMBER
    is enabled.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PROJECT_NOT_FOUND, MEMBERSHIP_NOT_FOUND
    """
    use_case = TransferOwnershipUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]),
        project_id,
        request.new_owner_id,
        keep_former_owner=ApplicationConfig.KEEP_FORMER_OWNER_AS_MEMBER,
    )

    if result.is_err():
        error = result.error
        if error.code == "INSUFFICIENT_ROLE":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code in ("PROJECT_NOT_FOUND", "MEMBERSHIP_NOT_FOUND"):
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
