from typing import Dict, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.profiles import (
    GetProfileUseCase,
    ProfileInfo,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from projecthub.depends import get_current_user, get_unit_of_work

router = APIRouter(prefix="/profile", tags=["Profile"])


@router.get("", status_code=status.HTTP_200_OK, response_model=ProfileInfo)
async def get_profile(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get Own Profile

    Raises:
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: PROFILE_NOT_FOUND
    """
    use_case = GetProfileUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        error = result.error
        if error.code == "PROFILE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class UpdateProfileRequest(BaseModel):
    """Profile fields to change; omitted fields stay as they are"""

    username: Optional[str] = None
    display_name: Optional[str] = Field(None, max_length=255)
    avatar_url: Optional[str] = Field(None, max_length=1024)
    bio: Optional[str] = Field(None, max_length=2000)
    location: Optional[str] = Field(None, max_length=255)
    website: Optional[str] = Field(None, max_length=1024)
    notification_preferences: Optional[Dict[str, bool]] = None
    theme_preference: Optional[str] = None
    language_preference: Optional[str] = Field(None, max_length=10)


@router.patch("", status_code=status.HTTP_200_OK, response_model=ProfileInfo)
async def update_profile(
    request: UpdateProfileRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update Own Profile

    Raises:
        - 400 Bad Request: INVALID_USERNAME, VALIDATION_ERROR
        - 401 Unauthorized: Invalid or expired JWT
        - 404 Not Found: PROFILE_NOT_FOUND
        - 409 Conflict: USERNAME_TAKEN, USERNAME_IMMUTABLE
    """
    command = UpdateProfileCommand(**request.model_dump())

    use_case = UpdateProfileUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_USERNAME", "VALIDATION_ERROR"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "PROFILE_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        elif error.code in ("USERNAME_TAKEN", "USERNAME_IMMUTABLE"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value
