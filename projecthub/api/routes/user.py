from uuid import UUID

from fastapi import APIRouter, Depends, status

from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.auth import IdentityInfo, LoadIdentityUseCase
from projecthub.depends import get_current_user, get_unit_of_work

router = APIRouter(tags=["User"])


@router.get("/me", status_code=status.HTTP_200_OK, response_model=IdentityInfo)
async def get_me(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Load Current Identity

    Raises:
        - 401 Unauthorized: Invalid or expired JWT, or the account no longer exists
        - 500 Internal Server Error: Server error
    """
    user_id = UUID(current_user["user_id"])

    use_case = LoadIdentityUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
