"""
Admin API Routes - Maintenance Endpoints

Authentication is via Admin API Key, not user JWTs.
"""

from fastapi import APIRouter, Depends, status

from projecthub.api.error import ServerError
from projecthub.api.utils.admin_auth import verify_admin_api_key
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.admin import (
    PurgeExpiredInvitationsResponse,
    PurgeExpiredInvitationsUseCase,
)
from projecthub.depends import get_unit_of_work

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post(
    "/invitations/purge-expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredInvitationsResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_invitations(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Invitations

    Deletes invitations that expired without being accepted.

    Requires: X-Admin-API-Key header

    Raises:
        - 401 Unauthorized: Missing or invalid admin API key
        - 500 Internal Server Error: Server error
    """
    use_case = PurgeExpiredInvitationsUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
