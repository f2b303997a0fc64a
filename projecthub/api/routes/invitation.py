import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.notification_service import NotificationDispatcher
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.invitations import (
    AcceptInvitationResponse,
    AcceptInvitationUseCase,
    CreateInvitationUseCase,
    DeleteInvitationResponse,
    DeleteInvitationUseCase,
    InvitationInfo,
    InvitationListResponse,
    InviteTarget,
    ListMyInvitationsUseCase,
    ListProjectInvitationsUseCase,
    ReceivedInvitationListResponse,
    ResolveInviteTargetUseCase,
)
from projecthub.depends import (
    get_current_user,
    get_notification_dispatcher,
    get_unit_of_work,
)
from projecthub.result import Error

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Invitations"])


def raise_invitation_error(error: Error):
    """Map invitation workflow error codes to HTTP errors"""
    if error.code in ("VALIDATION_ERROR", "SELF_INVITE"):
        raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
    elif error.code in ("INSUFFICIENT_ROLE", "EMAIL_MISMATCH"):
        raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
    elif error.code in ("PROJECT_NOT_FOUND", "USER_NOT_FOUND", "INVITATION_NOT_FOUND"):
        raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
    elif error.code in (
        "ALREADY_MEMBER",
        "INVITE_ALREADY_EXISTS",
        "INVITATION_ALREADY_ACCEPTED",
    ):
        raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
    elif error.code == "INVITATION_EXPIRED":
        raise ClientError(error, status_code=status.HTTP_410_GONE)
    raise ServerError(error)


class CreateInvitationRequest(BaseModel):
    """
    Invite HTTP request payload

    ``target`` is what the owner typed: an email address or a username.
    """

    target: str = Field(..., description="Email address or username to invite")


class CreateInvitationHttpResponse(BaseModel):
    invitation: InvitationInfo
    email_sent: bool
    message: str


@router.post(
    "/projects/{project_id}/invitations",
    status_code=status.HTTP_201_CREATED,
    response_model=CreateInvitationHttpResponse,
)
async def create_invitation(
    project_id: UUID,
    request: CreateInvitationRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Invite Collaborator

    The invitation is committed first; the email is sent afterwards. A
    failed send is reported with email_sent=false and never undoes the
    invitation.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, SELF_INVITE
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: PROJECT_NOT_FOUND, USER_NOT_FOUND
        - 409 Conflict: ALREADY_MEMBER, INVITE_ALREADY_EXISTS
    """
    use_case = CreateInvitationUseCase(uow)
    result = await use_case.execute(
        UUID(current_user["user_id"]), project_id, request.target
    )

    if result.is_err():
        raise_invitation_error(result.error)

    created = result.value
    dispatch = await dispatcher.send_invitation(created.notice)

    if dispatch.success:
        message = f"Invitation sent to {created.invitation.email}"
    else:
        logger.warning(
            f"Invitation {created.invitation.id} created but email failed: {dispatch.error}"
        )
        message = (
            f"Invitation created for {created.invitation.email}, but the email "
            "could not be sent. They can still accept it from their pending "
            "invitations after signing in."
        )

    return CreateInvitationHttpResponse(
        invitation=created.invitation, email_sent=dispatch.success, message=message
    )


@router.get(
    "/projects/{project_id}/invitations",
    status_code=status.HTTP_200_OK,
    response_model=InvitationListResponse,
)
async def list_project_invitations(
    project_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Pending Invitations of a Project

    Raises:
        - 404 Not Found: PROJECT_NOT_FOUND
    """
    use_case = ListProjectInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), project_id)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value


@router.get(
    "/invitations",
    status_code=status.HTTP_200_OK,
    response_model=ReceivedInvitationListResponse,
)
async def list_my_invitations(
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """Pending Invitations Addressed to Me"""
    use_case = ListMyInvitationsUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]))

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value


class AcceptByTokenRequest(BaseModel):
    token: str = Field(..., min_length=1, description="Token from the invitation link")


@router.post(
    "/invitations/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation_by_token(
    request: AcceptByTokenRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation (email link)

    Raises:
        - 403 Forbidden: EMAIL_MISMATCH
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED, ALREADY_MEMBER
        - 410 Gone: INVITATION_EXPIRED
    """
    return await _accept(UUID(current_user["user_id"]), uow, token=request.token)


@router.post(
    "/invitations/{invitation_id}/accept",
    status_code=status.HTTP_200_OK,
    response_model=AcceptInvitationResponse,
)
async def accept_invitation(
    invitation_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Accept Invitation (in app)

    Same rules as accepting through the email link.
    """
    return await _accept(UUID(current_user["user_id"]), uow, invitation_id=invitation_id)


async def _accept(
    user_id: UUID,
    uow: UnitOfWork,
    invitation_id: Optional[UUID] = None,
    token: Optional[str] = None,
):
    use_case = AcceptInvitationUseCase(uow)
    result = await use_case.execute(user_id, invitation_id=invitation_id, token=token)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value


@router.delete(
    "/invitations/{invitation_id}",
    status_code=status.HTTP_200_OK,
    response_model=DeleteInvitationResponse,
)
async def delete_invitation(
    invitation_id: UUID,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Decline or Cancel Invitation

    The invitee declines; the owner or inviter cancels.

    Raises:
        - 403 Forbidden: INSUFFICIENT_ROLE
        - 404 Not Found: INVITATION_NOT_FOUND
        - 409 Conflict: INVITATION_ALREADY_ACCEPTED
    """
    use_case = DeleteInvitationUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), invitation_id)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value


class ResolveTargetRequest(BaseModel):
    target: str = Field(..., description="Email address or username to look up")


@router.post(
    "/invitations/resolve",
    status_code=status.HTTP_200_OK,
    response_model=InviteTarget,
)
async def resolve_invite_target(
    request: ResolveTargetRequest,
    current_user: dict = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Preview Invite Target

    Shows which email address an invite for the given input would reach.

    Raises:
        - 400 Bad Request: VALIDATION_ERROR, SELF_INVITE
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = ResolveInviteTargetUseCase(uow)
    result = await use_case.execute(UUID(current_user["user_id"]), request.target)

    if result.is_err():
        raise_invitation_error(result.error)

    return result.value
