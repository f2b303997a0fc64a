"""
Invitation Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel

from projecthub.app.services.notification_service import InvitationNotice
from projecthub.app.use_cases.projects.dtos import ProjectInfo


class InviteTarget(BaseModel):
    """Concrete invitee resolved from an email address or username"""

    email: str
    user_id: Optional[str] = None
    username: Optional[str] = None


class InvitationInfo(BaseModel):
    id: str
    project_id: str
    email: str
    role: str
    status: str
    invited_by: str
    inviter_email: Optional[str] = None
    created_at: str
    expires_at: str
    accepted_at: Optional[str] = None

    @classmethod
    def from_entity(cls, invitation, now=None) -> "InvitationInfo":
        return cls(
            id=str(invitation.id),
            project_id=str(invitation.project_id),
            email=invitation.email,
            role=getattr(invitation.role, "value", invitation.role),
            status=invitation.state(now).value,
            invited_by=str(invitation.invited_by),
            inviter_email=invitation.inviter_email,
            created_at=invitation.created_at.isoformat(),
            expires_at=invitation.expires_at.isoformat(),
            accepted_at=invitation.accepted_at.isoformat()
            if invitation.accepted_at
            else None,
        )


class ReceivedInvitationInfo(InvitationInfo):
    """An invitation addressed to the caller, with the project's name"""

    project_name: str


class CreateInvitationResponse(BaseModel):
    """
    Committed invitation plus the notice the caller dispatches afterwards.

    The notice carries the token and is never returned over HTTP.
    """

    invitation: InvitationInfo
    notice: InvitationNotice


class AcceptInvitationResponse(BaseModel):
    status: str
    invitation_id: str
    membership_id: str
    project: ProjectInfo


class DeleteInvitationResponse(BaseModel):
    id: str
    status: str


class InvitationListResponse(BaseModel):
    invitations: List[InvitationInfo]


class ReceivedInvitationListResponse(BaseModel):
    invitations: List[ReceivedInvitationInfo]
