"""
Invitation Use Cases

Resolve the invitee, invite, accept, decline/cancel and list invitations.
"""

from .accept_invitation_use_case import AcceptInvitationUseCase
from .create_invitation_use_case import CreateInvitationUseCase
from .delete_invitation_use_case import DeleteInvitationUseCase
from .dtos import (
    AcceptInvitationResponse,
    CreateInvitationResponse,
    DeleteInvitationResponse,
    InvitationInfo,
    InvitationListResponse,
    InviteTarget,
    ReceivedInvitationInfo,
    ReceivedInvitationListResponse,
)
from .list_invitations_use_case import (
    ListMyInvitationsUseCase,
    ListProjectInvitationsUseCase,
)
from .resolve_invite_target_use_case import ResolveInviteTargetUseCase

__all__ = [
    "ResolveInviteTargetUseCase",
    "CreateInvitationUseCase",
    "AcceptInvitationUseCase",
    "DeleteInvitationUseCase",
    "ListMyInvitationsUseCase",
    "ListProjectInvitationsUseCase",
    "InviteTarget",
    "InvitationInfo",
    "ReceivedInvitationInfo",
    "CreateInvitationResponse",
    "AcceptInvitationResponse",
    "DeleteInvitationResponse",
    "InvitationListResponse",
    "ReceivedInvitationListResponse",
]
