"""
Create Invitation Use Case

Invites an email address or username to join a project.
"""

import logging
import secrets
from datetime import timedelta
from uuid import UUID

from config import ApplicationConfig
from projecthub.app.repositories.project_invitation_repository import (
    DuplicateOpenInvitationError,
)
from projecthub.app.services.notification_service import InvitationNotice
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.access import load_owned_project
from projecthub.domain.base import utcnow
from projecthub.domain.entities import ProjectInvitation, ProjectRole
from projecthub.result import Error, Result, Return

from .dtos import CreateInvitationResponse, InvitationInfo
from .resolve_invite_target_use_case import resolve_target

logger = logging.getLogger(__name__)

INVITE_ALREADY_EXISTS = Error(
    "INVITE_ALREADY_EXISTS", "A pending invitation already exists for this email"
)


class CreateInvitationUseCase:
    """
    Use case for inviting a collaborator to a project.

    Business Rules:
    - Only the project owner can invite
    - Input resolves to a concrete email; self-invites fail before any write
    - Existing members cannot be invited again
    - At most one pending invitation per (project, email); an expired,
      unaccepted invitation for the pair is replaced
    - Token is cryptographically secure, invitation expires after
      INVITATION_TTL_DAYS (7 by default)

    Email dispatch is not part of this transaction: the caller sends the
    returned notice after commit.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, inviter_id: UUID, project_id: UUID, target: str
    ) -> Result[CreateInvitationResponse]:
        """
        Execute create invitation use case.

        Args:
            inviter_id: Caller's user ID
            project_id: Project to invite into
            target: Email address or username as typed

        Returns:
            Result with CreateInvitationResponse DTO, or Error
        """
        async with self.uow:
            project, error = await load_owned_project(self.uow, project_id, inviter_id)
            if error:
                return Return.err(error)

            inviter = await self.uow.users.get_by_id(inviter_id)
            if inviter is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            resolved = await resolve_target(self.uow, target, inviter)
            if resolved.is_err():
                return resolved
            invitee = resolved.value

            if invitee.user_id is not None:
                existing_member = await self.uow.members.get_by_project_and_user(
                    project.id, UUID(invitee.user_id)
                )
                if existing_member is not None:
                    return Return.err(
                        Error("ALREADY_MEMBER", "User is already a member of this project")
                    )

            now = utcnow()
            open_invitation = await self.uow.invitations.get_open_by_project_and_email(
                project.id, invitee.email
            )
            if open_invitation is not None:
                if open_invitation.is_pending(now):
                    return Return.err(INVITE_ALREADY_EXISTS)
                # Expired and never accepted: superseded by the new invitation
                await self.uow.invitations.delete(open_invitation)

            invitation = ProjectInvitation(
                project_id=project.id,
                email=invitee.email,
                role=ProjectRole.member,
                invited_by=inviter.id,
                inviter_email=inviter.email,
                token=secrets.token_urlsafe(32),
                created_at=now,
                expires_at=now + timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
            )

            try:
                invitation = await self.uow.invitations.create(invitation)
            except DuplicateOpenInvitationError:
                logger.warning(
                    f"Concurrent invitation for {invitee.email} on project {project.id}"
                )
                return Return.err(INVITE_ALREADY_EXISTS)

            inviter_profile = await self.uow.profiles.get_by_user_id(inviter.id)

            await self.uow.commit()

            return Return.ok(
                CreateInvitationResponse(
                    invitation=InvitationInfo.from_entity(invitation, now),
                    notice=InvitationNotice(
                        email=invitation.email,
                        project_name=project.name,
                        inviter_label=inviter_profile.label
                        if inviter_profile
                        else inviter.email,
                        invitation_token=invitation.token,
                    ),
                )
            )
