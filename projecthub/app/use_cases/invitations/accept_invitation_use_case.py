"""
Accept Invitation Use Case

Turns a pending invitation into a project membership.
"""

from typing import Optional
from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.dtos import ProjectInfo
from projecthub.domain.base import utcnow
from projecthub.domain.entities import ProjectMember, ProjectRole
from projecthub.result import Error, Result, Return

from .dtos import AcceptInvitationResponse


class AcceptInvitationUseCase:
    """
    Use case for accepting a project invitation.

    Business Rules:
    - Invitation must exist, be unaccepted and unexpired
    - Invitation email must match the caller's email (case-insensitive)
    - The owner and existing members cannot accept again
    - The membership insert and the accepted_at stamp commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        user_id: UUID,
        invitation_id: Optional[UUID] = None,
        token: Optional[str] = None,
    ) -> Result[AcceptInvitationResponse]:
        """
        Execute accept invitation use case.

        Args:
            user_id: Caller's user ID
            invitation_id: Invitation to accept (in-app accept)
            token: Invitation token (email link accept)

        Returns:
            Result with AcceptInvitationResponse DTO, or Error
        """
        async with self.uow:
            if invitation_id is not None:
                invitation = await self.uow.invitations.get_by_id(invitation_id)
            elif token:
                invitation = await self.uow.invitations.get_by_token(token)
            else:
                invitation = None

            if invitation is None:
                return Return.err(
                    Error("INVITATION_NOT_FOUND", "Invitation not found")
                )

            if invitation.accepted_at is not None:
                return Return.err(
                    Error(
                        "INVITATION_ALREADY_ACCEPTED",
                        "This invitation has already been accepted",
                    )
                )

            now = utcnow()
            if invitation.is_expired(now):
                return Return.err(
                    Error("INVITATION_EXPIRED", "This invitation has expired")
                )

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if invitation.email.lower() != user.email.lower():
                return Return.err(
                    Error(
                        "EMAIL_MISMATCH",
                        "This invitation was sent to a different email address",
                    )
                )

            project = await self.uow.projects.get_by_id(invitation.project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if project.is_owned_by(user.id):
                return Return.err(
                    Error("ALREADY_MEMBER", "You already own this project")
                )

            existing_member = await self.uow.members.get_by_project_and_user(
                project.id, user.id
            )
            if existing_member is not None:
                return Return.err(
                    Error("ALREADY_MEMBER", "You are already a member of this project")
                )

            member = ProjectMember(
                project_id=project.id,
                user_id=user.id,
                role=ProjectRole.member,
                email=user.email,
                invited_by=invitation.invited_by,
                joined_at=now,
                created_at=now,
                updated_at=now,
            )
            member = await self.uow.members.create(member)

            invitation.accepted_at = now
            await self.uow.invitations.update(invitation)

            await self.uow.commit()

            return Return.ok(
                AcceptInvitationResponse(
                    status="accepted",
                    invitation_id=str(invitation.id),
                    membership_id=str(member.id),
                    project=ProjectInfo.from_entity(project, ProjectRole.member),
                )
            )
