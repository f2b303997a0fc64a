"""
Decline / Cancel Invitation Use Case
"""

from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Error, Result, Return

from .dtos import DeleteInvitationResponse


class DeleteInvitationUseCase:
    """
    Removes a pending invitation.

    Business Rules:
    - The invitee declines (email match)
    - The project owner or the original inviter cancels
    - Anyone else gets INSUFFICIENT_ROLE
    - Accepted invitations are kept as history and cannot be deleted
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, invitation_id: UUID
    ) -> Result[DeleteInvitationResponse]:
        async with self.uow:
            invitation = await self.uow.invitations.get_by_id(invitation_id)
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

            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if invitation.email.lower() == user.email.lower():
                status = "declined"
            else:
                project = await self.uow.projects.get_by_id(invitation.project_id)
                is_owner = project is not None and project.is_owned_by(user_id)
                if not is_owner and invitation.invited_by != user_id:
                    return Return.err(
                        Error(
                            "INSUFFICIENT_ROLE",
                            "Only the invitee, the inviter or the project owner "
                            "can remove this invitation",
                        )
                    )
                status = "cancelled"

            await self.uow.invitations.delete(invitation)

            await self.uow.commit()

            return Return.ok(
                DeleteInvitationResponse(id=str(invitation_id), status=status)
            )
