from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.access import load_project
from projecthub.domain.base import utcnow
from projecthub.result import Error, Result, Return

from .dtos import (
    InvitationInfo,
    InvitationListResponse,
    ReceivedInvitationInfo,
    ReceivedInvitationListResponse,
)


class ListMyInvitationsUseCase:
    """Pending invitations addressed to the caller's email, newest first."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ReceivedInvitationListResponse]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            now = utcnow()
            invitations = await self.uow.invitations.list_pending_by_email(
                user.email, now
            )

            received = []
            for invitation in invitations:
                project = await self.uow.projects.get_by_id(invitation.project_id)
                if project is None:
                    continue
                info = InvitationInfo.from_entity(invitation, now)
                received.append(
                    ReceivedInvitationInfo(**info.model_dump(), project_name=project.name)
                )

            return Return.ok(ReceivedInvitationListResponse(invitations=received))


class ListProjectInvitationsUseCase:
    """Pending invitations of a project, newest first. Owner and members may read."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, project_id: UUID
    ) -> Result[InvitationListResponse]:
        async with self.uow:
            project, _, error = await load_project(self.uow, project_id, user_id)
            if error:
                return Return.err(error)

            now = utcnow()
            invitations = await self.uow.invitations.list_pending_by_project(
                project.id, now
            )

            return Return.ok(
                InvitationListResponse(
                    invitations=[
                        InvitationInfo.from_entity(invitation, now)
                        for invitation in invitations
                    ]
                )
            )
