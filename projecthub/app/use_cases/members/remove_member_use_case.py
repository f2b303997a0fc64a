"""
Remove Member Use Case
"""

from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.access import load_owned_project
from projecthub.result import Error, Result, Return

from .dtos import RemoveMemberResponse


class RemoveMemberUseCase:
    """
    Use case for removing a member from a project.

    Business Rules:
    - Only the owner can remove members
    - The owner cannot remove themself
    - Removing a non-member fails with MEMBERSHIP_NOT_FOUND
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, owner_id: UUID, project_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        async with self.uow:
            project, error = await load_owned_project(self.uow, project_id, owner_id)
            if error:
                return Return.err(error)

            if target_user_id == owner_id:
                return Return.err(
                    Error("CANNOT_REMOVE_OWNER", "The owner cannot be removed")
                )

            member = await self.uow.members.get_by_project_and_user(
                project.id, target_user_id
            )
            if member is None:
                return Return.err(
                    Error("MEMBERSHIP_NOT_FOUND", "User is not a member of this project")
                )

            await self.uow.members.delete(member)

            await self.uow.commit()

            return Return.ok(
                RemoveMemberResponse(
                    project_id=str(project_id),
                    user_id=str(target_user_id),
                    status="removed",
                )
            )
