"""
Delete Project Use Case
"""

import logging
from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Result, Return

from .access import load_owned_project
from .dtos import DeleteProjectResponse

logger = logging.getLogger(__name__)


class DeleteProjectUseCase:
    """
    Use case for deleting a project.

    Business Rules:
    - Only the owner can delete
    - Memberships and invitations are removed in the same transaction
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, project_id: UUID
    ) -> Result[DeleteProjectResponse]:
        async with self.uow:
            project, error = await load_owned_project(self.uow, project_id, user_id)
            if error:
                return Return.err(error)

            members_removed = await self.uow.members.delete_by_project_id(project.id)
            invitations_removed = await self.uow.invitations.delete_by_project_id(
                project.id
            )
            await self.uow.projects.delete(project)

            await self.uow.commit()

            logger.info(
                f"Project {project_id} deleted: {members_removed} members, "
                f"{invitations_removed} invitations removed"
            )

            return Return.ok(
                DeleteProjectResponse(
                    id=str(project_id),
                    members_removed=members_removed,
                    invitations_removed=invitations_removed,
                )
            )
