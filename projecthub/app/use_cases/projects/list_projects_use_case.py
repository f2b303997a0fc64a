from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.entities import ProjectRole
from projecthub.result import Result, Return

from .dtos import ProjectInfo, ProjectListResponse


class ListProjectsUseCase:
    """
    Lists every project the user owns or is a member of.

    Ordered by updated_at, most recent first.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProjectListResponse]:
        async with self.uow:
            projects = await self.uow.projects.list_accessible(user_id)

            return Return.ok(
                ProjectListResponse(
                    projects=[
                        ProjectInfo.from_entity(
                            project,
                            ProjectRole.owner
                            if project.is_owned_by(user_id)
                            else ProjectRole.member,
                        )
                        for project in projects
                    ]
                )
            )
