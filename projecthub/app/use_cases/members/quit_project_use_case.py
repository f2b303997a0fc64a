from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Error, Result, Return

from .dtos import QuitProjectResponse


class QuitProjectUseCase:
    """
    The caller leaves a project they are a member of.

    Leaving a project without a membership row is reported as
    ``not_a_member`` rather than an error. The owner cannot quit; they
    transfer ownership or delete the project instead.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, project_id: UUID) -> Result[QuitProjectResponse]:
        async with self.uow:
            project = await self.uow.projects.get_by_id(project_id)
            if project is None:
                return Return.err(Error("PROJECT_NOT_FOUND", "Project not found"))

            if project.is_owned_by(user_id):
                return Return.err(
                    Error(
                        "OWNER_CANNOT_QUIT",
                        "The owner cannot leave the project; transfer ownership first",
                    )
                )

            member = await self.uow.members.get_by_project_and_user(project.id, user_id)
            if member is None:
                return Return.ok(
                    QuitProjectResponse(project_id=str(project_id), status="not_a_member")
                )

            await self.uow.members.delete(member)

            await self.uow.commit()

            return Return.ok(QuitProjectResponse(project_id=str(project_id), status="left"))
