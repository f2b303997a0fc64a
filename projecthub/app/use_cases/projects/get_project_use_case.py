from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Result, Return

from .access import load_project
from .dtos import ProjectInfo


class GetProjectUseCase:
    """Reads one project; owner and members only."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, project_id: UUID) -> Result[ProjectInfo]:
        async with self.uow:
            project, role, error = await load_project(self.uow, project_id, user_id)
            if error:
                return Return.err(error)

            return Return.ok(ProjectInfo.from_entity(project, role))
