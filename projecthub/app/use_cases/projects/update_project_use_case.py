"""
Update Project Use Case
"""

from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.domain.entities import ProjectRole
from projecthub.domain.validation import normalize_optional_text, normalize_tags
from projecthub.result import Error, Result, Return

from .access import load_owned_project
from .dtos import ProjectInfo, UpdateProjectCommand


class UpdateProjectUseCase:
    """
    Use case for editing a project.

    Business Rules:
    - Only the owner can edit
    - Same normalisation as create
    - updated_at is bumped on every successful update
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, project_id: UUID, command: UpdateProjectCommand
    ) -> Result[ProjectInfo]:
        if command.name is not None:
            name = command.name.strip()
            if not name:
                return Return.err(Error("VALIDATION_ERROR", "Project name is required"))
            if len(name) > 255:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Project name must be at most 255 characters",
                    )
                )

        async with self.uow:
            project, error = await load_owned_project(self.uow, project_id, user_id)
            if error:
                return Return.err(error)

            if command.name is not None:
                project.name = command.name.strip()
            if command.description is not None:
                project.description = normalize_optional_text(command.description)
            if command.tags is not None:
                project.tags = normalize_tags(command.tags)

            project.updated_at = utcnow()
            project = await self.uow.projects.update(project)

            await self.uow.commit()

            return Return.ok(ProjectInfo.from_entity(project, ProjectRole.owner))
