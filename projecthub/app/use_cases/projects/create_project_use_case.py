"""
Create Project Use Case
"""

from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.entities import Project, ProjectRole
from projecthub.domain.validation import normalize_optional_text, normalize_tags
from projecthub.result import Error, Result, Return

from .dtos import CreateProjectCommand, ProjectInfo


class CreateProjectUseCase:
    """
    Use case for creating a project owned by the caller.

    Business Rules:
    - name is required and trimmed
    - description is trimmed, blank becomes null
    - tags are trimmed, blanks dropped, duplicates removed (case-sensitive)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: CreateProjectCommand
    ) -> Result[ProjectInfo]:
        name = (command.name or "").strip()
        if not name:
            return Return.err(Error("VALIDATION_ERROR", "Project name is required"))
        if len(name) > 255:
            return Return.err(
                Error("VALIDATION_ERROR", "Project name must be at most 255 characters")
            )

        async with self.uow:
            project = Project(
                user_id=user_id,
                name=name,
                description=normalize_optional_text(command.description),
                tags=normalize_tags(command.tags),
            )
            project = await self.uow.projects.create(project)

            await self.uow.commit()

            return Return.ok(ProjectInfo.from_entity(project, ProjectRole.owner))
