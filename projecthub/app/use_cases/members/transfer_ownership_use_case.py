"""
Transfer Ownership Use Case

Hands a project over to one of its members.
"""

import logging
from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.access import load_owned_project
from projecthub.app.use_cases.projects.dtos import ProjectInfo
from projecthub.domain.base import utcnow
from projecthub.domain.entities import ProjectMember, ProjectRole
from projecthub.result import Error, Result, Return

from .dtos import TransferOwnershipResponse

logger = logging.getLogger(__name__)


class TransferOwnershipUseCase:
    """
    Use case for transferring project ownership.

    Business Rules:
    - Only the current owner can transfer
    - The new owner must currently be a member
    - In one transaction: the new owner's membership row is removed and
      the project's owner is replaced
    - With keep_former_owner the previous owner gets a member row, otherwise
      they lose access
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self,
        owner_id: UUID,
        project_id: UUID,
        new_owner_id: UUID,
        keep_former_owner: bool = True,
    ) -> Result[TransferOwnershipResponse]:
        async with self.uow:
            project, error = await load_owned_project(self.uow, project_id, owner_id)
            if error:
                return Return.err(error)

            new_owner_membership = await self.uow.members.get_by_project_and_user(
                project.id, new_owner_id
            )
            if new_owner_membership is None:
                return Return.err(
                    Error(
                        "MEMBERSHIP_NOT_FOUND",
                        "The new owner must be a member of this project",
                    )
                )

            await self.uow.members.delete(new_owner_membership)

            now = utcnow()
            project.user_id = new_owner_id
            project.updated_at = now
            project = await self.uow.projects.update(project)

            previous_owner_role = None
            if keep_former_owner:
                former_owner = await self.uow.users.get_by_id(owner_id)
                await self.uow.members.create(
                    ProjectMember(
                        project_id=project.id,
                        user_id=owner_id,
                        role=ProjectRole.member,
                        email=former_owner.email if former_owner else "",
                        invited_by=new_owner_id,
                        joined_at=now,
                        created_at=now,
                        updated_at=now,
                    )
                )
                previous_owner_role = ProjectRole.member

            await self.uow.commit()

            logger.info(
                f"Project {project.id} ownership transferred from {owner_id} "
                f"to {new_owner_id}"
            )

            return Return.ok(
                TransferOwnershipResponse(
                    project_id=str(project.id),
                    previous_owner_id=str(owner_id),
                    new_owner_id=str(new_owner_id),
                    previous_owner_role=previous_owner_role.value
                    if previous_owner_role
                    else None,
                    project=ProjectInfo.from_entity(project, previous_owner_role)
                    if previous_owner_role
                    else None,
                )
            )
