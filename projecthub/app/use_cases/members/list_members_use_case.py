from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.projects.access import load_project
from projecthub.result import Result, Return

from .dtos import MemberEntry, MemberListResponse, OwnerEntry


class ListMembersUseCase:
    """
    Lists everyone with access to a project.

    The owner entry comes first, followed by members ordered by
    created_at ascending. Readable by the owner and members.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID, project_id: UUID) -> Result[MemberListResponse]:
        async with self.uow:
            project, _, error = await load_project(self.uow, project_id, user_id)
            if error:
                return Return.err(error)

            members = await self.uow.members.get_by_project_id(project.id)
            profiles = await self.uow.profiles.get_by_user_ids(
                [project.user_id] + [m.user_id for m in members]
            )
            profile_by_user = {p.user_id: p for p in profiles}

            owner_profile = profile_by_user.get(project.user_id)
            if owner_profile is not None:
                owner_email = owner_profile.email
            else:
                owner = await self.uow.users.get_by_id(project.user_id)
                owner_email = owner.email if owner else ""

            entries = [
                OwnerEntry(
                    user_id=str(project.user_id),
                    email=owner_email,
                    username=owner_profile.username if owner_profile else None,
                    display_name=owner_profile.display_name if owner_profile else None,
                )
            ]
            for member in members:
                profile = profile_by_user.get(member.user_id)
                entries.append(
                    MemberEntry(
                        id=str(member.id),
                        user_id=str(member.user_id),
                        email=member.email,
                        username=profile.username if profile else None,
                        display_name=profile.display_name if profile else None,
                        invited_by=str(member.invited_by) if member.invited_by else None,
                        joined_at=member.joined_at.isoformat(),
                        created_at=member.created_at.isoformat(),
                    )
                )

            return Return.ok(MemberListResponse(members=entries))
