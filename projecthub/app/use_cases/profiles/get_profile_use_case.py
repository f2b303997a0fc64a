from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Error, Result, Return

from .dtos import ProfileInfo


class GetProfileUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[ProfileInfo]:
        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(user_id)
            if profile is None:
                return Return.err(Error("PROFILE_NOT_FOUND", "Profile not found"))

            return Return.ok(ProfileInfo.from_entity(profile))
