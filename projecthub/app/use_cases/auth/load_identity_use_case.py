from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.result import Error, Result, Return

from .dtos import IdentityInfo


class LoadIdentityUseCase:
    """Loads the identity behind a verified access token."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[IdentityInfo]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            profile = await self.uow.profiles.get_by_user_id(user_id)

            return Return.ok(
                IdentityInfo(
                    id=str(user.id),
                    email=user.email,
                    username=profile.username if profile else None,
                    display_name=profile.display_name if profile else None,
                )
            )
