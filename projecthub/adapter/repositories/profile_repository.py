from typing import List, Optional
from uuid import UUID

from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.app.repositories.profile_repository import IProfileRepository
from projecthub.domain.entities import Profile


class ProfileRepository(IProfileRepository):
    """Profile repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_user_id(self, user_id: UUID) -> Optional[Profile]:
        """Get profile by user ID"""
        stmt = select(Profile).where(Profile.user_id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> Optional[Profile]:
        """Get profile by username (case-insensitive exact match)"""
        stmt = select(Profile).where(
            func.lower(Profile.username) == username.strip().lower()
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_user_ids(self, user_ids: List[UUID]) -> List[Profile]:
        """Get profiles for several users at once"""
        if not user_ids:
            return []
        stmt = select(Profile).where(col(Profile.user_id).in_(user_ids))
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile

    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        self.session.add(profile)
        await self.session.flush()
        await self.session.refresh(profile)
        return profile
