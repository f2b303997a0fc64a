from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from projecthub.domain.entities import Profile


class IProfileRepository(ABC):
    """Profile repository interface - application layer"""

    @abstractmethod
    async def get_by_user_id(self, user_id: UUID) -> Optional[Profile]:
        """Get profile by user ID"""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[Profile]:
        """Get profile by username (case-insensitive exact match)"""
        pass

    @abstractmethod
    async def get_by_user_ids(self, user_ids: List[UUID]) -> List[Profile]:
        """Get profiles for several users at once"""
        pass

    @abstractmethod
    async def create(self, profile: Profile) -> Profile:
        """Create a new profile"""
        pass

    @abstractmethod
    async def update(self, profile: Profile) -> Profile:
        """Update existing profile"""
        pass
