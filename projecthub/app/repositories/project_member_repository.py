from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from projecthub.domain.entities import ProjectMember


class IProjectMemberRepository(ABC):
    """ProjectMember repository interface - application layer"""

    @abstractmethod
    async def get_by_project_and_user(
        self, project_id: UUID, user_id: UUID
    ) -> Optional[ProjectMember]:
        """Get membership by project and user"""
        pass

    @abstractmethod
    async def get_by_project_id(self, project_id: UUID) -> List[ProjectMember]:
        """Get all memberships for a project, oldest first"""
        pass

    @abstractmethod
    async def create(self, member: ProjectMember) -> ProjectMember:
        """Create a new membership"""
        pass

    @abstractmethod
    async def delete(self, member: ProjectMember) -> None:
        """Delete a membership"""
        pass

    @abstractmethod
    async def delete_by_project_id(self, project_id: UUID) -> int:
        """Delete all memberships of a project, returns number removed"""
        pass
