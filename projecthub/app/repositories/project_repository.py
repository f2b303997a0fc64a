from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from projecthub.domain.entities import Project


class IProjectRepository(ABC):
    """Project repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        pass

    @abstractmethod
    async def list_accessible(self, user_id: UUID) -> List[Project]:
        """Projects owned by the user or shared with them, newest update first"""
        pass

    @abstractmethod
    async def create(self, project: Project) -> Project:
        """Create a new project"""
        pass

    @abstractmethod
    async def update(self, project: Project) -> Project:
        """Update existing project"""
        pass

    @abstractmethod
    async def delete(self, project: Project) -> None:
        """Delete a project row (dependants must be removed first)"""
        pass
