from typing import List, Optional
from uuid import UUID

from sqlmodel import col, or_, select
from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.app.repositories.project_repository import IProjectRepository
from projecthub.domain.entities import Project, ProjectMember


class ProjectRepository(IProjectRepository):
    """Project repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, project_id: UUID) -> Optional[Project]:
        """Get project by ID"""
        stmt = select(Project).where(Project.id == project_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_accessible(self, user_id: UUID) -> List[Project]:
        """Projects owned by the user or shared with them, newest update first"""
        shared = select(ProjectMember.project_id).where(
            ProjectMember.user_id == user_id
        )
        stmt = (
            select(Project)
            .where(or_(Project.user_id == user_id, col(Project.id).in_(shared)))
            .order_by(col(Project.updated_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, project: Project) -> Project:
        """Create a new project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def update(self, project: Project) -> Project:
        """Update existing project"""
        self.session.add(project)
        await self.session.flush()
        await self.session.refresh(project)
        return project

    async def delete(self, project: Project) -> None:
        """Delete a project row"""
        await self.session.delete(project)
        await self.session.flush()
