from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import col, select
from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.app.repositories.project_member_repository import (
    IProjectMemberRepository,
)
from projecthub.domain.entities import ProjectMember


class ProjectMemberRepository(IProjectMemberRepository):
    """ProjectMember repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_project_and_user(
        self, project_id: UUID, user_id: UUID
    ) -> Optional[ProjectMember]:
        """Get membership by project and user"""
        stmt = select(ProjectMember).where(
            ProjectMember.project_id == project_id, ProjectMember.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_project_id(self, project_id: UUID) -> List[ProjectMember]:
        """Get all memberships for a project, oldest first"""
        stmt = (
            select(ProjectMember)
            .where(ProjectMember.project_id == project_id)
            .order_by(col(ProjectMember.created_at).asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, member: ProjectMember) -> ProjectMember:
        """Create a new membership"""
        self.session.add(member)
        await self.session.flush()
        await self.session.refresh(member)
        return member

    async def delete(self, member: ProjectMember) -> None:
        """Delete a membership"""
        await self.session.delete(member)
        await self.session.flush()

    async def delete_by_project_id(self, project_id: UUID) -> int:
        """Delete all memberships of a project"""
        stmt = delete(ProjectMember).where(ProjectMember.project_id == project_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
