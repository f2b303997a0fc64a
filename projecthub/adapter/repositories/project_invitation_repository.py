from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import col, func, select
from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.app.repositories.project_invitation_repository import (
    DuplicateOpenInvitationError,
    IProjectInvitationRepository,
)
from projecthub.domain.entities import ProjectInvitation


class ProjectInvitationRepository(IProjectInvitationRepository):
    """ProjectInvitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, invitation_id: UUID) -> Optional[ProjectInvitation]:
        """Get invitation by ID"""
        stmt = select(ProjectInvitation).where(ProjectInvitation.id == invitation_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_by_token(self, token: str) -> Optional[ProjectInvitation]:
        """Get invitation by token"""
        stmt = select(ProjectInvitation).where(ProjectInvitation.token == token)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_open_by_project_and_email(
        self, project_id: UUID, email: str
    ) -> Optional[ProjectInvitation]:
        """Get the unaccepted invitation (pending or expired) for a pair"""
        stmt = select(ProjectInvitation).where(
            ProjectInvitation.project_id == project_id,
            func.lower(ProjectInvitation.email) == email.lower(),
            col(ProjectInvitation.accepted_at).is_(None),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_pending_by_project(
        self, project_id: UUID, now: datetime
    ) -> List[ProjectInvitation]:
        """Pending invitations of a project, newest first"""
        stmt = (
            select(ProjectInvitation)
            .where(
                ProjectInvitation.project_id == project_id,
                col(ProjectInvitation.accepted_at).is_(None),
                col(ProjectInvitation.expires_at) > now,
            )
            .order_by(col(ProjectInvitation.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_pending_by_email(
        self, email: str, now: datetime
    ) -> List[ProjectInvitation]:
        """Pending invitations addressed to an email, newest first"""
        stmt = (
            select(ProjectInvitation)
            .where(
                func.lower(ProjectInvitation.email) == email.lower(),
                col(ProjectInvitation.accepted_at).is_(None),
                col(ProjectInvitation.expires_at) > now,
            )
            .order_by(col(ProjectInvitation.created_at).desc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, invitation: ProjectInvitation) -> ProjectInvitation:
        """Create a new invitation"""
        self.session.add(invitation)
        try:
            await self.session.flush()
        except IntegrityError as exc:
            await self.session.rollback()
            raise DuplicateOpenInvitationError(
                f"open invitation exists for {invitation.email}"
            ) from exc
        await self.session.refresh(invitation)
        return invitation

    async def update(self, invitation: ProjectInvitation) -> ProjectInvitation:
        """Update existing invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def delete(self, invitation: ProjectInvitation) -> None:
        """Delete an invitation"""
        await self.session.delete(invitation)
        await self.session.flush()

    async def delete_by_project_id(self, project_id: UUID) -> int:
        """Delete all invitations of a project"""
        stmt = delete(ProjectInvitation).where(
            ProjectInvitation.project_id == project_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount

    async def delete_expired(self, now: datetime) -> int:
        """Delete unaccepted invitations past expiry"""
        stmt = delete(ProjectInvitation).where(
            col(ProjectInvitation.accepted_at).is_(None),
            col(ProjectInvitation.expires_at) <= now,
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
