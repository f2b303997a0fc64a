from typing import Optional
from uuid import UUID

from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.app.repositories.auth_session_repository import IAuthSessionRepository
from projecthub.domain.entities import AuthSession


class AuthSessionRepository(IAuthSessionRepository):
    """AuthSession repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, session_id: UUID) -> Optional[AuthSession]:
        """Get session by ID"""
        stmt = select(AuthSession).where(AuthSession.id == session_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, session_obj: AuthSession) -> AuthSession:
        """Create a new session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj

    async def update(self, session_obj: AuthSession) -> AuthSession:
        """Update existing session"""
        self.session.add(session_obj)
        await self.session.flush()
        await self.session.refresh(session_obj)
        return session_obj
