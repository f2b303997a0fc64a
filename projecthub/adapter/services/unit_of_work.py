from sqlmodel.ext.asyncio.session import AsyncSession

from projecthub.adapter.repositories.auth_session_repository import AuthSessionRepository
from projecthub.adapter.repositories.profile_repository import ProfileRepository
from projecthub.adapter.repositories.project_invitation_repository import (
    ProjectInvitationRepository,
)
from projecthub.adapter.repositories.project_member_repository import (
    ProjectMemberRepository,
)
from projecthub.adapter.repositories.project_repository import ProjectRepository
from projecthub.adapter.repositories.user_repository import UserRepository
from projecthub.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.profiles = ProfileRepository(self.session)
        self.projects = ProjectRepository(self.session)
        self.members = ProjectMemberRepository(self.session)
        self.invitations = ProjectInvitationRepository(self.session)
        self.auth_sessions = AuthSessionRepository(self.session)
        return self

    async def __aexit__(self, *args):
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
