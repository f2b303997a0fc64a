from abc import ABC, abstractmethod

from projecthub.app.repositories.auth_session_repository import IAuthSessionRepository
from projecthub.app.repositories.profile_repository import IProfileRepository
from projecthub.app.repositories.project_invitation_repository import (
    IProjectInvitationRepository,
)
from projecthub.app.repositories.project_member_repository import (
    IProjectMemberRepository,
)
from projecthub.app.repositories.project_repository import IProjectRepository
from projecthub.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    profiles: IProfileRepository
    projects: IProjectRepository
    members: IProjectMemberRepository
    invitations: IProjectInvitationRepository
    auth_sessions: IAuthSessionRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
