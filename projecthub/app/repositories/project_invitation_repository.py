from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional
from uuid import UUID

from projecthub.domain.entities import ProjectInvitation


class DuplicateOpenInvitationError(Exception):
    """Raised when the storage layer rejects a second open invitation
    for the same (project, email) pair"""


class IProjectInvitationRepository(ABC):
    """ProjectInvitation repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, invitation_id: UUID) -> Optional[ProjectInvitation]:
        """Get invitation by ID"""
        pass

    @abstractmethod
    async def get_by_token(self, token: str) -> Optional[ProjectInvitation]:
        """Get invitation by token"""
        pass

    @abstractmethod
    async def get_open_by_project_and_email(
        self, project_id: UUID, email: str
    ) -> Optional[ProjectInvitation]:
        """Get the unaccepted invitation (pending or expired) for a pair"""
        pass

    @abstractmethod
    async def list_pending_by_project(
        self, project_id: UUID, now: datetime
    ) -> List[ProjectInvitation]:
        """Pending invitations of a project, newest first"""
        pass

    @abstractmethod
    async def list_pending_by_email(
        self, email: str, now: datetime
    ) -> List[ProjectInvitation]:
        """Pending invitations addressed to an email, newest first"""
        pass

    @abstractmethod
    async def create(self, invitation: ProjectInvitation) -> ProjectInvitation:
        """Create a new invitation.

        Raises:
            DuplicateOpenInvitationError: an unaccepted invitation already
                exists for (project_id, email)
        """
        pass

    @abstractmethod
    async def update(self, invitation: ProjectInvitation) -> ProjectInvitation:
        """Update existing invitation"""
        pass

    @abstractmethod
    async def delete(self, invitation: ProjectInvitation) -> None:
        """Delete an invitation"""
        pass

    @abstractmethod
    async def delete_by_project_id(self, project_id: UUID) -> int:
        """Delete all invitations of a project, returns number removed"""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete unaccepted invitations past expiry, returns number removed"""
        pass
