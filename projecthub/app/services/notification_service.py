"""
Notification Dispatch Contract

Outbound email for invitations and the public contact form. Implementations
must never raise: every failure is reported through DispatchResult.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from pydantic import BaseModel


class InvitationNotice(BaseModel):
    """Parameters of the invitation email"""

    email: str
    project_name: str
    inviter_label: str
    invitation_token: str


class ContactNotice(BaseModel):
    """Parameters of the contact-form email"""

    name: str
    email: str
    message: str


class DispatchResult(BaseModel):
    """Outcome of a send attempt"""

    success: bool
    error: Optional[str] = None
    response: Optional[Any] = None


class NotificationDispatcher(ABC):
    """Sends templated email through an external provider"""

    @abstractmethod
    async def send_invitation(self, notice: InvitationNotice) -> DispatchResult:
        pass

    @abstractmethod
    async def send_contact(self, notice: ContactNotice) -> DispatchResult:
        pass
