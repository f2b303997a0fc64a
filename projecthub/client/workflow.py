"""
Membership & invitation workflow facade.

Failures are logged here and re-raised as typed ProjectHubError subclasses;
callers show ``error.message`` to the user.
"""

import logging
from typing import Awaitable, List, Optional, TypeVar

from .api_client import ProjectHubClient
from .errors import AuthenticationRequiredError, ProjectHubError, ValidationError
from .models import Invitation, InvitationOutcome, Project
from .registry import ProjectRegistry, merge_append, merge_remove, merge_replace
from .session import SessionHolder

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MembershipWorkflow:
    def __init__(
        self,
        client: ProjectHubClient,
        session: SessionHolder,
        registry: Optional[ProjectRegistry] = None,
    ):
        self.client = client
        self.session = session
        self.registry = registry

    def _require_identity(self):
        if self.session.identity is None:
            raise AuthenticationRequiredError(
                "AUTHENTICATION_REQUIRED", "Sign in to continue"
            )

    async def _call(self, action: str, call: Awaitable[T]) -> T:
        try:
            return await call
        except ProjectHubError as e:
            logger.warning(f"{action} failed: {e.code} {e.message}")
            raise

    def _merge(self, merge, value):
        if self.registry is not None:
            self.registry.projects = merge(self.registry.projects, value)

    async def invite(self, project_id: str, target: str) -> InvitationOutcome:
        """
        Invite by email or username.

        ``email_sent=False`` on the outcome means the invitation exists but
        the email did not go out.
        """
        self._require_identity()
        if not (target or "").strip():
            raise ValidationError(
                "VALIDATION_ERROR", "Enter an email address or username"
            )
        outcome = await self._call(
            "Invite", self.client.create_invitation(project_id, target.strip())
        )
        if not outcome.email_sent:
            logger.warning(
                f"Invitation {outcome.invitation.id} created without email delivery"
            )
        return outcome

    async def accept(self, invitation_id: str) -> Project:
        self._require_identity()
        data = await self._call("Accept", self.client.accept_invitation(invitation_id))
        project = Project(**data["project"])
        self._merge(merge_append, project)
        return project

    async def accept_by_token(self, token: str) -> Project:
        self._require_identity()
        data = await self._call(
            "Accept", self.client.accept_invitation_by_token(token)
        )
        project = Project(**data["project"])
        self._merge(merge_append, project)
        return project

    async def decline(self, invitation_id: str) -> str:
        """Decline (invitee) or cancel (owner/inviter); returns the resulting status"""
        self._require_identity()
        data = await self._call("Decline", self.client.delete_invitation(invitation_id))
        return data["status"]

    cancel = decline

    async def transfer_ownership(self, project_id: str, new_owner_id: str) -> dict:
        self._require_identity()
        data = await self._call(
            "Transfer ownership",
            self.client.transfer_ownership(project_id, new_owner_id),
        )
        if data.get("project"):
            self._merge(merge_replace, Project(**data["project"]))
        else:
            self._merge(merge_remove, project_id)
        return data

    async def quit(self, project_id: str) -> str:
        self._require_identity()
        data = await self._call("Quit", self.client.quit_project(project_id))
        self._merge(merge_remove, project_id)
        return data["status"]

    async def remove_member(self, project_id: str, user_id: str) -> None:
        self._require_identity()
        await self._call("Remove member", self.client.remove_member(project_id, user_id))

    async def members(self, project_id: str) -> List[dict]:
        self._require_identity()
        return await self._call("List members", self.client.list_members(project_id))

    async def pending_for_project(self, project_id: str) -> List[Invitation]:
        self._require_identity()
        return await self._call(
            "List invitations", self.client.list_project_invitations(project_id)
        )

    async def my_invitations(self) -> List[Invitation]:
        self._require_identity()
        return await self._call("List invitations", self.client.list_my_invitations())
