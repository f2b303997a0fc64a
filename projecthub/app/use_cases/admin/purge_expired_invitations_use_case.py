"""
Use Case: Purge Expired Invitations

Removes invitations that expired without being accepted.
"""

import logging

from pydantic import BaseModel

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.result import Result, Return

logger = logging.getLogger(__name__)


class PurgeExpiredInvitationsResponse(BaseModel):
    """Response DTO for PurgeExpiredInvitationsUseCase"""

    status: str
    invitations_purged: int
    purged_at: str


class PurgeExpiredInvitationsUseCase:
    """
    Delete every invitation with accepted_at IS NULL and expires_at <= now.

    Accepted invitations are history and stay. Run from the admin API or a
    scheduler; nothing in the request path sweeps automatically.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[PurgeExpiredInvitationsResponse]:
        async with self.uow:
            now = utcnow()
            purged = await self.uow.invitations.delete_expired(now)

            await self.uow.commit()

            logger.info(f"Purged {purged} expired invitations")

            return Return.ok(
                PurgeExpiredInvitationsResponse(
                    status="purged",
                    invitations_purged=purged,
                    purged_at=now.isoformat(),
                )
            )
