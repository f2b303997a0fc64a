from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.result import Error, Result, Return

from .dtos import LogoutResponse
from .tokens import parse_refresh_token, secret_matches


class LogoutUseCase:
    """Revokes the session behind a refresh token. Revoking twice is a no-op."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[LogoutResponse]:
        parsed = parse_refresh_token(refresh_token)
        if parsed is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))
        session_id, secret = parsed

        async with self.uow:
            session = await self.uow.auth_sessions.get_by_id(session_id)
            if session is None or not secret_matches(secret, session.refresh_token_hash):
                return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

            if not session.revoked:
                session.revoked = True
                session.revoked_at = utcnow()
                await self.uow.auth_sessions.update(session)
                await self.uow.commit()

            return Return.ok(LogoutResponse(status="signed_out"))
