"""
Refresh Token Use Case

Handles JWT token refresh with refresh token rotation for security.
"""

from datetime import timedelta

from config import ApplicationConfig
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.result import Error, Result, Return

from .dtos import RefreshTokenResponse
from .tokens import (
    format_refresh_token,
    new_refresh_secret,
    parse_refresh_token,
    secret_matches,
)


class RefreshTokenUseCase:
    """
    Use case for refreshing JWT access tokens.

    Business Rules:
    - Refresh token rotation: old token invalidated, new token issued
    - Session must not be revoked
    - Session must not be expired
    - Token hash verification using bcrypt (constant-time)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, refresh_token: str) -> Result[RefreshTokenResponse]:
        parsed = parse_refresh_token(refresh_token)
        if parsed is None:
            return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))
        session_id, secret = parsed

        async with self.uow:
            session = await self.uow.auth_sessions.get_by_id(session_id)
            if session is None or not secret_matches(secret, session.refresh_token_hash):
                return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

            if session.revoked:
                return Return.err(Error("SESSION_REVOKED", "Session has been revoked"))

            if session.expires_at < utcnow():
                return Return.err(Error("SESSION_EXPIRED", "Session has expired"))

            user = await self.uow.users.get_by_id(session.user_id)
            if user is None:
                return Return.err(Error("INVALID_TOKEN", "Invalid refresh token"))

            new_secret, new_hash = new_refresh_secret()
            session.refresh_token_hash = new_hash
            session.expires_at = utcnow() + timedelta(
                days=ApplicationConfig.REFRESH_TOKEN_DAYS
            )
            await self.uow.auth_sessions.update(session)

            await self.uow.commit()

            from projecthub.api.utils.jwt import generate_jwt

            return Return.ok(
                RefreshTokenResponse(
                    access_token=generate_jwt(user.id, user.email),
                    refresh_token=format_refresh_token(session.id, new_secret),
                    session_id=str(session.id),
                )
            )
