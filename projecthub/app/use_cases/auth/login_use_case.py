"""
Login Use Case

Authenticates by email or username and issues tokens.
"""

from datetime import timedelta

import bcrypt

from config import ApplicationConfig
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.domain.entities import AuthSession
from projecthub.domain.validation import is_email, password_fits_bcrypt
from projecthub.result import Error, Result, Return

from .dtos import IdentityInfo, LoginResponse
from .tokens import format_refresh_token, new_refresh_secret

# Compared against when the user does not exist, keeps timing uniform
_DUMMY_HASH = bcrypt.hashpw(b"dummy_password", bcrypt.gensalt(12))


class LoginUseCase:
    """
    Use case for user login and JWT issuance.

    Business Rules:
    - The login field is an email address or a username
    - Usernames resolve to the profile email first
    - Constant-time password comparison to prevent timing attacks
    - Creates new session with refresh token
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, login: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            login: Email address or username
            password: Plain text password

        Returns:
            Result with LoginResponse containing tokens, or Error
        """
        login = login.strip()

        # No stored hash can match a secret bcrypt refuses to hash
        if not password_fits_bcrypt(password):
            return Return.err(
                Error("INVALID_CREDENTIALS", "Invalid email, username or password")
            )

        async with self.uow:
            user = None
            profile = None
            if is_email(login):
                user = await self.uow.users.get_by_email(login)
            else:
                profile = await self.uow.profiles.get_by_username(login)
                if profile is not None:
                    user = await self.uow.users.get_by_id(profile.user_id)

            if user is None:
                bcrypt.checkpw(b"dummy_password", _DUMMY_HASH)
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email, username or password")
                )

            password_valid = bcrypt.checkpw(
                password.encode("utf-8"), user.password_hash.encode("utf-8")
            )
            if not password_valid:
                return Return.err(
                    Error("INVALID_CREDENTIALS", "Invalid email, username or password")
                )

            if profile is None:
                profile = await self.uow.profiles.get_by_user_id(user.id)

            secret, secret_hash = new_refresh_secret()
            session = AuthSession(
                user_id=user.id,
                refresh_token_hash=secret_hash,
                expires_at=utcnow() + timedelta(days=ApplicationConfig.REFRESH_TOKEN_DAYS),
            )
            session = await self.uow.auth_sessions.create(session)

            user.last_login_at = utcnow()
            await self.uow.users.update(user)

            await self.uow.commit()

            from projecthub.api.utils.jwt import generate_jwt

            return Return.ok(
                LoginResponse(
                    user=IdentityInfo(
                        id=str(user.id),
                        email=user.email,
                        username=profile.username if profile else None,
                        display_name=profile.display_name if profile else None,
                    ),
                    access_token=generate_jwt(user.id, user.email),
                    refresh_token=format_refresh_token(session.id, secret),
                    session_id=str(session.id),
                )
            )
