from datetime import timedelta

import bcrypt

from config import ApplicationConfig
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.domain.entities import AuthSession, Profile, User
from projecthub.domain.validation import (
    USERNAME_RULES,
    is_email,
    is_valid_username,
    missing_password_requirements,
    normalize_optional_text,
)
from projecthub.result import Error, Result, Return

from .dtos import IdentityInfo, SignupCommand, SignupResponse
from .tokens import format_refresh_token, new_refresh_secret


class SignupUseCase:
    """
    Signup Use Case

    Command/Response Pattern:
    - Input: SignupCommand (validated business intent)
    - Output: Result[SignupResponse] (structured response)

    Business Logic:
    1. Validate email, password strength and username format
    2. Check email and username are free (username case-insensitive)
    3. Hash password with bcrypt cost factor 12
    4. Create User and Profile
    5. Create AuthSession with a rotating refresh token (30 days)
    6. Commit transaction atomically
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: SignupCommand) -> Result[SignupResponse]:
        email = command.email.strip().lower()
        username = command.username.strip()

        if not is_email(email):
            return Return.err(Error("INVALID_EMAIL", "Email address is not valid"))

        missing = missing_password_requirements(command.password)
        if missing:
            return Return.err(
                Error(
                    "WEAK_PASSWORD",
                    "Password does not meet requirements: " + ", ".join(missing),
                )
            )

        if not is_valid_username(username):
            return Return.err(Error("INVALID_USERNAME", USERNAME_RULES))

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(
                    Error("EMAIL_ALREADY_EXISTS", "Email already registered")
                )

            existing_profile = await self.uow.profiles.get_by_username(username)
            if existing_profile:
                return Return.err(
                    Error("USERNAME_TAKEN", "Username is already taken")
                )

            password_hash = bcrypt.hashpw(
                command.password.encode("utf-8"), bcrypt.gensalt(12)
            )

            user = User(email=email, password_hash=password_hash.decode("utf-8"))
            user = await self.uow.users.create(user)

            profile = Profile(
                user_id=user.id,
                username=username.lower(),
                email=email,
                display_name=normalize_optional_text(command.display_name),
            )
            profile = await self.uow.profiles.create(profile)

            secret, secret_hash = new_refresh_secret()
            session = AuthSession(
                user_id=user.id,
                refresh_token_hash=secret_hash,
                expires_at=utcnow() + timedelta(days=ApplicationConfig.REFRESH_TOKEN_DAYS),
            )
            session = await self.uow.auth_sessions.create(session)

            await self.uow.commit()

            # Import JWT utility here to avoid circular dependency
            from projecthub.api.utils.jwt import generate_jwt

            return Return.ok(
                SignupResponse(
                    user=IdentityInfo(
                        id=str(user.id),
                        email=user.email,
                        username=profile.username,
                        display_name=profile.display_name,
                    ),
                    access_token=generate_jwt(user.id, user.email),
                    refresh_token=format_refresh_token(session.id, secret),
                    session_id=str(session.id),
                )
            )
