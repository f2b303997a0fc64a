"""
Resolve Invite Target Use Case

Turns the free-text invite box input into a concrete email address.
"""

from typing import Optional
from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.entities import User
from projecthub.domain.validation import USERNAME_RULES, is_email, is_valid_username
from projecthub.result import Error, Result, Return

from .dtos import InviteTarget

SELF_INVITE = Error("SELF_INVITE", "You cannot invite yourself")


async def resolve_target(
    uow: UnitOfWork, raw_input: str, inviter: User
) -> Result[InviteTarget]:
    """
    Resolve input against an already-open unit of work.

    Business Rules:
    - Input is trimmed; blank input is rejected
    - Anything shaped like an email is taken as a lower-cased email
    - Otherwise it must be a well-formed username that exists
      (case-insensitive lookup)
    - Resolving to the inviter's own id or email is a self-invite
    """
    value = (raw_input or "").strip()
    if not value:
        return Return.err(
            Error("VALIDATION_ERROR", "Enter an email address or username")
        )

    if is_email(value):
        email = value.lower()
        if email == inviter.email.lower():
            return Return.err(SELF_INVITE)
        existing_user: Optional[User] = await uow.users.get_by_email(email)
        return Return.ok(
            InviteTarget(
                email=email,
                user_id=str(existing_user.id) if existing_user else None,
            )
        )

    if not is_valid_username(value):
        return Return.err(Error("VALIDATION_ERROR", USERNAME_RULES))

    profile = await uow.profiles.get_by_username(value)
    if profile is None:
        return Return.err(
            Error("USER_NOT_FOUND", f"No user found with username '{value}'")
        )

    if profile.user_id == inviter.id or profile.email.lower() == inviter.email.lower():
        return Return.err(SELF_INVITE)

    return Return.ok(
        InviteTarget(
            email=profile.email.lower(),
            user_id=str(profile.user_id),
            username=profile.username,
        )
    )


class ResolveInviteTargetUseCase:
    """Standalone resolution, used to preview who an invite would reach."""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, inviter_id: UUID, raw_input: str) -> Result[InviteTarget]:
        async with self.uow:
            inviter = await self.uow.users.get_by_id(inviter_id)
            if inviter is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            return await resolve_target(self.uow, raw_input, inviter)
