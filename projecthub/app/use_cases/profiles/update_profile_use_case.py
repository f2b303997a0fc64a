"""
Update Profile Use Case

Edits the caller's profile and preferences.
"""

from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.base import utcnow
from projecthub.domain.entities import ThemePreference, default_notification_preferences
from projecthub.domain.validation import (
    USERNAME_RULES,
    is_valid_username,
    normalize_optional_text,
)
from projecthub.result import Error, Result, Return

from .dtos import ProfileInfo, UpdateProfileCommand

_TEXT_FIELDS = ("display_name", "avatar_url", "bio", "location", "website")


class UpdateProfileUseCase:
    """
    Use case for editing a profile.

    Business Rules:
    - username can be set once; changing an existing username is rejected
    - username must satisfy the username format and be unique (case-insensitive)
    - free-text fields are trimmed, blank clears the field
    - notification_preferences only accepts known keys and merges into
      the stored preferences
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[ProfileInfo]:
        theme = None
        if command.theme_preference is not None:
            try:
                theme = ThemePreference(command.theme_preference)
            except ValueError:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "theme_preference must be one of: light, dark, system",
                    )
                )

        if command.notification_preferences is not None:
            unknown = set(command.notification_preferences) - set(
                default_notification_preferences()
            )
            if unknown:
                return Return.err(
                    Error(
                        "VALIDATION_ERROR",
                        "Unknown notification preferences: "
                        + ", ".join(sorted(unknown)),
                    )
                )

        async with self.uow:
            profile = await self.uow.profiles.get_by_user_id(user_id)
            if profile is None:
                return Return.err(Error("PROFILE_NOT_FOUND", "Profile not found"))

            if command.username is not None:
                username = command.username.strip()
                if not is_valid_username(username):
                    return Return.err(Error("INVALID_USERNAME", USERNAME_RULES))

                if profile.username and profile.username != username.lower():
                    return Return.err(
                        Error("USERNAME_IMMUTABLE", "Username cannot be changed once set")
                    )

                if profile.username is None:
                    taken = await self.uow.profiles.get_by_username(username)
                    if taken is not None and taken.user_id != user_id:
                        return Return.err(
                            Error("USERNAME_TAKEN", "Username is already taken")
                        )
                    profile.username = username.lower()

            for field in _TEXT_FIELDS:
                value = getattr(command, field)
                if value is not None:
                    setattr(profile, field, normalize_optional_text(value))

            if command.notification_preferences is not None:
                preferences = dict(profile.notification_preferences or {})
                preferences.update(command.notification_preferences)
                profile.notification_preferences = preferences

            if theme is not None:
                profile.theme_preference = theme

            if command.language_preference is not None:
                language = command.language_preference.strip()
                if language:
                    profile.language_preference = language

            profile.updated_at = utcnow()
            profile = await self.uow.profiles.update(profile)

            await self.uow.commit()

            return Return.ok(ProfileInfo.from_entity(profile))
