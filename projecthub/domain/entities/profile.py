"""
Profile Entity

Public-facing identity details and preferences, one row per user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlmodel import JSON, Column, DateTime, Field, SQLModel

from projecthub.domain.base import utcnow

from .enums import ThemePreference


def default_notification_preferences() -> dict:
    return {
        "email_notifications": True,
        "push_notifications": True,
        "project_updates": True,
    }


class Profile(SQLModel, table=True):
    """
    Profile entity - username, display name and user preferences.

    Business Rules:
    - username is unique, case-insensitive (stored lower-case)
    - username is immutable once set
    - email mirrors User.email so invitations can resolve usernames
    """

    __tablename__ = "profiles"

    user_id: UUID = Field(foreign_key="users.id", primary_key=True)
    username: Optional[str] = Field(
        default=None, unique=True, index=True, max_length=20
    )
    email: str = Field(max_length=255, index=True)
    display_name: Optional[str] = Field(default=None, max_length=255)

    avatar_url: Optional[str] = Field(default=None, max_length=1024)
    bio: Optional[str] = Field(default=None, max_length=2000)
    location: Optional[str] = Field(default=None, max_length=255)
    website: Optional[str] = Field(default=None, max_length=1024)

    notification_preferences: dict = Field(
        default_factory=default_notification_preferences, sa_column=Column(JSON)
    )
    theme_preference: ThemePreference = Field(default=ThemePreference.system)
    language_preference: str = Field(default="en", max_length=10)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    @property
    def label(self) -> str:
        """How this identity is shown to others (inviter name in emails)"""
        return self.username or self.email
