"""
Profile Use Case DTOs
"""

from typing import Dict, Optional

from pydantic import BaseModel


class UpdateProfileCommand(BaseModel):
    """Fields the caller wants to change; None means leave as is"""

    username: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    notification_preferences: Optional[Dict[str, bool]] = None
    theme_preference: Optional[str] = None
    language_preference: Optional[str] = None


class ProfileInfo(BaseModel):
    user_id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    avatar_url: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    notification_preferences: Dict[str, bool]
    theme_preference: str
    language_preference: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, profile) -> "ProfileInfo":
        return cls(
            user_id=str(profile.user_id),
            email=profile.email,
            username=profile.username,
            display_name=profile.display_name,
            avatar_url=profile.avatar_url,
            bio=profile.bio,
            location=profile.location,
            website=profile.website,
            notification_preferences=dict(profile.notification_preferences or {}),
            theme_preference=getattr(
                profile.theme_preference, "value", profile.theme_preference
            ),
            language_preference=profile.language_preference,
            created_at=profile.created_at.isoformat(),
            updated_at=profile.updated_at.isoformat(),
        )
