"""
ProjectHub Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import InvitationState, ProjectRole, ThemePreference

# Export all entities
from .user import User
from .profile import Profile, default_notification_preferences
from .project import Project
from .project_member import ProjectMember
from .project_invitation import ProjectInvitation
from .auth_session import AuthSession

__all__ = [
    # Enums
    "InvitationState",
    "ProjectRole",
    "ThemePreference",
    # Entities
    "User",
    "Profile",
    "Project",
    "ProjectMember",
    "ProjectInvitation",
    "AuthSession",
    "default_notification_preferences",
]
