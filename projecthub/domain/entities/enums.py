"""
ProjectHub Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class ProjectRole(str, Enum):
    """Effective role of an identity within a project.

    ``owner`` is never stored on a membership row; it is derived from
    ``Project.user_id``.
    """

    owner = "owner"
    member = "member"


class InvitationState(str, Enum):
    """Derived invitation state (declined/cancelled invitations are deleted)"""

    pending = "pending"
    accepted = "accepted"
    expired = "expired"


class ThemePreference(str, Enum):
    """Profile theme preference"""

    light = "light"
    dark = "dark"
    system = "system"
