"""
ProjectHub client core

Async client for the ProjectHub API with the session holder, the project
registry cache and the membership workflow.
"""

from .api_client import ProjectHubClient
from .errors import (
    AuthenticationRequiredError,
    ConflictError,
    DuplicatePendingInvitationError,
    NotFoundError,
    PermissionDeniedError,
    ProjectHubError,
    RemoteFailure,
    SelfInviteError,
    ValidationError,
)
from .models import Identity, Invitation, InvitationOutcome, Project
from .registry import (
    ProjectRegistry,
    available_tags,
    filter_projects,
    merge_append,
    merge_remove,
    merge_replace,
)
from .session import SessionEvent, SessionHolder, Subscription
from .workflow import MembershipWorkflow

__all__ = [
    "ProjectHubClient",
    "SessionHolder",
    "SessionEvent",
    "Subscription",
    "ProjectRegistry",
    "MembershipWorkflow",
    "filter_projects",
    "available_tags",
    "merge_append",
    "merge_replace",
    "merge_remove",
    "Identity",
    "Project",
    "Invitation",
    "InvitationOutcome",
    "ProjectHubError",
    "ValidationError",
    "NotFoundError",
    "SelfInviteError",
    "DuplicatePendingInvitationError",
    "AuthenticationRequiredError",
    "PermissionDeniedError",
    "ConflictError",
    "RemoteFailure",
]
