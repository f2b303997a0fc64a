"""
ProjectInvitation Entity

Invitation for an email address to join a project.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel, text

from projecthub.domain.base import utcnow

from .enums import InvitationState, ProjectRole


class ProjectInvitation(SQLModel, table=True):
    """
    ProjectInvitation entity.

    Business Rules:
    - email is always concrete (usernames are resolved before insert)
    - Expires 7 days after creation
    - Token is single-use, cryptographically secure
    - At most one unaccepted invitation per (project, email), enforced by a
      partial unique index
    - Immutable except accepted_at (null -> timestamp) or deletion
    """

    __tablename__ = "project_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    email: str = Field(max_length=255, nullable=False, index=True)

    role: ProjectRole = Field(default=ProjectRole.member)
    invited_by: UUID = Field(foreign_key="users.id", nullable=False)
    inviter_email: Optional[str] = Field(default=None, max_length=255)

    token: str = Field(unique=True, index=True, max_length=64)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime, nullable=False))
    accepted_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_project_invitation_expires_at", "expires_at"),
        Index(
            "uq_project_invitation_open_email",
            "project_id",
            "email",
            unique=True,
            sqlite_where=text("accepted_at IS NULL"),
            postgresql_where=text("accepted_at IS NULL"),
        ),
    )

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        return self.expires_at <= (now or utcnow())

    def is_pending(self, now: Optional[datetime] = None) -> bool:
        return self.accepted_at is None and not self.is_expired(now)

    def state(self, now: Optional[datetime] = None) -> InvitationState:
        if self.accepted_at is not None:
            return InvitationState.accepted
        if self.is_expired(now):
            return InvitationState.expired
        return InvitationState.pending
