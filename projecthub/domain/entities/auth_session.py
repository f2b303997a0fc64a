"""
AuthSession Entity

Stores refresh tokens for authentication.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from projecthub.domain.base import utcnow


class AuthSession(SQLModel, table=True):
    """
    AuthSession entity - stores refresh tokens for authentication.

    Business Rules:
    - Refresh tokens are hashed (bcrypt)
    - Tokens rotate on each refresh
    - Revoked sessions block token refresh (sign-out)
    - Expires after 30 days
    """

    __tablename__ = "auth_sessions"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    refresh_token_hash: str = Field(max_length=60)  # Bcrypt output
    revoked: bool = Field(default=False)
    revoked_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: datetime = Field(sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_auth_session_expires_at", "expires_at"),
        Index("idx_auth_session_revoked", "revoked"),
    )
