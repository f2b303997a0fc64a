"""
Project Entity

A named, tagged workspace owned by exactly one user.
"""

from datetime import datetime
from typing import List, Optional
from uuid import UUID, uuid4

from sqlmodel import JSON, Column, DateTime, Field, Index, SQLModel

from projecthub.domain.base import utcnow


class Project(SQLModel, table=True):
    """
    Project entity.

    Business Rules:
    - name is required (non-blank after trimming)
    - tags hold distinct free-text labels
    - user_id is the single, exclusive owner; it changes only through
      ownership transfer
    - Deleting a project removes its memberships and invitations
    """

    __tablename__ = "projects"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    name: str = Field(max_length=255)
    description: Optional[str] = Field(default=None)
    tags: List[str] = Field(default_factory=list, sa_column=Column(JSON))

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_project_updated_at", "updated_at"),)

    def is_owned_by(self, user_id: UUID) -> bool:
        return self.user_id == user_id
