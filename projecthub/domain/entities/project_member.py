"""
ProjectMember Entity

Links a non-owner user to a project.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from projecthub.domain.base import utcnow

from .enums import ProjectRole


class ProjectMember(SQLModel, table=True):
    """
    ProjectMember entity - membership row for a non-owner.

    Business Rules:
    - (project_id, user_id) must be unique
    - The project owner never holds a membership row for the same project
    - role is always member; owner is derived from Project.user_id
    """

    __tablename__ = "project_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    project_id: UUID = Field(foreign_key="projects.id", nullable=False, index=True)
    user_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    role: ProjectRole = Field(default=ProjectRole.member)
    email: str = Field(max_length=255)
    invited_by: Optional[UUID] = Field(default=None)

    # Timestamps
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_project_member_project_user", "project_id", "user_id", unique=True),
    )
