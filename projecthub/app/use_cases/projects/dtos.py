"""
Project Use Case DTOs
"""

from typing import List, Optional

from pydantic import BaseModel, Field


# ============================================================================
# Commands
# ============================================================================


class CreateProjectCommand(BaseModel):
    name: str
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)


class UpdateProjectCommand(BaseModel):
    """Partial update; None leaves the field unchanged"""

    name: Optional[str] = None
    description: Optional[str] = None
    tags: Optional[List[str]] = None


# ============================================================================
# Response DTOs
# ============================================================================


class ProjectInfo(BaseModel):
    """A project as seen by the caller"""

    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    tags: List[str]
    role: str
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, project, role) -> "ProjectInfo":
        return cls(
            id=str(project.id),
            user_id=str(project.user_id),
            name=project.name,
            description=project.description,
            tags=list(project.tags or []),
            role=getattr(role, "value", role),
            created_at=project.created_at.isoformat(),
            updated_at=project.updated_at.isoformat(),
        )


class ProjectListResponse(BaseModel):
    projects: List[ProjectInfo]


class DeleteProjectResponse(BaseModel):
    id: str
    members_removed: int
    invitations_removed: int
