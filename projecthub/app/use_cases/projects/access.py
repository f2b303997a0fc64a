"""
Project access checks shared by project, member and invitation use cases.
"""

from typing import Optional, Tuple
from uuid import UUID

from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.domain.entities import Project, ProjectRole
from projecthub.result import Error

PROJECT_NOT_FOUND = Error("PROJECT_NOT_FOUND", "Project not found")
OWNER_ONLY = Error("INSUFFICIENT_ROLE", "Only the project owner can do this")


async def resolve_role(
    uow: UnitOfWork, project: Project, user_id: UUID
) -> Optional[ProjectRole]:
    """Effective role of user_id in project, or None without access"""
    if project.is_owned_by(user_id):
        return ProjectRole.owner
    member = await uow.members.get_by_project_and_user(project.id, user_id)
    if member is not None:
        return ProjectRole.member
    return None


async def load_project(
    uow: UnitOfWork, project_id: UUID, user_id: UUID
) -> Tuple[Optional[Project], Optional[ProjectRole], Optional[Error]]:
    """
    Load a project the caller can read.

    Missing projects and projects the caller has no access to are both
    reported as PROJECT_NOT_FOUND.
    """
    project = await uow.projects.get_by_id(project_id)
    if project is None:
        return None, None, PROJECT_NOT_FOUND

    role = await resolve_role(uow, project, user_id)
    if role is None:
        return None, None, PROJECT_NOT_FOUND

    return project, role, None


async def load_owned_project(
    uow: UnitOfWork, project_id: UUID, user_id: UUID
) -> Tuple[Optional[Project], Optional[Error]]:
    """Load a project the caller owns (INSUFFICIENT_ROLE for members)"""
    project, role, error = await load_project(uow, project_id, user_id)
    if error is not None:
        return None, error
    if role != ProjectRole.owner:
        return None, OWNER_ONLY
    return project, None
