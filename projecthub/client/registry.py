"""
Project registry: the locally cached list of accessible projects.

Mutations go to the backend first; the authoritative entity it returns is
merged into the cache with one of the pure merge functions below.
"""

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from projecthub.domain.validation import normalize_tags

from .api_client import ProjectHubClient
from .errors import AuthenticationRequiredError
from .models import Identity, Project
from .session import SessionEvent, SessionHolder, Subscription

logger = logging.getLogger(__name__)


def _matches_query(project: Project, query: str) -> bool:
    needle = query.lower()
    if needle in project.name.lower():
        return True
    if project.description and needle in project.description.lower():
        return True
    return any(needle in tag.lower() for tag in project.tags)


def filter_projects(
    projects: Sequence[Project], query: str = "", tags: Iterable[str] = ()
) -> List[Project]:
    """
    Projects matching the search query and containing every selected tag.

    The query is a case-insensitive substring of name, description or any
    tag, used as typed (surrounding whitespace is significant); tags match
    exactly. Input order is preserved.
    """
    query = query or ""
    selected = set(tags or ())
    return [
        project
        for project in projects
        if (not query or _matches_query(project, query))
        and selected.issubset(project.tags)
    ]


def available_tags(projects: Iterable[Project]) -> List[str]:
    return sorted({tag for project in projects for tag in project.tags})


def merge_append(projects: Sequence[Project], project: Project) -> Tuple[Project, ...]:
    """New project goes first (it has the newest updated_at)"""
    return (project,) + tuple(p for p in projects if p.id != project.id)


def merge_replace(projects: Sequence[Project], project: Project) -> Tuple[Project, ...]:
    """Updated project moves to the front, keeping updated_at descending"""
    return merge_append(projects, project)


def merge_remove(projects: Sequence[Project], project_id: str) -> Tuple[Project, ...]:
    return tuple(p for p in projects if p.id != project_id)


class ProjectRegistry:
    def __init__(self, client: ProjectHubClient):
        self.client = client
        self.projects: Tuple[Project, ...] = ()
        self._identity: Optional[Identity] = None
        self._subscription: Optional[Subscription] = None

    def attach(self, session: SessionHolder) -> Subscription:
        """Reload when an identity appears, clear on sign-out"""
        self._identity = session.identity
        self._subscription = session.subscribe(self._on_session_event)
        return self._subscription

    def detach(self):
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    async def _on_session_event(self, event: SessionEvent, identity: Optional[Identity]):
        previous = self._identity
        self._identity = identity
        if identity is None:
            self.projects = ()
        elif previous is None or previous.id != identity.id:
            await self.load()

    async def load(self) -> Tuple[Project, ...]:
        self.projects = tuple(await self.client.list_projects())
        return self.projects

    def filtered(self, query: str = "", tags: Iterable[str] = ()) -> List[Project]:
        return filter_projects(self.projects, query, tags)

    def available_tags(self) -> List[str]:
        return available_tags(self.projects)

    def _require_identity(self):
        if self._subscription is not None and self._identity is None:
            raise AuthenticationRequiredError(
                "AUTHENTICATION_REQUIRED", "Sign in to manage projects"
            )

    async def create(
        self, name: str, description: Optional[str] = None, tags: Optional[List[str]] = None
    ) -> Project:
        self._require_identity()
        project = await self.client.create_project(
            name, description, normalize_tags(tags)
        )
        self.projects = merge_append(self.projects, project)
        return project

    async def update(self, project_id: str, **fields) -> Project:
        self._require_identity()
        if fields.get("tags") is not None:
            fields["tags"] = normalize_tags(fields["tags"])
        project = await self.client.update_project(project_id, **fields)
        self.projects = merge_replace(self.projects, project)
        return project

    async def delete(self, project_id: str) -> None:
        self._require_identity()
        await self.client.delete_project(project_id)
        self.projects = merge_remove(self.projects, project_id)

    async def quit(self, project_id: str) -> str:
        self._require_identity()
        result = await self.client.quit_project(project_id)
        self.projects = merge_remove(self.projects, project_id)
        return result["status"]
