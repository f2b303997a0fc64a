"""
Project Registry Use Cases

List, read, create, update and delete projects.
"""

from .create_project_use_case import CreateProjectUseCase
from .delete_project_use_case import DeleteProjectUseCase
from .dtos import (
    CreateProjectCommand,
    DeleteProjectResponse,
    ProjectInfo,
    ProjectListResponse,
    UpdateProjectCommand,
)
from .get_project_use_case import GetProjectUseCase
from .list_projects_use_case import ListProjectsUseCase
from .update_project_use_case import UpdateProjectUseCase

__all__ = [
    "ListProjectsUseCase",
    "GetProjectUseCase",
    "CreateProjectUseCase",
    "UpdateProjectUseCase",
    "DeleteProjectUseCase",
    "CreateProjectCommand",
    "UpdateProjectCommand",
    "ProjectInfo",
    "ProjectListResponse",
    "DeleteProjectResponse",
]
