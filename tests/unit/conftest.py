from unittest.mock import AsyncMock, MagicMock

import pytest


async def _echo(entity):
    return entity


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories; create/update echo their argument"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name in ("users", "profiles", "projects", "members", "invitations", "auth_sessions"):
        repo = AsyncMock()
        repo.create.side_effect = _echo
        repo.update.side_effect = _echo
        for getter in (
            "get_by_id",
            "get_by_email",
            "get_by_username",
            "get_by_user_id",
            "get_by_token",
            "get_by_project_and_user",
            "get_open_by_project_and_email",
        ):
            getattr(repo, getter).return_value = None
        for lister in (
            "get_by_user_ids",
            "get_by_project_id",
            "list_accessible",
            "list_pending_by_project",
            "list_pending_by_email",
        ):
            getattr(repo, lister).return_value = []
        setattr(uow, name, repo)

    return uow
