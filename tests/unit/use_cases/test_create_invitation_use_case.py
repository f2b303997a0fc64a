from datetime import timedelta
from unittest.mock import patch

import pytest

from config import ApplicationConfig
from projecthub.app.repositories.project_invitation_repository import (
    DuplicateOpenInvitationError,
)
from projecthub.app.use_cases.invitations import (
    CreateInvitationUseCase,
    ResolveInviteTargetUseCase,
)
from tests.fixtures.factories import (
    make_invitation,
    make_member,
    make_profile,
    make_project,
    make_user,
)


@pytest.fixture
def owner_setup(mock_uow):
    owner = make_user("owner@example.com")
    project = make_project(owner.id, "Alpha")
    mock_uow.users.get_by_id.return_value = owner
    mock_uow.projects.get_by_id.return_value = project
    mock_uow.profiles.get_by_user_id.return_value = make_profile(owner, "owner")
    return owner, project


@pytest.mark.asyncio
async def test_invite_by_email(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    use_case = CreateInvitationUseCase(mock_uow)

    # Act
    result = await use_case.execute(owner.id, project.id, "  Bob@Example.com ")

    # Assert
    assert result.is_ok()
    invitation = result.value.invitation
    assert invitation.email == "bob@example.com"
    assert invitation.status == "pending"
    assert invitation.inviter_email == "owner@example.com"

    created = mock_uow.invitations.create.call_args[0][0]
    assert len(created.token) >= 32
    assert created.expires_at - created.created_at == timedelta(days=7)

    notice = result.value.notice
    assert notice.project_name == "Alpha"
    assert notice.inviter_label == "owner"
    assert notice.invitation_token == created.token
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_invite_by_username(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    bob = make_user("bob@example.com")
    mock_uow.profiles.get_by_username.return_value = make_profile(bob, "bob")

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(owner.id, project.id, "Bob")

    # Assert
    assert result.is_ok()
    assert result.value.invitation.email == "bob@example.com"
    mock_uow.profiles.get_by_username.assert_called_once_with("Bob")


@pytest.mark.asyncio
async def test_invite_unknown_username(mock_uow, owner_setup):
    owner, project = owner_setup

    result = await CreateInvitationUseCase(mock_uow).execute(owner.id, project.id, "ghost")

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("target", ["owner@example.com", "OWNER@example.com", "owner"])
async def test_self_invite_fails_before_any_write(mock_uow, owner_setup, target):
    # Arrange
    owner, project = owner_setup
    mock_uow.profiles.get_by_username.return_value = make_profile(owner, "owner")

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(owner.id, project.id, target)

    # Assert
    assert result.is_err()
    assert result.error.code == "SELF_INVITE"
    mock_uow.invitations.create.assert_not_called()
    mock_uow.invitations.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("target", ["", "   ", "no spaces allowed", "x"])
async def test_invalid_target(mock_uow, owner_setup, target):
    owner, project = owner_setup

    result = await CreateInvitationUseCase(mock_uow).execute(owner.id, project.id, target)

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"


@pytest.mark.asyncio
async def test_only_owner_can_invite(mock_uow, owner_setup):
    # Arrange
    _, project = owner_setup
    member = make_user("bob@example.com")
    mock_uow.members.get_by_project_and_user.return_value = make_member(project, member)

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(
        member.id, project.id, "carol@example.com"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"


@pytest.mark.asyncio
async def test_existing_member_cannot_be_invited(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    bob = make_user("bob@example.com")
    mock_uow.users.get_by_email.return_value = bob

    async def membership(project_id, user_id):
        return make_member(project, bob) if user_id == bob.id else None

    mock_uow.members.get_by_project_and_user.side_effect = membership

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(
        owner.id, project.id, "bob@example.com"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "ALREADY_MEMBER"


@pytest.mark.asyncio
async def test_duplicate_pending_invitation(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    mock_uow.invitations.get_open_by_project_and_email.return_value = make_invitation(
        project, "bob@example.com", owner.id
    )

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(
        owner.id, project.id, "bob@example.com"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.invitations.create.assert_not_called()


@pytest.mark.asyncio
async def test_expired_invitation_is_superseded(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    expired = make_invitation(
        project, "bob@example.com", owner.id, expires_in=timedelta(days=-1)
    )
    mock_uow.invitations.get_open_by_project_and_email.return_value = expired

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(
        owner.id, project.id, "bob@example.com"
    )

    # Assert
    assert result.is_ok()
    mock_uow.invitations.delete.assert_called_once_with(expired)
    mock_uow.invitations.create.assert_called_once()


@pytest.mark.asyncio
async def test_storage_uniqueness_violation_maps_to_duplicate(mock_uow, owner_setup):
    # Arrange
    owner, project = owner_setup
    mock_uow.invitations.create.side_effect = DuplicateOpenInvitationError("race")

    # Act
    result = await CreateInvitationUseCase(mock_uow).execute(
        owner.id, project.id, "bob@example.com"
    )

    # Assert
    assert result.is_err()
    assert result.error.code == "INVITE_ALREADY_EXISTS"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_invitation_ttl_comes_from_config(mock_uow, owner_setup):
    owner, project = owner_setup

    with patch.object(ApplicationConfig, "INVITATION_TTL_DAYS", 3):
        await CreateInvitationUseCase(mock_uow).execute(
            owner.id, project.id, "bob@example.com"
        )

    created = mock_uow.invitations.create.call_args[0][0]
    assert created.expires_at - created.created_at == timedelta(days=3)


@pytest.mark.asyncio
async def test_resolve_target_preview(mock_uow):
    # Arrange
    inviter = make_user("owner@example.com")
    bob = make_user("bob@example.com")
    mock_uow.users.get_by_id.return_value = inviter
    mock_uow.profiles.get_by_username.return_value = make_profile(bob, "bob")

    # Act
    result = await ResolveInviteTargetUseCase(mock_uow).execute(inviter.id, "bob")

    # Assert
    assert result.is_ok()
    assert result.value.email == "bob@example.com"
    assert result.value.user_id == str(bob.id)
    assert result.value.username == "bob"
