from datetime import timedelta
from uuid import uuid4

import pytest

from projecthub.app.use_cases.members import (
    ListMembersUseCase,
    MemberEntry,
    OwnerEntry,
    QuitProjectUseCase,
    RemoveMemberUseCase,
    TransferOwnershipUseCase,
)
from tests.fixtures.factories import make_member, make_profile, make_project, make_user


@pytest.fixture
def team(mock_uow):
    owner = make_user("owner@example.com")
    bob = make_user("bob@example.com")
    carol = make_user("carol@example.com")
    project = make_project(owner.id, "Alpha")
    bob_member = make_member(project, bob)
    carol_member = make_member(project, carol)
    carol_member.created_at = bob_member.created_at + timedelta(seconds=1)
    mock_uow.projects.get_by_id.return_value = project
    return owner, bob, carol, project, bob_member, carol_member


@pytest.mark.asyncio
async def test_list_members_owner_first(mock_uow, team):
    # Arrange
    owner, bob, carol, project, bob_member, carol_member = team
    mock_uow.members.get_by_project_id.return_value = [bob_member, carol_member]
    mock_uow.profiles.get_by_user_ids.return_value = [
        make_profile(owner, "owner"),
        make_profile(bob, "bob"),
    ]

    # Act
    result = await ListMembersUseCase(mock_uow).execute(owner.id, project.id)

    # Assert
    entries = result.value.members
    assert isinstance(entries[0], OwnerEntry)
    assert entries[0].user_id == str(owner.id)
    assert entries[0].username == "owner"
    assert all(isinstance(e, MemberEntry) for e in entries[1:])
    assert [e.email for e in entries[1:]] == ["bob@example.com", "carol@example.com"]
    assert [e.effective_role for e in entries] == ["owner", "member", "member"]
    assert entries[2].username is None


@pytest.mark.asyncio
async def test_transfer_keeps_former_owner_as_member(mock_uow, team):
    # Arrange
    owner, bob, _, project, bob_member, _ = team
    mock_uow.members.get_by_project_and_user.return_value = bob_member
    mock_uow.users.get_by_id.return_value = owner

    # Act
    result = await TransferOwnershipUseCase(mock_uow).execute(owner.id, project.id, bob.id)

    # Assert
    assert result.is_ok()
    assert project.user_id == bob.id
    mock_uow.members.delete.assert_called_once_with(bob_member)
    former = mock_uow.members.create.call_args[0][0]
    assert former.user_id == owner.id
    assert former.email == "owner@example.com"
    assert result.value.previous_owner_role == "member"
    assert result.value.project.role == "member"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_transfer_without_keeping_former_owner(mock_uow, team):
    owner, bob, _, project, bob_member, _ = team
    mock_uow.members.get_by_project_and_user.return_value = bob_member

    result = await TransferOwnershipUseCase(mock_uow).execute(
        owner.id, project.id, bob.id, keep_former_owner=False
    )

    assert result.is_ok()
    assert project.user_id == bob.id
    mock_uow.members.create.assert_not_called()
    assert result.value.previous_owner_role is None
    assert result.value.project is None


@pytest.mark.asyncio
async def test_transfer_to_non_member(mock_uow, team):
    owner, _, _, project, _, _ = team

    result = await TransferOwnershipUseCase(mock_uow).execute(owner.id, project.id, uuid4())

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"
    assert project.user_id == owner.id
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_transfer_by_member_is_rejected(mock_uow, team):
    owner, bob, carol, project, bob_member, _ = team
    mock_uow.members.get_by_project_and_user.return_value = bob_member

    result = await TransferOwnershipUseCase(mock_uow).execute(bob.id, project.id, carol.id)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    assert project.user_id == owner.id


@pytest.mark.asyncio
async def test_member_quits(mock_uow, team):
    _, bob, _, project, bob_member, _ = team
    mock_uow.members.get_by_project_and_user.return_value = bob_member

    result = await QuitProjectUseCase(mock_uow).execute(bob.id, project.id)

    assert result.value.status == "left"
    mock_uow.members.delete.assert_called_once_with(bob_member)


@pytest.mark.asyncio
async def test_quit_without_membership_is_not_an_error(mock_uow, team):
    _, _, _, project, _, _ = team

    result = await QuitProjectUseCase(mock_uow).execute(uuid4(), project.id)

    assert result.is_ok()
    assert result.value.status == "not_a_member"
    mock_uow.members.delete.assert_not_called()


@pytest.mark.asyncio
async def test_owner_cannot_quit(mock_uow, team):
    owner, _, _, project, _, _ = team

    result = await QuitProjectUseCase(mock_uow).execute(owner.id, project.id)

    assert result.is_err()
    assert result.error.code == "OWNER_CANNOT_QUIT"


@pytest.mark.asyncio
async def test_owner_removes_member(mock_uow, team):
    owner, bob, _, project, bob_member, _ = team
    mock_uow.members.get_by_project_and_user.return_value = bob_member

    result = await RemoveMemberUseCase(mock_uow).execute(owner.id, project.id, bob.id)

    assert result.value.status == "removed"
    mock_uow.members.delete.assert_called_once_with(bob_member)


@pytest.mark.asyncio
async def test_remove_missing_member(mock_uow, team):
    owner, _, _, project, _, _ = team

    result = await RemoveMemberUseCase(mock_uow).execute(owner.id, project.id, uuid4())

    assert result.is_err()
    assert result.error.code == "MEMBERSHIP_NOT_FOUND"


@pytest.mark.asyncio
async def test_owner_cannot_remove_self(mock_uow, team):
    owner, _, _, project, _, _ = team

    result = await RemoveMemberUseCase(mock_uow).execute(owner.id, project.id, owner.id)

    assert result.is_err()
    assert result.error.code == "CANNOT_REMOVE_OWNER"
