import pytest

from projecthub.app.use_cases.invitations import DeleteInvitationUseCase
from tests.fixtures.factories import make_invitation, make_project, make_user


@pytest.fixture
def invite(mock_uow):
    owner = make_user("owner@example.com")
    project = make_project(owner.id)
    invitation = make_invitation(project, "bob@example.com", owner.id)
    mock_uow.invitations.get_by_id.return_value = invitation
    mock_uow.projects.get_by_id.return_value = project
    return owner, project, invitation


@pytest.mark.asyncio
async def test_invitee_declines(mock_uow, invite):
    _, _, invitation = invite
    bob = make_user("BOB@example.com")
    mock_uow.users.get_by_id.return_value = bob

    result = await DeleteInvitationUseCase(mock_uow).execute(bob.id, invitation.id)

    assert result.is_ok()
    assert result.value.status == "declined"
    mock_uow.invitations.delete.assert_called_once_with(invitation)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_owner_cancels(mock_uow, invite):
    owner, _, invitation = invite
    mock_uow.users.get_by_id.return_value = owner

    result = await DeleteInvitationUseCase(mock_uow).execute(owner.id, invitation.id)

    assert result.is_ok()
    assert result.value.status == "cancelled"


@pytest.mark.asyncio
async def test_stranger_cannot_delete(mock_uow, invite):
    _, _, invitation = invite
    carol = make_user("carol@example.com")
    mock_uow.users.get_by_id.return_value = carol

    result = await DeleteInvitationUseCase(mock_uow).execute(carol.id, invitation.id)

    assert result.is_err()
    assert result.error.code == "INSUFFICIENT_ROLE"
    mock_uow.invitations.delete.assert_not_called()


@pytest.mark.asyncio
async def test_accepted_invitation_is_kept(mock_uow, invite):
    owner, _, invitation = invite
    invitation.accepted_at = invitation.created_at
    mock_uow.users.get_by_id.return_value = owner

    result = await DeleteInvitationUseCase(mock_uow).execute(owner.id, invitation.id)

    assert result.is_err()
    assert result.error.code == "INVITATION_ALREADY_ACCEPTED"
