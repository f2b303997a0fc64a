import pytest

from projecthub.app.use_cases.admin import PurgeExpiredInvitationsUseCase


@pytest.mark.asyncio
async def test_purge_reports_count(mock_uow):
    mock_uow.invitations.delete_expired.return_value = 4

    result = await PurgeExpiredInvitationsUseCase(mock_uow).execute()

    assert result.is_ok()
    assert result.value.invitations_purged == 4
    assert result.value.status == "purged"
    mock_uow.invitations.delete_expired.assert_called_once()
    mock_uow.commit.assert_called_once()
