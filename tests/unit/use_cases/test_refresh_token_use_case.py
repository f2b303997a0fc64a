from datetime import timedelta

import pytest

from projecthub.app.use_cases.auth import LogoutUseCase, RefreshTokenUseCase
from projecthub.app.use_cases.auth.tokens import (
    format_refresh_token,
    new_refresh_secret,
    parse_refresh_token,
    secret_matches,
)
from projecthub.domain.base import utcnow
from projecthub.domain.entities import AuthSession
from tests.fixtures.factories import make_user


def _session(user, expires_in=timedelta(days=30), revoked=False):
    secret, secret_hash = new_refresh_secret()
    session = AuthSession(
        user_id=user.id,
        refresh_token_hash=secret_hash,
        expires_at=utcnow() + expires_in,
        revoked=revoked,
    )
    return session, format_refresh_token(session.id, secret)


def test_parse_refresh_token_rejects_garbage():
    assert parse_refresh_token("not-a-token") is None
    assert parse_refresh_token("not-a-uuid.secret") is None


@pytest.mark.asyncio
async def test_refresh_rotates_secret(mock_uow):
    # Arrange
    user = make_user()
    session, token = _session(user)
    old_hash = session.refresh_token_hash
    mock_uow.auth_sessions.get_by_id.return_value = session
    mock_uow.users.get_by_id.return_value = user
    use_case = RefreshTokenUseCase(mock_uow)

    # Act
    result = await use_case.execute(token)

    # Assert
    assert result.is_ok()
    assert result.value.refresh_token != token
    assert session.refresh_token_hash != old_hash
    _, new_secret = parse_refresh_token(result.value.refresh_token)
    assert secret_matches(new_secret, session.refresh_token_hash)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_refresh_with_wrong_secret(mock_uow):
    user = make_user()
    session, _ = _session(user)
    mock_uow.auth_sessions.get_by_id.return_value = session

    result = await RefreshTokenUseCase(mock_uow).execute(f"{session.id}.forged")

    assert result.is_err()
    assert result.error.code == "INVALID_TOKEN"


@pytest.mark.asyncio
async def test_refresh_revoked_session(mock_uow):
    user = make_user()
    session, token = _session(user, revoked=True)
    mock_uow.auth_sessions.get_by_id.return_value = session

    result = await RefreshTokenUseCase(mock_uow).execute(token)

    assert result.is_err()
    assert result.error.code == "SESSION_REVOKED"


@pytest.mark.asyncio
async def test_refresh_expired_session(mock_uow):
    user = make_user()
    session, token = _session(user, expires_in=timedelta(seconds=-1))
    mock_uow.auth_sessions.get_by_id.return_value = session

    result = await RefreshTokenUseCase(mock_uow).execute(token)

    assert result.is_err()
    assert result.error.code == "SESSION_EXPIRED"


@pytest.mark.asyncio
async def test_logout_revokes_session(mock_uow):
    # Arrange
    user = make_user()
    session, token = _session(user)
    mock_uow.auth_sessions.get_by_id.return_value = session

    # Act
    result = await LogoutUseCase(mock_uow).execute(token)

    # Assert
    assert result.is_ok()
    assert session.revoked is True
    assert session.revoked_at is not None
    mock_uow.commit.assert_called_once()
