import pytest

from projecthub.app.use_cases.profiles import (
    GetProfileUseCase,
    UpdateProfileCommand,
    UpdateProfileUseCase,
)
from tests.fixtures.factories import make_profile, make_user


@pytest.mark.asyncio
async def test_get_profile_defaults(mock_uow):
    user = make_user()
    mock_uow.profiles.get_by_user_id.return_value = make_profile(user, "alice")

    result = await GetProfileUseCase(mock_uow).execute(user.id)

    assert result.is_ok()
    assert result.value.theme_preference == "system"
    assert result.value.language_preference == "en"
    assert result.value.notification_preferences == {
        "email_notifications": True,
        "push_notifications": True,
        "project_updates": True,
    }


@pytest.mark.asyncio
async def test_update_profile_sets_username_once(mock_uow):
    # Arrange
    user = make_user()
    profile = make_profile(user)
    mock_uow.profiles.get_by_user_id.return_value = profile
    use_case = UpdateProfileUseCase(mock_uow)

    # Act
    result = await use_case.execute(
        user.id,
        UpdateProfileCommand(
            username="Alice",
            bio="  hello  ",
            location="   ",
            theme_preference="dark",
            notification_preferences={"push_notifications": False},
        ),
    )

    # Assert
    assert result.is_ok()
    assert profile.username == "alice"
    assert profile.bio == "hello"
    assert profile.location is None
    assert result.value.theme_preference == "dark"
    assert result.value.notification_preferences["push_notifications"] is False
    assert result.value.notification_preferences["email_notifications"] is True
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_update_profile_cannot_change_username(mock_uow):
    user = make_user()
    mock_uow.profiles.get_by_user_id.return_value = make_profile(user, "alice")

    result = await UpdateProfileUseCase(mock_uow).execute(
        user.id, UpdateProfileCommand(username="alice2")
    )

    assert result.is_err()
    assert result.error.code == "USERNAME_IMMUTABLE"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_profile_username_taken(mock_uow):
    user = make_user()
    other = make_user("bob@example.com")
    mock_uow.profiles.get_by_user_id.return_value = make_profile(user)
    mock_uow.profiles.get_by_username.return_value = make_profile(other, "bob")

    result = await UpdateProfileUseCase(mock_uow).execute(
        user.id, UpdateProfileCommand(username="Bob")
    )

    assert result.is_err()
    assert result.error.code == "USERNAME_TAKEN"


@pytest.mark.asyncio
async def test_update_profile_rejects_unknown_theme(mock_uow):
    user = make_user()

    result = await UpdateProfileUseCase(mock_uow).execute(
        user.id, UpdateProfileCommand(theme_preference="neon")
    )

    assert result.is_err()
    assert result.error.code == "VALIDATION_ERROR"
    mock_uow.profiles.get_by_user_id.assert_not_called()
