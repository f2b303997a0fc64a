import pytest
from httpx import AsyncClient

from tests.fixtures.api_helpers import bearer, sign_up


@pytest.mark.asyncio
async def test_update_profile_fields(client: AsyncClient):
    # Arrange
    account = await sign_up(client, "alice@example.com", "alice")

    # Act
    response = await client.patch(
        "/profile",
        json={
            "display_name": "  Alice  ",
            "bio": "   ",
            "theme_preference": "dark",
            "notification_preferences": {"push_notifications": False},
        },
        headers=bearer(account["token"]),
    )

    # Assert
    assert response.status_code == 200
    data = response.json()
    assert data["display_name"] == "Alice"
    assert data["bio"] is None
    assert data["theme_preference"] == "dark"
    assert data["notification_preferences"] == {
        "email_notifications": True,
        "push_notifications": False,
        "project_updates": True,
    }


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "payload,status_code,code",
    [
        ({"theme_preference": "neon"}, 400, "VALIDATION_ERROR"),
        ({"notification_preferences": {"sms": True}}, 400, "VALIDATION_ERROR"),
        ({"username": "x"}, 400, "INVALID_USERNAME"),
        ({"username": "alice_new"}, 409, "USERNAME_IMMUTABLE"),
    ],
)
async def test_update_profile_rejections(client: AsyncClient, payload, status_code, code):
    account = await sign_up(client, "alice@example.com", "alice")

    response = await client.patch("/profile", json=payload, headers=bearer(account["token"]))

    assert response.status_code == status_code
    assert response.json()["error"]["code"] == code


@pytest.mark.asyncio
async def test_resubmitting_same_username_is_accepted(client: AsyncClient):
    account = await sign_up(client, "alice@example.com", "alice")

    response = await client.patch(
        "/profile", json={"username": "ALICE"}, headers=bearer(account["token"])
    )

    assert response.status_code == 200
    assert response.json()["username"] == "alice"
