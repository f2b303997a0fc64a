"""Request helpers shared by integration tests"""

from httpx import AsyncClient

PASSWORD = "SecurePass123!"


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


async def sign_up(client: AsyncClient, email: str, username: str) -> dict:
    """Create an account and return {"id", "token", "refresh_token"}"""
    response = await client.post(
        "/auth/signup",
        json={"email": email, "password": PASSWORD, "username": username},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return {
        "id": data["user"]["id"],
        "token": data["access_token"],
        "refresh_token": data["refresh_token"],
    }


async def create_project(client: AsyncClient, token: str, name: str, tags=None) -> dict:
    response = await client.post(
        "/projects",
        json={"name": name, "tags": tags or []},
        headers=bearer(token),
    )
    assert response.status_code == 201, response.text
    return response.json()


async def invite(client: AsyncClient, token: str, project_id: str, target: str):
    return await client.post(
        f"/projects/{project_id}/invitations",
        json={"target": target},
        headers=bearer(token),
    )
