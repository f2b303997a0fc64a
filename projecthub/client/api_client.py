"""
Async HTTP client for the ProjectHub API.

Holds the current token pair and maps every failure to the client error
taxonomy. Network errors become RemoteFailure.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from .errors import AuthenticationRequiredError, RemoteFailure, error_from_response
from .models import Identity, Invitation, InvitationOutcome, Project

logger = logging.getLogger(__name__)


class ProjectHubClient:
    def __init__(
        self,
        base_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self._http = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )
        self.access_token: Optional[str] = None
        self.refresh_token: Optional[str] = None

    @property
    def authenticated(self) -> bool:
        return self.access_token is not None

    async def aclose(self):
        await self._http.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, *args):
        await self.aclose()

    def set_tokens(self, access_token: Optional[str], refresh_token: Optional[str]):
        self.access_token = access_token
        self.refresh_token = refresh_token

    async def _request(
        self,
        method: str,
        path: str,
        json: Optional[Dict[str, Any]] = None,
        auth: bool = True,
    ) -> Any:
        headers = {}
        if auth:
            if not self.access_token:
                raise AuthenticationRequiredError(
                    "AUTHENTICATION_REQUIRED", "Sign in to continue"
                )
            headers["Authorization"] = f"Bearer {self.access_token}"

        try:
            resp = await self._http.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"{method} {path} failed: {e}")
            raise RemoteFailure(
                "NETWORK_ERROR", "Could not reach the server. Please try again."
            ) from e

        if resp.is_success:
            return resp.json() if resp.content else None

        try:
            body = resp.json()
        except ValueError:
            body = None
        error = error_from_response(resp.status_code, body)
        logger.warning(f"{method} {path} -> {resp.status_code} {error.code}")
        raise error

    # ------------------------------------------------------------------
    # Session
    # ------------------------------------------------------------------

    def _store_session(self, data: dict) -> Optional[Identity]:
        self.set_tokens(data["access_token"], data["refresh_token"])
        user = data.get("user")
        return Identity(**user) if user else None

    async def sign_up(
        self,
        email: str,
        password: str,
        username: str,
        display_name: Optional[str] = None,
    ) -> Identity:
        data = await self._request(
            "POST",
            "/auth/signup",
            json={
                "email": email,
                "password": password,
                "username": username,
                "display_name": display_name,
            },
            auth=False,
        )
        return self._store_session(data)

    async def sign_in(self, login: str, password: str) -> Identity:
        data = await self._request(
            "POST", "/auth/login", json={"login": login, "password": password}, auth=False
        )
        return self._store_session(data)

    async def refresh(self):
        if not self.refresh_token:
            raise AuthenticationRequiredError(
                "AUTHENTICATION_REQUIRED", "Sign in to continue"
            )
        data = await self._request(
            "POST",
            "/auth/refresh",
            json={"refresh_token": self.refresh_token},
            auth=False,
        )
        self._store_session(data)

    async def sign_out(self):
        refresh_token = self.refresh_token
        self.set_tokens(None, None)
        if refresh_token:
            await self._request(
                "POST", "/auth/logout", json={"refresh_token": refresh_token}, auth=False
            )

    async def me(self) -> Identity:
        return Identity(**await self._request("GET", "/me"))

    async def get_profile(self) -> dict:
        return await self._request("GET", "/profile")

    async def update_profile(self, **fields) -> dict:
        return await self._request("PATCH", "/profile", json=fields)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    async def list_projects(self) -> List[Project]:
        data = await self._request("GET", "/projects")
        return [Project(**p) for p in data["projects"]]

    async def get_project(self, project_id: str) -> Project:
        return Project(**await self._request("GET", f"/projects/{project_id}"))

    async def create_project(
        self, name: str, description: Optional[str] = None, tags: Optional[List[str]] = None
    ) -> Project:
        data = await self._request(
            "POST",
            "/projects",
            json={"name": name, "description": description, "tags": tags or []},
        )
        return Project(**data)

    async def update_project(self, project_id: str, **fields) -> Project:
        return Project(
            **await self._request("PATCH", f"/projects/{project_id}", json=fields)
        )

    async def delete_project(self, project_id: str) -> dict:
        return await self._request("DELETE", f"/projects/{project_id}")

    # ------------------------------------------------------------------
    # Membership
    # ------------------------------------------------------------------

    async def list_members(self, project_id: str) -> List[dict]:
        data = await self._request("GET", f"/projects/{project_id}/members")
        return data["members"]

    async def quit_project(self, project_id: str) -> dict:
        return await self._request("DELETE", f"/projects/{project_id}/members/me")

    async def remove_member(self, project_id: str, user_id: str) -> dict:
        return await self._request(
            "DELETE", f"/projects/{project_id}/members/{user_id}"
        )

    async def transfer_ownership(self, project_id: str, new_owner_id: str) -> dict:
        return await self._request(
            "POST",
            f"/projects/{project_id}/transfer-ownership",
            json={"new_owner_id": new_owner_id},
        )

    # ------------------------------------------------------------------
    # Invitations
    # ------------------------------------------------------------------

    async def create_invitation(self, project_id: str, target: str) -> InvitationOutcome:
        data = await self._request(
            "POST", f"/projects/{project_id}/invitations", json={"target": target}
        )
        return InvitationOutcome(**data)

    async def list_project_invitations(self, project_id: str) -> List[Invitation]:
        data = await self._request("GET", f"/projects/{project_id}/invitations")
        return [Invitation(**i) for i in data["invitations"]]

    async def list_my_invitations(self) -> List[Invitation]:
        data = await self._request("GET", "/invitations")
        return [Invitation(**i) for i in data["invitations"]]

    async def accept_invitation(self, invitation_id: str) -> dict:
        return await self._request("POST", f"/invitations/{invitation_id}/accept")

    async def accept_invitation_by_token(self, token: str) -> dict:
        return await self._request("POST", "/invitations/accept", json={"token": token})

    async def delete_invitation(self, invitation_id: str) -> dict:
        return await self._request("DELETE", f"/invitations/{invitation_id}")

    # ------------------------------------------------------------------
    # Contact
    # ------------------------------------------------------------------

    async def send_contact(self, name: str, email: str, message: str) -> dict:
        return await self._request(
            "POST",
            "/contact",
            json={"name": name, "email": email, "message": message},
            auth=False,
        )
