"""EmailJS REST API dispatcher for invitation and contact-form email."""

import logging
from typing import Optional

import httpx

from projecthub.app.services.notification_service import (
    ContactNotice,
    DispatchResult,
    InvitationNotice,
    NotificationDispatcher,
)

logger = logging.getLogger(__name__)

EMAILJS_API_URL = "https://api.emailjs.com/api/v1.0/email/send"


def build_invitation_link(app_base_url: str, token: str) -> str:
    return f"{app_base_url.rstrip('/')}/accept-invitation?token={token}"


def invitation_template_params(notice: InvitationNotice, app_base_url: str) -> dict:
    return {
        "to_email": notice.email,
        "project_name": notice.project_name,
        "inviter_name": notice.inviter_label,
        "invitation_link": build_invitation_link(app_base_url, notice.invitation_token),
        "to_name": notice.email.split("@")[0],
    }


def contact_template_params(notice: ContactNotice) -> dict:
    return {
        "from_name": notice.name,
        "from_email": notice.email,
        "message": notice.message,
    }


class EmailJSDispatcher(NotificationDispatcher):
    """Sends templated email through the EmailJS REST API."""

    def __init__(
        self,
        service_id: str,
        invitation_template_id: str,
        contact_template_id: str,
        public_key: str,
        app_base_url: str,
        private_key: Optional[str] = None,
        api_url: str = EMAILJS_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.service_id = service_id
        self.invitation_template_id = invitation_template_id
        self.contact_template_id = contact_template_id
        self.public_key = public_key
        self.private_key = private_key
        self.app_base_url = app_base_url
        self.api_url = api_url
        self.timeout = timeout
        self._transport = transport

    async def send_invitation(self, notice: InvitationNotice) -> DispatchResult:
        params = invitation_template_params(notice, self.app_base_url)
        return await self._send(self.invitation_template_id, params)

    async def send_contact(self, notice: ContactNotice) -> DispatchResult:
        return await self._send(self.contact_template_id, contact_template_params(notice))

    async def _send(self, template_id: str, template_params: dict) -> DispatchResult:
        payload = {
            "service_id": self.service_id,
            "template_id": template_id,
            "user_id": self.public_key,
            "template_params": template_params,
        }
        if self.private_key:
            payload["accessToken"] = self.private_key

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout, transport=self._transport
            ) as client:
                resp = await client.post(self.api_url, json=payload)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = e.response.text or str(e)
            logger.error(
                f"EmailJS rejected template {template_id}: "
                f"{e.response.status_code} {detail}"
            )
            return DispatchResult(success=False, error=detail)
        except Exception as e:
            logger.error(f"Failed to send email with template {template_id}: {e}")
            return DispatchResult(success=False, error=str(e) or type(e).__name__)

        logger.info(f"Email sent with template {template_id}")
        return DispatchResult(success=True, response=resp.text)
