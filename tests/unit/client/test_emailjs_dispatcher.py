import json
import logging

import httpx
import pytest

from projecthub.adapter.services.emailjs_dispatcher import EmailJSDispatcher
from projecthub.adapter.services.logging_dispatcher import LoggingDispatcher
from projecthub.app.services.notification_service import ContactNotice, InvitationNotice

NOTICE = InvitationNotice(
    email="bob@example.com",
    project_name="Alpha",
    inviter_label="alice",
    invitation_token="tok123",
)


def dispatcher(handler, private_key=None):
    return EmailJSDispatcher(
        service_id="svc",
        invitation_template_id="tpl_invite",
        contact_template_id="tpl_contact",
        public_key="pub",
        private_key=private_key,
        app_base_url="https://app.example.com/",
        api_url="https://emailjs.test/send",
        transport=httpx.MockTransport(handler),
    )


@pytest.mark.asyncio
async def test_invitation_payload():
    # Arrange
    captured = {}

    def handler(request):
        captured["url"] = str(request.url)
        captured["payload"] = json.loads(request.content)
        return httpx.Response(200, text="OK")

    # Act
    result = await dispatcher(handler, private_key="secret").send_invitation(NOTICE)

    # Assert
    assert result.success is True
    assert captured["url"] == "https://emailjs.test/send"
    payload = captured["payload"]
    assert payload["service_id"] == "svc"
    assert payload["template_id"] == "tpl_invite"
    assert payload["user_id"] == "pub"
    assert payload["accessToken"] == "secret"
    assert payload["template_params"] == {
        "to_email": "bob@example.com",
        "project_name": "Alpha",
        "inviter_name": "alice",
        "invitation_link": "https://app.example.com/accept-invitation?token=tok123",
        "to_name": "bob",
    }


@pytest.mark.asyncio
async def test_contact_payload_without_private_key():
    captured = {}

    def handler(request):
        captured["payload"] = json.loads(request.content)
        return httpx.Response(200, text="OK")

    result = await dispatcher(handler).send_contact(
        ContactNotice(name="Carol", email="carol@example.com", message="Hi")
    )

    assert result.success is True
    assert "accessToken" not in captured["payload"]
    assert captured["payload"]["template_id"] == "tpl_contact"
    assert captured["payload"]["template_params"] == {
        "from_name": "Carol",
        "from_email": "carol@example.com",
        "message": "Hi",
    }


@pytest.mark.asyncio
async def test_rejected_send_is_reported_not_raised():
    result = await dispatcher(
        lambda request: httpx.Response(400, text="The template ID is invalid")
    ).send_invitation(NOTICE)

    assert result.success is False
    assert "template ID is invalid" in result.error


@pytest.mark.asyncio
async def test_network_error_is_reported_not_raised():
    def handler(request):
        raise httpx.ConnectTimeout("timed out", request=request)

    result = await dispatcher(handler).send_invitation(NOTICE)

    assert result.success is False
    assert result.error


@pytest.mark.asyncio
async def test_logging_dispatcher_keeps_nothing_and_hides_token(caplog):
    logging_dispatcher = LoggingDispatcher(app_base_url="http://localhost:5173")

    with caplog.at_level(logging.INFO):
        for _ in range(3):
            result = await logging_dispatcher.send_invitation(NOTICE)

    assert result.success is True
    assert result.response is None
    assert not hasattr(logging_dispatcher, "sent")
    assert "bob@example.com" in caplog.text
    assert "tok123" not in caplog.text
