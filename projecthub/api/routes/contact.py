from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from projecthub.api.error import ClientError
from projecthub.app.services.notification_service import (
    ContactNotice,
    NotificationDispatcher,
)
from projecthub.depends import get_notification_dispatcher
from projecthub.result import Error

router = APIRouter(tags=["Contact"])


class ContactRequest(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    message: str = Field(..., min_length=1, max_length=5000)


class ContactResponse(BaseModel):
    status: str


@router.post("/contact", status_code=status.HTTP_200_OK, response_model=ContactResponse)
async def send_contact_message(
    request: ContactRequest,
    dispatcher: NotificationDispatcher = Depends(get_notification_dispatcher),
):
    """
    Public Contact Form

    Raises:
        - 422 Unprocessable Entity: Missing name, email or message
        - 502 Bad Gateway: EMAIL_DISPATCH_FAILED
    """
    result = await dispatcher.send_contact(
        ContactNotice(
            name=request.name.strip(),
            email=request.email,
            message=request.message.strip(),
        )
    )

    if not result.success:
        raise ClientError(
            Error(
                "EMAIL_DISPATCH_FAILED",
                "Your message could not be sent. Please try again later.",
            ),
            status_code=status.HTTP_502_BAD_GATEWAY,
        )

    return ContactResponse(status="sent")
