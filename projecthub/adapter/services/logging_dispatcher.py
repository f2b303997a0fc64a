import logging

from projecthub.app.services.notification_service import (
    ContactNotice,
    DispatchResult,
    InvitationNotice,
    NotificationDispatcher,
)

logger = logging.getLogger(__name__)


class LoggingDispatcher(NotificationDispatcher):
    """
    Development backend: logs that an email would have gone out.

    Nothing is kept between calls and the invitation token never reaches
    the log.
    """

    def __init__(self, app_base_url: str):
        self.app_base_url = app_base_url

    async def send_invitation(self, notice: InvitationNotice) -> DispatchResult:
        logger.info(
            f"Invitation email to {notice.email} for project '{notice.project_name}' "
            "(EMAIL_BACKEND=log, not sent)"
        )
        return DispatchResult(success=True)

    async def send_contact(self, notice: ContactNotice) -> DispatchResult:
        logger.info(f"Contact message from {notice.email} (EMAIL_BACKEND=log, not sent)")
        return DispatchResult(success=True)
