from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from projecthub.adapter.services.emailjs_dispatcher import EmailJSDispatcher
from projecthub.adapter.services.logging_dispatcher import LoggingDispatcher
from projecthub.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from projecthub.api.error import ClientError
from projecthub.api.utils.jwt import verify_jwt
from projecthub.app.services.notification_service import NotificationDispatcher
from projecthub.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def init_models():
    """Create missing tables"""
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def build_notification_dispatcher() -> NotificationDispatcher:
    """Dispatcher selected by EMAIL_BACKEND ("emailjs" or "log")"""
    if ApplicationConfig.EMAIL_BACKEND == "emailjs":
        return EmailJSDispatcher(
            service_id=ApplicationConfig.EMAILJS_SERVICE_ID,
            invitation_template_id=ApplicationConfig.EMAILJS_INVITATION_TEMPLATE_ID,
            contact_template_id=ApplicationConfig.EMAILJS_CONTACT_TEMPLATE_ID,
            public_key=ApplicationConfig.EMAILJS_PUBLIC_KEY,
            private_key=ApplicationConfig.EMAILJS_PRIVATE_KEY,
            app_base_url=ApplicationConfig.APP_BASE_URL,
            api_url=ApplicationConfig.EMAILJS_API_URL,
        )
    return LoggingDispatcher(app_base_url=ApplicationConfig.APP_BASE_URL)


notification_dispatcher = build_notification_dispatcher()


async def get_notification_dispatcher() -> NotificationDispatcher:
    return notification_dispatcher


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and email

    Raises:
        ClientError: 401 if the token is missing, invalid or expired
    """
    if credentials is None:
        raise ClientError(
            Error("AUTHENTICATION_REQUIRED", "Sign in to continue"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    payload = verify_jwt(credentials.credentials)

    if payload is None or "user_id" not in payload:
        raise ClientError(
            Error("INVALID_TOKEN", "Invalid or expired token"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    return payload
