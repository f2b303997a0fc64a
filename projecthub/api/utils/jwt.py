from datetime import UTC, datetime, timedelta
from typing import Optional
from uuid import UUID

from jose import JWTError, jwt

from config import ApplicationConfig


def generate_jwt(user_id: UUID, email: str) -> str:
    """
    Generate JWT access token

    Args:
        user_id: User UUID
        email: User email (used for invitation matching)

    Returns:
        JWT token string (HS256, ACCESS_TOKEN_MINUTES expiry)
    """
    return create_access_token(
        user_id=str(user_id),
        email=email,
        expires_delta=timedelta(minutes=ApplicationConfig.ACCESS_TOKEN_MINUTES),
    )


def create_access_token(user_id: str, email: str, expires_delta: timedelta) -> str:
    """
    Create JWT access token with custom expiry

    Args:
        user_id: User UUID as string
        email: User email
        expires_delta: Token expiration duration

    Returns:
        JWT token string (HS256)
    """
    now = datetime.now(UTC)
    payload = {
        "user_id": user_id,
        "email": email,
        "exp": now + expires_delta,
        "iat": now,
    }
    return jwt.encode(payload, ApplicationConfig.JWT_SECRET, algorithm="HS256")


def verify_jwt(token: str) -> Optional[dict]:
    """
    Verify and decode JWT token

    Args:
        token: JWT token string

    Returns:
        Decoded payload dict or None if invalid
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.JWT_SECRET, algorithms=["HS256"]
        )
        return payload
    except JWTError:
        return None
