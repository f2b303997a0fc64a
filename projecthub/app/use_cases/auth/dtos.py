"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from pydantic import BaseModel


# ============================================================================
# Commands
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    """

    email: str
    password: str
    username: str
    display_name: Optional[str] = None


# ============================================================================
# Response DTOs
# ============================================================================


class IdentityInfo(BaseModel):
    """The authenticated identity"""

    id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None


class SignupResponse(BaseModel):
    """Response for signup use case"""

    user: IdentityInfo
    access_token: str
    refresh_token: str
    session_id: str


class LoginResponse(BaseModel):
    """Response for user login use case"""

    user: IdentityInfo
    access_token: str
    refresh_token: str
    session_id: str


class RefreshTokenResponse(BaseModel):
    """Response for refresh token use case"""

    access_token: str
    refresh_token: str
    session_id: str


class LogoutResponse(BaseModel):
    """Response for logout use case"""

    status: str
