"""
Authentication Use Cases

Signup, login, token refresh, sign-out and identity loading.
"""

from .dtos import (
    IdentityInfo,
    LoginResponse,
    LogoutResponse,
    RefreshTokenResponse,
    SignupCommand,
    SignupResponse,
)
from .load_identity_use_case import LoadIdentityUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    # Use Cases
    "SignupUseCase",
    "LoginUseCase",
    "RefreshTokenUseCase",
    "LogoutUseCase",
    "LoadIdentityUseCase",
    # DTOs
    "SignupCommand",
    "SignupResponse",
    "LoginResponse",
    "RefreshTokenResponse",
    "LogoutResponse",
    "IdentityInfo",
]
