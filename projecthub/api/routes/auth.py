from typing import Optional

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from projecthub.api.error import ClientError, ServerError
from projecthub.app.services.unit_of_work import UnitOfWork
from projecthub.app.use_cases.auth import (
    LoginResponse,
    LoginUseCase,
    LogoutResponse,
    LogoutUseCase,
    RefreshTokenResponse,
    RefreshTokenUseCase,
    SignupCommand,
    SignupResponse,
    SignupUseCase,
)
from projecthub.depends import get_unit_of_work

router = APIRouter(prefix="/auth", tags=["Authentication"])


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    Password strength and username format are checked by the use case so
    the caller gets the specific rule that failed.
    """

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., description="Password (10+ chars, mixed case, digit, special)")
    username: str = Field(..., description="Username (3-20 chars)")
    display_name: Optional[str] = Field(None, max_length=255)


@router.post(
    "/signup", status_code=status.HTTP_201_CREATED, response_model=SignupResponse
)
async def signup(request: SignupRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Signup

    Creates the account and its profile, and opens a session.

    Raises:
        - 400 Bad Request: INVALID_EMAIL, WEAK_PASSWORD, INVALID_USERNAME
        - 409 Conflict: EMAIL_ALREADY_EXISTS, USERNAME_TAKEN
        - 422 Unprocessable Entity: Malformed payload
        - 500 Internal Server Error: Server error
    """
    command = SignupCommand(
        email=request.email,
        password=request.password,
        username=request.username,
        display_name=request.display_name,
    )

    use_case = SignupUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_EMAIL", "WEAK_PASSWORD", "INVALID_USERNAME"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code in ("EMAIL_ALREADY_EXISTS", "USERNAME_TAKEN"):
            raise ClientError(error, status_code=status.HTTP_409_CONFLICT)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """
    Login HTTP request payload

    ``login`` is an email address or a username.
    """

    login: str = Field(..., min_length=1, description="Email address or username")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.login, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


class RefreshRequest(BaseModel):
    """Refresh token HTTP request payload"""

    refresh_token: str = Field(..., description="Refresh token")


@router.post("/refresh", status_code=status.HTTP_200_OK, response_model=RefreshTokenResponse)
async def refresh(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Refresh JWT Token

    Rotates the refresh token and issues a new access token.

    Raises:
        - 401 Unauthorized: INVALID_TOKEN, SESSION_REVOKED, SESSION_EXPIRED
        - 500 Internal Server Error: Server error
    """
    use_case = RefreshTokenUseCase(uow)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "SESSION_REVOKED", "SESSION_EXPIRED"):
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value


@router.post("/logout", status_code=status.HTTP_200_OK, response_model=LogoutResponse)
async def logout(request: RefreshRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Sign Out

    Revokes the session behind the refresh token.

    Raises:
        - 401 Unauthorized: INVALID_TOKEN
        - 500 Internal Server Error: Server error
    """
    use_case = LogoutUseCase(uow)
    result = await use_case.execute(request.refresh_token)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_TOKEN":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        raise ServerError(error)

    return result.value
