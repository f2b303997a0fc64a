"""
Client-side error taxonomy.

Every failure surfaced by the client is a ProjectHubError carrying the
server's error code and a short human-readable message.
"""

from typing import Optional


class ProjectHubError(Exception):
    def __init__(self, code: str, message: str, status_code: Optional[int] = None):
        self.code = code
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class ValidationError(ProjectHubError):
    """Empty required field, malformed username, weak password, ..."""


class NotFoundError(ProjectHubError):
    """Username lookup miss, missing project, invitation or membership"""


class SelfInviteError(ValidationError):
    pass


class DuplicatePendingInvitationError(ProjectHubError):
    pass


class AuthenticationRequiredError(ProjectHubError):
    """No resolved identity, or the backend rejected the credentials"""


class PermissionDeniedError(ProjectHubError):
    pass


class ConflictError(ProjectHubError):
    pass


class RemoteFailure(ProjectHubError):
    """Network or backend failure with no finer classification"""


_BY_CODE = {
    "SELF_INVITE": SelfInviteError,
    "INVITE_ALREADY_EXISTS": DuplicatePendingInvitationError,
    "AUTHENTICATION_REQUIRED": AuthenticationRequiredError,
}

_BY_STATUS = {
    400: ValidationError,
    401: AuthenticationRequiredError,
    403: PermissionDeniedError,
    404: NotFoundError,
    409: ConflictError,
    410: ConflictError,
    422: ValidationError,
}


def error_from_response(status_code: int, body) -> ProjectHubError:
    """Build the typed error for a non-2xx response body"""
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        code = error.get("code") or "UNKNOWN"
        message = error.get("message") or "Request failed"
    else:
        code = "UNKNOWN"
        message = f"Request failed with status {status_code}"

    error_cls = _BY_CODE.get(code) or _BY_STATUS.get(status_code, RemoteFailure)
    return error_cls(code, message, status_code)
