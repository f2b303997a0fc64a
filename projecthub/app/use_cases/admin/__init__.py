"""
Admin Use Cases

System administration operations (API key protected).
"""

from .purge_expired_invitations_use_case import (
    PurgeExpiredInvitationsResponse,
    PurgeExpiredInvitationsUseCase,
)

__all__ = [
    "PurgeExpiredInvitationsUseCase",
    "PurgeExpiredInvitationsResponse",
]
