"""
Membership Use Cases

List members, transfer ownership, quit and remove members.
"""

from .dtos import (
    MemberEntry,
    MemberListResponse,
    OwnerEntry,
    QuitProjectResponse,
    RemoveMemberResponse,
    TransferOwnershipResponse,
)
from .list_members_use_case import ListMembersUseCase
from .quit_project_use_case import QuitProjectUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .transfer_ownership_use_case import TransferOwnershipUseCase

__all__ = [
    "ListMembersUseCase",
    "TransferOwnershipUseCase",
    "QuitProjectUseCase",
    "RemoveMemberUseCase",
    "OwnerEntry",
    "MemberEntry",
    "MemberListResponse",
    "TransferOwnershipResponse",
    "QuitProjectResponse",
    "RemoveMemberResponse",
]
