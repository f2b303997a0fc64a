"""
Profile Use Cases
"""

from .dtos import ProfileInfo, UpdateProfileCommand
from .get_profile_use_case import GetProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase

__all__ = [
    "GetProfileUseCase",
    "UpdateProfileUseCase",
    "ProfileInfo",
    "UpdateProfileCommand",
]
