"""
Membership Use Case DTOs

Member listings are a tagged variant: the owner is derived from the
project row, members come from membership rows.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from projecthub.app.use_cases.projects.dtos import ProjectInfo


class OwnerEntry(BaseModel):
    kind: Literal["owner"] = "owner"
    user_id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    effective_role: Literal["owner"] = "owner"


class MemberEntry(BaseModel):
    kind: Literal["member"] = "member"
    id: str
    user_id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None
    invited_by: Optional[str] = None
    joined_at: str
    created_at: str
    effective_role: Literal["member"] = "member"


MemberListEntry = Annotated[Union[OwnerEntry, MemberEntry], Field(discriminator="kind")]


class MemberListResponse(BaseModel):
    """Owner first, then members by join order"""

    members: List[MemberListEntry]


class TransferOwnershipResponse(BaseModel):
    project_id: str
    previous_owner_id: str
    new_owner_id: str
    previous_owner_role: Optional[str] = None
    # Present when the previous owner keeps access
    project: Optional[ProjectInfo] = None


class QuitProjectResponse(BaseModel):
    project_id: str
    status: str


class RemoveMemberResponse(BaseModel):
    project_id: str
    user_id: str
    status: str
