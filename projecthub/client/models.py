"""Client-side views of backend resources."""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field


class Identity(BaseModel):
    id: str
    email: str
    username: Optional[str] = None
    display_name: Optional[str] = None


class Project(BaseModel):
    id: str
    user_id: str
    name: str
    description: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    role: str = "owner"
    created_at: datetime
    updated_at: datetime


class Invitation(BaseModel):
    id: str
    project_id: str
    email: str
    role: str
    status: str
    invited_by: str
    inviter_email: Optional[str] = None
    created_at: datetime
    expires_at: datetime
    accepted_at: Optional[datetime] = None
    project_name: Optional[str] = None


class InvitationOutcome(BaseModel):
    """Result of inviting someone; email_sent=False is a degraded success"""

    invitation: Invitation
    email_sent: bool
    message: str
