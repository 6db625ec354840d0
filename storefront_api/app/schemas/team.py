"""Pydantic models for event team members."""

from datetime import datetime
from typing import List, Optional

from pydantic import Field

from .base import CamelModel


class TeamMemberBase(CamelModel):
    user_id: int = Field(..., examples=[2])
    event_id: int = Field(..., examples=[1])
    role: str = Field(..., min_length=1, examples=["editor"])
    permissions: Optional[List[str]] = Field(None, examples=[["create_posts", "approve_posts"]])


class TeamMemberCreate(TeamMemberBase):
    """Schema for adding a user to an event team.

    The same user may be added to the same event more than once.
    """
    pass


class TeamMemberUpdate(CamelModel):
    user_id: Optional[int] = None
    event_id: Optional[int] = None
    role: Optional[str] = None
    permissions: Optional[List[str]] = None


class TeamMemberRead(TeamMemberBase):
    id: int
    created_at: datetime
