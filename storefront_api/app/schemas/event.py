"""
Pydantic models for event data.

Events own the content‑scheduling data (team members, social accounts,
posts and calendar entries) by foreign key only.  ``EventBase``
contains shared fields; ``EventCreate`` is the request shape,
``EventRead`` adds the store‑assigned ``id`` and ``createdAt`` and
``EventUpdate`` is the partial‑update shape.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from .base import CamelModel


class EventBase(CamelModel):
    name: str = Field(..., min_length=1, examples=["Tech Summit 2025"])
    description: Optional[str] = Field(None, examples=["Annual developer conference"])
    organizer_id: int = Field(..., examples=[1])
    start_date: datetime = Field(..., examples=["2025-09-01T10:00:00Z"])
    end_date: datetime = Field(..., examples=["2025-09-03T18:00:00Z"])
    location: Optional[str] = Field(None, examples=["Berlin"])
    image_url: Optional[str] = Field(None, examples=["https://images.example.com/summit.jpg"])


class EventCreate(EventBase):
    """Schema for creating an event."""
    pass


class EventRead(EventBase):
    """Schema for reading an event from the API."""

    id: int
    created_at: datetime


class EventUpdate(CamelModel):
    """Schema for updating an event.

    All fields are optional; only provided fields will be updated.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    organizer_id: Optional[int] = None
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    location: Optional[str] = None
    image_url: Optional[str] = None
