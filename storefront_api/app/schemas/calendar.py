"""
Pydantic models for content calendar entries.

``date`` is a plain calendar date without time‑zone semantics; the
optional ``time`` is kept as free text (``"09:30"``) exactly as the
planner UI sends it.
"""

import datetime as dt
from typing import Literal, Optional

from pydantic import Field

from .base import CamelModel


EntryType = Literal["post", "milestone", "reminder"]


class CalendarEntryBase(CamelModel):
    event_id: int = Field(..., examples=[1])
    title: str = Field(..., min_length=1, examples=["Publish speaker lineup"])
    description: Optional[str] = None
    type: EntryType = Field(..., examples=["post"])
    date: dt.date = Field(..., examples=["2025-08-20"])
    time: Optional[str] = Field(None, examples=["09:30"])
    post_id: Optional[int] = Field(None, examples=[4])
    color: Optional[str] = Field(None, examples=["#2874f0"])


class CalendarEntryCreate(CalendarEntryBase):
    """Schema for creating a calendar entry."""
    pass


class CalendarEntryUpdate(CamelModel):
    event_id: Optional[int] = None
    title: Optional[str] = None
    description: Optional[str] = None
    type: Optional[EntryType] = None
    date: Optional[dt.date] = None
    time: Optional[str] = None
    post_id: Optional[int] = None
    color: Optional[str] = None


class CalendarEntryRead(CalendarEntryBase):
    id: int
    created_at: dt.datetime
