"""Pydantic models for shopping‑assistant chat messages."""

from datetime import datetime

from pydantic import Field

from .base import CamelModel


class ChatMessageBase(CamelModel):
    user_id: int = Field(..., examples=[1])
    is_bot: bool = Field(False, examples=[False])
    message: str = Field(..., min_length=1, examples=["Do you ship to Canada?"])


class ChatMessageCreate(ChatMessageBase):
    """Schema for a message posted by a user."""
    pass


class ChatMessageRead(ChatMessageBase):
    """A stored chat message.

    ``timestamp`` is assigned by the store and orders a conversation.
    """

    id: int
    timestamp: datetime
